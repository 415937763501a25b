import numpy as np
import pytest

from cableray.workspace.intervals import IntervalSet, filter_by_percentage, merge_pair, union_interval

TOL = 1e-8


@pytest.mark.parametrize(
    'existing, new, expected',
    [
        ((1.0, 2.0), (0.5, 2.5), (0.5, 2.5)),
        ((1.0, 2.0), (1.5, 3.0), (1.0, 3.0)),
        ((1.0, 2.0), (0.0, 1.5), (0.0, 2.0)),
        ((1.0, 2.0), (1.2, 1.8), (1.0, 2.0)),
        ((1.0, 2.0), (2.0 + 0.5 * TOL, 3.0), (1.0, 3.0)),
        ((1.0, 2.0), (3.0, 4.0), None),
        ((1.0, 2.0), (0.0, 1.0 - 1e-6), None),
    ],
)
def test_merge_pair_relationships(existing, new, expected):
    assert merge_pair(existing, new, TOL) == expected


def test_adding_contained_interval_is_idempotent():
    intervals = IntervalSet(TOL, [(0.0, 1.0)])

    intervals.add((0.0, 1.0))
    intervals.add((0.2, 0.8))

    assert intervals.intervals == [(0.0, 1.0)]


@pytest.mark.parametrize('order', [((0.0, 1.0), (1.0, 2.0)), ((1.0, 2.0), (0.0, 1.0))])
def test_touching_intervals_merge_in_either_order(order):
    intervals = IntervalSet(TOL)
    for interval in order:
        intervals.add(interval)

    assert intervals.intervals == [(0.0, 2.0)]


def test_gap_larger_than_tolerance_keeps_intervals_apart():
    intervals = IntervalSet(TOL, [(0.0, 1.0), (1.0 + 1e-6, 2.0)])

    assert len(intervals) == 2


def test_insertion_cascades_through_a_chain():
    merged = union_interval([(0.0, 1.0), (2.0, 3.0), (4.0, 5.0)], (0.5, 4.5), TOL)

    assert merged == [(0.0, 5.0)]


def test_intervals_are_kept_sorted():
    intervals = IntervalSet(TOL)
    intervals.add((4.0, 5.0))
    intervals.add((0.0, 1.0))
    intervals.add((2.0, 3.0))

    assert list(intervals) == [(0.0, 1.0), (2.0, 3.0), (4.0, 5.0)]


def test_reversed_interval_is_rejected():
    with pytest.raises(ValueError) as exc:
        IntervalSet(TOL).add((1.0, 0.0))

    assert 'reversed' in str(exc.value)


def test_random_insertions_yield_separated_cover():
    rng = np.random.default_rng(7)
    intervals = IntervalSet(TOL)
    inserted = []
    for _ in range(60):
        lo = float(rng.uniform(0.0, 10.0))
        interval = (lo, lo + float(rng.uniform(0.0, 0.4)))
        inserted.append(interval)
        intervals.add(interval)

    result = intervals.intervals
    assert result == sorted(result)
    for (_, prev_hi), (next_lo, _) in zip(result, result[1:]):
        assert next_lo - prev_hi > TOL
    for lo, hi in inserted:
        assert any(a - TOL <= lo and hi <= b + TOL for a, b in result)


def test_covers_checks_first_interval_against_range():
    assert IntervalSet(TOL, [(0.0, 1.0)]).covers((0.0, 1.0))
    assert not IntervalSet(TOL, [(0.0, 0.9)]).covers((0.0, 1.0))
    assert not IntervalSet(TOL).covers((0.0, 1.0))


@pytest.mark.parametrize('delta, kept', [(-1e-6, False), (1e-6, True)])
def test_percentage_threshold(delta, kept):
    result = filter_by_percentage([(2.0, 3.0 + delta)], (0.0, 10.0), 10.0)

    assert (result == [(2.0, 3.0 + delta)]) is kept


def test_percentage_filter_keeps_order():
    result = filter_by_percentage([(0.0, 0.5), (1.0, 1.05), (2.0, 4.0)], (0.0, 10.0), 1.0)

    assert result == [(0.0, 0.5), (2.0, 4.0)]
