"""Merging of feasible sub-intervals."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from ..types import Interval, IntervalList

logger = logging.getLogger(__name__)


def merge_pair(existing: Interval, new: Interval, tolerance: float) -> Optional[Interval]:
    """Return the merge of ``new`` into ``existing``, or ``None`` when they are apart.

    Boundaries closer than ``tolerance`` count as touching. When ``new``
    covers ``existing`` its bounds win; when it lies inside ``existing`` the
    existing bounds are kept.
    """

    ex_lo, ex_hi = existing
    lo, hi = new
    if lo - ex_lo <= tolerance and ex_hi - hi <= tolerance:
        return (lo, hi)
    if lo - ex_hi <= tolerance and hi - ex_hi > tolerance:
        return (ex_lo, hi)
    if ex_lo - hi <= tolerance and ex_lo - lo > tolerance:
        return (lo, ex_hi)
    if hi - ex_hi <= tolerance and ex_lo - lo <= tolerance:
        return (ex_lo, ex_hi)
    return None


def union_interval(intervals: Sequence[Interval], interval: Interval, tolerance: float) -> IntervalList:
    """Return ``intervals`` with ``interval`` merged in, sorted ascending.

    Merging repeats until no pair touches, so one insertion can absorb a
    chain of intervals.
    """

    remaining = [(float(a), float(b)) for a, b in intervals]
    pending = (float(interval[0]), float(interval[1]))
    merged = True
    while merged:
        merged = False
        for index, existing in enumerate(remaining):
            result = merge_pair(existing, pending, tolerance)
            if result is not None:
                del remaining[index]
                pending = result
                merged = True
                break
    remaining.append(pending)
    remaining.sort()
    return remaining


class IntervalSet:
    """Sorted, pairwise separated collection of intervals."""

    def __init__(self, tolerance: float, intervals: Iterable[Interval] = ()) -> None:
        self.tolerance = float(tolerance)
        self._intervals: IntervalList = []
        for interval in intervals:
            self.add(interval)

    def add(self, interval: Interval) -> None:
        lo, hi = interval
        if hi < lo:
            raise ValueError(f"interval bounds are reversed: ({lo}, {hi})")
        self._intervals = union_interval(self._intervals, (lo, hi), self.tolerance)
        logger.debug("Added interval (%.9g, %.9g); set now %s", lo, hi, self._intervals)

    @property
    def intervals(self) -> IntervalList:
        return list(self._intervals)

    def covers(self, value_range: Tuple[float, float]) -> bool:
        """Return ``True`` when the first interval spans ``value_range`` within tolerance."""

        if not self._intervals:
            return False
        lo, hi = self._intervals[0]
        return abs(lo - value_range[0]) < self.tolerance and abs(hi - value_range[1]) < self.tolerance

    def __len__(self) -> int:
        return len(self._intervals)

    def __iter__(self) -> Iterator[Interval]:
        return iter(list(self._intervals))

    def __repr__(self) -> str:
        return f"IntervalSet({self._intervals!r})"


def filter_by_percentage(
    intervals: Iterable[Interval], value_range: Tuple[float, float], min_percentage: float
) -> IntervalList:
    """Drop intervals shorter than ``min_percentage`` percent of ``value_range``."""

    span = value_range[1] - value_range[0]
    kept: List[Interval] = []
    for lo, hi in intervals:
        percentage = 100.0 * (hi - lo) / span
        if percentage < min_percentage:
            logger.debug("Dropping interval (%.9g, %.9g): %.4g%% < %.4g%%", lo, hi, percentage, min_percentage)
            continue
        kept.append((lo, hi))
    return kept


__all__ = ["IntervalSet", "filter_by_percentage", "merge_pair", "union_interval"]
