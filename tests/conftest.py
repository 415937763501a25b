import pytest

from cableray import PointMassRobot, PolarPointMassRobot

TRIANGLE_ANCHORS = [(0.0, 0.0), (4.0, 0.0), (2.0, 3.0)]
SQUARE_ANCHORS = [(-1.0, -1.0), (2.0, -1.0), (2.0, 2.0), (-1.0, 2.0)]
# Circle of radius 1 meets the triangle only across the edge x = 0.5, at theta = +-pi/3.
POLAR_ANCHORS = [(0.5, -3.0), (0.5, 3.0), (4.0, 0.0)]


@pytest.fixture
def triangle_robot():
    return PointMassRobot(TRIANGLE_ANCHORS)


@pytest.fixture
def square_robot():
    return PointMassRobot(SQUARE_ANCHORS)


@pytest.fixture
def polar_robot():
    return PolarPointMassRobot(POLAR_ANCHORS)


@pytest.fixture
def assert_well_formed():
    def check(intervals, value_range, min_percentage=0.0, tolerance=1e-8):
        lo, hi = value_range
        span = hi - lo
        for a, b in intervals:
            assert lo <= a <= b <= hi
            assert 100.0 * (b - a) / span >= min_percentage
        for (_, prev_hi), (next_lo, _) in zip(intervals, intervals[1:]):
            assert next_lo - prev_hi > tolerance

    return check
