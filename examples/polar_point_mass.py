"""Example: wrench-closure angles of a planar point mass held by three cables."""

import math

from cableray import PolarPointMassRobot, Ray, WrenchClosureConfig, WrenchClosureRay

ANCHORS = [(0.5, -3.0), (0.5, 3.0), (4.0, 0.0)]


def main() -> None:
    robot = PolarPointMassRobot(ANCHORS)
    evaluator = WrenchClosureRay(robot, WrenchClosureConfig(min_ray_percentage=1.0))
    for radius in (0.8, 1.0, 1.5):
        ray = Ray(1, (-math.pi / 2, math.pi / 2), (radius,))
        intervals = evaluator.evaluate(robot, ray)
        rendered = ", ".join(f"[{math.degrees(lo):.2f}, {math.degrees(hi):.2f}] deg" for lo, hi in intervals)
        print(f"r = {radius:.2f}: {rendered or 'none'}")


if __name__ == "__main__":
    main()
