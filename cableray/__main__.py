import argparse
import json
import logging
import sys
from typing import Optional, Sequence

from cableray import WrenchClosureConfig, WrenchClosureRay, load_problem
from cableray.config import DEFAULT_TOLERANCE
from cableray.model import JacobianMode
from cableray.validate import RayValidationError

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Evaluate the wrench-closure workspace along a ray")
    parser.add_argument("path", help="Path to a JSON document with 'robot' and 'ray' entries")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    parser.add_argument(
        "--min-percentage",
        type=float,
        default=0.0,
        help="Minimum interval length reported, as a percentage of the ray (default: 0)",
    )
    parser.add_argument(
        "--tolerance",
        type=float,
        default=DEFAULT_TOLERANCE,
        help=f"Numerical tolerance (default: {DEFAULT_TOLERANCE:g})",
    )
    parser.add_argument(
        "--jacobian-mode",
        choices=[JacobianMode.DEFAULT.value, JacobianMode.NUMERIC.value],
        default=JacobianMode.DEFAULT.value,
        help="Closed-form or finite-difference cable Jacobian",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as a JSON document",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    logger.info("Loading robot and ray from %s", args.path)
    try:
        model, ray = load_problem(args.path, args.jacobian_mode)
        config = WrenchClosureConfig(min_ray_percentage=args.min_percentage, tolerance=args.tolerance)
        intervals = WrenchClosureRay(model, config).evaluate(model, ray)
    except RayValidationError as exc:
        logger.error("Invalid ray: %s", exc)
        raise SystemExit(2)
    except ValueError as exc:
        logger.error("Invalid input: %s", exc)
        raise SystemExit(1)

    coverage = sum(ray.percentage(interval) for interval in intervals)
    if args.json:
        payload = {
            "free_variable_index": ray.free_variable_index,
            "free_variable_range": list(ray.free_variable_range),
            "intervals": [list(interval) for interval in intervals],
            "coverage_percentage": coverage,
        }
        print(json.dumps(payload, indent=2))
        return

    print(f"Ray: q[{ray.free_variable_index}] in [{ray.lower:.6f}, {ray.upper:.6f}]")
    print("Wrench-closure intervals:")
    if intervals:
        for lo, hi in intervals:
            print(f"  [{lo:.6f}, {hi:.6f}]")
    else:
        print("  (none)")
    print(f"Coverage: {coverage:.2f}%")


if __name__ == "__main__":
    main(sys.argv[1:])
