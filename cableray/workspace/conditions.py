"""Workspace conditions evaluated along a ray."""

from __future__ import annotations

import logging
from typing import List, Optional, Protocol, Tuple

import numpy as np

from ..config import DEFAULT_TOLERANCE, WrenchClosureConfig, get_default_config
from ..logging_utils import apply_debug_logging
from ..types import IntervalList, JointType, Ray
from ..validate import RayValidationError, validate_ray
from .intervals import IntervalSet, filter_by_percentage
from .polynomial import PolynomialBasis, degree_for
from .roots import PolynomialRootResolver
from .sampler import (
    JacobianSampler,
    cable_combinations,
    minor_combinations,
    secondary_count,
)
from .sign import SignConsistencyEvaluator

logger = logging.getLogger(__name__)


class RayCondition(Protocol):
    """A workspace condition reporting where along a ray it holds."""

    def evaluate(self, model, ray: Ray) -> IntervalList:
        ...


class _RayContext:
    """Per-call collaborators for one ray evaluation."""

    def __init__(self, model, ray: Ray, basis: PolynomialBasis, tolerance: float) -> None:
        self.ray = ray
        self.basis = basis
        self.sampler = JacobianSampler(model, ray, basis)
        self.resolver = PolynomialRootResolver(basis, ray.free_variable_range, tolerance)
        self.sign = SignConsistencyEvaluator(basis, tolerance)
        self.intervals = IntervalSet(tolerance)

    def accept_if_consistent(self, family: np.ndarray, lo: float, hi: float) -> None:
        if self.sign.is_consistent(family, lo, hi):
            self.intervals.add((lo, hi))

    def covers_range(self) -> bool:
        return self.intervals.covers(self.ray.free_variable_range)


class WrenchClosureRay:
    """Wrench-closure workspace condition.

    The robot is fully restrained along the returned intervals: a strictly
    positive set of cable forces balances any wrench. The evaluator fits
    polynomials to the minors of the cable Jacobian along the ray, splits
    the range at their real roots and certifies each piece with a midpoint
    sign test of a family of minors.
    """

    def __init__(self, model, config: Optional[WrenchClosureConfig] = None) -> None:
        config = config if config is not None else get_default_config()
        self.min_ray_percentage = config.min_ray_percentage
        self.tolerance = config.tolerance
        self.joint_types: Tuple[JointType, ...] = tuple(JointType.parse(j) for j in model.joint_types)
        self.number_dofs = int(model.num_dofs)
        self.number_cables = int(model.num_cables)
        self.degree_redundancy = self.number_cables - self.number_dofs
        if self.degree_redundancy < 1:
            raise ValueError(
                f"wrench closure needs more cables than dofs (got {self.number_cables} cables "
                f"for {self.number_dofs} dofs)"
            )

    @property
    def is_fully_restrained(self) -> bool:
        return self.degree_redundancy == 1

    def evaluate(self, model, ray: Ray) -> IntervalList:
        if int(model.num_dofs) != self.number_dofs or int(model.num_cables) != self.number_cables:
            raise RayValidationError(
                f"evaluator was built for {self.number_dofs} dofs and {self.number_cables} cables, "
                f"model has {model.num_dofs} dofs and {model.num_cables} cables"
            )
        validate_ray(ray, model)

        joint_type = self.joint_types[ray.free_variable_index]
        degree = degree_for(joint_type, self.number_dofs)
        basis = PolynomialBasis(joint_type, ray.free_variable_range, degree)
        context = _RayContext(model, ray, basis, self.tolerance)

        if self.is_fully_restrained:
            self._evaluate_fully_restrained(context)
        else:
            self._evaluate_redundantly_restrained(context)

        result = filter_by_percentage(context.intervals, ray.free_variable_range, self.min_ray_percentage)
        logger.info(
            "Wrench closure on ray q[%d] in (%.6g, %.6g): %s strategy, degree %d, %d interval(s)",
            ray.free_variable_index,
            ray.lower,
            ray.upper,
            "fully restrained" if self.is_fully_restrained else "redundantly restrained",
            degree,
            len(result),
        )
        return result

    def _evaluate_fully_restrained(self, context: _RayContext) -> None:
        combinations = minor_combinations(self.number_cables, self.number_dofs)
        samples = context.sampler.sample_minors(combinations)
        family = np.empty((len(combinations), context.basis.degree + 1))
        for index in range(len(combinations)):
            family[index] = context.resolver.fit(samples[:, index], sign=(-1.0) ** index)

        boundaries = context.resolver.partition(family)
        for lo, hi in zip(boundaries[:-1], boundaries[1:]):
            context.accept_if_consistent(family, float(lo), float(hi))
            if context.covers_range():
                break

    def _evaluate_redundantly_restrained(self, context: _RayContext) -> None:
        n = self.number_dofs
        combinations = cable_combinations(self.number_cables, n)
        n_secondary = secondary_count(self.degree_redundancy)
        determinants, null = context.sampler.sample_augmented(combinations)
        logger.debug(
            "Sampled %d combination(s) x %d augmented column(s)", len(combinations), n_secondary
        )

        determinant_roots: List[Optional[np.ndarray]] = [
            context.resolver.roots(context.resolver.fit(determinants[:, index]))
            for index in range(len(combinations))
        ]

        family = np.empty((n + 1, context.basis.degree + 1))
        for c_index in range(len(combinations)):
            own_roots = determinant_roots[c_index]
            if own_roots is None:
                logger.debug("Skipping combination %s: degenerate determinant", combinations[c_index])
                continue
            for s_index in range(n_secondary):
                for dropped in range(n + 1):
                    family[dropped] = context.resolver.fit(
                        null[:, c_index, s_index, dropped], sign=(-1.0) ** dropped
                    )
                # Guard roots pair the combination with the one sharing the secondary index.
                paired = determinant_roots[s_index] if s_index < len(combinations) else None
                guard = own_roots if paired is None else np.sort(np.concatenate([own_roots, paired]))

                boundaries = context.resolver.partition(family)
                for lo, hi in zip(boundaries[:-1], boundaries[1:]):
                    self._test_segment(context, family, float(lo), float(hi), guard)

            if context.covers_range():
                return
            # Unreachable here: this strategy only runs with more than one degree of redundancy.
            if (
                self.degree_redundancy == 1
                and len(context.intervals) > 0
                and context.ray.percentage(context.intervals.intervals[0]) > self.min_ray_percentage
            ):
                return

    def _test_segment(
        self, context: _RayContext, family: np.ndarray, lo: float, hi: float, guard: np.ndarray
    ) -> None:
        """Sign-test ``[lo, hi]`` in pieces that stay clear of interior guard roots."""

        start = lo
        for root in guard:
            if lo < root < hi:
                end = float(root) - self.tolerance
                if start <= end:
                    context.accept_if_consistent(family, start, end)
                start = float(root) + self.tolerance
        if start <= hi:
            context.accept_if_consistent(family, start, hi)

    def __repr__(self) -> str:
        return (
            f"WrenchClosureRay(num_dofs={self.number_dofs}, num_cables={self.number_cables}, "
            f"min_ray_percentage={self.min_ray_percentage}, tolerance={self.tolerance})"
        )


def evaluate_ray(
    model,
    ray: Ray,
    min_ray_percentage: float = 0.0,
    tolerance: float = DEFAULT_TOLERANCE,
) -> IntervalList:
    """Return the wrench-closure intervals of ``model`` along ``ray``."""

    config = WrenchClosureConfig(min_ray_percentage=min_ray_percentage, tolerance=tolerance)
    return WrenchClosureRay(model, config).evaluate(model, ray)


apply_debug_logging(globals(), logger=logger, skip={"RayCondition"})
