"""Ray-based workspace analysis."""

from .conditions import RayCondition, WrenchClosureRay, evaluate_ray
from .intervals import IntervalSet, filter_by_percentage, merge_pair, union_interval
from .polynomial import PolynomialBasis, basis_vector, build_fit_matrix, degree_for
from .roots import PolynomialRootResolver
from .sampler import (
    JacobianSampler,
    cable_combinations,
    minor_combinations,
    redundant_subsets,
    secondary_count,
)
from .sign import SignConsistencyEvaluator

__all__ = [
    "IntervalSet",
    "JacobianSampler",
    "PolynomialBasis",
    "PolynomialRootResolver",
    "RayCondition",
    "SignConsistencyEvaluator",
    "WrenchClosureRay",
    "basis_vector",
    "build_fit_matrix",
    "cable_combinations",
    "degree_for",
    "evaluate_ray",
    "filter_by_percentage",
    "merge_pair",
    "minor_combinations",
    "redundant_subsets",
    "secondary_count",
    "union_interval",
]
