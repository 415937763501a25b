from __future__ import annotations

import logging

import numpy as np

from ..logging_utils import apply_debug_logging
from .polynomial import PolynomialBasis

logger = logging.getLogger(__name__)


class SignConsistencyEvaluator:
    """Midpoint sign test for a family of fitted polynomials.

    An interval is accepted when every polynomial is strictly positive, or
    every polynomial strictly negative, at its midpoint.
    """

    def __init__(self, basis: PolynomialBasis, tolerance: float) -> None:
        self.basis = basis
        self.tolerance = float(tolerance)

    def values(self, family, lo: float, hi: float) -> np.ndarray:
        family = np.atleast_2d(np.asarray(family, dtype=float))
        with np.errstate(invalid="ignore", over="ignore"):
            return family @ self.basis.basis_at(self.basis.midpoint(lo, hi))

    def is_consistent(self, family, lo: float, hi: float) -> bool:
        values = self.values(family, lo, hi)
        return bool(np.all(values > self.tolerance) or np.all(values < -self.tolerance))


apply_debug_logging(globals(), logger=logger)
