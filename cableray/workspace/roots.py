from __future__ import annotations

import logging
from typing import Iterable, Optional, Tuple

import numpy as np

from ..logging_utils import apply_debug_logging
from .polynomial import PolynomialBasis

logger = logging.getLogger(__name__)


class PolynomialRootResolver:
    """Fits sampled determinants and extracts their real roots inside the ray range.

    A polynomial whose coefficients are all below ``tolerance`` or contain
    NaN/Inf is degenerate: ``roots`` returns ``None`` for it and callers treat
    it as contributing nothing.
    """

    def __init__(self, basis: PolynomialBasis, value_range: Tuple[float, float], tolerance: float) -> None:
        self.basis = basis
        self.lower, self.upper = float(value_range[0]), float(value_range[1])
        self.tolerance = float(tolerance)

    def fit(self, series, sign: float = 1.0) -> np.ndarray:
        with np.errstate(invalid="ignore", over="ignore"):
            return sign * self.basis.fit(series)

    def trim(self, coefficients) -> Optional[np.ndarray]:
        """Drop the leading run of near-zero coefficients."""

        coefficients = np.asarray(coefficients, dtype=float)
        if not np.all(np.isfinite(coefficients)):
            return None
        significant = np.flatnonzero(np.abs(coefficients) > self.tolerance)
        if significant.size == 0:
            return None
        return coefficients[significant[0]:]

    def roots(self, coefficients) -> Optional[np.ndarray]:
        """Return the sorted real roots lying in the ray range, in free-variable units."""

        trimmed = self.trim(coefficients)
        if trimmed is None:
            return None
        if trimmed.size == 1:
            return np.empty(0)
        candidates = np.roots(trimmed)
        real = candidates[np.abs(candidates.imag) <= self.tolerance].real
        values = self.basis.unsubstitute(real)
        values = values[(values >= self.lower) & (values <= self.upper)]
        return np.sort(values)

    def partition(self, family: Iterable[np.ndarray]) -> np.ndarray:
        """Return the range endpoints and every root of ``family``, sorted."""

        boundaries = [np.array([self.lower, self.upper])]
        for coefficients in family:
            found = self.roots(coefficients)
            if found is None:
                logger.debug("Skipping degenerate polynomial %s", coefficients)
                continue
            boundaries.append(found)
        return np.sort(np.concatenate(boundaries))


apply_debug_logging(globals(), logger=logger)
