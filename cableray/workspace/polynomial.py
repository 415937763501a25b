"""Polynomial fitting along a ray.

Determinants of the scaled Jacobian minors are polynomials in the free
variable (translational coordinates) or, after the Weierstrass substitution
``t = tan(theta / 2)``, polynomials in ``t`` (rotational coordinates). With
``degree + 1`` samples the least-squares fit is an interpolation, so the
design matrix is a square Vandermonde matrix inverted once per ray.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence, Tuple

import numpy as np

from ..logging_utils import apply_debug_logging
from ..types import JointType

logger = logging.getLogger(__name__)


def degree_for(joint_type: JointType, num_dofs: int) -> int:
    """Return the polynomial degree used for a free variable of ``joint_type``."""

    if joint_type is JointType.ROTATION:
        return 2 * num_dofs
    return num_dofs


def build_fit_matrix(abscissas: Sequence[float], degree: int) -> np.ndarray:
    """Return the design matrix with rows ``[x**degree, ..., x**0]``."""

    x = np.asarray(abscissas, dtype=float).reshape(-1)
    if x.size != degree + 1:
        raise ValueError(f"a degree {degree} fit needs {degree + 1} abscissas, got {x.size}")
    return np.vander(x, degree + 1)


def basis_vector(x: float, degree: int) -> np.ndarray:
    return float(x) ** np.arange(degree, -1, -1, dtype=float)


class PolynomialBasis:
    """Sample grid, fit matrix and evaluation basis for one ray."""

    def __init__(self, joint_type: JointType, value_range: Tuple[float, float], degree: int) -> None:
        self.joint_type = joint_type
        self.lower, self.upper = float(value_range[0]), float(value_range[1])
        self.degree = int(degree)
        self.sample_points = np.linspace(self.lower, self.upper, self.degree + 1)
        self.abscissas = self.substitute(self.sample_points)
        self._fit_matrix: Optional[np.ndarray] = None
        self._inverse: Optional[np.ndarray] = None

    @property
    def is_rotational(self) -> bool:
        return self.joint_type is JointType.ROTATION

    def substitute(self, values):
        values = np.asarray(values, dtype=float)
        if self.is_rotational:
            return np.tan(0.5 * values)
        return values

    def unsubstitute(self, values):
        values = np.asarray(values, dtype=float)
        if self.is_rotational:
            return 2.0 * np.arctan(values)
        return values

    def midpoint(self, lo: float, hi: float) -> float:
        """Return the fitting abscissa at the middle of ``[lo, hi]``."""

        if self.is_rotational:
            return float(np.tan(0.25 * (lo + hi)))
        return 0.5 * (lo + hi)

    def fit_matrix(self) -> np.ndarray:
        if self._fit_matrix is None:
            self._fit_matrix = build_fit_matrix(self.abscissas, self.degree)
        return self._fit_matrix

    def inverse(self) -> np.ndarray:
        if self._inverse is None:
            self._inverse = np.linalg.inv(self.fit_matrix())
        return self._inverse

    def basis_at(self, x: float) -> np.ndarray:
        return basis_vector(x, self.degree)

    def fit(self, series) -> np.ndarray:
        """Return coefficients (highest power first) interpolating ``series`` at the samples."""

        return self.inverse() @ np.asarray(series, dtype=float)

    def evaluate(self, coefficients, x: float) -> float:
        return float(np.asarray(coefficients, dtype=float) @ self.basis_at(x))

    def __repr__(self) -> str:
        return (
            f"PolynomialBasis(joint_type={self.joint_type.value}, "
            f"range=({self.lower:.6g}, {self.upper:.6g}), degree={self.degree})"
        )


apply_debug_logging(globals(), logger=logger, skip={"basis_vector", "PolynomialBasis.basis_at"})
