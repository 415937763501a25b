"""Sampling of Jacobian minor determinants along a ray."""

from __future__ import annotations

import itertools
import logging
from typing import List, Sequence, Tuple

import numpy as np
from scipy.special import comb

from ..logging_utils import apply_debug_logging
from ..types import Ray
from .polynomial import PolynomialBasis

logger = logging.getLogger(__name__)


def minor_combinations(num_cables: int, num_dofs: int) -> np.ndarray:
    """Return one row per cable holding every other cable index.

    Only meaningful for a single degree of redundancy, where each row selects
    a square ``num_dofs`` minor.
    """

    if num_cables - 1 != num_dofs:
        raise ValueError(
            f"cable-removal minors need num_cables == num_dofs + 1 (got {num_cables}, {num_dofs})"
        )
    table = np.empty((num_cables, num_dofs), dtype=int)
    cables = np.arange(num_cables)
    for removed in range(num_cables):
        table[removed] = np.delete(cables, removed)
    return table


def cable_combinations(num_cables: int, num_dofs: int) -> np.ndarray:
    """Return all ``num_dofs``-subsets of the cables in lexicographic order."""

    count = int(comb(num_cables, num_dofs, exact=True))
    table = np.empty((count, num_dofs), dtype=int)
    for row, subset in enumerate(itertools.combinations(range(num_cables), num_dofs)):
        table[row] = subset
    return table


def redundant_subsets(remaining: Sequence[int]) -> List[Tuple[int, ...]]:
    """Return every non-empty subset of ``remaining``, by size then lexicographically."""

    remaining = tuple(int(c) for c in remaining)
    subsets: List[Tuple[int, ...]] = []
    for size in range(1, len(remaining) + 1):
        subsets.extend(itertools.combinations(remaining, size))
    return subsets


def secondary_count(degree_of_redundancy: int) -> int:
    return 2 ** degree_of_redundancy - 1


class JacobianSampler:
    """Drives the model across the sample grid of a ray.

    The scaled matrix ``A = -L^T diag(l)`` clears the cable-length
    denominators of ``L``. For a rotational free variable it is further
    multiplied by ``1 + tan(q/2)^2`` to clear the substitution denominator.
    """

    def __init__(self, model, ray: Ray, basis: PolynomialBasis) -> None:
        self.model = model
        self.ray = ray
        self.basis = basis
        self.num_dofs = int(model.num_dofs)
        self.num_cables = int(model.num_cables)
        self._zero = np.zeros(self.num_dofs)

    @property
    def num_samples(self) -> int:
        return self.basis.degree + 1

    def coordinates(self, value: float) -> np.ndarray:
        return np.asarray(self.ray.coordinates(value), dtype=float)

    def scaled_jacobian(self, value: float) -> np.ndarray:
        self.model.update(self.coordinates(value), self._zero, self._zero, self._zero)
        jacobian = np.asarray(self.model.jacobian(), dtype=float)
        lengths = np.asarray(self.model.cable_lengths(), dtype=float).reshape(-1)
        scaled = -jacobian.T * lengths[None, :]
        if self.basis.is_rotational:
            scaled = (1.0 + np.tan(0.5 * value) ** 2) * scaled
        return scaled

    def sample_minors(self, combinations: np.ndarray) -> np.ndarray:
        """Return ``(num_samples, len(combinations))`` minor determinants."""

        samples = np.empty((self.num_samples, len(combinations)))
        with np.errstate(invalid="ignore", over="ignore"):
            for index, value in enumerate(self.basis.sample_points):
                scaled = self.scaled_jacobian(value)
                for column, cables in enumerate(combinations):
                    samples[index, column] = np.linalg.det(scaled[:, cables])
        return samples

    def sample_augmented(self, combinations: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
        """Sample minors and their augmented drop-one-column families.

        Each combination is augmented by a column summing a non-empty subset
        of the cables it leaves out. Returns ``determinants`` of shape
        ``(num_samples, n_comb)`` and ``null`` of shape
        ``(num_samples, n_comb, n_secondary, num_dofs + 1)`` where the last
        index is the dropped column.
        """

        n = self.num_dofs
        n_comb = len(combinations)
        cables = np.arange(self.num_cables)
        subsets = [
            redundant_subsets(np.setdiff1d(cables, combination)) for combination in combinations
        ]
        n_secondary = secondary_count(self.num_cables - n)
        determinants = np.empty((self.num_samples, n_comb))
        null = np.empty((self.num_samples, n_comb, n_secondary, n + 1))
        with np.errstate(invalid="ignore", over="ignore"):
            for index, value in enumerate(self.basis.sample_points):
                scaled = self.scaled_jacobian(value)
                for c_index, combination in enumerate(combinations):
                    square = scaled[:, combination]
                    determinants[index, c_index] = np.linalg.det(square)
                    augmented = np.empty((n, n + 1))
                    augmented[:, :n] = square
                    for s_index, subset in enumerate(subsets[c_index]):
                        augmented[:, n] = scaled[:, list(subset)].sum(axis=1)
                        for dropped in range(n + 1):
                            null[index, c_index, s_index, dropped] = np.linalg.det(
                                np.delete(augmented, dropped, axis=1)
                            )
        return determinants, null


apply_debug_logging(globals(), logger=logger, skip={"JacobianSampler.coordinates"})
