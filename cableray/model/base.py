"""Kinematic model interface consumed by the workspace ray conditions."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Callable, Dict, Optional, Sequence, Tuple

import numpy as np
from scipy.optimize import approx_fprime

from ..types import JointType

logger = logging.getLogger(__name__)

JacobianFunc = Callable[[np.ndarray], np.ndarray]


class JacobianMode(Enum):
    """How a model produces its cable Jacobian ``L = dl/dq``."""

    DEFAULT = "default"
    NUMERIC = "numeric"
    CUSTOM = "custom"


class ModelUpdateError(ValueError):
    """Raised when a model is updated with wrongly sized state vectors."""


class CableRobotModel(ABC):
    """Stateful cable robot model.

    ``update`` overwrites the internal state; ``jacobian`` and
    ``cable_lengths`` report the values for the most recent update. A model
    instance must not be shared between concurrent ray evaluations.

    Subclasses describe where each cable attaches to the moving body
    (``attachment_points``) and how that point moves with the coordinates
    (``attachment_jacobians``). Cable ``i`` runs from ``anchors[i]`` to the
    attachment point, so ``l_i = |b_i(q) - a_i|`` and row ``i`` of ``L`` is
    ``u_i^T db_i/dq`` with ``u_i`` the unit vector along the cable.
    """

    def __init__(
        self,
        anchors: Sequence[Sequence[float]],
        joint_types: Sequence[JointType],
        *,
        jacobian_mode: JacobianMode = JacobianMode.DEFAULT,
        jacobian_fn: Optional[JacobianFunc] = None,
        fd_step: float = 1e-7,
    ) -> None:
        self.anchors = np.atleast_2d(np.asarray(anchors, dtype=float))
        self.joint_types: Tuple[JointType, ...] = tuple(JointType.parse(j) for j in joint_types)
        if self.anchors.shape[0] < 1:
            raise ValueError("a cable robot needs at least one cable")
        self.jacobian_mode = JacobianMode(jacobian_mode)
        if self.jacobian_mode is JacobianMode.CUSTOM and jacobian_fn is None:
            raise ValueError("jacobian_fn must be supplied with JacobianMode.CUSTOM")
        self._jacobian_fn = jacobian_fn
        self._fd_step = float(fd_step)
        strategies: Dict[JacobianMode, JacobianFunc] = {
            JacobianMode.DEFAULT: self._analytic_jacobian,
            JacobianMode.NUMERIC: self._numeric_jacobian,
            JacobianMode.CUSTOM: self._custom_jacobian,
        }
        self._jacobian_impl = strategies[self.jacobian_mode]

        n = self.num_dofs
        self.q = np.zeros(n)
        self.q_dot = np.zeros(n)
        self.q_ddot = np.zeros(n)
        self.w_ext = np.zeros(n)
        self._lengths: Optional[np.ndarray] = None
        self._L: Optional[np.ndarray] = None

    @property
    def num_dofs(self) -> int:
        return len(self.joint_types)

    @property
    def num_cables(self) -> int:
        return int(self.anchors.shape[0])

    @property
    def degree_of_redundancy(self) -> int:
        return self.num_cables - self.num_dofs

    @abstractmethod
    def attachment_points(self, q: np.ndarray) -> np.ndarray:
        """Return the ``(num_cables, dim)`` world positions of the cable attachments."""

    @abstractmethod
    def attachment_jacobians(self, q: np.ndarray) -> np.ndarray:
        """Return ``(num_cables, dim, num_dofs)`` derivatives of the attachments w.r.t. ``q``."""

    def cable_vectors(self, q: np.ndarray) -> np.ndarray:
        return self.attachment_points(q) - self.anchors

    def lengths_at(self, q: np.ndarray) -> np.ndarray:
        return np.linalg.norm(self.cable_vectors(np.asarray(q, dtype=float)), axis=1)

    def update(self, q, q_dot, q_ddot, w_ext) -> None:
        vectors = [np.asarray(v, dtype=float).reshape(-1) for v in (q, q_dot, q_ddot, w_ext)]
        n = self.num_dofs
        if any(v.size != n for v in vectors):
            raise ModelUpdateError(
                f"update expects four vectors of length {n}, got sizes {[v.size for v in vectors]}"
            )
        self.q, self.q_dot, self.q_ddot, self.w_ext = vectors
        self._lengths = self.lengths_at(self.q)
        self._L = self._jacobian_impl(self.q)

    def jacobian(self) -> np.ndarray:
        if self._L is None:
            raise RuntimeError("model has not been updated")
        return self._L.copy()

    def cable_lengths(self) -> np.ndarray:
        if self._lengths is None:
            raise RuntimeError("model has not been updated")
        return self._lengths.copy()

    @property
    def L(self) -> np.ndarray:
        return self.jacobian()

    def _analytic_jacobian(self, q: np.ndarray) -> np.ndarray:
        vectors = self.cable_vectors(q)
        lengths = np.linalg.norm(vectors, axis=1)
        # A cable of zero length has no direction; NaN rows are left for the caller.
        with np.errstate(divide="ignore", invalid="ignore"):
            units = vectors / lengths[:, None]
        return np.einsum("id,idn->in", units, self.attachment_jacobians(q))

    def _numeric_jacobian(self, q: np.ndarray) -> np.ndarray:
        jac = approx_fprime(q, self.lengths_at, self._fd_step)
        return np.asarray(jac, dtype=float).reshape(self.num_cables, self.num_dofs)

    def _custom_jacobian(self, q: np.ndarray) -> np.ndarray:
        assert self._jacobian_fn is not None
        jac = np.asarray(self._jacobian_fn(q.copy()), dtype=float)
        if jac.size != self.num_cables * self.num_dofs:
            raise ModelUpdateError(
                f"custom Jacobian returned {jac.size} entries, expected "
                f"{self.num_cables}x{self.num_dofs}"
            )
        return jac.reshape(self.num_cables, self.num_dofs)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(num_dofs={self.num_dofs}, num_cables={self.num_cables}, "
            f"jacobian_mode={self.jacobian_mode.value})"
        )


__all__ = ["CableRobotModel", "JacobianFunc", "JacobianMode", "ModelUpdateError"]
