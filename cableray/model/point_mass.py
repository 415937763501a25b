from __future__ import annotations

from typing import Sequence

import numpy as np

from ..types import JointType
from .base import CableRobotModel


class PointMassRobot(CableRobotModel):
    """Point mass in 2D or 3D pulled by cables; coordinates are its Cartesian position."""

    def __init__(self, anchors: Sequence[Sequence[float]], **kwargs) -> None:
        anchors_arr = np.atleast_2d(np.asarray(anchors, dtype=float))
        dim = anchors_arr.shape[1]
        if dim not in (2, 3):
            raise ValueError(f"point mass anchors must be 2D or 3D (got dimension {dim})")
        super().__init__(anchors_arr, [JointType.TRANSLATION] * dim, **kwargs)

    def attachment_points(self, q: np.ndarray) -> np.ndarray:
        return np.tile(np.asarray(q, dtype=float), (self.num_cables, 1))

    def attachment_jacobians(self, q: np.ndarray) -> np.ndarray:
        return np.tile(np.eye(self.num_dofs), (self.num_cables, 1, 1))


class PolarPointMassRobot(CableRobotModel):
    """Planar point mass located by polar coordinates ``(r, theta)``."""

    def __init__(self, anchors: Sequence[Sequence[float]], **kwargs) -> None:
        anchors_arr = np.atleast_2d(np.asarray(anchors, dtype=float))
        if anchors_arr.shape[1] != 2:
            raise ValueError("polar point mass anchors must be planar")
        super().__init__(anchors_arr, [JointType.TRANSLATION, JointType.ROTATION], **kwargs)

    def attachment_points(self, q: np.ndarray) -> np.ndarray:
        r, theta = float(q[0]), float(q[1])
        point = np.array([r * np.cos(theta), r * np.sin(theta)])
        return np.tile(point, (self.num_cables, 1))

    def attachment_jacobians(self, q: np.ndarray) -> np.ndarray:
        r, theta = float(q[0]), float(q[1])
        c, s = np.cos(theta), np.sin(theta)
        jac = np.array([[c, -r * s], [s, r * c]])
        return np.tile(jac, (self.num_cables, 1, 1))
