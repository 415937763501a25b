from __future__ import annotations

from typing import Sequence

import numpy as np

from ..types import JointType
from .base import CableRobotModel


def rotation_2d(theta: float) -> np.ndarray:
    c, s = np.cos(theta), np.sin(theta)
    return np.array([[c, -s], [s, c]])


class PlanarBodyRobot(CableRobotModel):
    """Planar rigid body with pose ``(x, y, theta)``.

    ``attachments`` are the cable attachment points expressed in the body
    frame, one per anchor.
    """

    def __init__(
        self,
        anchors: Sequence[Sequence[float]],
        attachments: Sequence[Sequence[float]],
        **kwargs,
    ) -> None:
        anchors_arr = np.atleast_2d(np.asarray(anchors, dtype=float))
        attachments_arr = np.atleast_2d(np.asarray(attachments, dtype=float))
        if anchors_arr.shape[1] != 2 or attachments_arr.shape != anchors_arr.shape:
            raise ValueError(
                "planar body needs one planar attachment per planar anchor "
                f"(anchors {anchors_arr.shape}, attachments {attachments_arr.shape})"
            )
        self.attachments = attachments_arr
        super().__init__(
            anchors_arr,
            [JointType.TRANSLATION, JointType.TRANSLATION, JointType.ROTATION],
            **kwargs,
        )

    def attachment_points(self, q: np.ndarray) -> np.ndarray:
        position = np.asarray(q[:2], dtype=float)
        return position + self.attachments @ rotation_2d(float(q[2])).T

    def attachment_jacobians(self, q: np.ndarray) -> np.ndarray:
        theta = float(q[2])
        c, s = np.cos(theta), np.sin(theta)
        d_rotation = np.array([[-s, -c], [c, -s]])
        jac = np.zeros((self.num_cables, 2, 3))
        jac[:, 0, 0] = 1.0
        jac[:, 1, 1] = 1.0
        jac[:, :, 2] = self.attachments @ d_rotation.T
        return jac
