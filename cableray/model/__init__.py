"""Cable robot models providing the cable Jacobian and cable lengths."""

from .base import CableRobotModel, JacobianFunc, JacobianMode, ModelUpdateError
from .point_mass import PointMassRobot, PolarPointMassRobot
from .rigid_body import PlanarBodyRobot, rotation_2d

__all__ = [
    "CableRobotModel",
    "JacobianFunc",
    "JacobianMode",
    "ModelUpdateError",
    "PlanarBodyRobot",
    "PointMassRobot",
    "PolarPointMassRobot",
    "rotation_2d",
]
