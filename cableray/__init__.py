from .config import DEFAULT_TOLERANCE, WrenchClosureConfig, get_default_config, set_default_config
from .model import (
    CableRobotModel,
    JacobianMode,
    ModelUpdateError,
    PlanarBodyRobot,
    PointMassRobot,
    PolarPointMassRobot,
)
from .robots import build_model, build_ray, load_problem
from .types import Interval, IntervalList, JointType, Ray
from .validate import RayValidationError, validate_ray
from .workspace import IntervalSet, RayCondition, WrenchClosureRay, evaluate_ray

__all__ = [
    'DEFAULT_TOLERANCE',
    'WrenchClosureConfig',
    'get_default_config',
    'set_default_config',
    'CableRobotModel',
    'JacobianMode',
    'ModelUpdateError',
    'PlanarBodyRobot',
    'PointMassRobot',
    'PolarPointMassRobot',
    'build_model',
    'build_ray',
    'load_problem',
    'Interval',
    'IntervalList',
    'JointType',
    'Ray',
    'RayValidationError',
    'validate_ray',
    'IntervalSet',
    'RayCondition',
    'WrenchClosureRay',
    'evaluate_ray',
]
