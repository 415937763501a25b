import math

from .types import JointType, Ray, is_finite_sequence


class RayValidationError(ValueError):
    pass


def validate_ray(ray: Ray, model) -> None:
    """Check that ``ray`` can be evaluated against ``model`` before any sampling."""

    num_dofs = int(model.num_dofs)
    index = ray.free_variable_index
    if not 0 <= index < num_dofs:
        raise RayValidationError(
            f'free variable index {index} is out of bounds for a model with {num_dofs} dofs'
        )
    if len(ray.fixed_variables) != num_dofs - 1:
        raise RayValidationError(
            f'expected {num_dofs - 1} fixed variables, got {len(ray.fixed_variables)}'
        )
    if not is_finite_sequence(ray.fixed_variables):
        raise RayValidationError('fixed variables must be finite')
    lo, hi = ray.free_variable_range
    if not (math.isfinite(lo) and math.isfinite(hi)):
        raise RayValidationError(f'free variable range must be finite (got ({lo}, {hi}))')
    if not lo < hi:
        raise RayValidationError(f'free variable range must satisfy lo < hi (got ({lo}, {hi}))')
    joint_type = JointType.parse(model.joint_types[index])
    if joint_type is JointType.ROTATION and not (-math.pi < lo and hi < math.pi):
        raise RayValidationError(
            f'rotational free variable range must lie strictly inside (-pi, pi) (got ({lo}, {hi}))'
        )
