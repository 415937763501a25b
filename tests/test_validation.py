import math

import pytest

from cableray import Ray, RayValidationError, WrenchClosureConfig, evaluate_ray, validate_ray
from cableray.config import get_default_config, set_default_config


def test_validate_accepts_well_formed_ray(triangle_robot):
    validate_ray(Ray(0, (0.0, 1.0), (1.0,)), triangle_robot)


@pytest.mark.parametrize(
    'ray, message_part',
    [
        (Ray(0, (1.0, 1.0), (1.0,)), 'lo < hi'),
        (Ray(0, (2.0, 1.0), (1.0,)), 'lo < hi'),
        (Ray(0, (0.0, 1.0), ()), 'expected 1 fixed variables'),
        (Ray(0, (0.0, 1.0), (1.0, 2.0)), 'expected 1 fixed variables'),
        (Ray(2, (0.0, 1.0), (1.0,)), 'out of bounds'),
        (Ray(0, (0.0, math.inf), (1.0,)), 'must be finite'),
        (Ray(0, (0.0, 1.0), (math.nan,)), 'fixed variables must be finite'),
    ],
)
def test_malformed_rays_are_rejected(triangle_robot, ray, message_part):
    with pytest.raises(RayValidationError) as exc:
        validate_ray(ray, triangle_robot)

    assert message_part in str(exc.value)


@pytest.mark.parametrize('value_range', [(-math.pi, 0.0), (0.0, 4.0)])
def test_rotational_range_must_avoid_half_turn(polar_robot, value_range):
    with pytest.raises(RayValidationError) as exc:
        validate_ray(Ray(1, value_range, (1.0,)), polar_robot)

    assert 'strictly inside (-pi, pi)' in str(exc.value)


def test_translational_range_may_exceed_pi(polar_robot):
    validate_ray(Ray(0, (0.0, 4.0), (0.5,)), polar_robot)


def test_rays_are_validated_before_sampling(triangle_robot):
    calls = []
    original = triangle_robot.update
    triangle_robot.update = lambda *args: calls.append(args) or original(*args)

    with pytest.raises(RayValidationError):
        evaluate_ray(triangle_robot, Ray(0, (1.0, 0.0), (1.0,)))

    assert calls == []


@pytest.mark.parametrize('kwargs', [{'min_ray_percentage': -1.0}, {'min_ray_percentage': 101.0}, {'tolerance': 0.0}])
def test_config_rejects_out_of_range_values(kwargs):
    with pytest.raises(ValueError):
        WrenchClosureConfig(**kwargs)


def test_default_config_is_copied():
    original = get_default_config()
    try:
        set_default_config(WrenchClosureConfig(min_ray_percentage=5.0))
        config = get_default_config()
        config.min_ray_percentage = 50.0
        assert get_default_config().min_ray_percentage == 5.0
    finally:
        set_default_config(original)


def test_ray_coordinates_insert_free_variable():
    ray = Ray(1, (0.0, 1.0), (5.0, 7.0))

    assert ray.coordinates(0.3) == [5.0, 0.3, 7.0]
    assert ray.span == 1.0
    assert ray.percentage((0.25, 0.5)) == pytest.approx(25.0)
