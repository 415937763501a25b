import json

import pytest

from cableray import JacobianMode, PlanarBodyRobot, PolarPointMassRobot, build_model, build_ray, load_problem


def test_build_planar_body():
    model = build_model(
        {
            "kind": "planar_body",
            "anchors": [[-1, -1], [1, -1], [1, 1], [-1, 1]],
            "attachments": [[0, 0]] * 4,
        }
    )

    assert isinstance(model, PlanarBodyRobot)
    assert model.num_dofs == 3


def test_build_model_with_numeric_jacobian():
    model = build_model({"kind": "polar_point_mass", "anchors": [[0, 1], [1, 0], [-1, -1]]}, "numeric")

    assert isinstance(model, PolarPointMassRobot)
    assert model.jacobian_mode is JacobianMode.NUMERIC


@pytest.mark.parametrize(
    'description, message_part',
    [
        ({"kind": "delta", "anchors": [[0, 0]]}, 'robot kind must be one of'),
        ({"kind": "point_mass", "anchors": []}, "non-empty 'anchors'"),
        ({"kind": "planar_body", "anchors": [[0, 0]]}, "'attachments'"),
    ],
)
def test_invalid_robot_descriptions(description, message_part):
    with pytest.raises(ValueError) as exc:
        build_model(description)

    assert message_part in str(exc.value)


def test_build_ray_requires_range():
    with pytest.raises(ValueError) as exc:
        build_ray({"free_variable_index": 0})

    assert "free_variable_range" in str(exc.value)


def test_load_problem_round_trip(tmp_path):
    path = tmp_path / "problem.json"
    path.write_text(
        json.dumps(
            {
                "robot": {"kind": "point_mass", "anchors": [[0, 0], [4, 0], [2, 3]]},
                "ray": {"free_variable_index": 1, "free_variable_range": [0.5, 1.5], "fixed_variables": [2.0]},
            }
        ),
        encoding="utf-8",
    )

    model, ray = load_problem(path)

    assert model.num_cables == 3
    assert ray.free_variable_index == 1
    assert ray.free_variable_range == (0.5, 1.5)
    assert ray.fixed_variables == (2.0,)


def test_load_problem_requires_both_sections(tmp_path):
    path = tmp_path / "problem.json"
    path.write_text(json.dumps({"robot": {}}), encoding="utf-8")

    with pytest.raises(ValueError):
        load_problem(path)
