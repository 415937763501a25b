"""Build models and rays from plain JSON-compatible descriptions."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Tuple, Union

from .model import CableRobotModel, JacobianMode, PlanarBodyRobot, PointMassRobot, PolarPointMassRobot
from .types import Ray

logger = logging.getLogger(__name__)

ROBOT_KINDS = ("point_mass", "polar_point_mass", "planar_body")


def build_model(description: Mapping[str, Any], jacobian_mode: Union[str, JacobianMode] = JacobianMode.DEFAULT) -> CableRobotModel:
    """Return the model described by ``description``.

    ``description`` holds ``kind`` (one of ``ROBOT_KINDS``), ``anchors`` and, for a
    planar body, ``attachments``.
    """

    kind = description.get("kind")
    if kind not in ROBOT_KINDS:
        raise ValueError(f"robot kind must be one of {', '.join(ROBOT_KINDS)} (got {kind!r})")
    anchors = description.get("anchors")
    if not anchors:
        raise ValueError("robot description needs a non-empty 'anchors' list")
    mode = JacobianMode(jacobian_mode)

    if kind == "point_mass":
        model: CableRobotModel = PointMassRobot(anchors, jacobian_mode=mode)
    elif kind == "polar_point_mass":
        model = PolarPointMassRobot(anchors, jacobian_mode=mode)
    else:
        attachments = description.get("attachments")
        if attachments is None:
            raise ValueError("planar_body robots need an 'attachments' list")
        model = PlanarBodyRobot(anchors, attachments, jacobian_mode=mode)

    logger.info("Built %r", model)
    return model


def build_ray(description: Mapping[str, Any]) -> Ray:
    try:
        value_range = description["free_variable_range"]
        return Ray(
            free_variable_index=int(description["free_variable_index"]),
            free_variable_range=(float(value_range[0]), float(value_range[1])),
            fixed_variables=tuple(float(v) for v in description.get("fixed_variables", ())),
        )
    except KeyError as exc:
        raise ValueError(f"ray description is missing {exc.args[0]!r}") from exc


def load_problem(
    path: Union[str, Path], jacobian_mode: Union[str, JacobianMode] = JacobianMode.DEFAULT
) -> Tuple[CableRobotModel, Ray]:
    """Load a ``{"robot": ..., "ray": ...}`` document."""

    document: Dict[str, Any] = json.loads(Path(path).read_text(encoding="utf-8"))
    if "robot" not in document or "ray" not in document:
        raise ValueError(f"{path}: expected top-level 'robot' and 'ray' entries")
    return build_model(document["robot"], jacobian_mode), build_ray(document["ray"])


__all__ = ["ROBOT_KINDS", "build_model", "build_ray", "load_problem"]
