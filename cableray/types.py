from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Sequence, Tuple

Interval = Tuple[float, float]
IntervalList = List[Interval]


class JointType(Enum):
    """Kind of motion described by a generalised coordinate."""

    TRANSLATION = "translation"
    ROTATION = "rotation"

    @classmethod
    def parse(cls, value: object) -> "JointType":
        if isinstance(value, JointType):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if member.value == key or member.name.lower() == key:
                    return member
        raise ValueError(f"unknown joint type {value!r}")


@dataclass(frozen=True)
class Ray:
    """One-dimensional slice of configuration space.

    All coordinates except ``free_variable_index`` are held at
    ``fixed_variables`` (in coordinate order, skipping the free one) while the
    free coordinate sweeps ``free_variable_range``.
    """

    free_variable_index: int
    free_variable_range: Tuple[float, float]
    fixed_variables: Tuple[float, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        lo, hi = self.free_variable_range
        object.__setattr__(self, "free_variable_index", int(self.free_variable_index))
        object.__setattr__(self, "free_variable_range", (float(lo), float(hi)))
        object.__setattr__(self, "fixed_variables", tuple(float(v) for v in self.fixed_variables))

    @property
    def lower(self) -> float:
        return self.free_variable_range[0]

    @property
    def upper(self) -> float:
        return self.free_variable_range[1]

    @property
    def span(self) -> float:
        return self.free_variable_range[1] - self.free_variable_range[0]

    def coordinates(self, free_value: float) -> List[float]:
        """Return the full coordinate vector with the free variable set to ``free_value``."""

        q = list(self.fixed_variables)
        q.insert(self.free_variable_index, float(free_value))
        return q

    def percentage(self, interval: Interval) -> float:
        return 100.0 * (interval[1] - interval[0]) / self.span


def is_finite_sequence(values: Sequence[float]) -> bool:
    return all(math.isfinite(float(v)) for v in values)


__all__ = [
    "Interval",
    "IntervalList",
    "JointType",
    "Ray",
    "is_finite_sequence",
]
