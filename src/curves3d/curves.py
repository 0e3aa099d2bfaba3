"""Parametric 3D curves: circles, ellipses and helices."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Iterator, Sequence

import numpy as np

from curves3d.validation import require_finite, require_positive

TWO_PI = 2.0 * np.pi


class CurveKind(str, Enum):
    CIRCLE = "circle"
    ELLIPSE = "ellipse"
    HELIX = "helix"


@dataclass(frozen=True)
class Point3D:
    x: float
    y: float
    z: float

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z))

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=float)

    @classmethod
    def from_array(cls, arr: np.ndarray) -> "Point3D":
        x, y, z = (float(v) for v in np.asarray(arr, dtype=float).reshape(3))
        return cls(x, y, z)


def _require_params(t_values: float | Sequence[float] | np.ndarray) -> np.ndarray:
    arr = np.asarray(t_values, dtype=float).reshape(-1)
    if not np.all(np.isfinite(arr)):
        raise ValueError("t values must be finite.")
    return arr


class _ParametricCurve:
    """Shared evaluation on top of the vectorised ``_position``/``_tangent`` hooks.

    Subclasses return an ``(N, 3)`` array for an ``(N,)`` array of parameters.
    """

    kind: ClassVar[CurveKind]

    def _position(self, t: np.ndarray) -> np.ndarray:
        raise NotImplementedError

    def _tangent(self, t: np.ndarray) -> np.ndarray:
        raise NotImplementedError

    def point(self, t: float) -> Point3D:
        """Position on the curve at parameter ``t`` (radians)."""
        value = require_finite(t, "t")
        return Point3D.from_array(self._position(np.array([value]))[0])

    def derivative(self, t: float) -> Point3D:
        """First derivative with respect to ``t``, i.e. the tangent vector."""
        value = require_finite(t, "t")
        return Point3D.from_array(self._tangent(np.array([value]))[0])

    def sample(self, t_values: Sequence[float] | np.ndarray) -> np.ndarray:
        return self._position(_require_params(t_values))

    def sample_derivative(self, t_values: Sequence[float] | np.ndarray) -> np.ndarray:
        return self._tangent(_require_params(t_values))

    def describe(self) -> str:
        raise NotImplementedError


@dataclass(frozen=True)
class Circle(_ParametricCurve):
    radius: float

    kind: ClassVar[CurveKind] = CurveKind.CIRCLE

    def __post_init__(self) -> None:
        object.__setattr__(self, "radius", require_positive(self.radius, "radius"))

    def _position(self, t: np.ndarray) -> np.ndarray:
        r = self.radius
        return np.column_stack([r * np.cos(t), r * np.sin(t), np.zeros_like(t)])

    def _tangent(self, t: np.ndarray) -> np.ndarray:
        r = self.radius
        return np.column_stack([-r * np.sin(t), r * np.cos(t), np.zeros_like(t)])

    def describe(self) -> str:
        return f"Circle(radius={self.radius:.2f})"


@dataclass(frozen=True)
class Ellipse(_ParametricCurve):
    radius_x: float
    radius_y: float

    kind: ClassVar[CurveKind] = CurveKind.ELLIPSE

    def __post_init__(self) -> None:
        object.__setattr__(self, "radius_x", require_positive(self.radius_x, "radius_x"))
        object.__setattr__(self, "radius_y", require_positive(self.radius_y, "radius_y"))

    def _position(self, t: np.ndarray) -> np.ndarray:
        return np.column_stack(
            [self.radius_x * np.cos(t), self.radius_y * np.sin(t), np.zeros_like(t)]
        )

    def _tangent(self, t: np.ndarray) -> np.ndarray:
        return np.column_stack(
            [-self.radius_x * np.sin(t), self.radius_y * np.cos(t), np.zeros_like(t)]
        )

    def describe(self) -> str:
        return f"Ellipse(radius_x={self.radius_x:.2f}, radius_y={self.radius_y:.2f})"


@dataclass(frozen=True)
class Helix(_ParametricCurve):
    radius: float
    step: float

    kind: ClassVar[CurveKind] = CurveKind.HELIX

    def __post_init__(self) -> None:
        object.__setattr__(self, "radius", require_positive(self.radius, "radius"))
        object.__setattr__(self, "step", require_positive(self.step, "step"))

    @property
    def rise_per_radian(self) -> float:
        return self.step / TWO_PI

    def _position(self, t: np.ndarray) -> np.ndarray:
        r = self.radius
        return np.column_stack([r * np.cos(t), r * np.sin(t), self.rise_per_radian * t])

    def _tangent(self, t: np.ndarray) -> np.ndarray:
        r = self.radius
        return np.column_stack(
            [-r * np.sin(t), r * np.cos(t), np.full_like(t, self.rise_per_radian)]
        )

    def describe(self) -> str:
        return f"Helix(radius={self.radius:.2f}, step={self.step:.2f})"


Curve = Circle | Ellipse | Helix

CURVE_TYPES: dict[CurveKind, type[Curve]] = {
    CurveKind.CIRCLE: Circle,
    CurveKind.ELLIPSE: Ellipse,
    CurveKind.HELIX: Helix,
}


__all__ = [
    "Circle",
    "Curve",
    "CurveKind",
    "CURVE_TYPES",
    "Ellipse",
    "Helix",
    "Point3D",
]
