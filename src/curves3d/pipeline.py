from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable, List, Sequence

from curves3d.curves import Circle, Curve, Point3D


@dataclass(frozen=True)
class CurveEvaluation:
    curve: Curve
    t: float
    point: Point3D
    derivative: Point3D


@dataclass
class PipelineReport:
    """Result of one pass over a curve collection.

    ``circles`` holds references into the evaluated collection, sorted by radius.
    """

    evaluations: List[CurveEvaluation] = field(default_factory=list)
    circles: List[Circle] = field(default_factory=list)
    total_radius: float = 0.0

    @property
    def radii(self) -> list[float]:
        return [circle.radius for circle in self.circles]


def evaluate_curves(curves: Iterable[Curve], t: float) -> List[CurveEvaluation]:
    return [
        CurveEvaluation(curve=curve, t=t, point=curve.point(t), derivative=curve.derivative(t))
        for curve in curves
    ]


def select_circles(curves: Iterable[Curve]) -> List[Circle]:
    """Return the circles in ``curves`` in their original order."""
    circles: List[Circle] = []
    for curve in curves:
        match curve:
            case Circle():
                circles.append(curve)
            case _:
                continue
    return circles


def sort_by_radius(circles: Sequence[Circle]) -> List[Circle]:
    # sorted() is stable, so equal radii keep their input order.
    return sorted(circles, key=lambda circle: circle.radius)


def total_radius(circles: Iterable[Circle]) -> float:
    return math.fsum(circle.radius for circle in circles)


def run_pipeline(curves: Sequence[Curve], t: float) -> PipelineReport:
    evaluations = evaluate_curves(curves, t)
    circles = sort_by_radius(select_circles(curves))
    return PipelineReport(
        evaluations=evaluations,
        circles=circles,
        total_radius=total_radius(circles),
    )


__all__ = [
    "CurveEvaluation",
    "PipelineReport",
    "evaluate_curves",
    "run_pipeline",
    "select_circles",
    "sort_by_radius",
    "total_radius",
]
