from __future__ import annotations

from typing import List, Sequence

from curves3d.curves import Circle, Point3D
from curves3d.pipeline import CurveEvaluation, PipelineReport


def format_point(point: Point3D, digits: int = 4) -> str:
    return "(" + ", ".join(f"{value:.{digits}f}" for value in point) + ")"


def format_evaluation(evaluation: CurveEvaluation) -> str:
    return (
        f"{evaluation.curve.describe()}  "
        f"point: {format_point(evaluation.point)}  "
        f"derivative: {format_point(evaluation.derivative)}"
    )


def format_radii(circles: Sequence[Circle]) -> str:
    if not circles:
        return "Sorted circle radii: (none)"
    return "Sorted circle radii: " + ", ".join(f"{circle.radius:.2f}" for circle in circles)


def format_total(total: float) -> str:
    return f"Total radius of circles: {total:.2f}"


def render_report(report: PipelineReport) -> List[str]:
    """Evaluation lines, then the sorted radii, then the total."""
    lines = [format_evaluation(evaluation) for evaluation in report.evaluations]
    lines.append(format_radii(report.circles))
    lines.append(format_total(report.total_radius))
    return lines
