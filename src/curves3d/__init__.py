"""curves3d – parametric 3D curve evaluation playground."""

from __future__ import annotations

from .curves import Circle, Curve, CurveKind, Ellipse, Helix, Point3D
from .pipeline import PipelineReport, run_pipeline
from .validation import InvalidParameter, ValidationError

__all__ = [
    "__version__",
    "Circle",
    "Curve",
    "CurveKind",
    "Ellipse",
    "Helix",
    "InvalidParameter",
    "PipelineReport",
    "Point3D",
    "ValidationError",
    "run_pipeline",
]

__version__ = "0.1.0"
