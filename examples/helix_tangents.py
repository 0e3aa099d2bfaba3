"""Example curves3d script: trace a helix and print its tangent at a few parameters."""

from __future__ import annotations

import numpy as np

from curves3d import Circle, Helix, run_pipeline
from curves3d.report import render_report


def build():
    """Two circles and a helix, mirroring the end-to-end report."""

    return [Circle(3.0), Helix(radius=2.0, step=4.0), Circle(1.0)]


if __name__ == "__main__":
    curves = build()
    helix = curves[1]
    t_values = np.linspace(0.0, 2 * np.pi, 5)
    for t, tangent in zip(t_values, helix.sample_derivative(t_values)):
        print(f"t={t:.3f} tangent={np.round(tangent, 4)}")
    for line in render_report(run_pipeline(curves, np.pi / 4)):
        print(line)
