from __future__ import annotations

import typer
from rich.console import Console

from curves3d._config import DEFAULT_SETTINGS, LAYOUTS, PipelineSettings
from curves3d.factory import build_curves, make_rng, parse_curve_specs
from curves3d.pipeline import run_pipeline
from curves3d.report import render_report
from curves3d.validation import InvalidParameter, ValidationError

console = Console(highlight=False, markup=False, emoji=False, soft_wrap=True)
err_console = Console(stderr=True, highlight=False, markup=False, emoji=False, soft_wrap=True)
app = typer.Typer(help="Evaluate parametric 3D curves and total the circle radii.")


def _resolve_settings(**overrides: object) -> PipelineSettings:
    try:
        return DEFAULT_SETTINGS.with_overrides(**overrides)
    except ValidationError as exc:
        raise typer.BadParameter(str(exc)) from exc


@app.command()
def main(
    count: int | None = typer.Option(
        None, "--count", "-n", min=0, help=f"Number of random curves (default {DEFAULT_SETTINGS.count})."
    ),
    t: float | None = typer.Option(None, "--t", "-t", help="Curve parameter to evaluate at, in radians (default pi/4)."),
    seed: int | None = typer.Option(None, "--seed", help="Seed for the random source; omit for a fresh run."),
    layout: str | None = typer.Option(
        None, "--layout", help=f"Random layout: {' or '.join(LAYOUTS)} (default {DEFAULT_SETTINGS.layout})."
    ),
    curve: list[str] | None = typer.Option(
        None,
        "--curve",
        "-c",
        help="Fixed curve instead of random ones: circle:R, ellipse:RX,RY or helix:R,STEP. Repeatable.",
    ),
) -> None:
    """
    Build a curve collection, report each curve at t, then sort and total the circles.
    """

    settings = _resolve_settings(count=count, t=t, seed=seed, layout=layout)

    # The whole collection is built before anything is printed.
    try:
        if curve:
            curves = parse_curve_specs(curve)
        else:
            curves = build_curves(settings, make_rng(settings.seed))
    except InvalidParameter as exc:
        err_console.print(f"Invalid parameter: {exc}")
        raise typer.Exit(code=1) from exc
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--curve") from exc

    report = run_pipeline(curves, settings.t)
    for line in render_report(report):
        console.print(line)
