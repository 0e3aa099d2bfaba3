from __future__ import annotations

import warnings
from typing import Iterable, List, Tuple

import numpy as np

from curves3d._config import DEFAULT_SETTINGS, PipelineSettings
from curves3d.curves import CURVE_TYPES, Circle, Curve, CurveKind, Ellipse, Helix

_KINDS: tuple[CurveKind, ...] = tuple(CurveKind)
_ARITY = {CurveKind.CIRCLE: 1, CurveKind.ELLIPSE: 2, CurveKind.HELIX: 2}


def make_rng(seed: int | None = None) -> np.random.Generator:
    """Create the random source for one run; ``None`` seeds from the OS."""
    return np.random.default_rng(seed)


def _draw(rng: np.random.Generator, bounds: Tuple[float, float]) -> float:
    lo, hi = bounds
    if float(lo).is_integer() and float(hi).is_integer():
        return float(rng.integers(int(lo), int(hi), endpoint=True))
    return float(rng.uniform(lo, hi))


def _random_of_kind(
    kind: CurveKind, rng: np.random.Generator, settings: PipelineSettings
) -> Curve:
    if kind is CurveKind.CIRCLE:
        return Circle(_draw(rng, settings.radius_range))
    if kind is CurveKind.ELLIPSE:
        return Ellipse(_draw(rng, settings.radius_range), _draw(rng, settings.radius_range))
    return Helix(_draw(rng, settings.radius_range), _draw(rng, settings.step_range))


def random_curve(rng: np.random.Generator, settings: PipelineSettings = DEFAULT_SETTINGS) -> Curve:
    """Draw a curve whose kind is uniform over circle, ellipse and helix."""
    kind = _KINDS[int(rng.integers(len(_KINDS)))]
    return _random_of_kind(kind, rng, settings)


def random_curves(
    count: int, rng: np.random.Generator, settings: PipelineSettings = DEFAULT_SETTINGS
) -> List[Curve]:
    if count < 0:
        raise ValueError("count must be >= 0.")
    return [random_curve(rng, settings) for _ in range(count)]


def grouped_curves(
    per_kind: int, rng: np.random.Generator, settings: PipelineSettings = DEFAULT_SETTINGS
) -> List[Curve]:
    """Circles first, then ellipses, then helices, ``per_kind`` of each."""
    if per_kind < 0:
        raise ValueError("per_kind must be >= 0.")
    return [_random_of_kind(kind, rng, settings) for kind in _KINDS for _ in range(per_kind)]


def build_curves(settings: PipelineSettings, rng: np.random.Generator) -> List[Curve]:
    if settings.layout == "grouped":
        per_kind, remainder = divmod(settings.count, len(_KINDS))
        if remainder:
            warnings.warn(
                f"count {settings.count} is not a multiple of {len(_KINDS)}; "
                f"grouped layout builds {per_kind * len(_KINDS)} curves.",
                stacklevel=2,
            )
        return grouped_curves(per_kind, rng, settings)
    return random_curves(settings.count, rng, settings)


def parse_curve_spec(text: str) -> Curve:
    """Parse ``circle:R``, ``ellipse:RX,RY`` or ``helix:R,STEP`` into a curve."""
    name, sep, args = text.partition(":")
    if not sep:
        raise ValueError(f"Curve spec {text!r} must look like kind:value[,value].")
    try:
        kind = CurveKind(name.strip().lower())
    except ValueError as exc:
        choices = ", ".join(k.value for k in _KINDS)
        raise ValueError(f"Unknown curve kind {name!r}; expected one of {choices}.") from exc
    try:
        values = [float(part) for part in args.split(",")]
    except ValueError as exc:
        raise ValueError(f"Curve spec {text!r} has a non-numeric value.") from exc
    if len(values) != _ARITY[kind]:
        raise ValueError(f"{kind.value} takes {_ARITY[kind]} value(s), got {len(values)}.")
    return CURVE_TYPES[kind](*values)


def parse_curve_specs(texts: Iterable[str]) -> List[Curve]:
    return [parse_curve_spec(text) for text in texts]


__all__ = [
    "build_curves",
    "grouped_curves",
    "make_rng",
    "parse_curve_spec",
    "parse_curve_specs",
    "random_curve",
    "random_curves",
]
