from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Any, Dict, Tuple

from curves3d.validation import ValidationError

LAYOUTS = ("random", "grouped")

DEFAULT_CONFIG: Dict[str, Any] = {
    "count": 15,
    "t": math.pi / 4,
    "radius_range": (1, 10),
    "step_range": (1, 5),
    "seed": None,
    "layout": "random",
}


def _check_range(value: Tuple[float, float], label: str) -> Tuple[float, float]:
    try:
        lo, hi = value
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"{label} must be a (low, high) pair.") from exc
    if not (0 < lo <= hi) or not math.isfinite(hi):
        raise ValidationError(f"{label} must satisfy 0 < low <= high.")
    return lo, hi


@dataclass(frozen=True)
class PipelineSettings:
    """Resolved settings for one curve pipeline run."""

    count: int = DEFAULT_CONFIG["count"]
    t: float = DEFAULT_CONFIG["t"]
    radius_range: Tuple[float, float] = DEFAULT_CONFIG["radius_range"]
    step_range: Tuple[float, float] = DEFAULT_CONFIG["step_range"]
    seed: int | None = DEFAULT_CONFIG["seed"]
    layout: str = DEFAULT_CONFIG["layout"]

    def __post_init__(self) -> None:
        if self.count < 0:
            raise ValidationError("count must be >= 0.")
        if not math.isfinite(self.t):
            raise ValidationError("t must be finite.")
        object.__setattr__(self, "radius_range", _check_range(self.radius_range, "radius_range"))
        object.__setattr__(self, "step_range", _check_range(self.step_range, "step_range"))
        layout = self.layout.strip().lower()
        if layout not in LAYOUTS:
            raise ValidationError(f"layout must be one of {', '.join(LAYOUTS)}.")
        object.__setattr__(self, "layout", layout)

    def with_overrides(self, **overrides: Any) -> "PipelineSettings":
        """Return a copy with every non-None override applied."""

        changes = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **changes)


DEFAULT_SETTINGS = PipelineSettings()
