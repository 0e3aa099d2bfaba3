from __future__ import annotations

import numpy as np


class ValidationError(ValueError):
    """Raised when validation constraints are violated."""


class InvalidParameter(ValidationError):
    """Raised when a curve shape parameter is not a positive finite number."""

    def __init__(self, name: str, value: object) -> None:
        self.name = name
        self.value = value
        super().__init__(f"{name} must be positive (got {value!r}).")


def require_positive(value: float, label: str) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidParameter(label, value) from exc
    if not np.isfinite(number) or number <= 0:
        raise InvalidParameter(label, value)
    return number


def require_finite(value: float, label: str) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{label} must be a real number.") from exc
    if not np.isfinite(number):
        raise ValueError(f"{label} must be finite.")
    return number
