from __future__ import annotations

import numpy as np
import pytest

from curves3d.curves import Circle, Ellipse, Helix


@pytest.fixture
def mixed_curves():
    return [
        Circle(3.0),
        Ellipse(2.0, 5.0),
        Circle(1.0),
        Helix(2.0, 4.0),
        Circle(2.0),
        Ellipse(1.0, 1.0),
    ]


@pytest.fixture
def rng():
    return np.random.default_rng(1234)
