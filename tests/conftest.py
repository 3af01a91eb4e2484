import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from surface import Parabola  # noqa: E402


@pytest.fixture
def parabola() -> Parabola:
    return Parabola(a=2, b=2, c=0)


class Dot:
    """Minimal stand-in with just a position and velocity."""

    def __init__(self, x: float, y: float, vx: float = 0.0, vy: float = 0.0):
        import numpy as np

        self.position = np.array([x, y], dtype=np.float64)
        self.velocity = np.array([vx, vy], dtype=np.float64)

    def __repr__(self) -> str:
        return f"Dot({self.position[0]}, {self.position[1]})"


@pytest.fixture
def dot():
    return Dot
