from __future__ import annotations

import numpy as np
import pytest

from asciiart.imaging.picture import Picture

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)


def solid(width: int, height: int, color=WHITE) -> Picture:
    return Picture(np.full((height, width, 3), color, dtype=np.uint8))


def split_black_white(width: int, height: int) -> Picture:
    """Left half black, right half white."""
    pixels = np.full((height, width, 3), WHITE, dtype=np.uint8)
    pixels[:, : width // 2] = BLACK
    return Picture(pixels)


@pytest.fixture
def ascii_brightness():
    """Deterministic stand-in for glyph scoring: printable ASCII spread evenly over [0, 1]."""
    return lambda c: (ord(c) - 32) / 94


@pytest.fixture
def abc_table():
    # keys come out as exactly 0.0, 0.5 and 1.0
    return {"a": 0.0, "b": 0.5, "c": 1.0}
