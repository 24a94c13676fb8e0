"""Canvas dimensions and small numeric helpers shared across the editor."""

from __future__ import annotations

import math
from typing import Tuple

Point = Tuple[float, float]

PIXELBUFFER_WIDTH = 800
PIXELBUFFER_HEIGHT = 700
SCREEN_WIDTH = 800
SCREEN_HEIGHT = 800
POLYGON_BUFFER_SIZE = 100
SCREEN_TITLE = "Paint C"
MAX_EDITOR_SIZE = 50


def clamp(value: float, low: int, high: int) -> int:
    """Truncate ``value`` toward zero and clamp it into ``[low, high]``."""
    whole = int(value)
    if whole < low:
        return low
    if whole > high:
        return high
    return whole


def vector_distance(p1: Point, p2: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(abs(p1[0] - p2[0]), abs(p1[1] - p2[1]))