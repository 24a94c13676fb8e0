"""The committed pixel canvas and colour type."""

from __future__ import annotations

from typing import Iterable, NamedTuple

from pixpaint.geometry import (
    PIXELBUFFER_HEIGHT,
    PIXELBUFFER_WIDTH,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    Point,
)


class Color(NamedTuple):
    """An RGBA colour with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255


TRANSPARENT = Color(0, 0, 0, 0)
WHITE = Color(255, 255, 255)
BLACK = Color(0, 0, 0)
RED = Color(230, 41, 55)
ORANGE = Color(255, 161, 0)
YELLOW = Color(253, 249, 0)
GREEN = Color(0, 228, 48)
SKYBLUE = Color(102, 191, 255)
BLUE = Color(0, 121, 241)
PURPLE = Color(200, 122, 255)
PINK = Color(255, 109, 194)
BROWN = Color(127, 106, 79)

_CHANNELS = 4


def is_point_valid(point: Point) -> bool:
    """True if the point lies inside the drawable area."""
    x, y = point
    return 0 <= x < PIXELBUFFER_WIDTH and 0 <= y < PIXELBUFFER_HEIGHT


def are_points_valid(points: Iterable[Point]) -> bool:
    """True if every point lies inside the drawable area."""
    return all(is_point_valid(p) for p in points)


class PixelBuffer:
    """An RGBA image of screen size whose drawable part is the top area.

    ``pixels`` holds row-major RGBA bytes of ``SCREEN_WIDTH`` x
    ``SCREEN_HEIGHT``; ``has_changed`` is set whenever a pixel is written.
    """

    width = SCREEN_WIDTH
    height = SCREEN_HEIGHT

    def __init__(self) -> None:
        self.pixels = bytearray(SCREEN_WIDTH * SCREEN_HEIGHT * _CHANNELS)
        self.has_changed = True

    @staticmethod
    def _offset(x: int, y: int) -> int:
        return (y * SCREEN_WIDTH + x) * _CHANNELS

    def set_pixel(self, x: float, y: float, color: Color) -> None:
        """Write one pixel; points outside the drawable area are ignored."""
        x, y = int(x), int(y)
        if not is_point_valid((x, y)):
            return
        start = self._offset(x, y)
        self.pixels[start:start + _CHANNELS] = bytes(color)
        self.has_changed = True

    def get_pixel(self, x: float, y: float) -> Color:
        """Read one pixel of the drawable area."""
        x, y = int(x), int(y)
        if not is_point_valid((x, y)):
            raise IndexError(f"pixel ({x}, {y}) is outside the canvas")
        start = self._offset(x, y)
        return Color(*self.pixels[start:start + _CHANNELS])

    def clear(self) -> None:
        """Reset the drawable area to transparent."""
        size = PIXELBUFFER_HEIGHT * SCREEN_WIDTH * _CHANNELS
        self.pixels[:size] = bytes(size)
        self.has_changed = True