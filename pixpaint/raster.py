"""Rasterisation of circles, lines, polygons and rectangles."""

from __future__ import annotations

import math
from typing import Callable, Sequence

from pixpaint.canvas import Color, is_point_valid
from pixpaint.geometry import PIXELBUFFER_HEIGHT, PIXELBUFFER_WIDTH, Point, clamp

Plot = Callable[[int, int, Color], None]

DASH_LENGTH = 5
GAP_LENGTH = 5


def draw_circle(center: Point, radius: float, color: Color, plot: Plot) -> None:
    """Draw a circle outline with the midpoint algorithm."""
    if not is_point_valid(center):
        return
    cx, cy = center
    x, y = 0, int(radius)
    decision = 1 - y
    while x <= y:
        for px, py in (
            (x, y), (y, x), (-x, y), (-y, x),
            (x, -y), (y, -x), (-x, -y), (-y, -x),
        ):
            plot(int(cx + px), int(cy + py), color)
        if decision < 0:
            decision += 2 * x + 3
        else:
            decision += 2 * (x - y) + 5
            y -= 1
        x += 1


def draw_line(
    start: Point,
    end: Point,
    color: Color,
    plot: Plot,
    width: int = 1,
    dotted: bool = False,
) -> None:
    """Draw a line with Bresenham's algorithm, optionally thick or dashed."""
    x1, y1 = int(start[0]), int(start[1])
    x2, y2 = int(end[0]), int(end[1])
    dx = abs(x2 - x1)
    dy = abs(y2 - y1)
    steep = dy > dx
    sx = 1 if x1 < x2 else -1
    sy = 1 if y1 < y2 else -1
    err = dx - dy

    period = DASH_LENGTH + GAP_LENGTH
    dash_counter = 0
    width = max(width, 1)
    offsets = range(-(width // 2), -(width // 2) + width)

    while True:
        visible = not dotted or dash_counter < DASH_LENGTH
        if dotted:
            dash_counter = (dash_counter + 1) % period
        if visible:
            for off in offsets:
                if steep:
                    plot(x1 + off, y1, color)
                else:
                    plot(x1, y1 + off, color)

        if x1 == x2 and y1 == y2:
            break
        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            x1 += sx
        if e2 < dx:
            err += dx
            y1 += sy


def draw_polygon(points: Sequence[Point], color: Color, plot: Plot) -> None:
    """Draw a closed polygon through the given vertices."""
    if not points:
        return
    for current, previous in zip(points[1:], points):
        draw_line(current, previous, color, plot)
    draw_line(points[0], points[-1], color, plot)


def draw_square(start: Point, end: Point, color: Color, plot: Plot) -> None:
    """Draw an axis-aligned rectangle spanned by two opposite corners."""
    corner_a = (start[0], end[1])
    corner_b = (end[0], start[1])
    draw_polygon([corner_a, end, corner_b, start], color, plot)


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


def snap_to(origin: Point, target: Point) -> Point:
    """Snap ``target`` to the nearest 45-degree direction from ``origin``.

    The length is kept where possible but shortened so the result stays
    inside the drawable area.
    """
    ox, oy = origin
    dx, dy = target[0] - ox, target[1] - oy
    step = math.pi / 4
    angle = _round_half_away(math.atan2(dy, dx) / step) * step

    limit_x = PIXELBUFFER_WIDTH - ox if dx >= 0 else ox
    limit_y = PIXELBUFFER_HEIGHT - oy if dy >= 0 else oy
    cos_a, sin_a = math.cos(angle), math.sin(angle)

    max_length = math.inf
    if abs(cos_a) > 0.0001:
        max_length = min(max_length, limit_x / abs(cos_a))
    if abs(sin_a) > 0.0001:
        max_length = min(max_length, limit_y / abs(sin_a))

    length = min(math.hypot(dx, dy), max_length)
    x = clamp(ox + cos_a * length, 0, PIXELBUFFER_WIDTH)
    y = clamp(oy + sin_a * length, 0, PIXELBUFFER_HEIGHT)
    return (float(x), float(y))