"""Drawing tools: line, circle, polygon, rectangle, eraser and bucket fill.

Each tool reacts to key presses and mouse events.  Work in progress is
drawn into an :class:`Overlay` (the on-screen preview), and a committed
shape is written into the :class:`~pixpaint.canvas.PixelBuffer`.
"""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from pixpaint.canvas import BLACK, RED, TRANSPARENT, Color, PixelBuffer, is_point_valid
from pixpaint.geometry import (
    PIXELBUFFER_HEIGHT,
    PIXELBUFFER_WIDTH,
    POLYGON_BUFFER_SIZE,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    Point,
    vector_distance,
)
from pixpaint.raster import draw_circle, draw_line, draw_polygon, draw_square, snap_to

INVALID_POINT: Point = (-1.0, -1.0)
EDIT_TOLERANCE = 10
MARKER_RADIUS = 5
MARKER_COLOR = RED
DEFAULT_SIZE = 5


class Key(enum.Enum):
    """Keyboard keys the editor reacts to."""

    ENTER = enum.auto()
    ESCAPE = enum.auto()
    SPACE = enum.auto()
    C = enum.auto()
    ONE = enum.auto()
    TWO = enum.auto()
    P = enum.auto()
    M = enum.auto()


class MouseButton(enum.Enum):
    LEFT = enum.auto()
    RIGHT = enum.auto()


class MouseEvent(enum.Enum):
    DRAG = 1
    PRESS = 2
    RELEASE = 3
    IDLE = 4


@dataclass
class EditorState:
    """Settings and per-frame input shared by all tools."""

    color: Color = BLACK
    tool_index: int = 0
    mouse: Point = (0.0, 0.0)
    snap: bool = False
    dotted: bool = False
    out_of_bounds: bool = False
    size: int = DEFAULT_SIZE


class Overlay:
    """Preview layer drawn over the canvas; cleared before every redraw."""

    def __init__(self) -> None:
        self.pixels: Dict[Tuple[int, int], Color] = {}

    def clear(self) -> None:
        self.pixels.clear()

    def plot(self, x: int, y: int, color: Color) -> None:
        """Record one preview pixel; points off the screen are ignored."""
        x, y = int(x), int(y)
        if 0 <= x < SCREEN_WIDTH and 0 <= y < SCREEN_HEIGHT:
            self.pixels[(x, y)] = color

    def __len__(self) -> int:
        return len(self.pixels)

    def __contains__(self, point: object) -> bool:
        return point in self.pixels


class ToolSession:
    """Construction state shared by the tools while a shape is being built."""

    def __init__(self) -> None:
        self.anchors: List[Point] = [INVALID_POINT, INVALID_POINT]
        self.edit_point: Optional[int] = None
        self.radius = 0.0
        self.polygon: List[Point] = []
        self.point_added = True

    @property
    def point1(self) -> Point:
        return self.anchors[0]

    @point1.setter
    def point1(self, value: Point) -> None:
        self.anchors[0] = value

    @property
    def point2(self) -> Point:
        return self.anchors[1]

    @point2.setter
    def point2(self, value: Point) -> None:
        self.anchors[1] = value

    def invalidate(self) -> None:
        """Forget both anchor points."""
        self.anchors = [INVALID_POINT, INVALID_POINT]

    def reset(self) -> None:
        """Drop everything built so far, as when switching tools."""
        self.edit_point = None
        self.invalidate()
        self.polygon.clear()
        self.radius = 0.0

    def nearest_anchor(self, mouse: Point) -> Optional[int]:
        """Index of the anchor within editing reach of ``mouse``, if any."""
        d1 = vector_distance(mouse, self.point1)
        d2 = vector_distance(mouse, self.point2)
        if min(d1, d2) < EDIT_TOLERANCE:
            return 1 if d1 > d2 else 0
        return None


def _mark(points, overlay: Overlay) -> None:
    for point in points:
        draw_circle(point, MARKER_RADIUS, MARKER_COLOR, overlay.plot)


class Tool:
    """Base tool: ignores every key and mouse event."""

    def __init__(self, session: ToolSession) -> None:
        self.session = session

    def handle_key(self, key, buffer: PixelBuffer, state: EditorState, overlay: Overlay) -> None:
        return None

    def handle_mouse(
        self,
        button: MouseButton,
        event: MouseEvent,
        buffer: PixelBuffer,
        state: EditorState,
        overlay: Overlay,
    ) -> None:
        return None


class LineTool(Tool):
    """Straight lines, optionally thick, dashed or snapped to 45 degrees."""

    def _draw(self, state: EditorState, plot) -> None:
        s = self.session
        draw_line(s.point1, s.point2, state.color, plot, state.size, state.dotted)

    def _preview(self, state: EditorState, overlay: Overlay, mark: bool = False) -> None:
        overlay.clear()
        self._draw(state, overlay.plot)
        if mark:
            _mark(self.session.anchors, overlay)

    def handle_key(self, key, buffer, state, overlay):
        s = self.session
        if key is Key.ENTER:
            if is_point_valid(s.point1) and is_point_valid(s.point2):
                overlay.clear()
                self._draw(state, buffer.set_pixel)
                s.invalidate()
        elif key is Key.ESCAPE:
            overlay.clear()
            s.invalidate()

    def handle_mouse(self, button, event, buffer, state, overlay):
        s = self.session
        if button is MouseButton.LEFT:
            if event is MouseEvent.PRESS:
                s.point1 = state.mouse
            elif event is MouseEvent.DRAG:
                target = state.mouse
                if state.snap:
                    target = snap_to(s.point1, target)
                s.point2 = target
                self._preview(state, overlay)
            elif event is MouseEvent.RELEASE:
                self._preview(state, overlay, mark=True)
        elif button is MouseButton.RIGHT:
            if event is MouseEvent.PRESS:
                s.edit_point = s.nearest_anchor(state.mouse)
            elif event is MouseEvent.DRAG:
                if s.edit_point is not None:
                    position = state.mouse
                    if state.snap:
                        position = snap_to(s.anchors[1 - s.edit_point], position)
                    s.anchors[s.edit_point] = position
                    self._preview(state, overlay)
            elif event is MouseEvent.RELEASE:
                s.edit_point = None
                self._preview(state, overlay, mark=True)


class CircleTool(Tool):
    """Circle outlines: the first anchor is the centre, the second the rim."""

    def _preview(self, state: EditorState, overlay: Overlay, mark: bool = False) -> None:
        s = self.session
        overlay.clear()
        draw_circle(s.point1, s.radius, state.color, overlay.plot)
        if mark:
            _mark([s.point1], overlay)

    def handle_key(self, key, buffer, state, overlay):
        s = self.session
        if key is Key.ENTER:
            if is_point_valid(s.point1) and is_point_valid(s.point2):
                overlay.clear()
                draw_circle(s.point1, s.radius, state.color, buffer.set_pixel)
                s.invalidate()
        elif key is Key.ESCAPE:
            overlay.clear()
            s.invalidate()

    def handle_mouse(self, button, event, buffer, state, overlay):
        s = self.session
        if button is MouseButton.LEFT:
            if event is MouseEvent.PRESS:
                s.point1 = state.mouse
            elif event is MouseEvent.DRAG:
                s.point2 = state.mouse
                s.radius = vector_distance(s.point1, s.point2)
                self._preview(state, overlay)
            elif event is MouseEvent.RELEASE:
                self._preview(state, overlay, mark=True)
        elif button is MouseButton.RIGHT:
            if event is MouseEvent.PRESS:
                to_center = vector_distance(state.mouse, s.point1)
                to_rim = abs(to_center - s.radius)
                if min(to_center, to_rim) < EDIT_TOLERANCE:
                    s.edit_point = 1 if to_center > to_rim else 0
                else:
                    s.edit_point = None
            elif event is MouseEvent.DRAG:
                if s.edit_point is not None:
                    s.anchors[s.edit_point] = state.mouse
                    if s.edit_point == 1:
                        s.radius = vector_distance(s.point1, s.point2)
                    self._preview(state, overlay)
            elif event is MouseEvent.RELEASE:
                s.edit_point = None
                self._preview(state, overlay, mark=True)


class PolygonTool(Tool):
    """Closed polygons built one vertex per left click."""

    def _preview(self, state: EditorState, overlay: Overlay, mark: bool = False) -> None:
        points = self.session.polygon
        overlay.clear()
        draw_polygon(points, state.color, overlay.plot)
        if mark:
            _mark(points, overlay)

    def handle_key(self, key, buffer, state, overlay):
        s = self.session
        if key is Key.ENTER:
            overlay.clear()
            draw_polygon(s.polygon, state.color, buffer.set_pixel)
            s.polygon.clear()
        elif key is Key.ESCAPE:
            overlay.clear()
            s.polygon.clear()

    def handle_mouse(self, button, event, buffer, state, overlay):
        s = self.session
        points = s.polygon
        if button is MouseButton.LEFT:
            if event is MouseEvent.PRESS:
                if state.out_of_bounds or len(points) >= POLYGON_BUFFER_SIZE:
                    s.point_added = False
                    return
                s.point_added = True
                points.append(state.mouse)
                self._preview(state, overlay)
            elif event in (MouseEvent.DRAG, MouseEvent.RELEASE):
                if not s.point_added or not points:
                    return
                points[-1] = state.mouse
                self._preview(state, overlay, mark=event is MouseEvent.RELEASE)
        elif button is MouseButton.RIGHT:
            if event is MouseEvent.PRESS:
                s.edit_point = None
                if points:
                    distances = [vector_distance(p, state.mouse) for p in points]
                    nearest = min(range(len(points)), key=distances.__getitem__)
                    if distances[nearest] < EDIT_TOLERANCE:
                        s.edit_point = nearest
            elif event is MouseEvent.DRAG:
                if s.edit_point is not None:
                    points[s.edit_point] = state.mouse
                    self._preview(state, overlay)
            elif event is MouseEvent.RELEASE:
                s.edit_point = None
                self._preview(state, overlay, mark=True)


class SquareTool(Tool):
    """Axis-aligned rectangles spanned by two corners."""

    def _preview(self, state: EditorState, overlay: Overlay, mark: bool = False) -> None:
        s = self.session
        overlay.clear()
        draw_square(s.point1, s.point2, state.color, overlay.plot)
        if mark:
            _mark(s.anchors, overlay)

    def handle_key(self, key, buffer, state, overlay):
        s = self.session
        if key is Key.ENTER:
            overlay.clear()
            draw_square(s.point1, s.point2, state.color, buffer.set_pixel)
        elif key is Key.ESCAPE:
            overlay.clear()
            s.invalidate()

    def handle_mouse(self, button, event, buffer, state, overlay):
        s = self.session
        if button is MouseButton.LEFT:
            if event is MouseEvent.PRESS:
                s.point1 = state.mouse
                s.point2 = state.mouse
                self._preview(state, overlay)
            elif event is MouseEvent.DRAG:
                s.point2 = state.mouse
                self._preview(state, overlay)
            elif event is MouseEvent.RELEASE:
                s.point2 = state.mouse
                self._preview(state, overlay, mark=True)
        elif button is MouseButton.RIGHT:
            if event is MouseEvent.PRESS:
                s.edit_point = s.nearest_anchor(state.mouse)
            elif event is MouseEvent.DRAG:
                if s.edit_point is not None:
                    s.anchors[s.edit_point] = state.mouse
                    self._preview(state, overlay)
            elif event is MouseEvent.RELEASE:
                s.edit_point = None
                self._preview(state, overlay, mark=True)


class EraserTool(Tool):
    """Clears a square of ``state.size`` around the cursor while a button is active."""

    def handle_mouse(self, button, event, buffer, state, overlay):
        mx, my = state.mouse
        half = state.size / 2
        top_left = (mx - half, my - half)
        bottom_right = (mx + half, my + half)
        overlay.clear()
        draw_square(top_left, bottom_right, MARKER_COLOR, overlay.plot)
        if event is MouseEvent.IDLE:
            return
        for x in range(int(top_left[0]), math.ceil(bottom_right[0])):
            for y in range(int(top_left[1]), math.ceil(bottom_right[1])):
                buffer.set_pixel(x, y, TRANSPARENT)


def flood_fill(buffer: PixelBuffer, x: float, y: float, color: Color) -> None:
    """Fill the 4-connected region of equal colour around ``(x, y)``."""
    x, y = int(x), int(y)
    if not is_point_valid((x, y)):
        return
    target = buffer.get_pixel(x, y)
    if target == color:
        return

    pixels = buffer.pixels
    wanted = bytes(target)
    fill = bytes(color)

    def matches(px: int, py: int) -> bool:
        offset = (py * SCREEN_WIDTH + px) * 4
        return pixels[offset:offset + 4] == wanted

    stack = [(x, y)]
    while stack:
        px, py = stack.pop()
        if not matches(px, py):
            continue
        left = px
        while left > 0 and matches(left - 1, py):
            left -= 1
        right = px
        while right < PIXELBUFFER_WIDTH - 1 and matches(right + 1, py):
            right += 1
        row = py * SCREEN_WIDTH * 4
        pixels[row + left * 4:row + (right + 1) * 4] = fill * (right - left + 1)
        for ny in (py - 1, py + 1):
            if not 0 <= ny < PIXELBUFFER_HEIGHT:
                continue
            in_run = False
            for nx in range(left, right + 1):
                if matches(nx, ny):
                    if not in_run:
                        stack.append((nx, ny))
                        in_run = True
                else:
                    in_run = False
    buffer.has_changed = True


class FillTool(Tool):
    """Bucket fill on a left click."""

    def handle_mouse(self, button, event, buffer, state, overlay):
        if event is MouseEvent.PRESS and button is MouseButton.LEFT:
            flood_fill(buffer, state.mouse[0], state.mouse[1], state.color)