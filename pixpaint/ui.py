"""The toolbar below the canvas: tool buttons and the colour palette."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import List, Tuple

from pixpaint.canvas import (
    BLUE,
    BROWN,
    GREEN,
    ORANGE,
    PINK,
    PURPLE,
    RED,
    SKYBLUE,
    WHITE,
    YELLOW,
    Color,
)
from pixpaint.geometry import MAX_EDITOR_SIZE, SCREEN_WIDTH

BUTTON_SIZE = 32
SPACING = 2
SLOTS = 10
BUTTON_ROW_Y = 725
SWATCH_ROW_Y = 767

PALETTE: Tuple[Color, ...] = (
    RED, ORANGE, YELLOW, GREEN, SKYBLUE, BLUE, PURPLE, PINK, BROWN, WHITE,
)

Rect = Tuple[int, int, int, int]


class ButtonId(enum.Enum):
    CIRCLE = 0
    SQUARE = 1
    LINE = 2
    DOTTED_LINE = 3
    ERASER = 4
    POLYGON = 5
    BUCKET = 6
    MINUS = 7
    PLUS = 8


_BUTTON_SPECS = {
    ButtonId.CIRCLE: ("circle", "sprites/circle.png"),
    ButtonId.SQUARE: ("square", "sprites/square.png"),
    ButtonId.LINE: ("line", "sprites/line.png"),
    ButtonId.DOTTED_LINE: ("dashed-line", "sprites/dashed-line.png"),
    ButtonId.ERASER: ("eraser", "sprites/eraser.png"),
    ButtonId.POLYGON: ("polygon", "sprites/polygon.png"),
    ButtonId.BUCKET: ("bucket", "sprites/bucket.png"),
    ButtonId.MINUS: ("minus", "sprites/minus.png"),
    ButtonId.PLUS: ("plus", "sprites/plus.png"),
}

_TOOL_FOR_BUTTON = {
    ButtonId.CIRCLE: 1,
    ButtonId.SQUARE: 3,
    ButtonId.ERASER: 4,
    ButtonId.POLYGON: 2,
    ButtonId.BUCKET: 5,
}


def _row_start() -> int:
    total = (BUTTON_SIZE + SPACING) * SLOTS - SPACING
    return (SCREEN_WIDTH - total) // 2


def _contains(rect: Rect, x: float, y: float) -> bool:
    rx, ry, w, h = rect
    return rx <= x < rx + w and ry <= y < ry + h


@dataclass
class Button:
    """A toolbar button with its sprite path and screen rectangle."""

    id: ButtonId
    name: str
    sprite: str
    x: int
    y: int
    width: int = BUTTON_SIZE
    height: int = BUTTON_SIZE

    @property
    def rect(self) -> Rect:
        return (self.x, self.y, self.width, self.height)

    def contains(self, x: float, y: float) -> bool:
        """True if the point lies within the button."""
        return _contains(self.rect, x, y)


class Toolbar:
    """Tool buttons in one row and colour swatches in the row below."""

    def __init__(self) -> None:
        start = _row_start()
        self.buttons: List[Button] = [
            Button(
                id=button_id,
                name=name,
                sprite=sprite,
                x=start + slot * (BUTTON_SIZE + SPACING),
                y=BUTTON_ROW_Y,
            )
            for slot, (button_id, (name, sprite)) in enumerate(_BUTTON_SPECS.items())
        ]

    def swatches(self) -> List[Tuple[Rect, Color]]:
        """Rectangle and colour of every palette swatch, left to right."""
        start = _row_start()
        return [
            ((start + slot * (BUTTON_SIZE + SPACING), SWATCH_ROW_Y, BUTTON_SIZE, BUTTON_SIZE), color)
            for slot, color in enumerate(PALETTE)
        ]

    def click(self, x: float, y: float, editor) -> bool:
        """Apply a left click at ``(x, y)``; returns True if anything was hit."""
        hit = False
        state = editor.state
        for button in self.buttons:
            if not button.contains(x, y):
                continue
            hit = True
            if button.id in _TOOL_FOR_BUTTON:
                editor.switch_tool(_TOOL_FOR_BUTTON[button.id])
            elif button.id is ButtonId.LINE:
                state.dotted = False
                editor.switch_tool(0)
            elif button.id is ButtonId.DOTTED_LINE:
                state.dotted = True
                editor.switch_tool(0)
            elif button.id is ButtonId.MINUS:
                if state.size + 1 <= MAX_EDITOR_SIZE:
                    state.size += 1
            elif button.id is ButtonId.PLUS:
                if state.size - 1 > 0:
                    state.size -= 1
        for rect, color in self.swatches():
            if _contains(rect, x, y):
                state.color = color
                hit = True
        return hit