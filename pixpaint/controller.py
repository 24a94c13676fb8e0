"""Per-frame input dispatch: global shortcuts and routing to the active tool."""

from __future__ import annotations

import logging
from typing import Collection, List, Optional, Tuple

from pixpaint.canvas import PixelBuffer
from pixpaint.geometry import MAX_EDITOR_SIZE
from pixpaint.tools import (
    CircleTool,
    EditorState,
    EraserTool,
    FillTool,
    Key,
    LineTool,
    MouseButton,
    MouseEvent,
    Overlay,
    PolygonTool,
    SquareTool,
    Tool,
    ToolSession,
)

log = logging.getLogger(__name__)

_TOOL_TYPES = (LineTool, CircleTool, PolygonTool, SquareTool, EraserTool, FillTool)


def classify_mouse(
    pressed: Collection[MouseButton],
    released: Collection[MouseButton],
    down: Collection[MouseButton],
) -> Tuple[MouseButton, MouseEvent]:
    """Reduce a frame's mouse state to a single (button, event) pair.

    Presses win over releases, releases over held buttons, and the left
    button over the right.  With nothing happening the result is an idle
    left button.
    """
    for group, event in (
        (pressed, MouseEvent.PRESS),
        (released, MouseEvent.RELEASE),
        (down, MouseEvent.DRAG),
    ):
        for button in (MouseButton.LEFT, MouseButton.RIGHT):
            if button in group:
                return button, event
    return MouseButton.LEFT, MouseEvent.IDLE


class Editor:
    """The canvas, the preview overlay, the editor settings and the tools."""

    def __init__(self) -> None:
        self.buffer = PixelBuffer()
        self.state = EditorState()
        self.overlay = Overlay()
        self.session = ToolSession()
        self.tools: List[Tool] = [tool(self.session) for tool in _TOOL_TYPES]

    def switch_tool(self, index: int) -> None:
        """Make another tool active, dropping any shape under construction."""
        if not 0 <= index < len(self.tools):
            raise IndexError(f"no tool with index {index}")
        self.session.reset()
        self.overlay.clear()
        self.state.tool_index = index
        log.debug("current tool: %d", index)

    def handle_key(self, key: Optional[Key]) -> bool:
        """Apply a key press.

        Returns True when the key was a global shortcut, which ends input
        handling for the frame; otherwise the key goes to the active tool.
        """
        state = self.state
        if key is Key.SPACE:
            state.snap = not state.snap
            return True
        if key is Key.C:
            self.buffer.clear()
            self.overlay.clear()
            return True
        if key is Key.ONE:
            if state.tool_index + 1 < len(self.tools):
                self.switch_tool(state.tool_index + 1)
            return True
        if key is Key.TWO:
            if state.tool_index - 1 >= 0:
                self.switch_tool(state.tool_index - 1)
            return True
        if key is Key.P:
            if state.size + 1 <= MAX_EDITOR_SIZE:
                state.size += 1
            return True
        if key is Key.M:
            if state.size - 1 > 0:
                state.size -= 1
            return True
        self.tools[state.tool_index].handle_key(key, self.buffer, state, self.overlay)
        return False

    def handle_mouse(self, button: MouseButton, event: MouseEvent) -> None:
        """Pass a mouse event to the active tool."""
        self.tools[self.state.tool_index].handle_mouse(
            button, event, self.buffer, self.state, self.overlay
        )

    def step(
        self,
        key: Optional[Key],
        pressed: Collection[MouseButton],
        released: Collection[MouseButton],
        down: Collection[MouseButton],
    ) -> None:
        """Process one frame of keyboard and mouse input."""
        if self.handle_key(key):
            return
        button, event = classify_mouse(pressed, released, down)
        self.handle_mouse(button, event)