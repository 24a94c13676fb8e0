"""Window, event loop and rendering of the paint editor."""

from __future__ import annotations

import argparse
import os
from typing import Dict, List, Optional

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from pixpaint.canvas import BLACK, WHITE, is_point_valid  # noqa: E402
from pixpaint.controller import Editor  # noqa: E402
from pixpaint.geometry import (  # noqa: E402
    PIXELBUFFER_HEIGHT,
    PIXELBUFFER_WIDTH,
    SCREEN_HEIGHT,
    SCREEN_TITLE,
    SCREEN_WIDTH,
    clamp,
)
from pixpaint.tools import Key, MouseButton  # noqa: E402
from pixpaint.ui import Button, Toolbar  # noqa: E402

FPS = 60

_KEYS: Dict[int, Key] = {
    pygame.K_RETURN: Key.ENTER,
    pygame.K_ESCAPE: Key.ESCAPE,
    pygame.K_SPACE: Key.SPACE,
    pygame.K_c: Key.C,
    pygame.K_1: Key.ONE,
    pygame.K_2: Key.TWO,
    pygame.K_p: Key.P,
    pygame.K_m: Key.M,
}

_MOUSE_BUTTONS = {1: MouseButton.LEFT, 3: MouseButton.RIGHT}


def translate_key(pygame_key: int) -> Optional[Key]:
    """Map a pygame key code to an editor key, or None if it has no role."""
    return _KEYS.get(pygame_key)


def _load_sprites(buttons: List[Button]) -> Dict[str, pygame.Surface]:
    sprites = {}
    for button in buttons:
        if not os.path.exists(button.sprite):
            continue
        try:
            sprites[button.name] = pygame.image.load(button.sprite).convert_alpha()
        except pygame.error:
            continue
    return sprites


def _draw_toolbar(screen, toolbar: Toolbar, sprites, font) -> None:
    for button in toolbar.buttons:
        sprite = sprites.get(button.name)
        if sprite is not None:
            screen.blit(sprite, (button.x, button.y))
        else:
            pygame.draw.rect(screen, BLACK, button.rect, 1)
            label = font.render(button.name[:3], True, BLACK)
            screen.blit(label, label.get_rect(center=pygame.Rect(button.rect).center))
    for rect, color in toolbar.swatches():
        pygame.draw.rect(screen, color, rect)
        pygame.draw.rect(screen, BLACK, rect, 1)


def _render(screen, editor: Editor, canvas, toolbar, sprites, font) -> None:
    screen.fill(WHITE)
    screen.blit(canvas, (0, 0))
    for (x, y), color in editor.overlay.pixels.items():
        screen.set_at((x, y), color)
    _draw_toolbar(screen, toolbar, sprites, font)
    pygame.display.flip()


def _canvas_surface(editor: Editor) -> pygame.Surface:
    return pygame.image.frombuffer(
        bytes(editor.buffer.pixels), (SCREEN_WIDTH, SCREEN_HEIGHT), "RGBA"
    )


def main(argv=None) -> int:
    """Open the editor window and run until it is closed or Escape is pressed."""
    parser = argparse.ArgumentParser(prog="pixpaint", description=SCREEN_TITLE)
    parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption(SCREEN_TITLE)
        clock = pygame.time.Clock()
        font = pygame.font.Font(None, 14)

        editor = Editor()
        toolbar = Toolbar()
        sprites = _load_sprites(toolbar.buttons)
        canvas = _canvas_surface(editor)

        running = True
        while running:
            key: Optional[Key] = None
            pressed, released = set(), set()
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif key is None:
                        key = translate_key(event.key)
                elif event.type == pygame.MOUSEBUTTONDOWN:
                    if event.button in _MOUSE_BUTTONS:
                        pressed.add(_MOUSE_BUTTONS[event.button])
                elif event.type == pygame.MOUSEBUTTONUP:
                    if event.button in _MOUSE_BUTTONS:
                        released.add(_MOUSE_BUTTONS[event.button])
            if not running:
                break

            held = pygame.mouse.get_pressed()
            down = set()
            if held[0]:
                down.add(MouseButton.LEFT)
            if held[2]:
                down.add(MouseButton.RIGHT)

            mx, my = pygame.mouse.get_pos()
            editor.state.out_of_bounds = not is_point_valid((mx, my))
            editor.state.mouse = (
                float(clamp(mx, 0, PIXELBUFFER_WIDTH)),
                float(clamp(my, 0, PIXELBUFFER_HEIGHT)),
            )

            if MouseButton.LEFT in pressed:
                toolbar.click(mx, my, editor)
            editor.step(key, pressed, released, down)

            if editor.buffer.has_changed:
                canvas = _canvas_surface(editor)
                editor.buffer.has_changed = False
            _render(screen, editor, canvas, toolbar, sprites, font)
            clock.tick(FPS)
    finally:
        pygame.quit()
    return 0