# pixpaint

A small raster paint program. You draw on an 800×700 canvas with a handful of
tools. A toolbar and a colour palette sit along the bottom of an 800×800 window.

## Installation

```
pip install .
```

## Running

```
pixpaint
```

The window stays open until you close it or press Escape.

The toolbar looks for button images at `sprites/circle.png`, `sprites/square.png`,
`sprites/line.png`, `sprites/dashed-line.png`, `sprites/eraser.png`,
`sprites/polygon.png`, `sprites/bucket.png`, `sprites/minus.png` and
`sprites/plus.png`, relative to the current directory. If an image is missing,
its button is drawn as an outlined box with a short text label.

## Tools

The toolbar buttons, from left to right, are circle, square, line, dashed line,
eraser, polygon, bucket fill, "minus" and "plus". The "minus" button makes the
brush bigger and the "plus" button makes it smaller. The size stays between 1
and 50. The row below the buttons is the colour palette: red, orange, yellow,
green, sky blue, blue, purple, pink, brown and white. The starting colour is
black.

While you draw, the shape appears as a preview over the canvas. It is written
to the canvas only when you press Enter.

- **Line / dashed line**: press the left button, drag, then release. The line is
  as thick as the brush size. Press the right button near an end point and drag
  to move that end. When snapping is on, the line points in the nearest 45°
  direction.
- **Circle**: drag from the centre outwards. Press the right button near the
  centre or near the rim and drag to change it. Enter commits the circle once
  both the centre and a rim point lie on the canvas.
- **Polygon**: each left click on the canvas adds a vertex, up to 100 vertices.
  While the button is still held you can drag the new vertex. Press the right
  button near an existing vertex and drag to move it. Enter commits the polygon.
- **Square**: drag out an axis-aligned rectangle. Press the right button near a
  corner and drag to move it. Enter commits the rectangle.
- **Eraser**: a red square the size of the brush follows the cursor. Pressing,
  holding or releasing a mouse button erases that square to transparent.
- **Fill**: a left click flood-fills the 4-connected region of the same colour
  under the cursor with the current colour.

Changing tool discards any shape that has not been committed.

## Keys

| Key    | Action                                              |
|--------|-----------------------------------------------------|
| Space  | toggle 45° snapping for lines                       |
| C      | clear the canvas                                    |
| 1 / 2  | go to the next or the previous tool                 |
| P / M  | make the brush bigger or smaller (1–50)             |
| Enter  | commit the shape being drawn                        |
| Escape | quit the program                                    |

## Using it as a library

The drawing routines in `pixpaint.raster` (`draw_line`, `draw_circle`,
`draw_polygon`, `draw_square`, `snap_to`) do not depend on pygame. Each one
takes a `plot(x, y, color)` callable:

```python
from pixpaint.canvas import Color, PixelBuffer
from pixpaint.raster import draw_circle, draw_line

buffer = PixelBuffer()
black = Color(0, 0, 0, 255)
draw_line((10, 10), (100, 40), black, buffer.set_pixel, width=3, dotted=False)
draw_circle((200, 200), 50, black, buffer.set_pixel)
print(buffer.get_pixel(10, 10))
```

`PixelBuffer.set_pixel` ignores points outside the 800×700 drawable area.
`get_pixel` raises `IndexError` for such points. `pixpaint.tools.flood_fill`
fills a region of a buffer directly.

`pixpaint.controller.Editor` runs the editor without a window. It holds a
`buffer`, a preview `overlay`, the settings in `state`, and the six tools.
Call `Editor.step(key, pressed, released, down)` once per frame, passing a
`pixpaint.tools.Key` (or `None`) and sets of `pixpaint.tools.MouseButton`.
Set `editor.state.mouse` to the cursor position beforehand. The results are
in `editor.buffer`. With the `Editor`, `Key.ESCAPE` discards the shape being
drawn. The `pixpaint.ui.Toolbar` class lays out the buttons and swatches, and
`Toolbar.click(x, y, editor)` applies a click to an editor.

## What it does not do

pixpaint cannot open or save image files, and it has no undo. A drawing exists
only while the window is open.