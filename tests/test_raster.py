import math

import pytest

from pixpaint.canvas import BLACK, RED, PixelBuffer
from pixpaint.geometry import PIXELBUFFER_HEIGHT, PIXELBUFFER_WIDTH
from pixpaint.raster import (
    DASH_LENGTH,
    GAP_LENGTH,
    draw_circle,
    draw_line,
    draw_polygon,
    draw_square,
    snap_to,
)


class Recorder:
    def __init__(self):
        self.points = []
        self.colors = set()

    def __call__(self, x, y, color):
        self.points.append((x, y))
        self.colors.add(color)

    @property
    def unique(self):
        return set(self.points)


def test_horizontal_line_covers_every_column():
    rec = Recorder()
    draw_line((0, 0), (10, 0), RED, rec)
    assert rec.unique == {(x, 0) for x in range(11)}
    assert rec.colors == {RED}


def test_line_direction_does_not_change_pixels_for_axis_lines():
    fwd, back = Recorder(), Recorder()
    draw_line((5, 20), (5, 40), BLACK, fwd)
    draw_line((5, 40), (5, 20), BLACK, back)
    assert fwd.unique == back.unique == {(5, y) for y in range(20, 41)}


def test_line_includes_endpoints_and_pixel_count():
    rec = Recorder()
    start, end = (3, 7), (40, 22)
    draw_line(start, end, BLACK, rec)
    assert start in rec.unique and end in rec.unique
    assert len(rec.points) == max(abs(40 - 3), abs(22 - 7)) + 1


def test_thick_horizontal_line_spreads_vertically():
    rec = Recorder()
    draw_line((10, 50), (12, 50), BLACK, rec, width=3)
    assert rec.unique == {(x, y) for x in range(10, 13) for y in range(49, 52)}


def test_thick_steep_line_spreads_horizontally():
    rec = Recorder()
    draw_line((50, 10), (50, 12), BLACK, rec, width=3)
    assert rec.unique == {(x, y) for x in range(49, 52) for y in range(10, 13)}


def test_width_below_one_treated_as_one():
    thin, zero = Recorder(), Recorder()
    draw_line((0, 0), (9, 4), BLACK, thin, width=1)
    draw_line((0, 0), (9, 4), BLACK, zero, width=0)
    assert thin.points == zero.points


def test_dotted_line_alternates_dash_and_gap():
    rec = Recorder()
    period = DASH_LENGTH + GAP_LENGTH
    length = 2 * period
    draw_line((0, 0), (length, 0), BLACK, rec, dotted=True)
    expected = {(x, 0) for x in range(length + 1) if x % period < DASH_LENGTH}
    assert rec.unique == expected


def test_circle_points_lie_near_radius_and_are_symmetric():
    rec = Recorder()
    center, radius = (100, 100), 20
    draw_circle(center, radius, RED, rec)
    for x, y in rec.unique:
        assert abs(math.hypot(x - 100, y - 100) - radius) <= 1
        assert (200 - x, y) in rec.unique
        assert (x, 200 - y) in rec.unique
    assert (100, 120) in rec.unique and (120, 100) in rec.unique


def test_circle_radius_zero_plots_center():
    rec = Recorder()
    draw_circle((30, 40), 0, RED, rec)
    assert rec.unique == {(30, 40)}


def test_circle_with_invalid_center_draws_nothing():
    rec = Recorder()
    draw_circle((-1, 40), 10, RED, rec)
    draw_circle((PIXELBUFFER_WIDTH, 40), 10, RED, rec)
    assert rec.points == []


def test_circle_into_pixel_buffer():
    buf = PixelBuffer()
    draw_circle((50, 50), 10, RED, buf.set_pixel)
    assert buf.get_pixel(60, 50) == RED
    assert buf.get_pixel(50, 40) == RED


def test_empty_polygon_draws_nothing():
    rec = Recorder()
    draw_polygon([], BLACK, rec)
    assert rec.points == []


def test_polygon_passes_through_vertices_and_closes():
    rec = Recorder()
    vertices = [(10, 10), (50, 10), (30, 40)]
    draw_polygon(vertices, BLACK, rec)
    assert set(vertices) <= rec.unique
    closing = Recorder()
    draw_line(vertices[0], vertices[-1], BLACK, closing)
    assert closing.unique <= rec.unique


def test_square_outline():
    rec = Recorder()
    draw_square((10, 20), (15, 24), BLACK, rec)
    expected = {
        (x, y)
        for x in range(10, 16)
        for y in range(20, 25)
        if x in (10, 15) or y in (20, 24)
    }
    assert rec.unique == expected


def test_square_with_swapped_corners_is_same():
    a, b = Recorder(), Recorder()
    draw_square((10, 20), (30, 45), BLACK, a)
    draw_square((30, 45), (10, 20), BLACK, b)
    assert a.unique == b.unique


def test_snap_nearly_horizontal_becomes_horizontal():
    x, y = snap_to((100, 100), (200, 105))
    assert y == 100
    assert 199 <= x <= 201


def test_snap_nearly_diagonal_becomes_diagonal():
    x, y = snap_to((100, 100), (150, 148))
    assert x - 100 == pytest.approx(y - 100, abs=1)
    assert x > 100


def test_snap_vertical_stays_on_column():
    x, y = snap_to((300, 300), (302, 200))
    assert x == 300
    assert y < 300


def test_snap_is_limited_by_canvas_edge():
    assert snap_to((790, 100), (2000, 100)) == (float(PIXELBUFFER_WIDTH), 100.0)
    x, y = snap_to((100, 650), (100, 5000))
    assert (x, y) == (100.0, float(PIXELBUFFER_HEIGHT))


def test_snap_result_stays_in_bounds():
    for target in [(-500, -500), (5000, -30), (-20, 4000), (5000, 5000)]:
        x, y = snap_to((400, 350), target)
        assert 0 <= x <= PIXELBUFFER_WIDTH
        assert 0 <= y <= PIXELBUFFER_HEIGHT