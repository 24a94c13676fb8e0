import pytest

from pixpaint.canvas import BLACK, TRANSPARENT, Color
from pixpaint.controller import Editor, classify_mouse
from pixpaint.geometry import MAX_EDITOR_SIZE
from pixpaint.tools import INVALID_POINT, Key, MouseButton, MouseEvent

L = MouseButton.LEFT
R = MouseButton.RIGHT


def test_classify_idle():
    assert classify_mouse(set(), set(), set()) == (L, MouseEvent.IDLE)


def test_classify_press_wins_over_drag():
    assert classify_mouse({R}, set(), {L}) == (R, MouseEvent.PRESS)


def test_classify_left_before_right():
    assert classify_mouse({L, R}, set(), set()) == (L, MouseEvent.PRESS)


def test_classify_release_and_drag():
    assert classify_mouse(set(), {R}, {L}) == (R, MouseEvent.RELEASE)
    assert classify_mouse(set(), set(), {R}) == (R, MouseEvent.DRAG)


def test_editor_defaults():
    editor = Editor()
    assert editor.state.tool_index == 0
    assert editor.state.color == BLACK
    assert len(editor.tools) == 6


def test_space_toggles_snap():
    editor = Editor()
    assert editor.handle_key(Key.SPACE) is True
    assert editor.state.snap is True
    editor.handle_key(Key.SPACE)
    assert editor.state.snap is False


def test_next_and_previous_tool_bounds():
    editor = Editor()
    editor.handle_key(Key.TWO)
    assert editor.state.tool_index == 0
    for _ in range(10):
        editor.handle_key(Key.ONE)
    assert editor.state.tool_index == len(editor.tools) - 1
    editor.handle_key(Key.TWO)
    assert editor.state.tool_index == len(editor.tools) - 2


def test_size_limits():
    editor = Editor()
    for _ in range(100):
        editor.handle_key(Key.P)
    assert editor.state.size == MAX_EDITOR_SIZE
    for _ in range(100):
        editor.handle_key(Key.M)
    assert editor.state.size == 1


def test_clear_key_empties_canvas():
    editor = Editor()
    editor.buffer.set_pixel(3, 4, Color(1, 2, 3))
    assert editor.handle_key(Key.C) is True
    assert editor.buffer.get_pixel(3, 4) == TRANSPARENT


def test_non_global_key_goes_to_tool():
    editor = Editor()
    assert editor.handle_key(Key.ENTER) is False
    assert editor.handle_key(None) is False


def test_draw_and_commit_line():
    editor = Editor()
    editor.state.mouse = (10.0, 10.0)
    editor.step(None, {L}, set(), {L})
    editor.state.mouse = (20.0, 10.0)
    editor.step(None, set(), set(), {L})
    assert (15, 10) in editor.overlay
    editor.step(None, set(), {L}, set())
    editor.step(Key.ENTER, set(), set(), set())
    assert editor.buffer.get_pixel(15, 10) == BLACK
    assert len(editor.overlay) == 0


def test_global_key_skips_mouse():
    editor = Editor()
    editor.state.mouse = (10.0, 10.0)
    editor.step(Key.SPACE, {L}, set(), {L})
    assert editor.session.point1 == INVALID_POINT


def test_switch_tool_resets_session():
    editor = Editor()
    editor.state.mouse = (10.0, 10.0)
    editor.step(None, {L}, set(), {L})
    assert editor.session.point1 == (10.0, 10.0)
    editor.switch_tool(1)
    assert editor.state.tool_index == 1
    assert editor.session.point1 == INVALID_POINT


def test_switch_tool_out_of_range():
    editor = Editor()
    with pytest.raises(IndexError):
        editor.switch_tool(len(editor.tools))
    with pytest.raises(IndexError):
        editor.switch_tool(-1)