from goed.event.keys import (
    KEY_LEFT_CONTROL,
    KEY_LEFT_SHIFT,
    KEY_RIGHT_ARROW,
    MouseButton,
)
from goed.event.state import Combo, Event
from goed.event.types import EventType


def ctrl_event(key):
    e = Event()
    e.key_down(KEY_LEFT_CONTROL)
    e.key_down(key)
    return e


def test_modifier_keys_set_combo_not_keys():
    e = Event()
    e.key_down(KEY_LEFT_CONTROL)
    assert e.combo.lctrl is True
    assert e.keys == []
    e.key_up(KEY_LEFT_CONTROL)
    assert e.combo == Combo()


def test_key_down_and_up():
    e = Event()
    e.key_down("a")
    e.key_down("a")
    e.key_down("b")
    assert e.keys == ["a", "b"]
    assert e.has_key("a")
    e.key_up("a")
    assert e.keys == ["b"]
    assert not e.has_key("a")


def test_str_of_ctrl_chord():
    assert str(ctrl_event("s")) == "lctrl+s"


def test_parse_type_ctrl_save():
    e = ctrl_event("s")
    assert e.parse_type() is EventType.SAVE
    assert e.type is EventType.SAVE


def test_parse_type_prefers_longer_match():
    e = Event()
    e.key_down(KEY_LEFT_SHIFT)
    e.key_down(KEY_RIGHT_ARROW)
    assert e.score_match("right_arrow") == 1
    assert e.score_match("shift+right_arrow") == 2
    assert e.score_match("alt+right_arrow") == 0
    assert e.parse_type() is EventType.SELECT_RIGHT


def test_parse_type_unbound_is_none():
    e = Event()
    e.key_down("q")
    assert e.parse_type() is EventType.NONE


def test_parse_type_with_custom_bindings():
    e = ctrl_event("p")
    assert e.parse_type({"ctrl+p": EventType.QUIT}) is EventType.QUIT


def test_mouse_click_then_drag():
    e = Event()
    e.mouse_down(MouseButton.LEFT, 3, 4)
    assert e.has_mouse()
    assert not e.in_drag
    assert (e.drag_ln, e.drag_col) == (-1, -1)
    assert str(e) == "MC1"
    assert e.parse_type() is EventType.SET_CURSOR

    e.mouse_down(MouseButton.LEFT, 3, 5)
    assert e.in_drag
    assert (e.mouse_y, e.mouse_x) == (3, 5)
    assert str(e) == "MD1"
    assert e.parse_type() is EventType.SELECT_MOUSE


def test_mouse_up_ends_drag():
    e = Event()
    e.mouse_down(MouseButton.LEFT, 1, 1)
    e.mouse_down(MouseButton.LEFT, 1, 2)
    e.mouse_up(MouseButton.LEFT, 1, 2)
    assert not e.in_drag
    assert not e.has_mouse()


def test_key_down_ends_drag():
    e = Event()
    e.mouse_down(MouseButton.LEFT, 1, 1)
    e.mouse_down(MouseButton.LEFT, 1, 2)
    e.key_down("x")
    assert not e.in_drag


def test_double_click_selects_word():
    e = Event()
    e.mouse_down(MouseButton.LEFT, 2, 2)
    e.dbl_click = True
    assert str(e) == "MDC1"
    assert e.parse_type() is EventType.SELECT_WORD


def test_wheel_scrolls():
    e = Event()
    e.mouse_down(MouseButton.WHEEL_UP, 0, 0)
    assert e.parse_type() is EventType.SCROLL_UP


def test_mouse_chord_fails_without_button():
    e = Event()
    assert e.score_match("MC1") == 0


def test_clone_is_independent():
    e = ctrl_event("c")
    e.mouse_down(MouseButton.RIGHT, 1, 2)
    c = e.clone()
    assert c == e
    c.key_down("d")
    c.combo.lctrl = False
    c.mouse_btns[MouseButton.RIGHT] = False
    assert e.keys == ["c"]
    assert e.combo.lctrl is True
    assert e.mouse_btns[MouseButton.RIGHT] is True
    assert c != e