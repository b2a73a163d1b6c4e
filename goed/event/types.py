"""Editor event types and the key bindings that trigger them."""

from __future__ import annotations

import logging
import tomllib
from enum import StrEnum
from pathlib import Path

log = logging.getLogger("goed")


class EventType(StrEnum):
    """An editor action that an input event can trigger."""

    NONE = "_"
    BACKSPACE = "backspace"
    BOTTOM = "bottom"
    CLOSE_WINDOW = "close_window"
    CUT = "cut"
    COPY = "copy"
    DELETE = "delete"
    DELETE_HOME = "delete_home"
    END = "end"
    HOME = "home"
    ENTER = "enter"
    MOVE_DOWN = "move_down"
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    MOVE_UP = "move_up"
    NAV_DOWN = "nav_down"
    NAV_LEFT = "nav_left"
    NAV_RIGHT = "nav_right"
    NAV_UP = "nav_up"
    OPEN_IN_NEW_VIEW = "open_in_new_view"
    OPEN_IN_SAME_VIEW = "open_in_same_view"
    OPEN_TERM = "open_term"
    PASTE = "paste"
    PAGE_DOWN = "page_down"
    PAGE_UP = "page_up"
    QUIT = "quit"
    REDO = "redo"
    RELOAD = "reload"
    SAVE = "save"
    SCROLL_DOWN = "scroll_down"
    SCROLL_UP = "scroll_up"
    SELECT_MOUSE = "select_mouse"
    SELECT_ALL = "select_all"
    SELECT_DOWN = "select_down"
    SELECT_END = "select_end"
    SELECT_HOME = "select_home"
    SELECT_LEFT = "select_left"
    SELECT_PAGE_DOWN = "select_page_down"
    SELECT_PAGE_UP = "select_page_up"
    SELECT_RIGHT = "select_right"
    SELECT_UP = "select_up"
    SELECT_WORD = "select_word"
    SET_CURSOR = "set_cursor"
    TAB = "tab"
    TOGGLE_CMDBAR = "toggle_cmd_bar"
    TOP = "top"
    UNDO = "undo"
    WIN_RESIZE = "win_resize"


_E = EventType

# Bindings used when no bindings file can be read.
DEFAULT_BINDINGS: dict[str, EventType] = {
    # mouse
    "MC1": _E.SET_CURSOR,  # left click
    "MC4": _E.OPEN_IN_NEW_VIEW,  # right click
    "MC8": _E.SCROLL_UP,  # wheel up
    "MC16": _E.SCROLL_DOWN,  # wheel down
    "MD1": _E.SELECT_MOUSE,  # drag
    "MDC1": _E.SELECT_WORD,  # left double click
    # special keys
    "escape": _E.TOGGLE_CMDBAR,
    "backspace": _E.BACKSPACE,
    "enter": _E.ENTER,
    "return": _E.ENTER,
    "tab": _E.TAB,
    "delete": _E.DELETE,
    # control sequences
    "ctrl+a": _E.HOME,
    "ctrl+b": _E.SELECT_ALL,
    "ctrl+c": _E.COPY,
    "ctrl+e": _E.END,
    "ctrl+h": _E.MOVE_LEFT,
    "ctrl+j": _E.MOVE_RIGHT,
    "ctrl+k": _E.MOVE_UP,
    "ctrl+l": _E.MOVE_DOWN,
    "ctrl+o": _E.OPEN_IN_SAME_VIEW,
    "ctrl+n": _E.OPEN_IN_NEW_VIEW,
    "ctrl+q": _E.QUIT,
    "ctrl+r": _E.RELOAD,
    "ctrl+s": _E.SAVE,
    "ctrl+t": _E.OPEN_TERM,
    "ctrl+u": _E.DELETE_HOME,
    "ctrl+v": _E.PASTE,
    "ctrl+w": _E.CLOSE_WINDOW,
    "ctrl+x": _E.CUT,
    "ctrl+y": _E.REDO,
    "ctrl+z": _E.UNDO,
    # movement
    "right_arrow": _E.MOVE_RIGHT,
    "left_arrow": _E.MOVE_LEFT,
    "up_arrow": _E.MOVE_UP,
    "down_arrow": _E.MOVE_DOWN,
    "prior": _E.PAGE_UP,
    "next": _E.PAGE_DOWN,
    "home": _E.HOME,
    "end": _E.END,
    "shift+right_arrow": _E.SELECT_RIGHT,
    "shift+left_arrow": _E.SELECT_LEFT,
    "shift+up_arrow": _E.SELECT_UP,
    "shift+down_arrow": _E.SELECT_DOWN,
    "shift+prior": _E.SELECT_PAGE_UP,
    "shift+next": _E.SELECT_PAGE_DOWN,
    "shift+home": _E.SELECT_HOME,
    "shift+end": _E.SELECT_END,
    # navigation
    "alt+right_arrow": _E.NAV_RIGHT,
    "alt+left_arrow": _E.NAV_LEFT,
    "alt+down_arrow": _E.NAV_DOWN,
    "alt+up_arrow": _E.NAV_UP,
    "super+right_arrow": _E.NAV_RIGHT,  # alt+arrow arrives as super+arrow on some systems
    "super+left_arrow": _E.NAV_LEFT,
    "super+down_arrow": _E.NAV_DOWN,
    "super+up_arrow": _E.NAV_UP,
}


def load_bindings(path: str | Path) -> dict[str, EventType]:
    """Read chord-to-event bindings from a TOML file.

    Falls back to the default bindings if the file cannot be read or holds a
    non-string value; entries naming unknown events are skipped.
    """
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
        if not all(isinstance(v, str) for v in data.values()):
            raise ValueError("binding values must be strings")
    except (OSError, tomllib.TOMLDecodeError, ValueError) as err:
        log.warning("Could not load bindings %s: %s", path, err)
        return dict(DEFAULT_BINDINGS)
    bindings = {}
    for chord, name in data.items():
        try:
            bindings[chord] = EventType(name)
        except ValueError:
            log.warning("Unknown event type %r bound to %r", name, chord)
    return bindings