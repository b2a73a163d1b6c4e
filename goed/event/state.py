"""The state of keyboard and mouse input, and its matching against key bindings."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace

from goed.event.keys import (
    KEY_FUNCTION,
    KEY_LEFT_CONTROL,
    KEY_RIGHT_CONTROL,
    MODIFIER_KEYS,
    MouseButton,
)
from goed.event.types import DEFAULT_BINDINGS, EventType

# Chord modifier tokens and the Combo flags any of which satisfies them.
_CHORD_MODIFIERS: dict[str, tuple[str, ...]] = {
    KEY_FUNCTION: ("func",),
    "ctrl": ("lctrl", "rctrl"),
    KEY_LEFT_CONTROL: ("lctrl",),
    KEY_RIGHT_CONTROL: ("rctrl",),
    "alt": ("lalt", "ralt"),
    "lalt": ("lalt",),
    "ralt": ("ralt",),
    "super": ("lsuper", "rsuper"),
    "lsuper": ("lsuper",),
    "rsuper": ("rsuper",),
    "shift": ("lshift", "rshift"),
    "lshift": ("lshift",),
    "rshift": ("rshift",),
}

# Order in which held modifiers are written out.
_COMBO_ORDER = ("lsuper", "rsuper", "lshift", "rshift", "lalt", "ralt", "lctrl", "rctrl", "func")


@dataclass
class Combo:
    """Which modifier keys are held down."""

    lsuper: bool = False
    rsuper: bool = False
    lshift: bool = False
    rshift: bool = False
    lalt: bool = False
    ralt: bool = False
    lctrl: bool = False
    rctrl: bool = False
    func: bool = False


@dataclass
class Event:
    """The current input state: keys and buttons held, pointer position, drag state."""

    type: EventType = EventType.NONE
    glyph: str = ""
    keys: list[str] = field(default_factory=list)
    combo: Combo = field(default_factory=Combo)
    mouse_btns: dict[MouseButton, bool] = field(default_factory=dict)
    mouse_y: int = 0
    mouse_x: int = 0
    in_drag: bool = False
    drag_ln: int = 0  # selection start point
    drag_col: int = 0
    dbl_click: bool = False

    def clone(self) -> Event:
        """An independent copy of this event."""
        return replace(
            self,
            keys=list(self.keys),
            combo=replace(self.combo),
            mouse_btns=dict(self.mouse_btns),
        )

    def has_mouse(self) -> bool:
        """Whether any mouse button is down."""
        return any(self.mouse_btns.values())

    def parse_type(self, bindings: Mapping[str, EventType] | None = None) -> EventType:
        """Set (and return) the type of the binding that best matches this event."""
        if bindings is None:
            bindings = DEFAULT_BINDINGS
        best_score = 0
        best = EventType.NONE
        for chord, event_type in bindings.items():
            score = self.score_match(chord)
            if score > best_score:
                best, best_score = event_type, score
        self.type = best
        return best

    def key_down(self, key: str) -> None:
        self._update_key(key, True)
        self.in_drag = False

    def key_up(self, key: str) -> None:
        self._update_key(key, False)

    def mouse_up(self, button: MouseButton, y: int, x: int) -> None:
        self.mouse_btns[button] = False
        self.in_drag = False

    def mouse_down(self, button: MouseButton, y: int, x: int) -> None:
        """Record a button press; pressing again while held starts a drag."""
        if self.mouse_btns.get(button, False) and (
            not self.in_drag or self.mouse_x != x or self.mouse_y != y
        ):
            self.in_drag = True
        self.mouse_y, self.mouse_x = y, x
        self.mouse_btns[button] = True
        if not self.in_drag:
            self.drag_ln, self.drag_col = -1, -1

    def _update_key(self, key: str, is_down: bool) -> None:
        flag = MODIFIER_KEYS.get(key)
        if flag is not None:
            setattr(self.combo, flag, is_down)
        elif is_down:
            if key not in self.keys:
                self.keys.append(key)
        elif key in self.keys:
            self.keys.remove(key)

    def has_key(self, key: str) -> bool:
        return key in self.keys

    def _mouse_prefix(self) -> str:
        if self.dbl_click:
            return "MDC"
        if self.in_drag:
            return "MD"
        return "MC"

    def score_match(self, chord: str) -> int:
        """How many parts of a ``+``-separated chord match; 0 if any part does not."""
        score = 0
        for part in chord.split("+"):
            if part.startswith("M"):
                prefix = self._mouse_prefix()
                if not any(
                    down and f"{prefix}{int(btn)}" == part
                    for btn, down in self.mouse_btns.items()
                ):
                    return 0
            elif part in _CHORD_MODIFIERS:
                if not any(getattr(self.combo, f) for f in _CHORD_MODIFIERS[part]):
                    return 0
            elif not self.has_key(part):
                return 0
            score += 1
        return score

    def __str__(self) -> str:
        prefix = self._mouse_prefix()
        parts = [f"{prefix}{int(btn)}" for btn, down in self.mouse_btns.items() if down]
        parts.extend(name for name in _COMBO_ORDER if getattr(self.combo, name))
        parts.extend(self.keys)
        return "+".join(parts)