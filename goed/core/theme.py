"""Editor themes: colour styles and styled characters read from TOML files."""

from __future__ import annotations

import re
import tomllib
from dataclasses import dataclass, field, fields
from enum import IntFlag
from pathlib import Path
from typing import Any

_HEX = re.compile(r"[0-9A-Fa-f]+")
_MAX_UINT32 = 0xFFFFFFFF


class ThemeError(Exception):
    """Raised when no usable theme file could be read."""


class Attr(IntFlag):
    """Text attributes stored in the high byte of a style."""

    PLAIN = 1 << 8
    BOLD = 1 << 9
    UNDERLINED = 1 << 10


@dataclass(frozen=True)
class Style:
    """A colour (low byte) and an attribute (high byte) packed in 16 bits."""

    value: int = 0

    def with_attr(self, attr: int) -> Style:
        """Return a copy of this style with the given attribute added."""
        return Style((self.value | int(attr)) & 0xFFFF)

    def color(self) -> int:
        """The colour index of this style."""
        return self.value & 0xFF

    def is_bold(self) -> bool:
        return self.value & 0xF00 == Attr.BOLD

    def is_underlined(self) -> bool:
        return self.value & 0xF00 == Attr.UNDERLINED


def parse_style(text: str | bytes, colors: int = 256) -> Style:
    """Parse a style stored as eight hexadecimal digits.

    The two low bits give the attribute; the colour is picked from the byte
    that matches the number of colours in use (256, 16, or else 2).
    """
    if isinstance(text, bytes):
        text = text.decode("utf-8")
    if not _HEX.fullmatch(text):
        raise ValueError(f"invalid style: {text!r}")
    parsed = int(text, 16)
    if parsed > _MAX_UINT32:
        raise ValueError(f"style out of range: {text!r}")
    value = (parsed & 0x3) << 8
    if colors == 256:
        value |= (parsed & 0xFF000000) >> 24
    elif colors == 16:
        value |= (parsed & 0x0F0000) >> 16
    else:
        value |= (parsed & 0x0F00) >> 8
    return Style(value)


@dataclass(frozen=True)
class StyledRune:
    """A character drawn with a foreground and a background style."""

    rune: str = "\x00"
    fg: Style = field(default_factory=Style)
    bg: Style = field(default_factory=Style)


def parse_styled_rune(text: str | bytes, colors: int = 256) -> StyledRune:
    """Parse a styled character written as ``char,fg,bg``.

    An unparsable foreground falls back to the empty style and an unparsable
    background to the foreground.
    """
    if isinstance(text, bytes):
        text = text.decode("utf-8")
    parts = text.split(",")
    if len(parts) < 3:
        raise ValueError(f"invalid styled rune: {text!r}")
    rune = parts[0][0] if parts[0] else "\ufffd"
    try:
        fg = parse_style(parts[1], colors)
    except ValueError:
        fg = Style()
    try:
        bg = parse_style(parts[2], colors)
    except ValueError:
        bg = fg
    return StyledRune(rune, fg, bg)


@dataclass
class Theme:
    """The styles of every part of the editor UI."""

    bg: Style = field(default_factory=Style)
    fg: Style = field(default_factory=Style)
    bg_select: Style = field(default_factory=Style)
    fg_select: Style = field(default_factory=Style)
    bg_cursor: Style = field(default_factory=Style)
    fg_cursor: Style = field(default_factory=Style)

    comment: Style = field(default_factory=Style)
    string: Style = field(default_factory=Style)
    number: Style = field(default_factory=Style)
    keyword1: Style = field(default_factory=Style)
    keyword2: Style = field(default_factory=Style)
    keyword3: Style = field(default_factory=Style)
    symbol1: Style = field(default_factory=Style)
    symbol2: Style = field(default_factory=Style)
    symbol3: Style = field(default_factory=Style)
    separator1: Style = field(default_factory=Style)
    separator2: Style = field(default_factory=Style)
    separator3: Style = field(default_factory=Style)

    file_clean: StyledRune = field(default_factory=StyledRune)
    file_dirty: StyledRune = field(default_factory=StyledRune)
    scrollbar: StyledRune = field(default_factory=StyledRune)
    scroll_tab: StyledRune = field(default_factory=StyledRune)
    statusbar: StyledRune = field(default_factory=StyledRune)
    statusbar_text: Style = field(default_factory=Style)
    statusbar_text_err: Style = field(default_factory=Style)
    cmdbar: StyledRune = field(default_factory=StyledRune)
    cmdbar_text: Style = field(default_factory=Style)
    cmdbar_text_on: Style = field(default_factory=Style)
    viewbar: StyledRune = field(default_factory=StyledRune)
    viewbar_text: Style = field(default_factory=Style)
    more_text_side: StyledRune = field(default_factory=StyledRune)
    more_text_up: StyledRune = field(default_factory=StyledRune)
    more_text_down: StyledRune = field(default_factory=StyledRune)
    tab_char: StyledRune = field(default_factory=StyledRune)
    margin: StyledRune = field(default_factory=StyledRune)
    close: StyledRune = field(default_factory=StyledRune)


# Theme keys match field names without regard to case or underscores.
_THEME_KEYS = {f.name.replace("_", ""): (f.name, f.type == "StyledRune") for f in fields(Theme)}


def _load_theme(path: str | Path, colors: int) -> Theme:
    with open(path, "rb") as f:
        data: dict[str, Any] = tomllib.load(f)
    values = {}
    for key, raw in data.items():
        entry = _THEME_KEYS.get(key.lower())
        if entry is None:
            continue
        name, is_rune = entry
        if not isinstance(raw, str):
            raise ValueError(f"theme entry {key!r} must be a string")
        values[name] = parse_styled_rune(raw, colors) if is_rune else parse_style(raw, colors)
    return Theme(**values)


def read_theme(
    path: str | Path, default_path: str | Path | None = None, colors: int = 256
) -> Theme:
    """Read a theme file, falling back to ``default_path`` if it cannot be read."""
    try:
        return _load_theme(path, colors)
    except (OSError, ValueError) as err:
        if default_path is None or Path(default_path) == Path(path):
            raise ThemeError(f"could not read theme {path}: {err}") from err
        return read_theme(default_path, None, colors)


def read_default_theme(home: str | Path, colors: int = 256) -> Theme:
    """Read the bundled default theme under the editor home."""
    return read_theme(Path(home) / "default" / "themes" / "default.toml", None, colors)