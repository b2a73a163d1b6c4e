"""The terminal interface, an in-memory terminal and terminal utilities."""

from __future__ import annotations

import sys
from typing import Protocol

from goed.core.theme import Style


class Term(Protocol):
    """A character terminal the editor draws on."""

    def init(self) -> None: ...

    def close(self) -> None: ...

    def clear(self, fg: Style, bg: Style) -> None: ...

    def char(self, y: int, x: int, c: str, fg: Style, bg: Style) -> None: ...

    def flush(self) -> None: ...

    def listen(self) -> None: ...

    def set_extended_colors(self, enabled: bool) -> None: ...

    def set_cursor(self, y: int, x: int) -> None: ...

    def size(self) -> tuple[int, int]: ...


class MockTerm:
    """An in-memory 25x50 terminal, for tests."""

    HEIGHT = 25
    WIDTH = 50

    def __init__(self) -> None:
        self.cursor: tuple[int, int] = (0, 0)
        self.initialized = False
        self.closed = False
        self.listening = False
        self.extended_colors = False
        self.flushes = 0
        self._text = self._blank()

    def _blank(self) -> list[list[str]]:
        return [["\x00"] * self.WIDTH for _ in range(self.HEIGHT)]

    def init(self) -> None:
        """Mark the terminal as initialized."""
        self.initialized = True
        self.closed = False

    def close(self) -> None:
        """Mark the terminal as closed; it stops listening."""
        self.closed = True
        self.listening = False

    def clear(self, fg: Style, bg: Style) -> None:
        self._text = self._blank()

    def flush(self) -> None:
        """Count a flush of the screen."""
        self.flushes += 1

    def listen(self) -> None:
        """Mark the terminal as listening; a mock has no input to read."""
        self.listening = True

    def set_extended_colors(self, enabled: bool) -> None:
        self.extended_colors = bool(enabled)

    def set_cursor(self, y: int, x: int) -> None:
        self.cursor = (y, x)

    def char(self, y: int, x: int, c: str, fg: Style, bg: Style) -> None:
        """Put a character; positions outside the screen are ignored."""
        if 0 <= y < self.HEIGHT and 0 <= x < self.WIDTH:
            self._text[y][x] = c

    def size(self) -> tuple[int, int]:
        return self.HEIGHT, self.WIDTH

    def char_at(self, y: int, x: int) -> str:
        """The character at a position ("\\x00" if none was drawn)."""
        if not (0 <= y < self.HEIGHT and 0 <= x < self.WIDTH):
            raise IndexError(f"position ({y}, {x}) out of bounds")
        return self._text[y][x]


def term_colors() -> None:
    """Print the terminal colours so they can be checked."""
    out = sys.stdout
    out.write("Standard Colors (16):\n Plain      : ")
    out.write("".join(f"\033[3{i}m{i:02X} " for i in range(16)))
    out.write("\n Bold       : ")
    out.write("".join(f"\033[1;3{i}m{i:02X} " for i in range(16)))
    out.write("\033[0m\n Underlined : ")
    out.write("".join(f"\033[4;3{i}m{i:02X} " for i in range(16)))
    out.write("\033[0m\n\nExtended Colors (256):\n")
    out.write("".join(f"\033[0;38;5;{i}m{i:02X} " for i in range(256)))
    out.write("\n\nAscii Chars: a A 6 ¼ Ø \nUnicode chars: \u0e5b  ಠﭛಠ\n")


def detect_colors() -> int:
    """The number of colours the terminal supports."""
    return 256