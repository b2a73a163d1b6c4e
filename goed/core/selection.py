"""Text selections and rectangular text slices."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Selection:
    """Selected text in a view, from one point to another.

    ``col_to == -1`` means whole lines. The selection is normalized on creation
    so that the start point comes before the end point.
    """

    line_from: int
    col_from: int
    line_to: int
    col_to: int

    def __post_init__(self) -> None:
        self.normalize()

    def normalize(self) -> None:
        """Swap the end points if the selection runs backwards."""
        if self.line_from == self.line_to and self.col_to != -1 and self.col_from > self.col_to:
            self.col_from, self.col_to = self.col_to, self.col_from
        elif self.line_to != -1 and self.line_from > self.line_to:
            self.line_from, self.line_to = self.line_to, self.line_from
            self.col_from, self.col_to = self.col_to, self.col_from

    def __str__(self) -> str:
        return f"{self.line_from} {self.col_from} {self.line_to} {self.col_to}"


@dataclass
class Slice:
    """A rectangle of text (rows of characters) with its bounds."""

    r1: int
    c1: int
    r2: int
    c2: int
    text: list[list[str]] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.normalize()

    def normalize(self) -> None:
        """Order the bounds so that r1 <= r2 and c1 <= c2 (-1 meaning unbounded)."""
        if self.r2 != -1 and self.r1 > self.r2:
            self.r1, self.r2 = self.r2, self.r1
        if self.c2 != -1 and self.c1 > self.c2:
            self.c1, self.c2 = self.c2, self.c1

    def contains_line(self, ln_index: int) -> bool:
        """Whether the given line index falls within the slice rows."""
        if self.r1 == 0 and self.r2 == 0 and self.c1 == 0 and self.c2 == 0:
            return False
        return self.r1 <= ln_index <= self.r2