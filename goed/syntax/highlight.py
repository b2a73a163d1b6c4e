"""Syntax highlighting of a block of text lines."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from goed.syntax.model import StyleId, SyntaxItem, SyntaxPattern
from goed.syntax.registry import syntax_for

Text = Sequence[Sequence[str]]


@dataclass
class Highlight:
    """A style applied to the columns ``col_from`` to ``col_to`` (inclusive) of a line."""

    style: StyleId
    col_from: int
    col_to: int


def _is_word_char(c: str) -> bool:
    return c == "_" or c.isalpha() or c.isdecimal()


class Highlights:
    """The highlights of each line of a block of text."""

    def __init__(self) -> None:
        self.lines: list[list[Highlight]] = []
        self._ln = 0
        self._col = 0
        self._cur_ln = 0
        self._cur_index = 0

    def update(self, text: Text, file: str) -> None:
        """Compute the highlights of ``text``, a list of lines of characters."""
        self._ln = 0
        self._col = 0
        self._cur_ln = 0
        self._cur_index = 0
        self.lines = [[] for _ in text]
        syntax = syntax_for(file)
        self._consume_leftovers(syntax.patterns, text)
        while self._ln < len(text):
            consumed = (
                self._consume_patterns(syntax.patterns, text)
                or self._consume(syntax.symbols, text, False)
                or self._consume(syntax.keywords, text, True)
            )
            if not consumed:
                self._col += 1
            if self._col >= len(text[self._ln]):
                self._ln += 1
                self._col = 0

    def style_at(self, ln: int, col: int) -> StyleId:
        """The style at a position; positions must be visited in order."""
        if ln >= len(self.lines):
            return StyleId.NONE
        if ln != self._cur_ln:
            self._cur_index = 0
        self._cur_ln = ln
        line = self.lines[ln]
        if self._cur_index >= len(line):
            return StyleId.NONE
        item = line[self._cur_index]
        if col < item.col_from:
            return StyleId.NONE
        if col <= item.col_to:
            if col == item.col_to:
                self._cur_index += 1
            return item.style
        self._cur_index += 1
        return StyleId.NONE

    def _consume_leftovers(self, patterns: Sequence[SyntaxPattern], text: Text) -> None:
        """Highlight the tail of a multi-line region that began above the text."""
        for p in patterns:
            if not p.multi_line:
                continue
            self._col = 0
            self._ln = 0
            while self._ln < len(text):
                if self._peek(p.start, text):
                    # An opening before any closing means no leftover. When both
                    # delimiters are equal, one at the end of a line is taken as a close.
                    if p.start != p.end or self._col + len(p.start) < len(text[self._ln]):
                        break
                if self._peek(p.end, text):
                    for i in range(self._ln):
                        self.lines[i].append(Highlight(p.style_id, 0, len(text[i]) - 1))
                    self._col += len(p.end)
                    self.lines[self._ln].append(Highlight(p.style_id, 0, self._col - 1))
                    return
                self._col += 1
                if self._col >= len(text[self._ln]):
                    self._ln += 1
                    self._col = 0
        self._col = 0
        self._ln = 0

    def _consume_patterns(self, patterns: Sequence[SyntaxPattern], text: Text) -> bool:
        pattern = None
        for candidate in patterns:
            if candidate.must_start_line and self._col > 0:
                continue
            if self._peek(candidate.start, text):
                pattern = candidate
                break
        if pattern is None:
            return False

        hl = Highlight(pattern.style_id, self._col, self._col)
        self._col += len(pattern.start)
        if not pattern.end:  # runs to the end of the line
            self._col = len(text[self._ln])
            hl.col_to = self._col
            self.lines[self._ln].append(hl)
            return True

        while True:
            prev = "\x00"
            found = True
            while not self._peek(pattern.end, text) or prev == pattern.escape:
                self._col += 1
                if self._col >= len(text[self._ln]):
                    found = False
                    break
                prev = text[self._ln][self._col - 1]
            if found:
                self._col += len(pattern.end)
            hl.col_to = self._col - 1
            self.lines[self._ln].append(hl)
            if found or not pattern.multi_line or self._ln >= len(text) - 1:
                return True
            self._ln += 1
            self._col = 0
            hl = Highlight(pattern.style_id, 0, 0)

    def _consume(self, items: Sequence[SyntaxItem], text: Text, is_kw: bool) -> bool:
        """Consume an exact item; keywords must not be part of a longer word."""
        line = text[self._ln]
        if is_kw and self._col > 0 and _is_word_char(line[self._col - 1]):
            return False
        for item in items:
            if not self._peek(item.text, text):
                continue
            end = self._col + len(item.text)
            if is_kw and end < len(line) and _is_word_char(line[end]):
                continue
            self.lines[self._ln].append(Highlight(item.id, self._col, end - 1))
            self._col = end
            return True
        return False

    def _peek(self, s: str, text: Text) -> bool:
        """Whether ``s`` is found at the current position."""
        if self._ln >= len(text):
            return False
        line = text[self._ln]
        col = self._col
        if col + len(s) > len(line):
            return False
        return all(line[col + i] == c for i, c in enumerate(s))