"""Syntax definitions: styles, patterns, keyword and symbol items."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace
from enum import IntEnum


class StyleId(IntEnum):
    """The highlighting style given to a piece of text."""

    NONE = 0
    COMMENT = 1
    STRING = 2
    NUMBER = 3
    KW1 = 4
    KW2 = 5
    KW3 = 6
    SYMB1 = 7
    SYMB2 = 8
    SYMB3 = 9
    SEP1 = 10
    SEP2 = 11
    SEP3 = 12


@dataclass(frozen=True)
class SyntaxItem:
    """An exact piece of text (keyword, symbol or separator) and its style."""

    text: str
    id: StyleId


@dataclass(frozen=True)
class SyntaxPattern:
    """A delimited region of text such as a comment or a string.

    An empty ``end`` means the region runs to the end of the line; an empty
    ``escape`` means no escape character. A multi-line pattern needs an end.
    """

    start: str
    end: str = ""
    escape: str = ""
    multi_line: bool = False
    style_id: StyleId = StyleId.NONE
    must_start_line: bool = False

    def __post_init__(self) -> None:
        if self.multi_line and not self.end:
            raise ValueError("Invalid syntax pattern: a multi-line pattern needs an end")

    def with_msl(self) -> SyntaxPattern:
        """A copy of this pattern that only matches at the start of a line."""
        return replace(self, must_start_line=True)


@dataclass(frozen=True)
class LanguageSpec:
    """The raw definition of a language's syntax."""

    file_names: tuple[str, ...] = ()
    extensions: tuple[str, ...] = ()
    patterns: tuple[SyntaxPattern, ...] = ()
    keywords1: tuple[str, ...] = ()
    keywords2: tuple[str, ...] = ()
    keywords3: tuple[str, ...] = ()
    symbols1: tuple[str, ...] = ()
    symbols2: tuple[str, ...] = ()
    symbols3: tuple[str, ...] = ()
    separators1: tuple[str, ...] = ()
    separators2: tuple[str, ...] = ()
    separators3: tuple[str, ...] = ()


@dataclass(frozen=True)
class Syntax:
    """A language syntax ready for highlighting, with its items sorted."""

    patterns: tuple[SyntaxPattern, ...] = ()
    symbols: tuple[SyntaxItem, ...] = ()
    keywords: tuple[SyntaxItem, ...] = ()


def sort_items(items: Iterable[SyntaxItem]) -> list[SyntaxItem]:
    """Sort items longest first, and alphabetically among equal lengths."""
    return sorted(items, key=lambda item: (-len(item.text), item.text))


def _items(groups: Iterable[tuple[Iterable[str], StyleId]]) -> list[SyntaxItem]:
    return sort_items(SyntaxItem(text, style) for texts, style in groups for text in texts)


def build_syntax(spec: LanguageSpec) -> Syntax:
    """Turn a language definition into a Syntax with styled, sorted items."""
    keywords = _items(
        [
            (spec.keywords1, StyleId.KW1),
            (spec.keywords2, StyleId.KW2),
            (spec.keywords3, StyleId.KW3),
        ]
    )
    symbols = _items(
        [
            (spec.symbols1, StyleId.SYMB1),
            (spec.symbols2, StyleId.SYMB2),
            (spec.symbols3, StyleId.SYMB3),
            (spec.separators1, StyleId.SEP1),
            (spec.separators2, StyleId.SEP2),
            (spec.separators3, StyleId.SEP3),
        ]
    )
    return Syntax(patterns=tuple(spec.patterns), symbols=tuple(symbols), keywords=tuple(keywords))