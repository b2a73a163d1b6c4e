"""The registry of known syntaxes, keyed by file extension or file name."""

from __future__ import annotations

import os
from types import MappingProxyType

from goed.syntax import languages1 as _l1
from goed.syntax import languages2 as _l2
from goed.syntax import languages3 as _l3
from goed.syntax.model import LanguageSpec, Syntax, build_syntax

GENERIC_KEY = "_"

# Registration order matters: a later language wins a shared key.
_SPECS: tuple[LanguageSpec, ...] = (
    _l1.GENERIC,
    _l1.ACTIONSCRIPT,
    _l1.ANKO,
    _l1.AXON,
    _l1.BAT,
    _l1.CPP,
    _l1.CSHARP,
    _l1.CSS,
    _l1.FANTOM,
    _l1.GO,
    _l2.MARKUP,
    _l2.JAVA,
    _l2.JS,
    _l2.LUA,
    _l2.MAKE,
    _l2.MARKDOWN,
    _l2.PERL,
    _l2.PHP,
    _l2.PYTHON,
    _l2.RUBY,
    _l3.SHELL,
    _l3.SQL,
    _l3.TOML,
    _l3.TYPESCRIPT,
)


def _build_registry() -> dict[str, Syntax]:
    registry: dict[str, Syntax] = {}
    for spec in _SPECS:
        syntax = build_syntax(spec)
        for key in (*spec.extensions, *spec.file_names):
            registry[key] = syntax
    return registry


SYNTAXES = MappingProxyType(_build_registry())


def _base(path: str) -> str:
    stripped = path.rstrip("/" + os.sep)
    if not stripped:
        return os.sep if path else "."
    return os.path.basename(stripped)


def _ext(path: str) -> str:
    name = path.replace(os.sep, "/").rsplit("/", 1)[-1]
    dot = name.rfind(".")
    return name[dot:] if dot >= 0 else ""


def syntax_for(path: str | os.PathLike[str]) -> Syntax:
    """The syntax for a file: by extension, then by file name, else the generic one."""
    path = os.fspath(path)
    ext = _ext(path).lower()
    if ext in SYNTAXES:
        return SYNTAXES[ext]
    base = _base(path).lower()
    if base in SYNTAXES:
        return SYNTAXES[base]
    return SYNTAXES[GENERIC_KEY]