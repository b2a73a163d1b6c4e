"""Shared enumerations and constants of the editor core."""

from __future__ import annotations

import sys
from enum import IntEnum, IntFlag

VERSION = "0.1.2"
API_VERSION = "v1"


class CursorMvmt(IntEnum):
    """A cursor movement request."""

    RIGHT = 0
    LEFT = 1
    UP = 2
    DOWN = 3
    PG_DOWN = 4
    PG_UP = 5
    HOME = 6
    END = 7
    TOP = 8
    BOTTOM = 9
    SCROLL_DOWN = 10
    SCROLL_UP = 11


class ViewType(IntEnum):
    """The kind of content a view holds."""

    STANDARD = 0  # editable file
    SHELL = 1  # interactive shell
    CMD_OUTPUT = 2  # static command output
    DIR_LISTING = 3  # directory listing


class FileOp(IntFlag):
    """File system operations reported by a file watcher."""

    CREATE = 1
    WRITE = 2
    REMOVE = 4
    RENAME = 8
    CHMOD = 16


def os_ls_args(platform: str | None = None) -> list[str]:
    """Return the arguments given to ``ls`` for a directory listing on ``platform``."""
    if (platform or sys.platform) == "darwin":
        return ["-a1", "-G"]
    return ["-a1", "--color=always"]