"""File helpers and management of the editor home directory."""

from __future__ import annotations

import logging
import os
import re
import shutil
import socket
import sys
import time
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from goed.core.text import Encoding
from goed.core.types import VERSION

log = logging.getLogger("goed")

_DIR_MODE = 0o750
_BUFFER_MAX_AGE = 30 * 24 * 3600
_SOCK_ID = re.compile(r"[+-]?\d+")


def copy_file(
    src: str | Path,
    dst: str | Path,
    src_encoding: Encoding | None = None,
    dst_encoding: Encoding | None = None,
) -> None:
    """Copy a file, optionally decoding it to UTF-8 and/or encoding it from UTF-8."""
    if src_encoding is None and dst_encoding is None:
        with open(src, "rb") as fin, open(dst, "wb") as fout:
            shutil.copyfileobj(fin, fout)
        return
    with open(src, "rb") as fin:
        data = fin.read()
    if src_encoding is not None:
        data = src_encoding.decode(data)
    if dst_encoding is not None:
        data = dst_encoding.encode(data)
    with open(dst, "wb") as fout:
        fout.write(data)


def mv_file(src: str | Path, dst: str | Path) -> None:
    """Move a file by copying it, then deleting the original."""
    copy_file(src, dst)
    os.remove(src)


def goed_home(testing: bool = False) -> Path:
    """The editor home directory of the current user."""
    suffix = "_test" if testing else ""
    try:
        user_home = Path.home()
    except (RuntimeError, KeyError, OSError) as err:
        log.error("Error : %s", err)
        return Path("goed")
    if sys.platform == "win32":
        return user_home / f"goed{suffix}"
    return user_home / f".goed{suffix}"


def goed_socket(home: str | Path, instance_id: int) -> Path:
    """Path of the RPC socket of an editor instance."""
    return Path(home) / "instances" / f"{instance_id}.sock"


@dataclass
class Instance:
    """A running editor instance and the files it owns under the home directory."""

    home: Path
    instance_id: int
    socket: Path
    log_file: Path
    terminal: str
    _handler: logging.Handler | None = field(default=None, repr=False, compare=False)

    def cleanup(self) -> None:
        """Close the log (removing it if empty) and remove the instance socket."""
        if self._handler is not None:
            log.removeHandler(self._handler)
            self._handler.close()
            self._handler = None
        try:
            if self.log_file.stat().st_size == 0:
                self.log_file.unlink()
        except OSError:
            pass
        try:
            self.socket.unlink(missing_ok=True)
        except OSError:
            pass


def init_home(home: str | Path, instance_id: int) -> Instance:
    """Create the home directory layout and the log file of a new instance."""
    home = Path(home)
    for sub in ("", "buffers", "logs", "instances"):
        (home / sub).mkdir(mode=_DIR_MODE, parents=True, exist_ok=True)
    (home / "Version.txt").write_text(VERSION, encoding="utf-8")

    log_file = home / "logs" / f"{instance_id}.log"
    handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
    log.addHandler(handler)

    return Instance(
        home=home,
        instance_id=instance_id,
        socket=goed_socket(home, instance_id),
        log_file=log_file,
        terminal=os.environ.get("SHELL") or "/bin/bash",
        _handler=handler,
    )


def instances(home: str | Path) -> list[int]:
    """Ids of the known editor instances, newest first."""
    try:
        names = sorted(os.listdir(Path(home) / "instances"))
    except OSError:
        return []
    ids = [
        int(stem)
        for name in names
        if name.endswith(".sock") and _SOCK_ID.fullmatch(stem := name[: -len(".sock")])
    ]
    ids.reverse()
    return ids


def _join(directory: str, loc: str) -> str:
    parts = [p for p in (directory, loc.lstrip(os.sep)) if p]
    return os.path.normpath(os.path.join(*parts)) if parts else "."


def lookup_location(directory: str | Path, loc: str) -> tuple[str, bool]:
    """Find ``loc`` relative to ``directory`` or one of its ancestors.

    Returns the found path and whether it is a directory; if nothing is found,
    ``loc`` itself and whether it ends with a path separator.
    """
    directory = str(directory)
    while True:
        candidate = _join(directory, loc)
        try:
            return candidate, os.path.isdir(candidate) if os.stat(candidate) else False
        except OSError:
            pass
        parent = os.path.dirname(directory)
        if parent == directory:
            return loc, loc.endswith(os.sep)
        directory = parent


def env_with(custom: Iterable[str]) -> list[str]:
    """The current environment as ``KEY=value`` entries, with existing keys overridden."""
    custom = list(custom)
    env = []
    for key, value in os.environ.items():
        entry = f"{key}={value}"
        prefix = key + "="
        for c in custom:
            if c.startswith(prefix):
                entry = c
        env.append(entry)
    return env


def runes_len(runes: Iterable[str]) -> int:
    """The UTF-8 length in bytes of a sequence of characters."""
    return sum(len(r.encode("utf-8", errors="surrogatepass")) for r in runes)


def is_dir(loc: str | Path) -> bool:
    """Whether ``loc`` is a directory, or, if it does not exist, looks like one."""
    try:
        return os.path.isdir(loc) if os.stat(loc) else False
    except OSError:
        return str(loc).endswith(os.sep)


def _socket_alive(path: Path) -> bool:
    family = getattr(socket, "AF_UNIX", None)
    if family is None:
        return True
    with socket.socket(family, socket.SOCK_STREAM) as sock:
        sock.settimeout(1)
        try:
            sock.connect(str(path))
        except OSError:
            return False
    return True


def _clean_stale_sockets(home: Path) -> None:
    try:
        entries = list(os.scandir(home / "instances"))
    except OSError:
        return
    for entry in entries:
        if entry.name.endswith(".sock") and not _socket_alive(Path(entry.path)):
            try:
                os.remove(entry.path)
            except OSError:
                pass


def _clean_old_buffers(home: Path) -> None:
    too_old = time.time() - _BUFFER_MAX_AGE
    try:
        entries = list(os.scandir(home / "buffers"))
    except OSError:
        return
    for entry in entries:
        try:
            if entry.stat(follow_symlinks=False).st_mtime >= too_old:
                continue
            if entry.is_dir(follow_symlinks=False):
                os.rmdir(entry.path)
            else:
                os.remove(entry.path)
        except OSError:
            pass


def cleanup_dot_goed(home: str | Path) -> None:
    """Remove sockets left by unclean shutdowns and buffers over 30 days old."""
    home = Path(home)
    _clean_stale_sockets(home)
    _clean_old_buffers(home)