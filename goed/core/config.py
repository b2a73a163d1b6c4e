"""Editor configuration and the bundled resources under the editor home."""

from __future__ import annotations

import logging
import os
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

from goed.core.io import copy_file

log = logging.getLogger("goed")

_VERSION_ASSET = "res/resources_version.txt"
_EXEC_PREFIX = "res/default/actions/"


class ConfigError(Exception):
    """Raised when the configuration or resources cannot be loaded."""


@dataclass
class Config:
    """The editor configuration."""

    syntax_highlighting: bool = False
    theme: str = ""  # ie: theme1.toml
    max_cmd_buffer_lines: int = 10000  # lines kept when running a command
    gui_font: str = ""  # path to a monospace TTF font
    gui_font_size: int = 10
    gui_font_dpi: int = 96
    min_view_width: int = 80  # preferred minimum view width, in characters
    line_width_indicator: int = 80


_DEFAULTS = {f.name: f.default for f in fields(Config) if f.type == "int"}
_KEYS = {f.name.replace("_", ""): f for f in fields(Config)}
_TYPES = {"bool": bool, "int": int, "str": str}


def _check_type(key: str, value: Any, type_name: str) -> None:
    expected = _TYPES[type_name]
    ok = isinstance(value, expected) and not (expected is int and isinstance(value, bool))
    if not ok:
        raise ConfigError(f"config entry {key!r} must be of type {type_name}")


def load_config(path: str | Path) -> Config:
    """Load a TOML configuration file; unset or zero numbers get their defaults."""
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as err:
        raise ConfigError(f"could not load config {path}: {err}") from err
    values: dict[str, Any] = {}
    for key, value in data.items():
        f = _KEYS.get(key.lower())
        if f is None:
            continue
        _check_type(key, value, f.type)
        values[f.name] = value
    conf = Config(**values)
    for name, default in _DEFAULTS.items():
        if getattr(conf, name) == 0:
            setattr(conf, name, default)
    return conf


def find_resource(home: str | Path, rel_path: str) -> Path:
    """Locate a resource under the home directory, or else under its defaults."""
    abs_path = Path(home) / rel_path
    try:
        abs_path.stat()
    except FileNotFoundError:
        return Path(home) / "default" / rel_path
    except OSError:
        pass
    return abs_path


def _copy_if_missing(src: Path, dst: Path) -> None:
    if not dst.exists():
        copy_file(src, dst)


def update_resources(home: str | Path, assets: Mapping[str, bytes]) -> bool:
    """Install the bundled ``assets`` into the home directory if their version changed.

    Asset names start with a top directory (``res/``) that is dropped. Returns
    whether the resources were installed.
    """
    home = Path(home)
    version = assets.get(_VERSION_ASSET)
    if version is None:
        raise ConfigError(f"missing bundled resource {_VERSION_ASSET}")
    try:
        current = (home / "resources_version.txt").read_bytes()
    except OSError:
        current = None
    if current == version:
        return False

    for name, data in assets.items():
        target = home.joinpath(*name.split("/")[1:])
        target.parent.mkdir(mode=0o750, parents=True, exist_ok=True)
        target.write_bytes(data)
        os.chmod(target, 0o750 if name.startswith(_EXEC_PREFIX) else 0o640)
        log.info("Copying %s to %s", name, target)

    for name in ("config.toml", "bindings.toml"):
        _copy_if_missing(home / "default" / name, home / name)
    return True