"""Parsing of enable/path switches such as GEMINI_SYSTEM_MD."""

from __future__ import annotations

import os
from pathlib import Path

from .config_model import ConfigInput, SwitchSetting

_DISABLED_VALUES = ("0", "false")
_DEFAULT_VALUES = ("1", "true")


def expand_home(value: str, home: Path) -> str:
    """Expand a leading ``~`` or ``~/`` against ``home``.

    Other forms (``~user``) are left untouched and treated as ordinary
    relative paths.
    """
    if value == "~":
        return str(home)
    if value.startswith("~/"):
        return str(home / value[2:])
    return value


def absolute_path(value: str, cwd: Path) -> Path:
    """Make ``value`` absolute against ``cwd`` and collapse ``.``/``..``.

    Symlinks are not followed.
    """
    return Path(os.path.normpath(cwd / value))


def parse_switch(value: str | None, *, home: Path, cwd: Path, default_path: Path) -> SwitchSetting:
    """Interpret a switch value.

    Args:
        value: Raw value, or None when the variable is unset.
        home: Home directory used for ``~`` expansion.
        cwd: Directory that relative paths are resolved against.
        default_path: Location used for ``1``/``true`` (and reported when disabled).

    Returns:
        SwitchSetting with the enabled flag and resolved absolute path.
    """
    if not value:
        return SwitchSetting(enabled=False, path=default_path)

    lowered = value.lower()
    if lowered in _DISABLED_VALUES:
        return SwitchSetting(enabled=False, path=default_path)
    if lowered in _DEFAULT_VALUES:
        return SwitchSetting(enabled=True, path=default_path)

    return SwitchSetting(enabled=True, path=absolute_path(expand_home(value, home), cwd))


def override_setting(config: ConfigInput) -> SwitchSetting:
    return parse_switch(
        config.system_md,
        home=config.home,
        cwd=config.cwd,
        default_path=config.default_system_md_path,
    )


def write_back_setting(config: ConfigInput) -> SwitchSetting:
    return parse_switch(
        config.write_system_md,
        home=config.home,
        cwd=config.cwd,
        default_path=config.default_system_md_path,
    )
