"""Core configuration model (structured view)."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

CONFIG_DIR_NAME = ".gemini"
SYSTEM_MD_FILENAME = "system.md"


@dataclass(frozen=True)
class ConfigInput:
    """Raw switch values plus the directories they are resolved against.

    ``system_md`` enables the override file and ``write_system_md`` enables
    write-back. ``home`` and ``cwd`` are captured once at process entry so
    that resolution never consults ambient process state.
    """

    system_md: str | None
    write_system_md: str | None
    home: Path
    cwd: Path

    @property
    def default_system_md_path(self) -> Path:
        return self.home / CONFIG_DIR_NAME / SYSTEM_MD_FILENAME


@dataclass(frozen=True)
class SwitchSetting:
    """Parsed state of an override or write-back switch."""

    enabled: bool
    path: Path
