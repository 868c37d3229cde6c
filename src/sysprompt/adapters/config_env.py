"""Env configuration adapter producing a structured ConfigInput."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

from ..config import config
from ..core.config_model import ConfigInput


def load_config_input(
    environ: Mapping[str, str] | None = None,
    *,
    home: Path | None = None,
    cwd: Path | None = None,
) -> ConfigInput:
    environ = os.environ if environ is None else environ
    return ConfigInput(
        system_md=environ.get(config.SYSTEM_MD_VAR),
        write_system_md=environ.get(config.WRITE_SYSTEM_MD_VAR),
        home=home if home is not None else Path.home(),
        cwd=cwd if cwd is not None else Path.cwd(),
    )
