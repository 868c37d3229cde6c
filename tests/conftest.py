from pathlib import Path

import pytest

from sysprompt.adapters.tool_registry import DEFAULT_TOOL_NAMES
from sysprompt.core.config_model import ConfigInput


@pytest.fixture
def home(tmp_path: Path) -> Path:
    path = tmp_path / "home"
    path.mkdir()
    return path


@pytest.fixture
def workdir(tmp_path: Path) -> Path:
    path = tmp_path / "work"
    path.mkdir()
    return path


@pytest.fixture
def make_config(home: Path, workdir: Path):
    def _make(system_md=None, write_system_md=None) -> ConfigInput:
        return ConfigInput(
            system_md=system_md,
            write_system_md=write_system_md,
            home=home,
            cwd=workdir,
        )

    return _make


@pytest.fixture
def tools():
    return DEFAULT_TOOL_NAMES
