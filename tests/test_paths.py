from pathlib import Path

import pytest

from sysprompt.core.paths import expand_home, override_setting, parse_switch, write_back_setting


def _parse(value, home: Path, cwd: Path):
    return parse_switch(value, home=home, cwd=cwd, default_path=home / ".gemini" / "system.md")


@pytest.mark.parametrize("value", [None, "", "0", "false", "FALSE", "False", "fAlSe"])
def test_switch_disabled(value, home, workdir):
    assert _parse(value, home, workdir).enabled is False


@pytest.mark.parametrize("value", ["1", "true", "TRUE", "True"])
def test_switch_default_location(value, home, workdir):
    setting = _parse(value, home, workdir)
    assert setting.enabled is True
    assert setting.path == home / ".gemini" / "system.md"


def test_switch_home_shorthand(home, workdir):
    setting = _parse("~/custom.md", home, workdir)
    assert setting.enabled is True
    assert setting.path == home / "custom.md"


def test_switch_bare_tilde_is_home(home, workdir):
    assert _parse("~", home, workdir).path == home


def test_switch_relative_path_resolves_against_cwd(home, workdir):
    setting = _parse("prompts/../system.md", home, workdir)
    assert setting.path == workdir / "system.md"
    assert setting.path.is_absolute()


def test_switch_absolute_path_kept(home, workdir, tmp_path):
    target = tmp_path / "elsewhere" / "SYSTEM.md"
    assert _parse(str(target), home, workdir).path == target


def test_switch_custom_path_preserves_case(home, workdir):
    assert _parse("Custom/System.MD", home, workdir).path == workdir / "Custom" / "System.MD"


def test_expand_home_ignores_other_user_form(home):
    assert expand_home("~other/file.md", home) == "~other/file.md"


def test_settings_read_matching_config_field(make_config, home):
    config = make_config(system_md="~/a.md", write_system_md="~/b.md")
    assert override_setting(config).path == home / "a.md"
    assert write_back_setting(config).path == home / "b.md"
