from pathlib import Path

from sysprompt.adapters.config_env import load_config_input


def test_load_config_input_from_mapping(tmp_path):
    environ = {"GEMINI_SYSTEM_MD": "~/a.md", "GEMINI_WRITE_SYSTEM_MD": "1", "OTHER": "x"}
    config = load_config_input(environ, home=tmp_path, cwd=tmp_path / "cwd")
    assert config.system_md == "~/a.md"
    assert config.write_system_md == "1"
    assert config.home == tmp_path
    assert config.cwd == tmp_path / "cwd"
    assert config.default_system_md_path == tmp_path / ".gemini" / "system.md"


def test_load_config_input_unset(tmp_path):
    config = load_config_input({}, home=tmp_path, cwd=tmp_path)
    assert config.system_md is None
    assert config.write_system_md is None


def test_load_config_input_reads_process_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("GEMINI_SYSTEM_MD", "false")
    monkeypatch.delenv("GEMINI_WRITE_SYSTEM_MD", raising=False)
    monkeypatch.chdir(tmp_path)
    config = load_config_input()
    assert config.system_md == "false"
    assert config.write_system_md is None
    assert config.cwd == Path.cwd()
    assert config.home == Path.home()
