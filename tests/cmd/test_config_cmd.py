import pytest
from click.testing import CliRunner

from flexpath.cmd.config import config
from flexpath.configmanager import ConfigManager


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    monkeypatch.setenv("APPDATA", str(tmp_path))


def stored(section, option):
    # read the file again, the way the next command invocation would
    return ConfigManager().get(section, option)


def test_get_missing_value():
    result = CliRunner().invoke(config, ["render.separator"])
    assert result.exit_code == 0
    assert "Configuration 'render.separator' not found." in result.output


def test_set_then_get():
    runner = CliRunner()
    result = runner.invoke(config, ["render.separator", "posix"])
    assert result.exit_code == 0
    assert "set to 'posix'" in result.output
    assert stored("render", "separator") == "posix"

    result = runner.invoke(config, ["render.separator"])
    assert result.output == "render.separator = posix\n"


@pytest.mark.parametrize("value,expected", [("TRUE", True), ("false", False)])
def test_set_boolean(value, expected):
    result = CliRunner().invoke(config, ["render.trailing_separator", value])
    assert result.exit_code == 0
    assert stored("render", "trailing_separator") is expected


def test_set_multiple_values():
    result = CliRunner().invoke(config, ["extra.names", "a", "b"])
    assert result.exit_code == 0
    assert list(stored("extra", "names")) == ["a", "b"]


def test_invalid_key():
    result = CliRunner().invoke(config, ["separator"])
    assert result.exit_code == 1
    assert "section.option" in result.output


def test_invalid_separator_is_rejected():
    result = CliRunner().invoke(config, ["render.separator", "sideways"])
    assert result.exit_code == 1
    assert "Invalid separator" in result.output
    assert stored("render", "separator") is None


@pytest.mark.parametrize("values", [["no"], ["yes"], ["0"], ["true", "false"]])
def test_invalid_trailing_separator_is_rejected(values):
    result = CliRunner().invoke(config, ["render.trailing_separator", *values])
    assert result.exit_code == 1
    assert "Invalid trailing_separator" in result.output
    assert stored("render", "trailing_separator") is None
