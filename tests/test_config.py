"""Tests for toolcard.config.DisplayConfig."""

import pytest

from toolcard.config import CONFIG_ENV_VAR, DisplayConfig, resolve_config_path
from toolcard.errors import ConfigError
from toolcard.shared.formatters.tool_call import render_tool_call
from toolcard.shared.models.tool_call import ToolCall
from toolcard.shared.theme import COLORS, apply_theme


def test_missing_file_gives_defaults(tmp_path) -> None:
    config = DisplayConfig.load(tmp_path / "nope.yaml")
    assert config == DisplayConfig()


def test_load_values(tmp_path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text(
        "show_output: false\n"
        "generic_preview: true\n"
        "width: 90\n"
        "theme:\n"
        "  status_running: '#ffaa00'\n"
    )
    config = DisplayConfig.load(path)
    assert config.show_output is False
    assert config.generic_preview is True
    assert config.width == 90
    assert config.theme == {"status_running": "#ffaa00"}


def test_invalid_values_reset(tmp_path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("show_output: maybe\nwidth: 5\ntheme: [1, 2]\nbogus: 1\n")
    config = DisplayConfig.load(path)
    assert config.show_output is True
    assert config.width is None
    assert config.theme == {}


def test_empty_file_is_defaults(tmp_path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("")
    assert DisplayConfig.load(path) == DisplayConfig()


def test_yaml_error_raises(tmp_path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("show_output: [unclosed\n")
    with pytest.raises(ConfigError):
        DisplayConfig.load(path)


def test_non_mapping_raises(tmp_path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("- a\n- b\n")
    with pytest.raises(ConfigError) as excinfo:
        DisplayConfig.load(path)
    assert "mapping" in str(excinfo.value)


def test_env_var_path(tmp_path, monkeypatch) -> None:
    path = tmp_path / "env.yaml"
    path.write_text("generic_preview: true\n")
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
    assert resolve_config_path() == path
    assert DisplayConfig.load().generic_preview is True


def test_explicit_path_wins(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "env.yaml"))
    explicit = tmp_path / "explicit.yaml"
    assert resolve_config_path(explicit) == explicit


def test_apply_theme_overrides_palette() -> None:
    config = DisplayConfig(theme={"status_failed": "#123456", "NotAColor": "#000000"})
    config.validate()
    config.apply_theme()
    assert COLORS.STATUS_FAILED == "#123456"


def test_invalid_theme_color_dropped(tmp_path, render_text) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("theme:\n  tools: not-a-colour\n  status_failed: '#123456'\n")
    config = DisplayConfig.load(path)
    assert config.theme == {"status_failed": "#123456"}
    config.apply_theme()
    assert COLORS.TOOLS == "#3f4651"
    text = render_text(render_tool_call(ToolCall("runBash", {"command": "ls"})))
    assert "↯ bash" in text


def test_apply_theme_skips_unparsable_color(render_text) -> None:
    apply_theme({"tools": "not-a-colour", "status_running": "red"})
    assert COLORS.TOOLS == "#3f4651"
    assert COLORS.STATUS_RUNNING == "red"
    assert "ls" in render_text(render_tool_call(ToolCall("runBash", {"command": "ls"})))
