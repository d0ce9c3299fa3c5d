"""Tool settings tests: pydantic model, section parsing, and layered loading."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import pytest
import rtoml
from lib_layered_config import Config
from pydantic import ValidationError

from rootconf.adapters.config.settings import (
    DEFAULT_FILE_NAME,
    ToolSettings,
    get_default_settings_path,
    get_settings,
    load_tool_settings,
)


@pytest.fixture
def isolated_settings_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    """Hide user-level settings and environment overrides from the loader."""
    for name in ("XDG_CONFIG_HOME", "HOME", "APPDATA", "LOCALAPPDATA"):
        monkeypatch.setenv(name, str(tmp_path))
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# ======================== ToolSettings ========================


@pytest.mark.os_agnostic
def test_tool_settings_defaults() -> None:
    settings = ToolSettings()

    assert settings.file == DEFAULT_FILE_NAME == "rootconf.json"
    assert settings.marker == ".venv"


@pytest.mark.os_agnostic
@pytest.mark.parametrize("file_name", ["app.json", "app.config.py", "APP.JSON"])
def test_tool_settings_accepts_supported_extensions(file_name: str) -> None:
    assert ToolSettings(file=file_name).file == file_name


@pytest.mark.os_agnostic
@pytest.mark.parametrize("file_name", ["app.yaml", "app.toml", "config"])
def test_tool_settings_rejects_unsupported_extensions(file_name: str) -> None:
    with pytest.raises(ValidationError, match="config file must end with one of"):
        ToolSettings(file=file_name)


@pytest.mark.os_agnostic
@pytest.mark.parametrize("marker", ["", "   "])
def test_tool_settings_rejects_blank_marker(marker: str) -> None:
    with pytest.raises(ValidationError, match="root marker must not be empty"):
        ToolSettings(marker=marker)


@pytest.mark.os_agnostic
def test_tool_settings_are_frozen() -> None:
    settings = ToolSettings()

    with pytest.raises(ValidationError):
        settings.file = "other.json"  # type: ignore[misc]


# ======================== load_tool_settings ========================


@pytest.mark.os_agnostic
def test_load_tool_settings_reads_the_rootconf_section(config_factory: Callable[[dict[str, Any]], Config]) -> None:
    config = config_factory({"rootconf": {"file": "app.config.py", "marker": ".git", "unknown": 1}})

    settings = load_tool_settings(config)

    assert settings.file == "app.config.py"
    assert settings.marker == ".git"


@pytest.mark.os_agnostic
def test_load_tool_settings_without_section_uses_defaults(config_factory: Callable[[dict[str, Any]], Config]) -> None:
    assert load_tool_settings(config_factory({})) == ToolSettings()


@pytest.mark.os_agnostic
def test_load_tool_settings_raises_for_invalid_values(config_factory: Callable[[dict[str, Any]], Config]) -> None:
    with pytest.raises(ValidationError):
        load_tool_settings(config_factory({"rootconf": {"file": "app.ini"}}))


# ======================== bundled defaults ========================


@pytest.mark.os_agnostic
def test_bundled_defaults_file_exists_and_matches_model() -> None:
    path = get_default_settings_path()
    parsed = rtoml.load(path)

    assert path.is_file()
    assert ToolSettings.model_validate(parsed["rootconf"]) == ToolSettings()
    assert "lib_log_rich" in parsed


@pytest.mark.os_agnostic
def test_get_settings_includes_bundled_defaults(isolated_settings_env: None) -> None:
    settings = get_settings()

    assert load_tool_settings(settings) == ToolSettings()


@pytest.mark.os_agnostic
def test_get_settings_is_cached_until_cleared(isolated_settings_env: None) -> None:
    first = get_settings()

    assert get_settings() is first

    get_settings.cache_clear()
    assert get_settings() is not first


@pytest.mark.os_agnostic
def test_get_settings_honours_environment_overrides(
    isolated_settings_env: None,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("ROOTCONF___ROOTCONF__FILE", "env.config.py")
    get_settings.cache_clear()

    assert load_tool_settings(get_settings()).file == "env.config.py"
