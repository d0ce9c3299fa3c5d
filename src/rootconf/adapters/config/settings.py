"""Settings of the rootconf tool itself, with caching.

These are not the user's project configuration (that is what
:class:`~rootconf.application.store.ConfigStore` loads) but the knobs of the
command line tool: default file name, root marker, and logging. They come
from lib_layered_config's layered sources with the bundled
``defaultconfig.toml`` as the lowest layer.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Protocol, cast

from lib_layered_config import Config, read_config
from pydantic import BaseModel, ConfigDict, field_validator

from rootconf import __init__conf__
from rootconf.adapters.fs.root import ROOT_MARKER
from rootconf.domain.enums import ConfigFormat

logger = logging.getLogger(__name__)

#: Configuration file name used when settings do not name one.
DEFAULT_FILE_NAME = "rootconf.json"


class SettingsLoaderProtocol(Protocol):
    """Protocol for settings loader with cache_clear method."""

    def __call__(self, *, start_dir: str | None = None) -> Config: ...
    def cache_clear(self) -> None: ...


class ToolSettings(BaseModel):
    """Pydantic model for the ``[rootconf]`` settings section.

    Example:
        >>> ToolSettings().file
        'rootconf.json'
        >>> ToolSettings(file="app.config.py").marker
        '.venv'
        >>> ToolSettings(file="app.yaml")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        pydantic_core._pydantic_core.ValidationError: ...
    """

    file: str = DEFAULT_FILE_NAME
    marker: str = ROOT_MARKER

    model_config = ConfigDict(extra="ignore", frozen=True)

    @field_validator("file")
    @classmethod
    def _supported_extension(cls, value: str) -> str:
        if ConfigFormat.from_suffix(Path(value).suffix) is None:
            supported = ", ".join(f.value for f in ConfigFormat)
            raise ValueError(f"config file must end with one of: {supported}")
        return value

    @field_validator("marker")
    @classmethod
    def _non_empty_marker(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("root marker must not be empty")
        return value


@lru_cache(maxsize=1)
def get_default_settings_path() -> Path:
    """Return the path to the bundled default settings file.

    Example:
        >>> get_default_settings_path().name
        'defaultconfig.toml'
    """
    return Path(__file__).parent / "defaultconfig.toml"


# Settings are read once per start_dir and cached for the process lifetime.
@lru_cache(maxsize=4)
def _get_settings_impl(*, start_dir: str | None = None) -> Config:
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        default_file=get_default_settings_path(),
        start_dir=start_dir,
    )


def _get_settings(*, start_dir: str | None = None) -> Config:
    """Load layered settings with the bundled defaults as lowest layer.

    Precedence: defaults → app → host → user → dotenv → env

    Args:
        start_dir: Optional directory that seeds .env discovery. Defaults to
            the current working directory when None.

    Returns:
        Immutable settings object with provenance tracking.

    Example:
        >>> settings = get_settings()
        >>> isinstance(settings.as_dict(), dict)
        True
    """
    return _get_settings_impl(start_dir=start_dir)


def _cache_clear() -> None:
    """Force a fresh read from disk on the next ``get_settings()`` call."""
    _get_settings_impl.cache_clear()


_get_settings.cache_clear = _cache_clear  # type: ignore[attr-defined]
get_settings: SettingsLoaderProtocol = cast(SettingsLoaderProtocol, _get_settings)


def load_tool_settings(settings: Config) -> ToolSettings:
    """Parse the ``[rootconf]`` section into :class:`ToolSettings`.

    Raises:
        pydantic.ValidationError: If the section holds invalid values.

    Example:
        >>> load_tool_settings(Config({"rootconf": {"file": "x.py"}}, {})).file
        'x.py'
    """
    raw: object = settings.get("rootconf", default={})
    return ToolSettings.model_validate(cast("dict[str, object]", raw) if raw else {})


__all__ = [
    "DEFAULT_FILE_NAME",
    "ToolSettings",
    "get_default_settings_path",
    "get_settings",
    "load_tool_settings",
]
