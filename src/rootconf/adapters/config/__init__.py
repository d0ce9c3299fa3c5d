"""Configuration adapter - tool settings and configuration display.

Contents:
    * :mod:`.settings` - The tool's own layered settings with caching
    * :mod:`.display` - Rendering of loaded configurations in human/JSON formats
"""

from __future__ import annotations

from .display import display_config
from .settings import ToolSettings, get_default_settings_path, get_settings, load_tool_settings

__all__ = [
    "ToolSettings",
    "display_config",
    "get_default_settings_path",
    "get_settings",
    "load_tool_settings",
]
