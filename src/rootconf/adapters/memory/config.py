"""In-memory settings and display adapters for testing.

Satisfy the same Protocols as the production adapters without
lib_layered_config file discovery or terminal output.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from lib_layered_config import Config

from ...domain.enums import OutputFormat


def get_settings_in_memory(*, start_dir: str | None = None) -> Config:
    """Return empty settings, so every ToolSettings default applies."""
    return Config({}, {})


@dataclass
class DisplaySpy:
    """Record display requests instead of rendering them.

    Example:
        >>> spy = DisplaySpy()
        >>> spy.display_config({"a": 1}, output_format=OutputFormat.JSON)
        >>> spy.displayed[0]["config"]
        {'a': 1}
    """

    displayed: list[dict[str, Any]] = field(default_factory=list)

    def display_config(
        self,
        config: Mapping[str, Any],
        *,
        output_format: OutputFormat = OutputFormat.HUMAN,
        section: str | None = None,
        source: Path | None = None,
    ) -> None:
        if section is not None and section not in config:
            raise ValueError(f"Section {section!r} not found")
        self.displayed.append(
            {"config": dict(config), "output_format": output_format, "section": section, "source": source}
        )


__all__ = ["DisplaySpy", "get_settings_in_memory"]
