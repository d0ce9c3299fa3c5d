"""Display a loaded configuration - delegates to lib_layered_config.

The validated mapping is wrapped in a provenance-free
``lib_layered_config.Config`` so users get the same Rich-styled TOML-like
and JSON renderings the tool uses for its own settings. Pending log output
is flushed first so records do not interleave with the display.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import lib_log_rich.runtime
from lib_layered_config import Config
from lib_layered_config import OutputFormat as LibOutputFormat
from lib_layered_config import display_config as _lib_display
from rich.console import Console

from rootconf.domain.enums import OutputFormat


def display_config(
    config: Mapping[str, Any],
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    source: Path | None = None,
    console: Console | None = None,
) -> None:
    """Render *config* to the terminal.

    Args:
        config: Validated configuration (or the default) to display.
        output_format: OutputFormat.HUMAN for TOML-like display or
            OutputFormat.JSON for JSON.
        section: Optional top-level key to display on its own.
        source: File the configuration was loaded from; shown as a header
            in human output. ``None`` when the default was used.
        console: Optional Rich Console for output, mainly for tests.

    Raises:
        ValueError: If a section was requested that doesn't exist.
    """
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.flush()

    if output_format is OutputFormat.HUMAN:
        header = f"# source: {source}" if source is not None else "# source: default configuration"
        (console or Console()).print(header, style="dim", markup=False, highlight=False)

    lib_format = LibOutputFormat(output_format.value)
    _lib_display(Config(dict(config), {}), output_format=lib_format, section=section, console=console)


__all__ = ["display_config"]
