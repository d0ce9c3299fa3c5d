"""Logging double: validates the ``[lib_log_rich]`` section, starts nothing."""

from __future__ import annotations

from lib_layered_config import Config

from rootconf.adapters.logging import parse_logging_section


def init_logging_in_memory(config: Config) -> None:
    """Parse the logging settings like production would, minus the runtime."""
    parse_logging_section(config)


__all__ = ["init_logging_in_memory"]
