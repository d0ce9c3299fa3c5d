"""Logging adapter - lib_log_rich runtime setup for command line use."""

from __future__ import annotations

from .setup import LOGGING_SECTION, LoggingConfigModel, init_logging, parse_logging_section

__all__ = ["LOGGING_SECTION", "LoggingConfigModel", "init_logging", "parse_logging_section"]
