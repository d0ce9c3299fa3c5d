"""Shared CLI constants.

Contents:
    * :data:`CLICK_CONTEXT_SETTINGS` - Shared Click settings for help display.
    * :data:`TRACEBACK_SUMMARY_LIMIT` - Character budget for truncated tracebacks.
    * :data:`TRACEBACK_VERBOSE_LIMIT` - Character budget for verbose tracebacks.
    * :data:`STARTER_CONTENT` - Body written by ``init`` per configuration format.
"""

from __future__ import annotations

from typing import Final

from rootconf.domain.enums import ConfigFormat

#: Shared Click context flags so help output stays consistent across commands.
CLICK_CONTEXT_SETTINGS: Final[dict[str, list[str]]] = {"help_option_names": ["-h", "--help"]}

#: Character budget used when printing truncated tracebacks.
TRACEBACK_SUMMARY_LIMIT: Final[int] = 500

#: Character budget used when verbose tracebacks are enabled.
TRACEBACK_VERBOSE_LIMIT: Final[int] = 10_000

#: Minimal valid configuration written by ``rootconf init``.
STARTER_CONTENT: Final[dict[ConfigFormat, str]] = {
    ConfigFormat.DATA: "{}\n",
    ConfigFormat.SCRIPT: '"""Project configuration loaded by rootconf."""\n\nconfig = {}\n',
}

__all__ = [
    "CLICK_CONTEXT_SETTINGS",
    "STARTER_CONTENT",
    "TRACEBACK_SUMMARY_LIMIT",
    "TRACEBACK_VERBOSE_LIMIT",
]
