"""CLI command implementations.

Collects all subcommand functions and re-exports them for registration
with the root CLI group.

Contents:
    * Info command from :mod:`.info`
    * Project configuration commands from :mod:`.config`
"""

from __future__ import annotations

from .config import cli_check, cli_init, cli_root, cli_show
from .info import cli_info

__all__ = [
    "cli_check",
    "cli_info",
    "cli_init",
    "cli_root",
    "cli_show",
]
