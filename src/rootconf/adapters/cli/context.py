"""Per-invocation CLI state: settings, services, and traceback flags.

The root group stores a :class:`CLIContext` on ``ctx.obj`` so every
subcommand builds stores from the same settings and services.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import rich_click as click
from lib_layered_config import Config

from rootconf.adapters.config.settings import ToolSettings

if TYPE_CHECKING:
    from rootconf.application.store import ConfigStore
    from rootconf.composition import AppServices


@dataclass(slots=True)
class CLIContext:
    """Typed CLI context for Click subcommand access."""

    traceback: bool
    settings: Config
    tool: ToolSettings
    services: AppServices

    def store(self, file_name: str | None = None) -> ConfigStore[Any]:
        """Build a store for *file_name*, falling back to the configured file."""
        return self.services.create_store(file_name or self.tool.file, marker=self.tool.marker)


def store_cli_context(
    ctx: click.Context,
    *,
    traceback: bool,
    settings: Config,
    tool: ToolSettings,
    services: AppServices,
) -> None:
    """Store CLI state in the Click context for subcommand access.

    Example:
        >>> from unittest.mock import MagicMock
        >>> ctx = MagicMock()
        >>> store_cli_context(ctx, traceback=True, settings=MagicMock(), tool=ToolSettings(), services=MagicMock())
        >>> ctx.obj.traceback
        True
    """
    ctx.obj = CLIContext(traceback=traceback, settings=settings, tool=tool, services=services)


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Retrieve typed CLI state from Click context.

    Raises:
        RuntimeError: If CLI context was not properly initialized.
    """
    if not isinstance(ctx.obj, CLIContext):
        raise RuntimeError("CLI context not initialized. Call store_cli_context first.")
    return ctx.obj


@dataclass(frozen=True, slots=True)
class TracebackState:
    """Traceback flags of ``lib_cli_exit_tools.config`` at one moment.

    ``main`` captures the state before running a command and reapplies it
    afterwards so repeated in-process invocations do not leak ``--traceback``.

    Example:
        >>> TracebackState(enabled=True, force_color=True).enabled
        True
    """

    enabled: bool
    force_color: bool

    @classmethod
    def current(cls) -> TracebackState:
        """Read the flags currently set on ``lib_cli_exit_tools.config``."""
        config = lib_cli_exit_tools.config
        return cls(
            enabled=bool(getattr(config, "traceback", False)),
            force_color=bool(getattr(config, "traceback_force_color", False)),
        )

    def apply(self) -> None:
        """Write these flags back to ``lib_cli_exit_tools.config``."""
        lib_cli_exit_tools.config.traceback = self.enabled
        lib_cli_exit_tools.config.traceback_force_color = self.force_color


def apply_traceback_preferences(enabled: bool) -> None:
    """Turn full, colored tracebacks on or off for the rest of the run."""
    TracebackState(enabled=bool(enabled), force_color=bool(enabled)).apply()


__all__ = [
    "CLIContext",
    "TracebackState",
    "apply_traceback_preferences",
    "get_cli_context",
    "store_cli_context",
]
