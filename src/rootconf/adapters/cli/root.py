"""The ``rootconf`` command group.

Builds services from the factory on ``ctx.obj``, loads the tool's own
settings once, starts logging, and hands a :class:`CLIContext` to whichever
subcommand runs.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import rich_click as click
from lib_layered_config import Config
from pydantic import ValidationError

from rootconf import __init__conf__
from rootconf.adapters.config.settings import ToolSettings, load_tool_settings

from .constants import CLICK_CONTEXT_SETTINGS
from .context import apply_traceback_preferences, store_cli_context

if TYPE_CHECKING:
    from rootconf.composition import AppServices


def _format_validation_error(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        field = ".".join(str(loc) for loc in err["loc"]) or "[rootconf]"
        parts.append(f"{field}: {err['msg']}")
    return "; ".join(parts)


def _parse_tool_settings(settings: Config) -> ToolSettings:
    """Validate the ``[rootconf]`` section, raising UsageError on failure."""
    try:
        return load_tool_settings(settings)
    except ValidationError as exc:
        raise click.UsageError(f"Invalid [rootconf] settings: {_format_validation_error(exc)}") from exc


def _bootstrap(ctx: click.Context, traceback: bool) -> None:
    factory = ctx.obj
    if not callable(factory):
        raise RuntimeError("Services factory not provided. This is a bug.")
    services: AppServices = factory()
    settings = services.get_settings()
    services.init_logging(settings)
    store_cli_context(
        ctx,
        traceback=traceback,
        settings=settings,
        tool=_parse_tool_settings(settings),
        services=services,
    )
    apply_traceback_preferences(traceback)


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool) -> None:
    """Find, load and validate configuration files in the project root."""
    _bootstrap(ctx, traceback)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


def _register_commands() -> None:
    # Command modules import package ancestors that import this module.
    from .commands import cli_check, cli_info, cli_init, cli_root, cli_show

    for command in (cli_check, cli_info, cli_init, cli_root, cli_show):
        cli.add_command(command)


_register_commands()


__all__ = ["cli"]
