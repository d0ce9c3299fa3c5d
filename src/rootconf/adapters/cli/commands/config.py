"""Project configuration CLI commands.

Every command builds a fresh store from the tool settings (or ``--file``)
and drives it with :func:`asyncio.run`. :class:`ConfigError` failures are
reported on stderr and mapped to an exit code by their kind.

Contents:
    * :func:`cli_root` - Print the resolved project root.
    * :func:`cli_show` - Load, validate, and display the configuration.
    * :func:`cli_init` - Create a starter configuration file in the project root.
    * :func:`cli_check` - Verify that every given path exists.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, NoReturn

import lib_log_rich.runtime
import rich_click as click

from rootconf.domain.enums import ConfigFormat, ErrorKind, OutputFormat
from rootconf.domain.errors import ConfigError

from ..constants import CLICK_CONTEXT_SETTINGS, STARTER_CONTENT
from ..context import get_cli_context
from ..exit_codes import ExitCode, exit_code_for

if TYPE_CHECKING:
    from rootconf.application.store import ConfigStore

logger = logging.getLogger(__name__)

_FILE_OPTION_HELP = "Configuration file name in the project root (overrides [rootconf].file)"


def _fail(exc: ConfigError) -> NoReturn:
    logger.error("Command failed", extra={"kind": exc.kind.value, "error": str(exc)})
    click.echo(f"Error: {exc}", err=True)
    raise SystemExit(exit_code_for(exc.kind)) from exc


@click.command("root", context_settings=CLICK_CONTEXT_SETTINGS)
@click.pass_context
def cli_root(ctx: click.Context) -> None:
    """Print the project root: the nearest directory holding the root marker.

    The search starts in the current working directory and walks up its
    parents.
    """
    cli_ctx = get_cli_context(ctx)
    with lib_log_rich.runtime.bind(job_id="cli-root", extra={"command": "root", "marker": cli_ctx.tool.marker}):
        store = cli_ctx.store()
        try:
            root = asyncio.run(store.resolve_root_async())
        except ConfigError as exc:
            _fail(exc)
        logger.info("Resolved project root", extra={"root": str(root)})
        click.echo(str(root))


@click.command("show", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--file", "file_name", type=str, default=None, help=_FILE_OPTION_HELP)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    default=OutputFormat.HUMAN.value,
    help="Output format (human-readable or JSON)",
)
@click.option(
    "--section",
    type=str,
    default=None,
    help="Show only one top-level section of the configuration",
)
@click.pass_context
def cli_show(ctx: click.Context, file_name: str | None, output_format: str, section: str | None) -> None:
    """Load the project configuration and display it.

    A ``.json`` file is parsed, a ``.py`` file is executed and must bind a
    mapping named ``config``. Only run this on trusted projects.
    """
    cli_ctx = get_cli_context(ctx)
    fmt = OutputFormat(output_format.lower())
    store = cli_ctx.store(file_name)

    extra = {"command": "show", "file": store.options.file_name, "format": fmt.value}
    with lib_log_rich.runtime.bind(job_id="cli-show", extra=extra):
        try:
            config = asyncio.run(store.load())
        except ConfigError as exc:
            _fail(exc)
        logger.info("Displaying configuration", extra={"path": str(store.loaded_path), "section": section})
        try:
            cli_ctx.services.display_config(config, output_format=fmt, section=section, source=store.loaded_path)
        except ValueError as exc:
            click.echo(f"\nError: {exc}", err=True)
            raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc


@click.command("init", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--file", "file_name", type=str, default=None, help=_FILE_OPTION_HELP)
@click.pass_context
def cli_init(ctx: click.Context, file_name: str | None) -> None:
    """Create a minimal configuration file in the project root.

    An existing file is left untouched.
    """
    cli_ctx = get_cli_context(ctx)
    store = cli_ctx.store(file_name)
    name = store.options.file_name

    with lib_log_rich.runtime.bind(job_id="cli-init", extra={"command": "init", "file": name}):
        fmt = ConfigFormat.from_suffix(Path(name).suffix)
        if fmt is None:
            suffix = Path(name).suffix
            _fail(ConfigError(f"Unsupported config file extension: {suffix!r}", kind=ErrorKind.UNSUPPORTED_FORMAT))
        try:
            target, created = asyncio.run(_init_file(store, name, STARTER_CONTENT[fmt]))
        except ConfigError as exc:
            _fail(exc)
        if created:
            logger.info("Created configuration file", extra={"path": str(target)})
            click.echo(f"Created {target}")
        else:
            logger.info("Configuration file already exists", extra={"path": str(target)})
            click.echo(f"Already exists: {target}")


async def _init_file(store: ConfigStore[Any], name: str, content: str) -> tuple[Path, bool]:
    target = Path(await store.resolve_root_async()) / name
    try:
        await store.path_exists(target)
    except ConfigError:
        await store.ensure_file(target, content)
        return target, True
    return target, False


@click.command("check", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("paths", nargs=-1, required=True, type=str)
@click.pass_context
def cli_check(ctx: click.Context, paths: tuple[str, ...]) -> None:
    """Verify that every PATH exists; fail on the first one that does not."""
    cli_ctx = get_cli_context(ctx)
    with lib_log_rich.runtime.bind(job_id="cli-check", extra={"command": "check", "count": len(paths)}):
        store = cli_ctx.store()
        try:
            asyncio.run(store.all_paths_exist(list(paths)))
        except ConfigError as exc:
            _fail(exc)
        logger.info("All paths exist", extra={"paths": list(paths)})
        click.echo(f"All {len(paths)} path(s) exist")


__all__ = ["cli_check", "cli_init", "cli_root", "cli_show"]
