"""Run the rootconf command group and turn its outcome into an exit code.

Click is driven in non-standalone mode so the services factory can travel
on ``ctx.obj``; failures that are not Click usage errors are rendered by
``lib_cli_exit_tools`` exactly as its own ``run_cli`` would.
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import click
import lib_cli_exit_tools
import lib_log_rich.runtime

from rootconf import __init__conf__

from .constants import TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import TracebackState, apply_traceback_preferences

if TYPE_CHECKING:
    from rootconf.composition import AppServices

ServicesFactory = Callable[[], "AppServices"]


def _report_failure(exc: BaseException) -> int:
    """Print *exc* the lib_cli_exit_tools way and return its exit code."""
    verbose = TracebackState.current().enabled
    apply_traceback_preferences(verbose)
    lib_cli_exit_tools.print_exception_message(
        trace_back=verbose,
        length_limit=TRACEBACK_VERBOSE_LIMIT if verbose else TRACEBACK_SUMMARY_LIMIT,
    )
    return lib_cli_exit_tools.get_system_exit_code(exc)


def _invoke(argv: Sequence[str] | None, services_factory: ServicesFactory) -> int:
    from .root import cli

    try:
        cli.main(
            args=sys.argv[1:] if argv is None else list(argv),
            prog_name=__init__conf__.shell_command,
            obj=services_factory,
            standalone_mode=False,
        )
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except BaseException as exc:  # SystemExit and KeyboardInterrupt included
        return _report_failure(exc)
    return 0


def _shutdown_logging() -> None:
    # Worker threads share the runtime; only the main thread may close it.
    if threading.current_thread() is not threading.main_thread():
        return
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.shutdown()


def main(
    argv: Sequence[str] | None = None,
    *,
    restore_traceback: bool = True,
    services_factory: ServicesFactory | None = None,
) -> int:
    """Run the CLI and return its exit code instead of exiting.

    Args:
        argv: Arguments without the program name. ``None`` reads ``sys.argv``.
        restore_traceback: Put the traceback flags back the way they were
            once the command finishes.
        services_factory: Callable returning the wired ``AppServices``;
            ``rootconf.composition.build_production`` for real use.

    Returns:
        The process exit code.

    Raises:
        ValueError: If no services factory is given.
    """
    if services_factory is None:
        raise ValueError("services_factory is required. Pass build_production from composition layer.")

    before = TracebackState.current()
    try:
        return _invoke(argv, services_factory)
    finally:
        if restore_traceback:
            before.apply()
        _shutdown_logging()


__all__ = ["main"]
