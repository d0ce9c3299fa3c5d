"""Format readers turning a present configuration file into a raw mapping.

Contents:
    * :func:`read_data` - parse a ``.json`` file with orjson.
    * :func:`read_script` - execute a ``.py`` file and take its ``config``.

Both readers report read, parse, and evaluation failures as
``LOAD_FAILED``. Neither checks extensions or existence; the store does
that before dispatching here.

Warning:
    :func:`read_script` runs arbitrary Python code with the privileges of
    the current process. Only point it at files you would import yourself.
"""

from __future__ import annotations

import asyncio
import runpy
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

import orjson

from rootconf.domain.enums import ErrorKind
from rootconf.domain.errors import ConfigError

#: Module attribute a script configuration must bind.
SCRIPT_CONFIG_ATTRIBUTE: Final[str] = "config"

#: ``__name__`` seen by script configurations while they execute.
SCRIPT_RUN_NAME: Final[str] = "__rootconf__"


async def read_data(path: Path) -> dict[str, Any]:
    """Read and parse the JSON document at *path*.

    Raises:
        ConfigError: ``LOAD_FAILED`` when the file cannot be read, is not
            valid JSON, or does not hold a JSON object.
    """
    try:
        content = await asyncio.to_thread(path.read_bytes)
        parsed = orjson.loads(content)
    except (OSError, orjson.JSONDecodeError) as exc:
        raise ConfigError(str(exc), kind=ErrorKind.LOAD_FAILED) from exc

    if not isinstance(parsed, dict):
        raise ConfigError(
            f"Expected a JSON object in {path}, got {type(parsed).__name__}",
            kind=ErrorKind.LOAD_FAILED,
        )
    return parsed


def read_script(path: Path) -> Mapping[str, Any]:
    """Execute the Python file at *path* and return its ``config`` mapping.

    The source is compiled from disk on every call (no bytecode cache, no
    ``sys.modules`` entry), so edits are always picked up by a reload.

    Raises:
        ConfigError: ``LOAD_FAILED`` when the file cannot be compiled,
            raises or exits during execution, or lacks a mapping named
            ``config``.
    """
    try:
        namespace = runpy.run_path(str(path), run_name=SCRIPT_RUN_NAME)
    except SystemExit as exc:
        raise ConfigError(f"{path} called exit({exc.code!r})", kind=ErrorKind.LOAD_FAILED) from exc
    except Exception as exc:
        raise ConfigError(str(exc) or type(exc).__name__, kind=ErrorKind.LOAD_FAILED) from exc

    value = namespace.get(SCRIPT_CONFIG_ATTRIBUTE)
    if not isinstance(value, Mapping):
        raise ConfigError(
            f"{path} must define a mapping named {SCRIPT_CONFIG_ATTRIBUTE!r}",
            kind=ErrorKind.LOAD_FAILED,
        )
    return value


__all__ = ["SCRIPT_CONFIG_ATTRIBUTE", "SCRIPT_RUN_NAME", "read_data", "read_script"]
