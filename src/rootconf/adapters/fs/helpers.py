"""Asynchronous existence checks and create-if-missing helpers.

Blocking ``pathlib`` calls run on the default executor through
``asyncio.to_thread`` so the event loop keeps serving other work while the
filesystem responds. Every failure surfaces as a
:class:`~rootconf.domain.errors.ConfigError`; nothing is retried.

Contents:
    * :func:`path_exists` - fail unless a path is accessible.
    * :func:`all_paths_exist` - concurrent :func:`path_exists` over many paths.
    * :func:`ensure_directory` - create a directory tree when missing.
    * :func:`ensure_file` - create a file (and its parents) when missing.
"""

from __future__ import annotations

import asyncio
import logging
import os
from collections.abc import Sequence
from pathlib import Path

from rootconf.domain.enums import ErrorKind
from rootconf.domain.errors import ConfigError

logger = logging.getLogger(__name__)

PathArg = str | os.PathLike[str]


def is_path(value: object) -> bool:
    """Return True for values accepted as filesystem paths.

    Example:
        >>> is_path("config.json"), is_path(Path("x")), is_path(123)
        (True, True, False)
    """
    return isinstance(value, (str, os.PathLike))


def as_path(value: object) -> Path:
    """Coerce *value* to :class:`Path` or raise ``INVALID_ARGUMENT``."""
    if not is_path(value):
        raise ConfigError(f"Invalid path: {value!r}", kind=ErrorKind.INVALID_ARGUMENT)
    return Path(value)  # type: ignore[arg-type]


async def path_exists(path: PathArg) -> None:
    """Return when *path* is accessible, raise otherwise.

    Raises:
        ConfigError: ``INVALID_ARGUMENT`` for a non-path value,
            ``NOT_ACCESSIBLE`` when the path cannot be stat'ed.

    Example:
        >>> import asyncio, tempfile
        >>> asyncio.run(path_exists(tempfile.gettempdir())) is None
        True
    """
    target = as_path(path)
    try:
        await asyncio.to_thread(target.stat)
    except OSError as exc:
        raise ConfigError(str(exc), kind=ErrorKind.NOT_ACCESSIBLE) from exc


async def all_paths_exist(paths: Sequence[PathArg]) -> None:
    """Check every path concurrently; fail with the first error observed.

    All checks are started before any result is inspected, so a missing
    path never prevents the others from being probed. Which error surfaces
    when several paths fail at once is not deterministic.

    Raises:
        ConfigError: ``INVALID_ARGUMENT`` unless *paths* is a list or tuple
            of paths; otherwise the first failing :func:`path_exists` error.
    """
    if not isinstance(paths, (list, tuple)) or not all(is_path(p) for p in paths):
        raise ConfigError(f"Invalid paths: {paths!r}", kind=ErrorKind.INVALID_ARGUMENT)
    await asyncio.gather(*(path_exists(p) for p in paths))


async def ensure_directory(path: PathArg) -> None:
    """Create *path* and any missing ancestors unless it already exists.

    Raises:
        ConfigError: ``INVALID_ARGUMENT`` for a non-path value,
            ``CREATE_FAILED`` when the directory cannot be created.
    """
    target = as_path(path)
    try:
        await path_exists(target)
        return
    except ConfigError:
        pass

    try:
        await asyncio.to_thread(target.mkdir, parents=True, exist_ok=True)
    except OSError as exc:
        raise ConfigError(str(exc), kind=ErrorKind.CREATE_FAILED) from exc
    logger.debug("Created directory", extra={"path": str(target)})


async def ensure_file(path: PathArg, content: str = "") -> None:
    """Create *path* with *content* unless it already exists.

    Parent directories are created first. An existing file is left
    untouched, whatever its content.

    Raises:
        ConfigError: ``INVALID_ARGUMENT`` for a non-path or non-string
            content, ``CREATE_FAILED`` when a directory or the file cannot
            be created.
    """
    target = as_path(path)
    if not isinstance(content, str):
        raise ConfigError(f"Invalid content: {content!r}", kind=ErrorKind.INVALID_ARGUMENT)

    try:
        await path_exists(target)
        return
    except ConfigError:
        pass

    await ensure_directory(target.parent)
    try:
        await asyncio.to_thread(target.write_text, content, encoding="utf-8")
    except OSError as exc:
        raise ConfigError(str(exc), kind=ErrorKind.CREATE_FAILED) from exc
    logger.debug("Created file", extra={"path": str(target)})


__all__ = [
    "PathArg",
    "all_paths_exist",
    "as_path",
    "ensure_directory",
    "ensure_file",
    "is_path",
    "path_exists",
]
