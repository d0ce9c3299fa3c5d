"""In-memory filesystem adapters for testing.

Satisfies the same ports as :mod:`rootconf.adapters.fs` but keeps files in a
dictionary and counts every call, so tests can assert exactly when a store
touches "disk".
"""

from __future__ import annotations

import asyncio
import os
from collections import Counter
from collections.abc import Mapping, Sequence
from pathlib import PurePosixPath
from typing import Any

import orjson

from ...domain.enums import ErrorKind
from ...domain.errors import ConfigError

PathArg = str | os.PathLike[str]


def _key(path: object) -> PurePosixPath:
    if not isinstance(path, (str, os.PathLike)):
        raise ConfigError(f"Invalid path: {path!r}", kind=ErrorKind.INVALID_ARGUMENT)
    return PurePosixPath(os.fspath(path))


class InMemoryFileSystem:
    """Dictionary-backed files and directories with call accounting.

    Files hold either text (parsed as JSON by :meth:`read_data`) or a
    mapping (returned by :meth:`read_script` as if a module bound it to
    ``config``).

    Example:
        >>> fs = InMemoryFileSystem({"/p/app.json": '{"a": 1}'})
        >>> asyncio.run(fs.read_data("/p/app.json"))
        {'a': 1}
        >>> fs.calls["read_data"]
        1
    """

    def __init__(self, files: Mapping[str, str | Mapping[str, Any]] | None = None) -> None:
        self.files: dict[PurePosixPath, str | Mapping[str, Any]] = {}
        self.directories: set[PurePosixPath] = set()
        self.calls: Counter[str] = Counter()
        for path, content in (files or {}).items():
            self.put(path, content)

    def put(self, path: PathArg, content: str | Mapping[str, Any]) -> None:
        """Create or replace a file, registering its ancestor directories."""
        key = _key(path)
        self.files[key] = content
        self.directories.update(key.parents)

    def remove(self, path: PathArg) -> None:
        self.files.pop(_key(path), None)

    @property
    def total_calls(self) -> int:
        return sum(self.calls.values())

    async def path_exists(self, path: PathArg) -> None:
        self.calls["path_exists"] += 1
        key = _key(path)
        await asyncio.sleep(0)
        if key not in self.files and key not in self.directories:
            raise ConfigError(f"ENOENT: no such file or directory: {key}", kind=ErrorKind.NOT_ACCESSIBLE)

    async def all_paths_exist(self, paths: Sequence[PathArg]) -> None:
        self.calls["all_paths_exist"] += 1
        if not isinstance(paths, (list, tuple)):
            raise ConfigError(f"Invalid paths: {paths!r}", kind=ErrorKind.INVALID_ARGUMENT)
        await asyncio.gather(*(self.path_exists(p) for p in paths))

    async def ensure_directory(self, path: PathArg) -> None:
        self.calls["ensure_directory"] += 1
        key = _key(path)
        self.directories.add(key)
        self.directories.update(key.parents)

    async def ensure_file(self, path: PathArg, content: str = "") -> None:
        self.calls["ensure_file"] += 1
        key = _key(path)
        if not isinstance(content, str):
            raise ConfigError(f"Invalid content: {content!r}", kind=ErrorKind.INVALID_ARGUMENT)
        if key not in self.files:
            await self.ensure_directory(key.parent)
            self.files[key] = content

    async def read_data(self, path: PathArg) -> dict[str, Any]:
        self.calls["read_data"] += 1
        content = self.files.get(_key(path))
        if not isinstance(content, str):
            raise ConfigError(f"Cannot read data file: {path}", kind=ErrorKind.LOAD_FAILED)
        try:
            parsed = orjson.loads(content)
        except orjson.JSONDecodeError as exc:
            raise ConfigError(str(exc), kind=ErrorKind.LOAD_FAILED) from exc
        if not isinstance(parsed, dict):
            raise ConfigError(f"Expected a JSON object in {path}", kind=ErrorKind.LOAD_FAILED)
        return parsed

    def read_script(self, path: PathArg) -> Mapping[str, Any]:
        self.calls["read_script"] += 1
        content = self.files.get(_key(path))
        if not isinstance(content, Mapping):
            raise ConfigError(f"{path} must define a mapping named 'config'", kind=ErrorKind.LOAD_FAILED)
        return dict(content)


class InMemoryResolver:
    """Resolver returning a fixed root while counting probes.

    ``probes`` grows only when the cache is empty, matching the real
    resolver's caching contract.
    """

    def __init__(self, root: PathArg | None = "/project") -> None:
        self._configured = PurePosixPath(os.fspath(root)) if root is not None else None
        self._root: Any = None
        self.probes = 0

    @property
    def root(self) -> Any:
        return self._root

    def reset(self) -> None:
        self._root = None

    def resolve_root(self) -> Any:
        if self._root is not None:
            return self._root
        self.probes += 1
        if self._configured is None:
            raise ConfigError("Could not find project root", kind=ErrorKind.NOT_FOUND)
        self._root = self._configured
        return self._root

    async def resolve_root_async(self) -> Any:
        await asyncio.sleep(0)
        return self.resolve_root()


__all__ = ["InMemoryFileSystem", "InMemoryResolver"]
