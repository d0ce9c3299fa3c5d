"""Application ports - callable Protocol definitions for adapter functions.

Each Protocol class defines a ``__call__`` (or method set) whose signature
matches the corresponding adapter. Module-level adapter functions satisfy
these protocols automatically via structural subtyping (PEP 544).

System Role:
    Sits between domain and adapters. Infrastructure types (``Config``) are
    imported under ``TYPE_CHECKING`` only so that layer contracts remain
    satisfied at runtime.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Any, Protocol

from ..domain.enums import OutputFormat

if TYPE_CHECKING:
    import os

    from lib_layered_config import Config

    from .store import ConfigStore

    PathArg = str | os.PathLike[str]


class RootResolver(Protocol):
    """Locate and cache the project root directory."""

    @property
    def root(self) -> Path | None: ...

    def resolve_root(self) -> Path: ...

    async def resolve_root_async(self) -> Path: ...

    def reset(self) -> None: ...


class PathExists(Protocol):
    """Fail unless a path is accessible."""

    async def __call__(self, path: PathArg) -> None: ...


class AllPathsExist(Protocol):
    """Fail unless every path is accessible."""

    async def __call__(self, paths: Sequence[PathArg]) -> None: ...


class EnsureDirectory(Protocol):
    """Create a directory tree when missing."""

    async def __call__(self, path: PathArg) -> None: ...


class EnsureFile(Protocol):
    """Create a file and its parents when missing."""

    async def __call__(self, path: PathArg, content: str = ...) -> None: ...


class ReadData(Protocol):
    """Parse a structured-data configuration file."""

    async def __call__(self, path: Path) -> Mapping[str, Any]: ...


class ReadScript(Protocol):
    """Evaluate a script configuration file."""

    def __call__(self, path: Path) -> Mapping[str, Any]: ...


class CreateStore(Protocol):
    """Build a ConfigStore for one configuration file."""

    def __call__(self, file_name: str, default: Any = ..., *, marker: str = ...) -> ConfigStore[Any]: ...


class GetSettings(Protocol):
    """Load the tool's layered settings."""

    def __call__(self, *, start_dir: str | None = ...) -> Config: ...


class DisplayConfig(Protocol):
    """Render a loaded configuration in the requested format."""

    def __call__(
        self,
        config: Mapping[str, Any],
        *,
        output_format: OutputFormat = ...,
        section: str | None = ...,
        source: Path | None = ...,
    ) -> None: ...


class InitLogging(Protocol):
    """Initialize lib_log_rich runtime with the provided settings."""

    def __call__(self, config: Config) -> None: ...


__all__ = [
    "AllPathsExist",
    "CreateStore",
    "DisplayConfig",
    "EnsureDirectory",
    "EnsureFile",
    "GetSettings",
    "InitLogging",
    "PathExists",
    "ReadData",
    "ReadScript",
    "RootResolver",
]
