"""Configuration store: load once, validate once, serve from cache.

A :class:`ConfigStore` owns every piece of mutable state involved in
loading a configuration file: the validator pipeline, the cached validated
configuration, and the path it came from. Root discovery state lives on the
injected resolver. Stores are independent of each other, so several
configurations (or several tests) can share a process.

State machine::

    empty --load()/load_data()/load_script() ok--> loaded(config, path)
    empty --file missing, default set---------->  empty (default returned)
    loaded --load()---------------------------->  loaded (cache hit, no I/O)
    loaded --reload() ok----------------------->  loaded(new config, path)
    any   --reset()---------------------------->  empty

A failed load never touches the cached state.

Contents:
    * :class:`StoreOptions` - per-configuration file name and default.
    * :class:`StoreAdapters` - filesystem and reader ports the store calls.
    * :class:`ConfigStore` - the store itself.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Generic, cast

from ..domain.enums import ConfigFormat, ErrorKind
from ..domain.errors import ConfigError
from ..domain.pipeline import ConfigT, Validator, ValidatorPipeline
from .ports import (
    AllPathsExist,
    EnsureDirectory,
    EnsureFile,
    PathExists,
    ReadData,
    ReadScript,
    RootResolver,
)

logger = logging.getLogger(__name__)

_FORMAT_LABELS = {ConfigFormat.DATA: "JSON", ConfigFormat.SCRIPT: "Python"}


@dataclass(frozen=True, slots=True)
class StoreOptions(Generic[ConfigT]):
    """Static settings for one configuration.

    Attributes:
        file_name: File looked up in the project root by :meth:`ConfigStore.load`.
            Its extension selects the reader.
        default: Returned as is when the file is missing. Never validated,
            never cached. ``None`` means a missing file is an error.

    Example:
        >>> StoreOptions("app.config.json", default={"debug": False}).file_name
        'app.config.json'
    """

    file_name: str
    default: ConfigT | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.file_name, str) or not self.file_name:
            raise ConfigError(f"Invalid config file name: {self.file_name!r}", kind=ErrorKind.INVALID_ARGUMENT)


@dataclass(frozen=True, slots=True)
class StoreAdapters:
    """Frozen container of the adapter implementations a store calls."""

    resolver: RootResolver
    path_exists: PathExists
    all_paths_exist: AllPathsExist
    ensure_directory: EnsureDirectory
    ensure_file: EnsureFile
    read_data: ReadData
    read_script: ReadScript


class ConfigStore(Generic[ConfigT]):
    """Load, validate, and cache a single configuration file.

    Build instances through :func:`rootconf.create_store`, which wires the
    production adapters.

    Example:
        >>> from rootconf import create_store
        >>> store = create_store("app.config.json", default={"debug": False})
        >>> store.is_loaded
        False
        >>> store.register(lambda cfg: cfg) is store
        True
    """

    def __init__(self, options: StoreOptions[ConfigT], adapters: StoreAdapters) -> None:
        self.options = options
        self._adapters = adapters
        self._pipeline: ValidatorPipeline[ConfigT] = ValidatorPipeline()
        self._config: ConfigT | None = None
        self._loaded: Path | None = None

    # ------------------------------------------------------------------ state

    @property
    def config(self) -> ConfigT | None:
        """Cached validated configuration, or ``None`` before a file load."""
        return self._config

    @property
    def loaded_path(self) -> Path | None:
        """Path of the most recently loaded file, used by :meth:`reload`."""
        return self._loaded

    @property
    def is_loaded(self) -> bool:
        return self._config is not None

    @property
    def root(self) -> Path | None:
        """Cached project root, or ``None`` before the first resolution."""
        return self._adapters.resolver.root

    @property
    def validators(self) -> tuple[Validator[ConfigT], ...]:
        return self._pipeline.validators

    def reset(self) -> None:
        """Return the store to its freshly built state.

        Clears the cached configuration, the loaded path, every registered
        validator, and the resolver's cached root.
        """
        self._config = None
        self._loaded = None
        self._pipeline.clear()
        self._adapters.resolver.reset()

    # ------------------------------------------------------------- validation

    def register(self, validator: Validator[ConfigT]) -> ConfigStore[ConfigT]:
        """Append *validator* to the pipeline and return the store for chaining.

        *validator* returns the next configuration value, or ``None`` to keep
        its (possibly mutated) argument.
        Register validators before the first load: a cached configuration
        is not re-validated.

        Raises:
            ConfigError: ``INVALID_ARGUMENT`` if *validator* is not callable.
        """
        self._pipeline.register(validator)
        return self

    def validate(self, config: ConfigT) -> ConfigT:
        """Run *config* through the registered validators, in order.

        See :meth:`rootconf.domain.pipeline.ValidatorPipeline.validate`.
        """
        return self._pipeline.validate(config)

    # ---------------------------------------------------------------- loading

    async def load(self) -> ConfigT:
        """Return the cached configuration, loading it on first use.

        The configured file name is looked up in the project root; its
        extension picks the reader. When the file is missing the default is
        returned (and nothing is cached).

        Raises:
            ConfigError: ``UNSUPPORTED_FORMAT`` for an unknown extension,
                ``NOT_FOUND`` when the root or (without default) the file is
                missing, ``LOAD_FAILED`` on read/parse/evaluation errors.
        """
        if self._config is not None:
            logger.debug("Serving cached configuration", extra={"path": str(self._loaded)})
            return self._config

        suffix = Path(self.options.file_name).suffix
        fmt = ConfigFormat.from_suffix(suffix)
        if fmt is None:
            raise ConfigError(f"Unsupported config file extension: {suffix!r}", kind=ErrorKind.UNSUPPORTED_FORMAT)

        return await self._dispatch(fmt, self.resolve_root() / self.options.file_name)

    async def reload(self) -> ConfigT:
        """Re-read and re-validate the last loaded file, ignoring the cache.

        Raises:
            ConfigError: ``NOTHING_TO_RELOAD`` before any successful file
                load, ``UNSUPPORTED_FORMAT`` for an unknown extension, or
                any error of :meth:`load_data` / :meth:`load_script`.
        """
        if self._loaded is None:
            raise ConfigError("Nothing to reload", kind=ErrorKind.NOTHING_TO_RELOAD)

        fmt = ConfigFormat.from_suffix(self._loaded.suffix)
        if fmt is None:
            raise ConfigError(
                f"Unsupported config file extension: {self._loaded.suffix!r}",
                kind=ErrorKind.UNSUPPORTED_FORMAT,
            )

        logger.info("Reloading configuration", extra={"path": str(self._loaded)})
        return await self._dispatch(fmt, self._loaded)

    async def load_data(self, path: str | os.PathLike[str]) -> ConfigT:
        """Load, validate, and cache the JSON file at *path*.

        Always touches the filesystem; use :meth:`load` for cached access.

        Raises:
            ConfigError: ``INVALID_ARGUMENT`` for a non-path,
                ``INVALID_FORMAT`` unless the extension is ``.json``,
                ``NOT_FOUND`` when missing without default,
                ``LOAD_FAILED`` on read or parse errors.
        """
        target = self._checked_path(path, ConfigFormat.DATA)
        missing = await self._missing(target)
        if missing is not None:
            return self._fallback(target, missing)
        raw = await self._adapters.read_data(target)
        return self._accept(target, raw, ConfigFormat.DATA)

    async def load_script(self, path: str | os.PathLike[str]) -> ConfigT:
        """Load, validate, and cache the Python configuration at *path*.

        The file is executed synchronously and must bind a mapping named
        ``config``. This executes arbitrary code: only load trusted files.

        Raises:
            ConfigError: ``INVALID_ARGUMENT`` for a non-path,
                ``INVALID_FORMAT`` unless the extension is ``.py``,
                ``NOT_FOUND`` when missing without default,
                ``LOAD_FAILED`` on evaluation errors.
        """
        target = self._checked_path(path, ConfigFormat.SCRIPT)
        missing = await self._missing(target)
        if missing is not None:
            return self._fallback(target, missing)
        raw = self._adapters.read_script(target)
        return self._accept(target, raw, ConfigFormat.SCRIPT)

    async def _dispatch(self, fmt: ConfigFormat, path: Path) -> ConfigT:
        if fmt is ConfigFormat.SCRIPT:
            return await self.load_script(path)
        return await self.load_data(path)

    @staticmethod
    def _checked_path(path: object, fmt: ConfigFormat) -> Path:
        if not isinstance(path, (str, os.PathLike)):
            raise ConfigError(f"Invalid path: {path!r}", kind=ErrorKind.INVALID_ARGUMENT)
        target = Path(path)
        if target.suffix.lower() != fmt.value:
            raise ConfigError(f"Invalid {_FORMAT_LABELS[fmt]} path: {target}", kind=ErrorKind.INVALID_FORMAT)
        return target

    async def _missing(self, path: Path) -> ConfigError | None:
        """Return the existence failure for *path*, or ``None`` when present."""
        try:
            await self._adapters.path_exists(path)
        except ConfigError as exc:
            return exc
        return None

    def _fallback(self, path: Path, cause: ConfigError) -> ConfigT:
        if self.options.default is None:
            raise ConfigError(str(cause), kind=ErrorKind.NOT_FOUND) from cause
        logger.info("Configuration file missing, using default", extra={"path": str(path)})
        return self.options.default

    def _accept(self, path: Path, raw: Any, fmt: ConfigFormat) -> ConfigT:
        validated = self._pipeline.validate(cast(ConfigT, raw))
        self._config = validated
        self._loaded = path
        logger.info(
            "Loaded configuration",
            extra={"path": str(path), "format": fmt.name.lower(), "validators": len(self._pipeline)},
        )
        return validated

    # ------------------------------------------------------- filesystem access

    def resolve_root(self) -> Path:
        """Blocking project root lookup (cached). See :class:`~rootconf.adapters.fs.root.PathResolver`."""
        return self._adapters.resolver.resolve_root()

    async def resolve_root_async(self) -> Path:
        """Non-blocking project root lookup sharing the same cache."""
        return await self._adapters.resolver.resolve_root_async()

    async def path_exists(self, path: str | os.PathLike[str]) -> None:
        await self._adapters.path_exists(path)

    async def all_paths_exist(self, paths: Sequence[str | os.PathLike[str]]) -> None:
        await self._adapters.all_paths_exist(paths)

    async def ensure_directory(self, path: str | os.PathLike[str]) -> None:
        await self._adapters.ensure_directory(path)

    async def ensure_file(self, path: str | os.PathLike[str], content: str = "") -> None:
        await self._adapters.ensure_file(path, content)


__all__ = ["ConfigStore", "StoreAdapters", "StoreOptions"]
