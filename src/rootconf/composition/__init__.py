"""Composition root wiring adapters to application ports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from ..adapters.config.display import display_config

# Settings services
from ..adapters.config.settings import get_settings

# Filesystem services
from ..adapters.fs.helpers import all_paths_exist, ensure_directory, ensure_file, path_exists
from ..adapters.fs.readers import read_data, read_script
from ..adapters.fs.root import ROOT_MARKER, PathResolver

# Logging services
from ..adapters.logging.setup import init_logging
from ..application.store import ConfigStore, StoreAdapters, StoreOptions
from ..domain.pipeline import ConfigT

# Static conformance assertions - pyright verifies that each adapter function
# structurally satisfies its corresponding Protocol at type-check time.
if TYPE_CHECKING:
    from ..adapters.memory import DisplaySpy, InMemoryFileSystem, InMemoryResolver
    from ..application.ports import (
        AllPathsExist,
        CreateStore,
        DisplayConfig,
        EnsureDirectory,
        EnsureFile,
        GetSettings,
        InitLogging,
        PathExists,
        ReadData,
        ReadScript,
        RootResolver,
    )

    _assert_path_exists: PathExists = path_exists
    _assert_all_paths_exist: AllPathsExist = all_paths_exist
    _assert_ensure_directory: EnsureDirectory = ensure_directory
    _assert_ensure_file: EnsureFile = ensure_file
    _assert_read_data: ReadData = read_data
    _assert_read_script: ReadScript = read_script
    _assert_resolver: RootResolver = PathResolver()
    _assert_get_settings: GetSettings = get_settings
    _assert_display_config: DisplayConfig = display_config
    _assert_init_logging: InitLogging = init_logging


def build_store_adapters(*, marker: str = ROOT_MARKER) -> StoreAdapters:
    """Wire the real filesystem adapters with a fresh root resolver."""
    return StoreAdapters(
        resolver=PathResolver(marker),
        path_exists=path_exists,
        all_paths_exist=all_paths_exist,
        ensure_directory=ensure_directory,
        ensure_file=ensure_file,
        read_data=read_data,
        read_script=read_script,
    )


def create_store(
    file_name: str,
    default: ConfigT | None = None,
    *,
    marker: str = ROOT_MARKER,
    adapters: StoreAdapters | None = None,
) -> ConfigStore[ConfigT]:
    """Build an independent :class:`ConfigStore` for *file_name*.

    Args:
        file_name: File looked up in the project root; ``.json`` or ``.py``.
        default: Returned unvalidated when the file is missing.
        marker: Directory name identifying the project root.
        adapters: Replacement adapters, mainly for tests. Defaults to the
            real filesystem with a resolver of its own.

    Example:
        >>> store = create_store("app.config.json", default={"debug": False})
        >>> store.options.default
        {'debug': False}
    """
    options: StoreOptions[ConfigT] = StoreOptions(file_name=file_name, default=default)
    return ConfigStore(options, adapters if adapters is not None else build_store_adapters(marker=marker))


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding the services the command line tool uses."""

    create_store: CreateStore
    get_settings: GetSettings
    display_config: DisplayConfig
    init_logging: InitLogging


def build_production() -> AppServices:
    """Wire production adapters into an AppServices container."""
    return AppServices(
        create_store=create_store,
        get_settings=get_settings,
        display_config=display_config,
        init_logging=init_logging,
    )


def build_memory_store_adapters(fs: InMemoryFileSystem, resolver: InMemoryResolver) -> StoreAdapters:
    """Wire in-memory filesystem adapters into a StoreAdapters container."""
    return StoreAdapters(
        resolver=resolver,
        path_exists=fs.path_exists,
        all_paths_exist=fs.all_paths_exist,
        ensure_directory=fs.ensure_directory,
        ensure_file=fs.ensure_file,
        read_data=fs.read_data,
        read_script=fs.read_script,
    )


def build_testing(
    *,
    fs: InMemoryFileSystem | None = None,
    resolver: InMemoryResolver | None = None,
    spy: DisplaySpy | None = None,
    init_logging: InitLogging | None = None,
) -> AppServices:
    """Wire in-memory adapters into an AppServices container.

    Args:
        fs: In-memory filesystem shared by every store the services create.
            A fresh empty one when None.
        resolver: Root resolver for those stores. Resolves ``/project`` when None.
        spy: DisplaySpy capturing display requests. A fresh one when None.
        init_logging: Logging initializer. The in-memory double when None;
            CLI commands bind lib_log_rich context and need the real one.

    Returns:
        AppServices container with in-memory adapters.
    """
    from ..adapters.memory import (
        DisplaySpy,
        InMemoryFileSystem,
        InMemoryResolver,
        get_settings_in_memory,
        init_logging_in_memory,
    )

    memory_fs = fs if fs is not None else InMemoryFileSystem()
    memory_resolver = resolver if resolver is not None else InMemoryResolver()
    display_spy = spy if spy is not None else DisplaySpy()

    def _create_store(file_name: str, default: Any = None, *, marker: str = ROOT_MARKER) -> ConfigStore[Any]:
        return create_store(file_name, default, adapters=build_memory_store_adapters(memory_fs, memory_resolver))

    return AppServices(
        create_store=_create_store,
        get_settings=get_settings_in_memory,
        display_config=display_spy.display_config,
        init_logging=init_logging if init_logging is not None else init_logging_in_memory,
    )


__all__ = [
    # Store
    "build_memory_store_adapters",
    "build_store_adapters",
    "create_store",
    # Tool services
    "display_config",
    "get_settings",
    "init_logging",
    # Composition
    "AppServices",
    "build_production",
    "build_testing",
]
