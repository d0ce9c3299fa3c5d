"""In-memory adapter implementations for testing.

Lightweight implementations of the application ports that operate entirely
in memory -- no filesystem, no terminal output, no logging framework.

Contents:
    * :mod:`.fs` - In-memory filesystem, readers, and root resolver
    * :mod:`.config` - In-memory settings loader and display spy
    * :mod:`.logging` - In-memory logging adapter
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import DisplaySpy, get_settings_in_memory
from .fs import InMemoryFileSystem, InMemoryResolver
from .logging import init_logging_in_memory

# Static conformance assertions
if TYPE_CHECKING:
    from rootconf.application.ports import (
        AllPathsExist,
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

    _fs = InMemoryFileSystem()
    _assert_path_exists: PathExists = _fs.path_exists
    _assert_all_paths_exist: AllPathsExist = _fs.all_paths_exist
    _assert_ensure_directory: EnsureDirectory = _fs.ensure_directory
    _assert_ensure_file: EnsureFile = _fs.ensure_file
    _assert_read_data: ReadData = _fs.read_data
    _assert_read_script: ReadScript = _fs.read_script
    _assert_resolver: RootResolver = InMemoryResolver()
    _assert_get_settings: GetSettings = get_settings_in_memory
    _assert_display_config: DisplayConfig = DisplaySpy().display_config
    _assert_init_logging: InitLogging = init_logging_in_memory

__all__ = [
    "DisplaySpy",
    "InMemoryFileSystem",
    "InMemoryResolver",
    "get_settings_in_memory",
    "init_logging_in_memory",
]
