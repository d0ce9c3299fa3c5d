"""Application layer - the configuration store and port definitions.

Contents:
    * :mod:`.ports` - Callable Protocol definitions for adapter functions
    * :mod:`.store` - ConfigStore load/cache/reload state machine
"""

from __future__ import annotations

from .ports import (
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
from .store import ConfigStore, StoreAdapters, StoreOptions

__all__ = [
    "AllPathsExist",
    "CreateStore",
    "ConfigStore",
    "DisplayConfig",
    "EnsureDirectory",
    "EnsureFile",
    "GetSettings",
    "InitLogging",
    "PathExists",
    "ReadData",
    "ReadScript",
    "RootResolver",
    "StoreAdapters",
    "StoreOptions",
]
