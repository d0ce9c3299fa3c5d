"""Public package surface for loading project-root configuration files.

Routes imports through the architectural layers:
- Domain exports: ConfigError, ErrorKind, ValidatorPipeline
- Application exports: ConfigStore, StoreOptions
- Composition exports: create_store (wired with the real filesystem)
- Adapter exports: filesystem helpers and PathResolver
- Metadata: Package information

Example:
    >>> from rootconf import create_store
    >>> store = create_store("app.config.json", default={"debug": False})
    >>> _ = store.register(lambda cfg: {**cfg, "debug": bool(cfg.get("debug"))})
    >>> # config = await store.load()
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Adapter exports
from .adapters.fs import (
    ROOT_MARKER,
    PathResolver,
    all_paths_exist,
    ensure_directory,
    ensure_file,
    path_exists,
)

# Application exports
from .application.store import ConfigStore, StoreOptions

# Composition exports (wired adapters)
from .composition import create_store

# Domain exports
from .domain import ConfigError, ConfigFormat, ErrorKind, Validator, ValidatorPipeline

__all__ = [
    "ROOT_MARKER",
    "ConfigError",
    "ConfigFormat",
    "ConfigStore",
    "ErrorKind",
    "PathResolver",
    "StoreOptions",
    "Validator",
    "ValidatorPipeline",
    "all_paths_exist",
    "create_store",
    "ensure_directory",
    "ensure_file",
    "path_exists",
    "print_info",
]
