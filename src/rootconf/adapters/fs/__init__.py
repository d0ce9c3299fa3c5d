"""Filesystem adapter - existence checks, creation helpers, root discovery, readers.

Contents:
    * :mod:`.helpers` - Async existence and create-if-missing helpers
    * :mod:`.root` - Project root discovery (PathResolver)
    * :mod:`.readers` - JSON and Python configuration readers
"""

from __future__ import annotations

from .helpers import all_paths_exist, ensure_directory, ensure_file, path_exists
from .readers import read_data, read_script
from .root import ROOT_MARKER, PathResolver

__all__ = [
    "ROOT_MARKER",
    "PathResolver",
    "all_paths_exist",
    "ensure_directory",
    "ensure_file",
    "path_exists",
    "read_data",
    "read_script",
]
