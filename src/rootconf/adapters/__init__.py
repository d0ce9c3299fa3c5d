"""Adapters layer - filesystem, settings, logging, CLI, and in-memory test doubles.

Contents:
    * :mod:`.fs` - Existence checks, creation helpers, root discovery, readers
    * :mod:`.config` - Tool settings and configuration display
    * :mod:`.logging` - lib_log_rich initialization
    * :mod:`.memory` - In-memory adapters for tests
    * :mod:`.cli` - Command line interface
"""

from __future__ import annotations
