"""Project root discovery by walking up from the working directory."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Final

from rootconf.domain.enums import ErrorKind
from rootconf.domain.errors import ConfigError

logger = logging.getLogger(__name__)

#: Directory whose presence marks a project root (in-project virtualenv).
ROOT_MARKER: Final[str] = ".venv"


def _candidates(start: Path) -> list[Path]:
    """Return *start* and its ancestors, excluding the filesystem anchor.

    Example:
        >>> [p.as_posix() for p in _candidates(Path("/a/b"))]
        ['/a/b', '/a']
    """
    anchor = Path(start.anchor)
    return [p for p in (start, *start.parents) if p != anchor]


class PathResolver:
    """Locate and cache the nearest ancestor directory holding the marker.

    The blocking and asynchronous variants share one cache: whichever runs
    first stores the root and the other returns it without probing.

    Example:
        >>> resolver = PathResolver()
        >>> resolver.root is None
        True
    """

    def __init__(self, marker: str = ROOT_MARKER) -> None:
        self.marker = marker
        self._root: Path | None = None

    @property
    def root(self) -> Path | None:
        """Cached project root, or ``None`` before the first resolution."""
        return self._root

    def reset(self) -> None:
        """Drop the cached root so the next call probes again."""
        self._root = None

    def resolve_root(self) -> Path:
        """Return the project root, blocking on filesystem probes.

        Raises:
            ConfigError: ``NOT_FOUND`` when no ancestor holds the marker.
        """
        if self._root is not None:
            return self._root

        for candidate in _candidates(Path.cwd()):
            if (candidate / self.marker).exists():
                return self._remember(candidate)

        raise ConfigError("Could not find project root", kind=ErrorKind.NOT_FOUND)

    async def resolve_root_async(self) -> Path:
        """Asynchronous twin of :meth:`resolve_root`."""
        if self._root is not None:
            return self._root

        for candidate in _candidates(Path.cwd()):
            if await asyncio.to_thread((candidate / self.marker).exists):
                return self._remember(candidate)

        raise ConfigError("Could not find project root", kind=ErrorKind.NOT_FOUND)

    def _remember(self, root: Path) -> Path:
        self._root = root
        logger.debug("Resolved project root", extra={"root": str(root), "marker": self.marker})
        return root


__all__ = ["ROOT_MARKER", "PathResolver"]
