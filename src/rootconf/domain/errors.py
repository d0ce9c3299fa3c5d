"""Domain exception raised by every public rootconf operation."""

from __future__ import annotations

from .enums import ErrorKind


class ConfigError(Exception):
    """Configuration lookup, loading, validation, or filesystem failure.

    A single error type carries a descriptive message plus an
    :class:`ErrorKind` tag. Underlying OS or parser errors are chained as
    ``__cause__``.

    Example:
        >>> from rootconf.domain.errors import ConfigError
        >>> err = ConfigError("Nothing to reload", kind=ErrorKind.NOTHING_TO_RELOAD)
        >>> str(err)
        'Nothing to reload'
        >>> err.kind
        <ErrorKind.NOTHING_TO_RELOAD: 'nothing_to_reload'>
    """

    def __init__(self, message: str, *, kind: ErrorKind) -> None:
        super().__init__(message)
        self.kind = kind


__all__ = ["ConfigError"]
