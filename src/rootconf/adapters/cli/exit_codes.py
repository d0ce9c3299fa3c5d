"""POSIX-conventional exit codes for CLI error paths.

Provides a single :class:`ExitCode` enum so every ``SystemExit`` raised by a
CLI command carries a meaningful, grep-friendly integer instead of a bare ``1``,
plus the mapping from :class:`~rootconf.domain.enums.ErrorKind` to those codes.

Contents:
    * :class:`ExitCode` - IntEnum of all exit codes used by this application.
    * :func:`exit_code_for` - exit code for a ConfigError kind.
"""

from __future__ import annotations

from enum import IntEnum
from types import MappingProxyType

from rootconf.domain.enums import ErrorKind


class ExitCode(IntEnum):
    """POSIX-conventional exit codes for CLI error paths.

    Values follow sysexits.h and errno conventions where applicable:

    * 0-1: generic success / failure
    * 2-13: errno-derived codes (ENOENT, EACCES)
    * 22: EINVAL
    * 78: EX_CONFIG (sysexits.h)

    Example:
        >>> ExitCode.SUCCESS
        <ExitCode.SUCCESS: 0>
        >>> int(ExitCode.CONFIG_ERROR)
        78
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    FILE_NOT_FOUND = 2
    PERMISSION_DENIED = 13
    INVALID_ARGUMENT = 22
    CONFIG_ERROR = 78


_BY_KIND = MappingProxyType(
    {
        ErrorKind.NOT_FOUND: ExitCode.FILE_NOT_FOUND,
        ErrorKind.NOT_ACCESSIBLE: ExitCode.PERMISSION_DENIED,
        ErrorKind.INVALID_ARGUMENT: ExitCode.INVALID_ARGUMENT,
        ErrorKind.INVALID_FORMAT: ExitCode.INVALID_ARGUMENT,
        ErrorKind.UNSUPPORTED_FORMAT: ExitCode.INVALID_ARGUMENT,
        ErrorKind.LOAD_FAILED: ExitCode.CONFIG_ERROR,
        ErrorKind.INVALID_STATE: ExitCode.CONFIG_ERROR,
        ErrorKind.NOTHING_TO_RELOAD: ExitCode.CONFIG_ERROR,
        ErrorKind.CREATE_FAILED: ExitCode.GENERAL_ERROR,
    }
)


def exit_code_for(kind: ErrorKind) -> ExitCode:
    """Return the exit code reported for a ConfigError of *kind*.

    Example:
        >>> exit_code_for(ErrorKind.NOT_FOUND)
        <ExitCode.FILE_NOT_FOUND: 2>
    """
    return _BY_KIND.get(kind, ExitCode.GENERAL_ERROR)


__all__ = ["ExitCode", "exit_code_for"]
