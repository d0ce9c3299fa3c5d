"""Type-safe domain enums for error kinds, file formats, and output formats."""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Logical category carried by every :class:`~rootconf.domain.errors.ConfigError`.

    There is a single exception type; the kind tag lets callers branch on
    the failure without parsing messages.

    Example:
        >>> ErrorKind.NOT_FOUND.value
        'not_found'
        >>> ErrorKind.LOAD_FAILED == "load_failed"
        True
    """

    INVALID_ARGUMENT = "invalid_argument"
    NOT_FOUND = "not_found"
    NOT_ACCESSIBLE = "not_accessible"
    CREATE_FAILED = "create_failed"
    INVALID_FORMAT = "invalid_format"
    UNSUPPORTED_FORMAT = "unsupported_format"
    LOAD_FAILED = "load_failed"
    INVALID_STATE = "invalid_state"
    NOTHING_TO_RELOAD = "nothing_to_reload"


class ConfigFormat(str, Enum):
    """Supported configuration file formats, keyed by file extension.

    Attributes:
        DATA: Structured data parsed as JSON.
        SCRIPT: Python module evaluated at load time.

    Example:
        >>> ConfigFormat.from_suffix(".JSON")
        <ConfigFormat.DATA: '.json'>
        >>> ConfigFormat.from_suffix(".yaml") is None
        True
    """

    DATA = ".json"
    SCRIPT = ".py"

    @classmethod
    def from_suffix(cls, suffix: str) -> ConfigFormat | None:
        """Return the format for *suffix* (case-insensitive) or ``None``."""
        try:
            return cls(suffix.lower())
        except ValueError:
            return None


class OutputFormat(str, Enum):
    """Output format options for configuration display.

    Inherits from str to allow direct string comparison and Click integration.

    Example:
        >>> OutputFormat.HUMAN.value
        'human'
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


__all__ = [
    "ConfigFormat",
    "ErrorKind",
    "OutputFormat",
]
