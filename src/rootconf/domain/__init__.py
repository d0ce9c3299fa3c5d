"""Domain layer - pure logic with no I/O or framework dependencies.

Contents:
    * :mod:`.enums` - Domain enumerations (ErrorKind, ConfigFormat, OutputFormat)
    * :mod:`.errors` - The ConfigError exception type
    * :mod:`.pipeline` - Ordered validator pipeline
"""

from __future__ import annotations

from .enums import ConfigFormat, ErrorKind, OutputFormat
from .errors import ConfigError
from .pipeline import Validator, ValidatorPipeline

__all__ = [
    # Enums
    "ConfigFormat",
    "ErrorKind",
    "OutputFormat",
    # Errors
    "ConfigError",
    # Pipeline
    "Validator",
    "ValidatorPipeline",
]
