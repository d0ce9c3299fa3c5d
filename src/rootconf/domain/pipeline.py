"""Ordered validator pipeline applied to freshly loaded configuration.

Pure domain code: no I/O, no logging framework. The pipeline is generic over
the configuration type so callers working with typed mappings keep their
annotations end to end.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Generic, TypeVar

from .enums import ErrorKind
from .errors import ConfigError

ConfigT = TypeVar("ConfigT")

Validator = Callable[[ConfigT], ConfigT | None]
"""Check and/or complete a configuration value.

The value a validator returns is what the next validator receives, so
``validate(c) == v2(v1(c))``. A validator that returns ``None`` is treated
as having mutated its argument in place: the argument itself is passed on,
not ``None``. Raising stops the pipeline.

Example:
    >>> pipeline = ValidatorPipeline()
    >>> _ = pipeline.register(lambda cfg: cfg.update(debug=False))
    >>> pipeline.validate({"port": 1})
    {'port': 1, 'debug': False}
"""


class ValidatorPipeline(Generic[ConfigT]):
    """Validators folded left to right in registration order.

    A pipeline that never had a validator registered is an identity
    transform, as is one whose registrations were cleared.

    Example:
        >>> pipeline: ValidatorPipeline[dict[str, int]] = ValidatorPipeline()
        >>> cfg = {"a": 1}
        >>> pipeline.validate(cfg) is cfg
        True
        >>> _ = pipeline.register(lambda c: {**c, "b": 2})
        >>> pipeline.validate(cfg)
        {'a': 1, 'b': 2}
    """

    def __init__(self) -> None:
        self._validators: Any = None

    def __len__(self) -> int:
        return len(self._validators) if isinstance(self._validators, list) else 0

    @property
    def validators(self) -> tuple[Validator[ConfigT], ...]:
        """Snapshot of registered validators, in execution order."""
        if not isinstance(self._validators, list):
            return ()
        return tuple(self._validators)

    def register(self, validator: Validator[ConfigT]) -> ValidatorPipeline[ConfigT]:
        """Append *validator* to the end of the pipeline.

        *validator* returns the next configuration value, or ``None`` to keep
        its (possibly mutated) argument.

        Raises:
            ConfigError: ``INVALID_ARGUMENT`` if *validator* is not callable.
        """
        if not callable(validator):
            raise ConfigError(f"Invalid validator: {validator!r}", kind=ErrorKind.INVALID_ARGUMENT)
        if not isinstance(self._validators, list):
            self._validators = []
        self._validators.append(validator)
        return self

    def clear(self) -> None:
        """Forget every registered validator."""
        self._validators = None

    def validate(self, config: ConfigT) -> ConfigT:
        """Run *config* through every validator and return the final value.

        Each validator receives the previous validator's result. The first
        validator to raise aborts the fold; its exception propagates as is
        and the remaining validators never run.

        Raises:
            ConfigError: ``INVALID_STATE`` if the registry no longer holds a
                list of callables.
        """
        if self._validators is None:
            return config

        if not isinstance(self._validators, list) or not all(callable(v) for v in self._validators):
            raise ConfigError(f"Invalid validators: {self._validators!r}", kind=ErrorKind.INVALID_STATE)

        result = config
        for validator in self._validators:
            returned = validator(result)
            if returned is not None:
                result = returned
        return result


__all__ = [
    "ConfigT",
    "Validator",
    "ValidatorPipeline",
]
