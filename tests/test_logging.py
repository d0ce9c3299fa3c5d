"""Tests for the logging settings model and runtime config builder.

init_logging itself is exercised through the production CLI tests in
test_cli.py.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
from lib_layered_config import Config
from pydantic import ValidationError

from rootconf.adapters.logging.setup import LoggingConfigModel, _build_runtime_config, parse_logging_section
from rootconf.adapters.memory import init_logging_in_memory


@pytest.mark.os_agnostic
def test_logging_config_model_allows_extra_fields() -> None:
    """Extra fields pass through for lib_log_rich RuntimeConfig."""
    parsed = LoggingConfigModel.model_validate({"service": "test", "environment": "dev", "custom_field": "value"})

    assert parsed.service == "test"
    assert parsed.environment == "dev"
    extra = parsed.model_dump(exclude={"service", "environment"}, exclude_none=True)
    assert extra == {"custom_field": "value"}


@pytest.mark.os_agnostic
def test_logging_config_model_defaults() -> None:
    """Empty input produces sensible defaults."""
    parsed = LoggingConfigModel.model_validate({})

    assert parsed.service is None
    assert parsed.environment == "prod"


@pytest.mark.os_agnostic
def test_runtime_config_defaults_service_to_package_name(
    config_factory: Callable[[dict[str, Any]], Config],
) -> None:
    runtime_config = _build_runtime_config(config_factory({}))

    assert runtime_config.service == "rootconf"
    assert runtime_config.environment == "prod"


@pytest.mark.os_agnostic
def test_runtime_config_uses_configured_service_and_environment(
    config_factory: Callable[[dict[str, Any]], Config],
) -> None:
    runtime_config = _build_runtime_config(
        config_factory({"lib_log_rich": {"service": "svc", "environment": "staging"}})
    )

    assert runtime_config.service == "svc"
    assert runtime_config.environment == "staging"


@pytest.mark.os_agnostic
def test_parse_logging_section_treats_missing_section_as_empty(
    config_factory: Callable[[dict[str, Any]], Config],
) -> None:
    assert parse_logging_section(config_factory({})) == LoggingConfigModel()


@pytest.mark.os_agnostic
def test_parse_logging_section_rejects_invalid_values(
    config_factory: Callable[[dict[str, Any]], Config],
) -> None:
    with pytest.raises(ValidationError):
        parse_logging_section(config_factory({"lib_log_rich": {"environment": ["not", "a", "string"]}}))


@pytest.mark.os_agnostic
def test_in_memory_logging_validates_without_starting_the_runtime(
    config_factory: Callable[[dict[str, Any]], Config],
) -> None:
    import lib_log_rich.runtime

    was_initialised = lib_log_rich.runtime.is_initialised()

    init_logging_in_memory(config_factory({"lib_log_rich": {"service": "svc"}}))

    assert lib_log_rich.runtime.is_initialised() is was_initialised
    with pytest.raises(ValidationError):
        init_logging_in_memory(config_factory({"lib_log_rich": {"environment": 42}}))
