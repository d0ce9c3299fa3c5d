"""Centralized logging initialization for all entry points.

Library modules only ever call ``logging.getLogger(__name__)``; this module
turns those records into lib_log_rich output when rootconf runs as a
command line tool. Embedding applications keep their own logging setup.

Contents:
    * :func:`parse_logging_section` - validated ``[lib_log_rich]`` settings.
    * :func:`init_logging` - idempotent logging initialization from settings.
    * :func:`_build_runtime_config` - constructs RuntimeConfig from settings.
"""

from __future__ import annotations

from typing import cast

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict

from rootconf import __init__conf__


class LoggingConfigModel(BaseModel):
    """Pydantic model for the ``[lib_log_rich]`` settings section.

    Extra fields pass through to lib_log_rich.RuntimeConfig.

    Example:
        >>> LoggingConfigModel(service="myapp").service
        'myapp'
        >>> LoggingConfigModel().environment
        'prod'
    """

    service: str | None = None
    environment: str = "prod"

    model_config = ConfigDict(extra="allow")




#: Settings section read by :func:`parse_logging_section`.
LOGGING_SECTION = "lib_log_rich"


def parse_logging_section(config: Config) -> LoggingConfigModel:
    """Validate the ``[lib_log_rich]`` section; a missing section is empty.

    Raises:
        pydantic.ValidationError: If the section holds invalid values.
    """
    raw: object = config.get(LOGGING_SECTION, default={})
    return LoggingConfigModel.model_validate(cast("dict[str, object]", raw) if raw else {})


def _build_runtime_config(config: Config) -> lib_log_rich.runtime.RuntimeConfig:
    """Map the logging section onto RuntimeConfig, naming the service ``rootconf`` by default."""
    parsed = parse_logging_section(config)
    passthrough = parsed.model_dump(exclude={"service", "environment"}, exclude_none=True)
    return lib_log_rich.runtime.RuntimeConfig(
        service=parsed.service or __init__conf__.name,
        environment=parsed.environment,
        **passthrough,
    )


def init_logging(config: Config) -> None:
    """Start lib_log_rich for a CLI run and route stdlib ``logging`` into it.

    Only the first call per process does anything. ``LOG_*`` variables from a
    ``.env`` file are honoured.

    Args:
        config: Tool settings holding the ``[lib_log_rich]`` section.
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.config.enable_dotenv()
    lib_log_rich.runtime.init(_build_runtime_config(config))
    lib_log_rich.runtime.attach_std_logging()


__all__ = ["LOGGING_SECTION", "LoggingConfigModel", "init_logging", "parse_logging_section"]
