"""
Structured logging for lazy-di containers.

Containers report unresolved module dependencies and failed eager
resolutions through a structlog logger. Each logger wraps a named stdlib
logger, so applications keep control of handlers and levels without global
structlog configuration.

Usage:
    from lazy_di.infrastructure.logging import LoggingConfig, create_logger

    logger = create_logger(LoggingConfig(level="DEBUG", json_format=True))
    container = Container(logger=logger)
"""

import logging
import sys
from pathlib import Path
from typing import Any, List, Optional

import structlog
from pydantic import BaseModel, ConfigDict, Field
from structlog.types import EventDict, WrappedLogger


class LoggingConfig(BaseModel):
    """Configuration of a container logger.

    Attributes:
        name: Name of the underlying stdlib logger.
        level: Minimum level emitted by the handlers.
        json_format: Render events as JSON instead of key=value pairs.
        log_to_console: Attach a stdout handler.
        log_file: Optional file receiving the same events.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(default="lazy_di", description="Name of the stdlib logger.")
    level: str = Field(default="ERROR", description="Minimum level emitted by the handlers.")
    json_format: bool = Field(default=False, description="Render events as JSON.")
    log_to_console: bool = Field(default=True, description="Attach a stdout handler.")
    log_file: Optional[Path] = Field(default=None, description="Optional log file path.")


def create_logger(config: Optional[LoggingConfig] = None) -> structlog.stdlib.BoundLogger:
    """Create a structured logger for a container.

    Handlers are attached to the stdlib logger only once per logger name. The
    level is only set on a logger that has none yet, so a level chosen by the
    application survives every new container.

    Args:
        config: Logging configuration. Uses defaults if not provided.

    Returns:
        A bound structlog logger.
    """
    config = config or LoggingConfig()
    stdlib_logger = logging.getLogger(config.name)
    if stdlib_logger.level == logging.NOTSET:
        stdlib_logger.setLevel(config.level.upper())

    if not stdlib_logger.handlers:
        for handler in _build_handlers(config):
            stdlib_logger.addHandler(handler)

    processors: List[Any] = [
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.format_exc_info,
    ]
    if config.json_format:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.processors.KeyValueRenderer(key_order=["event", "level"]))

    return structlog.wrap_logger(
        stdlib_logger,
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def drop_event(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Processor discarding every event."""
    raise structlog.DropEvent


def create_null_logger() -> structlog.stdlib.BoundLogger:
    """Create a logger that accepts every call and emits nothing."""
    return structlog.wrap_logger(
        structlog.ReturnLogger(),
        processors=[drop_event],
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def _build_handlers(config: LoggingConfig) -> List[logging.Handler]:
    handlers: List[logging.Handler] = []
    if config.log_to_console:
        handlers.append(logging.StreamHandler(sys.stdout))
    if config.log_file is not None:
        config.log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(config.log_file))
    for handler in handlers:
        handler.setLevel(config.level.upper())
    return handlers
