"""
Infrastructure layer - External integrations.

This layer contains the logging sink and the deferred scheduler used by the
container. The ``testing`` and ``fastapi_integration`` subpackages depend on
the application layer and are imported explicitly.
"""

from .logging import LoggingConfig, create_logger, create_null_logger
from .scheduling import Scheduler, call_soon

__all__ = [
    "LoggingConfig",
    "create_logger",
    "create_null_logger",
    "Scheduler",
    "call_soon",
]
