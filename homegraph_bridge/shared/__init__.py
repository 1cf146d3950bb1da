"""
Shared module - Cross-cutting concerns / Shared Layer

Holds the pieces every layer may import without pulling in
infrastructure: environment and log level enums, the storage backend
selector and the structlog setup helpers.
"""

from .consts import EnumEnvironment, EnumLogLevel, EnumStorageBackend
from .logging import configure_logging, get_logger, update_logging_from_settings

__all__ = [
    "EnumEnvironment",
    "EnumLogLevel",
    "EnumStorageBackend",
    "configure_logging",
    "get_logger",
    "update_logging_from_settings",
]
