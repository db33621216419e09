from __future__ import annotations

"""
linelog: a configurable line-oriented logger with time-based file rotation.
"""

from linelog.core.logger import DEFAULT_LOGFORMAT, Logger
from linelog.domain.config import LoggerConfig, config_from_env, create_logger, load_config
from linelog.domain.errors import DestinationClosedError, ErrorContext, LinelogError
from linelog.domain.levels import Level, name_of, ordinal_of
from linelog.infra.diagnostics import configure_diagnostics

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_LOGFORMAT",
    "DestinationClosedError",
    "ErrorContext",
    "Level",
    "LinelogError",
    "Logger",
    "LoggerConfig",
    "config_from_env",
    "configure_diagnostics",
    "create_logger",
    "load_config",
    "name_of",
    "ordinal_of",
]
