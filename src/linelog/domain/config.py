from __future__ import annotations

"""
Logger Configuration.

Declarative description of a logger and the loaders that read it from a
JSON file or from environment variables. Loading is fail-safe: a missing
or malformed source yields the defaults and a warning, never an exception.
"""

import json
import logging
import os
import sys
from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping, Optional

from linelog.core.logger import DEFAULT_LOGFORMAT, Logger
from linelog.domain.levels import LevelSpec

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants
# -----------------------------------------------------------------------------
ENV_PREFIX = "LINELOG_"
STREAMS = ("stdout", "stderr")


@dataclass(frozen=True)
class LoggerConfig:
    """
    Immutable description of a logger.

    Attributes:
        destination: File name pattern (strftime specifiers allowed).
            None logs to the stream named by `stream`.
        stream: "stdout" or "stderr".
        level: Level name or ordinal as text.
        logformat: Line template; None keeps the default.
    """
    destination: Optional[str] = None
    stream: str = "stdout"
    level: str = "INFO"
    logformat: Optional[str] = None


# -----------------------------------------------------------------------------
# Loaders
# -----------------------------------------------------------------------------
def config_from_mapping(data: Mapping[str, Any]) -> LoggerConfig:
    """
    Build a config from a mapping, ignoring unknown keys.

    Args:
        data: Raw key/value pairs.

    Returns:
        LoggerConfig: Config with defaults for missing keys.
    """
    known = {f.name for f in fields(LoggerConfig)}
    values: Dict[str, Any] = {}
    for key, value in data.items():
        if key not in known:
            logger.debug("Ignoring unknown config key %r", key)
            continue
        if value is None and key in ("stream", "level"):
            continue
        values[key] = str(value) if value is not None else None
    return LoggerConfig(**values)


def load_config(path: str) -> LoggerConfig:
    """
    Load a logger config from a JSON file.

    Args:
        path: Path to a JSON file holding an object.

    Returns:
        LoggerConfig: Parsed config, or the defaults on any failure.
    """
    if not os.path.exists(path):
        return LoggerConfig()

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.warning(f"Could not load logger config from {path}: {e}")
        return LoggerConfig()

    if not isinstance(data, dict):
        logger.warning(f"Logger config in {path} is not a JSON object, using defaults.")
        return LoggerConfig()

    return config_from_mapping(data)


def config_from_env(environ: Optional[Mapping[str, str]] = None) -> LoggerConfig:
    """
    Build a config from LINELOG_* environment variables.

    Recognized: LINELOG_DESTINATION, LINELOG_STREAM, LINELOG_LEVEL,
    LINELOG_FORMAT.
    """
    env = os.environ if environ is None else environ
    data: Dict[str, Any] = {}
    for key, name in (
            ("destination", "DESTINATION"),
            ("stream", "STREAM"),
            ("level", "LEVEL"),
            ("logformat", "FORMAT"),
    ):
        value = env.get(ENV_PREFIX + name)
        if value:
            data[key] = value
    return config_from_mapping(data)


# -----------------------------------------------------------------------------
# Factory
# -----------------------------------------------------------------------------
def create_logger(cfg: LoggerConfig) -> Logger:
    """
    Build a Logger from a config.

    Args:
        cfg: Logger description.

    Returns:
        Logger: Ready logger; a file destination is opened immediately.
    """
    if cfg.destination:
        destination: Any = cfg.destination
    else:
        stream = cfg.stream if cfg.stream in STREAMS else "stdout"
        destination = getattr(sys, stream)

    return Logger(
        destination,
        _parse_level(cfg.level),
        logformat=cfg.logformat if cfg.logformat is not None else DEFAULT_LOGFORMAT,
    )


def _parse_level(level: str) -> LevelSpec:
    """Treat numeric text as an ordinal, anything else as a name."""
    text = str(level).strip()
    if text.isdigit():
        return int(text)
    return text
