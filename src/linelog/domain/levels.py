from __future__ import annotations

"""
Severity Level Registry.

Defines the fixed, ascending set of severity levels and the conversion
between level names and ordinals. Lower ordinals are more severe: a message
is emitted when its ordinal is less than or equal to the configured one.

Conversion is lenient by design of the logging contract: an unrecognized
level never raises, it resolves to UNKNOWN.
"""

import logging
from enum import IntEnum
from typing import Tuple, Union

logger = logging.getLogger(__name__)


class Level(IntEnum):
    """Severity ordinals, most severe first."""

    UNKNOWN = 0  # Result of misconfiguration, also used for unconditional lines
    FATAL = 1    # Integrity compromised, crash is imminent
    ERROR = 2    # Processing can not go forward
    WARN = 3     # Looks strange but can be corrected
    INFO = 4     # Regular events, not at technical level
    DEBUG = 5    # Detail useful when looking for something wrong
    TRACE = 6    # Step-by-step execution detail


# A level as callers may spell it: an ordinal or a canonical name.
LevelSpec = Union[Level, int, str]

LEVEL_NAMES: Tuple[str, ...] = tuple(level.name for level in Level)

UNKNOWN = Level.UNKNOWN
FATAL = Level.FATAL
ERROR = Level.ERROR
WARN = Level.WARN
INFO = Level.INFO
DEBUG = Level.DEBUG
TRACE = Level.TRACE


def ordinal_of(spec: LevelSpec) -> Level:
    """
    Resolve a level specification to its Level.

    Integers in the valid range are returned unchanged, names are matched
    case-sensitively against the canonical names. Anything else resolves
    to UNKNOWN without raising.

    Args:
        spec: Ordinal or canonical level name.

    Returns:
        Level: The resolved level.
    """
    if isinstance(spec, int) and not isinstance(spec, bool):
        if Level.UNKNOWN <= spec <= Level.TRACE:
            return Level(spec)
    elif isinstance(spec, str) and spec in LEVEL_NAMES:
        return Level[spec]

    logger.debug("Unrecognized level %r, falling back to UNKNOWN", spec)
    return Level.UNKNOWN


def name_of(ordinal: int) -> str:
    """
    Return the canonical name of a level ordinal.

    Only ordinals 0..6 are valid; anything else raises ValueError.
    """
    return Level(ordinal).name
