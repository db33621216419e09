from __future__ import annotations

"""
Internal Diagnostics Configuration.

linelog reports its own events (file opened, file rotated, config
rejected) through the standard logging module under the 'linelog'
logger. This module lets a host route those events to stderr without
touching the root logger.

Configuration is idempotent: handlers installed here are tagged, so a
repeated call neither duplicates them nor removes handlers the host added.
"""

import logging
import sys
from typing import Dict, Optional, TextIO

# Internal attributes used to tag our handlers and mark configuration
_HANDLER_TAG_ATTR: str = "_linelog_handler"
_CONFIGURED_FLAG_ATTR: str = "_linelog_configured"

DIAGNOSTICS_LOGGER = "linelog"
DEFAULT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

_LEVEL_MAP: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


# ==============================================================================
# PUBLIC API
# ==============================================================================

def configure_diagnostics(
        level: str = "WARNING",
        *,
        stream: Optional[TextIO] = None,
        fmt: str = DEFAULT_FORMAT,
        force: bool = False,
) -> logging.Logger:
    """
    Route linelog's internal events to a stream.

    Args:
        level: Minimum severity name, e.g. "DEBUG" or "WARNING".
        stream: Target stream, stderr by default.
        fmt: Format for the diagnostic records.
        force: Reinstall the handler even if already configured.

    Returns:
        logging.Logger: The 'linelog' logger.
    """
    diag = logging.getLogger(DIAGNOSTICS_LOGGER)

    already_configured = bool(getattr(diag, _CONFIGURED_FLAG_ATTR, False))
    if already_configured and not force:
        return diag

    _remove_our_handlers(diag)

    level_int = _parse_level(level)
    diag.setLevel(level_int)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(level_int)
    handler.setFormatter(logging.Formatter(fmt))
    _tag_handler(handler)
    diag.addHandler(handler)

    setattr(diag, _CONFIGURED_FLAG_ATTR, True)
    return diag


def reset_diagnostics() -> None:
    """Detach the handlers installed by configure_diagnostics."""
    diag = logging.getLogger(DIAGNOSTICS_LOGGER)
    _remove_our_handlers(diag)
    setattr(diag, _CONFIGURED_FLAG_ATTR, False)


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _parse_level(level: str) -> int:
    """Convert a level name to its numeric constant, WARNING when unknown."""
    if not level:
        return logging.WARNING
    return _LEVEL_MAP.get(str(level).strip().upper(), logging.WARNING)


def _tag_handler(handler: logging.Handler) -> None:
    setattr(handler, _HANDLER_TAG_ATTR, True)


def _is_our_handler(handler: logging.Handler) -> bool:
    return bool(getattr(handler, _HANDLER_TAG_ATTR, False))


def _remove_our_handlers(diag: logging.Logger) -> None:
    """Detach and close every handler carrying our tag."""
    for h in list(diag.handlers):
        if _is_our_handler(h):
            diag.removeHandler(h)
            h.close()
