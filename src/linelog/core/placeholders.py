from __future__ import annotations

"""
Placeholder Tables.

Builds the two halves of the table a line is rendered against: the fixed
table computed once per logger, and the dynamic table computed per line.
The fixed table is merged last, so its entries win on key collision.
"""

import os
from datetime import datetime
from typing import Any, Dict, Optional

from linelog.core.template import (
    KEY_BACKTRACE,
    KEY_CALLER,
    KEY_ERROR,
    KEY_ERROR_LINE,
    KEY_EXE_NAME,
    KEY_EXE_PATH,
    KEY_LEVEL,
    KEY_LEVEL_NAME,
    KEY_MESSAGE,
    KEY_NEWLINE,
    KEY_PID,
    KEY_TAB,
    KEY_TIMESTAMP,
)
from linelog.domain.errors import ErrorContext
from linelog.domain.levels import Level
from linelog.infra.fs import get_program_path


def build_fixed_table() -> Dict[str, Any]:
    """
    Compute the placeholder entries that stay constant for a logger.

    Returns:
        Dict[str, Any]: Newline, tab, pid and program name/path entries.
    """
    program = get_program_path()
    return {
        KEY_NEWLINE: "\n",
        KEY_PID: os.getpid(),
        KEY_TAB: "\t",
        KEY_EXE_NAME: os.path.basename(program),
        KEY_EXE_PATH: program,
    }


def build_line_table(
        level: Level,
        message: Any,
        caller: str,
        timestamp: datetime,
        error_context: Optional[ErrorContext],
        fixed: Dict[str, Any],
) -> Dict[str, Any]:
    """
    Merge the per-line values with the fixed table.

    Args:
        level: Level of the line being written.
        message: Message value for %m.
        caller: Call site location for %c.
        timestamp: Moment of the write for %d.
        error_context: Error to report through %e, %s and %S, if any.
        fixed: The logger's fixed table, applied last.

    Returns:
        Dict[str, Any]: Complete placeholder table for one line.
    """
    error = error_context.error if error_context else None
    backtrace = error_context.backtrace if error_context and error_context.backtrace else None

    table: Dict[str, Any] = {
        KEY_CALLER: caller,
        KEY_TIMESTAMP: timestamp,
        KEY_ERROR: error,
        KEY_LEVEL: int(level),
        KEY_LEVEL_NAME: level.name,
        KEY_MESSAGE: message,
        KEY_ERROR_LINE: backtrace[0] if backtrace else None,
        KEY_BACKTRACE: backtrace,
    }
    table.update(fixed)
    return table
