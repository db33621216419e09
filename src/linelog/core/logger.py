from __future__ import annotations

"""
Line Logger.

Level-gated logger rendering each call through a line template and writing
the result to a stream or to a file rotated by a strftime name pattern.

Placeholders available in the line template:

    %c          caller location (file:line)
    %d{format}  timestamp, optionally formatted with a strftime format
    %e          error being reported
    %l          level ordinal
    %L          level name
    %m{case}    message, optionally transformed by capitalize, downcase,
                swapcase or upcase
    %n          newline
    %p          process id
    %s          line where the error was raised
    %S{sep}     error backtrace, optionally joined by a separator
    %t          tab
    %x          program file name
    %X          program path

All calls are synchronous: the rotation check and the write happen inline.
A Logger instance is not thread-safe; share it between threads only behind
an external lock.
"""

import sys
from collections.abc import Sequence
from datetime import datetime
from typing import Any, Callable, Dict, Optional, TextIO, Union

from linelog.core.placeholders import build_fixed_table, build_line_table
from linelog.core.template import references_error, render, tokenize
from linelog.domain.errors import ErrorContext
from linelog.domain.levels import Level, LevelSpec, ordinal_of
from linelog.infra.device import StreamDevice, TimedFileDevice, is_stream, local_now

DEFAULT_LOGFORMAT = "%d{%Y-%m-%d %H:%M:%S}%t%L%t%m %e %s"

Destination = Union[TextIO, str, Any]


def _caller_location(depth: int = 2) -> str:
    """Location of the frame `depth` levels above this function."""
    frame = sys._getframe(depth)
    return f"{frame.f_code.co_filename}:{frame.f_lineno}"


def _message_level(level: LevelSpec) -> Optional[Level]:
    """
    Resolve the level of a message, None when it is beyond TRACE.

    An ordinal above TRACE is more verbose than any configured level and is
    never emitted. Other values resolve like the configured level does.
    """
    if isinstance(level, int) and not isinstance(level, bool) and level > Level.TRACE:
        return None
    return ordinal_of(level)


class Logger:
    """
    Configurable line-oriented logger.

    Args:
        destination: Writable stream, or a file name pattern that may hold
            strftime conversion specifiers. Defaults to standard output.
        level: Minimum severity to emit, as ordinal or name.
        clock: Callable returning the current time. Drives both %d and the
            file name pattern.
        logformat: Line template; defaults to DEFAULT_LOGFORMAT.

    Raises:
        DestinationClosedError: If the stream passed in is already closed.
        OSError: If the first log file can not be opened.
    """

    UNKNOWN = Level.UNKNOWN
    FATAL = Level.FATAL
    ERROR = Level.ERROR
    WARN = Level.WARN
    INFO = Level.INFO
    DEBUG = Level.DEBUG
    TRACE = Level.TRACE

    def __init__(
            self,
            destination: Optional[Destination] = None,
            level: LevelSpec = Level.INFO,
            *,
            clock: Optional[Callable[[], datetime]] = None,
            logformat: str = DEFAULT_LOGFORMAT,
    ) -> None:
        self.level = level
        self.logformat = logformat
        self._fixed: Dict[str, Any] = build_fixed_table()
        self._clock = clock or local_now
        self._error_context: Optional[ErrorContext] = None

        if destination is None:
            destination = sys.stdout

        self._device: Union[StreamDevice, TimedFileDevice]
        if is_stream(destination):
            self._device = StreamDevice(destination)
        else:
            self._device = TimedFileDevice(str(destination), self._clock)
            self._device.ensure_current()

    # -------------------------------------------------------------------------
    # Configuration
    # -------------------------------------------------------------------------

    @property
    def level(self) -> Level:
        """Current level; messages with a higher ordinal are dropped."""
        return self._level

    @level.setter
    def level(self, value: LevelSpec) -> None:
        self._level = ordinal_of(value)

    @property
    def logformat(self) -> str:
        """Line template, see the module documentation for placeholders."""
        return self._logformat

    @logformat.setter
    def logformat(self, value: str) -> None:
        self._logformat = value
        self._tokens = tokenize(value)
        self._uses_error = references_error(self._tokens)

    @property
    def fileformat(self) -> Optional[str]:
        """File name pattern, or None when logging to a stream."""
        return self._device.fileformat

    @property
    def filename(self) -> Optional[str]:
        """Name of the file currently written, or None."""
        return self._device.filename

    @property
    def device(self) -> Optional[TextIO]:
        """Handle the lines are currently written to."""
        return self._device.handle

    @property
    def placeholders(self) -> Dict[str, Any]:
        """Fixed placeholder table. Entries here override per-line values."""
        return self._fixed

    @property
    def error_context(self) -> Optional[ErrorContext]:
        return self._error_context

    def record_error(self, exc: BaseException) -> None:
        """
        Attach an error to be reported by %e, %s and %S.

        The error is consumed by the first emitted line whose template
        references one of those placeholders.
        """
        self._error_context = ErrorContext.from_exception(exc)

    def clear_error(self) -> None:
        self._error_context = None

    # -------------------------------------------------------------------------
    # Logging calls
    # -------------------------------------------------------------------------

    def log(self, level: LevelSpec, message: Any, *, exc: Optional[BaseException] = None) -> None:
        """
        Write a message if its level passes the gate.

        Args:
            level: Message level, as ordinal or name.
            message: Value for the %m placeholder.
            exc: Error reported for this line only.
        """
        resolved = _message_level(level)
        if resolved is not None and self._passes(resolved):
            self.write(resolved, message, _caller_location(), exc)

    def fatal(self, message: Any, *, exc: Optional[BaseException] = None) -> None:
        if self._passes(Level.FATAL):
            self.write(Level.FATAL, message, _caller_location(), exc)

    def error(self, message: Any, *, exc: Optional[BaseException] = None) -> None:
        if self._passes(Level.ERROR):
            self.write(Level.ERROR, message, _caller_location(), exc)

    def warn(self, message: Any, *, exc: Optional[BaseException] = None) -> None:
        if self._passes(Level.WARN):
            self.write(Level.WARN, message, _caller_location(), exc)

    def info(self, message: Any, *, exc: Optional[BaseException] = None) -> None:
        if self._passes(Level.INFO):
            self.write(Level.INFO, message, _caller_location(), exc)

    def debug(self, message: Any, *, exc: Optional[BaseException] = None) -> None:
        if self._passes(Level.DEBUG):
            self.write(Level.DEBUG, message, _caller_location(), exc)

    def trace(self, message: Any, *, exc: Optional[BaseException] = None) -> None:
        if self._passes(Level.TRACE):
            self.write(Level.TRACE, message, _caller_location(), exc)

    def __lshift__(self, message: Any) -> Logger:
        """Write at UNKNOWN level, which is always emitted."""
        self.write(Level.UNKNOWN, message, _caller_location())
        return self

    def multi(self, level: LevelSpec, messages: Any, *, exc: Optional[BaseException] = None) -> None:
        """
        Write each item of a sequence as a separate line.

        The gate is checked once for the whole batch. A single value that is
        not a sequence (strings included) is written as one line.
        """
        resolved = _message_level(level)
        if resolved is None or not self._passes(resolved):
            return

        caller = _caller_location()
        if isinstance(messages, Sequence) and not isinstance(messages, (str, bytes)):
            for message in messages:
                self.write(resolved, message, caller, exc)
        else:
            self.write(resolved, messages, caller, exc)

    def plain(self, message: Any) -> None:
        """Write a message verbatim, skipping the gate and the template."""
        self._device.ensure_current()
        self._device.write(f"{message}\n")

    def write(
            self,
            level: LevelSpec,
            message: Any,
            caller: str,
            exc: Optional[BaseException] = None,
    ) -> None:
        """
        Render one line through the template and write it.

        No gate is applied here; the logging calls gate before calling it.
        A level beyond TRACE writes nothing.

        Args:
            level: Level for %l and %L.
            message: Value for %m.
            caller: Location for %c.
            exc: Error for this line; overrides the recorded one.

        Raises:
            OSError: If the log file has to be opened and can not be.
        """
        resolved = _message_level(level)
        if resolved is None:
            return
        self._device.ensure_current()

        context = ErrorContext.from_exception(exc) if exc is not None else self._error_context
        table = build_line_table(resolved, message, caller, self._clock(), context, self._fixed)
        line = render(self._tokens, table)

        if exc is None and self._uses_error:
            self._error_context = None

        self._device.write(line + "\n")

    def close(self) -> None:
        """Close the log file if the logger owns one. Idempotent."""
        self._device.close()

    def __enter__(self) -> Logger:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _passes(self, level: Level) -> bool:
        return level <= self._level
