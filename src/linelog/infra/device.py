from __future__ import annotations

"""
Output Devices.

A device is where rendered lines end up. Two kinds exist:

- StreamDevice wraps a stream owned by the caller. It never opens,
  rotates or closes anything.
- TimedFileDevice owns its file handle. The file name is computed from a
  strftime pattern on every write; when the computed name changes, or the
  current file disappeared from disk, the handle is replaced.

Devices are not thread-safe. The check-then-open sequence of a rotation
is not atomic, so a device shared between threads needs external locking.
"""

import logging
import os
from datetime import datetime
from typing import Callable, Optional, TextIO

from linelog.domain.errors import DestinationClosedError
from linelog.infra.fs import ensure_parent_dir

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def local_now() -> datetime:
    """Current local time, timezone-aware."""
    return datetime.now().astimezone()


def is_stream(destination: object) -> bool:
    """Check whether a destination is a writable stream rather than a name."""
    return callable(getattr(destination, "write", None))


# -----------------------------------------------------------------------------
# CALLER-OWNED STREAM
# -----------------------------------------------------------------------------

class StreamDevice:
    """Device writing to a stream it does not own."""

    fileformat: Optional[str] = None
    filename: Optional[str] = None

    def __init__(self, stream: TextIO) -> None:
        if getattr(stream, "closed", False):
            raise DestinationClosedError(stream)
        self._stream = stream

    @property
    def handle(self) -> TextIO:
        return self._stream

    def ensure_current(self) -> None:
        """Streams never rotate."""

    def write(self, text: str) -> None:
        self._stream.write(text)

    def close(self) -> None:
        """The stream belongs to the caller and is left open."""


# -----------------------------------------------------------------------------
# TIME-ROTATED FILE
# -----------------------------------------------------------------------------

class TimedFileDevice:
    """
    Device appending to a file whose name is derived from the clock.

    Attributes:
        fileformat: strftime pattern producing the file name.
        filename: Name of the file currently open, or None.
    """

    def __init__(self, fileformat: str, clock: Clock = local_now) -> None:
        self.fileformat = fileformat
        self.filename: Optional[str] = None
        self._clock = clock
        self._handle: Optional[TextIO] = None

    @property
    def handle(self) -> Optional[TextIO]:
        return self._handle

    def current_name(self) -> str:
        """Render the file name pattern for the present moment."""
        return self._clock().strftime(self.fileformat)

    def ensure_current(self) -> None:
        """
        Open or rotate the file when needed.

        The open handle is kept when the computed name is unchanged and the
        file still exists. Otherwise the old handle is closed and a new one
        is opened in append mode.

        Raises:
            OSError: If the new file can not be opened.
        """
        new_name = self.current_name()
        if (
                new_name == self.filename
                and self._is_open()
                and os.path.exists(new_name)
        ):
            return

        old_name = self.filename
        self._close_handle()
        ensure_parent_dir(new_name)
        self._handle = open(new_name, "a", encoding="utf-8", buffering=1)
        self.filename = new_name

        if old_name is None or old_name == new_name:
            logger.debug("Opened log file %s", new_name)
        else:
            logger.debug("Rotated log file %s -> %s", old_name, new_name)

    def write(self, text: str) -> None:
        if not self._is_open():
            self.ensure_current()
        handle = self._handle
        if handle is None:
            return
        handle.write(text)
        handle.flush()

    def close(self) -> None:
        """Close the current handle. Safe to call more than once."""
        self._close_handle()
        self.filename = None

    def _is_open(self) -> bool:
        return self._handle is not None and not self._handle.closed

    def _close_handle(self) -> None:
        if self._handle is not None and not self._handle.closed:
            self._handle.close()
        self._handle = None
