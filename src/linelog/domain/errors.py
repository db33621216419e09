from __future__ import annotations

"""
Error Taxonomy and Error Context.

Declares the exceptions raised by the library and the explicit error
context used to feed the %e, %s and %S placeholders.
"""

import traceback
from dataclasses import dataclass, field
from typing import Any, List, Optional


class LinelogError(Exception):
    """Base class for all errors raised by linelog."""


class DestinationClosedError(LinelogError, ValueError):
    """Raised when a logger is constructed on a stream that is already closed."""

    def __init__(self, destination: Any) -> None:
        super().__init__(f"log destination already closed: {destination!r}")
        self.destination = destination


@dataclass(frozen=True)
class ErrorContext:
    """
    Error state attached to a log line.

    Attributes:
        error: The exception being reported, if any.
        backtrace: Frames of the error's traceback, innermost first,
            each formatted as 'file:line:in function'.
    """
    error: Optional[BaseException] = None
    backtrace: List[str] = field(default_factory=list)

    @classmethod
    def from_exception(cls, exc: BaseException) -> ErrorContext:
        """
        Build a context from a raised exception.

        Args:
            exc: Exception instance, usually the one bound in an except clause.

        Returns:
            ErrorContext: Context holding the exception and its frames.
        """
        frames = traceback.extract_tb(exc.__traceback__)
        backtrace = [
            f"{frame.filename}:{frame.lineno}:in {frame.name}"
            for frame in reversed(frames)
        ]
        return cls(error=exc, backtrace=backtrace)

    @property
    def error_line(self) -> Optional[str]:
        """Frame where the error was raised, or None without a backtrace."""
        return self.backtrace[0] if self.backtrace else None
