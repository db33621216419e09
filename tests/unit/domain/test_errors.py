from __future__ import annotations

"""
Unit tests for the error taxonomy and ErrorContext.
"""

import io

from linelog.domain.errors import DestinationClosedError, ErrorContext, LinelogError


def _raise_value_error():
    raise ValueError("boom")


def test_destination_closed_error_keeps_destination():
    stream = io.StringIO()
    err = DestinationClosedError(stream)

    assert err.destination is stream
    assert isinstance(err, LinelogError)
    assert isinstance(err, ValueError)
    assert "already closed" in str(err)


def test_error_context_from_exception_lists_innermost_frame_first():
    try:
        _raise_value_error()
    except ValueError as e:
        ctx = ErrorContext.from_exception(e)

    assert ctx.error is not None
    assert str(ctx.error) == "boom"
    assert len(ctx.backtrace) == 2
    assert ctx.backtrace[0].endswith(":in _raise_value_error")
    assert ctx.error_line == ctx.backtrace[0]
    assert __file__ in ctx.backtrace[1]


def test_error_context_without_traceback():
    ctx = ErrorContext.from_exception(RuntimeError("never raised"))

    assert ctx.backtrace == []
    assert ctx.error_line is None
