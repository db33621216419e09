from __future__ import annotations

"""
Integration tests for file-backed loggers.

Verifies the rotation policy end to end with a simulated clock:
same-day writes share one file, a date change opens a new file and
closes the old handle, and filesystem failures surface on the logging
call that needed the new file.
"""

import os
from unittest.mock import patch

import pytest

from linelog import Level, Logger


def test_same_date_reuses_file_and_new_date_rotates(tmp_path, clock):
    pattern = str(tmp_path / "log-%Y-%m-%d.txt")
    logger = Logger(pattern, Level.INFO, clock=clock, logformat="%d{%H:%M} %m")

    assert logger.fileformat == pattern
    assert logger.filename == str(tmp_path / "log-2024-03-15.txt")
    first_handle = logger.device

    logger.info("morning")
    clock.advance(hours=5)
    logger.info("afternoon")
    assert logger.device is first_handle

    clock.advance(days=1)
    logger.info("next day")
    logger.close()

    assert first_handle.closed
    assert logger.filename is None
    assert (tmp_path / "log-2024-03-15.txt").read_text(encoding="utf-8") == "10:30 morning\n15:30 afternoon\n"
    assert (tmp_path / "log-2024-03-16.txt").read_text(encoding="utf-8") == "15:30 next day\n"


def test_construction_creates_first_file(tmp_path, clock):
    logger = Logger(tmp_path / "app.log", clock=clock)

    assert (tmp_path / "app.log").exists()
    assert logger.fileformat == str(tmp_path / "app.log")
    logger.close()


def test_plain_rotates_too(tmp_path, clock):
    logger = Logger(str(tmp_path / "%H.log"), clock=clock)
    clock.advance(hours=1)
    logger.plain("raw %m")
    logger.close()

    assert (tmp_path / "10.log").read_text(encoding="utf-8") == ""
    assert (tmp_path / "11.log").read_text(encoding="utf-8") == "raw %m\n"


def test_gated_call_does_not_rotate(tmp_path, clock):
    logger = Logger(str(tmp_path / "%d.log"), Level.WARN, clock=clock)
    clock.advance(days=1)
    logger.debug("dropped")

    assert logger.filename == str(tmp_path / "15.log")
    assert not (tmp_path / "16.log").exists()
    logger.close()


def test_externally_deleted_file_is_recreated(tmp_path, clock):
    logger = Logger(str(tmp_path / "app.log"), clock=clock, logformat="%m")
    logger.info("lost")
    os.remove(tmp_path / "app.log")

    logger.info("kept")
    logger.close()

    assert (tmp_path / "app.log").read_text(encoding="utf-8") == "kept\n"


def test_close_is_idempotent_and_logging_reopens(tmp_path, clock):
    logger = Logger(str(tmp_path / "app.log"), clock=clock, logformat="%m")
    logger.info("one")
    logger.close()
    logger.close()

    logger.info("two")
    logger.close()

    assert (tmp_path / "app.log").read_text(encoding="utf-8") == "one\ntwo\n"


def test_rotation_failure_raises_on_logging_call(tmp_path, clock):
    logger = Logger(str(tmp_path / "log-%Y-%m-%d.txt"), clock=clock)
    clock.advance(days=1)

    with patch("builtins.open", side_effect=PermissionError("denied")):
        with pytest.raises(PermissionError):
            logger.info("needs a new file")

    logger.close()


def test_construction_failure_raises(tmp_path, clock):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")

    with pytest.raises(OSError):
        Logger(str(blocker / "app.log"), clock=clock)
