from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Path helpers shared by the file devices and the fixed placeholder table.
"""

import os
import sys


def ensure_parent_dir(path: str) -> None:
    """
    Create the parent directory hierarchy for a target file.

    Errors are not caught: a directory that can not be created surfaces
    as OSError to the caller that needed the file.

    Args:
        path: Path to the target file.
    """
    parent = os.path.dirname(os.path.abspath(path))
    if parent and not os.path.isdir(parent):
        os.makedirs(parent, exist_ok=True)


def get_program_path() -> str:
    """
    Resolve the absolute path of the running program.

    Uses the script name from sys.argv, falling back to the interpreter
    when the program name is empty (interactive sessions, embedded hosts).

    Returns:
        str: Absolute path of the running program.
    """
    program = sys.argv[0] if sys.argv and sys.argv[0] else sys.executable
    return os.path.abspath(program)
