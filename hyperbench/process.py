"""Helpers for running benchmarked child processes."""

from __future__ import annotations

import os
import random
from typing import Optional

_POSIX = os.name == "posix"


def extract_exit_code(returncode: Optional[int]) -> Optional[int]:
    """Exit code of a finished process.

    On POSIX a process killed by a signal reports 128 plus the signal number,
    as shells do.
    """
    if returncode is None:
        return None
    if _POSIX and returncode < 0:
        return -returncode + 128
    return returncode


def randomized_environment_offset() -> str:
    """A string of random length, set as an environment variable to vary memory layout."""
    return "X" * random.randrange(4096)