"""MapReduce application that checks reduce tasks run in parallel."""

from __future__ import annotations

import os
import re
import time
from pathlib import Path
from typing import List, Sequence

from ..mr.worker import KeyValue

__all__ = ["map_func", "nparallel", "reduce_func"]


def _alive(pid: int) -> bool:
    try:
        os.kill(pid, 0)
    except (OSError, ValueError, OverflowError):
        return False
    return True


def nparallel(phase: str) -> int:
    """Count the workers, this one included, running ``phase`` right now.

    Each worker leaves a marker file ``mr-worker-<phase>-<pid>`` in the
    current directory for a second; live markers are counted.
    """
    marker = Path(f"mr-worker-{phase}-{os.getpid()}")
    marker.write_text("x")

    pattern = re.compile(rf"mr-worker-{re.escape(phase)}-([+-]?\d+)")
    running = 0
    for name in os.listdir("."):
        match = pattern.match(name)
        if match and _alive(int(match.group(1))):
            running += 1

    time.sleep(1)
    marker.unlink()
    return running


def map_func(filename: str, contents: str) -> List[KeyValue]:
    """Emit ten keys, ``a`` to ``j``, each with value ``"1"``."""
    return [KeyValue(key, "1") for key in "abcdefghij"]


def reduce_func(key: str, values: Sequence[str]) -> str:
    """Return how many reduce workers ran alongside this one."""
    return str(nparallel("reduce"))