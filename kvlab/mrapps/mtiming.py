"""MapReduce application that checks map tasks run in parallel."""

from __future__ import annotations

import os
import re
import time
from pathlib import Path
from typing import List, Sequence

from ..mr.worker import KeyValue


def _alive(pid: int) -> bool:
    try:
        os.kill(pid, 0)
    except (OSError, OverflowError):
        return False
    return True


def nparallel(phase: str) -> int:
    """Return how many workers, this one included, are in ``phase`` right now.

    Each worker leaves a marker file named after its process id in the
    current directory for one second; live processes with markers are counted.
    """
    prefix = f"mr-worker-{phase}-"
    marker = Path(f"{prefix}{os.getpid()}")
    marker.write_bytes(b"x")

    pattern = re.compile(re.escape(prefix) + r"([+-]?\d+)")
    running = 0
    for name in os.listdir("."):
        match = pattern.match(name)
        if match and _alive(int(match.group(1))):
            running += 1

    time.sleep(1)
    marker.unlink()
    return running


def map_func(filename: str, contents: str) -> List[KeyValue]:
    """Emit this worker's start time and how many map workers ran alongside it."""
    started = time.time()
    pid = os.getpid()
    running = nparallel("map")
    return [
        KeyValue(f"times-{pid}", f"{started:.1f}"),
        KeyValue(f"parallel-{pid}", str(running)),
    ]


def reduce_func(key: str, values: Sequence[str]) -> str:
    """Return the values sorted and joined with spaces."""
    return " ".join(sorted(values))