"""MapReduce application that counts how many map tasks were run."""

from __future__ import annotations

import os
import random
import threading
import time
from pathlib import Path
from typing import List, Sequence

from ..mr.worker import KeyValue

_PREFIX = "mr-worker-jobcount"
_count = 0
_count_lock = threading.Lock()


def map_func(filename: str, contents: str) -> List[KeyValue]:
    """Record this invocation in a marker file, then stall for two to five seconds."""
    global _count
    with _count_lock:
        index = _count
        _count += 1
    Path(f"{_PREFIX}-{os.getpid()}-{index}").write_bytes(b"x")
    time.sleep((2000 + random.randrange(3000)) / 1000)
    return [KeyValue("a", "x")]


def reduce_func(key: str, values: Sequence[str]) -> str:
    """Return how many map invocations left marker files in the current directory."""
    return str(sum(1 for name in os.listdir(".") if name.startswith(_PREFIX)))