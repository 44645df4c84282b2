"""MapReduce application whose slow reduce tasks catch workers that exit early."""

from __future__ import annotations

import time
from typing import List, Sequence

from ..mr.worker import KeyValue


def map_func(filename: str, contents: str) -> List[KeyValue]:
    """Emit ``(filename, "1")`` once per file."""
    return [KeyValue(filename, "1")]


def reduce_func(key: str, values: Sequence[str]) -> str:
    """Return the number of values, sleeping three seconds for some keys."""
    if "sherlock" in key or "tom" in key:
        time.sleep(3)
    return str(len(values))