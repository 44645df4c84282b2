"""MapReduce application with the same output as the crashing one, but no crashes."""

from __future__ import annotations

from typing import List, Sequence

from ..mr.worker import KeyValue


def map_func(filename: str, contents: str) -> List[KeyValue]:
    """Emit the file name, its length, the contents' length and a constant."""
    return [
        KeyValue("a", filename),
        KeyValue("b", str(len(filename.encode("utf-8")))),
        KeyValue("c", str(len(contents.encode("utf-8")))),
        KeyValue("d", "xyzzy"),
    ]


def reduce_func(key: str, values: Sequence[str]) -> str:
    """Return the values sorted and joined with spaces."""
    return " ".join(sorted(values))