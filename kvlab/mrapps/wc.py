"""Word-count application for MapReduce."""

from __future__ import annotations

from itertools import groupby
from typing import Iterator, List, Sequence

from ..mr.worker import KeyValue


def _words(text: str) -> Iterator[str]:
    """Yield the maximal runs of letters in ``text``."""
    for is_letter, run in groupby(text, key=str.isalpha):
        if is_letter:
            yield "".join(run)


def map_func(filename: str, contents: str) -> List[KeyValue]:
    """Emit ``(word, "1")`` for every word in ``contents``; the file name is ignored."""
    return [KeyValue(word, "1") for word in _words(contents)]


def reduce_func(key: str, values: Sequence[str]) -> str:
    """Return the number of occurrences of the word."""
    return str(len(values))