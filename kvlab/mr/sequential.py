"""Run a MapReduce application sequentially in one process."""

from __future__ import annotations

import os
import sys
from itertools import groupby
from operator import attrgetter
from pathlib import PurePath
from types import ModuleType
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple, Union

from ..mrapps import crash, early_exit, indexer, jobcount, mtiming, nocrash, rtiming, wc
from .worker import KeyValue

MapFunc = Callable[[str, str], List[KeyValue]]
ReduceFunc = Callable[[str, Sequence[str]], str]

_APPS: Dict[str, ModuleType] = {
    "wc": wc,
    "indexer": indexer,
    "crash": crash,
    "nocrash": nocrash,
    "early_exit": early_exit,
    "jobcount": jobcount,
    "mtiming": mtiming,
    "rtiming": rtiming,
}


def load_app(name: str) -> Tuple[MapFunc, ReduceFunc]:
    """Return the map and reduce functions of the named application.

    ``name`` may be a bare name such as ``wc`` or a path such as ``../mrapps/wc.so``.
    """
    stem = PurePath(name).stem
    app = _APPS.get(stem)
    if app is None:
        raise ValueError(f"cannot load application {name!r}; known: {', '.join(sorted(_APPS))}")
    return app.map_func, app.reduce_func


def run_sequential(
    map_func: MapFunc,
    reduce_func: ReduceFunc,
    filenames: Iterable[Union[str, os.PathLike]],
    output: Union[str, os.PathLike],
) -> None:
    """Map every input file, then reduce each distinct key into ``output``.

    Each output line is ``key result``, with keys in sorted order.
    """
    intermediate: List[KeyValue] = []
    for filename in filenames:
        with open(filename, encoding="utf-8", errors="surrogateescape") as handle:
            contents = handle.read()
        intermediate.extend(map_func(os.fspath(filename), contents))

    intermediate.sort(key=attrgetter("key"))

    with open(output, "w", encoding="utf-8", errors="surrogateescape") as out:
        for key, group in groupby(intermediate, key=attrgetter("key")):
            result = reduce_func(key, [kv.value for kv in group])
            out.write(f"{key} {result}\n")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run an application over input files, writing ``mr-out-0``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2:
        print("Usage: mrsequential app inputfiles...", file=sys.stderr)
        return 1
    try:
        map_func, reduce_func = load_app(args[0])
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    try:
        run_sequential(map_func, reduce_func, args[1:], "mr-out-0")
    except OSError as exc:
        print(f"cannot read {exc.filename}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())