"""Linearizability checking of operation and event histories."""

from __future__ import annotations

import queue
import threading
import time
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from .bitset import Bitset
from .model import CheckResult, Event, EventKind, Model, Operation


@dataclass
class _Entry:
    kind: EventKind
    value: Any
    id: int
    time: int
    client_id: int


@dataclass
class LinearizationInfo:
    """Per-partition histories and their longest linearizable prefixes."""

    history: List[List[_Entry]] = field(default_factory=list)
    partial_linearizations: List[List[List[int]]] = field(default_factory=list)


class _Node:
    """Doubly linked list node; a call node points at its return node."""

    __slots__ = ("value", "match", "id", "next", "prev")

    def __init__(self, value: Any, node_id: int, match: Optional["_Node"] = None) -> None:
        self.value = value
        self.match = match
        self.id = node_id
        self.next: Optional[_Node] = None
        self.prev: Optional[_Node] = None


def _make_entries(history: Sequence[Operation]) -> List[_Entry]:
    entries = []
    for op_id, op in enumerate(history):
        entries.append(_Entry(EventKind.CALL, op.input, op_id, op.call, op.client_id))
        entries.append(_Entry(EventKind.RETURN, op.output, op_id, op.return_, op.client_id))
    # At equal timestamps, calls come before returns.
    entries.sort(key=lambda e: (e.time, e.kind is EventKind.RETURN))
    return entries


def _insert_before(node: _Node, mark: Optional[_Node]) -> _Node:
    if mark is not None:
        before_mark = mark.prev
        mark.prev = node
        node.next = mark
        if before_mark is not None:
            node.prev = before_mark
            before_mark.next = node
    return node


def _length(node: Optional[_Node]) -> int:
    count = 0
    while node is not None:
        node = node.next
        count += 1
    return count


def _renumber(events: Iterable[Event]) -> List[Event]:
    mapping: Dict[int, int] = {}
    renumbered = []
    for event in events:
        new_id = mapping.setdefault(event.id, len(mapping))
        renumbered.append(Event(event.kind, event.value, new_id, event.client_id))
    return renumbered


def _convert_entries(events: Sequence[Event]) -> List[_Entry]:
    # The position in the history stands in for time.
    return [
        _Entry(event.kind, event.value, event.id, index, event.client_id)
        for index, event in enumerate(events)
    ]


def _make_linked_entries(entries: Sequence[_Entry]) -> Optional[_Node]:
    root: Optional[_Node] = None
    returns: Dict[int, _Node] = {}
    for entry in reversed(entries):
        if entry.kind is EventKind.RETURN:
            node = _Node(entry.value, entry.id)
            returns[entry.id] = node
        else:
            node = _Node(entry.value, entry.id, returns.get(entry.id))
        _insert_before(node, root)
        root = node
    return root


def _lift(entry: _Node) -> None:
    entry.prev.next = entry.next
    entry.next.prev = entry.prev
    match = entry.match
    match.prev.next = match.next
    if match.next is not None:
        match.next.prev = match.prev


def _unlift(entry: _Node) -> None:
    match = entry.match
    match.prev.next = match
    if match.next is not None:
        match.next.prev = match
    entry.prev.next = entry
    entry.next.prev = entry


def _cache_contains(model: Model, cache: Dict[Bitset, List[Any]], linearized: Bitset, state: Any) -> bool:
    return any(model.equal(state, cached) for cached in cache.get(linearized, ()))


def _check_single(
    model: Model,
    history: Sequence[_Entry],
    compute_partial: bool,
    kill: threading.Event,
) -> Tuple[bool, List[Optional[List[int]]]]:
    entry = _make_linked_entries(history)
    n = _length(entry) // 2
    linearized = Bitset(n)
    cache: Dict[Bitset, List[Any]] = {}
    calls: List[Tuple[_Node, Any]] = []
    # longest linearizable prefix that includes each operation
    longest: List[Optional[List[int]]] = [None] * n

    state = model.init()
    head = _insert_before(_Node(None, -1), entry)
    while head.next is not None:
        if kill.is_set():
            return False, longest
        if entry.match is not None:
            ok, new_state = model.step(state, entry.value, entry.match.value)
            if ok:
                new_linearized = linearized.clone().set(entry.id)
                if not _cache_contains(model, cache, new_linearized, new_state):
                    cache.setdefault(new_linearized, []).append(new_state)
                    calls.append((entry, state))
                    state = new_state
                    linearized.set(entry.id)
                    _lift(entry)
                    entry = head.next
                    continue
            entry = entry.next
        else:
            if not calls:
                return False, longest
            if compute_partial:
                seq: Optional[List[int]] = None
                for node, _ in calls:
                    current = longest[node.id]
                    if current is None or len(calls) > len(current):
                        if seq is None:
                            seq = [call_node.id for call_node, _ in calls]
                        longest[node.id] = seq
            entry, state = calls.pop()
            linearized.clear(entry.id)
            _unlift(entry)
            entry = entry.next

    # the complete linearization is the longest one for every operation
    seq = [node.id for node, _ in calls]
    return True, [seq] * n


def _check_parallel(
    model: Model,
    history: List[List[_Entry]],
    compute_info: bool,
    timeout: Optional[float],
) -> Tuple[CheckResult, LinearizationInfo]:
    results: "queue.Queue[Tuple[bool, Optional[BaseException]]]" = queue.Queue()
    longest: List[List[Optional[List[int]]]] = [[] for _ in history]
    kill = threading.Event()

    def run(index: int, subhistory: List[_Entry]) -> None:
        try:
            ok, partial = _check_single(model, subhistory, compute_info, kill)
        except BaseException as exc:  # reported to the waiting thread
            results.put((False, exc))
            return
        longest[index] = partial
        results.put((ok, None))

    for index, subhistory in enumerate(history):
        threading.Thread(target=run, args=(index, subhistory), daemon=True).start()

    deadline = time.monotonic() + timeout if timeout is not None and timeout > 0 else None
    ok = True
    timed_out = False
    count = 0
    while count < len(history):
        remaining = None if deadline is None else max(0.0, deadline - time.monotonic())
        try:
            result, error = results.get(timeout=remaining)
        except queue.Empty:
            # a timeout may turn an illegal history into a false positive
            timed_out = True
            kill.set()
            break
        if error is not None:
            kill.set()
            raise error
        count += 1
        ok = ok and result
        if not ok and not compute_info:
            kill.set()
            break

    info = LinearizationInfo()
    if compute_info:
        while count < len(history):
            _, error = results.get()
            if error is not None:
                raise error
            count += 1
        partials_by_partition = []
        for partial in longest:
            unique = {id(seq): seq for seq in partial if seq is not None}
            partials_by_partition.append([list(seq) for seq in unique.values()])
        info.history = history
        info.partial_linearizations = partials_by_partition

    if not ok:
        return CheckResult.ILLEGAL, info
    if timed_out:
        return CheckResult.UNKNOWN, info
    return CheckResult.OK, info


def check_events_info(
    model: Model,
    history: Sequence[Event],
    compute_info: bool = False,
    timeout: Optional[float] = None,
) -> Tuple[CheckResult, LinearizationInfo]:
    """Check an event history; ``timeout`` is in seconds, ``None`` or 0 for none."""
    partitions = model.partition_event(list(history))
    entries = [_convert_entries(_renumber(part)) for part in partitions]
    return _check_parallel(model, entries, compute_info, timeout)


def check_operations_info(
    model: Model,
    history: Sequence[Operation],
    compute_info: bool = False,
    timeout: Optional[float] = None,
) -> Tuple[CheckResult, LinearizationInfo]:
    """Check an operation history; ``timeout`` is in seconds, ``None`` or 0 for none."""
    partitions = model.partition(list(history))
    entries = [_make_entries(part) for part in partitions]
    return _check_parallel(model, entries, compute_info, timeout)