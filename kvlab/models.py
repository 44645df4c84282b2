"""Sequential model of a key/value store, used to check client histories."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Sequence, Tuple

from .porcupine.model import Model, Operation


@dataclass(frozen=True)
class KvInput:
    """Input of a key/value operation.

    ``op`` is 0 for get, 1 for put, 2 for append and 3 for an append that
    returns the previous value.
    """

    op: int
    key: str
    value: str = ""


@dataclass(frozen=True)
class KvOutput:
    """Output of a key/value operation."""

    value: str = ""


def kv_partition(history: Sequence[Operation]) -> List[List[Operation]]:
    """Split a history by key, with partitions ordered by key."""
    groups: Dict[str, List[Operation]] = {}
    for operation in history:
        groups.setdefault(operation.input.key, []).append(operation)
    return [groups[key] for key in sorted(groups)]


def kv_init() -> str:
    """Return the initial value of a single key."""
    # Histories are partitioned by key, so the state is one key's value.
    return ""


def kv_step(state: str, inp: KvInput, out: KvOutput) -> Tuple[bool, str]:
    """Apply one operation to a key's value."""
    if inp.op == 0:
        return out.value == state, state
    if inp.op == 1:
        return True, inp.value
    if inp.op == 2:
        return True, state + inp.value
    return out.value == state, state + inp.value


def kv_describe_operation(inp: KvInput, out: KvOutput) -> str:
    """Describe an operation for visualisation."""
    if inp.op == 0:
        return f"get('{inp.key}') -> '{out.value}'"
    if inp.op == 1:
        return f"put('{inp.key}', '{inp.value}')"
    if inp.op == 2:
        return f"append('{inp.key}', '{inp.value}')"
    return "<invalid>"


KV_MODEL: Any = Model(
    init=kv_init,
    step=kv_step,
    partition=kv_partition,
    describe_operation=kv_describe_operation,
)