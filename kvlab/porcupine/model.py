"""Histories, events and sequential models used by the linearizability checker."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Sequence, Tuple


@dataclass
class Operation:
    """A completed operation with its input, output and call/return times.

    ``client_id`` is optional and only matters for visualisation.
    """

    input: Any
    call: int
    output: Any
    return_: int
    client_id: int = 0


class EventKind(enum.Enum):
    """Whether an event is an invocation or a response."""

    CALL = False
    RETURN = True


@dataclass
class Event:
    """One half of an operation in an event-ordered history.

    A call event carries the operation's input, a return event its output;
    the two halves share ``id``.
    """

    kind: EventKind
    value: Any
    id: int
    client_id: int = 0


def no_partition(history: Sequence[Operation]) -> List[List[Operation]]:
    """Treat the whole operation history as a single partition."""
    return [list(history)]


def no_partition_event(history: Sequence[Event]) -> List[List[Event]]:
    """Treat the whole event history as a single partition."""
    return [list(history)]


def shallow_equal(state1: Any, state2: Any) -> bool:
    """Compare two states with ``==``."""
    return state1 == state2


def default_describe_operation(inp: Any, out: Any) -> str:
    """Describe an operation as ``input -> output``."""
    return f"{inp} -> {out}"


def default_describe_state(state: Any) -> str:
    """Describe a state by its string form."""
    return f"{state}"


@dataclass
class Model:
    """A sequential specification of a system.

    ``step(state, input, output)`` returns ``(ok, new_state)`` and must not
    mutate ``state``. The partition functions must split a history so that it
    is linearizable exactly when every part is. Optional callables left as
    ``None`` are replaced by the module's defaults.
    """

    init: Callable[[], Any]
    step: Callable[[Any, Any, Any], Tuple[bool, Any]]
    partition: Optional[Callable[[Sequence[Operation]], List[List[Operation]]]] = None
    partition_event: Optional[Callable[[Sequence[Event]], List[List[Event]]]] = None
    equal: Optional[Callable[[Any, Any], bool]] = None
    describe_operation: Optional[Callable[[Any, Any], str]] = None
    describe_state: Optional[Callable[[Any], str]] = None

    def __post_init__(self) -> None:
        if self.partition is None:
            self.partition = no_partition
        if self.partition_event is None:
            self.partition_event = no_partition_event
        if self.equal is None:
            self.equal = shallow_equal
        if self.describe_operation is None:
            self.describe_operation = default_describe_operation
        if self.describe_state is None:
            self.describe_state = default_describe_state


class CheckResult(str, enum.Enum):
    """Outcome of a linearizability check."""

    UNKNOWN = "Unknown"  # the check timed out
    OK = "Ok"
    ILLEGAL = "Illegal"