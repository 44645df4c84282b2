"""Entry points for checking histories for linearizability.

Timeouts are in seconds; ``None`` or 0 means no timeout. A check that times
out may report a false positive.
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

from .checker import LinearizationInfo, check_events_info, check_operations_info
from .model import CheckResult, Event, Model, Operation


def check_operations(model: Model, history: Sequence[Operation]) -> bool:
    """Return whether the operation history is linearizable."""
    result, _ = check_operations_info(model, history, False, None)
    return result is CheckResult.OK


def check_operations_timeout(
    model: Model, history: Sequence[Operation], timeout: Optional[float]
) -> CheckResult:
    """Check an operation history, giving up after ``timeout`` seconds."""
    result, _ = check_operations_info(model, history, False, timeout)
    return result


def check_operations_verbose(
    model: Model, history: Sequence[Operation], timeout: Optional[float]
) -> Tuple[CheckResult, LinearizationInfo]:
    """Check an operation history and return partial linearizations too."""
    return check_operations_info(model, history, True, timeout)


def check_events(model: Model, history: Sequence[Event]) -> bool:
    """Return whether the event history is linearizable."""
    result, _ = check_events_info(model, history, False, None)
    return result is CheckResult.OK


def check_events_timeout(
    model: Model, history: Sequence[Event], timeout: Optional[float]
) -> CheckResult:
    """Check an event history, giving up after ``timeout`` seconds."""
    result, _ = check_events_info(model, history, False, timeout)
    return result


def check_events_verbose(
    model: Model, history: Sequence[Event], timeout: Optional[float]
) -> Tuple[CheckResult, LinearizationInfo]:
    """Check an event history and return partial linearizations too."""
    return check_events_info(model, history, True, timeout)