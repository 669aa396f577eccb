"""Split a block into timed steps and narrate them one by one."""
from __future__ import annotations

import enum
import logging
import threading
import time
from dataclasses import dataclass
from typing import Callable, Iterator, Optional, Sequence

from .coastline import rotate

log = logging.getLogger(__name__)


class BlockKind(str, enum.Enum):
    FOCUS = "focus"
    BREAK = "break"

    @property
    def label(self) -> str:
        return self.value.capitalize()


@dataclass(frozen=True)
class StepEvent:
    """Describes one step of a running block."""

    kind: BlockKind
    index: int
    total_steps: int
    cue: str
    remaining: int
    interval_seconds: float


class SessionCancelled(RuntimeError):
    """Raised when a cancellation token is set while a block is running."""


class CancelToken:
    """Thread-safe flag checked by the timer before and after each wait."""

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()


class SleepWaiter:
    """Waits in real time using ``time.sleep``."""

    def wait(self, seconds: float) -> None:
        if seconds > 0:
            time.sleep(seconds)


def total_steps(minutes: float) -> int:
    return max(1, round(minutes))


def step_interval(minutes: float, pace_seconds: float) -> float:
    """Seconds spent on each step of a block lasting ``minutes``."""
    return (minutes * pace_seconds) / total_steps(minutes)


def plan_steps(kind: BlockKind, minutes: float, pace_seconds: float, script: Sequence[str]) -> Iterator[StepEvent]:
    """Lazily yield the step events for a block without waiting."""
    steps = total_steps(minutes)
    interval = step_interval(minutes, pace_seconds)
    for step in range(steps):
        remaining = steps - step
        yield StepEvent(
            kind=kind,
            index=step + 1,
            total_steps=steps,
            cue=rotate(script, step),
            remaining=remaining - 1,
            interval_seconds=interval,
        )


def run_block(
    kind: BlockKind,
    minutes: float,
    pace_seconds: float,
    script: Sequence[str],
    on_step: Callable[[StepEvent], None],
    *,
    waiter=None,
    cancel: Optional[CancelToken] = None,
) -> int:
    """Report each step of a block and wait out its interval.

    Args:
        kind: Whether this is a focus or break block.
        minutes: Block length in simulated minutes.
        pace_seconds: Real seconds per simulated minute.
        script: Cues, used in order and wrapped around.
        on_step: Called with each event before its wait starts.
        waiter: Object with a ``wait(seconds)`` method. Defaults to real sleeping.
        cancel: Optional token. When set, ``SessionCancelled`` is raised at the
            next wait boundary.

    Returns:
        The number of steps that ran.
    """
    waiter = waiter or SleepWaiter()
    count = 0
    for event in plan_steps(kind, minutes, pace_seconds, script):
        _check(cancel)
        on_step(event)
        log.debug("%s step %d/%d: waiting %.2fs", kind.label, event.index, event.total_steps, event.interval_seconds)
        waiter.wait(event.interval_seconds)
        count += 1
        _check(cancel)
    return count


def _check(cancel: Optional[CancelToken]) -> None:
    if cancel is not None and cancel.cancelled:
        raise SessionCancelled("session cancelled")
