"""Focus/break session planning and playback."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional, Protocol, Sequence

from . import coastline, timer
from .options import Configuration
from .timer import BlockKind, StepEvent

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Block:
    """One focus or break block of a session."""

    kind: BlockKind
    cycle: int
    minutes: float
    pace_seconds: float
    script: Sequence[str]
    fact: Optional[coastline.Fact] = None

    @property
    def label(self) -> str:
        return f"{self.kind.label} {self.cycle}"

    @property
    def total_steps(self) -> int:
        return timer.total_steps(self.minutes)

    @property
    def interval_seconds(self) -> float:
        return timer.step_interval(self.minutes, self.pace_seconds)

    @property
    def duration_seconds(self) -> float:
        return self.minutes * self.pace_seconds


@dataclass
class SessionPlan:
    """Holds every block of a session in playback order."""

    config: Configuration
    blocks: List[Block]

    @property
    def total_seconds(self) -> float:
        return sum(block.duration_seconds for block in self.blocks)

    def __iter__(self) -> Iterator[Block]:
        return iter(self.blocks)

    def __len__(self) -> int:
        return len(self.blocks)


class Reporter(Protocol):
    def block_started(self, block: Block) -> None: ...

    def step(self, block: Block, event: StepEvent) -> None: ...

    def block_finished(self, block: Block) -> None: ...

    def session_finished(self, plan: SessionPlan) -> None: ...


def fact_for_cycle(cycle: int, facts: Sequence[coastline.Fact] = coastline.FACTS) -> coastline.Fact:
    """Pick the fact for a 1-based cycle number, wrapping around the list."""
    return coastline.rotate(facts, cycle - 1)


def build_plan(
    config: Configuration,
    *,
    facts: Sequence[coastline.Fact] = coastline.FACTS,
    focus_script: Sequence[str] = coastline.FOCUS_SCRIPT,
    break_script: Sequence[str] = coastline.BREAK_SCRIPT,
) -> SessionPlan:
    """Create the block sequence for a session.

    Every cycle gets a focus block. A break follows each focus block except
    the one in the final cycle.
    """
    blocks: List[Block] = []
    for cycle in range(1, config.cycles + 1):
        blocks.append(
            Block(
                kind=BlockKind.FOCUS,
                cycle=cycle,
                minutes=config.focus_minutes,
                pace_seconds=config.pace_seconds,
                script=focus_script,
                fact=fact_for_cycle(cycle, facts),
            )
        )
        if cycle != config.cycles:
            blocks.append(
                Block(
                    kind=BlockKind.BREAK,
                    cycle=cycle,
                    minutes=config.break_minutes,
                    pace_seconds=config.pace_seconds,
                    script=break_script,
                )
            )
    return SessionPlan(config=config, blocks=blocks)


def run_session(
    plan: SessionPlan,
    reporter: Reporter,
    *,
    waiter=None,
    cancel: Optional[timer.CancelToken] = None,
) -> int:
    """Play every block of ``plan`` in order and return the steps run.

    Errors raised while waiting (including ``SessionCancelled``) propagate
    to the caller; nothing after the failing step is reported.
    """
    steps = 0
    for block in plan:
        log.debug("Starting %s (%d steps of %.2fs)", block.label, block.total_steps, block.interval_seconds)
        reporter.block_started(block)
        steps += timer.run_block(
            block.kind,
            block.minutes,
            block.pace_seconds,
            block.script,
            lambda event, block=block: reporter.step(block, event),
            waiter=waiter,
            cancel=cancel,
        )
        reporter.block_finished(block)
        log.debug("Finished %s", block.label)
    reporter.session_finished(plan)
    return steps
