"""Command line interface for Fjord Focus Coach."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Iterable, Optional, Sequence

from . import coastline, options, scheduler
from .timer import BlockKind, StepEvent

log = logging.getLogger(__name__)

ERROR_PREFIX = "fjordfocus: error:"

BANNER = r"""
  ___  _                _   ___
 | __|(_) ___  _ _  __| | | __| ___  __  _  _  ___
 | _| | |/ _ \| '_|/ _` | | _| / _ \/ _|| || |(_-<
 |_| _/ |\___/|_|  \__,_| |_|  \___/\__| \_,_|/__/
    |__/
"""

EPILOG = """\
session options (invalid or missing values fall back to the defaults):
  --focus N    focus block length in minutes (default {d.focus_minutes:g})
  --break N    break block length in minutes (default {d.break_minutes:g})
  --cycles N   number of focus/break cycles (default {d.cycles})
  --pace N     real seconds per simulated minute (default {d.pace_seconds:g}; 60 for real time)
"""


def setup_logging(level: int = logging.WARNING) -> logging.Logger:
    root = logging.getLogger("fjordfocus")
    if root.handlers:
        root.setLevel(level)
        return root
    root.setLevel(level)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s", datefmt="%Y-%m-%d %H:%M:%S")
    )
    root.addHandler(handler)
    return root


def parse_args(argv: Iterable[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="fjordfocus",
        description="Minimalistic timer that pairs breaths with coastline stats.",
        epilog=EPILOG.format(d=options.DEFAULTS),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--dry-run", action="store_true", help="show the schedule without running timers")
    parser.add_argument("--verbose", action="store_true", help="log debug details to stderr")
    args, _ = parser.parse_known_args(list(argv))
    return args


def format_minutes(minutes: float) -> str:
    return f"{minutes:g} minute(s)"


class ConsoleReporter:
    """Prints session progress to stdout."""

    def __init__(self, stream=None) -> None:
        self.stream = stream or sys.stdout

    def _print(self, text: str = "") -> None:
        print(text, file=self.stream)
        self.stream.flush()

    def block_started(self, block: scheduler.Block) -> None:
        self._print()
        self._print(f"▶ Cycle {block.cycle} · {block.kind.label} — {format_minutes(block.minutes)}")
        if block.fact is not None:
            fact = block.fact
            self._print(f"  {fact.region}: {fact.shoreline_km:,.0f} km of shoreline")
            self._print(f"  {fact.breath_cue}")

    def step(self, block: scheduler.Block, event: StepEvent) -> None:
        self._print(
            f"  [{event.index}/{event.total_steps}] {event.cue} "
            f"({event.remaining} minute(s) left)"
        )

    def block_finished(self, block: scheduler.Block) -> None:
        if block.kind is BlockKind.FOCUS:
            self._print(f"✓ Focus block {block.cycle} complete.")
        else:
            self._print(f"✓ Break {block.cycle} over, back to the fjord.")

    def session_finished(self, plan: scheduler.SessionPlan) -> None:
        self._print()
        self._print(f"All {plan.config.cycles} cycle(s) complete. Well done!")


def print_header(config: options.Configuration) -> None:
    print(BANNER)
    print("Focus     :", format_minutes(config.focus_minutes))
    print("Break     :", format_minutes(config.break_minutes))
    print("Cycles    :", config.cycles)
    print("Pace      :", f"{config.pace_seconds:g} second(s) per minute")
    print()
    print("Top signals:")
    for rank, fact in enumerate(coastline.highlights(), start=1):
        print(f" {rank:>2}. {fact.region} ({fact.shoreline_km:,.0f} km)")


def print_plan(plan: scheduler.SessionPlan) -> None:
    print("Planned blocks:")
    for block in plan:
        region = f" — {block.fact.region}" if block.fact is not None else ""
        print(
            f"- {block.label}: {format_minutes(block.minutes)}, "
            f"{block.total_steps} step(s) of {block.interval_seconds:g}s{region}"
        )
    print(f"Total: {plan.total_seconds:g}s")


def main(argv: Optional[Sequence[str]] = None, *, waiter=None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    args = parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    config = options.resolve_argv(argv)
    plan = scheduler.build_plan(config)
    print_header(config)
    print()

    if args.dry_run:
        print_plan(plan)
        return 0

    try:
        scheduler.run_session(plan, ConsoleReporter(), waiter=waiter)
    except KeyboardInterrupt:
        print(f"\n{ERROR_PREFIX} session interrupted", file=sys.stderr)
        return 130
    except Exception as exc:
        log.debug("Session failed", exc_info=True)
        print(f"{ERROR_PREFIX} {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
