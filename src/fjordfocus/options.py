"""Resolve the numeric session options from raw command line values."""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Mapping, Optional, Sequence

log = logging.getLogger(__name__)

OPTION_NAMES = ("focus", "break", "cycles", "pace")


@dataclass(frozen=True)
class Defaults:
    """Fallback values used when an option is missing or invalid."""

    focus_minutes: float = 25
    break_minutes: float = 5
    cycles: int = 2
    pace_seconds: float = 5


DEFAULTS = Defaults()


@dataclass(frozen=True)
class Configuration:
    """Validated session settings. Every field is positive."""

    focus_minutes: float
    break_minutes: float
    cycles: int
    pace_seconds: float


def lookup_option(argv: Sequence[str], name: str) -> Optional[str]:
    """Return the value given for ``--name`` in ``argv``, or None.

    Both ``--name value`` and ``--name=value`` are accepted. A following
    token that is itself a flag is not taken as the value.
    """
    flag = f"--{name}"
    prefix = f"{flag}="
    for position, token in enumerate(argv):
        if token == flag:
            if position + 1 < len(argv) and not argv[position + 1].startswith("--"):
                return argv[position + 1]
            return None
        if token.startswith(prefix):
            return token[len(prefix):]
    return None


def positive_float(raw: Optional[str], default: float) -> float:
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    if not math.isfinite(value) or value <= 0:
        return default
    return value


def positive_int(raw: Optional[str], default: int) -> int:
    if raw is None:
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        return default
    return value if value > 0 else default


def resolve(raw: Mapping[str, Optional[str]], defaults: Defaults = DEFAULTS) -> Configuration:
    """Build a Configuration from raw option strings.

    Args:
        raw: Option name (``focus``, ``break``, ``cycles``, ``pace``) to the
            string given on the command line, or None when absent.
        defaults: Values used for each field that is missing or invalid.
    """
    config = Configuration(
        focus_minutes=positive_float(raw.get("focus"), defaults.focus_minutes),
        break_minutes=positive_float(raw.get("break"), defaults.break_minutes),
        cycles=positive_int(raw.get("cycles"), defaults.cycles),
        pace_seconds=positive_float(raw.get("pace"), defaults.pace_seconds),
    )
    log.debug("Resolved %s from %s", config, dict(raw))
    return config


def resolve_argv(argv: Sequence[str], defaults: Defaults = DEFAULTS) -> Configuration:
    return resolve({name: lookup_option(argv, name) for name in OPTION_NAMES}, defaults)
