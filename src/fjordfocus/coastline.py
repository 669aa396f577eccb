"""Coastline facts and breathing cue scripts shown during a session."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Fact:
    """One coastline record, shown at the start of a focus block."""

    region: str
    shoreline_km: float
    breath_cue: str


FACTS: Tuple[Fact, ...] = (
    Fact(region="Lofoten", shoreline_km=2450, breath_cue="Inhale for four, like a wave rolling in."),
    Fact(region="Nordland", shoreline_km=14100, breath_cue="Hold the breath still as a sheltered fjord."),
    Fact(region="Finnmark", shoreline_km=6800, breath_cue="Exhale slowly across the open Barents Sea."),
    Fact(region="Vestland", shoreline_km=9900, breath_cue="Let each breath settle like mist on the cliffs."),
)

FOCUS_SCRIPT: Tuple[str, ...] = (
    "Breathe in through the nose and find the task in front of you.",
    "Breathe out slowly and let the shoulders drop.",
    "Eyes on the work, breath steady and even.",
    "Notice any drift and return, like the tide.",
)

BREAK_SCRIPT: Tuple[str, ...] = (
    "Stand up and stretch toward the horizon.",
    "Look at something far away and breathe deeply.",
    "Roll the neck gently and let the breath slow down.",
)


def rotate(items: Sequence[T], index: int) -> T:
    """Return ``items[index]`` wrapping around the end of the sequence."""
    if not items:
        raise ValueError("cannot rotate through an empty sequence")
    return items[index % len(items)]


def highlights(facts: Sequence[Fact] = FACTS, min_km: float = 5000) -> List[Fact]:
    """Regions with at least ``min_km`` of shoreline, longest first."""
    selected = [fact for fact in facts if fact.shoreline_km >= min_km]
    return sorted(selected, key=lambda fact: fact.shoreline_km, reverse=True)
