"""Streamlit dashboard for Fjord Focus Coach.

Run with:

    streamlit run src/fjordfocus/streamlit_app.py

The sidebar holds the same numeric options as the command line. The page
shows the planned blocks and a Start button that plays the session with
live cue updates and a progress bar per block.
"""
from __future__ import annotations

from typing import Dict, Optional

import streamlit as st

from fjordfocus import options, scheduler
from fjordfocus.timer import BlockKind, StepEvent


def format_seconds(seconds: float) -> str:
    minutes, remainder = divmod(int(round(seconds)), 60)
    return f"{minutes:02d}:{remainder:02d}"


def sidebar_values(defaults: options.Defaults = options.DEFAULTS) -> Dict[str, Optional[str]]:
    """Collect the sidebar inputs as raw strings for the option resolver."""
    with st.sidebar:
        focus = st.number_input("Focus minutes", min_value=0.1, value=float(defaults.focus_minutes))
        brk = st.number_input("Break minutes", min_value=0.1, value=float(defaults.break_minutes))
        cycles = st.number_input("Cycles", min_value=1, value=defaults.cycles, step=1)
        pace = st.number_input("Seconds per minute", min_value=0.1, value=float(defaults.pace_seconds))
    return {"focus": str(focus), "break": str(brk), "cycles": str(int(cycles)), "pace": str(pace)}


class StreamlitReporter:
    """Renders session progress into Streamlit placeholders."""

    def __init__(self) -> None:
        self.header = st.empty()
        self.cue = st.empty()
        self.progress = st.progress(0)
        self.log = st.container()

    def block_started(self, block: scheduler.Block) -> None:
        title = f"▶ Cycle {block.cycle} · {block.kind.label} ({format_seconds(block.duration_seconds)})"
        if block.fact is not None:
            title += f"  \n{block.fact.region}: {block.fact.shoreline_km:,.0f} km · _{block.fact.breath_cue}_"
        self.header.markdown(title)
        self.progress.progress(0)

    def step(self, block: scheduler.Block, event: StepEvent) -> None:
        self.cue.markdown(f"### {event.cue}\n{event.remaining} minute(s) left")
        self.progress.progress(int(event.index * 100 / event.total_steps))

    def block_finished(self, block: scheduler.Block) -> None:
        done = "complete" if block.kind is BlockKind.FOCUS else "over"
        self.log.write(f"✓ {block.label} {done}")

    def session_finished(self, plan: scheduler.SessionPlan) -> None:
        self.cue.markdown(f"### All {plan.config.cycles} cycle(s) complete")
        st.balloons()


def main() -> None:
    st.set_page_config(page_title="Fjord Focus Coach", layout="centered")
    st.title("Fjord Focus Coach")
    st.caption("Minimalistic timer that pairs breaths with coastline stats.")

    config = options.resolve(sidebar_values())
    plan = scheduler.build_plan(config)

    st.subheader("Planned blocks")
    for block in plan:
        region = f" · {block.fact.region}" if block.fact is not None else ""
        st.write(f"- {block.label}: {block.total_steps} step(s), {format_seconds(block.duration_seconds)}{region}")

    st.write("---")

    if st.button("Start session"):
        try:
            scheduler.run_session(plan, StreamlitReporter())
        except Exception as exc:
            st.error(f"Session failed: {exc}")


if __name__ == "__main__":
    main()
