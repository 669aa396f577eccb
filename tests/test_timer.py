import pytest

from fjordfocus import coastline, timer
from fjordfocus.timer import BlockKind


class RecordingWaiter:
    def __init__(self):
        self.waits = []

    def wait(self, seconds):
        self.waits.append(seconds)


@pytest.mark.parametrize("minutes, expected", [(0.4, 1), (1, 1), (2.6, 3), (3, 3), (25, 25), (0.01, 1)])
def test_total_steps_rounds_with_floor_of_one(minutes, expected):
    assert timer.total_steps(minutes) == expected


def test_short_block_runs_single_step():
    events = list(timer.plan_steps(BlockKind.FOCUS, 0.4, 5, coastline.FOCUS_SCRIPT))
    assert len(events) == 1
    assert events[0].interval_seconds == pytest.approx(2.0)
    assert events[0].remaining == 0


def test_steps_cycle_through_focus_script():
    script = coastline.FOCUS_SCRIPT
    events = list(timer.plan_steps(BlockKind.FOCUS, 3, 5, script))
    assert [event.cue for event in events] == [script[0], script[1], script[2]]
    assert [event.interval_seconds for event in events] == [5.0, 5.0, 5.0]
    assert [event.index for event in events] == [1, 2, 3]
    assert [event.remaining for event in events] == [2, 1, 0]


def test_cues_wrap_past_end_of_script():
    script = ("in", "out")
    events = list(timer.plan_steps(BlockKind.BREAK, 5, 1, script))
    assert [event.cue for event in events] == ["in", "out", "in", "out", "in"]


def test_run_block_waits_after_each_step():
    order = []

    class Waiter:
        def wait(self, seconds):
            order.append(("wait", seconds))

    count = timer.run_block(
        BlockKind.FOCUS, 2, 60, ("a", "b"), lambda event: order.append(("step", event.index)), waiter=Waiter()
    )

    assert count == 2
    assert order == [("step", 1), ("wait", 60.0), ("step", 2), ("wait", 60.0)]


def test_run_block_without_token_runs_every_step():
    waiter = RecordingWaiter()
    events = []
    timer.run_block(BlockKind.BREAK, 4, 0.5, ("x",), events.append, waiter=waiter)
    assert len(events) == 4
    assert waiter.waits == [0.5] * 4


def test_pre_cancelled_token_runs_no_steps():
    token = timer.CancelToken()
    token.cancel()
    events = []
    with pytest.raises(timer.SessionCancelled):
        timer.run_block(BlockKind.FOCUS, 3, 5, ("x",), events.append, waiter=RecordingWaiter(), cancel=token)
    assert events == []


def test_sleep_waiter_skips_zero(monkeypatch):
    calls = []
    monkeypatch.setattr(timer.time, "sleep", calls.append)
    timer.SleepWaiter().wait(0)
    timer.SleepWaiter().wait(1.5)
    assert calls == [1.5]
