from fjordfocus import cli


class RecordingWaiter:
    def __init__(self):
        self.waits = []

    def wait(self, seconds):
        self.waits.append(seconds)


def test_dry_run_lists_blocks_without_waiting(capsys):
    waiter = RecordingWaiter()
    code = cli.main(["--dry-run", "--cycles", "2", "--focus", "3", "--break=1"], waiter=waiter)
    out = capsys.readouterr().out
    assert code == 0
    assert "- Focus 1: 3 minute(s), 3 step(s) of 5s — Lofoten" in out
    assert "- Break 1: 1 minute(s), 1 step(s) of 5s" in out
    assert "Focus 2" in out
    assert "Break 2" not in out
    assert waiter.waits == []


def test_run_narrates_every_step(capsys):
    waiter = RecordingWaiter()
    code = cli.main(["--cycles", "1", "--focus", "2", "--pace", "60"], waiter=waiter)
    out = capsys.readouterr().out
    assert code == 0
    assert "▶ Cycle 1 · Focus" in out
    assert "Lofoten" in out
    assert "[1/2]" in out and "(1 minute(s) left)" in out
    assert "[2/2]" in out and "(0 minute(s) left)" in out
    assert "All 1 cycle(s) complete" in out
    assert waiter.waits == [60.0, 60.0]


def test_failure_is_reported_with_prefix(capsys):
    class BrokenWaiter:
        def wait(self, seconds):
            raise RuntimeError("clock stopped")

    code = cli.main(["--cycles", "1"], waiter=BrokenWaiter())
    err = capsys.readouterr().err
    assert code == 1
    assert err.strip() == "fjordfocus: error: clock stopped"


def test_ctrl_c_exits_non_zero(capsys):
    class InterruptedWaiter:
        def wait(self, seconds):
            raise KeyboardInterrupt

    code = cli.main([], waiter=InterruptedWaiter())
    assert code == 130
    assert "fjordfocus: error: session interrupted" in capsys.readouterr().err
