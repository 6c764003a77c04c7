import pytest

from wallsnake.scheduler import TickScheduler


def test_stopped_scheduler_reports_nothing():
    sched = TickScheduler(interval=0.25)
    assert not sched.running
    assert sched.advance(1.0) == 0


def test_ticks_accumulate_across_frames():
    sched = TickScheduler(interval=0.25)
    sched.start()
    assert sched.advance(0.125) == 0
    assert sched.advance(0.125) == 1
    assert sched.advance(0.5) == 2
    assert sched.advance(0.0625) == 0


def test_stop_is_immediate():
    sched = TickScheduler(interval=0.25)
    sched.start()
    sched.advance(0.125)
    sched.stop()
    assert sched.advance(0.5) == 0
    sched.start()
    assert sched.advance(0.125) == 0


def test_backlog_is_capped():
    sched = TickScheduler(interval=0.25, max_catch_up=3)
    sched.start()
    assert sched.advance(10.0) == 3
    assert sched.advance(0.125) == 0


def test_interval_must_be_positive():
    with pytest.raises(ValueError):
        TickScheduler(interval=0)
