"""
Simulation Clock Tests

Tests verify:
- Host-driven ticking fires schedules on their own cadence, earliest first
- Late schedules fire once (no burst catch-up)
- stop() is idempotent, safe before start(), and final
- A failing callback does not take down other schedules
- The threaded driver ticks on its own and stops cleanly
"""

import threading
import time

import pytest

from sentinel.simulation import SimulationClock


class ManualTime:
    def __init__(self, now: float = 0.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


def make_clock(**periods):
    """Host-driven clock recording the order in which schedules fire."""
    fired = []
    clock = SimulationClock(threaded=False, time_source=ManualTime())
    for name, period in periods.items():
        clock.schedule(name, period, lambda name=name: fired.append(name))
    return clock, fired


class TestHostDriven:

    def test_nothing_fires_before_start(self):
        clock, fired = make_clock(walk=1.0)
        assert clock.run_pending(now=100.0) == 0
        assert fired == []

    def test_first_fire_one_period_after_start(self):
        clock, fired = make_clock(walk=1.0)
        clock.start()

        assert clock.run_pending(now=0.5) == 0
        assert clock.run_pending(now=1.0) == 1
        assert fired == ["walk"]

    def test_independent_cadences(self):
        clock, fired = make_clock(walk=1.0, latency=20.0, logs=30.0)
        clock.start()

        for t in range(1, 61):
            clock.run_pending(now=float(t))

        assert fired.count("walk") == 60
        assert fired.count("latency") == 3
        assert fired.count("logs") == 2
        assert clock.fire_count("walk") == 60

    def test_due_order(self):
        clock, fired = make_clock(slow=3.0, fast=1.0)
        clock.start()
        clock.run_pending(now=1.0)   # fast (due 1)
        clock.run_pending(now=3.0)   # fast (due 2), then slow (due 3)

        assert fired == ["fast", "fast", "slow"]

    def test_late_schedule_does_not_burst(self):
        clock, fired = make_clock(walk=1.0)
        clock.start()

        assert clock.run_pending(now=10.0) == 1
        assert clock.run_pending(now=10.0) == 0
        assert clock.run_pending(now=11.0) == 1
        assert fired == ["walk", "walk"]

    def test_uses_time_source_when_now_omitted(self):
        now = ManualTime()
        calls = []
        clock = SimulationClock(threaded=False, time_source=now)
        clock.schedule("walk", 0.5, lambda: calls.append(now.now))
        clock.start()

        now.now = 0.5
        clock.run_pending()

        assert calls == [0.5]
        assert clock.seconds_until_due() == pytest.approx(0.5)


class TestLifecycle:

    def test_stop_before_start_is_safe(self):
        clock, _ = make_clock(walk=1.0)
        clock.stop()
        clock.stop()
        assert not clock.running

    def test_stop_is_idempotent(self):
        clock, _ = make_clock(walk=1.0)
        clock.start()
        clock.stop()
        clock.stop()
        assert not clock.running

    def test_no_fire_after_stop(self):
        clock, fired = make_clock(walk=1.0)
        clock.start()
        clock.run_pending(now=1.0)
        clock.stop()

        assert clock.run_pending(now=50.0) == 0
        assert fired == ["walk"]
        assert clock.seconds_until_due() is None

    def test_start_twice_is_noop(self):
        clock, fired = make_clock(walk=1.0)
        clock.start()
        clock.run_pending(now=1.0)
        clock.start()  # must not re-arm from t=0

        assert clock.run_pending(now=1.5) == 0
        assert clock.run_pending(now=2.0) == 1

    def test_restart_rearms_from_now(self):
        now = ManualTime()
        clock = SimulationClock(threaded=False, time_source=now)
        clock.schedule("walk", 1.0, lambda: None)
        clock.start()
        clock.stop()

        now.now = 100.0
        clock.start()
        assert clock.run_pending(now=100.5) == 0
        assert clock.run_pending(now=101.0) == 1

    def test_callback_can_stop_clock(self):
        fired = []
        clock = SimulationClock(threaded=False, time_source=ManualTime())

        def first():
            fired.append("first")
            clock.stop()

        clock.schedule("first", 1.0, first)
        clock.schedule("second", 1.0, lambda: fired.append("second"))
        clock.start()

        clock.run_pending(now=1.0)
        assert fired == ["first"]
        assert not clock.running


class TestValidation:

    @pytest.mark.parametrize("period", [0, -1.0])
    def test_non_positive_period_rejected(self, period):
        clock = SimulationClock(threaded=False)
        with pytest.raises(ValueError):
            clock.schedule("walk", period, lambda: None)

    def test_duplicate_name_rejected(self):
        clock = SimulationClock(threaded=False)
        clock.schedule("walk", 1.0, lambda: None)
        with pytest.raises(ValueError):
            clock.schedule("walk", 2.0, lambda: None)

    def test_cannot_schedule_while_running(self):
        clock, _ = make_clock(walk=1.0)
        clock.start()
        with pytest.raises(RuntimeError):
            clock.schedule("late", 1.0, lambda: None)
        clock.stop()

    def test_failing_callback_is_isolated(self, caplog):
        fired = []
        clock = SimulationClock(threaded=False, time_source=ManualTime())

        def broken():
            raise RuntimeError("boom")

        clock.schedule("broken", 1.0, broken)
        clock.schedule("healthy", 1.0, lambda: fired.append("healthy"))
        clock.start()

        assert clock.run_pending(now=1.0) == 2
        assert fired == ["healthy"]
        assert "Schedule 'broken' failed" in caplog.text


class TestThreaded:

    def test_ticks_on_background_thread(self):
        ticks = []
        clock = SimulationClock()
        clock.schedule("walk", 0.01, lambda: ticks.append(threading.current_thread().name))
        clock.start()
        try:
            deadline = time.monotonic() + 2.0
            while len(ticks) < 5 and time.monotonic() < deadline:
                time.sleep(0.01)
        finally:
            clock.stop()

        assert len(ticks) >= 5
        assert set(ticks) == {"sentinel-clock"}

    def test_nothing_fires_after_stop_returns(self):
        ticks = []
        clock = SimulationClock()
        clock.schedule("walk", 0.005, lambda: ticks.append(1))
        clock.start()
        time.sleep(0.05)
        clock.stop()

        count = len(ticks)
        time.sleep(0.05)
        assert len(ticks) == count
        assert not any(t.name == "sentinel-clock" for t in threading.enumerate())

    def test_stop_from_inside_callback(self):
        clock = SimulationClock()
        stopped = threading.Event()

        def tick():
            clock.stop()
            stopped.set()

        clock.schedule("walk", 0.01, tick)
        clock.start()

        assert stopped.wait(2.0)
        assert not clock.running
        clock.stop()

    def test_restart_from_inside_callback_keeps_one_worker(self):
        restarted = threading.Event()
        ticks = []
        clock = SimulationClock()

        def tick():
            ticks.append(threading.current_thread())
            if not restarted.is_set():
                clock.stop()
                clock.start()
                restarted.set()

        clock.schedule("walk", 0.01, tick)
        clock.start()
        try:
            assert restarted.wait(2.0)
            deadline = time.monotonic() + 2.0
            while time.monotonic() < deadline:
                workers = [t for t in threading.enumerate() if t.name == "sentinel-clock"]
                if len(workers) == 1 and len(ticks) >= 5:
                    break
                time.sleep(0.01)

            workers = [t for t in threading.enumerate() if t.name == "sentinel-clock"]
            assert len(workers) == 1
            # every tick after the restart runs on the new worker
            assert set(ticks[1:]) == set(workers)
        finally:
            clock.stop()

        assert not any(t.name == "sentinel-clock" for t in threading.enumerate())
