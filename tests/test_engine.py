"""
Monitoring Engine Tests

Tests verify:
- Initial frame (seeded window, default services, empty log)
- Each schedule mutates only its own collection, on its own cadence
- start() builds fresh state; stop() freezes it
- Stroke/area geometry is derived from the live window
- Settings wiring
"""

import random
import threading
import time
from datetime import datetime

import pytest

from sentinel.charts import to_y
from sentinel.config import Settings
from sentinel.generator import WalkBounds
from sentinel.simulation import DashboardSnapshot, MonitoringEngine


class FixedRandom:
    def __init__(self, *values: float):
        self._values = values
        self._index = 0

    def random(self) -> float:
        value = self._values[self._index % len(self._values)]
        self._index += 1
        return value


class ManualTime:
    def __init__(self):
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


def make_engine(rng=None, seed=42, **kwargs) -> tuple:
    """Host-driven engine with whole-second periods."""
    now = ManualTime()
    engine = MonitoringEngine(
        walk_period_s=1.0,
        latency_period_s=20.0,
        log_period_s=30.0,
        rng=rng,
        seed=seed,
        threaded=False,
        time_source=now,
        wall_clock=lambda: datetime(2026, 1, 11, 12, 0, 0),
        **kwargs,
    )
    return engine, now


def advance_to(engine: MonitoringEngine, now: ManualTime, until: int) -> None:
    while now.now < until:
        now.now += 1
        engine.clock.run_pending()


class TestInitialFrame:

    def test_seeded_state_before_start(self):
        engine, _ = make_engine()
        frame = engine.snapshot()

        assert isinstance(frame, DashboardSnapshot)
        assert frame.points == [40.0] * 40
        assert frame.current_load == 40
        assert frame.status_label == "Normal"
        assert [s.latency_ms for s in frame.services] == [24, 45, 12]
        assert frame.logs == []
        assert frame.running is False

    def test_points_count_must_allow_a_curve(self):
        with pytest.raises(ValueError):
            MonitoringEngine(points_count=1, threaded=False)

    @pytest.mark.parametrize("seed_value", [-3.0, 130.0, float("nan")])
    def test_seed_value_outside_scale_rejected(self, seed_value):
        with pytest.raises(ValueError):
            MonitoringEngine(seed_value=seed_value, threaded=False)

    @pytest.mark.parametrize("low,high", [(-5.0, 90.0), (0.0, 150.0)])
    def test_bounds_outside_scale_rejected(self, low, high):
        with pytest.raises(ValueError):
            MonitoringEngine(bounds=WalkBounds(low=low, high=high), threaded=False)

    def test_full_scale_bounds_accepted(self):
        engine = MonitoringEngine(
            seed_value=100.0,
            bounds=WalkBounds(low=0.0, high=100.0, center_low=0.0, center_high=100.0),
            threaded=False,
        )
        assert engine.snapshot().current_load == 100


class TestTicks:

    def test_centered_draw_keeps_window(self):
        engine, _ = make_engine(rng=FixedRandom(0.5))
        assert engine.tick_walk() == 40.0
        assert engine.points() == tuple([40.0] * 40)

    def test_walk_tick_appends_and_evicts(self):
        engine, _ = make_engine(rng=FixedRandom(1.0))
        engine.tick_walk()
        engine.tick_walk()

        points = engine.points()
        assert len(points) == 40
        assert points[-2:] == (45.0, 50.0)
        assert engine.current_load == 50

    def test_schedules_run_on_their_cadence(self):
        engine, now = make_engine(seed=7)
        engine.start()
        advance_to(engine, now, 30)
        frame = engine.snapshot()

        assert engine.clock.fire_count("walk") == 30
        assert engine.clock.fire_count("latency") == 1
        assert engine.clock.fire_count("logs") == 1
        assert len(frame.points) == 40
        assert all(10.0 <= p <= 90.0 for p in frame.points)
        # one jitter: every latency moved by exactly 2ms
        assert [abs(s.latency_ms - seed) for s, seed in zip(frame.services, [24, 45, 12])] == [2, 2, 2]
        assert len(frame.logs) == 1
        assert frame.logs[0].time == "12:00:00"

    def test_log_window_caps_at_capacity(self):
        engine, now = make_engine(log_capacity=6)
        engine.start()
        advance_to(engine, now, 30 * 10)

        assert len(engine.snapshot().logs) == 6

    def test_status_label_is_cosmetic(self):
        engine, _ = make_engine()
        assert engine.status_label(80) == "Normal"
        assert engine.status_label(81) == "Elevated"


class TestLifecycle:

    def test_stop_freezes_state(self):
        engine, now = make_engine()
        engine.start()
        advance_to(engine, now, 40)
        engine.stop()
        frozen = engine.snapshot()

        advance_to(engine, now, 100)
        after = engine.snapshot()

        assert after.points == frozen.points
        assert after.logs == frozen.logs
        assert after.services == frozen.services
        assert after.running is False

    def test_restart_reseeds(self):
        engine, now = make_engine()
        engine.start()
        advance_to(engine, now, 40)
        engine.stop()

        engine.start()
        frame = engine.snapshot()
        assert frame.points == [40.0] * 40
        assert frame.logs == []
        assert frame.running is True
        engine.stop()

    def test_start_while_running_keeps_state(self):
        engine, now = make_engine(rng=FixedRandom(1.0))
        engine.start()
        advance_to(engine, now, 1)
        engine.start()

        assert engine.points()[-1] == 45.0
        engine.stop()

    def test_stop_is_idempotent(self):
        engine, _ = make_engine()
        engine.stop()
        engine.start()
        engine.stop()
        engine.stop()
        assert not engine.running

    def test_context_manager(self):
        engine, _ = make_engine()
        with engine as running:
            assert running.running
        assert not engine.running


class TestGeometry:

    def test_stroke_ends_on_latest_sample(self):
        engine, _ = make_engine(rng=random.Random(5))
        for _ in range(25):
            engine.tick_walk()

        stroke = engine.stroke_path(100, 100)
        assert stroke.end_point == (100, to_y(engine.points()[-1], 100))

    def test_area_is_closed(self):
        engine, _ = make_engine()
        assert engine.area_path().to_svg().endswith("L 100 100 L 0 100 Z")

    def test_flat_window_is_flat_line(self):
        engine, _ = make_engine()
        assert engine.stroke_path(100, 100).to_svg().startswith("M 0 60 L")


class TestSettings:

    def test_from_settings(self):
        config = Settings(POINTS_COUNT=10, SEED_VALUE=55.0, LOG_CAPACITY=3, WALK_PERIOD_MS=250)
        engine = MonitoringEngine.from_settings(config, threaded=False, seed=1)

        frame = engine.snapshot()
        assert frame.points == [55.0] * 10
        assert engine.log_capacity == 3
        assert engine.clock.schedule_names == ["walk", "latency", "logs"]


class TestThreadedEngine:

    def test_readers_always_see_full_window(self):
        engine = MonitoringEngine(walk_period_s=0.001, seed=3)
        errors = []

        def reader():
            for _ in range(300):
                frame = engine.snapshot()
                if len(frame.points) != 40:
                    errors.append(len(frame.points))

        with engine:
            threads = [threading.Thread(target=reader) for _ in range(3)]
            for t in threads:
                t.start()
            for t in threads:
                t.join()
            time.sleep(0.02)

        assert errors == []
        assert engine.clock.fire_count("walk") > 0
