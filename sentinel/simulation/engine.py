"""
Monitoring Engine — Composition of Walk, Buffers and Clock

Wires the synthetic time-series engine onto one SimulationClock:

    walk     (100ms)  RandomWalkGenerator -> SeriesBuffer
    latency  (2s)     ServiceFleet.jitter
    logs     (3s)     EventLog.emit

Each tick reads, computes and writes under the engine lock, so a
render (which copies under the same lock) never sees a half-applied
tick. start() builds fresh collections; stop() freezes the last state
so it stays readable until the next start().
"""

import logging
import random
import time
from datetime import datetime, timezone
from threading import Lock
from typing import Callable, Iterable, Optional

from sentinel.charts.smoothing import CurveGeometry, smooth, smooth_area
from sentinel.events.log import EventLog, local_now
from sentinel.generator.config import (
    DEFAULT_BOUNDS,
    DEFAULT_LOG_CAPACITY,
    DEFAULT_POINTS_COUNT,
    DEFAULT_SEED_VALUE,
    DEFAULT_SERVICES,
    LATENCY_PERIOD_S,
    LOG_PERIOD_S,
    SCALE_MAX,
    WALK_PERIOD_S,
    ServiceSeed,
    WalkBounds,
)
from sentinel.generator.fleet import ServiceFleet
from sentinel.generator.generator import RandomSource, RandomWalkGenerator
from sentinel.series.buffer import SeriesBuffer

from .clock import SimulationClock
from .schemas import DashboardSnapshot

logger = logging.getLogger(__name__)


STATUS_NORMAL = "Normal"
STATUS_ELEVATED = "Elevated"


class MonitoringEngine:
    """
    Live dashboard engine.

    Usage:
        engine = MonitoringEngine(seed=7)
        with engine:
            time.sleep(1)
            frame = engine.snapshot()
            d = engine.stroke_path(100, 100).to_svg()
    """

    def __init__(
        self,
        points_count: int = DEFAULT_POINTS_COUNT,
        seed_value: float = DEFAULT_SEED_VALUE,
        log_capacity: int = DEFAULT_LOG_CAPACITY,
        walk_period_s: float = WALK_PERIOD_S,
        latency_period_s: float = LATENCY_PERIOD_S,
        log_period_s: float = LOG_PERIOD_S,
        bounds: WalkBounds = DEFAULT_BOUNDS,
        services: Iterable[ServiceSeed] = DEFAULT_SERVICES,
        rng: Optional[RandomSource] = None,
        seed: Optional[int] = None,
        threaded: bool = True,
        time_source: Callable[[], float] = time.monotonic,
        wall_clock: Callable[[], datetime] = local_now,
    ):
        """
        Args:
            points_count: SeriesBuffer capacity N
            seed_value: Pre-fill value for the buffer
            log_capacity: EventLog capacity K
            walk_period_s, latency_period_s, log_period_s: Schedule periods
            bounds: Walk clamp and gravity rules
            services: Initial service fleet
            rng: Shared random source (takes precedence over seed)
            seed: Seed for a private random.Random
            threaded: Run the clock on its own thread (False = host-driven)
            time_source: Monotonic clock for scheduling
            wall_clock: Wall clock for log timestamps
        """
        if points_count < 2:
            raise ValueError(f"points_count must be at least 2, got {points_count}")
        if not 0.0 <= seed_value <= SCALE_MAX:
            raise ValueError(f"seed_value must be within [0, {SCALE_MAX:g}], got {seed_value}")
        if bounds.low < 0.0 or bounds.high > SCALE_MAX:
            raise ValueError(
                f"walk bounds must lie within [0, {SCALE_MAX:g}], got [{bounds.low}, {bounds.high}]"
            )

        self.points_count = points_count
        self.seed_value = seed_value
        self.log_capacity = log_capacity
        self.bounds = bounds
        self._services = tuple(services)
        self._wall_clock = wall_clock
        self._rng: RandomSource = rng if rng is not None else random.Random(seed)
        self._walk = RandomWalkGenerator(bounds=bounds, rng=self._rng)
        self._lock = Lock()

        self._clock = SimulationClock(threaded=threaded, time_source=time_source)
        self._clock.schedule("walk", walk_period_s, self.tick_walk)
        self._clock.schedule("latency", latency_period_s, self.tick_latency)
        self._clock.schedule("logs", log_period_s, self.tick_log)

        self._reset_state()

    @classmethod
    def from_settings(cls, settings, **overrides) -> "MonitoringEngine":
        """Build an engine from a sentinel.config.Settings instance."""
        params = dict(
            points_count=settings.POINTS_COUNT,
            seed_value=settings.SEED_VALUE,
            log_capacity=settings.LOG_CAPACITY,
            walk_period_s=settings.WALK_PERIOD_MS / 1000.0,
            latency_period_s=settings.LATENCY_PERIOD_MS / 1000.0,
            log_period_s=settings.LOG_PERIOD_MS / 1000.0,
        )
        params.update(overrides)
        return cls(**params)

    def _reset_state(self) -> None:
        buffer = SeriesBuffer(capacity=self.points_count, seed_value=self.seed_value)
        log = EventLog(capacity=self.log_capacity, rng=self._rng, clock=self._wall_clock)
        fleet = ServiceFleet(self._services, rng=self._rng)
        with self._lock:
            self._buffer = buffer
            self._log = log
            self._fleet = fleet

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    @property
    def clock(self) -> SimulationClock:
        return self._clock

    @property
    def running(self) -> bool:
        return self._clock.running

    def start(self) -> None:
        """Create fresh collections and arm all schedules (no-op if running)."""
        if self._clock.running:
            return
        self._reset_state()
        self._clock.start()
        logger.info(
            f"[MonitoringEngine] Started: {self.points_count} points, "
            f"log window {self.log_capacity}, {len(self._services)} services"
        )

    def stop(self) -> None:
        """Disarm all schedules; the last state stays readable."""
        was_running = self._clock.running
        self._clock.stop()
        if was_running:
            logger.info(f"[MonitoringEngine] Stopped at load {self.current_load}%")

    def __enter__(self) -> "MonitoringEngine":
        self.start()
        return self

    def __exit__(self, *exc_info) -> None:
        self.stop()

    # ------------------------------------------------------------------
    # Ticks
    # ------------------------------------------------------------------

    def tick_walk(self) -> float:
        """Advance the walk by one step and push it into the window."""
        with self._lock:
            value = self._walk.advance(self._buffer.latest)
            self._buffer.append(value)
        return value

    def tick_latency(self) -> None:
        with self._lock:
            self._fleet.jitter()

    def tick_log(self):
        with self._lock:
            return self._log.emit()

    # ------------------------------------------------------------------
    # Reads (copy-on-read)
    # ------------------------------------------------------------------

    @property
    def current_load(self) -> int:
        with self._lock:
            return self._buffer.current_load

    def points(self):
        with self._lock:
            return self._buffer.snapshot()

    def status_label(self, load: int) -> str:
        return STATUS_ELEVATED if load > self.bounds.center_high else STATUS_NORMAL

    def snapshot(self) -> DashboardSnapshot:
        """Consistent frame of points, services and logs."""
        with self._lock:
            points = self._buffer.snapshot()
            load = self._buffer.current_load
            services = self._fleet.snapshot()
            logs = self._log.snapshot()

        return DashboardSnapshot(
            current_load=load,
            points=list(points),
            services=list(services),
            logs=list(logs),
            status_label=self.status_label(load),
            running=self.running,
            taken_at=datetime.now(timezone.utc),
        )

    def stroke_path(self, width: float = 100, height: float = 100) -> CurveGeometry:
        return smooth(self.points(), width, height)

    def area_path(self, width: float = 100, height: float = 100) -> CurveGeometry:
        return smooth_area(self.points(), width, height)
