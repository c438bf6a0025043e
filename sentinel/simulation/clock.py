"""
Simulation Clock — Independent Periodic Schedules

Owns the walk / latency / log cadences as explicit, cancellable
schedules instead of ambient timers.

Two ways to drive it:
- threaded=True: one daemon thread sleeps on a threading.Event until the
  next schedule is due, then fires it. All ticks share that one thread,
  so two ticks never run at the same time.
- threaded=False: the host loop calls run_pending() itself.

Guarantees:
- stop() is idempotent and safe before start().
- No callback starts after stop() returns. Ticks hold the clock lock,
  so stop() waits for an in-flight tick to finish.
- Late schedules fire once (no burst catch-up). The next due time is
  due + period, or now + period when that has already passed.
"""

import logging
import threading
import time
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

logger = logging.getLogger(__name__)


@dataclass
class _Schedule:
    name: str
    period: float
    callback: Callable[[], None]
    next_due: float = 0.0
    fire_count: int = 0


class SimulationClock:
    """
    Periodic scheduler with a start/stop lifecycle.

    Usage:
        clock = SimulationClock()
        clock.schedule("walk", 0.1, engine.tick_walk)
        clock.start()
        ...
        clock.stop()
    """

    def __init__(
        self,
        threaded: bool = True,
        time_source: Callable[[], float] = time.monotonic,
    ):
        self._threaded = threaded
        self._time = time_source
        self._schedules: Dict[str, _Schedule] = {}
        self._lock = threading.RLock()
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None
        self._running = False

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def schedule(self, name: str, period_s: float, callback: Callable[[], None]) -> None:
        """
        Register a periodic callback.

        Raises:
            ValueError: Non-positive period or duplicate name
            RuntimeError: Clock is running
        """
        if period_s <= 0:
            raise ValueError(f"period for '{name}' must be positive, got {period_s}")
        with self._lock:
            if self._running:
                raise RuntimeError("Cannot add schedules while the clock is running")
            if name in self._schedules:
                raise ValueError(f"Schedule '{name}' already registered")
            self._schedules[name] = _Schedule(name=name, period=period_s, callback=callback)

    @property
    def running(self) -> bool:
        with self._lock:
            return self._running

    @property
    def schedule_names(self) -> List[str]:
        with self._lock:
            return list(self._schedules)

    def fire_count(self, name: str) -> int:
        with self._lock:
            return self._schedules[name].fire_count

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self) -> None:
        """Arm every schedule; each first fires one period from now."""
        with self._lock:
            if self._running:
                return
            now = self._time()
            for s in self._schedules.values():
                s.next_due = now + s.period
            # Fresh event per run: a worker from an earlier run only sees its own
            self._stop_event = threading.Event()
            self._running = True

            if self._threaded:
                self._thread = threading.Thread(
                    target=self._run,
                    args=(self._stop_event,),
                    name="sentinel-clock",
                    daemon=True,
                )
                self._thread.start()

        logger.info(
            f"[SimulationClock] Started {len(self._schedules)} schedule(s): "
            + ", ".join(f"{s.name}={s.period}s" for s in self._schedules.values())
        )

    def stop(self) -> None:
        """Disarm every schedule. Safe to call repeatedly."""
        with self._lock:
            if not self._running:
                return
            self._running = False
            self._stop_event.set()
            thread, self._thread = self._thread, None

        # Called from inside a tick: the loop exits on its own
        if thread is not None and thread is not threading.current_thread():
            thread.join()

        logger.info("[SimulationClock] Stopped.")

    # ------------------------------------------------------------------
    # Ticking
    # ------------------------------------------------------------------

    def run_pending(self, now: Optional[float] = None) -> int:
        """
        Fire every schedule that is due at `now`, earliest first.

        Returns:
            Number of callbacks fired
        """
        fired = 0
        with self._lock:
            if not self._running:
                return 0
            current = self._time() if now is None else now
            due = sorted(
                (s for s in self._schedules.values() if s.next_due <= current),
                key=lambda s: s.next_due,
            )
            for s in due:
                # A callback may have stopped the clock
                if not self._running:
                    break
                s.next_due += s.period
                if s.next_due <= current:
                    s.next_due = current + s.period
                s.fire_count += 1
                fired += 1
                try:
                    s.callback()
                except Exception:
                    logger.exception(f"[SimulationClock] Schedule '{s.name}' failed")
        return fired

    def seconds_until_due(self) -> Optional[float]:
        """Delay until the next schedule is due (None when nothing is armed)."""
        with self._lock:
            if not self._running or not self._schedules:
                return None
            next_due = min(s.next_due for s in self._schedules.values())
            return max(0.0, next_due - self._time())

    def _run(self, stop_event: threading.Event) -> None:
        logger.debug("[SimulationClock] Worker thread running")
        while not stop_event.is_set():
            self.run_pending()
            stop_event.wait(self.seconds_until_due())
        logger.debug("[SimulationClock] Worker thread exiting")
