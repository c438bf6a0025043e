"""
Event Log — Sliding Window of Live Stream Entries

Keeps the last K log entries (default 6), oldest first. New entries are
either recorded explicitly or drawn from the message catalog with a
weighted severity (~10% warning, ~90% success).

Entry ids are the wall clock in milliseconds, bumped when two entries
land in the same millisecond so ids stay unique and increasing.
"""

import logging
import random
from collections import deque
from datetime import datetime
from threading import Lock
from typing import Callable, Deque, Optional, Sequence, Tuple

from sentinel.generator.config import (
    DEFAULT_LOG_CAPACITY,
    MESSAGE_CATALOG,
    WARNING_THRESHOLD,
)
from sentinel.generator.generator import RandomSource

from .schemas import LogEntry, Severity

logger = logging.getLogger(__name__)


# ============================================================================
# Helpers
# ============================================================================

def local_now() -> datetime:
    return datetime.now().astimezone()


def format_clock(moment: datetime) -> str:
    """Render a wall-clock time as zero-padded 24-hour HH:MM:SS."""
    return moment.strftime("%H:%M:%S")


def choose_severity(rng: RandomSource, threshold: float = WARNING_THRESHOLD) -> Severity:
    """Weighted severity draw: strictly above threshold is a warning."""
    return Severity.WARNING if rng.random() > threshold else Severity.SUCCESS


def choose_message(rng: RandomSource, catalog: Sequence[str] = MESSAGE_CATALOG) -> str:
    """Uniform draw from the message catalog."""
    index = min(int(rng.random() * len(catalog)), len(catalog) - 1)
    return catalog[index]


# ============================================================================
# Event Log
# ============================================================================

class EventLog:
    """
    Thread-safe fixed-capacity window of LogEntry.

    Usage:
        log = EventLog(capacity=6)
        log.emit()                                   # random catalog entry
        log.record("Cache invalidated", Severity.SUCCESS)
        entries = log.snapshot()
    """

    def __init__(
        self,
        capacity: int = DEFAULT_LOG_CAPACITY,
        rng: Optional[RandomSource] = None,
        clock: Callable[[], datetime] = local_now,
        catalog: Sequence[str] = MESSAGE_CATALOG,
    ):
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        if not catalog:
            raise ValueError("message catalog must not be empty")

        self._capacity = capacity
        self._rng: RandomSource = rng if rng is not None else random.Random()
        self._clock = clock
        self._catalog = tuple(catalog)
        self._entries: Deque[LogEntry] = deque(maxlen=capacity)
        self._last_id = -1
        self._lock = Lock()

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def record(self, message: str, severity: Severity) -> LogEntry:
        """
        Append an entry, evicting the oldest once the window is full.

        Returns:
            The stored LogEntry
        """
        moment = self._clock()
        with self._lock:
            entry_id = max(int(moment.timestamp() * 1000), self._last_id + 1)
            self._last_id = entry_id
            entry = LogEntry(
                id=entry_id,
                timestamp=moment,
                time=format_clock(moment),
                message=message,
                severity=Severity(severity),
            )
            self._entries.append(entry)

        if entry.severity == Severity.WARNING:
            logger.warning(f"[EventLog] {entry.time} {entry.message}")
        else:
            logger.debug(f"[EventLog] {entry.time} {entry.message}")
        return entry

    def emit(self) -> LogEntry:
        """Record a random catalog message with a weighted severity."""
        message = choose_message(self._rng, self._catalog)
        severity = choose_severity(self._rng)
        return self.record(message, severity)

    def snapshot(self) -> Tuple[LogEntry, ...]:
        """Immutable copy of the window, oldest first."""
        with self._lock:
            return tuple(self._entries)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
