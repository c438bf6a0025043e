"""
Series Buffer — Fixed-Size Sliding Window of Samples

The buffer is created full (N copies of the seed value) and every
append evicts exactly one sample, so its length never changes.
Readers get an independent tuple, never the live deque.
"""

from collections import deque
from threading import Lock
from typing import Deque, Iterable, Optional, Tuple

from sentinel.generator.config import DEFAULT_POINTS_COUNT, DEFAULT_SEED_VALUE
from sentinel.generator.generator import display_value


class SeriesBuffer:
    """
    Thread-safe fixed-capacity window of float samples, oldest first.

    Usage:
        buffer = SeriesBuffer(capacity=40, seed_value=40.0)
        buffer.append(41.7)
        points = buffer.snapshot()
    """

    def __init__(
        self,
        capacity: int = DEFAULT_POINTS_COUNT,
        seed_value: float = DEFAULT_SEED_VALUE,
        initial: Optional[Iterable[float]] = None,
    ):
        """
        Args:
            capacity: Fixed window size N
            seed_value: Value used to pre-fill the window
            initial: Optional explicit contents (must hold exactly N samples)
        """
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")

        self._capacity = capacity
        if initial is None:
            samples = [float(seed_value)] * capacity
        else:
            samples = [float(v) for v in initial]
            if len(samples) != capacity:
                raise ValueError(
                    f"initial contents hold {len(samples)} samples, expected {capacity}"
                )
        self._buffer: Deque[float] = deque(samples, maxlen=capacity)
        self._lock = Lock()

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        with self._lock:
            return len(self._buffer)

    def append(self, sample: float) -> None:
        """Append a sample; the deque drops the oldest in the same step."""
        with self._lock:
            self._buffer.append(float(sample))

    @property
    def latest(self) -> float:
        with self._lock:
            return self._buffer[-1]

    @property
    def current_load(self) -> int:
        """Rounded display value of the newest sample."""
        return display_value(self.latest)

    def snapshot(self) -> Tuple[float, ...]:
        """Independent, immutable copy of the window (oldest first)."""
        with self._lock:
            return tuple(self._buffer)
