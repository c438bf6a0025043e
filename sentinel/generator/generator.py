"""
Random Walk Generator — Bounded Cluster Load Simulator

Advances the simulated metric by one tick: a uniform step, a one-sided
"gravity" correction once a soft threshold is crossed, and a hard clamp.

The gravity is a fixed pull, not proportional to the distance past the
threshold, so the walk can linger just outside 20/80 before it turns.

CRITICAL: This is a SIMULATOR. It does NOT read real cluster metrics.
"""

import logging
import math
import random
from typing import Optional, Protocol

from .config import (
    CENTER_HIGH,
    CENTER_LOW,
    DEFAULT_BOUNDS,
    GRAVITY_PULL,
    STEP_MAGNITUDE,
    WalkBounds,
)

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    """Anything that yields floats in [0, 1); random.Random satisfies it."""

    def random(self) -> float:
        ...


def advance(
    previous: float,
    low_bound: float,
    high_bound: float,
    center_low: float = CENTER_LOW,
    center_high: float = CENTER_HIGH,
    rng: Optional[RandomSource] = None,
    step_magnitude: float = STEP_MAGNITUDE,
    pull: float = GRAVITY_PULL,
) -> float:
    """
    Advance one sample by a single tick.

    Args:
        previous: Last buffered sample
        low_bound, high_bound: Hard clamp applied to the result
        center_low, center_high: Soft thresholds that trigger gravity
        rng: Injectable random source (module-level random if None)
        step_magnitude: Full width of the uniform step
        pull: Gravity correction applied past a soft threshold

    Returns:
        Next sample, full precision, always within [low_bound, high_bound]
    """
    source = rng if rng is not None else random
    delta = (source.random() - 0.5) * step_magnitude

    # "Gravity" - pulls the walk back toward the center
    if previous > center_high:
        delta -= pull
    if previous < center_low:
        delta += pull

    return max(low_bound, min(high_bound, previous + delta))


def display_value(sample: float) -> int:
    """Round half up for the on-screen load figure (42.5 -> 43)."""
    return int(math.floor(sample + 0.5))


class RandomWalkGenerator:
    """
    Stateless-per-call walk generator bound to one set of rules.

    The generator holds bounds and a random source but no sample state;
    the caller passes the previous sample on every call.

    Usage:
        walk = RandomWalkGenerator(seed=42)
        value = walk.advance(40.0)
    """

    def __init__(
        self,
        bounds: WalkBounds = DEFAULT_BOUNDS,
        rng: Optional[RandomSource] = None,
        seed: Optional[int] = None,
    ):
        """
        Initialize the generator.

        Args:
            bounds: Clamp and gravity rules
            rng: Random source; takes precedence over seed
            seed: Seed for a private random.Random (None for random)
        """
        self.bounds = bounds
        self.seed = seed
        self._rng: RandomSource = rng if rng is not None else random.Random(seed)

    @property
    def rng(self) -> RandomSource:
        return self._rng

    def advance(self, previous: float) -> float:
        """Return the next sample after `previous`."""
        b = self.bounds
        value = advance(
            previous,
            b.low,
            b.high,
            b.center_low,
            b.center_high,
            rng=self._rng,
            step_magnitude=b.step_magnitude,
            pull=b.pull,
        )
        logger.debug(f"[RandomWalk] {previous:.3f} -> {value:.3f}")
        return value

    def reset(self, seed: Optional[int] = None) -> None:
        """
        Re-seed the private random source.

        Args:
            seed: New random seed (uses original if None)
        """
        if seed is not None:
            self.seed = seed
        self._rng = random.Random(self.seed)
