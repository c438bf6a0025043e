"""
Generator Configuration — Constants and Patterns

This module defines all configuration constants for the synthetic
time-series engine: walk bounds, the "gravity" pull, latency jitter,
and the log message catalog.

All values are on the logical 0-100 load scale unless stated otherwise.
"""

from dataclasses import dataclass
from typing import Tuple


# =============================================================================
# RANDOM WALK (Cluster Load)
# =============================================================================

# Hard floor / ceiling for every buffered sample
LOAD_LOW: float = 10.0
LOAD_HIGH: float = 90.0

# Soft thresholds where gravity kicks in
CENTER_LOW: float = 20.0
CENTER_HIGH: float = 80.0

# Full width of the uniform step: delta is drawn from [-5, +5]
STEP_MAGNITUDE: float = 10.0

# Fixed correction applied once a soft threshold is crossed
GRAVITY_PULL: float = 5.0

# Logical scale used by the path smoother (0 = bottom, 100 = top)
SCALE_MAX: float = 100.0


@dataclass(frozen=True)
class WalkBounds:
    """
    Bounds and reversion rules for one random walk.

    low/high are hard clamps. center_low/center_high are the soft
    thresholds that trigger the one-sided gravity correction.
    """
    low: float = LOAD_LOW
    high: float = LOAD_HIGH
    center_low: float = CENTER_LOW
    center_high: float = CENTER_HIGH
    step_magnitude: float = STEP_MAGNITUDE
    pull: float = GRAVITY_PULL

    def __post_init__(self):
        if self.low > self.high:
            raise ValueError(f"low bound {self.low} exceeds high bound {self.high}")
        if self.center_low > self.center_high:
            raise ValueError(
                f"center_low {self.center_low} exceeds center_high {self.center_high}"
            )


DEFAULT_BOUNDS = WalkBounds()


# =============================================================================
# SERIES DEFAULTS
# =============================================================================

DEFAULT_POINTS_COUNT: int = 40    # Fewer points = smoother curve
DEFAULT_SEED_VALUE: float = 40.0  # Start centered at 40% of scale


# =============================================================================
# LATENCY JITTER
# =============================================================================

LATENCY_STEP_MS: int = 2     # Each jitter moves latency by exactly +/-2ms
LATENCY_FLOOR_MS: int = 5    # Latency never drops below 5ms


@dataclass(frozen=True)
class ServiceSeed:
    """Initial state for one monitored service."""
    id: str
    name: str
    latency_ms: int


DEFAULT_SERVICES: Tuple[ServiceSeed, ...] = (
    ServiceSeed(id="1", name="API Gateway", latency_ms=24),
    ServiceSeed(id="2", name="Auth Cluster", latency_ms=45),
    ServiceSeed(id="3", name="Edge Nodes", latency_ms=12),
)


# =============================================================================
# EVENT LOG
# =============================================================================

DEFAULT_LOG_CAPACITY: int = 6  # Last 5 plus the new one

# Draws strictly above this threshold produce a warning (~10%)
WARNING_THRESHOLD: float = 0.9

MESSAGE_CATALOG: Tuple[str, ...] = (
    "Packet handshake acknowledged",
    "Cache invalidated",
    "Load balancer optimized",
    "Incoming webhook verified",
    "Database shard sync",
    "Health check passed",
)


# =============================================================================
# SCHEDULE DEFAULTS (seconds)
# =============================================================================

WALK_PERIOD_S: float = 0.1      # 10 updates per second
LATENCY_PERIOD_S: float = 2.0
LOG_PERIOD_S: float = 3.0
