"""
Generator Module — Synthetic Time-Series Engine

Public API:
- RandomWalkGenerator: Bounded random walk with gravity
- advance: Single-tick walk function
- display_value: Round-half-up display figure
- ServiceFleet / jitter_latency: Per-service latency jitter
- ServiceNode / ServiceStatus: Service schema
- WalkBounds: Clamp and gravity rules
"""

from .config import WalkBounds
from .fleet import ServiceFleet, jitter_latency
from .generator import RandomSource, RandomWalkGenerator, advance, display_value
from .schemas import ServiceNode, ServiceStatus

__all__ = [
    "RandomWalkGenerator",
    "RandomSource",
    "advance",
    "display_value",
    "ServiceFleet",
    "jitter_latency",
    "ServiceNode",
    "ServiceStatus",
    "WalkBounds",
]
