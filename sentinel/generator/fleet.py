"""
Service Fleet — Per-Service Latency Jitter

Holds the monitored ServiceNode collection and nudges every latency by
a fixed +/-2ms on each jitter tick, never below the floor.
"""

import logging
import random
from threading import Lock
from typing import Iterable, List, Optional, Tuple

from .config import DEFAULT_SERVICES, LATENCY_FLOOR_MS, LATENCY_STEP_MS, ServiceSeed
from .generator import RandomSource
from .schemas import ServiceNode, ServiceStatus

logger = logging.getLogger(__name__)


def jitter_latency(
    latency_ms: int,
    rng: RandomSource,
    step: int = LATENCY_STEP_MS,
    floor: int = LATENCY_FLOOR_MS,
) -> int:
    """Coin-flip a +/-step change and keep the result at or above floor."""
    change = step if rng.random() > 0.5 else -step
    return max(floor, latency_ms + change)


class ServiceFleet:
    """Thread-safe collection of ServiceNode with a jitter operation."""

    def __init__(
        self,
        services: Iterable[ServiceSeed] = DEFAULT_SERVICES,
        rng: Optional[RandomSource] = None,
    ):
        self._rng: RandomSource = rng if rng is not None else random.Random()
        self._nodes: List[ServiceNode] = [
            ServiceNode(
                id=s.id,
                name=s.name,
                latency_ms=s.latency_ms,
                status=ServiceStatus.OPERATIONAL,
            )
            for s in services
        ]
        self._lock = Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._nodes)

    def jitter(self) -> None:
        """Apply one jitter step to every service."""
        with self._lock:
            self._nodes = [
                node.model_copy(
                    update={"latency_ms": jitter_latency(node.latency_ms, self._rng)}
                )
                for node in self._nodes
            ]
            logger.debug(
                "[ServiceFleet] latencies: "
                + ", ".join(f"{n.name}={n.latency_ms}ms" for n in self._nodes)
            )

    def snapshot(self) -> Tuple[ServiceNode, ...]:
        """Immutable view of the current nodes."""
        with self._lock:
            return tuple(self._nodes)
