"""
Simulation Module — Clock and engine composition

Public API:
- SimulationClock: Periodic schedules with start/stop lifecycle
- MonitoringEngine: Walk + latency + log schedules on one clock
- DashboardSnapshot: Render-ready frame
"""

from .clock import SimulationClock
from .engine import MonitoringEngine
from .schemas import DashboardSnapshot

__all__ = ["SimulationClock", "MonitoringEngine", "DashboardSnapshot"]
