"""
Events Module — Live stream log window for the dashboard.
"""

from .log import EventLog, choose_message, choose_severity, format_clock
from .schemas import LogEntry, Severity

__all__ = [
    "EventLog",
    "LogEntry",
    "Severity",
    "choose_message",
    "choose_severity",
    "format_clock",
]
