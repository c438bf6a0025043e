"""
Sentinel — synthetic live monitoring engine.

Bounded random-walk load, latency jitter and a log stream, rendered as
a smoothed curve.
"""

__version__ = "1.0.0"
