"""
Series Module — Sliding window for the simulated metric stream.
"""

from .buffer import SeriesBuffer

__all__ = ["SeriesBuffer"]
