#!/usr/bin/env python
"""
Snapshot Renderer — Offline Dashboard Frame

Drives the engine from the host loop for a number of walk ticks
(no background thread, no sleeping) and writes the frame as SVG or PDF.

Usage:
    python scripts/render_snapshot.py --ticks 200 --out chart.svg
    python scripts/render_snapshot.py --ticks 600 --seed 7 --out snapshot.pdf
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import argparse
import logging

from sentinel.charts.svg import render_series_svg
from sentinel.generator.config import LATENCY_PERIOD_S, LOG_PERIOD_S, WALK_PERIOD_S
from sentinel.reports import generate_snapshot_pdf
from sentinel.simulation.engine import MonitoringEngine


logger = logging.getLogger("render_snapshot")


class _ManualTime:
    """Monotonic stand-in advanced by the host loop."""

    def __init__(self):
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


def run(ticks: int, seed: int = None) -> MonitoringEngine:
    """Advance a host-driven engine by `ticks` walk periods."""
    clock_time = _ManualTime()
    engine = MonitoringEngine(seed=seed, threaded=False, time_source=clock_time)
    engine.start()
    for _ in range(ticks):
        clock_time.now += WALK_PERIOD_S
        engine.clock.run_pending()
    engine.stop()
    return engine


def main():
    parser = argparse.ArgumentParser(description="Render an offline dashboard frame")
    parser.add_argument("--ticks", type=int, default=200, help="Walk ticks to simulate")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--out", type=str, default="chart.svg", help="Output file (.svg or .pdf)")
    parser.add_argument("--width", type=float, default=100, help="SVG width")
    parser.add_argument("--height", type=float, default=100, help="SVG height")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO)

    engine = run(args.ticks, args.seed)
    frame = engine.snapshot()
    simulated_s = args.ticks * WALK_PERIOD_S

    print("=" * 60)
    print("SENTINEL SNAPSHOT")
    print("=" * 60)
    print(f"Ticks:        {args.ticks} ({simulated_s:.1f}s simulated)")
    print(f"Current load: {frame.current_load}% ({frame.status_label})")
    print(f"Jitter runs:  {engine.clock.fire_count('latency')} (every {LATENCY_PERIOD_S:.0f}s)")
    print(f"Log entries:  {len(frame.logs)} of {engine.clock.fire_count('logs')} generated (every {LOG_PERIOD_S:.0f}s)")
    for service in frame.services:
        print(f"  {service.name:<14} {service.latency_ms:>4} ms")

    if args.out.lower().endswith(".pdf"):
        with open(args.out, "wb") as f:
            f.write(generate_snapshot_pdf(frame))
    else:
        with open(args.out, "w", encoding="utf-8") as f:
            f.write(render_series_svg(frame.points, args.width, args.height))

    print(f"\n✅ Wrote {args.out}")


if __name__ == "__main__":
    main()
