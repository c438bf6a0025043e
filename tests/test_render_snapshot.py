"""
Snapshot Script Tests

Tests verify:
- The printed summary reports what the clock actually fired
- SVG and PDF output files are written
"""

import importlib.util
import sys
from pathlib import Path

import pytest


SCRIPT_PATH = Path(__file__).resolve().parent.parent / "scripts" / "render_snapshot.py"


@pytest.fixture(scope="module")
def render_snapshot():
    spec = importlib.util.spec_from_file_location("render_snapshot", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def run_main(module, monkeypatch, *argv):
    monkeypatch.setattr(sys, "argv", ["render_snapshot.py", *argv])
    module.main()


class TestSummary:

    @pytest.mark.parametrize("ticks", [19, 20, 21, 25])
    def test_jitter_runs_match_clock(self, render_snapshot, monkeypatch, capsys, tmp_path, ticks):
        engine = render_snapshot.run(ticks, seed=3)
        run_main(render_snapshot, monkeypatch, "--ticks", str(ticks), "--seed", "3",
                 "--out", str(tmp_path / "chart.svg"))

        out = capsys.readouterr().out
        assert f"Jitter runs:  {engine.clock.fire_count('latency')} " in out
        assert f"of {engine.clock.fire_count('logs')} generated" in out

    def test_counts_after_two_and_a_half_seconds(self, render_snapshot, monkeypatch, capsys, tmp_path):
        run_main(render_snapshot, monkeypatch, "--ticks", "25", "--out", str(tmp_path / "chart.svg"))

        out = capsys.readouterr().out
        assert "Jitter runs:  1 " in out
        assert "Log entries:  0 of 0 generated" in out


class TestOutputFiles:

    def test_writes_svg(self, render_snapshot, monkeypatch, tmp_path):
        target = tmp_path / "chart.svg"
        run_main(render_snapshot, monkeypatch, "--ticks", "10", "--out", str(target))

        assert target.read_text(encoding="utf-8").startswith("<svg")

    def test_writes_pdf(self, render_snapshot, monkeypatch, tmp_path):
        target = tmp_path / "snapshot.pdf"
        run_main(render_snapshot, monkeypatch, "--ticks", "40", "--out", str(target))

        assert target.read_bytes()[:5] == b"%PDF-"
