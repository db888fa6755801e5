"""Tests for the demo sandbox (runs headless on SDL's dummy video driver)."""
from __future__ import annotations

import itertools
import logging

import numpy as np
import pytest

pytest.importorskip("pygame")

from frim import demo  # noqa: E402
from frim.demo import drawable, equivalent_params, run_demo  # noqa: E402
from frim.smoothing import SCALAR_SMOOTHERS  # noqa: E402


@pytest.fixture
def headless(monkeypatch):
    """Dummy SDL drivers, mouse parked at the origin, 50 ms per clock reading."""
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    ticks = itertools.count()
    monkeypatch.setattr(demo.time, "perf_counter", lambda: next(ticks) * 0.05)
    monkeypatch.setattr(demo.pygame.mouse, "get_pos", lambda: (0, 0))


@pytest.mark.parametrize("mode, param", [("half-life", 0.2), ("factor", 0.05), ("lambda", 6.0)])
def test_equivalent_params_move_dots_together(mode, param):
    params = equivalent_params(mode, param)
    assert params[mode] == pytest.approx(param)
    values = [SCALAR_SMOOTHERS[m](0.0, 100.0, params[m], 1.0 / 60.0) for m in params]
    assert max(values) - min(values) == pytest.approx(0.0, abs=1e-9)


@pytest.mark.parametrize(
    "pos, expected",
    [
        ((10.0, 20.0, 0.0), True),
        ((-5.0, 1e5, 0.0), True),
        ((float("nan"), 0.0, 0.0), False),
        ((0.0, float("-inf"), 0.0), False),
        ((2e6, 0.0, 0.0), False),
        ((1.0, 1.0, float("nan")), True),
    ],
)
def test_drawable(pos, expected):
    assert drawable(np.array(pos)) is expected


def test_runs_a_few_frames(headless):
    run_demo(mode="half-life", param=0.25, debug=True, max_frames=5)


@pytest.mark.parametrize("mode, param", [("half-life", -0.1), ("half-life", -0.01), ("lambda", -60.0), ("factor", -0.5)])
def test_degenerate_param_does_not_crash(headless, caplog, mode, param):
    """Diverging or nan dots are put back on the mouse instead of reaching pygame."""
    with caplog.at_level(logging.DEBUG, logger="frim.demo"):
        run_demo(mode=mode, param=param, debug=False, max_frames=60)
    assert "reset to mouse" in caplog.text
