"""Tests for the interpolation primitives."""
from __future__ import annotations

import math
import warnings

import numpy as np
import pytest

from frim.util.math import as_vec3, lerp, lerp_vec3, vec3, wrap_pi


class TestLerp:
    """Tests for scalar lerp."""

    def test_endpoints_and_midpoint(self):
        assert lerp(10.0, 20.0, 0.0) == 10.0
        assert lerp(10.0, 20.0, 1.0) == 20.0
        assert lerp(10.0, 20.0, 0.5) == 15.0

    def test_is_unclamped(self):
        """t outside [0, 1] extrapolates."""
        assert lerp(0.0, 10.0, 1.5) == 15.0
        assert lerp(0.0, 10.0, -0.5) == -5.0

    def test_nan_fraction_propagates(self):
        assert math.isnan(lerp(0.0, 10.0, float("nan")))


class TestLerpVec3:
    """Tests for component-wise lerp."""

    def test_matches_scalar_lerp_per_axis(self):
        a = vec3(0.1, -3.7, 12.25)
        b = vec3(9.9, 4.2, -0.3)
        t = 0.3141592653589793
        out = lerp_vec3(a, b, t)
        for i in range(3):
            assert out[i] == lerp(float(a[i]), float(b[i]), t)

    def test_accepts_sequences_and_returns_float64(self):
        out = lerp_vec3((0, 0, 0), [2, 4, 6], 0.5)
        assert isinstance(out, np.ndarray)
        assert out.dtype == np.float64
        assert out.shape == (3,)
        assert out.tolist() == [1.0, 2.0, 3.0]

    def test_does_not_mutate_inputs(self):
        a = vec3(1.0, 2.0, 3.0)
        b = vec3(4.0, 5.0, 6.0)
        lerp_vec3(a, b, 0.5)
        assert a.tolist() == [1.0, 2.0, 3.0]
        assert b.tolist() == [4.0, 5.0, 6.0]

    def test_infinite_fraction_is_silent(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            out = lerp_vec3(vec3(1.0, 1.0, 0.0), vec3(1.0, 2.0, 0.0), math.inf)
        assert math.isnan(out[0])
        assert math.isinf(out[1])


def test_as_vec3_keeps_float64_array():
    v = vec3(1.0, 2.0, 3.0)
    assert as_vec3(v) is v


@pytest.mark.parametrize(
    "angle, expected",
    [
        (0.0, 0.0),
        (math.pi / 2, math.pi / 2),
        (3 * math.pi / 2, -math.pi / 2),
        (-3 * math.pi / 2, math.pi / 2),
        (4 * math.pi + 0.25, 0.25),
    ],
)
def test_wrap_pi(angle, expected):
    assert wrap_pi(angle) == pytest.approx(expected, abs=1e-12)
