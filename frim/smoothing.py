"""Framerate-independent exponential smoothing.

Call once per frame with the frame's dt; the result does not depend on how
the elapsed time is split into frames. Three parameterizations of the same
exponential decay are offered:

- half-life: seconds to close half of the remaining gap,
- smoothing factor: fraction of the gap still remaining after one second,
- lambda: continuous decay rate in 1/sec (larger = faster follow).

Nothing is clamped or validated. Degenerate parameters (zero or negative
half-life, smoothing outside (0, 1), negative lambda) give whatever IEEE-754
arithmetic gives: inf, nan, or a fraction outside [0, 1] that overshoots.
No exceptions and no numpy warnings are raised for them.
"""
from __future__ import annotations

import numpy as np

from frim.config import MODE_FACTOR, MODE_HALF_LIFE, MODE_LAMBDA
from frim.util.math import Vec3Like, lerp, lerp_vec3, wrap_pi


# --- Blend fractions.

def half_life_fraction(half_life: float, dt: float) -> float:
    """1 - 2^(-dt / half_life). Exactly 0.5 when dt == half_life."""
    with np.errstate(all="ignore"):
        return float(1.0 - np.exp2(np.divide(-np.float64(dt), np.float64(half_life))))


def smoothing_fraction(smoothing: float, dt: float) -> float:
    """1 - smoothing^dt."""
    with np.errstate(all="ignore"):
        return float(1.0 - np.power(np.float64(smoothing), np.float64(dt)))


def lambda_fraction(lam: float, dt: float) -> float:
    """1 - e^(-lam * dt)."""
    with np.errstate(all="ignore"):
        return float(1.0 - np.exp(-np.float64(lam) * np.float64(dt)))


# --- Scalars.

def smooth_half_life(source: float, target: float, half_life: float, dt: float) -> float:
    return lerp(float(source), float(target), half_life_fraction(half_life, dt))


def smooth_factor(source: float, target: float, smoothing: float, dt: float) -> float:
    return lerp(float(source), float(target), smoothing_fraction(smoothing, dt))


def smooth_lambda(source: float, target: float, lam: float, dt: float) -> float:
    return lerp(float(source), float(target), lambda_fraction(lam, dt))


# --- 3-vectors. One scalar fraction, applied to every axis.

def smooth_half_life_vec3(source: Vec3Like, target: Vec3Like, half_life: float, dt: float) -> np.ndarray:
    return lerp_vec3(source, target, half_life_fraction(half_life, dt))


def smooth_factor_vec3(source: Vec3Like, target: Vec3Like, smoothing: float, dt: float) -> np.ndarray:
    return lerp_vec3(source, target, smoothing_fraction(smoothing, dt))


def smooth_lambda_vec3(source: Vec3Like, target: Vec3Like, lam: float, dt: float) -> np.ndarray:
    return lerp_vec3(source, target, lambda_fraction(lam, dt))


# --- Angles (radians).

def _smooth_angle(current: float, target: float, fraction: float) -> float:
    cur = float(current)
    d = wrap_pi(float(target) - cur)
    return wrap_pi(cur + d * fraction)


def smooth_angle_half_life(current: float, target: float, half_life: float, dt: float) -> float:
    """Smooth an angle along the shortest arc, taking wrapping into account."""
    return _smooth_angle(current, target, half_life_fraction(half_life, dt))


def smooth_angle_lambda(current: float, target: float, lam: float, dt: float) -> float:
    """Smooth an angle along the shortest arc, taking wrapping into account."""
    return _smooth_angle(current, target, lambda_fraction(lam, dt))


# --- Conversions between parameterizations.

_LN2 = float(np.log(2.0))


def half_life_to_lambda(half_life: float) -> float:
    with np.errstate(all="ignore"):
        return float(np.divide(_LN2, np.float64(half_life)))


def lambda_to_half_life(lam: float) -> float:
    with np.errstate(all="ignore"):
        return float(np.divide(_LN2, np.float64(lam)))


def smoothing_to_lambda(smoothing: float) -> float:
    # smoothing^dt == e^(dt * ln smoothing)
    with np.errstate(all="ignore"):
        return float(-np.log(np.float64(smoothing)))


def lambda_to_smoothing(lam: float) -> float:
    with np.errstate(all="ignore"):
        return float(np.exp(-np.float64(lam)))


# --- Lookup by mode name.

SCALAR_SMOOTHERS = {
    MODE_HALF_LIFE: smooth_half_life,
    MODE_FACTOR: smooth_factor,
    MODE_LAMBDA: smooth_lambda,
}

VEC3_SMOOTHERS = {
    MODE_HALF_LIFE: smooth_half_life_vec3,
    MODE_FACTOR: smooth_factor_vec3,
    MODE_LAMBDA: smooth_lambda_vec3,
}


def to_lambda(mode: str, param: float) -> float:
    """Express a control parameter of the given mode as a decay rate."""
    if mode == MODE_HALF_LIFE:
        return half_life_to_lambda(param)
    if mode == MODE_FACTOR:
        return smoothing_to_lambda(param)
    if mode == MODE_LAMBDA:
        return float(param)
    raise ValueError(f"unknown smoothing mode: {mode!r}")
