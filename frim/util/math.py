from __future__ import annotations

from typing import Sequence, Union

import numpy as np

Vec3Like = Union[np.ndarray, Sequence[float]]


def vec3(x: float, y: float, z: float) -> np.ndarray:
    return np.array([x, y, z], dtype=np.float64)


def as_vec3(v: Vec3Like) -> np.ndarray:
    """Return v as a float64 array (no copy if it already is one)."""
    return np.asarray(v, dtype=np.float64)


def lerp(a: float, b: float, t: float) -> float:
    """Unclamped linear interpolation: a + (b - a) * t."""
    return a + (b - a) * t


def lerp_vec3(a: Vec3Like, b: Vec3Like, t: float) -> np.ndarray:
    """Component-wise unclamped lerp.

    Each axis is computed with the same operation order as `lerp`, so
    lerp_vec3(a, b, t)[i] == lerp(a[i], b[i], t) bit for bit.
    inf/nan inputs propagate silently.
    """
    a = as_vec3(a)
    b = as_vec3(b)
    with np.errstate(all="ignore"):
        return a + (b - a) * np.float64(t)


def wrap_pi(angle: float) -> float:
    """Wrap angle to [-pi, pi]."""
    a = float(angle)
    a = (a + float(np.pi)) % (2.0 * float(np.pi)) - float(np.pi)
    return a
