# MIT License (see LICENSE)
"""
Vector math helpers for the steering simulation.

All vectors are 2D numpy arrays of shape (2,) and dtype float64. The
helpers never raise on degenerate input: normalizing a zero-length vector
yields the zero vector, which downstream code reads as "no preferred
direction".
"""
from __future__ import annotations

import numpy as np


def f64(x) -> np.ndarray:
    """
    Convert any array-like to a float64 numpy array.

    Lets callers pass tuples or lists for positions, velocities and forces.
    """
    return np.array(x, dtype=np.float64)


def readonly(v: np.ndarray) -> np.ndarray:
    """Return a non-writeable view of v (mutations raise ValueError)."""
    view = v.view()
    view.flags.writeable = False
    return view


def dot(a: np.ndarray, b: np.ndarray) -> float:
    return float(a[0] * b[0] + a[1] * b[1])


def norm2(v: np.ndarray) -> float:
    """Squared magnitude of a 2D vector. Avoids sqrt for distance comparisons."""
    return float(v[0] * v[0] + v[1] * v[1])


def norm(v: np.ndarray) -> float:
    """Magnitude (length) of a 2D vector."""
    return float(np.sqrt(norm2(v)))


def unit(v: np.ndarray, eps: float = 1e-12) -> np.ndarray:
    """
    Return a unit vector in the same direction as v.

    Returns the zero vector if |v| < eps instead of dividing by zero.
    """
    n = norm(v)
    if n < eps:
        return np.zeros(2, dtype=np.float64)
    return v / n


def perp_left(v: np.ndarray) -> np.ndarray:
    """
    Rotate v by +90 degrees: (x, y) -> (-y, x).

    For a heading vector this gives the lateral axis pointing to the
    mover's left.
    """
    return np.array([-v[1], v[0]], dtype=np.float64)


def heading_angle(u: np.ndarray) -> float:
    """
    Orientation angle (radians, counterclockwise from +x) of a unit heading.

    Callers must not pass a zero vector; the result would be 0.0, which
    is indistinguishable from a genuine +x heading.
    """
    return float(np.arctan2(u[1], u[0]))
