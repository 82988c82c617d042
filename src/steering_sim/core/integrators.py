# MIT License (see LICENSE)
"""
Per-tick motion update for movers.

Movers use a memoryless acceleration model: the accumulator holds only
the velocity change gathered during the current tick (forces already
scaled by dt/mass) and is cleared after integration. The update is
explicit Euler in tick units:

    v' = clamp(v + a, speed_limit)
    x' = x + v'
"""
from __future__ import annotations

import numpy as np

from ..util import f64, norm


def clamp_speed(velocity: np.ndarray, speed_limit: float) -> np.ndarray:
    """
    Scale velocity down to speed_limit if it is faster; otherwise return a copy.
    """
    v = f64(velocity)
    mag = norm(v)
    if mag > speed_limit:
        v *= speed_limit / mag
    return v


def euler_step(
    position: np.ndarray,
    velocity: np.ndarray,
    acceleration: np.ndarray,
    speed_limit: float,
) -> tuple[np.ndarray, np.ndarray]:
    """
    Advance one tick.

    Args:
        position: Current position.
        velocity: Current velocity (world units per tick).
        acceleration: Velocity change accumulated this tick.
        speed_limit: Maximum speed after the update.

    Returns:
        New (position, velocity) arrays.
    """
    v = clamp_speed(velocity + acceleration, speed_limit)
    x = position + v
    return x, v
