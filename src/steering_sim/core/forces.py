# MIT License (see LICENSE)
"""
Steering forces for movers.

Force functions call Mover.apply_force, which folds force / mass * dt
into the mover's accumulator. They are called during the steering pass
of a tick, before any mover integrates.

Obstacle avoidance works in the mover's local frame:
- forward = unit(velocity)
- left    = perp_left(forward)
An obstacle is "ahead" when its center has a positive forward component
and "dangerous" when its lateral offset is smaller than the combined
radii plus a margin. Of the obstacles that are both, the nearest one
decides the steering direction.
"""
from __future__ import annotations
from typing import TYPE_CHECKING, Iterable

import numpy as np

from ..constants import LATERAL_MARGIN, BRAKE_FACTOR
from ..util import f64, unit, perp_left, dot, norm2

if TYPE_CHECKING:
    from ..types import Mover, Obstacle


def friction_force(velocity: np.ndarray, mu: float) -> np.ndarray:
    """
    Friction opposing the direction of motion: -mu * unit(v).

    Its magnitude is mu whatever the speed, and zero for a stationary mover.
    """
    return unit(velocity) * (-mu)


def apply_environment(mover: "Mover", force: np.ndarray, dt: float) -> None:
    """Apply the constant environmental force (wind / goal bias)."""
    mover.apply_force(force, dt)


def closest_dangerous(
    mover: "Mover",
    obstacles: Iterable["Obstacle"],
    margin: float = LATERAL_MARGIN,
) -> "Obstacle | None":
    """
    Find the nearest obstacle that is both ahead of and dangerous to mover.

    Distance is compared squared. On equal distances the obstacle met
    first in iteration order wins.

    Returns:
        The selected obstacle, or None if no obstacle qualifies.
    """
    closest = None
    min_dist = float("inf")
    for obstacle in obstacles:
        if obstacle.is_ahead(mover) and obstacle.is_dangerous(mover, margin):
            dist = norm2(obstacle.to_obstacle(mover))
            if dist < min_dist:
                min_dist = dist
                closest = obstacle
    return closest


def steering_force(mover: "Mover", obstacle: "Obstacle") -> np.ndarray:
    """
    Lateral force turning mover away from obstacle.

    The force is left * speed_limit, pointing right instead when the
    obstacle sits on the mover's left (dot(left, to_obstacle) >= 0).
    """
    left = perp_left(unit(mover.velocity))
    direction = 1.0 if dot(left, obstacle.to_obstacle(mover)) < 0 else -1.0
    return left * mover.params.speed_limit * direction


def braking_force(mover: "Mover") -> np.ndarray:
    """Deceleration proportional to the current velocity."""
    return f64(mover.velocity) * BRAKE_FACTOR


def avoid_obstacles(
    mover: "Mover",
    obstacles: Iterable["Obstacle"],
    dt: float,
    margin: float = LATERAL_MARGIN,
) -> "Obstacle | None":
    """
    Apply avoidance steering and braking for the nearest threatening obstacle.

    Does nothing if no obstacle is both ahead and dangerous.

    Returns:
        The obstacle being avoided, or None.
    """
    closest = closest_dangerous(mover, obstacles, margin)
    if closest is not None:
        mover.apply_force(steering_force(mover, closest), dt)
        mover.apply_force(braking_force(mover), dt)
    return closest
