# MIT License (see LICENSE)
"""
Boundary resolution against the viewport edges.

Top and bottom edges are walls: a mover that crosses one is put back on
the edge and its vertical velocity is reflected and damped by its
elasticity. The right edge is an exit: a mover that crosses it reappears
on the left edge at a random height with its velocity untouched. The left
edge has no behavior; the environmental force pushes movers rightward.
"""
from __future__ import annotations

import numpy as np

from ..viewport import Viewport
from ..util import f64


def bounce(vy: float, elasticity: float) -> float:
    """Reflected vertical velocity after a wall hit: -vy * e."""
    return -vy * elasticity


def resolve_boundaries(
    position: np.ndarray,
    velocity: np.ndarray,
    elasticity: float,
    viewport: Viewport,
    rng: np.random.Generator,
) -> tuple[np.ndarray, np.ndarray]:
    """
    Keep a mover inside the viewport.

    Args:
        position: World position after integration.
        velocity: Velocity after integration.
        elasticity: Fraction of vertical speed kept on a bounce.
        viewport: Mapping between world and viewport coordinates.
        rng: Source of the random re-entry height for right-edge wraps.

    Returns:
        (position, velocity) as new arrays; the inputs are not modified.
    """
    position = f64(position)
    velocity = f64(velocity)

    sp = viewport.world_to_viewport(position)
    if sp[1] < 0.0:
        # bottom
        position = viewport.viewport_to_world((sp[0], 0.0))
        velocity[1] = bounce(velocity[1], elasticity)
    elif sp[1] > viewport.height:
        # top
        position = viewport.viewport_to_world((sp[0], viewport.height))
        velocity[1] = bounce(velocity[1], elasticity)

    # Re-map before the x check; a stale sp lets movers sink into corners.
    sp = viewport.world_to_viewport(position)

    if sp[0] > viewport.width:
        y = float(rng.uniform(0.0, viewport.height))
        position = viewport.viewport_to_world((0.0, y))

    return position, velocity
