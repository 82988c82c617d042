# MIT License (see LICENSE)
"""
Default values for the steering simulation.

World units are abstract; velocities are expressed per tick because
integration adds the velocity to the position once per tick.
"""
from __future__ import annotations

# Safety buffer added to obstacle + mover radii when testing whether an
# obstacle lies on a mover's path.
LATERAL_MARGIN: float = 0.125

# Multiplier on the current velocity used as a braking force while a
# mover is avoiding an obstacle.
BRAKE_FACTOR: float = -2.0

DEFAULT_MOVER_COUNT: int = 1000
DEFAULT_ENVIRONMENTAL_FORCE: tuple[float, float] = (0.1, 0.0)

# Per-mover parameters
DEFAULT_MASS: float = 1.0
DEFAULT_ELASTICITY: float = 0.9
DEFAULT_RADIUS: float = 1.0
DEFAULT_SPEED_LIMIT: float = 0.125
DEFAULT_FRICTION: float = 0.01

# Viewport: 800x600 pixels at 40 px per world unit, centered on the origin,
# i.e. world x in [-10, 10] and y in [-7.5, 7.5].
DEFAULT_VIEWPORT_WIDTH: float = 800.0
DEFAULT_VIEWPORT_HEIGHT: float = 600.0
DEFAULT_PIXELS_PER_UNIT: float = 40.0
