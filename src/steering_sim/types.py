# MIT License (see LICENSE)
"""
Entities of the steering simulation.

- Obstacle: a static circular hazard.
- Mover: a point mass that accumulates forces during a tick and integrates
  them once at the end of the tick.

Mover state is exposed through read-only numpy views. Only the mover's
own methods change it, so renderers and steering code can read it freely.
"""
from __future__ import annotations
from dataclasses import dataclass

import numpy as np

from .constants import LATERAL_MARGIN
from .params import MoverParams, ConfigurationError, as_vec2
from .util import f64, readonly, unit, perp_left, dot, norm, heading_angle
from .viewport import Viewport
from .core.forces import friction_force
from .core.integrators import euler_step
from .core.bounds import resolve_boundaries


@dataclass(frozen=True, eq=False)
class Obstacle:
    """
    Static circular obstacle.

    Compared and hashed by identity, so the same layout can hold two
    obstacles with equal geometry.

    Attributes:
        position: Center [x, y] in world units (stored read-only).
        radius: Danger radius. Must be >= 0.
    """
    position: np.ndarray
    radius: float = 1.0

    def __post_init__(self) -> None:
        if not self.radius >= 0:
            raise ConfigurationError(f"Obstacle radius must be non-negative, got {self.radius}")
        position = as_vec2(self.position, "Obstacle position")
        object.__setattr__(self, "position", readonly(position))
        object.__setattr__(self, "radius", float(self.radius))

    def to_obstacle(self, mover: "Mover") -> np.ndarray:
        """Vector from the mover to this obstacle's center."""
        return self.position - mover.position

    def is_ahead(self, mover: "Mover") -> bool:
        """
        True if the obstacle's center is in front of the mover.

        Uses dot(unit(velocity), to_obstacle) > 0. A mover at rest has no
        forward direction and so nothing is ahead of it.
        """
        forward = unit(mover.velocity)
        return dot(forward, self.to_obstacle(mover)) > 0

    def is_dangerous(self, mover: "Mover", margin: float = LATERAL_MARGIN) -> bool:
        """
        True if the mover's current line of travel passes too close.

        Compares the lateral offset |dot(left, to_obstacle)| with
        radius + mover radius + margin. The forward distance plays no
        part; use is_ahead for that.

        A mover at rest has a zero lateral axis, so the offset is 0 and
        every obstacle reports dangerous. Such a mover never steers, since
        is_ahead is False for all obstacles.
        """
        left = perp_left(unit(mover.velocity))
        lateral = dot(left, self.to_obstacle(mover))
        return abs(lateral) < self.radius + mover.params.radius + margin


class Mover:
    """
    A steerable point mass.

    Forces are accumulated with apply_force() (any number of calls per tick)
    and consumed by integrate(), which runs once per tick:

        1. friction
        2. velocity += acceleration
        3. clamp to speed_limit
        4. position += velocity
        5. orientation from heading
        6. boundary bounce / wrap
        7. acceleration reset

    Attributes:
        params: Physical parameters shared with other movers.
        id: Identifier assigned by Simulation.init() (-1 until then).
        orientation: Heading angle in radians, kept as-is while at rest.
    """

    def __init__(
        self,
        position=(0.0, 0.0),
        velocity=(0.0, 0.0),
        params: MoverParams | None = None,
        id: int = -1,
    ):
        self.params = params if params is not None else MoverParams()
        self.params.validate()
        self.id = id
        self._position = as_vec2(position, "Mover position")
        self._velocity = as_vec2(velocity, "Mover velocity")
        self._acceleration = np.zeros(2, dtype=np.float64)
        self.orientation = 0.0
        if norm(self._velocity) > 0:
            self.orientation = heading_angle(unit(self._velocity))

    @property
    def position(self) -> np.ndarray:
        return readonly(self._position)

    @property
    def velocity(self) -> np.ndarray:
        return readonly(self._velocity)

    @property
    def acceleration(self) -> np.ndarray:
        """Velocity change accumulated so far this tick."""
        return readonly(self._acceleration)

    @property
    def speed(self) -> float:
        return norm(self._velocity)

    def apply_force(self, force, dt: float) -> None:
        """
        Accumulate a force for this tick: a += F / m * dt.

        Scaling every call by dt keeps the result independent of the tick
        rate. At 2 ticks/s a force of 4 on mass 2 adds 4/2*0.5 twice; at
        4 ticks/s it adds 4/2*0.25 four times. Both total 2 per second.
        """
        self._acceleration += f64(force) / self.params.mass * dt

    def clear_forces(self) -> None:
        self._acceleration[:] = 0.0

    def integrate(self, dt: float, viewport: Viewport, rng: np.random.Generator) -> None:
        """
        Consume this tick's accumulated forces and move.

        Args:
            dt: Tick duration, used for the friction force.
            viewport: Bounds for the bounce / wrap checks.
            rng: Random source for the wrap re-entry height.
        """
        self.apply_force(friction_force(self._velocity, self.params.friction), dt)

        self._position, self._velocity = euler_step(
            self._position, self._velocity, self._acceleration, self.params.speed_limit
        )

        heading = unit(self._velocity)
        if heading.any():
            self.orientation = heading_angle(heading)

        self._position, self._velocity = resolve_boundaries(
            self._position, self._velocity, self.params.elasticity, viewport, rng
        )

        self.clear_forces()

    def __repr__(self) -> str:
        p, v = self._position, self._velocity
        return f"Mover(id={self.id}, position=({p[0]:.3f}, {p[1]:.3f}), velocity=({v[0]:.3f}, {v[1]:.3f}))"
