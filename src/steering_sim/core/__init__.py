# MIT License (see LICENSE)
"""
Core steering and motion components.

This subpackage provides:
    - Forces: friction, environmental force, obstacle avoidance.
    - Integrators: speed clamp and per-tick Euler update.
    - Bounds: top/bottom bounce and right-edge wrap.
    - Invariants: speed, energy and momentum diagnostics.

Typical usage:
    from steering_sim.core import avoid_obstacles

    avoided = avoid_obstacles(mover, obstacles, dt=1/60)
"""
from .forces import (
    friction_force,
    apply_environment,
    closest_dangerous,
    steering_force,
    braking_force,
    avoid_obstacles,
)
from .integrators import clamp_speed, euler_step
from .bounds import bounce, resolve_boundaries
from .invariants import max_speed, speed_limit_violations, kinetic_energy, linear_momentum

__all__ = [
    # Forces
    "friction_force",
    "apply_environment",
    "closest_dangerous",
    "steering_force",
    "braking_force",
    "avoid_obstacles",
    # Integrators
    "clamp_speed",
    "euler_step",
    # Bounds
    "bounce",
    "resolve_boundaries",
    # Diagnostics
    "max_speed",
    "speed_limit_violations",
    "kinetic_energy",
    "linear_momentum",
]
