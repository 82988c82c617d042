# MIT License (see LICENSE)
"""
Diagnostic quantities for a population of movers.

Used by tests and benchmarks to check the speed limit and to watch how
energy and momentum evolve under friction, braking and bounces.
"""
from __future__ import annotations
from typing import TYPE_CHECKING, Iterable

import numpy as np

from ..util import norm

if TYPE_CHECKING:
    from ..types import Mover


def max_speed(movers: Iterable["Mover"]) -> float:
    """Largest velocity magnitude in the population (0.0 if empty)."""
    return max((norm(m.velocity) for m in movers), default=0.0)


def speed_limit_violations(movers: Iterable["Mover"], eps: float = 1e-12) -> list["Mover"]:
    """
    Movers whose speed exceeds their own speed_limit by more than eps.

    A non-finite speed (NaN or inf) always counts as a violation.
    """
    out = []
    for m in movers:
        s = norm(m.velocity)
        if not np.isfinite(s) or s > m.params.speed_limit + eps:
            out.append(m)
    return out


def kinetic_energy(movers: Iterable["Mover"]) -> float:
    """
    Total kinetic energy T = sum(0.5 * m * v^2), velocities in units per tick.
    """
    ke = 0.0
    for m in movers:
        v = m.velocity
        ke += 0.5 * m.params.mass * float(np.dot(v, v))
    return ke


def linear_momentum(movers: Iterable["Mover"]) -> np.ndarray:
    """Total momentum P = sum(m * v)."""
    p = np.zeros(2, dtype=np.float64)
    for m in movers:
        p += m.params.mass * m.velocity
    return p
