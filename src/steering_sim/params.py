# MIT License (see LICENSE)
"""
Per-mover physical parameters.

MoverParams is a small immutable bundle of coefficients shared by every
mover spawned from the same configuration.
"""
from __future__ import annotations
from dataclasses import dataclass

import numpy as np

from .constants import (
    DEFAULT_MASS,
    DEFAULT_ELASTICITY,
    DEFAULT_RADIUS,
    DEFAULT_SPEED_LIMIT,
    DEFAULT_FRICTION,
)


class ConfigurationError(ValueError):
    """Raised when simulation or mover parameters are invalid."""


def as_vec2(value, name: str) -> np.ndarray:
    """
    Convert value to a float64 [x, y] array.

    Raises ConfigurationError unless value has exactly two finite components.
    """
    try:
        v = np.array(value, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"{name} must be an [x, y] pair, got {value!r}") from exc
    if v.shape != (2,):
        raise ConfigurationError(f"{name} must be an [x, y] pair, got {value!r}")
    if not np.isfinite(v).all():
        raise ConfigurationError(f"{name} must be finite, got {value!r}")
    return v


@dataclass(frozen=True)
class MoverParams:
    """
    Physical properties of a mover.

    Attributes:
        mass: Higher mass means more force is needed to change velocity.
              Must be > 0 (forces are divided by it).
        elasticity: Fraction of the normal velocity kept after bouncing off
                    the top or bottom edge. Range [0, 1].
        radius: Collision radius used by obstacle danger checks. Must be >= 0.
        speed_limit: Maximum velocity magnitude (world units per tick).
                     Must be > 0.
        friction: Magnitude of the friction force opposing motion (mu).
                  Must be >= 0.
    """
    mass: float = DEFAULT_MASS
    elasticity: float = DEFAULT_ELASTICITY
    radius: float = DEFAULT_RADIUS
    speed_limit: float = DEFAULT_SPEED_LIMIT
    friction: float = DEFAULT_FRICTION

    def validate(self) -> None:
        """
        Check every parameter and raise ConfigurationError on the first bad one.
        """
        if not self.mass > 0:
            raise ConfigurationError(f"Mover mass must be positive, got {self.mass}")
        if not self.radius >= 0:
            raise ConfigurationError(f"Mover radius must be non-negative, got {self.radius}")
        if not self.speed_limit > 0:
            raise ConfigurationError(
                f"Mover speed_limit must be positive, got {self.speed_limit}"
            )
        if not 0.0 <= self.elasticity <= 1.0:
            raise ConfigurationError(
                f"Mover elasticity must be within [0, 1], got {self.elasticity}"
            )
        if not self.friction >= 0:
            raise ConfigurationError(
                f"Mover friction must be non-negative, got {self.friction}"
            )
