# MIT License (see LICENSE)
"""
Placement of movers at simulation start.

A Spawner returns world-space starting positions. Positions outside the
viewport are accepted; boundary resolution pulls them back in on the
first tick.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Sequence
import logging

import numpy as np

from .params import ConfigurationError, as_vec2
from .viewport import Viewport

logger = logging.getLogger(__name__)


class Spawner(ABC):
    """Abstract source of initial mover positions."""

    @abstractmethod
    def spawn(self, count: int, viewport: Viewport) -> list[np.ndarray]:
        """
        Produce `count` world positions.

        Args:
            count: Number of movers to place.
            viewport: The simulation's coordinate mapping.
        """
        ...


class UniformSpawner(Spawner):
    """
    Samples positions uniformly over the viewport and maps them to world space.
    """

    def __init__(self, rng: np.random.Generator | None = None):
        self.rng = rng if rng is not None else np.random.default_rng()

    def spawn(self, count: int, viewport: Viewport) -> list[np.ndarray]:
        xs = self.rng.uniform(0.0, viewport.width, size=count)
        ys = self.rng.uniform(0.0, viewport.height, size=count)
        return [viewport.viewport_to_world((x, y)) for x, y in zip(xs, ys)]


class FixedSpawner(Spawner):
    """
    Replays a fixed list of positions.

    Useful for tests and for scenes that place movers by hand.
    """

    def __init__(self, positions: Sequence[Sequence[float]]):
        self.positions = [as_vec2(p, "Spawn position") for p in positions]

    def spawn(self, count: int, viewport: Viewport) -> list[np.ndarray]:
        if count != len(self.positions):
            raise ConfigurationError(
                f"FixedSpawner holds {len(self.positions)} positions but {count} were requested"
            )
        outside = sum(1 for p in self.positions if not viewport.contains(p))
        if outside:
            logger.debug("%d of %d spawn positions lie outside the viewport", outside, count)
        return [p.copy() for p in self.positions]
