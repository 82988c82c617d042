# MIT License (see LICENSE)
"""
Coordinate mapping between world space and the bounded viewport.

Boundary handling is expressed in viewport coordinates: x in [0, width],
y in [0, height], with y = 0 at the bottom edge. A host engine supplies
its own Viewport (for example one backed by its camera); the
OrthographicViewport below covers the common fixed-camera case.
"""
from __future__ import annotations
from abc import ABC, abstractmethod

import numpy as np

from .constants import (
    DEFAULT_VIEWPORT_WIDTH,
    DEFAULT_VIEWPORT_HEIGHT,
    DEFAULT_PIXELS_PER_UNIT,
)
from .params import ConfigurationError, as_vec2
from .util import f64


class Viewport(ABC):
    """
    Abstract world <-> viewport mapping.

    Implementations must be deterministic, and viewport_to_world must
    invert world_to_viewport for positions within bounds.
    """

    @property
    @abstractmethod
    def width(self) -> float:
        ...

    @property
    @abstractmethod
    def height(self) -> float:
        ...

    @abstractmethod
    def world_to_viewport(self, p) -> np.ndarray:
        """Map a world-space point [x, y] to viewport coordinates."""
        ...

    @abstractmethod
    def viewport_to_world(self, p) -> np.ndarray:
        """Map a viewport point [x, y] back to world space."""
        ...

    def contains(self, world_point) -> bool:
        """True if the world point maps inside [0, width] x [0, height]."""
        sp = self.world_to_viewport(world_point)
        return 0.0 <= sp[0] <= self.width and 0.0 <= sp[1] <= self.height


class OrthographicViewport(Viewport):
    """
    Axis-aligned viewport of a fixed orthographic camera.

    The world point `center` maps to the middle of the viewport and one
    world unit spans `pixels_per_unit` viewport units:

        viewport = (world - center) * pixels_per_unit + (width/2, height/2)

    Example:
        vp = OrthographicViewport(800, 600, pixels_per_unit=40)
        vp.world_to_viewport((0, 0))    # -> [400, 300]
        vp.viewport_to_world((0, 0))    # -> [-10, -7.5]
    """

    def __init__(
        self,
        width: float = DEFAULT_VIEWPORT_WIDTH,
        height: float = DEFAULT_VIEWPORT_HEIGHT,
        pixels_per_unit: float = DEFAULT_PIXELS_PER_UNIT,
        center: tuple[float, float] = (0.0, 0.0),
    ):
        if not (0 < width < np.inf and 0 < height < np.inf):
            raise ConfigurationError(
                f"Viewport size must be positive and finite, got {width}x{height}"
            )
        if not 0 < pixels_per_unit < np.inf:
            raise ConfigurationError(
                f"Viewport pixels_per_unit must be positive and finite, got {pixels_per_unit}"
            )
        self._width = float(width)
        self._height = float(height)
        self.pixels_per_unit = float(pixels_per_unit)
        self.center = as_vec2(center, "Viewport center")
        self._half = np.array([self._width / 2, self._height / 2], dtype=np.float64)

    @property
    def width(self) -> float:
        return self._width

    @property
    def height(self) -> float:
        return self._height

    def world_to_viewport(self, p) -> np.ndarray:
        return (f64(p) - self.center) * self.pixels_per_unit + self._half

    def viewport_to_world(self, p) -> np.ndarray:
        return (f64(p) - self._half) / self.pixels_per_unit + self.center

    def __repr__(self) -> str:
        return (
            f"OrthographicViewport(width={self._width}, height={self._height}, "
            f"pixels_per_unit={self.pixels_per_unit}, center={self.center.tolist()})"
        )
