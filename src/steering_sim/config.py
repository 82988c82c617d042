# MIT License (see LICENSE)
"""
Simulation configuration.

All values have defaults matching the reference scene: 1000 movers drifting
right under a constant force of (0.1, 0) through an 800x600 viewport.
"""
from __future__ import annotations
from dataclasses import dataclass, field

from .constants import (
    LATERAL_MARGIN,
    DEFAULT_MOVER_COUNT,
    DEFAULT_ENVIRONMENTAL_FORCE,
    DEFAULT_VIEWPORT_WIDTH,
    DEFAULT_VIEWPORT_HEIGHT,
    DEFAULT_PIXELS_PER_UNIT,
)
from .params import MoverParams, ConfigurationError, as_vec2
from .viewport import OrthographicViewport


@dataclass
class SimulationConfig:
    """
    Parameters fixed at Simulation.init().

    Attributes:
        mover_count: Number of movers spawned.
        environmental_force: Constant force applied to every mover every tick.
        mover: Physical parameters for every spawned mover.
        lateral_margin: Extra clearance used by obstacle danger checks.
        width, height: Viewport size in viewport units (pixels).
        pixels_per_unit: Viewport units per world unit.
        center: World point shown at the middle of the viewport.
        seed: Seed for spawn positions and wrap heights (None = fresh entropy).
        show_debug: Whether renderers built from this config draw radii.
                    Has no effect on the simulation itself.
    """
    mover_count: int = DEFAULT_MOVER_COUNT
    environmental_force: tuple[float, float] = DEFAULT_ENVIRONMENTAL_FORCE
    mover: MoverParams = field(default_factory=MoverParams)
    lateral_margin: float = LATERAL_MARGIN
    width: float = DEFAULT_VIEWPORT_WIDTH
    height: float = DEFAULT_VIEWPORT_HEIGHT
    pixels_per_unit: float = DEFAULT_PIXELS_PER_UNIT
    center: tuple[float, float] = (0.0, 0.0)
    seed: int | None = None
    show_debug: bool = False

    def validate(self) -> None:
        """Raise ConfigurationError if any parameter is out of range."""
        if self.mover_count < 0:
            raise ConfigurationError(f"mover_count must be non-negative, got {self.mover_count}")
        as_vec2(self.environmental_force, "environmental_force")
        if not self.lateral_margin >= 0:
            raise ConfigurationError(
                f"lateral_margin must be non-negative, got {self.lateral_margin}"
            )
        self.mover.validate()
        # Viewport checks its own size and scale
        self.make_viewport()

    def make_viewport(self) -> OrthographicViewport:
        return OrthographicViewport(
            width=self.width,
            height=self.height,
            pixels_per_unit=self.pixels_per_unit,
            center=self.center,
        )
