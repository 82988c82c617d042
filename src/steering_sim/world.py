# MIT License (see LICENSE)
"""
The simulation world and tick loop.

The Simulation owns the movers and the environmental force and refers to
an externally supplied, read-only obstacle layout. It runs in two phases:

    INIT     -> init() spawns the movers
    RUNNING  -> step(dt) advances one tick, indefinitely

Each tick has two passes over the movers, both in spawn order:
    1. Steering: environmental force, then obstacle avoidance.
    2. Integration: friction, velocity/position update, bounds, reset.

Every steering force of a tick is therefore applied before any mover
moves. Movers do not interact with each other, so the result is the
same as steering and integrating each mover in turn.

Structure:
    - User builds a SimulationConfig and an obstacle list.
    - User creates a Simulation and calls init().
    - User calls step(dt) in a loop and hands movers to a renderer.
"""
from __future__ import annotations
from contextlib import nullcontext
from dataclasses import dataclass, field
from enum import Enum
from typing import Sequence
import logging
import math

import numpy as np

from .config import SimulationConfig
from .types import Mover, Obstacle
from .util import f64, readonly
from .viewport import Viewport
from .spawner import Spawner, UniformSpawner
from .profiler import Profiler
from .core.forces import apply_environment, avoid_obstacles

logger = logging.getLogger(__name__)


class Phase(Enum):
    INIT = "init"
    RUNNING = "running"


@dataclass
class Simulation:
    """
    Steering simulation world.

    Attributes:
        config: Simulation parameters (validated on construction).
        obstacles: Static obstacle layout, stored as a tuple.
        viewport: Coordinate mapping; built from config when omitted.
        spawner: Initial placement; UniformSpawner on the world rng when omitted.
        profiler: Optional Profiler timing the "steer" and "integrate" passes.
        movers: Populated by init(), fixed afterwards.
        time: Accumulated dt over all ticks.
        ticks: Number of completed ticks.
    """
    config: SimulationConfig = field(default_factory=SimulationConfig)
    obstacles: Sequence[Obstacle] = field(default_factory=tuple)
    viewport: Viewport | None = None
    spawner: Spawner | None = None
    profiler: Profiler | None = None

    # Internal state
    movers: list[Mover] = field(default_factory=list, init=False)
    time: float = field(default=0.0, init=False)
    ticks: int = field(default=0, init=False)
    phase: Phase = field(default=Phase.INIT, init=False)

    def __post_init__(self) -> None:
        self.config.validate()
        self.obstacles = tuple(self.obstacles)
        for o in self.obstacles:
            if not isinstance(o, Obstacle):
                raise TypeError(f"Expected Obstacle, got {type(o).__name__}")

        self._rng = np.random.default_rng(self.config.seed)
        if self.viewport is None:
            self.viewport = self.config.make_viewport()
        if self.spawner is None:
            self.spawner = UniformSpawner(self._rng)

        self._force = readonly(f64(self.config.environmental_force))

    @property
    def environmental_force(self) -> np.ndarray:
        return self._force

    @property
    def rng(self) -> np.random.Generator:
        return self._rng

    def init(self) -> None:
        """
        Spawn the movers and switch to the RUNNING phase.

        Raises:
            RuntimeError: If the simulation was already initialized.
        """
        if self.phase is not Phase.INIT:
            raise RuntimeError("Simulation.init() called twice")

        positions = self.spawner.spawn(self.config.mover_count, self.viewport)
        self.movers = [
            Mover(position=p, params=self.config.mover, id=i)
            for i, p in enumerate(positions, start=1)
        ]
        self.phase = Phase.RUNNING
        logger.info(
            "Simulation initialized: %d movers, %d obstacles, force=%s",
            len(self.movers), len(self.obstacles), self._force.tolist(),
        )

    def _section(self, name: str):
        return self.profiler.section(name) if self.profiler else nullcontext()

    def _steer(self, dt: float) -> int:
        """Apply environmental and avoidance forces. Returns the number of movers avoiding."""
        avoiding = 0
        margin = self.config.lateral_margin
        for mover in self.movers:
            apply_environment(mover, self._force, dt)
            if avoid_obstacles(mover, self.obstacles, dt, margin) is not None:
                avoiding += 1
        return avoiding

    def _integrate(self, dt: float) -> None:
        for mover in self.movers:
            mover.integrate(dt, self.viewport, self._rng)

    def step(self, dt: float) -> None:
        """
        Advance the simulation by one tick.

        Args:
            dt: Tick duration (elapsed time since the previous tick). Must be
                finite and > 0.

        Raises:
            RuntimeError: If init() has not been called.
            ValueError: If dt is not positive and finite.
        """
        if self.phase is not Phase.RUNNING:
            raise RuntimeError("Simulation.step() called before init()")
        dt = float(dt)
        if not (dt > 0 and math.isfinite(dt)):
            raise ValueError(f"dt must be positive and finite, got {dt}")

        with self._section("steer"):
            avoiding = self._steer(dt)
        with self._section("integrate"):
            self._integrate(dt)

        self.time += dt
        self.ticks += 1
        logger.debug("tick %d: %d/%d movers avoiding", self.ticks, avoiding, len(self.movers))

    def run(self, ticks: int, dt: float) -> None:
        """Run `ticks` consecutive steps of length dt."""
        for _ in range(ticks):
            self.step(dt)
