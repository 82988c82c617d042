# MIT License (see LICENSE)
"""
steering_sim - A 2D steering-behavior simulation.

A population of movers is pushed by a constant environmental force,
steers around static circular obstacles and stays inside a bounded
viewport, bouncing off the top and bottom edges and wrapping from the
right edge to the left.

Main entry points:
    - Simulation: The world; init() spawns movers, step(dt) advances a tick.
    - SimulationConfig: Population size, environmental force, viewport.
    - Mover: A steerable point mass.
    - Obstacle: A static circular hazard.
    - MoverParams: Mass, elasticity, radius, speed limit and friction.

Submodules:
    - core: Steering forces, integration, boundaries, diagnostics.
    - io: JSON scene files.
    - renderer: Optional visualization adapters.

Example:
    from steering_sim import Simulation, SimulationConfig, Obstacle

    sim = Simulation(
        config=SimulationConfig(mover_count=200, seed=7),
        obstacles=[Obstacle(position=(0.0, 0.0), radius=1.5)],
    )
    sim.init()
    for _ in range(600):
        sim.step(1/60)
"""
from .world import Simulation, Phase
from .config import SimulationConfig
from .types import Mover, Obstacle
from .params import MoverParams, ConfigurationError
from .viewport import Viewport, OrthographicViewport
from .spawner import Spawner, UniformSpawner, FixedSpawner

__all__ = [
    # Simulation
    "Simulation",
    "Phase",
    "SimulationConfig",
    # Entities
    "Mover",
    "Obstacle",
    "MoverParams",
    "ConfigurationError",
    # Collaborators
    "Viewport",
    "OrthographicViewport",
    "Spawner",
    "UniformSpawner",
    "FixedSpawner",
]
