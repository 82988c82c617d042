# MIT License (see LICENSE)
"""
Scene files for the steering simulation.

This subpackage provides:
    - JSON loading: build a Simulation (config + obstacles) from a file.
    - JSON saving: write a Simulation's config and obstacle layout.

Typical usage:
    from steering_sim.io import load_scene, save_scene

    sim = load_scene("river.json")
    sim.init()
    save_scene(sim, "copy.json")
"""
from .json_io import (
    load_scene,
    load_scene_raw,
    save_scene,
    scene_to_json,
    config_from_json,
    config_to_json,
    mover_params_from_json,
    obstacle_from_json,
    obstacle_to_json,
)

__all__ = [
    # Loading
    "load_scene",
    "load_scene_raw",
    # Saving
    "save_scene",
    # Serialization
    "scene_to_json",
    "config_from_json",
    "config_to_json",
    "mover_params_from_json",
    "obstacle_from_json",
    "obstacle_to_json",
]
