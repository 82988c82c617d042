# MIT License (see LICENSE)
"""
JSON scene files for the steering simulation.

A scene file holds the configuration and the obstacle layout. Mover state
is not stored; movers are spawned by Simulation.init().

JSON Schema Overview:
---------------------
{
  "mover_count": int,                  # Default: 1000
  "environmental_force": [fx, fy],     # Default: [0.1, 0.0]
  "lateral_margin": float,             # Default: 0.125
  "seed": int | null,                  # Default: null (floats rejected)
  "show_debug": bool,                  # Default: false
  "mover": {                           # Optional
    "mass": float,                     # Default: 1.0
    "elasticity": float,               # Default: 0.9
    "radius": float,                   # Default: 1.0
    "speed_limit": float,              # Default: 0.125
    "friction": float                  # Default: 0.01
  },
  "viewport": {                        # Optional
    "width": float, "height": float,   # Default: 800 x 600
    "pixels_per_unit": float,          # Default: 40
    "center": [x, y]                   # Default: [0, 0]
  },
  "obstacles": [
    {"position": [x, y], "radius": float}   # radius default: 1.0
  ]
}
"""
from __future__ import annotations
import json
import logging
from dataclasses import fields
from typing import Any

import numpy as np

from ..config import SimulationConfig
from ..constants import (
    LATERAL_MARGIN,
    DEFAULT_MOVER_COUNT,
    DEFAULT_ENVIRONMENTAL_FORCE,
    DEFAULT_VIEWPORT_WIDTH,
    DEFAULT_VIEWPORT_HEIGHT,
    DEFAULT_PIXELS_PER_UNIT,
)
from ..params import MoverParams
from ..types import Obstacle
from ..world import Simulation

logger = logging.getLogger(__name__)


def load_scene_raw(path: str) -> dict[str, Any]:
    """
    Load raw JSON data from a scene file without object construction.

    Args:
        path: Absolute or relative path to the JSON file.
    """
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def load_scene(path: str) -> Simulation:
    """
    Build a Simulation from a JSON scene file.

    The returned simulation is in the INIT phase; call init() to spawn movers.

    Raises:
        FileNotFoundError: If the file cannot be found.
        json.JSONDecodeError: If the file is not valid JSON.
        ValueError: If a field is malformed (ConfigurationError for
                    out-of-range values).
    """
    data = load_scene_raw(path)
    config = config_from_json(data)
    obstacles = [obstacle_from_json(o) for o in data.get("obstacles", [])]
    logger.debug("Loaded scene %s: %d obstacles", path, len(obstacles))
    return Simulation(config=config, obstacles=obstacles)


def mover_params_from_json(d: dict[str, Any]) -> MoverParams:
    """Parse the optional "mover" block; missing keys take MoverParams defaults."""
    defaults = MoverParams()
    kwargs = {
        f.name: float(d.get(f.name, getattr(defaults, f.name)))
        for f in fields(MoverParams)
    }
    params = MoverParams(**kwargs)
    params.validate()
    return params


def config_from_json(d: dict[str, Any]) -> SimulationConfig:
    """
    Parse the configuration part of a scene dictionary.

    Unknown keys are ignored for forward compatibility.
    """
    force = d.get("environmental_force", list(DEFAULT_ENVIRONMENTAL_FORCE))
    if len(force) != 2:
        raise ValueError(f"environmental_force must have 2 components, got {force!r}")

    vp = d.get("viewport", {})
    center = vp.get("center", [0.0, 0.0])
    if len(center) != 2:
        raise ValueError(f"viewport center must have 2 components, got {center!r}")

    seed = d.get("seed")
    if seed is not None:
        seed = _as_int(seed, "seed")
    config = SimulationConfig(
        mover_count=_as_int(d.get("mover_count", DEFAULT_MOVER_COUNT), "mover_count"),
        environmental_force=(float(force[0]), float(force[1])),
        mover=mover_params_from_json(d.get("mover", {})),
        lateral_margin=float(d.get("lateral_margin", LATERAL_MARGIN)),
        width=float(vp.get("width", DEFAULT_VIEWPORT_WIDTH)),
        height=float(vp.get("height", DEFAULT_VIEWPORT_HEIGHT)),
        pixels_per_unit=float(vp.get("pixels_per_unit", DEFAULT_PIXELS_PER_UNIT)),
        center=(float(center[0]), float(center[1])),
        seed=seed,
        show_debug=bool(d.get("show_debug", False)),
    )
    config.validate()
    return config


def _as_int(value: Any, name: str) -> int:
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    return value


def obstacle_from_json(d: dict[str, Any]) -> Obstacle:
    """Parse one obstacle definition."""
    if "position" not in d:
        raise ValueError("Obstacle definition missing required 'position' field.")
    pos = d["position"]
    if len(pos) != 2:
        raise ValueError(f"Obstacle position must have 2 components, got {pos!r}")
    return Obstacle(position=(float(pos[0]), float(pos[1])), radius=float(d.get("radius", 1.0)))


def obstacle_to_json(obstacle: Obstacle) -> dict[str, Any]:
    return {"position": _to_list(obstacle.position), "radius": obstacle.radius}


def config_to_json(config: SimulationConfig) -> dict[str, Any]:
    """
    Serialize a SimulationConfig; only non-default values are written.
    """
    result: dict[str, Any] = {}
    if config.mover_count != DEFAULT_MOVER_COUNT:
        result["mover_count"] = config.mover_count
    if tuple(config.environmental_force) != DEFAULT_ENVIRONMENTAL_FORCE:
        result["environmental_force"] = _to_list(config.environmental_force)
    if config.lateral_margin != LATERAL_MARGIN:
        result["lateral_margin"] = config.lateral_margin
    if config.seed is not None:
        result["seed"] = config.seed
    if config.show_debug:
        result["show_debug"] = True

    defaults = MoverParams()
    mover = {
        f.name: getattr(config.mover, f.name)
        for f in fields(MoverParams)
        if getattr(config.mover, f.name) != getattr(defaults, f.name)
    }
    if mover:
        result["mover"] = mover

    vp: dict[str, Any] = {}
    if config.width != DEFAULT_VIEWPORT_WIDTH:
        vp["width"] = config.width
    if config.height != DEFAULT_VIEWPORT_HEIGHT:
        vp["height"] = config.height
    if config.pixels_per_unit != DEFAULT_PIXELS_PER_UNIT:
        vp["pixels_per_unit"] = config.pixels_per_unit
    if tuple(config.center) != (0.0, 0.0):
        vp["center"] = _to_list(config.center)
    if vp:
        result["viewport"] = vp

    return result


def scene_to_json(sim: Simulation) -> dict[str, Any]:
    """Serialize a Simulation's configuration and obstacle layout."""
    result = config_to_json(sim.config)
    result["obstacles"] = [obstacle_to_json(o) for o in sim.obstacles]
    return result


def save_scene(sim: Simulation, path: str, indent: int = 2) -> None:
    """Write a Simulation's scene (config + obstacles) to a JSON file."""
    data = scene_to_json(sim)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=indent)


def _to_list(arr: Any) -> list[float]:
    """Convert a numpy array or tuple to a plain list of floats."""
    if isinstance(arr, np.ndarray):
        return arr.tolist()
    return [float(x) for x in arr]
