# MIT License (see LICENSE)
import json

import numpy as np
import pytest

from steering_sim import Simulation, SimulationConfig, Obstacle, MoverParams, ConfigurationError
from steering_sim.io import (
    load_scene,
    save_scene,
    scene_to_json,
    config_from_json,
    config_to_json,
    obstacle_from_json,
)


def test_defaults_from_empty_scene():
    config = config_from_json({})
    assert config == SimulationConfig()
    assert config_to_json(config) == {}


def test_config_fields_parsed():
    config = config_from_json({
        "mover_count": 25,
        "environmental_force": [0.0, -0.2],
        "lateral_margin": 0.5,
        "seed": 9,
        "show_debug": True,
        "mover": {"mass": 2.0, "speed_limit": 0.3},
        "viewport": {"width": 400, "height": 300, "pixels_per_unit": 20, "center": [1, 2]},
        "unknown_key": "ignored",
    })
    assert config.mover_count == 25
    assert config.environmental_force == (0.0, -0.2)
    assert config.lateral_margin == 0.5
    assert config.seed == 9
    assert config.show_debug is True
    assert config.mover == MoverParams(mass=2.0, speed_limit=0.3)
    assert (config.width, config.height, config.pixels_per_unit) == (400.0, 300.0, 20.0)
    assert config.center == (1.0, 2.0)


def test_scene_file_round_trip(tmp_path):
    sim = Simulation(
        config=SimulationConfig(mover_count=12, seed=4, mover=MoverParams(elasticity=0.5)),
        obstacles=[Obstacle(position=(1.0, -2.0), radius=0.75), Obstacle(position=(3.0, 3.0))],
    )
    path = tmp_path / "scene.json"
    save_scene(sim, str(path))

    raw = json.loads(path.read_text(encoding="utf-8"))
    assert raw["mover"] == {"elasticity": 0.5}
    assert raw == scene_to_json(sim)

    loaded = load_scene(str(path))
    assert loaded.config == sim.config
    assert len(loaded.obstacles) == 2
    assert np.allclose(loaded.obstacles[0].position, (1.0, -2.0))
    assert loaded.obstacles[0].radius == 0.75
    assert loaded.obstacles[1].radius == 1.0

    loaded.init()
    assert len(loaded.movers) == 12


def test_obstacle_requires_position():
    with pytest.raises(ValueError):
        obstacle_from_json({"radius": 1.0})
    with pytest.raises(ValueError):
        obstacle_from_json({"position": [1.0]})


def test_invalid_values_rejected():
    with pytest.raises(ConfigurationError):
        config_from_json({"mover": {"mass": 0}})
    with pytest.raises(ConfigurationError):
        obstacle_from_json({"position": [0, 0], "radius": -2})
    with pytest.raises(ValueError):
        config_from_json({"environmental_force": [1.0, 2.0, 3.0]})


@pytest.mark.parametrize("value", [1.5, "3", True])
def test_integer_fields_not_coerced(value):
    with pytest.raises(ValueError):
        config_from_json({"seed": value})
    with pytest.raises(ValueError):
        config_from_json({"mover_count": value})


def test_integral_seed_accepted():
    assert config_from_json({"seed": 0}).seed == 0
    assert config_from_json({"seed": None}).seed is None
