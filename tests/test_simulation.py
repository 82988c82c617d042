# MIT License (see LICENSE)
import numpy as np
import pytest

from steering_sim import (
    Simulation,
    SimulationConfig,
    Obstacle,
    MoverParams,
    ConfigurationError,
    FixedSpawner,
    Phase,
)
from steering_sim.core.invariants import speed_limit_violations
from steering_sim.profiler import Profiler


def test_init_spawns_population_inside_viewport():
    sim = Simulation(config=SimulationConfig(mover_count=250, seed=1))
    assert sim.phase is Phase.INIT
    assert sim.movers == []

    sim.init()

    assert sim.phase is Phase.RUNNING
    assert len(sim.movers) == 250
    assert [m.id for m in sim.movers] == list(range(1, 251))
    assert all(sim.viewport.contains(m.position) for m in sim.movers)
    assert all(np.array_equal(m.velocity, (0.0, 0.0)) for m in sim.movers)


def test_default_population():
    sim = Simulation(config=SimulationConfig(seed=0))
    sim.init()
    assert len(sim.movers) == 1000
    assert np.allclose(sim.environmental_force, (0.1, 0.0))


def test_lifecycle_errors():
    sim = Simulation(config=SimulationConfig(mover_count=3, seed=0))
    with pytest.raises(RuntimeError):
        sim.step(1 / 60)
    sim.init()
    with pytest.raises(RuntimeError):
        sim.init()
    with pytest.raises(ValueError):
        sim.step(0.0)
    with pytest.raises(ValueError):
        sim.step(-1 / 60)
    with pytest.raises(ValueError):
        sim.step(float("inf"))
    with pytest.raises(ValueError):
        sim.step(float("nan"))
    assert sim.ticks == 0


@pytest.mark.parametrize(
    "config",
    [
        SimulationConfig(mover=MoverParams(mass=-1.0)),
        SimulationConfig(mover=MoverParams(speed_limit=0.0)),
        SimulationConfig(mover=MoverParams(radius=-1.0)),
        SimulationConfig(mover_count=-1),
        SimulationConfig(width=0.0),
        SimulationConfig(pixels_per_unit=-40.0),
        SimulationConfig(lateral_margin=-0.1),
        SimulationConfig(environmental_force=(float("nan"), 0.0)),
        SimulationConfig(environmental_force=(0.1, float("inf"))),
        SimulationConfig(environmental_force=(0.1,)),
        SimulationConfig(width=float("inf")),
        SimulationConfig(center=(0.0, float("nan"))),
    ],
)
def test_invalid_config_rejected(config):
    with pytest.raises(ConfigurationError):
        Simulation(config=config)


def test_obstacles_must_be_obstacles():
    with pytest.raises(TypeError):
        Simulation(obstacles=[(0.0, 0.0, 1.0)])


def test_shared_state_is_read_only():
    sim = Simulation(
        config=SimulationConfig(mover_count=1, seed=0),
        obstacles=[Obstacle(position=(0.0, 0.0))],
    )
    assert isinstance(sim.obstacles, tuple)
    with pytest.raises(ValueError):
        sim.environmental_force[0] = 1.0


def test_speed_limit_holds_every_tick():
    sim = Simulation(
        config=SimulationConfig(mover_count=200, seed=7),
        obstacles=[
            Obstacle(position=(-4.0, 1.0), radius=1.0),
            Obstacle(position=(0.0, -2.0), radius=1.5),
            Obstacle(position=(5.0, 3.0), radius=0.5),
        ],
    )
    sim.init()
    for _ in range(300):
        sim.step(1 / 60)
        assert speed_limit_violations(sim.movers) == []
    assert sim.ticks == 300
    assert sim.time == pytest.approx(5.0)


def test_same_seed_same_trajectories():
    def run():
        sim = Simulation(
            config=SimulationConfig(mover_count=50, seed=123),
            obstacles=[Obstacle(position=(1.0, 0.0), radius=2.0)],
        )
        sim.init()
        sim.run(400, 1 / 30)
        return np.array([m.position for m in sim.movers])

    assert np.array_equal(run(), run())


def test_free_mover_accelerates_then_cruises():
    """
    No obstacles, force (0.1, 0), mu = 0.01, dt = 1/60. Net gain per tick
    once moving is (0.1 - 0.01) / 60 = 0.0015, so the 0.125 limit is
    reached after ~84 ticks. x increases every tick; afterwards |v| is constant.
    """
    # Wide viewport: x in [-100, 100], no wrap within the run
    config = SimulationConfig(mover_count=1, width=8000.0)
    sim = Simulation(config=config, spawner=FixedSpawner([(0.0, 0.0)]))
    sim.init()
    mover = sim.movers[0]

    xs, speeds = [], []
    for _ in range(200):
        sim.step(1 / 60)
        xs.append(mover.position[0])
        speeds.append(mover.speed)

    assert all(b > a for a, b in zip(xs, xs[1:]))
    assert mover.position[1] == 0.0
    assert all(b >= a for a, b in zip(speeds[:80], speeds[1:81]))
    for s in speeds[120:]:
        assert s == pytest.approx(0.125, abs=1e-12)


def test_mover_swerves_around_obstacle_in_path():
    """
    Obstacle dead ahead: dot(left, to_obstacle) = 0, which counts as "on the
    left", so the mover is pushed to its right (negative y).
    """
    config = SimulationConfig(mover_count=1)
    sim = Simulation(
        config=config,
        obstacles=[Obstacle(position=(0.0, 0.0), radius=1.0)],
        spawner=FixedSpawner([(-5.0, 0.0)]),
    )
    sim.init()
    sim.run(60, 1 / 60)

    mover = sim.movers[0]
    assert mover.position[1] < 0.0
    assert mover.velocity[1] < 0.0


def test_out_of_bounds_spawn_corrected_on_first_tick():
    """Default viewport spans y in [-7.5, 7.5]; a spawn at y = -100 lands on the floor."""
    sim = Simulation(
        config=SimulationConfig(mover_count=1),
        spawner=FixedSpawner([(0.0, -100.0)]),
    )
    sim.init()
    sim.step(1 / 60)
    assert sim.movers[0].position[1] == pytest.approx(-7.5)


def test_fixed_spawner_count_mismatch():
    sim = Simulation(
        config=SimulationConfig(mover_count=2),
        spawner=FixedSpawner([(0.0, 0.0)]),
    )
    with pytest.raises(ConfigurationError):
        sim.init()


@pytest.mark.parametrize("position", [(0.0, 0.0, 0.0), (float("inf"), 0.0), 1.0])
def test_fixed_spawner_rejects_bad_positions(position):
    with pytest.raises(ConfigurationError):
        FixedSpawner([(1.0, 1.0), position])


def test_non_finite_speed_counts_as_violation():
    sim = Simulation(
        config=SimulationConfig(mover_count=2),
        spawner=FixedSpawner([(0.0, 0.0), (1.0, 1.0)]),
    )
    sim.init()
    assert speed_limit_violations(sim.movers) == []

    # Only reachable through internal state; constructors reject it
    sim.movers[1]._velocity = np.array([np.nan, 0.0])
    assert speed_limit_violations(sim.movers) == [sim.movers[1]]
    sim.movers[1]._velocity = np.array([np.inf, 0.0])
    assert speed_limit_violations(sim.movers) == [sim.movers[1]]


def test_profiler_sections():
    prof = Profiler()
    sim = Simulation(config=SimulationConfig(mover_count=10, seed=0), profiler=prof)
    sim.init()
    sim.run(5, 1 / 60)
    summary = prof.stats.summary()
    assert summary["steer"]["n"] == 5
    assert summary["integrate"]["n"] == 5
    assert prof.stats.total("steer") >= 0.0
