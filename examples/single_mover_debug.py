# examples/single_mover_debug.py
from steering_sim import Simulation, SimulationConfig, Obstacle, FixedSpawner
from steering_sim.renderer import DebugRenderer

sim = Simulation(
    config=SimulationConfig(mover_count=1, show_debug=True),
    obstacles=[Obstacle(position=(0.0, 0.0), radius=1.0)],
    spawner=FixedSpawner([(-6.0, 0.0)]),
)
sim.init()

renderer = DebugRenderer(verbose=True, show_debug=sim.config.show_debug)
for tick in range(240):
    sim.step(1 / 60)
    if tick % 30 == 0:
        renderer.render_world(sim)
