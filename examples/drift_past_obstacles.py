# examples/drift_past_obstacles.py
from steering_sim import Simulation, SimulationConfig, Obstacle
from steering_sim.core.invariants import max_speed

sim = Simulation(
    config=SimulationConfig(mover_count=300, seed=2024),
    obstacles=[
        Obstacle(position=(-4.0, 2.0), radius=1.5),
        Obstacle(position=(0.0, -1.5), radius=1.0),
        Obstacle(position=(4.5, 1.0), radius=2.0),
    ],
)
sim.init()

dt = 1 / 60
while sim.time < 10.0:
    sim.step(dt)

print("t:", round(sim.time, 3), "ticks:", sim.ticks)
print("max speed:", max_speed(sim.movers))
print("first mover:", sim.movers[0])
