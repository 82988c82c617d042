# examples/load_scene.py
import logging
import os

from steering_sim.io import load_scene

logging.basicConfig(level=logging.INFO)

path = os.path.join(os.path.dirname(__file__), "river_scene.json")
sim = load_scene(path)
sim.init()
sim.run(600, 1 / 60)

print("obstacles:", len(sim.obstacles))
print("movers:", len(sim.movers))
print("t:", round(sim.time, 3))
