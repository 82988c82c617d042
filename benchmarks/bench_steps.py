"""
Microbenchmark: time per tick vs number of movers and obstacles.
Run:
  python benchmarks/bench_steps.py
"""
import time
import numpy as np
from steering_sim import Simulation, SimulationConfig, Obstacle
from steering_sim.profiler import Profiler


def run(n: int, n_obstacles: int, steps: int = 200):
    prof = Profiler()
    rng = np.random.default_rng(12345)
    obstacles = [
        Obstacle(position=(rng.uniform(-9, 9), rng.uniform(-6, 6)), radius=rng.uniform(0.3, 1.5))
        for _ in range(n_obstacles)
    ]
    sim = Simulation(
        config=SimulationConfig(mover_count=n, seed=12345),
        obstacles=obstacles,
        profiler=prof,
    )
    sim.init()

    # warmup
    sim.run(20, 1 / 60)
    prof.reset()

    t0 = time.perf_counter()
    sim.run(steps, 1 / 60)
    t1 = time.perf_counter()

    per_step = (t1 - t0) / steps
    return per_step, prof.stats.summary()


if __name__ == "__main__":
    for n in [100, 500, 1000]:
        for m in [0, 5, 20]:
            per_step, summary = run(n, m)
            print(f"N={n:5d} M={m:3d}  tick={1e3*per_step:8.3f} ms  ticks/s={1/per_step:8.1f}")
            for k in ["steer", "integrate"]:
                if k in summary:
                    print(" ", k, summary[k])
        print()
