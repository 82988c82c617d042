# MIT License (see LICENSE)
"""
Timing of simulation phases.

Attach a Profiler to a Simulation to measure the steering and integration
passes of every tick.

Example:
    profiler = Profiler()
    sim = Simulation(config, obstacles, profiler=profiler)
    sim.init()
    sim.run(100, dt=1/60)
    print(profiler.stats.summary()["steer"]["mean_ms"])
"""
from __future__ import annotations
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator
import time


@dataclass
class ProfileStats:
    """Raw timing samples (seconds) per named section."""
    samples: dict[str, list[float]] = field(default_factory=dict)

    def add(self, name: str, dt: float) -> None:
        self.samples.setdefault(name, []).append(dt)

    def total(self, name: str) -> float:
        """Total seconds spent in a section (0.0 if never entered)."""
        return sum(self.samples.get(name, ()))

    def summary(self) -> dict[str, dict[str, float]]:
        """
        Per-section statistics.

        Returns:
            Dict mapping section name to {'n', 'mean_ms', 'max_ms'}.
        """
        out = {}
        for name, times in self.samples.items():
            out[name] = {
                "n": len(times),
                "mean_ms": 1e3 * (sum(times) / len(times)),
                "max_ms": 1e3 * max(times),
            }
        return out


class Profiler:
    """Collects ProfileStats through `with profiler.section(name):` blocks."""

    def __init__(self) -> None:
        self.stats = ProfileStats()

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        t0 = time.perf_counter()
        try:
            yield
        finally:
            self.stats.add(name, time.perf_counter() - t0)

    def reset(self) -> None:
        self.stats = ProfileStats()
