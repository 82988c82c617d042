# MIT License (see LICENSE)
"""
Renderer adapters for steering simulation visualization.

Renderers are read-only consumers: after every tick they read each
mover's position and orientation, plus the obstacle layout. The
debug overlay (radii) is switched per renderer through `show_debug`;
it never affects the simulation.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, TextIO
import sys

from ..types import Mover, Obstacle

if TYPE_CHECKING:
    from ..world import Simulation


class RendererAdapter(ABC):
    """
    Abstract base class for renderer implementations.

    Usage:
        renderer.begin_frame(sim.time)
        for obstacle in sim.obstacles:
            renderer.draw_obstacle(obstacle)
        for mover in sim.movers:
            renderer.draw_mover(mover)
        renderer.end_frame()

    Or use the convenience method:
        renderer.render_world(sim)
    """

    def __init__(self, show_debug: bool = False):
        self.show_debug = show_debug

    @abstractmethod
    def begin_frame(self, time: float) -> None:
        ...

    @abstractmethod
    def draw_obstacle(self, obstacle: Obstacle) -> None:
        ...

    @abstractmethod
    def draw_mover(self, mover: Mover) -> None:
        ...

    @abstractmethod
    def end_frame(self) -> None:
        ...

    def render_world(self, sim: "Simulation") -> None:
        """Draw every obstacle and mover of a simulation as one frame."""
        self.begin_frame(sim.time)
        for obstacle in sim.obstacles:
            self.draw_obstacle(obstacle)
        for mover in sim.movers:
            self.draw_mover(mover)
        self.end_frame()


class DebugRenderer(RendererAdapter):
    """
    Text renderer writing one line per entity to a stream (stdout by default).

    Output:
        === Frame t=0.0333 ===
        obstacle @ (2.00, 0.50)
        [1] @ (-3.91, 1.20) θ=0.00
        [2] @ (4.07, -2.33) θ=0.12
    """

    def __init__(self, output: TextIO | None = None, verbose: bool = True, show_debug: bool = False):
        """
        Args:
            output: Output stream (defaults to sys.stdout).
            verbose: If True, include velocity.
            show_debug: If True, include radii.
        """
        super().__init__(show_debug=show_debug)
        self.output = output or sys.stdout
        self.verbose = verbose

    def begin_frame(self, time: float) -> None:
        self.output.write(f"=== Frame t={time:.4f} ===\n")

    def draw_obstacle(self, obstacle: Obstacle) -> None:
        pos = obstacle.position
        line = f"obstacle @ ({pos[0]:.2f}, {pos[1]:.2f})"
        if self.show_debug:
            line += f" r={obstacle.radius:.2f}"
        self.output.write(line + "\n")

    def draw_mover(self, mover: Mover) -> None:
        pos = mover.position
        line = f"[{mover.id}] @ ({pos[0]:.2f}, {pos[1]:.2f}) θ={mover.orientation:.2f}"
        if self.verbose:
            vel = mover.velocity
            line += f" v=({vel[0]:.3f}, {vel[1]:.3f})"
        if self.show_debug:
            line += f" r={mover.params.radius:.2f}"
        self.output.write(line + "\n")

    def end_frame(self) -> None:
        self.output.write("\n")
        self.output.flush()


class NullRenderer(RendererAdapter):
    """No-op renderer, for benchmarks without drawing overhead."""

    def begin_frame(self, time: float) -> None:
        pass

    def draw_obstacle(self, obstacle: Obstacle) -> None:
        pass

    def draw_mover(self, mover: Mover) -> None:
        pass

    def end_frame(self) -> None:
        pass


class BufferedRenderer(RendererAdapter):
    """
    Records frames as plain dictionaries for playback or export.

    Each frame is {"time", "obstacles", "movers"}. Entries carry a "radius"
    key only when show_debug is set.

    Example:
        renderer = BufferedRenderer()
        for _ in range(100):
            sim.step(1/60)
            renderer.render_world(sim)
        print(len(renderer.frames))
    """

    def __init__(self, show_debug: bool = False):
        super().__init__(show_debug=show_debug)
        self.frames: list[dict] = []
        self._current_frame: dict | None = None

    def begin_frame(self, time: float) -> None:
        self._current_frame = {"time": time, "obstacles": [], "movers": []}

    def draw_obstacle(self, obstacle: Obstacle) -> None:
        if self._current_frame is None:
            return
        entry = {"position": obstacle.position.tolist()}
        if self.show_debug:
            entry["radius"] = obstacle.radius
        self._current_frame["obstacles"].append(entry)

    def draw_mover(self, mover: Mover) -> None:
        if self._current_frame is None:
            return
        entry = {
            "id": mover.id,
            "position": mover.position.tolist(),
            "orientation": mover.orientation,
        }
        if self.show_debug:
            entry["radius"] = mover.params.radius
        self._current_frame["movers"].append(entry)

    def end_frame(self) -> None:
        if self._current_frame is not None:
            self.frames.append(self._current_frame)
            self._current_frame = None

    def clear(self) -> None:
        self.frames.clear()
