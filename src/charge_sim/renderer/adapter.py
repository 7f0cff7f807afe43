# MIT License (see LICENSE)
"""
Renderer adapters for simulation visualization.

Renderers only read a particle's position, radius and color, plus the
simulation's total energy for the on-screen readout. They must be called
between steps, never during one. The core has no rendering dependency.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, TextIO
import sys

from ..types import Particle

if TYPE_CHECKING:
    from ..simulation import Simulation


class RendererAdapter(ABC):
    """
    Abstract base class for renderer implementations.

    Subclasses integrate with a graphics backend (pygame, matplotlib, a
    web canvas, ...).

    Usage:
        renderer.begin_frame(sim.time, sim.total_energy())
        for particle in sim.particles:
            renderer.draw_particle(particle)
        renderer.end_frame()

    Or use the convenience method:
        renderer.render_simulation(sim)
    """

    @abstractmethod
    def begin_frame(self, time: float, total_energy: float) -> None:
        """
        Begin a new frame.

        Args:
            time: Simulated time.
            total_energy: Current total energy, for display.
        """
        ...

    @abstractmethod
    def draw_particle(self, particle: Particle) -> None:
        """Draw a single particle."""
        ...

    @abstractmethod
    def end_frame(self) -> None:
        """Finalize the current frame."""
        ...

    def render_simulation(self, sim: "Simulation") -> None:
        """Render every particle of sim, in collection order."""
        self.begin_frame(sim.time, sim.total_energy())
        for particle in sim.particles:
            self.draw_particle(particle)
        self.end_frame()


class DebugRenderer(RendererAdapter):
    """
    Text renderer writing one line per particle to a stream.

    Output:
        === Frame t=0.2000 ===
        Total Energy: 412345.678
        [0] #a3f00c q=10.00 r=1.00 @ (103.21, 54.10) v=(0.31, 0.92)
    """

    def __init__(self, output: TextIO | None = None, verbose: bool = True):
        """
        Args:
            output: Output stream (defaults to sys.stdout).
            verbose: If True, include charge and velocity.
        """
        self.output = output or sys.stdout
        self.verbose = verbose
        self._index = 0

    def begin_frame(self, time: float, total_energy: float) -> None:
        self._index = 0
        self.output.write(f"=== Frame t={time:.4f} ===\n")
        self.output.write(f"Total Energy: {total_energy:.3f}\n")

    def draw_particle(self, particle: Particle) -> None:
        pos = particle.position
        line = f"[{self._index}] {particle.color} "
        if self.verbose:
            line += f"q={particle.charge:.2f} "
        line += f"r={particle.radius:.2f} @ ({pos.x:.2f}, {pos.y:.2f})"
        if self.verbose:
            vel = particle.velocity
            line += f" v=({vel.x:.2f}, {vel.y:.2f})"
        self.output.write(line + "\n")
        self._index += 1

    def end_frame(self) -> None:
        self.output.write("\n")
        self.output.flush()


class NullRenderer(RendererAdapter):
    """No-op renderer, for benchmarks and headless runs."""

    def begin_frame(self, time: float, total_energy: float) -> None:
        pass

    def draw_particle(self, particle: Particle) -> None:
        pass

    def end_frame(self) -> None:
        pass


class BufferedRenderer(RendererAdapter):
    """
    Renderer that records the display state of each frame.

    Example:
        renderer = BufferedRenderer()
        for _ in range(100):
            sim.step()
            renderer.render_simulation(sim)

        energies = [frame["total_energy"] for frame in renderer.frames]
    """

    def __init__(self):
        self.frames: list[dict[str, Any]] = []
        self._current_frame: dict[str, Any] | None = None

    def begin_frame(self, time: float, total_energy: float) -> None:
        self._current_frame = {
            "time": time,
            "total_energy": total_energy,
            "particles": [],
        }

    def draw_particle(self, particle: Particle) -> None:
        if self._current_frame is None:
            return
        self._current_frame["particles"].append({
            "position": [particle.position.x, particle.position.y],
            "radius": particle.radius,
            "color": particle.color,
        })

    def end_frame(self) -> None:
        if self._current_frame is not None:
            self.frames.append(self._current_frame)
            self._current_frame = None

    def clear(self) -> None:
        self.frames.clear()
