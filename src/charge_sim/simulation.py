# MIT License (see LICENSE)
"""
The simulation state container and step function.

A tick runs four phases in a fixed order:
    1. Force field: net repulsive force on every particle.
    2. Integration: semi-implicit Euler (velocities, then positions).
    3. Walls: clamp and reflect particles crossing the box.
    4. Normalization: rescale velocities back to the reference energy.

The reference (snapshot) energy is explicit state: advance() takes the
previous snapshot and returns the next one. Simulation threads it across
calls to step() for drivers that just want to tick.

Structure:
    - User builds particles (see charge_sim.factory for random ones).
    - User creates a Simulation with the box extents.
    - A driver calls sim.step() on a timer and reads sim.total_energy().
"""
from __future__ import annotations
import logging
from contextlib import nullcontext
from dataclasses import dataclass, field
from typing import ContextManager, Sequence

from .collision.walls import resolve_wall_collisions
from .constants import (
    DEFAULT_HEIGHT,
    DEFAULT_MIN_DISTANCE,
    DEFAULT_WIDTH,
    FORCE_CONSTANT,
    PIXELS_PER_UNIT_LENGTH,
    TIME_STEP,
)
from .core.forces import compute_forces
from .core.integrators import semi_implicit_euler_step
from .core.invariants import kinetic_energy, total_energy
from .core.normalization import normalize_energy
from .profiler import Profiler
from .types import Particle

logger = logging.getLogger(__name__)


def _section(profiler: Profiler | None, name: str) -> ContextManager:
    return profiler.section(name) if profiler is not None else nullcontext()


def advance(
    particles: Sequence[Particle],
    dt: float,
    previous_energy: float,
    width: float,
    height: float,
    *,
    force_constant: float = FORCE_CONSTANT,
    pixels_per_unit: float = PIXELS_PER_UNIT_LENGTH,
    min_distance: float = DEFAULT_MIN_DISTANCE,
    profiler: Profiler | None = None,
) -> float:
    """
    Advance the particles by one time step.

    Particle state is modified in-place; nothing else is touched.

    Args:
        particles: The particle collection.
        dt: Time step.
        previous_energy: Total energy snapshot from before this step.
        width: Box width in pixels.
        height: Box height in pixels.
        force_constant: Repulsion strength k.
        pixels_per_unit: Scale from particle radius to pixels.
        min_distance: Distance clamp for coincident particles.
        profiler: Optional section timer.

    Returns:
        Total energy after the step, to pass as previous_energy next time.
        When normalization had to zero all velocities (the step gained more
        energy than it had kinetic energy), previous_energy is returned
        unchanged instead, so wall clamps cannot ratchet the reference up.
    """
    with _section(profiler, "forces"):
        forces = compute_forces(particles, force_constant, min_distance)

    with _section(profiler, "integrate"):
        semi_implicit_euler_step(forces, dt)

    with _section(profiler, "walls"):
        hits = resolve_wall_collisions(particles, width, height, pixels_per_unit)

    with _section(profiler, "normalize"):
        factor = normalize_energy(particles, previous_energy, force_constant, min_distance)
        energy = total_energy(particles, force_constant, min_distance)

    logger.debug("step: wall_hits=%d factor=%.9f energy=%.9g", hits, factor, energy)
    if factor == 0.0:
        # Reference not reached; keep it so later steps bleed off the excess.
        return previous_energy
    return energy


@dataclass
class Simulation:
    """
    Charged particle system inside a rectangular box.

    Attributes:
        particles: Ordered particle collection (order only matters to renderers).
        width: Box width in pixels.
        height: Box height in pixels.
        dt: Fixed time step.
        force_constant: Repulsion strength k.
        pixels_per_unit: Scale from particle radius to pixels.
        min_distance: Distance clamp for coincident particles.
        profiler: Optional Profiler instance for timing statistics.
        time: Simulated time elapsed.
        steps: Number of completed steps.
    """
    particles: list[Particle] = field(default_factory=list)
    width: float = DEFAULT_WIDTH
    height: float = DEFAULT_HEIGHT
    dt: float = TIME_STEP
    force_constant: float = FORCE_CONSTANT
    pixels_per_unit: float = PIXELS_PER_UNIT_LENGTH
    min_distance: float = DEFAULT_MIN_DISTANCE
    profiler: Profiler | None = None

    time: float = 0.0
    steps: int = 0

    def __post_init__(self) -> None:
        for name in ("dt", "width", "height", "force_constant", "pixels_per_unit", "min_distance"):
            value = getattr(self, name)
            if not value > 0:
                raise ValueError(f"Simulation {name} must be positive, got {value}")
        self.particles = list(self.particles)
        self._energy: float | None = None
        logger.info(
            "Simulation created: %d particles, box %gx%g, dt=%g, k=%g",
            len(self.particles), self.width, self.height, self.dt, self.force_constant,
        )

    def add_particle(self, particle: Particle) -> None:
        """Append a particle; the energy snapshot is re-captured on the next step."""
        self.particles.append(particle)
        self._energy = None

    def capture_energy(self) -> float:
        """Take the current total energy as the reference to hold constant."""
        self._energy = self.total_energy()
        return self._energy

    @property
    def energy_snapshot(self) -> float | None:
        """Reference energy for the next step, or None before the first capture."""
        return self._energy

    def total_energy(self) -> float:
        """Kinetic plus pairwise potential energy of the current state."""
        return total_energy(self.particles, self.force_constant, self.min_distance)

    def kinetic_energy(self) -> float:
        return kinetic_energy(self.particles)

    def step(self) -> None:
        """Advance the simulation by one time step."""
        if self._energy is None:
            self.capture_energy()

        self._energy = advance(
            self.particles,
            self.dt,
            self._energy,
            self.width,
            self.height,
            force_constant=self.force_constant,
            pixels_per_unit=self.pixels_per_unit,
            min_distance=self.min_distance,
            profiler=self.profiler,
        )
        self.time += self.dt
        self.steps += 1
