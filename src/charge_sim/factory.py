# MIT License (see LICENSE)
"""
Random particle generation.

Particles are scattered uniformly inside the box with small non-negative
initial velocities. All randomness goes through a numpy Generator so runs
are reproducible from a seed.

Example:
    rng = np.random.default_rng(12345)
    particles = random_particles(10, 800, 600, rng)
"""
from __future__ import annotations

import numpy as np

from .constants import (
    MAXIMUM_INITIAL_VELOCITY,
    MAXIMUM_PARTICLE_CHARGE,
    MINIMUM_PARTICLE_CHARGE,
    PIXELS_PER_UNIT_LENGTH,
)
from .types import Particle, Vector2


def random_color(rng: np.random.Generator) -> str:
    """Random '#rrggbb' color string."""
    digits = rng.integers(0, 16, size=6)
    return "#" + "".join(f"{int(d):x}" for d in digits)


def random_particle(
    width: float,
    height: float,
    rng: np.random.Generator,
    charge: float | None = None,
    max_initial_velocity: float = MAXIMUM_INITIAL_VELOCITY,
    pixels_per_unit: float = PIXELS_PER_UNIT_LENGTH,
) -> Particle:
    """
    Create one particle at a uniform random position inside the box.

    Args:
        width: Box width in pixels.
        height: Box height in pixels.
        rng: Source of randomness.
        charge: Fixed charge, or None to draw uniformly from
                [MINIMUM_PARTICLE_CHARGE, MAXIMUM_PARTICLE_CHARGE].
        max_initial_velocity: Exclusive upper bound of each velocity component.
        pixels_per_unit: Radius is charge / pixels_per_unit world units.
    """
    if charge is None:
        charge = float(rng.uniform(MINIMUM_PARTICLE_CHARGE, MAXIMUM_PARTICLE_CHARGE))
    x, y = rng.uniform(0.0, 1.0, size=2) * (width, height)
    vx, vy = rng.uniform(0.0, max_initial_velocity, size=2)
    return Particle(
        charge=charge,
        radius=charge / pixels_per_unit,
        color=random_color(rng),
        position=Vector2(float(x), float(y)),
        velocity=Vector2(float(vx), float(vy)),
    )


def random_particles(
    n: int,
    width: float,
    height: float,
    rng: np.random.Generator | None = None,
    **kwargs,
) -> list[Particle]:
    """Create n random particles; extra keyword arguments go to random_particle."""
    if rng is None:
        rng = np.random.default_rng()
    return [random_particle(width, height, rng, **kwargs) for _ in range(n)]
