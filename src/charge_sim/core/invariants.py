# MIT License (see LICENSE)
"""
Utilities for calculating physical invariants and conserved quantities.

Total energy (kinetic + pairwise potential) is the quantity the
normalization step holds constant. Linear momentum is NOT conserved once
particles bounce off the walls, but is useful for checking the force field
in isolation (Newton's third law keeps it constant between wall hits).
"""
from __future__ import annotations
from typing import Sequence

import numpy as np

from ..constants import DEFAULT_MIN_DISTANCE, FORCE_CONSTANT
from ..types import Particle


def kinetic_energy(particles: Sequence[Particle]) -> float:
    """
    Total kinetic energy of the system.

    T = Σ ½ q v²
    """
    return float(sum(p.kinetic_energy() for p in particles))


def potential_energy(
    particles: Sequence[Particle],
    force_constant: float = FORCE_CONSTANT,
    min_distance: float = DEFAULT_MIN_DISTANCE,
) -> float:
    """
    Total pairwise potential energy, each unordered pair counted once.

    U = Σ_{i<j} k qi qj / d_ij
    """
    u = 0.0
    n = len(particles)
    for i in range(n):
        pi = particles[i]
        for j in range(i + 1, n):
            u += pi.potential_energy(particles[j], force_constant, min_distance)
    return u


def total_energy(
    particles: Sequence[Particle],
    force_constant: float = FORCE_CONSTANT,
    min_distance: float = DEFAULT_MIN_DISTANCE,
) -> float:
    """Kinetic plus potential energy of the system."""
    return kinetic_energy(particles) + potential_energy(particles, force_constant, min_distance)


def linear_momentum(particles: Sequence[Particle]) -> np.ndarray:
    """
    Total linear momentum, using charge as mass.

    P = Σ (q * v)

    Returns:
        Momentum vector [Px, Py].
    """
    p = np.zeros(2, dtype=np.float64)
    for particle in particles:
        p += particle.charge * particle.velocity.to_array()
    return p
