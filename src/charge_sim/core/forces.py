# MIT License (see LICENSE)
"""
Pairwise force accumulation.

Every particle repels every other one with an inverse-square force
(see Particle.force_from). The net force on each particle is collected
into a mapping before any state changes, so all forces of a step are
computed from the same start-of-step position snapshot.

Complexity: O(N²) per step. The simulation targets tens of particles;
for thousands, a Barnes-Hut or FMM approximation would be required
(not implemented).
"""
from __future__ import annotations
from typing import Sequence

from ..constants import DEFAULT_MIN_DISTANCE, FORCE_CONSTANT
from ..types import Particle, Vector2, ZERO


def net_force(
    particle: Particle,
    particles: Sequence[Particle],
    force_constant: float = FORCE_CONSTANT,
    min_distance: float = DEFAULT_MIN_DISTANCE,
) -> Vector2:
    """
    Sum of the forces every member of particles exerts on particle.

    particle may itself be in the collection; its own term is zero.
    """
    total = ZERO
    for other in particles:
        total = total.add(particle.force_from(other, force_constant, min_distance))
    return total


def compute_forces(
    particles: Sequence[Particle],
    force_constant: float = FORCE_CONSTANT,
    min_distance: float = DEFAULT_MIN_DISTANCE,
) -> dict[Particle, Vector2]:
    """
    Compute the net force on each particle.

    Args:
        particles: The full particle collection.
        force_constant: Repulsion strength k.
        min_distance: Distance clamp for coincident particles.

    Returns:
        Mapping from each particle (by identity) to its net force, in
        collection order.
    """
    return {
        p: net_force(p, particles, force_constant, min_distance)
        for p in particles
    }
