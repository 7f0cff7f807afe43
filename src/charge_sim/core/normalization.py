# MIT License (see LICENSE)
"""
Energy normalization.

Discrete-time pairwise forces are not exactly energy conserving, and the
wall clamp moves particles without doing work. After each step the total
energy E_after therefore differs from the reference E_before. Scaling all
velocities by a common factor f changes only the kinetic term:

    E_before = U_after + f² T_after
    f = sqrt((E_before - E_after) / T_after + 1)

which restores the reference exactly whenever the radicand is >= 0.
Otherwise all velocities are zeroed and the caller keeps its reference.
"""
from __future__ import annotations
import logging
import math
from typing import Sequence

from ..constants import DEFAULT_MIN_DISTANCE, FORCE_CONSTANT
from ..types import Particle
from .invariants import kinetic_energy, total_energy

logger = logging.getLogger(__name__)


def normalization_factor(reference_energy: float, energy: float, kinetic: float) -> float:
    """
    Velocity scale factor that brings energy back to reference_energy.

    Returns 1.0 when there is no kinetic energy to rescale. A negative
    radicand means even zero velocity cannot remove the excess energy; it
    is clamped to 0 so the result is never NaN.
    """
    if kinetic <= 0.0:
        return 1.0
    radicand = (reference_energy - energy) / kinetic + 1.0
    if radicand < 0.0:
        logger.warning(
            "Energy excess %.6g exceeds kinetic energy %.6g; zeroing velocities",
            energy - reference_energy, kinetic,
        )
        return 0.0
    return math.sqrt(radicand)


def normalize_energy(
    particles: Sequence[Particle],
    reference_energy: float,
    force_constant: float = FORCE_CONSTANT,
    min_distance: float = DEFAULT_MIN_DISTANCE,
) -> float:
    """
    Rescale all velocities so the total energy matches reference_energy.

    Args:
        particles: Particle collection, modified in-place.
        reference_energy: Total energy held before the step.
        force_constant: Repulsion strength k.
        min_distance: Distance clamp for coincident particles.

    Returns:
        The factor applied to every velocity (1.0 if skipped).
    """
    kinetic = kinetic_energy(particles)
    if kinetic <= 0.0:
        logger.debug("No kinetic energy; skipping normalization")
        return 1.0

    energy = total_energy(particles, force_constant, min_distance)
    factor = normalization_factor(reference_energy, energy, kinetic)
    for p in particles:
        p.velocity = p.velocity.scale(factor)
    return factor
