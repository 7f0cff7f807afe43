# MIT License (see LICENSE)
"""
Semi-implicit (symplectic) Euler integration.

A step is split into two passes over the whole collection:
    v(t+dt) = v(t) + F(x(t)) / q · dt      (accelerate)
    x(t+dt) = x(t) + v(t+dt) · dt          (move)

All velocities are finalized before any position changes, and the forces
come from the positions at the start of the step. Reordering the passes
or interleaving them per particle changes the energy error the
normalization step has to absorb.

Reference:
    https://en.wikipedia.org/wiki/Semi-implicit_Euler_method
"""
from __future__ import annotations
from typing import Iterable, Mapping

from ..types import Particle, Vector2


def accelerate(forces: Mapping[Particle, Vector2], dt: float) -> None:
    """
    Update every particle's velocity from its net force.

    The charge is the inertial mass: a = F / q.

    Args:
        forces: Net force per particle, as returned by compute_forces.
        dt: Time step.
    """
    for particle, force in forces.items():
        acceleration = force.scale(1.0 / particle.charge)
        particle.velocity = particle.velocity.add(acceleration.scale(dt))


def move(particles: Iterable[Particle], dt: float) -> None:
    """Advance every particle's position along its (already updated) velocity."""
    for particle in particles:
        particle.position = particle.position.add(particle.velocity.scale(dt))


def semi_implicit_euler_step(forces: Mapping[Particle, Vector2], dt: float) -> None:
    """Run accelerate then move over the particles in forces."""
    accelerate(forces, dt)
    move(forces.keys(), dt)
