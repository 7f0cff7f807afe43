# MIT License (see LICENSE)
"""
Core physics components.

This subpackage provides:
    - Force field: pairwise inverse-square repulsion.
    - Integrator: semi-implicit Euler (accelerate, then move).
    - Invariants: kinetic, potential and total energy; momentum.
    - Normalization: velocity rescaling that holds total energy fixed.

Typical usage:
    from charge_sim.core import compute_forces, accelerate, move

    forces = compute_forces(particles)
    accelerate(forces, dt=0.1)
    move(particles, dt=0.1)
"""
from .forces import compute_forces, net_force
from .integrators import accelerate, move, semi_implicit_euler_step
from .invariants import kinetic_energy, potential_energy, total_energy, linear_momentum
from .normalization import normalize_energy, normalization_factor

__all__ = [
    # Forces
    "compute_forces",
    "net_force",
    # Integrator
    "accelerate",
    "move",
    "semi_implicit_euler_step",
    # Invariants
    "kinetic_energy",
    "potential_energy",
    "total_energy",
    "linear_momentum",
    # Normalization
    "normalize_energy",
    "normalization_factor",
]
