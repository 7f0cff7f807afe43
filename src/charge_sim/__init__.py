# MIT License (see LICENSE)
"""
charge_sim - A 2D charged particle simulation.

Point particles repel each other with an inverse-square force, move with
semi-implicit Euler integration, bounce off the walls of a rectangular
box, and have their velocities rescaled every step so the total energy
stays constant.

Main entry points:
    - Simulation: The particle box, with step() and total_energy().
    - advance: The step as a function of explicit state.
    - Particle: A charged point particle.
    - Vector2: Immutable 2D vector.

Submodules:
    - core: Force field, integrator, energy invariants and normalization.
    - collision: Wall reflection.
    - factory: Random particle generation.
    - renderer: Optional visualization adapters.

Example:
    from charge_sim import Simulation, Particle

    sim = Simulation(width=800, height=600)
    sim.add_particle(Particle(charge=10, radius=1, position=(200, 300)))
    sim.add_particle(Particle(charge=20, radius=2, position=(600, 300)))
    sim.step()
"""
from .simulation import Simulation, advance
from .types import Particle, Vector2

__all__ = [
    # Simulation
    "Simulation",
    "advance",
    # Types
    "Particle",
    "Vector2",
]
