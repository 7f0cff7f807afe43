# MIT License (see LICENSE)
"""
Boundary collision.

Particles never collide with each other (they interact only through the
force field); the only collisions are with the walls of the box.
"""
from .walls import resolve_wall_collisions

__all__ = ["resolve_wall_collisions"]
