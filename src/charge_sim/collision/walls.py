# MIT License (see LICENSE)
"""
Reflection off the axis-aligned walls of the simulation box.

The box spans [0, width] x [0, height] in pixels. Particle radii are in
world units and are scaled by pixels_per_unit before testing. Each axis
is handled independently: a particle in a corner can bounce off two
walls in the same tick.
"""
from __future__ import annotations
from typing import Iterable

from ..constants import PIXELS_PER_UNIT_LENGTH
from ..types import Particle, Vector2


def _reflect_axis(
    position: float, velocity: float, r: float, bound: float
) -> tuple[float, float, bool]:
    """
    Clamp one coordinate into [r, bound - r], flipping velocity on contact.

    Returns (position, velocity, hit).
    """
    if position - r < 0:
        return r, -velocity, True
    if position + r > bound:
        return bound - r, -velocity, True
    return position, velocity, False


def resolve_wall_collisions(
    particles: Iterable[Particle],
    width: float,
    height: float,
    pixels_per_unit: float = PIXELS_PER_UNIT_LENGTH,
) -> int:
    """
    Reflect particles whose extent crosses a wall.

    Position is clamped so the particle touches the wall, and the velocity
    component normal to that wall is negated (magnitude unchanged).

    Args:
        particles: Particles to test, modified in-place.
        width: Right wall x coordinate.
        height: Bottom wall y coordinate.
        pixels_per_unit: Scale from radius units to pixels.

    Returns:
        Number of wall contacts resolved (a corner hit counts twice).
    """
    hits = 0
    for p in particles:
        r = p.radius * pixels_per_unit
        x, vx, hit_x = _reflect_axis(p.position.x, p.velocity.x, r, width)
        y, vy, hit_y = _reflect_axis(p.position.y, p.velocity.y, r, height)
        if hit_x or hit_y:
            p.position = Vector2(x, y)
            p.velocity = Vector2(vx, vy)
            hits += hit_x + hit_y
    return hits
