"""One-way conversion of ``Vec`` values into pygame's vector types."""

from __future__ import annotations

from pygame.math import Vector2, Vector3

from .vector import Vec


def to_pygame(v: Vec) -> Vector3:
    return Vector3(v.x, v.y, v.z)


def to_pygame_2d(v: Vec) -> Vector2:
    """Project onto the XY plane; z is dropped."""
    return Vector2(v.x, v.y)
