"""2D geometry primitives."""

from podracer.geometry.vector import Position, Vector2, intersect_lines

__all__ = ["Position", "Vector2", "intersect_lines"]
