"""Aim-point solver — lead targeting through the next checkpoint.

Instead of steering at the checkpoint centre, the pod aims at the point where
its velocity line crosses the line through the checkpoint perpendicular to
the pod→checkpoint direction.  That point is clamped to one capture radius
from the centre so near-parallel velocity lines cannot produce wild targets.

Every degenerate configuration falls back to aiming at the centre.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from podracer.geometry.vector import Position, Vector2, intersect_lines

CAPTURE_RADIUS = 600.0
HEADING_THRESHOLD_DEG = 90.0

# Reasons reported alongside each aim point
ZERO_VELOCITY = "zero_velocity"
ON_CHECKPOINT = "on_checkpoint"
MOVING_AWAY = "moving_away"
DEGENERATE = "degenerate"
CLAMPED = "clamped"
LEAD = "lead"


@dataclass(frozen=True)
class AimResult:
    """Aim point for one tick and the branch of the solver that produced it."""

    target: Position
    reason: str


class AimPointSolver:
    """Compute the point a pod should steer toward this tick.

    Args:
        capture_radius: Maximum allowed distance between the aim point and
            the checkpoint centre.
        heading_threshold_deg: When the velocity points this far or further
            away from the checkpoint, no lead is applied.
    """

    def __init__(
        self,
        capture_radius: float = CAPTURE_RADIUS,
        heading_threshold_deg: float = HEADING_THRESHOLD_DEG,
    ) -> None:
        if capture_radius <= 0:
            raise ValueError("capture_radius must be > 0")
        self.capture_radius = capture_radius
        self.heading_threshold = math.radians(heading_threshold_deg)

    def solve(self, position: Vector2, velocity: Vector2, checkpoint: Position) -> AimResult:
        """Return the aim point for a pod at *position* moving with *velocity*."""
        centre = Vector2.from_position(checkpoint)

        if velocity.is_zero():
            return AimResult(checkpoint, ZERO_VELOCITY)

        pod_to_cp = centre.subtract(position)
        if pod_to_cp.is_zero():
            return AimResult(checkpoint, ON_CHECKPOINT)

        perpendicular = pod_to_cp.rotate(math.pi / 2.0)
        angle = pod_to_cp.get_angle(velocity)
        if abs(angle) >= self.heading_threshold:
            return AimResult(checkpoint, MOVING_AWAY)

        if (
            perpendicular.x - velocity.x == 0.0
            or perpendicular.y - velocity.y == 0.0
            or perpendicular.determinant(velocity) == 0.0
        ):
            return AimResult(checkpoint, DEGENERATE)

        intersection = intersect_lines(centre, perpendicular, position, velocity)
        if not intersection.is_finite():
            return AimResult(checkpoint, DEGENERATE)

        offset = intersection.subtract(centre)
        if offset.module() > self.capture_radius:
            edge = offset.get_unitary().multiply(self.capture_radius).to_position()
            # offset truncated toward the centre keeps the point inside the radius
            return AimResult(Position(checkpoint.x + edge.x, checkpoint.y + edge.y), CLAMPED)
        return AimResult(intersection.to_position(), LEAD)
