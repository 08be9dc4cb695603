"""Thrust policy — engine power from heading error, proximity and the next turn."""

from __future__ import annotations

import enum
import math

from podracer.geometry.vector import Position, Vector2

CRITICAL_ANGLE = 70.0
MIN_THRUST = 15
MAX_THRUST = 100
UNKNOWN_TURN_SPEED = 500.0
SHARP_TURN_SPEED = 400.0


class ThrustReduction(str, enum.Enum):
    """How thrust is lowered before a sharp turn taken at speed."""

    PROPORTIONAL = "proportional"
    """Scale between min and max thrust by ``|curvature| / (180 - critical)``."""

    FIXED = "fixed"
    """Always drop to the minimum thrust."""


def curvature_angle(position: Vector2, checkpoint: Position, after_next: Position) -> float:
    """Signed angle in degrees between checkpoint→pod and checkpoint→after_next.

    Close to ±180 on a straight line, close to 0 on a hairpin.  Returns 0.0
    when either direction is undefined.
    """
    centre = Vector2.from_position(checkpoint)
    to_pod = position.subtract(centre)
    to_next = Vector2.from_position(after_next).subtract(centre)
    if to_pod.is_zero() or to_next.is_zero():
        return 0.0
    return math.degrees(to_pod.get_angle(to_next))


class ThrustPolicy:
    """Decide an engine power in ``[min_thrust, max_thrust]``.

    Rules, first match wins:

    1. ``|heading_error| > critical_angle`` → minimum thrust.
    2. Closer than *proximity_threshold* to the checkpoint:

       a. next turn unknown and faster than *unknown_turn_speed* → minimum;
       b. next turn sharper than ``180 - critical_angle`` and faster than
          *sharp_turn_speed* → reduced thrust (see :class:`ThrustReduction`);
       c. otherwise full thrust.

    3. Otherwise full thrust.
    """

    def __init__(
        self,
        proximity_threshold: float,
        critical_angle: float = CRITICAL_ANGLE,
        min_thrust: int = MIN_THRUST,
        max_thrust: int = MAX_THRUST,
        unknown_turn_speed: float = UNKNOWN_TURN_SPEED,
        sharp_turn_speed: float = SHARP_TURN_SPEED,
        reduction: ThrustReduction = ThrustReduction.PROPORTIONAL,
    ) -> None:
        if not 0 <= min_thrust <= max_thrust:
            raise ValueError("thrust bounds must satisfy 0 <= min_thrust <= max_thrust")
        self.proximity_threshold = proximity_threshold
        self.critical_angle = critical_angle
        self.min_thrust = min_thrust
        self.max_thrust = max_thrust
        self.unknown_turn_speed = unknown_turn_speed
        self.sharp_turn_speed = sharp_turn_speed
        self.reduction = ThrustReduction(reduction)

    @property
    def sharp_turn_angle(self) -> float:
        return 180.0 - self.critical_angle

    def decide(
        self,
        heading_error: float,
        distance: float,
        speed: float,
        curvature: float | None,
    ) -> int:
        """Return the thrust for this tick.

        *curvature* is the :func:`curvature_angle` at the checkpoint, or None
        while the checkpoint after next is not known yet.
        """
        if abs(heading_error) > self.critical_angle:
            return self.min_thrust

        if distance >= self.proximity_threshold:
            return self.max_thrust

        if curvature is None:
            if speed > self.unknown_turn_speed:
                return self.min_thrust
            return self.max_thrust

        if abs(curvature) < self.sharp_turn_angle and speed > self.sharp_turn_speed:
            return self._reduced(curvature)
        return self.max_thrust

    def _reduced(self, curvature: float) -> int:
        if self.reduction is ThrustReduction.FIXED:
            return self.min_thrust
        span = self.max_thrust - self.min_thrust
        thrust = self.min_thrust + int(span * abs(curvature) / self.sharp_turn_angle)
        return max(self.min_thrust, min(self.max_thrust, thrust))
