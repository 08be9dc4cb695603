"""Validated observations, as produced by :class:`ObservationParser`."""

from __future__ import annotations

from dataclasses import dataclass

from podracer.geometry.vector import Position


@dataclass(frozen=True)
class DiscoveryObservation:
    """Controlled pod line of the discovery variant."""

    x: int
    y: int
    next_checkpoint_x: int
    next_checkpoint_y: int
    next_checkpoint_dist: float
    """Distance to the next checkpoint, as reported by the game."""

    next_checkpoint_angle: float
    """Angle in degrees between the pod heading and the next checkpoint."""

    @property
    def checkpoint(self) -> Position:
        return Position(self.next_checkpoint_x, self.next_checkpoint_y)


@dataclass(frozen=True)
class OpponentObservation:
    """Opponent line of the discovery variant (position only)."""

    x: int
    y: int


@dataclass(frozen=True)
class PodObservation:
    """Pod line of the fixed-course variant (own pods and opponents)."""

    x: int
    y: int
    vx: int
    vy: int
    angle: float
    """Facing angle in degrees."""

    next_checkpoint_id: int


@dataclass(frozen=True)
class CourseLayout:
    """Start-up block of the fixed-course variant."""

    laps: int
    checkpoints: list[Position]
