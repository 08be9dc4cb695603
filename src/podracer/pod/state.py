"""Pod state tracking — latest known kinematics of one controlled pod."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from podracer.geometry.vector import Vector2

DEFAULT_BOOSTS = 1


class TrackerPhase(enum.Enum):
    AWAITING_FIRST_OBSERVATION = "awaiting_first_observation"
    STEADY_STATE = "steady_state"


@dataclass
class PodState:
    """Mutable per-pod state, updated in place once per tick."""

    position: Vector2 = field(default_factory=Vector2.zero)
    velocity: Vector2 = field(default_factory=Vector2.zero)
    heading_angle: float = 0.0
    """Facing angle in degrees (fixed-course variant only)."""

    next_checkpoint_index: int = 0
    remaining_boosts: int = DEFAULT_BOOSTS
    """Never replenished once spent."""

    previous_position: Vector2 | None = None
    """Position on the previous tick; used to derive velocity."""

    @property
    def speed(self) -> float:
        return self.velocity.module()


class PodStateTracker:
    """Owns one :class:`PodState` and applies each tick's observation to it.

    The first observation initialises the state; later ones mutate it.
    """

    def __init__(self, boosts: int = DEFAULT_BOOSTS) -> None:
        self._state = PodState(remaining_boosts=boosts)
        self._phase = TrackerPhase.AWAITING_FIRST_OBSERVATION

    @property
    def state(self) -> PodState:
        return self._state

    @property
    def phase(self) -> TrackerPhase:
        return self._phase

    def update_position(self, x: float, y: float, next_checkpoint_index: int) -> PodState:
        """Apply a position-only observation; velocity is derived.

        On the first observation the velocity is zero.
        """
        state = self._state
        current = Vector2(float(x), float(y))
        if self._phase is TrackerPhase.AWAITING_FIRST_OBSERVATION:
            state.previous_position = None
            state.velocity = Vector2.zero()
            self._phase = TrackerPhase.STEADY_STATE
        else:
            state.previous_position = state.position
            state.velocity = current.subtract(state.position)
        state.position = current
        state.next_checkpoint_index = next_checkpoint_index
        return state

    def update_kinematics(
        self,
        x: float,
        y: float,
        vx: float,
        vy: float,
        heading_angle: float,
        next_checkpoint_index: int,
    ) -> PodState:
        """Apply a full observation carrying velocity and heading."""
        state = self._state
        if self._phase is TrackerPhase.AWAITING_FIRST_OBSERVATION:
            state.previous_position = None
            self._phase = TrackerPhase.STEADY_STATE
        else:
            state.previous_position = state.position
        state.position = Vector2(float(x), float(y))
        state.velocity = Vector2(float(vx), float(vy))
        state.heading_angle = float(heading_angle)
        state.next_checkpoint_index = next_checkpoint_index
        return state
