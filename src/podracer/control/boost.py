"""Boost policy — single-use full-power override."""

from __future__ import annotations

from podracer.pod.state import PodState

ALIGNMENT_ANGLE = 15.0


class BoostPolicy:
    """Fires the boost when far from the checkpoint and well aligned with it.

    The budget lives in :attr:`PodState.remaining_boosts`; every successful
    fire consumes one and nothing ever restores it.

    Parameters
    ----------
    distance_threshold:
        The checkpoint must be strictly farther than this.
    alignment_angle:
        ``|heading_error|`` must be strictly below this, in degrees.
    """

    def __init__(self, distance_threshold: float, alignment_angle: float = ALIGNMENT_ANGLE) -> None:
        self.distance_threshold = distance_threshold
        self.alignment_angle = alignment_angle

    def should_fire(self, state: PodState, distance: float, heading_error: float) -> bool:
        """Return True if the boost conditions hold, without consuming it."""
        return (
            state.remaining_boosts > 0
            and distance > self.distance_threshold
            and abs(heading_error) < self.alignment_angle
        )

    def try_fire(self, state: PodState, distance: float, heading_error: float) -> bool:
        """Consume one boost from *state* and return True if the conditions hold."""
        if not self.should_fire(state, distance, heading_error):
            return False
        state.remaining_boosts -= 1
        return True
