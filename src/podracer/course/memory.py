"""Checkpoint memory — the course layout as known to the controller.

Two flavours:

* :class:`CheckpointMemory` holds the list supplied by the game at start-up.
* :class:`DiscoveredCheckpointMemory` builds the list from the stream of
  "next checkpoint" coordinates and detects when the first lap is complete.
"""

from __future__ import annotations

import logging

from podracer.geometry.vector import Position

_logger = logging.getLogger(__name__)


class CheckpointMemoryError(LookupError):
    """Raised when a checkpoint cannot be resolved from the memory."""


class CheckpointMemory:
    """Fixed, ordered list of checkpoints addressed by a cyclic index.

    Parameters
    ----------
    checkpoints:
        Checkpoints in race order.
    """

    def __init__(self, checkpoints: list[Position] | None = None) -> None:
        self._checkpoints: list[Position] = list(checkpoints or [])

    def __len__(self) -> int:
        return len(self._checkpoints)

    @property
    def checkpoints(self) -> list[Position]:
        """A copy of the known checkpoints, in race order."""
        return list(self._checkpoints)

    def get(self, index: int) -> Position:
        """Return the checkpoint at *index* (taken modulo the count)."""
        if not self._checkpoints:
            raise CheckpointMemoryError("No checkpoints known")
        return self._checkpoints[index % len(self._checkpoints)]

    def resolve_next(self, current_index: int) -> Position:
        """Return the checkpoint following *current_index*, wrapping around."""
        return self.get(current_index + 1)


class DiscoveredCheckpointMemory(CheckpointMemory):
    """Checkpoint list learnt on the fly from observed target coordinates.

    The list only grows during the first lap.  The lap is known to be complete
    as soon as an already-seen checkpoint that is not the last one comes back
    as the target; from then on the list is closed.
    """

    def __init__(self) -> None:
        super().__init__()
        self._lap_complete = False

    @property
    def lap_complete(self) -> bool:
        """True once the full layout has been deduced."""
        return self._lap_complete

    def observe(self, position: Position) -> int:
        """Record *position* as the current target and return its index.

        Raises
        ------
        CheckpointMemoryError
            If *position* is unknown but the lap has already been closed.
        """
        try:
            index = self._checkpoints.index(position)
        except ValueError:
            if self._lap_complete:
                raise CheckpointMemoryError(
                    f"Unknown checkpoint {position!r} after the course was closed"
                ) from None
            self._checkpoints.append(position)
            index = len(self._checkpoints) - 1
            _logger.debug("Discovered checkpoint %d at (%d, %d)", index, position.x, position.y)
            return index

        if not self._lap_complete and index < len(self._checkpoints) - 1:
            self._lap_complete = True
            _logger.info("Course closed with %d checkpoints", len(self._checkpoints))
        return index

    def after_next(self, current_index: int) -> Position | None:
        """Checkpoint after *current_index*, or None while still mapping the course."""
        if not self._lap_complete:
            return None
        return self.resolve_next(current_index)
