"""ObservationParser — whitespace-separated game lines to validated observations.

Any malformed input raises :class:`ObservationError`.  Nothing is clamped or
guessed: a broken line is fatal for the controller.
"""

from __future__ import annotations

import math
from typing import TextIO

from podracer.geometry.vector import Position
from podracer.protocol.models import (
    CourseLayout,
    DiscoveryObservation,
    OpponentObservation,
    PodObservation,
)


class ObservationError(ValueError):
    """Raised when an input line cannot be turned into an observation."""


def _tokens(line: str, expected: int, what: str) -> list[str]:
    tokens = line.split()
    if len(tokens) != expected:
        raise ObservationError(
            f"{what}: expected {expected} values, got {len(tokens)} in {line.strip()!r}"
        )
    return tokens


def _int(token: str, what: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise ObservationError(f"{what}: {token!r} is not an integer") from None


def _float(token: str, what: str) -> float:
    try:
        value = float(token)
    except ValueError:
        raise ObservationError(f"{what}: {token!r} is not a number") from None
    if not math.isfinite(value):
        raise ObservationError(f"{what}: {token!r} is not finite")
    return value


class LineReader:
    """Reads one line at a time from a text stream.

    Parameters
    ----------
    stream:
        Any object with ``readline()`` (``sys.stdin``, ``io.StringIO``).
    """

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending: str | None = None

    def at_eof(self) -> bool:
        """Return True if the stream is exhausted.  Blocks until a line arrives."""
        if self._pending is None:
            self._pending = self._stream.readline()
        return self._pending == ""

    def read_line(self) -> str:
        """Return the next line.

        Raises
        ------
        ObservationError
            If the stream ended.
        """
        if self._pending is not None:
            line, self._pending = self._pending, None
        else:
            line = self._stream.readline()
        if line == "":
            raise ObservationError("Unexpected end of input")
        return line


class ObservationParser:
    """Parses single game lines into observation dataclasses."""

    def parse_int(self, line: str) -> int:
        (token,) = _tokens(line, 1, "integer line")
        return _int(token, "integer line")

    def parse_checkpoint(self, line: str) -> Position:
        x, y = _tokens(line, 2, "checkpoint")
        return Position(_int(x, "checkpoint x"), _int(y, "checkpoint y"))

    def parse_discovery(self, line: str) -> DiscoveryObservation:
        """Parse ``x y nextCheckpointX nextCheckpointY nextCheckpointDist nextCheckpointAngle``."""
        x, y, cx, cy, dist, angle = _tokens(line, 6, "pod")
        return DiscoveryObservation(
            x=_int(x, "pod x"),
            y=_int(y, "pod y"),
            next_checkpoint_x=_int(cx, "checkpoint x"),
            next_checkpoint_y=_int(cy, "checkpoint y"),
            next_checkpoint_dist=_float(dist, "checkpoint distance"),
            next_checkpoint_angle=_float(angle, "checkpoint angle"),
        )

    def parse_opponent(self, line: str) -> OpponentObservation:
        """Parse ``x y``."""
        x, y = _tokens(line, 2, "opponent")
        return OpponentObservation(x=_int(x, "opponent x"), y=_int(y, "opponent y"))

    def parse_pod(self, line: str) -> PodObservation:
        """Parse ``x y vx vy angle nextCheckPointId``."""
        x, y, vx, vy, angle, cp = _tokens(line, 6, "pod")
        next_id = _int(cp, "next checkpoint id")
        if next_id < 0:
            raise ObservationError(f"pod: negative checkpoint id {next_id}")
        return PodObservation(
            x=_int(x, "pod x"),
            y=_int(y, "pod y"),
            vx=_int(vx, "pod vx"),
            vy=_int(vy, "pod vy"),
            angle=_float(angle, "pod angle"),
            next_checkpoint_id=next_id,
        )

    def read_course(self, reader: LineReader) -> CourseLayout:
        """Read the start-up block: laps, checkpoint count, then one line per checkpoint."""
        laps = self.parse_int(reader.read_line())
        count = self.parse_int(reader.read_line())
        if count < 1:
            raise ObservationError(f"course: checkpoint count must be >= 1, got {count}")
        checkpoints = [self.parse_checkpoint(reader.read_line()) for _ in range(count)]
        return CourseLayout(laps=laps, checkpoints=checkpoints)
