"""Per-tick decision trace — structured events handed to a sink.

The controller never prints diagnostics itself.  Each decision produces a
:class:`TraceEvent`; the sink decides what to do with it.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TraceEvent:
    """Everything that went into one pod's command on one tick."""

    tick: int
    pod: int
    position: tuple[float, float]
    velocity: tuple[float, float]
    checkpoint: tuple[int, int]
    checkpoint_index: int
    aim_reason: str
    target: tuple[int, int]
    distance: float
    heading_error: float
    curvature: float | None
    speed: float
    thrust: int
    boost: bool

    def to_dict(self) -> dict:
        return asdict(self)


class NullTraceSink:
    """Keeps every event in memory; used in tests and as the default sink."""

    def __init__(self) -> None:
        self.events: list[TraceEvent] = []

    def emit(self, event: TraceEvent) -> None:
        self.events.append(event)


class LoggingTraceSink:
    """Writes each event to a logger at DEBUG level."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or _logger

    def emit(self, event: TraceEvent) -> None:
        if not self._logger.isEnabledFor(logging.DEBUG):
            return
        curvature = "-" if event.curvature is None else f"{event.curvature:.1f}"
        self._logger.debug(
            "tick=%d pod=%d pos=(%.0f, %.0f) vel=(%.0f, %.0f) cp#%d=(%d, %d) "
            "dist=%.0f err=%.1f curve=%s speed=%.0f aim=%s(%d, %d) thrust=%s",
            event.tick,
            event.pod,
            *event.position,
            *event.velocity,
            event.checkpoint_index,
            *event.checkpoint,
            event.distance,
            event.heading_error,
            curvature,
            event.speed,
            event.aim_reason,
            *event.target,
            "BOOST" if event.boost else event.thrust,
        )
