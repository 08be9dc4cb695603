"""DecisionService — replays a single controller decision for the Web API."""

from __future__ import annotations

import math

from podracer.control.commands import Command, Thrust
from podracer.geometry.vector import Position, Vector2
from podracer.pod.state import PodState
from podracer.protocol.formatter import format_command
from podracer.runtime.config import ControllerSettings
from podracer.runtime.controller import PodPilot, heading_error
from podracer.runtime.trace import NullTraceSink, TraceEvent
from podracer.web.schemas import DecideRequest, DecideResponse


class DecisionService:
    """Runs the aim/thrust/boost pipeline on a stateless snapshot.

    Parameters
    ----------
    settings:
        Tuning constants.  Defaults to :class:`ControllerSettings` defaults.
    """

    def __init__(self, settings: ControllerSettings | None = None) -> None:
        self._settings = settings or ControllerSettings()

    def decide(self, req: DecideRequest) -> tuple[Command, TraceEvent]:
        """Return the command and its trace event for *req*."""
        if req.variant == "discovery":
            thresholds = self._settings.discovery_thresholds()
        else:
            thresholds = self._settings.fixed_course_thresholds()

        sink = NullTraceSink()
        pilot = PodPilot(self._settings, thresholds, sink)

        position = Vector2(req.position.x, req.position.y)
        velocity = Vector2(req.velocity.x, req.velocity.y)
        checkpoint = Position(req.checkpoint.x, req.checkpoint.y)
        after_next = None
        if req.after_next is not None:
            after_next = Position(req.after_next.x, req.after_next.y)

        if not (position.is_finite() and velocity.is_finite()):
            raise ValueError("position and velocity must be finite")

        state = PodState(
            position=position,
            velocity=velocity,
            heading_angle=req.heading or 0.0,
            remaining_boosts=1 if req.boost_available else 0,
        )

        distance = req.distance
        if distance is None:
            distance = Vector2.from_position(checkpoint).subtract(position).module()

        command = pilot.decide(
            pod=0,
            state=state,
            checkpoint=checkpoint,
            after_next=after_next,
            distance=distance,
            heading_error=self._heading_error(req, state, checkpoint),
        )
        return command, sink.events[-1]

    @staticmethod
    def _heading_error(req: DecideRequest, state: PodState, checkpoint: Position) -> float:
        if req.heading_error is not None:
            return req.heading_error
        if req.heading is not None:
            return heading_error(req.heading, state.position, checkpoint)
        if state.velocity.is_zero():
            return 0.0
        # No heading given: the direction of travel stands in for it.
        travel = math.degrees(math.atan2(state.velocity.y, state.velocity.x))
        return heading_error(travel, state.position, checkpoint)

    @staticmethod
    def to_response(command: Command, event: TraceEvent) -> DecideResponse:
        return DecideResponse(
            target_x=command.target.x,
            target_y=command.target.y,
            thrust=command.action.power if isinstance(command.action, Thrust) else None,
            boost=command.is_boost,
            aim_reason=event.aim_reason,
            curvature=event.curvature,
            command=format_command(command),
        )
