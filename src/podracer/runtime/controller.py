"""Tick orchestration — observation in, one command per controlled pod out.

:class:`PodPilot` holds the shared geometric core (aim, thrust, boost).  The
two controllers differ only in how they feed it:

* :class:`DiscoveryController` — one pod, checkpoints learnt from the stream,
  velocity derived from successive positions.
* :class:`FixedCourseController` — any number of pods, checkpoint list known
  at start-up, velocity and heading observed.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

from podracer.control.aim import AimPointSolver
from podracer.control.boost import BoostPolicy
from podracer.control.commands import Boost, Command, Thrust
from podracer.control.thrust import ThrustPolicy, curvature_angle
from podracer.course.memory import (
    CheckpointMemory,
    CheckpointMemoryError,
    DiscoveredCheckpointMemory,
)
from podracer.geometry.vector import Position, Vector2
from podracer.pod.state import PodState, PodStateTracker
from podracer.protocol.models import (
    CourseLayout,
    DiscoveryObservation,
    OpponentObservation,
    PodObservation,
)
from podracer.runtime.config import ControllerSettings, VariantThresholds
from podracer.runtime.trace import TraceEvent

_logger = logging.getLogger(__name__)


def heading_error(heading_angle: float, position: Vector2, checkpoint: Position) -> float:
    """Signed degrees from *heading_angle* to the direction of *checkpoint*, in (-180, 180]."""
    to_cp = Vector2.from_position(checkpoint).subtract(position)
    if to_cp.is_zero():
        return 0.0
    error = math.degrees(math.atan2(to_cp.y, to_cp.x)) - heading_angle
    error = (error + 180.0) % 360.0 - 180.0
    if error == -180.0:
        error = 180.0
    return error


class PodPilot:
    """Aim, thrust and boost for one tick of one pod.

    Parameters
    ----------
    settings:
        Tuning constants.
    thresholds:
        Variant-specific proximity and boost distances.
    sink:
        Receives one :class:`TraceEvent` per decision; None disables tracing.
    """

    def __init__(self, settings: ControllerSettings, thresholds: VariantThresholds, sink=None) -> None:
        self.aim = AimPointSolver(settings.capture_radius, settings.heading_threshold_deg)
        self.thrust = ThrustPolicy(
            proximity_threshold=thresholds.proximity,
            critical_angle=settings.critical_angle,
            min_thrust=settings.min_thrust,
            max_thrust=settings.max_thrust,
            unknown_turn_speed=settings.unknown_turn_speed,
            sharp_turn_speed=settings.sharp_turn_speed,
            reduction=settings.thrust_reduction,
        )
        self.boost = BoostPolicy(thresholds.boost_distance, settings.boost_alignment_angle)
        self.sink = sink
        self.tick = 0

    def decide(
        self,
        pod: int,
        state: PodState,
        checkpoint: Position,
        after_next: Position | None,
        distance: float,
        heading_error: float,
    ) -> Command:
        """Return the command for *state* heading to *checkpoint*.

        *after_next* is None while the checkpoint after *checkpoint* is unknown.
        """
        aim = self.aim.solve(state.position, state.velocity, checkpoint)

        curvature = None
        if after_next is not None:
            curvature = curvature_angle(state.position, checkpoint, after_next)

        speed = state.speed
        thrust = self.thrust.decide(heading_error, distance, speed, curvature)
        boost = self.boost.try_fire(state, distance, heading_error)
        if boost:
            _logger.info("Pod %d fires boost on tick %d", pod, self.tick)

        if self.sink is not None:
            self.sink.emit(
                TraceEvent(
                    tick=self.tick,
                    pod=pod,
                    position=(state.position.x, state.position.y),
                    velocity=(state.velocity.x, state.velocity.y),
                    checkpoint=(checkpoint.x, checkpoint.y),
                    checkpoint_index=state.next_checkpoint_index,
                    aim_reason=aim.reason,
                    target=(aim.target.x, aim.target.y),
                    distance=distance,
                    heading_error=heading_error,
                    curvature=curvature,
                    speed=speed,
                    thrust=thrust,
                    boost=boost,
                )
            )
        return Command(aim.target, Boost() if boost else Thrust(thrust))


class DiscoveryController:
    """Single-pod controller that maps the course while racing it."""

    def __init__(self, settings: ControllerSettings | None = None, sink=None) -> None:
        settings = settings or ControllerSettings()
        self.memory = DiscoveredCheckpointMemory()
        self.tracker = PodStateTracker(boosts=settings.boosts)
        self.pilot = PodPilot(settings, settings.discovery_thresholds(), sink)

    def tick(
        self,
        observation: DiscoveryObservation,
        opponent: OpponentObservation | None = None,
    ) -> Command:
        """Process one tick and return the pod's command.

        *opponent* is accepted for protocol symmetry and ignored.
        """
        self.pilot.tick += 1
        checkpoint = observation.checkpoint
        index = self.memory.observe(checkpoint)
        state = self.tracker.update_position(observation.x, observation.y, index)

        return self.pilot.decide(
            pod=0,
            state=state,
            checkpoint=checkpoint,
            after_next=self.memory.after_next(index),
            distance=observation.next_checkpoint_dist,
            heading_error=observation.next_checkpoint_angle,
        )


class FixedCourseController:
    """Controller for pods racing a course supplied at start-up.

    Parameters
    ----------
    course:
        Lap count and checkpoint list read before the first tick.
    """

    def __init__(
        self,
        course: CourseLayout,
        settings: ControllerSettings | None = None,
        sink=None,
    ) -> None:
        settings = settings or ControllerSettings()
        self.course = course
        self.memory = CheckpointMemory(course.checkpoints)
        self._boosts = settings.boosts
        self.trackers: list[PodStateTracker] = []
        self.pilot = PodPilot(settings, settings.fixed_course_thresholds(), sink)

    def _tracker(self, pod: int) -> PodStateTracker:
        while len(self.trackers) <= pod:
            self.trackers.append(PodStateTracker(boosts=self._boosts))
        return self.trackers[pod]

    def tick(
        self,
        pods: Sequence[PodObservation],
        opponents: Sequence[PodObservation] = (),
    ) -> list[Command]:
        """Process one tick and return one command per controlled pod, in order.

        *opponents* are accepted for protocol symmetry and ignored.

        Raises
        ------
        CheckpointMemoryError
            If a pod targets a checkpoint id outside the course.
        """
        self.pilot.tick += 1
        commands: list[Command] = []
        for pod, obs in enumerate(pods):
            if not 0 <= obs.next_checkpoint_id < len(self.memory):
                raise CheckpointMemoryError(
                    f"Pod {pod} targets checkpoint {obs.next_checkpoint_id}, "
                    f"course has {len(self.memory)}"
                )
            state = self._tracker(pod).update_kinematics(
                obs.x, obs.y, obs.vx, obs.vy, obs.angle, obs.next_checkpoint_id
            )
            checkpoint = self.memory.get(obs.next_checkpoint_id)
            distance = Vector2.from_position(checkpoint).subtract(state.position).module()
            commands.append(
                self.pilot.decide(
                    pod=pod,
                    state=state,
                    checkpoint=checkpoint,
                    after_next=self.memory.resolve_next(obs.next_checkpoint_id),
                    distance=distance,
                    heading_error=heading_error(state.heading_angle, state.position, checkpoint),
                )
            )
        return commands
