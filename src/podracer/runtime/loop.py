"""Game loops — read a tick, decide, write one line per pod, flush.

Each loop runs until the input ends on a tick boundary.  Input ending in the
middle of a tick (or of the start-up block) raises :class:`ObservationError`.
"""

from __future__ import annotations

import logging
from typing import TextIO

from podracer.protocol.formatter import format_command
from podracer.protocol.parser import LineReader, ObservationParser
from podracer.runtime.config import ControllerSettings
from podracer.runtime.controller import DiscoveryController, FixedCourseController

_logger = logging.getLogger(__name__)

PODS_PER_PLAYER = 2


def run_discovery(
    stdin: TextIO,
    stdout: TextIO,
    controller: DiscoveryController | None = None,
) -> int:
    """Run the discovery-variant loop.  Returns the number of ticks processed."""
    controller = controller or DiscoveryController()
    reader = LineReader(stdin)
    parser = ObservationParser()
    ticks = 0

    while not reader.at_eof():
        observation = parser.parse_discovery(reader.read_line())
        opponent = parser.parse_opponent(reader.read_line())
        command = controller.tick(observation, opponent)
        stdout.write(format_command(command) + "\n")
        stdout.flush()
        ticks += 1

    _logger.info("Input closed after %d tick(s)", ticks)
    return ticks


def run_fixed(
    stdin: TextIO,
    stdout: TextIO,
    settings: ControllerSettings | None = None,
    sink=None,
    pods: int = PODS_PER_PLAYER,
    label_pods: bool = False,
) -> int:
    """Run the fixed-course loop.  Returns the number of ticks processed.

    The course block is read first; then each tick carries *pods* own-pod
    lines followed by *pods* opponent lines.  With *label_pods*, each command
    ends with its pod index as the display message.
    """
    reader = LineReader(stdin)
    parser = ObservationParser()
    course = parser.read_course(reader)
    _logger.info("Course: %d lap(s), %d checkpoint(s)", course.laps, len(course.checkpoints))
    controller = FixedCourseController(course, settings, sink)
    ticks = 0

    while not reader.at_eof():
        own = [parser.parse_pod(reader.read_line()) for _ in range(pods)]
        opponents = [parser.parse_pod(reader.read_line()) for _ in range(pods)]
        for pod, command in enumerate(controller.tick(own, opponents)):
            message = str(pod) if label_pods else None
            stdout.write(format_command(command, message) + "\n")
        stdout.flush()
        ticks += 1

    _logger.info("Input closed after %d tick(s)", ticks)
    return ticks
