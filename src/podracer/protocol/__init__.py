"""Game input/output protocol.

Public API
----------
ObservationParser - game line → observation dataclass
ObservationError  - raised on malformed input
LineReader        - line-at-a-time stream reader
format_command    - Command → output line
"""

from podracer.protocol.formatter import format_command
from podracer.protocol.models import (
    CourseLayout,
    DiscoveryObservation,
    OpponentObservation,
    PodObservation,
)
from podracer.protocol.parser import LineReader, ObservationError, ObservationParser

__all__ = [
    "CourseLayout",
    "DiscoveryObservation",
    "LineReader",
    "ObservationError",
    "ObservationParser",
    "OpponentObservation",
    "PodObservation",
    "format_command",
]
