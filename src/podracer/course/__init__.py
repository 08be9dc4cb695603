"""Course layout memory."""

from podracer.course.memory import (
    CheckpointMemory,
    CheckpointMemoryError,
    DiscoveredCheckpointMemory,
)

__all__ = ["CheckpointMemory", "CheckpointMemoryError", "DiscoveredCheckpointMemory"]
