"""Tests for CheckpointMemory and DiscoveredCheckpointMemory."""

from __future__ import annotations

import pytest

from podracer.course.memory import (
    CheckpointMemory,
    CheckpointMemoryError,
    DiscoveredCheckpointMemory,
)
from podracer.geometry.vector import Position

A = Position(1000, 1000)
B = Position(8000, 2000)
C = Position(4000, 7000)


# ---------------------------------------------------------------------------
# Fixed list
# ---------------------------------------------------------------------------

class TestCheckpointMemory:
    def test_resolve_next_wraps_around(self):
        memory = CheckpointMemory([A, B, C])
        assert memory.resolve_next(0) == B
        assert memory.resolve_next(1) == C
        assert memory.resolve_next(2) == A

    def test_get_is_cyclic(self):
        memory = CheckpointMemory([A, B, C])
        assert memory.get(4) == B

    def test_empty_memory_raises(self):
        with pytest.raises(CheckpointMemoryError):
            CheckpointMemory().resolve_next(0)

    def test_error_is_a_lookup_error(self):
        with pytest.raises(LookupError):
            CheckpointMemory([]).get(0)

    def test_checkpoints_returns_copy(self):
        memory = CheckpointMemory([A])
        memory.checkpoints.append(B)
        assert len(memory) == 1


# ---------------------------------------------------------------------------
# Discovery
# ---------------------------------------------------------------------------

class TestDiscoveredCheckpointMemory:
    def test_repeated_lap_keeps_three_checkpoints(self):
        memory = DiscoveredCheckpointMemory()
        indices = [memory.observe(p) for p in (A, B, C, A, B, C)]

        assert indices == [0, 1, 2, 0, 1, 2]
        assert memory.checkpoints == [A, B, C]

    def test_lap_boundary_at_second_occurrence_of_first(self):
        memory = DiscoveredCheckpointMemory()
        for p in (A, B, C):
            memory.observe(p)
            assert memory.lap_complete is False

        memory.observe(A)
        assert memory.lap_complete is True

    def test_same_target_on_consecutive_ticks_does_not_close_lap(self):
        memory = DiscoveredCheckpointMemory()
        memory.observe(A)
        memory.observe(A)
        memory.observe(B)
        memory.observe(B)
        assert memory.lap_complete is False
        assert len(memory) == 2

    def test_after_next_unknown_during_first_lap(self):
        memory = DiscoveredCheckpointMemory()
        index = memory.observe(A)
        memory.observe(B)
        assert memory.after_next(index) is None

    def test_after_next_resolves_once_closed(self):
        memory = DiscoveredCheckpointMemory()
        for p in (A, B, C, A):
            memory.observe(p)
        assert memory.after_next(0) == B
        assert memory.after_next(2) == A

    def test_unknown_checkpoint_after_close_raises(self):
        memory = DiscoveredCheckpointMemory()
        for p in (A, B, C, A):
            memory.observe(p)
        with pytest.raises(CheckpointMemoryError):
            memory.observe(Position(1, 1))
        assert memory.checkpoints == [A, B, C]
