"""Tests for BoostPolicy."""

from __future__ import annotations

from podracer.control.boost import BoostPolicy
from podracer.pod.state import PodState


def test_fires_once_then_never_again():
    policy = BoostPolicy(distance_threshold=3000.0)
    state = PodState()

    fired = [policy.try_fire(state, 8000.0, 0.0) for _ in range(500)]

    assert fired[0] is True
    assert fired.count(True) == 1
    assert state.remaining_boosts == 0


def test_requires_distance_strictly_above_threshold():
    policy = BoostPolicy(distance_threshold=3000.0)
    state = PodState()
    assert policy.try_fire(state, 3000.0, 0.0) is False
    assert state.remaining_boosts == 1


def test_requires_alignment_strictly_below_angle():
    policy = BoostPolicy(distance_threshold=3000.0)
    state = PodState()
    assert policy.try_fire(state, 8000.0, 15.0) is False
    assert policy.try_fire(state, 8000.0, -14.9) is True


def test_no_budget_never_fires():
    policy = BoostPolicy(distance_threshold=3000.0)
    state = PodState(remaining_boosts=0)
    assert policy.should_fire(state, 8000.0, 0.0) is False
    assert policy.try_fire(state, 8000.0, 0.0) is False
    assert state.remaining_boosts == 0


def test_should_fire_does_not_consume():
    policy = BoostPolicy(distance_threshold=3000.0)
    state = PodState()
    assert policy.should_fire(state, 8000.0, 0.0) is True
    assert state.remaining_boosts == 1


def test_each_pod_has_its_own_budget():
    policy = BoostPolicy(distance_threshold=3000.0)
    first, second = PodState(), PodState()
    assert policy.try_fire(first, 8000.0, 0.0) is True
    assert policy.try_fire(second, 8000.0, 0.0) is True
    assert policy.try_fire(first, 8000.0, 0.0) is False
