"""Tests for ThrustPolicy and curvature_angle."""

from __future__ import annotations

import pytest

from podracer.control.thrust import ThrustPolicy, ThrustReduction, curvature_angle
from podracer.geometry.vector import Position, Vector2

PROXIMITY = 2400.0


@pytest.fixture
def policy() -> ThrustPolicy:
    return ThrustPolicy(proximity_threshold=PROXIMITY)


# ---------------------------------------------------------------------------
# Heading and distance
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("distance", [100.0, 2000.0, 9000.0])
@pytest.mark.parametrize("speed", [0.0, 450.0, 900.0])
@pytest.mark.parametrize("curvature", [None, 10.0, 170.0])
def test_large_heading_error_gives_minimum_thrust(policy, distance, speed, curvature):
    assert policy.decide(80.0, distance, speed, curvature) == 15
    assert policy.decide(-80.0, distance, speed, curvature) == 15


def test_aligned_and_far_gives_full_thrust(policy):
    assert policy.decide(0.0, 10000.0, 900.0, 5.0) == 100


def test_distance_equal_to_threshold_is_not_near(policy):
    assert policy.decide(0.0, PROXIMITY, 900.0, None) == 100


def test_heading_error_at_critical_angle_is_allowed(policy):
    assert policy.decide(70.0, 10000.0, 0.0, None) == 100


# ---------------------------------------------------------------------------
# Near the checkpoint
# ---------------------------------------------------------------------------

class TestNearCheckpoint:
    def test_unknown_turn_and_fast_slows_down(self, policy):
        assert policy.decide(0.0, 1000.0, 600.0, None) == 15

    def test_unknown_turn_and_slow_keeps_full_thrust(self, policy):
        assert policy.decide(0.0, 1000.0, 300.0, None) == 100

    def test_sharp_turn_at_speed_is_proportional(self, policy):
        # 15 + int(85 * 30 / 110) = 15 + 23
        assert policy.decide(0.0, 1000.0, 450.0, 30.0) == 38
        assert policy.decide(0.0, 1000.0, 450.0, -30.0) == 38

    def test_hairpin_at_speed_floors_at_minimum(self, policy):
        assert policy.decide(0.0, 1000.0, 450.0, 0.0) == 15

    def test_sharp_turn_slow_keeps_full_thrust(self, policy):
        assert policy.decide(0.0, 1000.0, 400.0, 30.0) == 100

    def test_gentle_turn_keeps_full_thrust(self, policy):
        assert policy.decide(0.0, 1000.0, 900.0, 170.0) == 100

    def test_fixed_reduction_uses_minimum(self):
        policy = ThrustPolicy(PROXIMITY, reduction=ThrustReduction.FIXED)
        assert policy.decide(0.0, 1000.0, 450.0, 100.0) == 15

    def test_reduction_accepts_string_value(self):
        policy = ThrustPolicy(PROXIMITY, reduction="fixed")
        assert policy.reduction is ThrustReduction.FIXED


def test_output_always_within_bounds(policy):
    for heading in (-179.0, -70.0, 0.0, 45.0, 71.0):
        for distance in (0.0, 1000.0, 5000.0):
            for speed in (0.0, 401.0, 501.0, 1200.0):
                for curvature in (None, -109.9, -1.0, 0.0, 55.0, 109.9, 180.0):
                    thrust = policy.decide(heading, distance, speed, curvature)
                    assert 15 <= thrust <= 100


def test_invalid_bounds_raise():
    with pytest.raises(ValueError):
        ThrustPolicy(PROXIMITY, min_thrust=100, max_thrust=15)


# ---------------------------------------------------------------------------
# Curvature
# ---------------------------------------------------------------------------

class TestCurvatureAngle:
    def test_straight_line_is_half_turn(self):
        angle = curvature_angle(Vector2(0.0, 0.0), Position(1000, 0), Position(2000, 0))
        assert abs(angle) == pytest.approx(180.0)

    def test_hairpin_is_small(self):
        angle = curvature_angle(Vector2(0.0, 0.0), Position(1000, 0), Position(0, 200))
        assert abs(angle) == pytest.approx(11.3099, abs=1e-3)

    def test_right_angle_turn(self):
        angle = curvature_angle(Vector2(0.0, 0.0), Position(1000, 0), Position(1000, 1000))
        assert abs(angle) == pytest.approx(90.0)

    def test_pod_on_checkpoint_gives_zero(self):
        assert curvature_angle(Vector2(1000.0, 0.0), Position(1000, 0), Position(0, 0)) == 0.0
