"""Tests for the motion state threshold classifier."""

import math

import pytest

from imusim.motion import (
    CircularMotionGenerator,
    IMUSample,
    MotionState,
    OscillatoryMotionGenerator,
    classify,
    classify_magnitudes,
    dynamic_acceleration,
    gyro_magnitude,
)

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _make_sample(dynamic: float = 0.0, gyro: float = 0.0) -> IMUSample:
    """Sample whose dynamic acceleration and gyro magnitude equal the inputs."""
    return IMUSample(
        time=0.0,
        accel_x=dynamic,
        accel_y=0.0,
        accel_z=9.8,
        gyro_x=0.0,
        gyro_y=0.0,
        gyro_z=gyro,
    )


# ---------------------------------------------------------------------------
# Magnitudes
# ---------------------------------------------------------------------------


class TestMagnitudes:
    def test_gravity_only_has_zero_dynamic_acceleration(self):
        assert dynamic_acceleration(_make_sample()) == pytest.approx(0.0)

    def test_dynamic_acceleration_removes_gravity_from_z(self):
        sample = IMUSample(0.0, 3.0, 0.0, 9.8 + 4.0, 0.0, 0.0, 0.0)
        assert dynamic_acceleration(sample) == pytest.approx(5.0)

    def test_dynamic_acceleration_uses_all_axes(self):
        sample = IMUSample(0.0, 1.0, 2.0, 9.8 + 2.0, 0.0, 0.0, 0.0)
        assert dynamic_acceleration(sample) == pytest.approx(3.0)

    def test_gyro_magnitude(self):
        sample = IMUSample(0.0, 0.0, 0.0, 9.8, 2.0, 3.0, 6.0)
        assert gyro_magnitude(sample) == pytest.approx(7.0)


# ---------------------------------------------------------------------------
# Threshold cascade
# ---------------------------------------------------------------------------


class TestClassifyMagnitudes:
    @pytest.mark.parametrize(
        ("dynamic", "gyro", "expected"),
        [
            (0.4, 10.0, MotionState.STATIONARY),
            (1.0, 30.0, MotionState.SLOW_MOVE),
            (3.0, 80.0, MotionState.NORMAL_MOVE),
            (0.0, 150.0, MotionState.FAST_ROTATION),
            (3.0, 150.0, MotionState.FAST_ROTATION),
            (50.0, 150.0, MotionState.FAST_ROTATION),
            (10.0, 10.0, MotionState.VIOLENT),
        ],
    )
    def test_reference_points(self, dynamic, gyro, expected):
        assert classify_magnitudes(dynamic, gyro) is expected

    def test_stationary_acc_with_high_gyro_is_slow(self):
        assert classify_magnitudes(0.1, 25.0) is MotionState.SLOW_MOVE

    def test_boundary_acceleration_falls_to_next_branch(self):
        assert classify_magnitudes(0.5, 10.0) is MotionState.SLOW_MOVE
        assert classify_magnitudes(2.0, 10.0) is MotionState.NORMAL_MOVE
        assert classify_magnitudes(5.0, 10.0) is MotionState.VIOLENT

    def test_boundary_gyro_falls_to_next_branch(self):
        assert classify_magnitudes(0.1, 20.0) is MotionState.SLOW_MOVE
        assert classify_magnitudes(0.1, 50.0) is MotionState.NORMAL_MOVE

    def test_gyro_exactly_100_is_not_fast_rotation(self):
        assert classify_magnitudes(0.1, 100.0) is MotionState.VIOLENT
        assert classify_magnitudes(6.0, 100.0) is MotionState.VIOLENT

    def test_gyro_just_above_100_is_fast_rotation(self):
        assert classify_magnitudes(6.0, 100.001) is MotionState.FAST_ROTATION


# ---------------------------------------------------------------------------
# classify
# ---------------------------------------------------------------------------


class TestClassify:
    def test_resting_sample_is_stationary(self):
        assert classify(_make_sample()) is MotionState.STATIONARY

    @pytest.mark.parametrize(
        ("dynamic", "gyro", "expected"),
        [
            (0.4, 10.0, MotionState.STATIONARY),
            (1.0, 30.0, MotionState.SLOW_MOVE),
            (3.0, 80.0, MotionState.NORMAL_MOVE),
            (10.0, 150.0, MotionState.FAST_ROTATION),
            (10.0, 10.0, MotionState.VIOLENT),
        ],
    )
    def test_samples_match_magnitude_cascade(self, dynamic, gyro, expected):
        assert classify(_make_sample(dynamic, gyro)) is expected

    def test_repeated_calls_return_same_state(self):
        sample = _make_sample(1.0, 30.0)
        states = {classify(sample) for _ in range(100)}
        assert states == {MotionState.SLOW_MOVE}

    def test_circular_start_is_normal_move(self):
        # dynamic = 3.75, gyro = sqrt(5² + 28.65²) ≈ 29.1
        sample = CircularMotionGenerator(noise=lambda _level: 0.0).generate(0.0)
        assert classify(sample) is MotionState.NORMAL_MOVE

    @pytest.mark.parametrize("generator_cls", [CircularMotionGenerator, OscillatoryMotionGenerator])
    def test_total_over_generated_samples(self, generator_cls):
        generator = generator_cls()
        for i in range(500):
            assert isinstance(classify(generator.generate(i * 0.1)), MotionState)


# ---------------------------------------------------------------------------
# MotionState
# ---------------------------------------------------------------------------


class TestMotionState:
    def test_five_states(self):
        assert len(MotionState) == 5

    def test_each_state_has_label_and_color(self):
        for state in MotionState:
            assert state.label
            assert state.color.startswith("#")
            assert len(state.color) == 7

    def test_keys_are_unique(self):
        assert len({state.key for state in MotionState}) == 5

    def test_colors(self):
        assert MotionState.STATIONARY.color == "#10b981"
        assert MotionState.VIOLENT.color == "#ef4444"


def test_magnitudes_are_finite_for_extreme_inputs():
    sample = IMUSample(0.0, 1e150, -1e150, 1e150, 1e150, 1e150, -1e150)
    assert math.isfinite(dynamic_acceleration(sample))
    assert math.isfinite(gyro_magnitude(sample))
