"""Tests for Wave kinematics."""
import math

import pytest

from wavebar import Wave, WaveParams, preset_named

BAR = 3000


@pytest.fixture
def medium() -> WaveParams:
    return preset_named("medium").wave


class TestDerivedQuantities:
    """Speed, wavelength and timing derived at construction."""

    def test_medium_preset_timing(self, medium):
        """c = (omega / k) * speed_scale and duration = travel + half period."""
        wave = Wave(1, BAR, medium, 0.0)

        assert wave.c == pytest.approx(800.0 * 4.8)
        assert wave.wavelength == pytest.approx(2 * math.pi / 0.05)
        assert wave.half_period == pytest.approx(math.pi / 40)
        assert wave.travel_time == pytest.approx(BAR / 3840.0)
        assert wave.duration == pytest.approx(wave.travel_time + wave.half_period)

    def test_default_scales_are_one(self):
        """speed_scale and push_scale default to 1."""
        wave = Wave(1, BAR, WaveParams(amplitude=100, alpha=0.0, omega=10, k=0.1), 0.0)
        assert wave.c == pytest.approx(100.0)
        assert wave.params.push_scale == 1.0

    def test_invalid_direction_raises(self, medium):
        with pytest.raises(ValueError):
            Wave(0, BAR, medium, 0.0)

    def test_starts_unpushed(self, medium):
        assert Wave(-1, BAR, medium, 0.0).block_pushed is False


class TestActive:

    def test_medium_wave_scenario(self, medium):
        """Active halfway through its travel, inactive just after its duration."""
        wave = Wave(1, BAR, medium, 0.0)
        assert wave.active(wave.travel_time / 2)
        assert not wave.active(wave.duration + 0.01)

    def test_bounds_inclusive(self, medium):
        wave = Wave(1, BAR, medium, 2.0)
        assert not wave.active(1.999)
        assert wave.active(2.0)
        assert wave.active(2.0 + wave.duration)


class TestDisplacement:

    @pytest.mark.parametrize("direction", [1, -1])
    def test_zero_outside_lifetime(self, medium, direction):
        """Displacement is exactly zero before launch and after the duration."""
        wave = Wave(direction, BAR, medium, 1.0)
        for x in (0.0, 750.0, 1500.0, 2999.0):
            assert wave.displacement_at(x, 0.5) == 0.0
            assert wave.displacement_at(x, 1.0 + wave.duration + 1e-6) == 0.0

    def test_zero_ahead_of_front(self, medium):
        """A point the front has not reached yet is not displaced."""
        wave = Wave(1, BAR, medium, 0.0)
        t = 0.1
        ahead = wave.front_position(t) + 10
        assert wave.displacement_at(ahead, t) == 0.0

    def test_zero_after_pulse_passes(self, medium):
        """Once the half-sine has passed a point it is at rest again."""
        wave = Wave(1, BAR, medium, 0.0)
        x = 100.0
        t = x / wave.c + wave.half_period + 0.01
        assert wave.displacement_at(x, t) == 0.0

    def test_peak_at_emission_edge(self, medium):
        """A quarter period after launch the left edge sits at +A0."""
        wave = Wave(1, BAR, medium, 0.0)
        t = wave.half_period / 2
        assert wave.displacement_at(0.0, t) == pytest.approx(500.0)

    def test_leftward_wave_is_negative(self, medium):
        """The mirrored wave displaces toward the left."""
        wave = Wave(-1, BAR, medium, 0.0)
        t = wave.half_period / 2
        assert wave.displacement_at(BAR, t) == pytest.approx(-500.0)

    def test_amplitude_decays_with_distance(self, medium):
        """Peak displacement shrinks by exp(-alpha * distance)."""
        wave = Wave(1, BAR, medium, 0.0)
        x = 1000.0
        t = x / wave.c + wave.half_period / 2
        expected = 500.0 * math.exp(-0.0015 * x)
        assert wave.displacement_at(x, t) == pytest.approx(expected)


class TestFront:

    def test_front_moves_linearly(self, medium):
        wave = Wave(1, BAR, medium, 1.0)
        assert wave.front_position(1.0) == pytest.approx(0.0)
        assert wave.front_position(1.5) == pytest.approx(0.5 * wave.c)

    def test_front_not_clamped(self, medium):
        """The front keeps going past the bar end."""
        left = Wave(1, BAR, medium, 0.0)
        right = Wave(-1, BAR, medium, 0.0)
        assert left.front_position(10.0) > BAR
        assert right.front_position(10.0) < 0

    def test_reaches(self, medium):
        left = Wave(1, BAR, medium, 0.0)
        right = Wave(-1, BAR, medium, 0.0)
        t = 1500.0 / left.c
        assert left.reaches(1500.0, t + 1e-9)
        assert not left.reaches(1500.0, t - 0.01)
        assert right.reaches(1500.0, t + 1e-9)
        assert not right.reaches(1500.0, t - 0.01)

    def test_push_distance(self, medium):
        """Push = direction * wavelength * (A0 / 400) * push_scale."""
        expected = (2 * math.pi / 0.05) * (500 / 400) * 2.0
        assert Wave(1, BAR, medium, 0.0).push_distance() == pytest.approx(expected)
        assert Wave(-1, BAR, medium, 0.0).push_distance() == pytest.approx(-expected)
