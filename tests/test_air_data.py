"""
Wind and Air Data Tests

Tests for:
- Relative airflow and wind frame bookkeeping
- Airspeed, angle of attack and sideslip
- Low-airspeed guards
"""

import logging

import pytest
import numpy as np

from fixedwing.core.state import AircraftState, WindVector
from fixedwing.core.wind import resolve_wind
from fixedwing.core.air_data import (
    AirData,
    compute_air_data,
    MIN_AIRSPEED_EPSILON,
    _clip_unit
)


class TestWindResolution:
    """Test body-frame wind and relative airflow."""

    def test_calm_air(self):
        """Without wind the airflow equals the body velocity."""
        state = AircraftState(u=20.0, v=1.0, w=-2.0, phi=0.1, theta=0.2, psi=0.3)
        airflow, wind_body, wind_ned = resolve_wind(state, WindVector.calm())

        assert np.allclose(airflow, [20.0, 1.0, -2.0])
        assert np.allclose(wind_body, 0.0)
        assert np.allclose(wind_ned, 0.0)

    def test_none_is_calm(self):
        state = AircraftState(u=15.0, theta=0.05)
        airflow, _, wind_ned = resolve_wind(state, None)

        assert np.allclose(airflow, [15.0, 0.0, 0.0])
        assert np.allclose(wind_ned, 0.0)

    def test_headwind(self):
        """Air moving south while flying north adds to the airspeed."""
        state = AircraftState(u=20.0)
        airflow, wind_body, _ = resolve_wind(state, WindVector(north=-5.0))

        assert np.allclose(wind_body, [-5.0, 0.0, 0.0])
        assert np.allclose(airflow, [25.0, 0.0, 0.0])

    def test_crosswind_heading_east(self):
        """Wind blowing north is a crosswind when heading east."""
        state = AircraftState(u=20.0, psi=np.pi / 2)
        airflow, wind_body, _ = resolve_wind(state, WindVector(north=4.0))

        assert np.allclose(wind_body, [0.0, -4.0, 0.0], atol=1e-12)
        assert np.allclose(airflow, [20.0, 4.0, 0.0], atol=1e-12)

    def test_gust_is_body_axis(self):
        """Gusts are added without rotation."""
        state = AircraftState(u=20.0, phi=0.3, theta=-0.2, psi=1.0)
        _, wind_body, _ = resolve_wind(state, WindVector(gust_x=1.0, gust_y=-2.0, gust_z=0.5))

        assert np.allclose(wind_body, [1.0, -2.0, 0.5])

    def test_wind_ned_from_gust(self):
        """A forward gust while heading east is an east wind."""
        state = AircraftState(u=20.0, psi=np.pi / 2)
        _, _, wind_ned = resolve_wind(state, WindVector(gust_x=3.0))

        assert np.allclose(wind_ned, [0.0, 3.0, 0.0], atol=1e-12)

    def test_steady_wind_reported_unchanged(self):
        """Steady wind alone comes back out in NED unchanged."""
        state = AircraftState(u=20.0, phi=0.4, theta=0.3, psi=-1.2)
        wind = WindVector(north=3.0, east=-2.0, down=0.5)
        _, _, wind_ned = resolve_wind(state, wind)

        assert np.allclose(wind_ned, [3.0, -2.0, 0.5], atol=1e-12)


class TestAirData:
    """Test airspeed and flow angles."""

    def test_zero_wind_calibration(self):
        """Level flight at 20 m/s in calm air."""
        state = AircraftState(u=20.0)
        airflow, _, _ = resolve_wind(state, WindVector.calm())
        air_data = compute_air_data(airflow)

        assert air_data.Va == 20.0
        assert air_data.alpha == 0.0
        assert air_data.beta == 0.0

    def test_angle_of_attack(self):
        air_data = compute_air_data(np.array([20.0, 0.0, 2.0]))

        assert np.isclose(air_data.Va, np.sqrt(404.0))
        assert np.isclose(air_data.alpha, np.arctan2(2.0, 20.0))
        assert air_data.beta == 0.0

    def test_negative_alpha_from_updraft(self):
        """An upward gust lowers the angle of attack."""
        state = AircraftState(u=20.0)
        airflow, _, _ = resolve_wind(state, WindVector(gust_z=2.0))
        air_data = compute_air_data(airflow)

        assert np.isclose(air_data.alpha, np.arctan2(-2.0, 20.0))

    def test_sideslip(self):
        air_data = compute_air_data(np.array([4.0, 3.0, 0.0]))

        assert np.isclose(air_data.Va, 5.0)
        assert np.isclose(air_data.beta, np.arcsin(0.6))

    def test_pure_lateral_flow(self):
        """All airflow from the side gives beta = 90 deg and alpha guarded to 0."""
        air_data = compute_air_data(np.array([0.0, 7.0, 0.0]))

        assert np.isclose(air_data.Va, 7.0)
        assert air_data.alpha == 0.0
        assert np.isclose(air_data.beta, np.pi / 2)

    def test_alpha_guard_small_forward_flow(self):
        """Vertical flow with no forward component gives alpha = 0."""
        air_data = compute_air_data(np.array([0.5 * MIN_AIRSPEED_EPSILON, 0.0, 5.0]))

        assert np.isclose(air_data.Va, 5.0)
        assert air_data.alpha == 0.0
        assert air_data.beta == 0.0

    def test_below_threshold(self):
        air_data = compute_air_data(np.array([1e-6, 1e-6, 1e-6]))

        assert air_data.Va <= MIN_AIRSPEED_EPSILON
        assert air_data.alpha == 0.0
        assert air_data.beta == 0.0
        assert not air_data.has_airflow

    def test_zero_airflow(self):
        air_data = compute_air_data(np.zeros(3))

        assert air_data == AirData(Va=0.0, alpha=0.0, beta=0.0)

    def test_input_not_modified(self):
        airflow = np.array([20.0, 1.0, 1.0])
        compute_air_data(airflow)
        assert np.array_equal(airflow, [20.0, 1.0, 1.0])


class TestSideslipClamp:
    """Test asin argument clamping."""

    def test_in_range_unchanged(self):
        assert _clip_unit(0.25) == 0.25
        assert _clip_unit(-1.0) == -1.0

    def test_round_off_clamped(self, caplog):
        caplog.set_level(logging.DEBUG, logger='fixedwing.core.air_data')

        assert _clip_unit(1.0 + 1e-12) == 1.0
        assert _clip_unit(-1.0 - 1e-12) == -1.0
        assert 'clamped' in caplog.text

    def test_beta_always_finite(self):
        rng = np.random.default_rng(7)

        for _ in range(100):
            airflow = rng.normal(scale=20.0, size=3)
            air_data = compute_air_data(airflow)
            assert np.isfinite(air_data.beta)
            assert abs(air_data.beta) <= np.pi / 2


if __name__ == "__main__":
    pytest.main([__file__, '-v'])
