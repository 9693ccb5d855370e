"""
Standard Atmosphere Tests
"""

import pytest
import numpy as np

from fixedwing.environment.atmosphere import StandardAtmosphere


class TestStandardAtmosphere:
    """Test ISA properties against tabulated values."""

    def test_sea_level(self):
        atm = StandardAtmosphere(altitude=0)

        assert np.isclose(atm.temperature, 288.15)
        assert np.isclose(atm.pressure, 101325.0)
        assert np.isclose(atm.density, 1.225, rtol=1e-3)
        assert np.isclose(atm.speed_of_sound, 340.29, rtol=1e-3)

    def test_tropopause(self):
        atm = StandardAtmosphere(altitude=11000)

        assert np.isclose(atm.temperature, 216.65)
        assert np.isclose(atm.pressure, 22632.0, rtol=1e-3)
        assert np.isclose(atm.density, 0.3639, rtol=1e-3)

    def test_lower_stratosphere(self):
        atm = StandardAtmosphere(altitude=20000)

        assert np.isclose(atm.temperature, 216.65)
        assert np.isclose(atm.pressure, 5474.9, rtol=1e-3)
        assert np.isclose(atm.density, 0.08803, rtol=1e-3)

    def test_upper_stratosphere(self):
        atm = StandardAtmosphere(altitude=25000)

        assert np.isclose(atm.temperature, 221.65)
        assert np.isclose(atm.pressure, 2511.0, rtol=2e-3)

    def test_density_decreases(self):
        densities = [StandardAtmosphere(h).density for h in (0, 2000, 8000, 15000, 30000)]
        assert all(a > b for a, b in zip(densities, densities[1:]))

    def test_dynamic_pressure(self):
        atm = StandardAtmosphere(altitude=1000)
        assert np.isclose(atm.get_dynamic_pressure(25.0), 0.5 * atm.density * 25.0**2)

    def test_mach_number(self):
        atm = StandardAtmosphere(altitude=0)
        assert np.isclose(atm.get_mach_number(atm.speed_of_sound), 1.0)

    def test_out_of_range(self):
        with pytest.raises(ValueError):
            StandardAtmosphere(altitude=-10.0)
        with pytest.raises(ValueError):
            StandardAtmosphere(altitude=40000.0)

    def test_repr(self):
        assert 'StandardAtmosphere' in repr(StandardAtmosphere(altitude=500))


if __name__ == "__main__":
    pytest.main([__file__, '-v'])
