"""
International Standard Atmosphere (ISA / US Standard Atmosphere 1976)

Provides atmospheric properties as a function of geometric altitude:
- Temperature
- Pressure
- Density
- Speed of sound

Units: SI (meters, kelvin, pascal, kg/m^3)
"""

import numpy as np


class StandardAtmosphere:
    """
    Standard atmosphere model from sea level to 32 km.

    Parameters
    ----------
    altitude : float
        Geometric altitude in meters above MSL

    Attributes
    ----------
    temperature : float
        Static temperature (K)
    pressure : float
        Static pressure (Pa)
    density : float
        Air density (kg/m^3)
    speed_of_sound : float
        Speed of sound (m/s)

    Notes
    -----
    Model covers three atmospheric layers:
    - Troposphere: 0 - 11,000 m (temperature decreases linearly)
    - Lower Stratosphere: 11,000 - 20,000 m (isothermal)
    - Upper Stratosphere: 20,000 - 32,000 m (temperature increases)
    """

    # Sea level conditions
    T0 = 288.15  # K (15 C)
    P0 = 101325.0  # Pa
    rho0 = 1.225  # kg/m^3

    # Gas constant for air
    R = 287.05287  # J/(kg K)

    # Standard gravity
    g0 = 9.80665  # m/s^2

    # Ratio of specific heats
    gamma = 1.4

    # Layer boundaries (m)
    h_trop = 11000.0
    h_strat1 = 20000.0
    h_max = 32000.0

    # Temperature lapse rates (K/m)
    lapse_trop = -0.0065
    lapse_strat2 = 0.001

    def __init__(self, altitude: float = 0.0):
        """
        Initialize atmosphere at specified altitude.

        Parameters
        ----------
        altitude : float, optional
            Geometric altitude in meters (default: 0.0, sea level)
        """
        if altitude < 0.0 or altitude > self.h_max:
            raise ValueError(
                f"Altitude {altitude} m outside standard atmosphere range "
                f"[0, {self.h_max:.0f}] m")
        self.altitude = altitude
        self._compute_properties()

    def _compute_properties(self):
        """Compute all atmospheric properties at current altitude."""
        h = self.altitude

        # Conditions at the top of the troposphere
        T_trop = self.T0 + self.lapse_trop * self.h_trop
        P_trop = self.P0 * (T_trop / self.T0)**(-self.g0 / (self.lapse_trop * self.R))

        if h <= self.h_trop:
            self.temperature = self.T0 + self.lapse_trop * h
            exponent = -self.g0 / (self.lapse_trop * self.R)
            self.pressure = self.P0 * (self.temperature / self.T0)**exponent

        elif h <= self.h_strat1:
            # Isothermal layer
            self.temperature = T_trop
            self.pressure = P_trop * np.exp(-self.g0 * (h - self.h_trop) / (self.R * T_trop))

        else:
            P_strat1 = P_trop * np.exp(
                -self.g0 * (self.h_strat1 - self.h_trop) / (self.R * T_trop))

            self.temperature = T_trop + self.lapse_strat2 * (h - self.h_strat1)
            exponent = -self.g0 / (self.lapse_strat2 * self.R)
            self.pressure = P_strat1 * (self.temperature / T_trop)**exponent

        # Density from ideal gas law
        self.density = self.pressure / (self.R * self.temperature)

        self.speed_of_sound = np.sqrt(self.gamma * self.R * self.temperature)

    def get_mach_number(self, velocity: float) -> float:
        """Mach number for a true airspeed in m/s."""
        return velocity / self.speed_of_sound

    def get_dynamic_pressure(self, velocity: float) -> float:
        """
        Compute dynamic pressure.

        Parameters
        ----------
        velocity : float
            True airspeed in m/s

        Returns
        -------
        float
            Dynamic pressure q = 0.5 * rho * V^2 (Pa)
        """
        return 0.5 * self.density * velocity**2

    def __repr__(self):
        """String representation."""
        return (f"StandardAtmosphere(altitude={self.altitude:.0f} m, "
                f"T={self.temperature - 273.15:.1f} C, "
                f"P={self.pressure:.0f} Pa, "
                f"rho={self.density:.4f} kg/m^3)")
