"""
Forces and Moments Demonstration

Loads the Aerosonde configuration and evaluates the forces and moments
model for a few representative flight conditions:
- Cruise in calm air
- Cruise in a crosswind with a vertical gust
- Static run-up on the ground (zero airspeed)
"""

import logging
import os
import sys

import numpy as np

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from fixedwing.core import AircraftState, ControlInputs, WindVector, compute_forces_and_moments
from fixedwing.io.config import load_aircraft_config


def print_result(title, result):
    print(title)
    print(f"  Va:     {result.Va:8.3f} m/s")
    print(f"  alpha:  {np.degrees(result.alpha):8.3f} deg")
    print(f"  beta:   {np.degrees(result.beta):8.3f} deg")
    print(f"  Force:  [{result.force[0]:9.3f}, {result.force[1]:9.3f}, {result.force[2]:9.3f}] N")
    print(f"  Torque: [{result.torque[0]:9.3f}, {result.torque[1]:9.3f}, {result.torque[2]:9.3f}] N*m")
    print(f"  Wind:   [{result.wind_ned[0]:7.3f}, {result.wind_ned[1]:7.3f}, {result.wind_ned[2]:7.3f}] m/s (NED)")
    print()


def main():
    """Run forces and moments demonstration."""
    logging.basicConfig(level=logging.INFO, format='%(levelname)s %(name)s: %(message)s')

    print("=" * 70)
    print("Forces and Moments Demonstration")
    print("=" * 70)
    print()

    config_path = os.path.join(os.path.dirname(__file__), '..', 'config', 'aerosonde.yaml')
    config = load_aircraft_config(config_path)
    params = config.parameters

    print(f"Aircraft: {config.name}")
    print(f"  Mass: {params.mass:.2f} kg, wing area: {params.S_wing:.3f} m^2, span: {params.b:.3f} m")
    print()

    cruise = AircraftState(pd=-100.0, u=25.0, w=1.0)
    controls = ControlInputs(elevator=np.radians(-5.0), throttle=0.6)

    # 1. Calm air
    print_result("1. Cruise, calm air:",
                 compute_forces_and_moments(cruise, controls, WindVector.calm(), params))

    # 2. Crosswind from the east plus an upward gust
    wind = WindVector(east=-3.0, gust_z=-1.0)
    print_result("2. Cruise, 3 m/s crosswind with 1 m/s gust:",
                 compute_forces_and_moments(cruise, controls, wind, params))

    # 3. Static run-up
    parked = AircraftState()
    print_result("3. Static run-up (no airspeed, full throttle):",
                 compute_forces_and_moments(parked, ControlInputs(throttle=1.0), None, params))


if __name__ == "__main__":
    main()
