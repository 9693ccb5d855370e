"""
Total external forces and moments on the airframe.

Sums aerodynamic, propulsion and gravity contributions in the body frame
and reports the air data used to build them.
"""

import numpy as np
from typing import Optional, Tuple

from archimedes import struct

from .aerodynamics import aerodynamic_forces, aerodynamic_moments
from .air_data import compute_air_data
from .gravity import gravity_force
from .parameters import AircraftParameters
from .propulsion import compute_thrust
from .state import AircraftState, ControlInputs, WindVector
from .wind import resolve_wind


@struct(frozen=True)
class ForcesMomentsResult:
    """
    Output of compute_forces_and_moments().

    Attributes:
    -----------
    force : np.ndarray, shape (3,)
        Total force in body frame (N)
    torque : np.ndarray, shape (3,)
        Total moment in body frame (N*m)
    Va : float
        Airspeed (m/s)
    alpha : float
        Angle of attack (rad)
    beta : float
        Sideslip angle (rad)
    wind_ned : np.ndarray, shape (3,)
        Total wind in inertial frame (m/s)
    """

    force: np.ndarray
    torque: np.ndarray
    Va: float
    alpha: float
    beta: float
    wind_ned: np.ndarray

    def to_array(self) -> np.ndarray:
        """Return [Fx, Fy, Fz, L, M, N, Va, alpha, beta, w_n, w_e, w_d]."""
        return np.hstack([self.force, self.torque,
                          self.Va, self.alpha, self.beta,
                          self.wind_ned])


def compute_forces_and_moments(state: AircraftState,
                               controls: ControlInputs,
                               wind: Optional[WindVector],
                               params: AircraftParameters) -> ForcesMomentsResult:
    """
    Compute the forces and moments acting on the airframe.

    Parameters:
    -----------
    state : AircraftState
        Current aircraft state
    controls : ControlInputs
        Surface deflections (rad) and throttle
    wind : WindVector or None
        Steady NED wind plus body gust; None for calm air
    params : AircraftParameters
        Aircraft configuration (read only)

    Returns:
    --------
    result : ForcesMomentsResult
        Body-frame force and torque with air data and NED wind
    """
    airflow_body, _, wind_ned = resolve_wind(state, wind)
    air_data = compute_air_data(airflow_body)

    rates = state.angular_rates

    # Aerodynamics (zero below the airspeed threshold)
    F_aero = aerodynamic_forces(air_data, rates, controls, params)
    M_aero = aerodynamic_moments(air_data, rates, controls, params)

    # Propulsion
    F_prop, M_prop = compute_thrust(controls.throttle, air_data.Va, params)

    # Gravity
    F_grav = gravity_force(state.phi, state.theta, state.psi, params)

    return ForcesMomentsResult(
        force=F_aero + F_prop + F_grav,
        torque=M_aero + M_prop,
        Va=air_data.Va,
        alpha=air_data.alpha,
        beta=air_data.beta,
        wind_ned=wind_ned,
    )


class ForcesMomentsModel:
    """
    Forces and moments model bound to one aircraft and wind condition.

    Convenience wrapper for integrators that expect a callback returning
    (forces, moments).
    """

    def __init__(self, params: AircraftParameters, wind: Optional[WindVector] = None):
        """
        Initialize model.

        Parameters:
        -----------
        params : AircraftParameters
            Aircraft configuration
        wind : WindVector, optional
            Wind applied on every call (default: calm)
        """
        self.params = params
        self.wind = wind if wind is not None else WindVector.calm()

    def __call__(self, state: AircraftState, controls: ControlInputs) -> ForcesMomentsResult:
        return compute_forces_and_moments(state, controls, self.wind, self.params)

    def forces_moments(self, state: AircraftState,
                       controls: ControlInputs) -> Tuple[np.ndarray, np.ndarray]:
        """
        Compute total forces and moments only.

        Returns:
        --------
        forces : np.ndarray (3,)
            Total forces in body frame (N)
        moments : np.ndarray (3,)
            Total moments in body frame (N*m)
        """
        result = self(state, controls)
        return result.force, result.torque
