"""
Propeller model for 6-DOF flight dynamics.

Thrust follows the simple momentum-theory form

    T = 0.5 * rho * S_prop * C_prop * ((k_motor * delta_t)^2 - Va^2)

acting along the body x-axis, and the spinning propeller reacts on the
airframe with a roll torque -k_T_P * (k_Omega * delta_t)^2. Thrust turns
negative when the airspeed exceeds the motor exit speed; that regime is
modelled as drag rather than clipped.
"""

import numpy as np
from typing import Tuple

from .parameters import AircraftParameters


def propeller_thrust(throttle: float, Va: float, params: AircraftParameters) -> float:
    """Propeller thrust along body x (N)."""
    return 0.5 * params.rho * params.S_prop * params.C_prop * (
        (params.k_motor * throttle)**2 - Va**2)


def propeller_torque(throttle: float, params: AircraftParameters) -> float:
    """Propeller reaction torque about body x (N*m). Independent of airspeed."""
    return -params.k_T_P * (params.k_Omega * throttle)**2


def compute_thrust(throttle: float, Va: float,
                   params: AircraftParameters) -> Tuple[np.ndarray, np.ndarray]:
    """
    Compute propulsion forces and moments.

    Parameters:
    -----------
    throttle : float
        Throttle command, nominally [0, 1]
    Va : float
        Airspeed (m/s)
    params : AircraftParameters
        Propulsion constants, air density and propeller area

    Returns:
    --------
    forces : np.ndarray, shape (3,)
        [F_prop, 0, 0] in body frame (N)
    moments : np.ndarray, shape (3,)
        [Q_prop, 0, 0] in body frame (N*m)
    """
    forces = np.hstack([propeller_thrust(throttle, Va, params), 0.0, 0.0])
    moments = np.hstack([propeller_torque(throttle, params), 0.0, 0.0])

    return forces, moments
