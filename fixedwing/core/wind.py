"""
Wind resolution: total wind in body axes and airflow relative to the body.
"""

import numpy as np
from typing import Optional, Tuple

from .rotations import rotate_inertial_to_body, rotate_body_to_inertial
from .state import AircraftState, WindVector


def resolve_wind(state: AircraftState,
                 wind: Optional[WindVector] = None) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Combine steady wind and gusts with the body velocity.

    Parameters:
    -----------
    state : AircraftState
        Current aircraft state (attitude and body velocity are used)
    wind : WindVector, optional
        Steady NED wind plus body-frame gust. None means calm air.

    Returns:
    --------
    airflow_body : np.ndarray, shape (3,)
        Velocity relative to the air mass in body frame [u_r, v_r, w_r] (m/s)
    wind_body : np.ndarray, shape (3,)
        Total wind in body frame [u_w, v_w, w_w] (m/s)
    wind_ned : np.ndarray, shape (3,)
        Total wind in inertial frame [w_n, w_e, w_d] (m/s)
    """
    if wind is None:
        wind = WindVector.calm()

    phi, theta, psi = state.euler_angles

    # Steady wind is inertial, gusts are already body-axis
    steady_body = rotate_inertial_to_body(phi, theta, psi, *wind.steady_ned)
    wind_body = steady_body + wind.gust_body

    airflow_body = state.velocity_body - wind_body

    wind_ned = rotate_body_to_inertial(phi, theta, psi, *wind_body)

    return airflow_body, wind_body, wind_ned
