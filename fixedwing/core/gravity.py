"""
Gravitational force in the body frame.
"""

import numpy as np

from .parameters import AircraftParameters
from .rotations import rotate_inertial_to_body


def gravity_force(phi: float, theta: float, psi: float,
                  params: AircraftParameters) -> np.ndarray:
    """
    Weight vector [0, 0, m*g] (NED) expressed in body axes (N).

    Yaw does not change the result but is accepted so the same rotation
    is used as for the wind.
    """
    return rotate_inertial_to_body(phi, theta, psi, 0.0, 0.0, params.mass * params.gravity)
