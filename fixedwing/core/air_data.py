"""
Air data from the relative airflow: airspeed, angle of attack, sideslip.
"""

import logging

import numpy as np

from archimedes import struct

logger = logging.getLogger(__name__)

# Below this airspeed (m/s) the flow angles and aerodynamic loads are zero
MIN_AIRSPEED_EPSILON = 1e-5


@struct(frozen=True)
class AirData:
    """Airspeed Va (m/s), angle of attack alpha and sideslip beta (rad)."""

    Va: float = 0.0
    alpha: float = 0.0
    beta: float = 0.0

    @property
    def has_airflow(self) -> bool:
        """True when Va exceeds MIN_AIRSPEED_EPSILON."""
        return self.Va > MIN_AIRSPEED_EPSILON


def compute_air_data(airflow_body: np.ndarray) -> AirData:
    """
    Compute air data from the body-frame relative airflow.

    Parameters:
    -----------
    airflow_body : np.ndarray, shape (3,)
        Relative airflow [u_r, v_r, w_r] (m/s)

    Returns:
    --------
    air_data : AirData
        Va = |airflow|
        alpha = atan2(w_r, u_r), or 0 when |u_r| <= MIN_AIRSPEED_EPSILON
        beta = asin(v_r / Va), or 0 when Va <= MIN_AIRSPEED_EPSILON
    """
    u_r, v_r, w_r = (float(value) for value in airflow_body)

    Va = float(np.sqrt(u_r**2 + v_r**2 + w_r**2))

    if abs(u_r) > MIN_AIRSPEED_EPSILON:
        alpha = float(np.arctan2(w_r, u_r))
    else:
        alpha = 0.0

    if Va > MIN_AIRSPEED_EPSILON:
        beta = float(np.arcsin(_clip_unit(v_r / Va)))
    else:
        logger.debug("Airspeed %.3g m/s below threshold, flow angles zeroed", Va)
        beta = 0.0

    return AirData(Va=Va, alpha=alpha, beta=beta)


def _clip_unit(ratio: float) -> float:
    """Clamp an asin argument to [-1, 1]."""
    clipped = float(np.clip(ratio, -1.0, 1.0))
    if clipped != ratio:
        logger.debug("Sideslip ratio %.17g clamped to %.1f", ratio, clipped)
    return clipped
