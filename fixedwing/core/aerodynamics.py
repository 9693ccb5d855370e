"""
Stability-derivative aerodynamics for a fixed-wing aircraft.

Provides:
- Nondimensional force and moment coefficient buildup
- Body-frame aerodynamic force (lift/drag rotated by alpha, plus side force)
- Body-frame aerodynamic moment (roll, pitch, yaw)

Both loads are exactly zero when the airspeed is at or below
MIN_AIRSPEED_EPSILON, since the rate terms scale with 1/Va.
"""

import numpy as np

from .air_data import AirData
from .parameters import AircraftParameters
from .state import ControlInputs


def dynamic_pressure(rho: float, Va: float) -> float:
    """Dynamic pressure 0.5 * rho * Va^2 (Pa)."""
    return 0.5 * rho * Va**2


def lift_coefficient(alpha: float, q: float, delta_e: float, Va: float,
                     params: AircraftParameters) -> float:
    """CL = CL_0 + CL_alpha*alpha + CL_q*q_hat + CL_de*de."""
    q_hat = params.c / (2 * Va) * q
    return (params.CL_0 + params.CL_alpha * alpha
            + params.CL_q * q_hat + params.CL_de * delta_e)


def drag_coefficient(alpha: float, q: float, delta_e: float, Va: float,
                     params: AircraftParameters) -> float:
    """CD = CD_0 + CD_alpha*alpha + CD_q*q_hat + CD_de*de."""
    q_hat = params.c / (2 * Va) * q
    return (params.CD_0 + params.CD_alpha * alpha
            + params.CD_q * q_hat + params.CD_de * delta_e)


def side_force_coefficient(beta: float, p: float, r: float,
                           delta_a: float, delta_r: float, Va: float,
                           params: AircraftParameters) -> float:
    """CY = CY_0 + CY_beta*beta + CY_p*p_hat + CY_r*r_hat + CY_da*da + CY_dr*dr."""
    p_hat = params.b / (2 * Va) * p
    r_hat = params.b / (2 * Va) * r
    return (params.CY_0 + params.CY_beta * beta
            + params.CY_p * p_hat + params.CY_r * r_hat
            + params.CY_da * delta_a + params.CY_dr * delta_r)


def roll_moment_coefficient(beta: float, p: float, r: float,
                            delta_a: float, delta_r: float, Va: float,
                            params: AircraftParameters) -> float:
    p_hat = params.b / (2 * Va) * p
    r_hat = params.b / (2 * Va) * r
    return (params.Cl_0 + params.Cl_beta * beta
            + params.Cl_p * p_hat + params.Cl_r * r_hat
            + params.Cl_da * delta_a + params.Cl_dr * delta_r)


def pitch_moment_coefficient(alpha: float, q: float, delta_e: float, Va: float,
                             params: AircraftParameters) -> float:
    q_hat = params.c / (2 * Va) * q
    return (params.Cm_0 + params.Cm_alpha * alpha
            + params.Cm_q * q_hat + params.Cm_de * delta_e)


def yaw_moment_coefficient(beta: float, p: float, r: float,
                           delta_a: float, delta_r: float, Va: float,
                           params: AircraftParameters) -> float:
    p_hat = params.b / (2 * Va) * p
    r_hat = params.b / (2 * Va) * r
    return (params.Cn_0 + params.Cn_beta * beta
            + params.Cn_p * p_hat + params.Cn_r * r_hat
            + params.Cn_da * delta_a + params.Cn_dr * delta_r)


def aerodynamic_forces(air_data: AirData, rates: np.ndarray,
                       controls: ControlInputs,
                       params: AircraftParameters) -> np.ndarray:
    """
    Compute aerodynamic force in the body frame.

    Parameters:
    -----------
    air_data : AirData
        Airspeed, angle of attack and sideslip
    rates : np.ndarray, shape (3,)
        Body angular rates [p, q, r] (rad/s)
    controls : ControlInputs
        Surface deflections (rad)
    params : AircraftParameters
        Aircraft geometry and derivatives

    Returns:
    --------
    forces : np.ndarray, shape (3,)
        [Fx, Fy, Fz] in body frame (N)
    """
    if not air_data.has_airflow:
        return np.zeros(3)

    Va, alpha, beta = air_data.Va, air_data.alpha, air_data.beta
    p, q, r = rates

    CL = lift_coefficient(alpha, q, controls.elevator, Va, params)
    CD = drag_coefficient(alpha, q, controls.elevator, Va, params)
    CY = side_force_coefficient(beta, p, r, controls.aileron, controls.rudder, Va, params)

    # Stability frame to body frame
    C_X = -CD * np.cos(alpha) + CL * np.sin(alpha)
    C_Z = -CD * np.sin(alpha) - CL * np.cos(alpha)

    q_bar_S = dynamic_pressure(params.rho, Va) * params.S_wing

    return q_bar_S * np.array([C_X, CY, C_Z])


def aerodynamic_moments(air_data: AirData, rates: np.ndarray,
                        controls: ControlInputs,
                        params: AircraftParameters) -> np.ndarray:
    """
    Compute aerodynamic moment in the body frame.

    Same inputs as aerodynamic_forces().

    Returns:
    --------
    moments : np.ndarray, shape (3,)
        [L, M, N] roll, pitch, yaw in body frame (N*m)
    """
    if not air_data.has_airflow:
        return np.zeros(3)

    Va, alpha, beta = air_data.Va, air_data.alpha, air_data.beta
    p, q, r = rates
    delta_a, delta_r = controls.aileron, controls.rudder

    L_roll = params.b * roll_moment_coefficient(beta, p, r, delta_a, delta_r, Va, params)
    M_pitch = params.c * pitch_moment_coefficient(alpha, q, controls.elevator, Va, params)
    N_yaw = params.b * yaw_moment_coefficient(beta, p, r, delta_a, delta_r, Va, params)

    q_bar_S = dynamic_pressure(params.rho, Va) * params.S_wing

    return q_bar_S * np.array([L_roll, M_pitch, N_yaw])
