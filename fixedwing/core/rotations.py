"""
Coordinate frame rotations between the inertial (NED) and body frames.

Convention: 3-2-1 Euler sequence (yaw psi, then pitch theta, then roll phi).
The direction cosine matrix built here maps inertial vectors into the
body frame; its transpose maps body vectors back to inertial.
"""

import numpy as np


def rotation_matrix_inertial_to_body(phi: float, theta: float, psi: float) -> np.ndarray:
    """
    Direction cosine matrix from NED inertial frame to body frame.

    Parameters:
    -----------
    phi : float
        Roll angle (rad)
    theta : float
        Pitch angle (rad)
    psi : float
        Yaw angle (rad)

    Returns:
    --------
    R : np.ndarray, shape (3, 3)
        Rotation matrix such that v_body = R @ v_inertial
    """
    c_phi, s_phi = np.cos(phi), np.sin(phi)
    c_theta, s_theta = np.cos(theta), np.sin(theta)
    c_psi, s_psi = np.cos(psi), np.sin(psi)

    return np.array([
        [c_theta*c_psi,
         c_theta*s_psi,
         -s_theta],
        [s_phi*s_theta*c_psi - c_phi*s_psi,
         s_phi*s_theta*s_psi + c_phi*c_psi,
         s_phi*c_theta],
        [c_phi*s_theta*c_psi + s_phi*s_psi,
         c_phi*s_theta*s_psi - s_phi*c_psi,
         c_phi*c_theta]
    ])


def rotate_inertial_to_body(phi: float, theta: float, psi: float,
                            x: float, y: float, z: float) -> np.ndarray:
    """Express an inertial-frame vector (north, east, down) in body axes."""
    R = rotation_matrix_inertial_to_body(phi, theta, psi)
    return R @ np.array([x, y, z], dtype=float)


def rotate_body_to_inertial(phi: float, theta: float, psi: float,
                            x: float, y: float, z: float) -> np.ndarray:
    """Express a body-frame vector in inertial (north, east, down) axes."""
    R = rotation_matrix_inertial_to_body(phi, theta, psi)
    return R.T @ np.array([x, y, z], dtype=float)
