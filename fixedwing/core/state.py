"""
Input snapshots for the forces and moments model.

- AircraftState: position (NED), body velocity, Euler attitude, body rates
- ControlInputs: surface deflections and throttle command
- WindVector: steady inertial wind plus body-frame gust
"""

import numpy as np
from typing import Tuple

from archimedes import struct


@struct(frozen=True)
class AircraftState:
    """
    Kinematic state of the aircraft at one instant.

    State variables (12 total):
    - Position: pn, pe, pd (NED inertial frame, m)
    - Velocity: u, v, w (body frame, m/s)
    - Attitude: phi, theta, psi (Euler angles, rad)
    - Angular rates: p, q, r (body frame, rad/s)
    """

    # Position in NED frame (m)
    pn: float = 0.0
    pe: float = 0.0
    pd: float = 0.0

    # Velocity in body frame (m/s)
    u: float = 0.0
    v: float = 0.0
    w: float = 0.0

    # Euler attitude (rad)
    phi: float = 0.0
    theta: float = 0.0
    psi: float = 0.0

    # Angular rates in body frame (rad/s)
    p: float = 0.0
    q: float = 0.0
    r: float = 0.0

    @property
    def position(self) -> np.ndarray:
        """Get position vector in NED frame (m)."""
        return np.hstack([self.pn, self.pe, self.pd])

    @property
    def velocity_body(self) -> np.ndarray:
        """Get velocity vector in body frame (m/s)."""
        return np.hstack([self.u, self.v, self.w])

    @property
    def euler_angles(self) -> Tuple[float, float, float]:
        """Get (phi, theta, psi) in radians."""
        return self.phi, self.theta, self.psi

    @property
    def angular_rates(self) -> np.ndarray:
        """Get angular rate vector in body frame (rad/s)."""
        return np.hstack([self.p, self.q, self.r])

    @property
    def altitude(self) -> float:
        """Height above the NED origin (m, positive up)."""
        return -self.pd

    def to_array(self) -> np.ndarray:
        """
        Convert state to numpy array.

        Returns:
        --------
        x : np.ndarray, shape (12,)
            [pn, pe, pd, u, v, w, phi, theta, psi, p, q, r]
        """
        return np.hstack([
            self.pn, self.pe, self.pd,
            self.u, self.v, self.w,
            self.phi, self.theta, self.psi,
            self.p, self.q, self.r
        ])

    @classmethod
    def from_array(cls, x) -> 'AircraftState':
        """Build a state from the 12-element layout used by to_array()."""
        x = np.asarray(x, dtype=float).ravel()
        if x.shape != (12,):
            raise ValueError(f"Expected 12 state elements, got {x.size}")
        names = ('pn', 'pe', 'pd', 'u', 'v', 'w',
                 'phi', 'theta', 'psi', 'p', 'q', 'r')
        return cls(**{name: float(value) for name, value in zip(names, x)})

    def __str__(self) -> str:
        """Pretty print state."""
        return (
            f"Aircraft State:\n"
            f"  Position (NED):   [{self.pn:8.1f}, {self.pe:8.1f}, {self.pd:8.1f}] m\n"
            f"  Velocity (body):  [{self.u:7.2f}, {self.v:7.2f}, {self.w:7.2f}] m/s\n"
            f"  Euler angles:     [{np.degrees(self.phi):6.2f}, {np.degrees(self.theta):6.2f}, "
            f"{np.degrees(self.psi):6.2f}] deg\n"
            f"  Angular rates:    [{self.p:7.4f}, {self.q:7.4f}, {self.r:7.4f}] rad/s"
        )


@struct(frozen=True)
class ControlInputs:
    """
    Control surface deflections (rad) and throttle command.

    Throttle is unitless, nominally in [0, 1]; it is not clipped here.
    """

    elevator: float = 0.0
    aileron: float = 0.0
    rudder: float = 0.0
    throttle: float = 0.0

    def to_array(self) -> np.ndarray:
        """Return [delta_e, delta_a, delta_r, delta_t]."""
        return np.hstack([self.elevator, self.aileron, self.rudder, self.throttle])

    @classmethod
    def from_array(cls, delta) -> 'ControlInputs':
        delta = np.asarray(delta, dtype=float).ravel()
        if delta.shape != (4,):
            raise ValueError(f"Expected 4 control elements, got {delta.size}")
        names = ('elevator', 'aileron', 'rudder', 'throttle')
        return cls(**{name: float(value) for name, value in zip(names, delta)})


@struct(frozen=True)
class WindVector:
    """
    Wind acting on the aircraft.

    Steady wind is given in the inertial NED frame; gusts are already
    expressed in body axes and are added after rotation.
    """

    # Steady wind, NED frame (m/s)
    north: float = 0.0
    east: float = 0.0
    down: float = 0.0

    # Gust, body frame (m/s)
    gust_x: float = 0.0
    gust_y: float = 0.0
    gust_z: float = 0.0

    @property
    def steady_ned(self) -> np.ndarray:
        return np.hstack([self.north, self.east, self.down])

    @property
    def gust_body(self) -> np.ndarray:
        return np.hstack([self.gust_x, self.gust_y, self.gust_z])

    @classmethod
    def calm(cls) -> 'WindVector':
        """No steady wind and no gust."""
        return cls()

    def to_array(self) -> np.ndarray:
        """Return [w_ns, w_es, w_ds, u_wg, v_wg, w_wg]."""
        return np.hstack([self.steady_ned, self.gust_body])

    @classmethod
    def from_array(cls, wind) -> 'WindVector':
        wind = np.asarray(wind, dtype=float).ravel()
        if wind.shape != (6,):
            raise ValueError(f"Expected 6 wind elements, got {wind.size}")
        names = ('north', 'east', 'down', 'gust_x', 'gust_y', 'gust_z')
        return cls(**{name: float(value) for name, value in zip(names, wind)})
