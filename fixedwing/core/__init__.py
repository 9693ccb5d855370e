"""
Core forces and moments components.

This module provides the building blocks of the fixed-wing force and
moment model consumed by a 6-DOF integrator.
"""

from .state import AircraftState, ControlInputs, WindVector
from .parameters import AircraftParameters
from .rotations import (
    rotation_matrix_inertial_to_body,
    rotate_inertial_to_body,
    rotate_body_to_inertial
)
from .wind import resolve_wind
from .air_data import AirData, compute_air_data, MIN_AIRSPEED_EPSILON
from .aerodynamics import aerodynamic_forces, aerodynamic_moments, dynamic_pressure
from .propulsion import compute_thrust, propeller_thrust, propeller_torque
from .gravity import gravity_force
from .forces_moments import (
    ForcesMomentsResult,
    ForcesMomentsModel,
    compute_forces_and_moments
)

__all__ = [
    'AircraftState',
    'ControlInputs',
    'WindVector',
    'AircraftParameters',
    'rotation_matrix_inertial_to_body',
    'rotate_inertial_to_body',
    'rotate_body_to_inertial',
    'resolve_wind',
    'AirData',
    'compute_air_data',
    'MIN_AIRSPEED_EPSILON',
    'aerodynamic_forces',
    'aerodynamic_moments',
    'dynamic_pressure',
    'compute_thrust',
    'propeller_thrust',
    'propeller_torque',
    'gravity_force',
    'ForcesMomentsResult',
    'ForcesMomentsModel',
    'compute_forces_and_moments'
]
