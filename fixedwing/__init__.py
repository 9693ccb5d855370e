"""
Fixed-wing aircraft forces and moments model.

Computes body-frame aerodynamic, propulsion and gravity loads from the
aircraft state, control commands and wind, for use by a 6-DOF integrator.
"""

from .core import (
    AircraftState,
    ControlInputs,
    WindVector,
    AircraftParameters,
    ForcesMomentsResult,
    ForcesMomentsModel,
    compute_forces_and_moments
)

__version__ = '0.1.0'

__all__ = [
    'AircraftState',
    'ControlInputs',
    'WindVector',
    'AircraftParameters',
    'ForcesMomentsResult',
    'ForcesMomentsModel',
    'compute_forces_and_moments'
]
