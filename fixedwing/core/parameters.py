"""
Aircraft parameter set consumed by the forces and moments model.

All values are SI. Stability and control derivatives are per radian and
rate derivatives are with respect to the nondimensional rates
p*b/(2Va), q*c/(2Va), r*b/(2Va).
"""

from typing import Dict

from archimedes import struct


@struct(frozen=True)
class AircraftParameters:
    """
    Immutable aircraft configuration.

    Populated once (see fixedwing.io.config) and shared read-only by every
    call into the model. Every field is required.
    """

    # Geometry
    b: float         # Wingspan (m)
    c: float         # Mean aerodynamic chord (m)
    S_wing: float    # Wing area (m^2)
    S_prop: float    # Propeller disc area (m^2)

    # Mass and environment
    mass: float      # kg
    gravity: float   # m/s^2
    rho: float       # Air density (kg/m^3)

    # Lift
    CL_0: float
    CL_alpha: float
    CL_q: float
    CL_de: float

    # Drag
    CD_0: float
    CD_alpha: float
    CD_q: float
    CD_de: float

    # Side force
    CY_0: float
    CY_beta: float
    CY_p: float
    CY_r: float
    CY_da: float
    CY_dr: float

    # Roll moment
    Cl_0: float
    Cl_beta: float
    Cl_p: float
    Cl_r: float
    Cl_da: float
    Cl_dr: float

    # Pitch moment
    Cm_0: float
    Cm_alpha: float
    Cm_q: float
    Cm_de: float

    # Yaw moment
    Cn_0: float
    Cn_beta: float
    Cn_p: float
    Cn_r: float
    Cn_da: float
    Cn_dr: float

    # Propulsion
    C_prop: float    # Propeller efficiency coefficient
    k_motor: float   # Motor constant (m/s per unit throttle)
    k_T_P: float     # Propeller torque constant
    k_Omega: float   # Propeller speed constant

    def to_dict(self) -> Dict[str, float]:
        """Return all parameters as a flat {name: value} dictionary."""
        return {name: getattr(self, name) for name in PARAMETER_NAMES}


GEOMETRY_KEYS = ('b', 'c', 'S_wing', 'S_prop')

AERODYNAMIC_KEYS = (
    'CL_0', 'CL_alpha', 'CL_q', 'CL_de',
    'CD_0', 'CD_alpha', 'CD_q', 'CD_de',
    'CY_0', 'CY_beta', 'CY_p', 'CY_r', 'CY_da', 'CY_dr',
    'Cl_0', 'Cl_beta', 'Cl_p', 'Cl_r', 'Cl_da', 'Cl_dr',
    'Cm_0', 'Cm_alpha', 'Cm_q', 'Cm_de',
    'Cn_0', 'Cn_beta', 'Cn_p', 'Cn_r', 'Cn_da', 'Cn_dr',
)

PROPULSION_KEYS = ('C_prop', 'k_motor', 'k_T_P', 'k_Omega')

PARAMETER_NAMES = (GEOMETRY_KEYS + ('mass', 'gravity', 'rho')
                   + AERODYNAMIC_KEYS + PROPULSION_KEYS)
