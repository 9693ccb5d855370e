"""
Aircraft Configuration System

Provides YAML-based loading of the aircraft parameter set used by the
forces and moments model.

Schema::

    aircraft:
      name: Aerosonde
      mass: 13.5          # kg
      gravity: 9.81       # m/s^2
      rho: 1.2682         # kg/m^3 (or 'altitude' in m for ISA density)
      geometry: {b: ..., c: ..., S_wing: ..., S_prop: ...}
      aerodynamics: {CL_0: ..., CL_alpha: ..., ...}
      propulsion: {C_prop: ..., k_motor: ..., k_T_P: ..., k_Omega: ...}
"""

import logging
from typing import Any, Dict, List

import yaml

from ..core.parameters import (
    AircraftParameters,
    AERODYNAMIC_KEYS,
    GEOMETRY_KEYS,
    PROPULSION_KEYS
)
from ..environment.atmosphere import StandardAtmosphere

logger = logging.getLogger(__name__)


class ConfigurationError(ValueError):
    """Raised when an aircraft configuration is incomplete or malformed."""


class AircraftConfig:
    """
    Aircraft configuration loaded from YAML file.

    Attributes
    ----------
    name : str
        Aircraft name
    parameters : AircraftParameters
        Immutable parameter set for the forces and moments model
    """

    def __init__(self, config_dict: Dict[str, Any]):
        """
        Initialize aircraft configuration from dictionary.

        Parameters
        ----------
        config_dict : dict
            Configuration dictionary (typically from YAML)

        Raises
        ------
        ConfigurationError
            If required sections or values are missing or not numeric
        """
        self.raw_config = config_dict
        self._parse_config()

    def _parse_config(self):
        """Parse configuration dictionary."""
        if not isinstance(self.raw_config, dict) or 'aircraft' not in self.raw_config:
            raise ConfigurationError("Configuration must contain an 'aircraft' section")

        aircraft = self.raw_config['aircraft'] or {}
        self.name = aircraft.get('name', 'Unnamed Aircraft')

        values = {}
        missing = []

        values.update(self._section(aircraft, 'geometry', GEOMETRY_KEYS, missing))
        values.update(self._section(aircraft, 'aerodynamics', AERODYNAMIC_KEYS, missing))
        values.update(self._section(aircraft, 'propulsion', PROPULSION_KEYS, missing))

        for key in ('mass', 'gravity'):
            if key in aircraft:
                values[key] = self._number(key, aircraft[key])
            else:
                missing.append(key)

        # Air density, either explicit or from the standard atmosphere
        if 'rho' in aircraft:
            values['rho'] = self._number('rho', aircraft['rho'])
        elif 'altitude' in aircraft:
            altitude = self._number('altitude', aircraft['altitude'])
            try:
                values['rho'] = float(StandardAtmosphere(altitude).density)
            except ValueError as e:
                raise ConfigurationError(str(e)) from e
        else:
            missing.append('rho (or altitude)')

        if missing:
            raise ConfigurationError(
                f"Aircraft '{self.name}' is missing parameters: {', '.join(missing)}")

        self.parameters = AircraftParameters(**values)

    def _section(self, aircraft: Dict[str, Any], section: str,
                 keys: tuple, missing: List[str]) -> Dict[str, float]:
        """Read the required numeric keys of one section."""
        data = aircraft.get(section) or {}
        values = {}
        for key in keys:
            if key in data:
                values[key] = self._number(f"{section}.{key}", data[key])
            else:
                missing.append(f"{section}.{key}")
        return values

    @staticmethod
    def _number(key: str, value: Any) -> float:
        try:
            return float(value)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"Parameter '{key}' is not a number: {value!r}") from e

    def __repr__(self):
        """String representation."""
        return (f"AircraftConfig(name='{self.name}', "
                f"mass={self.parameters.mass}, "
                f"S_wing={self.parameters.S_wing})")


def load_aircraft_config(yaml_file: str) -> AircraftConfig:
    """
    Load aircraft configuration from YAML file.

    Parameters
    ----------
    yaml_file : str
        Path to YAML configuration file

    Returns
    -------
    AircraftConfig
        Loaded aircraft configuration

    Examples
    --------
    >>> config = load_aircraft_config('aerosonde.yaml')
    >>> params = config.parameters
    """
    with open(yaml_file, 'r') as f:
        config_dict = yaml.safe_load(f)

    config = AircraftConfig(config_dict)
    logger.info("Loaded aircraft configuration '%s' from %s", config.name, yaml_file)
    return config


def load_aircraft_parameters(yaml_file: str) -> AircraftParameters:
    """Load only the AircraftParameters from a YAML file."""
    return load_aircraft_config(yaml_file).parameters


def save_aircraft_config(config: AircraftConfig, yaml_file: str):
    """
    Save aircraft configuration to YAML file.

    Parameters
    ----------
    config : AircraftConfig
        Aircraft configuration to save
    yaml_file : str
        Output YAML file path
    """
    with open(yaml_file, 'w') as f:
        yaml.dump(config.raw_config, f, default_flow_style=False, sort_keys=False)

    logger.info("Configuration saved to: %s", yaml_file)


def create_example_config() -> Dict[str, Any]:
    """
    Create example aircraft configuration dictionary.

    Aerosonde UAV (Beard & McLain, Small Unmanned Aircraft, 2012).

    Returns
    -------
    dict
        Example configuration
    """
    config = {
        'aircraft': {
            'name': 'Aerosonde',
            'mass': 13.5,     # kg
            'gravity': 9.81,  # m/s^2
            'rho': 1.2682,    # kg/m^3
            'geometry': {
                'b': 2.8956,      # m
                'c': 0.18994,     # m
                'S_wing': 0.55,   # m^2
                'S_prop': 0.2027  # m^2
            },
            'aerodynamics': {
                'CL_0': 0.28,
                'CL_alpha': 3.45,
                'CL_q': 0.0,
                'CL_de': -0.36,
                'CD_0': 0.03,
                'CD_alpha': 0.30,
                'CD_q': 0.0,
                'CD_de': 0.0,
                'CY_0': 0.0,
                'CY_beta': -0.98,
                'CY_p': 0.0,
                'CY_r': 0.0,
                'CY_da': 0.0,
                'CY_dr': -0.17,
                'Cl_0': 0.0,
                'Cl_beta': -0.12,
                'Cl_p': -0.26,
                'Cl_r': 0.14,
                'Cl_da': 0.08,
                'Cl_dr': 0.105,
                'Cm_0': -0.02338,
                'Cm_alpha': -0.38,
                'Cm_q': -3.6,
                'Cm_de': -0.5,
                'Cn_0': 0.0,
                'Cn_beta': 0.25,
                'Cn_p': 0.022,
                'Cn_r': -0.35,
                'Cn_da': 0.06,
                'Cn_dr': -0.032
            },
            'propulsion': {
                'C_prop': 1.0,
                'k_motor': 80.0,
                'k_T_P': 0.0,
                'k_Omega': 0.0
            }
        }
    }

    return config
