"""
Configuration input/output.
"""

from .config import (
    AircraftConfig,
    ConfigurationError,
    load_aircraft_config,
    load_aircraft_parameters,
    save_aircraft_config,
    create_example_config
)

__all__ = [
    'AircraftConfig',
    'ConfigurationError',
    'load_aircraft_config',
    'load_aircraft_parameters',
    'save_aircraft_config',
    'create_example_config'
]
