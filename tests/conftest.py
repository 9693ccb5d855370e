"""
Shared fixtures for the forces and moments tests.
"""

import os
import sys

import pytest

# Add repository root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from fixedwing.io.config import AircraftConfig, create_example_config


def build_parameters(**overrides):
    """Aerosonde parameters with selected values replaced."""
    config = create_example_config()
    aircraft = config['aircraft']

    for key, value in overrides.items():
        for section in ('geometry', 'aerodynamics', 'propulsion'):
            if key in aircraft[section]:
                aircraft[section][key] = value
                break
        else:
            aircraft[key] = value

    return AircraftConfig(config).parameters


@pytest.fixture
def params():
    """Aerosonde UAV parameter set."""
    return build_parameters()


@pytest.fixture
def param_factory():
    return build_parameters
