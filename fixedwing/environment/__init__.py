"""
Environment models for the forces and moments computation.

This module provides the standard atmosphere used to derive air density.
"""

from .atmosphere import StandardAtmosphere

__all__ = ['StandardAtmosphere']
