"""
solver module

Copyright (c) 2024 Droplet Combustion Simulation 1D
Licensed under the MIT License - see LICENSE file for details.

This module provides the solver functions of the liquid mixture package, including:
1. boiling point solver (boiling_point)
"""
from .boiling_point import BoilingPointSolver

__all__ = ['BoilingPointSolver']
