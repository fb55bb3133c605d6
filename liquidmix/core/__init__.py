"""
core module

Copyright (c) 2024 Droplet Combustion Simulation 1D
Licensed under the MIT License - see LICENSE file for details.

This module provides the core functions of the liquid mixture package, including:
1. error types (exceptions)
2. mixture description loading (config), imported as liquidmix.core.config since it
   builds the component models of the solution module
"""

from .exceptions import (LiquidMixtureError, ConfigurationError, DimensionMismatchError,
                         ConvergenceError, SupercriticalWarning)

__all__ = [
    'LiquidMixtureError', 'ConfigurationError', 'DimensionMismatchError',
    'ConvergenceError', 'SupercriticalWarning'
]
