"""
liquidmix: thermophysical properties of multi-component liquid mixtures

Copyright (c) 2024 Droplet Combustion Simulation 1D
Licensed under the MIT License - see LICENSE file for details.

This package provides the liquid phase properties used by droplet evaporation models, including:
1. core function module (core): errors and mixture description loading
2. liquid phase calculation module (solution): pure liquid models, database and mixing rules
3. solver module (solvers): boiling temperature inversion
"""

from . import core
from . import solution
from . import solvers
from .core.config import load_mixture_config
from .core.exceptions import (LiquidMixtureError, ConfigurationError, DimensionMismatchError,
                              ConvergenceError, SupercriticalWarning)
from .solution import LiquidMixtureProperties, MixtureModel, LiquidProperties, PureComponentModel
from .solvers import BoilingPointSolver

__all__ = [
    'core', 'solution', 'solvers',
    'load_mixture_config',
    'LiquidMixtureError', 'ConfigurationError', 'DimensionMismatchError',
    'ConvergenceError', 'SupercriticalWarning',
    'LiquidMixtureProperties', 'MixtureModel', 'LiquidProperties', 'PureComponentModel',
    'BoilingPointSolver'
]
