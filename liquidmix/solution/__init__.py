"""
solution module

Copyright (c) 2024 Droplet Combustion Simulation 1D
Licensed under the MIT License - see LICENSE file for details.

This module provides the solution related functions, including:
1. mapping_utils: mapping tool for species
2. functions: temperature correlations of the pure liquids
3. liquid_para: mixing rule constants and kernels
4. liquid_properties: pure liquid property model
5. liquid_database: default coefficients of the pure liquids
6. liquid_utils: liquid phase calculation tool
7. liquid_mixture: liquid mixture property class
"""
from .mapping_utils import gas_species_mapping
from .liquid_properties import LiquidProperties, PureComponentModel
from .liquid_database import available_liquids, default_coefficients, register_liquid
from .liquid_mixture import LiquidMixtureProperties, MixtureModel

__all__ = [
    'gas_species_mapping',
    'LiquidProperties', 'PureComponentModel',
    'available_liquids', 'default_coefficients', 'register_liquid',
    'LiquidMixtureProperties', 'MixtureModel'
]
