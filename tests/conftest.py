"""
shared fixtures of the liquid mixture tests

Copyright (c) 2024 Droplet Combustion Simulation 1D
Licensed under the MIT License - see LICENSE file for details.
"""
import pytest
from liquidmix import LiquidMixtureProperties

@pytest.fixture
def water_heptane():
    return LiquidMixtureProperties({'H2O': None, 'NA7': {'defaultCoeffs': True}})

@pytest.fixture
def water():
    return LiquidMixtureProperties({'H2O': None})
