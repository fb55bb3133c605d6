"""
tests of the pure liquid models and the liquid database

Copyright (c) 2024 Droplet Combustion Simulation 1D
Licensed under the MIT License - see LICENSE file for details.
"""
import copy
import math
import pytest
from numpy.testing import assert_allclose
from liquidmix import ConfigurationError, LiquidProperties
from liquidmix.solution import available_liquids, default_coefficients, register_liquid
from liquidmix.solution.liquid_database import LIQUID_DATABASE, WATER_COEFFICIENTS
from liquidmix.solution.liquid_para import RR
from liquidmix.solution.mapping_utils import resolve_identifier

def test_water_constants():
    water = LiquidProperties.from_coefficients(default_coefficients('H2O'), 'H2O')
    assert water.molecular_weight == 18.015
    assert water.critical_temperature == 647.13
    assert water.critical_compressibility == 0.229
    assert water.triple_pressure == 611.3
    assert water.acentric_factor == 0.3449
    assert_allclose(water.cp_mass(101325.0, 300.0), 4183.0, rtol=5e-3)

def test_derived_constants():
    coefficients = default_coefficients('NA7')
    assert 'Zc' not in coefficients and 'omega' not in coefficients
    heptane = LiquidProperties.from_coefficients(coefficients, 'NA7')
    Pc, Vc, Tc = heptane.critical_pressure, heptane.critical_volume, heptane.critical_temperature
    assert_allclose(heptane.critical_compressibility, Pc * Vc / (RR * Tc))
    assert_allclose(heptane.critical_compressibility, 0.261, rtol=2e-2)
    assert_allclose(heptane.acentric_factor, 0.350, rtol=2e-2)
    assert_allclose(heptane.triple_pressure, heptane.vapor_pressure(Pc, heptane.triple_temperature))

def test_every_default_liquid_builds():
    for name in available_liquids():
        model = LiquidProperties.from_coefficients(default_coefficients(name), name)
        T = model.boiling_temperature
        for method in ('density_mass', 'cp_mass', 'surface_tension', 'thermal_conductivity'):
            value = getattr(model, method)(101325.0, T)
            assert math.isfinite(value), (name, method, value)
        for method in ('vapor_pressure', 'heat_vaporization_mass', 'viscosity', 'diffusivity'):
            value = getattr(model, method)(101325.0, T)
            assert math.isfinite(value) and value > 0, (name, method, value)

def test_coefficients_round_trip():
    water = LiquidProperties.from_coefficients(default_coefficients('H2O'), 'H2O')
    copy = LiquidProperties.from_coefficients(water.to_coefficients(), 'H2O')
    assert copy.to_coefficients() == water.to_coefficients()

def test_clone_is_independent():
    water = LiquidProperties.from_coefficients(default_coefficients('H2O'), 'H2O')
    clone = water.clone()
    assert clone is not water
    assert clone.density_mass(1e5, 300.0) == water.density_mass(1e5, 300.0)

def test_missing_and_unknown_coefficients():
    coefficients = default_coefficients('H2O')
    del coefficients['rho']
    with pytest.raises(ConfigurationError, match='rho'):
        LiquidProperties.from_coefficients(coefficients, 'H2O')
    coefficients = default_coefficients('H2O')
    coefficients['Foo'] = 1.0
    with pytest.raises(ConfigurationError, match='Foo'):
        LiquidProperties.from_coefficients(coefficients, 'H2O')

@pytest.mark.parametrize('key, value', [('W', 'heavy'), ('Tc', -1.0), ('Pc', float('inf')), ('Tb', True)])
def test_invalid_constants(key, value):
    coefficients = default_coefficients('H2O')
    coefficients[key] = value
    with pytest.raises(ConfigurationError):
        LiquidProperties.from_coefficients(coefficients, 'H2O')

def test_wrong_coefficient_count_names_the_component():
    coefficients = default_coefficients('H2O')
    coefficients['pv'] = {'type': 'NSRDSfunc1', 'coeffs': [1.0]}
    with pytest.raises(ConfigurationError, match="component 'H2O'"):
        LiquidProperties.from_coefficients(coefficients, 'H2O')

def test_default_coefficients_are_fresh_copies():
    first = default_coefficients('H2O')
    first['W'] = 0.0
    assert default_coefficients('H2O')['W'] == WATER_COEFFICIENTS['W']

@pytest.mark.parametrize('alias, identifier', [
    ('water', 'H2O'), ('C7H16', 'NA7'), ('nC7H16', 'NA7'), ('NC7H16', 'NA7'),
    ('n-dodecane', 'NA12'), ('toluene', 'AR7'), ('C7H16-2', 'IA7'), ('na10', 'NA10'),
])
def test_aliases(alias, identifier):
    assert resolve_identifier(alias, LIQUID_DATABASE) == identifier
    assert default_coefficients(alias) == default_coefficients(identifier)

def test_unknown_liquid():
    assert resolve_identifier('unobtainium', LIQUID_DATABASE) is None
    with pytest.raises(ConfigurationError, match='unobtainium'):
        default_coefficients('unobtainium')

def test_register_liquid():
    coefficients = dict(WATER_COEFFICIENTS, W=20.0)
    register_liquid('D2O_test', coefficients)
    try:
        assert 'D2O_test' in available_liquids()
        assert default_coefficients('D2O_test')['W'] == 20.0
    finally:
        del LIQUID_DATABASE['D2O_test']
    with pytest.raises(ConfigurationError):
        register_liquid('bad', 1.0)

def test_register_liquid_keeps_its_own_copy():
    coefficients = copy.deepcopy(WATER_COEFFICIENTS)
    coefficients['W'] = 20.0
    register_liquid('D2O_test', coefficients)
    try:
        coefficients['W'] = 99.0
        coefficients['rho']['coeffs'][0] = 0.0
        registered = default_coefficients('D2O_test')
        assert registered['W'] == 20.0
        assert registered['rho'] == WATER_COEFFICIENTS['rho']
    finally:
        del LIQUID_DATABASE['D2O_test']

def test_numeric_string_constants():
    coefficients = default_coefficients('H2O')
    coefficients['Pc'] = '2.5e7'
    assert LiquidProperties.from_coefficients(coefficients, 'H2O').critical_pressure == 2.5e7
