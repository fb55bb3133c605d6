"""
tests of the temperature correlations

Copyright (c) 2024 Droplet Combustion Simulation 1D
Licensed under the MIT License - see LICENSE file for details.
"""
import math
import pytest
from numpy.testing import assert_allclose
from liquidmix import ConfigurationError
from liquidmix.solution import functions as fn
from liquidmix.solution.liquid_database import WATER_COEFFICIENTS, hydrocarbon_coefficients

def test_nsrds0_polynomial():
    f = fn.NSRDSfunc0(1.0, 2.0, 3.0)
    assert f.coefficients == (1.0, 2.0, 3.0, 0.0, 0.0, 0.0)
    assert_allclose(f(0.0, 2.0), 1.0 + 2.0 * 2.0 + 3.0 * 4.0)

def test_scale_multiplies_value():
    f = fn.NSRDSfunc0(2.0, scale=0.5)
    assert_allclose(f.value(1e5, 300.0), 1.0)

def test_water_spot_values():
    rho = fn.correlation_from_spec(WATER_COEFFICIENTS['rho'])
    pv = fn.correlation_from_spec(WATER_COEFFICIENTS['pv'])
    sigma = fn.correlation_from_spec(WATER_COEFFICIENTS['sigma'])
    D = fn.correlation_from_spec(WATER_COEFFICIENTS['D'])
    assert_allclose(rho(101325.0, 300.0), 994.7, rtol=2e-3)
    assert_allclose(pv(101325.0, 373.15), 101325.0, rtol=5e-3)
    assert_allclose(sigma(101325.0, 300.0), 0.0724, rtol=1e-2)
    assert_allclose(D(101325.0, 300.0), 2.68e-5, rtol=1e-2)

def test_diffusivity_inverse_in_pressure():
    D = fn.correlation_from_spec(WATER_COEFFICIENTS['D'])
    assert_allclose(D(2 * 101325.0, 300.0), 0.5 * D(101325.0, 300.0))

def test_n_heptane_fits():
    coefficients = hydrocarbon_coefficients(0)
    rho = fn.correlation_from_spec(coefficients['rho'])
    pv = fn.correlation_from_spec(coefficients['pv'])
    sigma = fn.correlation_from_spec(coefficients['sigma'])
    assert_allclose(rho(101325.0, 298.15), 679.6, rtol=2e-3)
    assert_allclose(pv(101325.0, coefficients['Tb']), 101325.0, rtol=5e-3)
    assert_allclose(sigma(101325.0, 298.15), 0.0197, rtol=1e-2)

def test_reduced_temperature_is_clamped():
    pv = fn.Wagner25(540.0, -7.9, 2.2, -3.2, -3.0, 14.8)
    assert math.isfinite(pv(1e5, 540.0))
    assert pv(1e5, 600.0) == pv(1e5, 540.0)

def test_average():
    f = fn.Average({'type': 'NSRDSfunc0', 'coeffs': [1.0]}, fn.NSRDSfunc0(3.0))
    assert_allclose(f(1e5, 300.0), 2.0)
    g = fn.correlation_from_spec(f.to_dict())
    assert g == f

def test_spec_equality_and_hash():
    spec = {'type': 'NSRDSfunc5', 'coeffs': [98.343885, 0.30542, 647.13, 0.081]}
    f = fn.correlation_from_spec(spec)
    assert f.to_dict() == spec
    assert f == fn.NSRDSfunc5(98.343885, 0.30542, 647.13, 0.081)
    assert hash(f) == hash(fn.NSRDSfunc5(98.343885, 0.30542, 647.13, 0.081))
    assert f != fn.NSRDSfunc5(98.343885, 0.30542, 647.13, 0.081, scale=2.0)
    assert repr(f).startswith('NSRDSfunc5(')

@pytest.mark.parametrize('spec', [
    {'type': 'NSRDSfunc1', 'coeffs': [1.0, 2.0]},
    {'type': 'NSRDSfunc1', 'coeffs': [1.0, 2.0, 3.0, 'a', 5.0]},
    {'type': 'NSRDSfunc1', 'coeffs': [1.0, 2.0, 3.0, float('nan'), 5.0]},
    {'type': 'Unknown', 'coeffs': [1.0]},
    {'type': 'NSRDSfunc0', 'coeffs': 1.0},
    {'type': 'NSRDSfunc0', 'coeffs': [1.0], 'extra': 1},
    {'type': 'Average', 'coeffs': []},
    [1.0, 2.0],
])
def test_invalid_specs(spec):
    with pytest.raises(ConfigurationError):
        fn.correlation_from_spec(spec)
