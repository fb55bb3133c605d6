"""
tests of the liquid mixture properties

Copyright (c) 2024 Droplet Combustion Simulation 1D
Licensed under the MIT License - see LICENSE file for details.
"""
import copy
import warnings
import numpy as np
import pytest
from numpy.testing import assert_allclose
from liquidmix import (ConfigurationError, ConvergenceError, DimensionMismatchError, LiquidMixtureProperties,
                       LiquidProperties, SupercriticalWarning)
from liquidmix.solution import default_coefficients, gas_species_mapping
from liquidmix.solution.liquid_para import RR, TR_MAX

P_ATM = 101325.0
X_EQUIMOLAR = np.array([0.5, 0.5])

def test_components(water_heptane):
    assert water_heptane.components == ('H2O', 'NA7')
    assert water_heptane.size == len(water_heptane) == 2
    assert water_heptane.index('NA7') == 1
    assert water_heptane['NA7'] is water_heptane.properties[1]
    assert water_heptane[0] is water_heptane.properties[0]
    assert 'H2O' in water_heptane
    with pytest.raises(ValueError):
        water_heptane.index('NA8')

def test_molecular_weight(water_heptane):
    assert_allclose(water_heptane.W(X_EQUIMOLAR), 0.5 * 18.015 + 0.5 * 100.21)

def test_mass_mole_round_trip(water_heptane):
    for x in ([0.5, 0.5], [0.1, 0.9], [0.999, 0.001], [1.0, 0.0]):
        Y = water_heptane.Y(x)
        assert_allclose(Y.sum(), 1.0)
        assert_allclose(water_heptane.X(Y), x, atol=1e-14)
    Y = water_heptane.mass_fraction(X_EQUIMOLAR)
    assert_allclose(Y, [18.015 / 118.225, 100.21 / 118.225])

def test_fractions_are_not_normalised(water_heptane):
    assert_allclose(water_heptane.W([0.25, 0.25]), 0.5 * water_heptane.W(X_EQUIMOLAR))

def test_vapor_pressure_is_linear(water_heptane):
    T = 300.0
    pv = water_heptane.component_values('pv', P_ATM, T)
    assert_allclose(water_heptane.pv(P_ATM, T, X_EQUIMOLAR), 0.5 * pv[0] + 0.5 * pv[1])
    assert_allclose(water_heptane.pv(P_ATM, T, [0.2, 0.8]), 0.2 * pv[0] + 0.8 * pv[1])
    assert water_heptane.component_values('vapor_pressure', P_ATM, T, 1) == pv[1]

def test_density_mixing(water_heptane):
    T = 300.0
    rho = water_heptane.component_values('rho', P_ATM, T)
    rho_mix = water_heptane.rho(P_ATM, T, X_EQUIMOLAR)
    assert rho.min() < rho_mix < rho.max()
    W = np.array([18.015, 100.21])
    assert_allclose(rho_mix, np.sum(0.5 * W) / np.sum(0.5 * W / rho))
    assert_allclose(water_heptane.density_mole(P_ATM, T, X_EQUIMOLAR), rho_mix / water_heptane.W(X_EQUIMOLAR))

def test_mass_weighted_properties(water_heptane):
    T = 300.0
    Y = water_heptane.Y(X_EQUIMOLAR)
    hl = water_heptane.component_values('hl', P_ATM, T)
    cp = water_heptane.component_values('Cp', P_ATM, T)
    assert_allclose(water_heptane.hl(P_ATM, T, X_EQUIMOLAR), np.sum(Y * hl))
    assert_allclose(water_heptane.Cp(P_ATM, T, X_EQUIMOLAR), np.sum(Y * cp))
    assert_allclose(water_heptane.cp_mole(P_ATM, T, X_EQUIMOLAR),
                    np.sum(Y * cp) * water_heptane.W(X_EQUIMOLAR))

def test_transport_properties(water_heptane):
    T = 300.0
    x = np.array([0.3, 0.7])
    mu = water_heptane.component_values('mu', P_ATM, T)
    D = water_heptane.component_values('D', P_ATM, T)
    sigma = water_heptane.component_values('sigma', P_ATM, T)
    k = water_heptane.component_values('K', P_ATM, T)
    rho = water_heptane.component_values('rho', P_ATM, T)
    assert_allclose(water_heptane.mu(P_ATM, T, x), np.exp(np.sum(x * np.log(mu))))
    assert_allclose(water_heptane.D(P_ATM, T, x), 1.0 / np.sum(x / D))
    assert_allclose(water_heptane.sigma(P_ATM, T, x), np.sum(x * sigma))
    phi = x * np.array([18.015, 100.21]) / rho
    phi /= phi.sum()
    k_li = sum(phi[i] * phi[j] * 2.0 / (1.0 / k[i] + 1.0 / k[j]) for i in range(2) for j in range(2))
    assert_allclose(water_heptane.K(P_ATM, T, x), k_li)
    assert k.min() <= water_heptane.K(P_ATM, T, x) <= k.max()

def test_critical_values(water_heptane):
    x = np.array([0.4, 0.6])
    Tc = np.array([m.critical_temperature for m in water_heptane.properties])
    Vc = np.array([m.critical_volume for m in water_heptane.properties])
    Zc = np.array([m.critical_compressibility for m in water_heptane.properties])
    Tt = np.array([m.triple_temperature for m in water_heptane.properties])
    omega = np.array([m.acentric_factor for m in water_heptane.properties])
    assert_allclose(water_heptane.Tc(x), np.sum(x * Vc * Tc) / np.sum(x * Vc))
    assert_allclose(water_heptane.Tpc(x), np.sum(x * Tc))
    assert_allclose(water_heptane.Ppc(x), RR * np.sum(x * Zc) * np.sum(x * Tc) / np.sum(x * Vc))
    assert_allclose(water_heptane.Tpt(x), np.sum(x * Tt))
    assert_allclose(water_heptane.omega(x), np.sum(x * omega))

@pytest.mark.parametrize('method', [
    'density_mass', 'vapor_pressure', 'heat_vaporization_mass', 'cp_mass',
    'surface_tension', 'viscosity', 'thermal_conductivity', 'diffusivity',
])
def test_single_component_identity(water, method):
    T = 320.0
    expected = getattr(water[0], method)(P_ATM, T)
    assert_allclose(getattr(water, method)(P_ATM, T, [1.0]), expected, rtol=1e-12)

def test_single_component_constants(water):
    model = water[0]
    assert_allclose(water.W([1.0]), model.molecular_weight)
    assert_allclose(water.Tc([1.0]), model.critical_temperature)
    assert_allclose(water.Tpc([1.0]), model.critical_temperature)
    assert_allclose(water.Tpt([1.0]), model.triple_temperature)
    assert_allclose(water.omega([1.0]), model.acentric_factor)
    assert_allclose(water.Ppc([1.0]), RR * model.critical_compressibility * model.critical_temperature
                    / model.critical_volume)
    assert_allclose(water.Y([1.0]), [1.0])

def test_absent_component_is_skipped(water_heptane, water):
    T = 330.0
    for method in ('density_mass', 'vapor_pressure', 'viscosity', 'thermal_conductivity', 'diffusivity'):
        assert_allclose(getattr(water_heptane, method)(P_ATM, T, [1.0, 0.0]),
                        getattr(water, method)(P_ATM, T, [1.0]), rtol=1e-12)

def test_temperature_is_clamped_below_critical(water):
    model = water[0]
    with pytest.warns(SupercriticalWarning, match='H2O'):
        rho = water.density_mass(P_ATM, 700.0, [1.0])
    assert_allclose(rho, model.density_mass(P_ATM, TR_MAX * model.critical_temperature))

def test_no_warning_below_critical(water_heptane):
    with warnings.catch_warnings():
        warnings.simplefilter('error', SupercriticalWarning)
        water_heptane.get_all_physical_properties(P_ATM, 350.0, X_EQUIMOLAR)

def test_surface_mole_fraction(water_heptane):
    T = 320.0
    xl = np.array([0.3, 0.7])
    pv = water_heptane.component_values('pv', P_ATM, T)
    xs = water_heptane.Xs(P_ATM, 500.0, T, np.array([0.0, 0.0]) + 0.1, xl)
    assert_allclose(xs, pv * xl / P_ATM)
    # the gas state does not enter the equilibrium
    assert_allclose(water_heptane.Xs(P_ATM, 900.0, T, [0.5, 0.5], xl), xs)
    with pytest.raises(DimensionMismatchError):
        water_heptane.Xs(P_ATM, 500.0, T, [1.0], xl)

def test_surface_mole_fraction_not_normalised(water_heptane):
    xs = water_heptane.Xs(P_ATM, 300.0, 300.0, X_EQUIMOLAR, X_EQUIMOLAR)
    assert xs.sum() < 0.5

def test_surface_mole_fraction_into_pure_air(water_heptane):
    xl = np.array([0.5, 0.5])
    xs = water_heptane.Xs(P_ATM, 300.0, 300.0, [0.0, 0.0], xl)
    assert_allclose(xs, water_heptane.component_values('pv', P_ATM, 300.0) * xl / P_ATM)
    with pytest.raises(ValueError):
        water_heptane.Xs(P_ATM, 300.0, 300.0, [-0.5, 0.0], xl)

def test_skipped_component_does_not_warn(water_heptane):
    # heptane is above its critical temperature at 600 K
    with warnings.catch_warnings():
        warnings.simplefilter('error', SupercriticalWarning)
        water_heptane.density_mass(P_ATM, 600.0, [1.0, 1e-20])
    with pytest.warns(SupercriticalWarning, match='NA7'):
        water_heptane.density_mass(P_ATM, 600.0, [0.9, 0.1])

def test_solver_is_read_only(water_heptane):
    solver = water_heptane.solver
    with pytest.raises(AttributeError):
        water_heptane.solver = None
    assert water_heptane.solver is solver

@pytest.mark.parametrize('method, args', [
    ('W', ()), ('Y', ()), ('X', ()), ('Tc', ()), ('Tpc', ()), ('Ppc', ()), ('Tpt', ()), ('omega', ()),
    ('rho', (P_ATM, 300.0)), ('pv', (P_ATM, 300.0)), ('hl', (P_ATM, 300.0)), ('Cp', (P_ATM, 300.0)),
    ('sigma', (P_ATM, 300.0)), ('mu', (P_ATM, 300.0)), ('K', (P_ATM, 300.0)), ('D', (P_ATM, 300.0)),
    ('pvInvert', (P_ATM,)),
])
@pytest.mark.parametrize('x', [[1.0], [0.2, 0.3, 0.5], [[0.5, 0.5]]])
def test_dimension_mismatch(water_heptane, method, args, x):
    with pytest.raises(DimensionMismatchError) as info:
        getattr(water_heptane, method)(*args, x)
    assert info.value.expected == 2

def test_invalid_state(water_heptane):
    with pytest.raises(ValueError):
        water_heptane.rho(0.0, 300.0, X_EQUIMOLAR)
    with pytest.raises(ValueError):
        water_heptane.rho(P_ATM, -1.0, X_EQUIMOLAR)
    with pytest.raises(ValueError):
        water_heptane.rho(P_ATM, 300.0, [1.5, -0.5])
    with pytest.raises(ValueError):
        water_heptane.rho(P_ATM, 300.0, [np.nan, 1.0])
    with pytest.raises(ValueError):
        water_heptane.W([0.0, 0.0])
    # round-off below zero is accepted
    assert_allclose(water_heptane.W([1.0, -1e-12]), 18.015)

def test_boiling_temperature_of_water(water):
    T = water.boiling_temperature(P_ATM, [1.0])
    assert_allclose(T, 373.15, atol=0.1)
    assert abs(water.pv(P_ATM, T, [1.0]) - P_ATM) < 1e-6 * P_ATM

@pytest.mark.parametrize('p', [2e4, P_ATM, 1e6])
def test_boiling_temperature_inverts_vapor_pressure(water_heptane, p):
    x = np.array([0.3, 0.7])
    T = water_heptane.pvInvert(p, x)
    assert water_heptane.Tpt(x) < T < water_heptane.Tc(x)
    assert abs(water_heptane.pv(p, T, x) - p) < 1e-6 * p
    assert water_heptane.pv_invert(p, x) == T

def test_boiling_temperature_is_bounded_by_components(water_heptane):
    T_mixture = water_heptane.boiling_temperature(P_ATM, X_EQUIMOLAR)
    T_heptane = water_heptane.boiling_temperature(P_ATM, [0.0, 1.0])
    T_water = water_heptane.boiling_temperature(P_ATM, [1.0, 0.0])
    assert_allclose(T_heptane, 371.53, atol=0.1)
    assert T_heptane < T_mixture < T_water

def test_boiling_temperature_out_of_range(water):
    with pytest.raises(ConvergenceError) as info:
        water.boiling_temperature(1.0, [1.0])
    assert info.value.pressure == 1.0
    with pytest.raises(ConvergenceError):
        water.boiling_temperature(1e9, [1.0])
    with pytest.raises(ValueError):
        water.boiling_temperature(-1.0, [1.0])

def test_copies_are_independent(water_heptane):
    for other in (copy.copy(water_heptane), copy.deepcopy(water_heptane),
                  LiquidMixtureProperties(water_heptane), water_heptane.clone()):
        assert other is not water_heptane
        assert other.components == water_heptane.components
        for a, b in zip(other.properties, water_heptane.properties):
            assert a is not b
        assert other.rho(P_ATM, 300.0, X_EQUIMOLAR) == water_heptane.rho(P_ATM, 300.0, X_EQUIMOLAR)

def test_from_models():
    water = LiquidProperties.from_coefficients(default_coefficients('H2O'), 'H2O')
    mixture = LiquidMixtureProperties.from_models(['H2O'], [water])
    assert mixture[0] is not water
    assert mixture.rho(P_ATM, 300.0, [1.0]) == water.density_mass(P_ATM, 300.0)
    with pytest.raises(ConfigurationError):
        LiquidMixtureProperties.from_models(['H2O', 'NA7'], [water])
    with pytest.raises(ConfigurationError):
        LiquidMixtureProperties.from_models([], [])
    with pytest.raises(ConfigurationError):
        LiquidMixtureProperties.from_models(['H2O'], ['water'])

def test_model_entries_in_description():
    water = LiquidProperties.from_coefficients(default_coefficients('H2O'), 'H2O')
    mixture = LiquidMixtureProperties({'H2O': water, 'NA7': None})
    assert mixture['H2O'] is not water

def test_all_physical_properties(water_heptane):
    properties = water_heptane.get_all_physical_properties(P_ATM, 300.0, X_EQUIMOLAR)
    assert properties['density_mass'] == water_heptane.rho(P_ATM, 300.0, X_EQUIMOLAR)
    assert properties['pseudocritical_pressure'] == water_heptane.Ppc(X_EQUIMOLAR)
    for name, value in properties.items():
        assert_allclose(water_heptane.get_single_property(name, P_ATM, 300.0, X_EQUIMOLAR), value)
    assert water_heptane.get_single_property('mu', P_ATM, 300.0, X_EQUIMOLAR) == properties['viscosity']
    with pytest.raises(ValueError):
        water_heptane.get_single_property('activity_coefficient', P_ATM, 300.0, X_EQUIMOLAR)
    with pytest.raises(ValueError):
        water_heptane.component_values('omega', P_ATM, 300.0)

def test_gas_species_mapping():
    gas_species = ['N2', 'O2', 'H2O', 'NC7H16']
    with pytest.warns(UserWarning, match='CA16'):
        mapping = gas_species_mapping(['H2O', 'nC7H16', 'CA16'], gas_species)
    assert mapping == {0: 2, 1: 3, 2: None}
