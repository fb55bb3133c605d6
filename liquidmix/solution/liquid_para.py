"""
Liquid mixture mixing rule module

Copyright (c) 2024 Droplet Combustion Simulation 1D
Licensed under the MIT License - see LICENSE file for details.

every kernel takes the composition and the per component values as arrays of the same size N,
the per component values are evaluated by the caller at the clamped temperature
Ti = min(TR_MAX*Tc_i, T). components with a fraction below SMALL are skipped,
their per component values are not read.
"""

import numpy as np
import numba

# define the constants of the mixing rules
TR_MAX: float = 0.999          # maximum reduced temperature of a component
RR: float = 8314.47            # universal gas constant (unit: J/kmol·K)
SMALL: float = 1e-15           # components with a smaller fraction are skipped
COM_TOLERANCE_NEGATIVE: float = 1e-3  # negative fractions above -COM_TOLERANCE_NEGATIVE are round-off


@numba.njit(cache=True)
def calculate_clamped_temperatures(temperature: float, tc: np.ndarray) -> np.ndarray:
    """calculate the temperature each component is evaluated at

    calculation formula:
    Ti = min(TR_MAX * Tc_i, T)
    """
    return np.minimum(TR_MAX * tc, temperature)

@numba.njit(cache=True)
def calculate_molecular_weight_mean(composition: np.ndarray, molecular_weights: np.ndarray) -> float:
    """calculate the mean molecular weight of the mixture

    calculation formula:
    M_mean = Σ(xi * Mi)

    where:
    - xi: mole fraction of component i
    - Mi: molecular weight of component i

    Args:
        composition: mole fraction array, shape (N,)
        molecular_weights: molecular weight array (unit: kg/kmol), shape (N,)

    Returns:
        float: mean molecular weight
    """
    return np.sum(composition * molecular_weights)

@numba.njit(cache=True)
def calculate_mass_fraction(composition: np.ndarray, molecular_weights: np.ndarray) -> np.ndarray:
    """convert mole fractions to mass fractions, Yi = xi*Mi / Σ(xj*Mj)"""
    mass = composition * molecular_weights
    return mass / np.sum(mass)

@numba.njit(cache=True)
def calculate_mole_fraction(mass_fraction: np.ndarray, molecular_weights: np.ndarray) -> np.ndarray:
    """convert mass fractions to mole fractions, xi = (Yi/Mi) / Σ(Yj/Mj)"""
    moles = mass_fraction / molecular_weights
    return moles / np.sum(moles)

@numba.njit(cache=True)
def calculate_linear_mean(composition: np.ndarray, values: np.ndarray) -> float:
    """calculate the mole fraction weighted sum Σ(xi * vi)

    used for the vapor pressure (Raoult), the surface tension, the pseudo critical temperature (Kay),
    the pseudo triple point temperature and the acentric factor.
    """
    result = 0.0
    for i in range(composition.size):
        if composition[i] > SMALL:
            result += composition[i] * values[i]
    return result

@numba.njit(cache=True)
def calculate_density_mass_mean(composition: np.ndarray, molecular_weights: np.ndarray,
                                density_mass_ij: np.ndarray) -> float:
    """calculate the mass density of the mixture

    calculation formula:
    rho_mix = Σ(xi * Mi) / Σ(xi * Mi / rho_i)

    where:
    - xi: mole fraction of component i
    - Mi: molecular weight of component i
    - rho_i: mass density of component i

    Args:
        composition: mole fraction array, shape (N,)
        molecular_weights: molecular weight array, shape (N,)
        density_mass_ij: mass density of the single components, shape (N,)

    Returns:
        float: mass density of the mixture (unit: kg/m³)
    """
    mass = 0.0
    volume = 0.0
    for i in range(composition.size):
        if composition[i] > SMALL and density_mass_ij[i] > SMALL:
            Yi = composition[i] * molecular_weights[i]
            mass += Yi
            volume += Yi / density_mass_ij[i]
    return mass / volume

@numba.njit(cache=True)
def calculate_mass_weighted_mean(composition: np.ndarray, molecular_weights: np.ndarray,
                                 values: np.ndarray) -> float:
    """calculate the mass fraction weighted mean of a specific property (heat of vaporization, cp)

    calculation formula:
    v_mix = Σ(xi * Mi * vi) / Σ(xi * Mi)
    """
    mass = 0.0
    result = 0.0
    for i in range(composition.size):
        if composition[i] > SMALL:
            Yi = composition[i] * molecular_weights[i]
            mass += Yi
            result += Yi * values[i]
    return result / mass

@numba.njit(cache=True)
def calculate_viscosity_mean(composition: np.ndarray, viscosity_ij: np.ndarray) -> float:
    """calculate the viscosity of the mixture

    calculation formula:
    ln(μ_mix) = Σ(xi * ln(μi))
    """
    ln_viscosity = 0.0
    for i in range(composition.size):
        if composition[i] > SMALL:
            ln_viscosity += composition[i] * np.log(viscosity_ij[i])
    return np.exp(ln_viscosity)

@numba.njit(cache=True)
def calculate_thermal_conductivity_mean(composition: np.ndarray, molecular_weights: np.ndarray,
                                        density_mass_ij: np.ndarray, thermal_conductivity_ij: np.ndarray) -> float:
    """calculate the thermal conductivity of the mixture with the method of Li

    calculation formula:
    phi_i = xi * Vi / Σ(xj * Vj), Vi = Mi / rho_i
    k_mix = Σi Σj phi_i * phi_j * 2 / (1/ki + 1/kj)

    Args:
        composition: mole fraction array, shape (N,)
        molecular_weights: molecular weight array, shape (N,)
        density_mass_ij: mass density of the single components, shape (N,)
        thermal_conductivity_ij: thermal conductivity of the single components, shape (N,)

    Returns:
        float: thermal conductivity of the mixture (unit: W/m·K)
    """
    phi = np.zeros(composition.size)
    for i in range(composition.size):
        if composition[i] > SMALL:
            phi[i] = composition[i] * molecular_weights[i] / density_mass_ij[i]
    phi = phi / np.sum(phi)
    result = 0.0
    for i in range(composition.size):
        if phi[i] == 0.0:
            continue
        for j in range(composition.size):
            if phi[j] == 0.0:
                continue
            result += phi[i] * phi[j] * 2.0 / (1.0 / thermal_conductivity_ij[i] + 1.0 / thermal_conductivity_ij[j])
    return result

@numba.njit(cache=True)
def calculate_diffusion_mean(composition: np.ndarray, diffusion_ij: np.ndarray) -> float:
    """calculate the diffusivity of the mixture vapour with Blanc's law

    calculation formula:
    D_mix = 1 / Σ(xi / Di)
    """
    resistance = 0.0
    for i in range(composition.size):
        if composition[i] > SMALL:
            resistance += composition[i] / diffusion_ij[i]
    return 1.0 / resistance

@numba.njit(cache=True)
def calculate_critical_temperature_mean(composition: np.ndarray, tc: np.ndarray, vc: np.ndarray) -> float:
    """calculate the critical temperature of the mixture with the rule of Li

    calculation formula:
    Tc_mix = Σ(xi * Vci * Tci) / Σ(xi * Vci)
    """
    return np.sum(composition * vc * tc) / np.sum(composition * vc)

@numba.njit(cache=True)
def calculate_pseudocritical_pressure(composition: np.ndarray, tc: np.ndarray, vc: np.ndarray,
                                      zc: np.ndarray) -> float:
    """calculate the pseudo critical pressure with the modified rule of Prausnitz and Gunn

    calculation formula:
    Ppc = RR * Σ(xi * Zci) * Σ(xi * Tci) / Σ(xi * Vci)
    """
    return RR * np.sum(composition * zc) * np.sum(composition * tc) / np.sum(composition * vc)
