"""
temperature correlation module

Copyright (c) 2024 Droplet Combustion Simulation 1D
Licensed under the MIT License - see LICENSE file for details.

This module provides the temperature (and pressure) correlations used by the pure liquid
property models, including:

1. NSRDS / DIPPR family:
   - NSRDSfunc0: polynomial, a + b*T + c*T^2 + d*T^3 + e*T^4 + f*T^5
   - NSRDSfunc1: exp(a + b/T + c*ln(T) + d*T^e)
   - NSRDSfunc5: a / b^(1 + (1 - T/c)^d)
   - NSRDSfunc6: a*(1 - Tr)^(b + c*Tr + d*Tr^2 + e*Tr^3)
   - APIdiffCoefFunc: vapour diffusivity in air (API procedure)

2. reduced temperature fits of the hydrocarbon database:
   - Wagner25: saturated vapor pressure
   - DensityTau: molar density, tau = 1 - Tr
   - CpTau: molar heat capacity
   - LatentHeatLog: molar heat of vaporization
   - InversePolynomialExp, ShiftedCubeRootExp: viscosity

3. estimation and combination:
   - BrockBird: surface tension from Tc, Pc and Tb
   - Average: arithmetic mean of other correlations

every correlation carries a scale factor, used to express the molar fits on a mass basis.
"""

import math
import numba
import numpy as np
from typing import Dict, Union
from ..core.exceptions import ConfigurationError

# reduced temperature used when the temperature reaches the critical temperature
TR_CLAMP: float = 0.999999


# 1. compiled kernels

@numba.njit(cache=True)
def _nsrds0(T: float, c: np.ndarray) -> float:
    result = 0.0
    for k in range(c.size - 1, -1, -1):
        result = result * T + c[k]
    return result

@numba.njit(cache=True)
def _nsrds1(T: float, c: np.ndarray) -> float:
    return np.exp(c[0] + c[1] / T + c[2] * np.log(T) + c[3] * T ** c[4])

@numba.njit(cache=True)
def _nsrds5(T: float, c: np.ndarray) -> float:
    return c[0] / c[1] ** (1.0 + (1.0 - T / c[2]) ** c[3])

@numba.njit(cache=True)
def _nsrds6(T: float, c: np.ndarray) -> float:
    Tr = T / c[0]
    return c[1] * (1.0 - Tr) ** (c[2] + c[3] * Tr + c[4] * Tr * Tr + c[5] * Tr * Tr * Tr)

@numba.njit(cache=True)
def _api_diffusivity(p: float, T: float, c: np.ndarray) -> float:
    alpha = np.sqrt(1.0 / c[2] + 1.0 / c[3])
    beta = (c[0] ** (1.0 / 3.0) + c[1] ** (1.0 / 3.0)) ** 2
    return 3.6059e-3 * (1.8 * T) ** 1.75 * alpha / (p * beta)

@numba.njit(cache=True)
def _reduced_temperature(T: float, Tc: float) -> float:
    if T >= Tc:
        return TR_CLAMP
    return T / Tc

@numba.njit(cache=True)
def _wagner25(T: float, c: np.ndarray) -> float:
    Tr = _reduced_temperature(T, c[0])
    tao = 1.0 - Tr
    return np.exp(c[5] + (c[1] * tao + c[2] * tao ** 1.5 + c[3] * tao ** 2.5 + c[4] * tao ** 5) / Tr)

@numba.njit(cache=True)
def _density_tau(T: float, c: np.ndarray) -> float:
    tao = 1.0 - _reduced_temperature(T, c[0])
    return c[1] + c[2] * tao ** 0.35 + c[3] * tao + c[4] * tao * tao + c[5] * tao * tao * tao

@numba.njit(cache=True)
def _cp_tau(T: float, c: np.ndarray) -> float:
    tao = 1.0 - _reduced_temperature(T, c[0])
    return c[1] / tao + c[2] + c[3] * T + c[4] * T * T + c[5] * T * T * T

@numba.njit(cache=True)
def _latent_heat_log(T: float, c: np.ndarray) -> float:
    Tr = _reduced_temperature(T, c[0])
    ln_1_minus_Tr = np.log(1.0 - Tr)
    return np.exp(c[1] + c[2] * ln_1_minus_Tr + c[3] * Tr * ln_1_minus_Tr + c[4] * Tr * Tr * ln_1_minus_Tr)

@numba.njit(cache=True)
def _inverse_polynomial_exp(T: float, c: np.ndarray) -> float:
    return max(np.exp(c[0] + c[1] / T + c[2] / (T * T) + c[3] / (T * T * T)), 0.0)

@numba.njit(cache=True)
def _shifted_cube_root_exp(T: float, c: np.ndarray) -> float:
    y = (c[3] - c[4]) / (T - c[4]) - 1.0
    if y < 0.0:
        y = 0.0
    return max(c[0] * np.exp((c[1] + c[2] * y) * y ** (1.0 / 3.0)), 0.0)

@numba.njit(cache=True)
def _brock_bird(T: float, c: np.ndarray) -> float:
    Tc = c[0]
    pc_bar = c[1] * 1e-5
    Tbr = c[2] / Tc
    Q = 0.1196 * (1.0 + Tbr * np.log(pc_bar / 1.01325) / (1.0 - Tbr)) - 0.279
    tao = 1.0 - _reduced_temperature(T, Tc)
    # dyn/cm -> N/m
    return 1e-3 * pc_bar ** (2.0 / 3.0) * Tc ** (1.0 / 3.0) * Q * tao ** (11.0 / 9.0)


# 2. correlation classes

class Correlation:
    """base class of the property correlations

    subclasses define the number of coefficients and the compiled kernel, value(p, T) returns
    scale * kernel(T, coefficients).
    """
    n_coeffs: int = 0

    def __init__(self, *coeffs: float, scale: float = 1.0):
        if len(coeffs) != self.n_coeffs:
            raise ConfigurationError(
                f"{type(self).__name__} expects {self.n_coeffs} coefficients, got {len(coeffs)}")
        try:
            self._coeffs = np.array(coeffs, dtype=np.float64)
            self.scale = float(scale)
        except (TypeError, ValueError):
            raise ConfigurationError(f"{type(self).__name__} coefficients must be numbers: {list(coeffs)}")
        if not np.all(np.isfinite(self._coeffs)) or not math.isfinite(self.scale):
            raise ConfigurationError(f"{type(self).__name__} coefficients must be finite: {list(coeffs)}")

    @property
    def coefficients(self) -> tuple:
        return tuple(self._coeffs.tolist())

    def _evaluate(self, p: float, T: float) -> float:
        raise NotImplementedError

    def value(self, p: float, T: float) -> float:
        """evaluate the correlation at pressure p (Pa) and temperature T (K)"""
        return self.scale * float(self._evaluate(float(p), float(T)))

    __call__ = value

    def to_dict(self) -> dict:
        spec = {'type': type(self).__name__, 'coeffs': list(self.coefficients)}
        if self.scale != 1.0:
            spec['scale'] = self.scale
        return spec

    def __eq__(self, other):
        return (type(self) is type(other)
                and self.scale == other.scale
                and np.array_equal(self._coeffs, other._coeffs))

    def __hash__(self):
        return hash((type(self).__name__, self.coefficients, self.scale))

    def __repr__(self):
        args = ', '.join(repr(i) for i in self.coefficients)
        if self.scale != 1.0:
            args += f', scale={self.scale!r}'
        return f"{type(self).__name__}({args})"


class NSRDSfunc0(Correlation):
    """a + b*T + c*T^2 + d*T^3 + e*T^4 + f*T^5"""
    n_coeffs = 6

    def __init__(self, *coeffs: float, scale: float = 1.0):
        # trailing coefficients may be omitted
        super().__init__(*(tuple(coeffs) + (0.0,) * max(self.n_coeffs - len(coeffs), 0)), scale=scale)

    def _evaluate(self, p, T):
        return _nsrds0(T, self._coeffs)


class NSRDSfunc1(Correlation):
    """exp(a + b/T + c*ln(T) + d*T^e)"""
    n_coeffs = 5

    def _evaluate(self, p, T):
        return _nsrds1(T, self._coeffs)


class NSRDSfunc5(Correlation):
    """a / b^(1 + (1 - T/c)^d)"""
    n_coeffs = 4

    def _evaluate(self, p, T):
        return _nsrds5(T, self._coeffs)


class NSRDSfunc6(Correlation):
    """a*(1 - Tr)^(b + c*Tr + d*Tr^2 + e*Tr^3), coefficients (Tc, a, b, c, d, e)"""
    n_coeffs = 6

    def _evaluate(self, p, T):
        return _nsrds6(T, self._coeffs)


class APIdiffCoefFunc(Correlation):
    """vapour diffusivity in air (m^2/s), coefficients (a, b, wf, wa)

    D = 3.6059e-3*(1.8*T)^1.75*sqrt(1/wf + 1/wa) / (p*(a^(1/3) + b^(1/3))^2)
    """
    n_coeffs = 4

    def _evaluate(self, p, T):
        return _api_diffusivity(p, T, self._coeffs)


class Wagner25(Correlation):
    """P_sat = exp(C5 + (C1*tao + C2*tao^1.5 + C3*tao^2.5 + C4*tao^5) / Tr)

    coefficients (Tc, C1, C2, C3, C4, C5), C5 = ln(Pc)
    """
    n_coeffs = 6

    def _evaluate(self, p, T):
        return _wagner25(T, self._coeffs)


class DensityTau(Correlation):
    """rho = rho_base + C1*tao^0.35 + C2*tao + C3*tao^2 + C4*tao^3, coefficients (Tc, rho_base, C1, C2, C3, C4)"""
    n_coeffs = 6

    def _evaluate(self, p, T):
        return _density_tau(T, self._coeffs)


class CpTau(Correlation):
    """cp = B/tao + C1 + C2*T + C3*T^2 + C4*T^3, coefficients (Tc, B, C1, C2, C3, C4)"""
    n_coeffs = 6

    def _evaluate(self, p, T):
        return _cp_tau(T, self._coeffs)


class LatentHeatLog(Correlation):
    """H = exp(C1 + C2*ln(tao) + C3*Tr*ln(tao) + C4*Tr^2*ln(tao)), coefficients (Tc, C1, C2, C3, C4)"""
    n_coeffs = 5

    def _evaluate(self, p, T):
        return _latent_heat_log(T, self._coeffs)


class InversePolynomialExp(Correlation):
    """mu = exp(C1 + C2/T + C3/T^2 + C4/T^3)"""
    n_coeffs = 4

    def _evaluate(self, p, T):
        return _inverse_polynomial_exp(T, self._coeffs)


class ShiftedCubeRootExp(Correlation):
    """y = (C4 - C5)/(T - C5) - 1, mu = C1*exp((C2 + C3*y)*y^(1/3))"""
    n_coeffs = 5

    def _evaluate(self, p, T):
        return _shifted_cube_root_exp(T, self._coeffs)


class BrockBird(Correlation):
    """surface tension estimate (N/m) of Brock and Bird, coefficients (Tc, Pc, Tb)"""
    n_coeffs = 3

    def _evaluate(self, p, T):
        return _brock_bird(T, self._coeffs)


class Average(Correlation):
    """arithmetic mean of other correlations, used for species without their own fit"""

    def __init__(self, *correlations: Union[Correlation, dict], scale: float = 1.0):
        if not correlations:
            raise ConfigurationError("Average needs at least one correlation")
        self.correlations = tuple(correlation_from_spec(i) for i in correlations)
        try:
            self.scale = float(scale)
        except (TypeError, ValueError):
            raise ConfigurationError(f"Average scale must be a number: {scale!r}")
        self._coeffs = np.zeros(0)

    @property
    def coefficients(self) -> tuple:
        return self.correlations

    def _evaluate(self, p, T):
        return sum(i.value(p, T) for i in self.correlations) / len(self.correlations)

    def to_dict(self) -> dict:
        spec = {'type': 'Average', 'coeffs': [i.to_dict() for i in self.correlations]}
        if self.scale != 1.0:
            spec['scale'] = self.scale
        return spec

    def __eq__(self, other):
        return (type(self) is type(other)
                and self.scale == other.scale
                and self.correlations == other.correlations)

    def __hash__(self):
        return hash(('Average', self.correlations, self.scale))


CORRELATION_TYPES: Dict[str, type] = {
    cls.__name__: cls for cls in (
        NSRDSfunc0, NSRDSfunc1, NSRDSfunc5, NSRDSfunc6, APIdiffCoefFunc,
        Wagner25, DensityTau, CpTau, LatentHeatLog,
        InversePolynomialExp, ShiftedCubeRootExp, BrockBird, Average,
    )
}


def correlation_from_spec(spec: Union[Correlation, dict]) -> Correlation:
    """build a correlation from {'type': name, 'coeffs': [...], 'scale': optional}

    Exception:
        ConfigurationError: when the specification is malformed
    """
    if isinstance(spec, Correlation):
        return spec
    if not isinstance(spec, dict):
        raise ConfigurationError(f"correlation must be a mapping with 'type' and 'coeffs', got {spec!r}")
    unknown = set(spec) - {'type', 'coeffs', 'scale'}
    if unknown:
        raise ConfigurationError(f"unknown correlation entries: {sorted(unknown)}")
    name = spec.get('type')
    if name not in CORRELATION_TYPES:
        raise ConfigurationError(
            f"unknown correlation type {name!r}, available: {sorted(CORRELATION_TYPES)}")
    coeffs = spec.get('coeffs')
    if not isinstance(coeffs, (list, tuple)):
        raise ConfigurationError(f"{name} coefficients must be a list, got {coeffs!r}")
    return CORRELATION_TYPES[name](*coeffs, scale=spec.get('scale', 1.0))


def correlations_to_dict(correlations: Dict[str, Correlation]) -> Dict[str, dict]:
    return {key: value.to_dict() for key, value in correlations.items()}

