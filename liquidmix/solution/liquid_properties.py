"""
pure liquid properties module

Copyright (c) 2024 Droplet Combustion Simulation 1D
Licensed under the MIT License - see LICENSE file for details.

This module provides the property model of a single liquid:
1. PureComponentModel: the interface the mixture uses, every method takes pressure (Pa) and temperature (K)
2. LiquidProperties: implementation built from constants and temperature correlations
"""

import abc
import copy
import math
from typing import Optional
from ..core.exceptions import ConfigurationError
from .functions import Correlation, correlation_from_spec, correlations_to_dict
from .liquid_para import RR

# constants of a coefficient set, the optional ones are derived when missing
REQUIRED_CONSTANTS = ('W', 'Tc', 'Pc', 'Vc', 'Tt', 'Tb')
OPTIONAL_CONSTANTS = ('Zc', 'Pt', 'omega')
CORRELATION_NAMES = ('rho', 'pv', 'hl', 'Cp', 'sigma', 'mu', 'K', 'D')


class PureComponentModel(abc.ABC):
    """property model of a single liquid component

    single component physical properties:
       - mass density (kg/m³): density_mass(p, T)
       - saturated vapor pressure (Pa): vapor_pressure(p, T)
       - mass heat of vaporization (J/kg): heat_vaporization_mass(p, T)
       - mass heat capacity (J/kg·K): cp_mass(p, T)
       - surface tension (N/m): surface_tension(p, T)
       - viscosity (Pa·s): viscosity(p, T)
       - thermal conductivity (W/m·K): thermal_conductivity(p, T)
       - vapour diffusivity in air (m²/s): diffusivity(p, T)

    constants: molecular_weight (kg/kmol), critical_temperature (K), critical_pressure (Pa),
    critical_volume (m³/kmol), critical_compressibility, triple_temperature (K),
    triple_pressure (Pa), boiling_temperature (K), acentric_factor
    """

    @abc.abstractmethod
    def density_mass(self, p: float, T: float) -> float: ...

    @abc.abstractmethod
    def vapor_pressure(self, p: float, T: float) -> float: ...

    @abc.abstractmethod
    def heat_vaporization_mass(self, p: float, T: float) -> float: ...

    @abc.abstractmethod
    def cp_mass(self, p: float, T: float) -> float: ...

    @abc.abstractmethod
    def surface_tension(self, p: float, T: float) -> float: ...

    @abc.abstractmethod
    def viscosity(self, p: float, T: float) -> float: ...

    @abc.abstractmethod
    def thermal_conductivity(self, p: float, T: float) -> float: ...

    @abc.abstractmethod
    def diffusivity(self, p: float, T: float) -> float: ...

    @property
    @abc.abstractmethod
    def molecular_weight(self) -> float: ...

    @property
    @abc.abstractmethod
    def critical_temperature(self) -> float: ...

    @property
    @abc.abstractmethod
    def critical_pressure(self) -> float: ...

    @property
    @abc.abstractmethod
    def critical_volume(self) -> float: ...

    @property
    @abc.abstractmethod
    def critical_compressibility(self) -> float: ...

    @property
    @abc.abstractmethod
    def triple_temperature(self) -> float: ...

    @property
    @abc.abstractmethod
    def acentric_factor(self) -> float: ...

    @property
    @abc.abstractmethod
    def triple_pressure(self) -> float: ...

    @property
    @abc.abstractmethod
    def boiling_temperature(self) -> float: ...

    def clone(self) -> 'PureComponentModel':
        """return an independent copy of the model"""
        return copy.deepcopy(self)


class LiquidProperties(PureComponentModel):
    """liquid property model built from constants and correlations

    the correlations are evaluated as given, the caller keeps the temperature below the critical
    temperature (the mixture does this with TR_MAX).

    Args:
        name: identifier of the liquid
        W: molecular weight (kg/kmol)
        Tc, Pc, Vc: critical temperature (K), pressure (Pa) and volume (m³/kmol)
        Tt: triple point temperature (K)
        Tb: normal boiling temperature (K)
        rho, pv, hl, Cp, sigma, mu, K, D: correlations of density (kg/m³), vapor pressure (Pa),
            heat of vaporization (J/kg), heat capacity (J/kg·K), surface tension (N/m),
            viscosity (Pa·s), thermal conductivity (W/m·K) and diffusivity (m²/s)
        Zc: critical compressibility, default Pc*Vc/(RR*Tc)
        Pt: triple point pressure (Pa), default pv(Tt)
        omega: acentric factor, default -log10(pv(0.7*Tc)/Pc) - 1
    """

    def __init__(self, name: str, W: float, Tc: float, Pc: float, Vc: float, Tt: float, Tb: float,
                 rho: Correlation, pv: Correlation, hl: Correlation, Cp: Correlation,
                 sigma: Correlation, mu: Correlation, K: Correlation, D: Correlation,
                 Zc: Optional[float] = None, Pt: Optional[float] = None, omega: Optional[float] = None):
        self.name = name
        self._W = W
        self._Tc = Tc
        self._Pc = Pc
        self._Vc = Vc
        self._Tt = Tt
        self._Tb = Tb
        self._correlations = {'rho': rho, 'pv': pv, 'hl': hl, 'Cp': Cp,
                              'sigma': sigma, 'mu': mu, 'K': K, 'D': D}
        self._Zc = Pc * Vc / (RR * Tc) if Zc is None else Zc
        self._Pt = pv.value(Pc, Tt) if Pt is None else Pt
        self._omega = -math.log10(pv.value(Pc, 0.7 * Tc) / Pc) - 1.0 if omega is None else omega

    @classmethod
    def from_coefficients(cls, coefficients: dict, name: str = 'liquid') -> 'LiquidProperties':
        """build the model from a coefficient set

        Args:
            coefficients: constants and correlation specifications, see liquid_database
            name: identifier used in error messages

        Exception:
            ConfigurationError: when the coefficient set is incomplete or malformed
        """
        if not isinstance(coefficients, dict):
            raise ConfigurationError(f"coefficients must be a mapping, got {type(coefficients).__name__}",
                                     component=name)
        known = set(REQUIRED_CONSTANTS + OPTIONAL_CONSTANTS + CORRELATION_NAMES)
        unknown = sorted(set(coefficients) - known)
        if unknown:
            raise ConfigurationError(f"unknown coefficients {unknown}", component=name)
        missing = [key for key in REQUIRED_CONSTANTS + CORRELATION_NAMES if coefficients.get(key) is None]
        if missing:
            raise ConfigurationError(f"missing coefficients {missing}", component=name)

        kwargs = {}
        for key in REQUIRED_CONSTANTS + OPTIONAL_CONSTANTS:
            if coefficients.get(key) is None:
                continue
            value = coefficients[key]
            # YAML 1.1 reads exponents without a dot and a sign (2.2055e7) as strings
            if isinstance(value, str):
                try:
                    value = float(value)
                except ValueError:
                    raise ConfigurationError(f"constant {key} must be a number, got {value!r}", component=name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigurationError(f"constant {key} must be a number, got {value!r}", component=name)
            if not math.isfinite(value):
                raise ConfigurationError(f"constant {key} must be finite, got {value!r}", component=name)
            kwargs[key] = float(value)
        for key in ('W', 'Tc', 'Pc', 'Vc'):
            if kwargs[key] <= 0:
                raise ConfigurationError(f"constant {key} must be positive, got {kwargs[key]}", component=name)
        for key in CORRELATION_NAMES:
            try:
                kwargs[key] = correlation_from_spec(coefficients[key])
            except ConfigurationError as e:
                raise ConfigurationError(f"correlation {key}: {e}", component=name) from e
        try:
            return cls(name, **kwargs)
        except (ValueError, ZeroDivisionError, OverflowError) as e:
            raise ConfigurationError(f"cannot derive the missing constants: {e}", component=name) from e

    def to_coefficients(self) -> dict:
        """return the coefficient set, inverse of from_coefficients"""
        coefficients = {
            'W': self._W, 'Tc': self._Tc, 'Pc': self._Pc, 'Vc': self._Vc, 'Zc': self._Zc,
            'Tt': self._Tt, 'Pt': self._Pt, 'Tb': self._Tb, 'omega': self._omega,
        }
        coefficients.update(correlations_to_dict(self._correlations))
        return coefficients

    def __repr__(self):
        return f"{type(self).__name__}({self.name!r}, W={self._W}, Tc={self._Tc})"

    # temperature dependent properties
    def density_mass(self, p, T):
        return self._correlations['rho'].value(p, T)

    def vapor_pressure(self, p, T):
        return self._correlations['pv'].value(p, T)

    def heat_vaporization_mass(self, p, T):
        return self._correlations['hl'].value(p, T)

    def cp_mass(self, p, T):
        return self._correlations['Cp'].value(p, T)

    def surface_tension(self, p, T):
        return self._correlations['sigma'].value(p, T)

    def viscosity(self, p, T):
        return self._correlations['mu'].value(p, T)

    def thermal_conductivity(self, p, T):
        return self._correlations['K'].value(p, T)

    def diffusivity(self, p, T):
        return self._correlations['D'].value(p, T)

    # constants
    @property
    def molecular_weight(self):
        return self._W

    @property
    def critical_temperature(self):
        return self._Tc

    @property
    def critical_pressure(self):
        return self._Pc

    @property
    def critical_volume(self):
        return self._Vc

    @property
    def critical_compressibility(self):
        return self._Zc

    @property
    def triple_temperature(self):
        return self._Tt

    @property
    def triple_pressure(self):
        return self._Pt

    @property
    def boiling_temperature(self):
        return self._Tb

    @property
    def acentric_factor(self):
        return self._omega
