"""
Liquid mixture properties class

Copyright (c) 2024 Droplet Combustion Simulation 1D
Licensed under the MIT License - see LICENSE file for details.
"""

import abc
import copy
from typing import Dict, Optional, Sequence, Union
import numpy as np
from . import liquid_para
from .liquid_para import SMALL
from .liquid_properties import PureComponentModel
from .liquid_utils import (validate_composition, validate_pressure, validate_temperature,
                           find_supercritical_species, get_matrix_result)
from ..core.config import build_component_models, load_mixture_config
from ..core.exceptions import ConfigurationError
from ..solvers.boiling_point import BoilingPointSolver

# per component properties: short name -> method of PureComponentModel
COMPONENT_PROPERTIES = {
    'rho': 'density_mass',
    'pv': 'vapor_pressure',
    'hl': 'heat_vaporization_mass',
    'Cp': 'cp_mass',
    'sigma': 'surface_tension',
    'mu': 'viscosity',
    'K': 'thermal_conductivity',
    'D': 'diffusivity',
}

# mixture properties depending on the state: short name -> method of LiquidMixtureProperties
STATE_PROPERTIES = {
    'rho': 'density_mass',
    'rho_mole': 'density_mole',
    'pv': 'vapor_pressure',
    'hl': 'heat_vaporization_mass',
    'hl_mole': 'heat_vaporization_mole',
    'Cp': 'cp_mass',
    'Cp_mole': 'cp_mole',
    'sigma': 'surface_tension',
    'mu': 'viscosity',
    'K': 'thermal_conductivity',
    'D': 'diffusivity',
}

# mixture properties depending on the composition only
COMPOSITION_PROPERTIES = {
    'W': 'molecular_weight',
    'Tc': 'critical_temperature',
    'Tpc': 'pseudocritical_temperature',
    'Ppc': 'pseudocritical_pressure',
    'Tpt': 'pseudo_triple_temperature',
    'omega': 'acentric_factor',
}


class MixtureModel(abc.ABC):
    """interface of a liquid mixture property model

    every query is a pure function of its arguments: pressure p (Pa), temperature T (K) and a
    mole fraction vector x of the size of the mixture.
    """

    @property
    @abc.abstractmethod
    def components(self) -> tuple: ...

    @property
    def size(self) -> int:
        return len(self.components)

    def __len__(self):
        return self.size

    @abc.abstractmethod
    def molecular_weight(self, x) -> float: ...

    @abc.abstractmethod
    def mass_fraction(self, x) -> np.ndarray: ...

    @abc.abstractmethod
    def mole_fraction(self, Y) -> np.ndarray: ...

    @abc.abstractmethod
    def density_mass(self, p, T, x) -> float: ...

    @abc.abstractmethod
    def vapor_pressure(self, p, T, x) -> float: ...

    @abc.abstractmethod
    def heat_vaporization_mass(self, p, T, x) -> float: ...

    @abc.abstractmethod
    def cp_mass(self, p, T, x) -> float: ...

    @abc.abstractmethod
    def surface_tension(self, p, T, x) -> float: ...

    @abc.abstractmethod
    def viscosity(self, p, T, x) -> float: ...

    @abc.abstractmethod
    def thermal_conductivity(self, p, T, x) -> float: ...

    @abc.abstractmethod
    def diffusivity(self, p, T, x) -> float: ...

    @abc.abstractmethod
    def critical_temperature(self, x) -> float: ...

    @abc.abstractmethod
    def pseudocritical_temperature(self, x) -> float: ...

    @abc.abstractmethod
    def pseudocritical_pressure(self, x) -> float: ...

    @abc.abstractmethod
    def pseudo_triple_temperature(self, x) -> float: ...

    @abc.abstractmethod
    def acentric_factor(self, x) -> float: ...

    @abc.abstractmethod
    def surface_mole_fraction(self, p, Tg, Tl, xg, xl) -> np.ndarray: ...

    @abc.abstractmethod
    def boiling_temperature(self, p, x) -> float: ...

    @abc.abstractmethod
    def clone(self) -> 'MixtureModel': ...


class LiquidMixtureProperties(MixtureModel):
    """liquid mixture property class

    this class aggregates the properties of N pure liquids into mixture properties:
    1. composition conversion:
       - mean molecular weight (kg/kmol): molecular_weight(x)
       - mass fraction: mass_fraction(x)
       - mole fraction: mole_fraction(Y)

    2. mixture physical properties, each component is evaluated at Ti = min(TR_MAX*Tc_i, T):
       - mass density (kg/m³): density_mass(p, T, x)
       - molar density (kmol/m³): density_mole(p, T, x)
       - saturated vapor pressure (Pa): vapor_pressure(p, T, x)
       - mass heat of vaporization (J/kg): heat_vaporization_mass(p, T, x)
       - mass heat capacity (J/kg·K): cp_mass(p, T, x)
       - surface tension (N/m): surface_tension(p, T, x)
       - viscosity (Pa·s): viscosity(p, T, x)
       - thermal conductivity (W/m·K): thermal_conductivity(p, T, x)
       - vapour diffusivity in air (m²/s): diffusivity(p, T, x)

    3. critical and reference values:
       - critical temperature (K), rule of Li: critical_temperature(x)
       - pseudo critical temperature (K), rule of Kay: pseudocritical_temperature(x)
       - pseudo critical pressure (Pa): pseudocritical_pressure(x)
       - pseudo triple point temperature (K): pseudo_triple_temperature(x)
       - acentric factor: acentric_factor(x)

    4. phase equilibrium:
       - surface mole fractions of the vapour (Raoult): surface_mole_fraction(p, Tg, Tl, xg, xl)
       - bubble temperature (K): boiling_temperature(p, x)

    characteristics:
       - the component list is fixed at construction and the object is never modified
       - compositions must have N entries and are not normalised
       - copies own independent clones of the component models
    """

    def __init__(self, description: Union[dict, 'LiquidMixtureProperties'],
                 solver: Optional[BoilingPointSolver] = None):
        """
        initialize the liquid mixture

        Args:
            description: mixture description (component identifier -> entry) or another mixture to copy
            solver: boiling point solver, default BoilingPointSolver()

        Exception:
            ConfigurationError: when the description cannot be resolved
        """
        if isinstance(description, LiquidMixtureProperties):
            components = description.components
            models = [model.clone() for model in description.properties]
            solver = solver or copy.copy(description._solver)
        else:
            components, models = build_component_models(description)
        self._setup(components, models, solver)

    def _setup(self, components: Sequence[str], models: Sequence[PureComponentModel],
               solver: Optional[BoilingPointSolver]):
        if len(components) == 0:
            raise ConfigurationError("a liquid mixture needs at least one component")
        if len(components) != len(models):
            raise ConfigurationError(
                f"{len(components)} component identifiers for {len(models)} component models")
        for name, model in zip(components, models):
            if not isinstance(model, PureComponentModel):
                raise ConfigurationError(f"model must be a PureComponentModel, got {type(model).__name__}",
                                         component=name)
        self._components = tuple(str(i) for i in components)
        self._properties = tuple(models)
        self._solver = solver or BoilingPointSolver()

        # constants of the components
        self._W = self._constant_array('molecular_weight')
        self._Tc = self._constant_array('critical_temperature')
        self._Vc = self._constant_array('critical_volume')
        self._Zc = self._constant_array('critical_compressibility')
        self._Tt = self._constant_array('triple_temperature')
        self._omega = self._constant_array('acentric_factor')

    def _constant_array(self, name: str) -> np.ndarray:
        values = np.array([getattr(model, name) for model in self._properties], dtype=np.float64)
        values.flags.writeable = False
        return values

    # 1. construction
    @classmethod
    def from_config(cls, description: dict, solver: Optional[BoilingPointSolver] = None) -> 'LiquidMixtureProperties':
        """build the mixture from a description, see liquidmix.core.config"""
        return cls(description, solver)

    @classmethod
    def from_file(cls, path, solver: Optional[BoilingPointSolver] = None) -> 'LiquidMixtureProperties':
        """build the mixture from a JSON or YAML description file"""
        return cls(load_mixture_config(path), solver)

    @classmethod
    def from_models(cls, components: Sequence[str], models: Sequence[PureComponentModel],
                    solver: Optional[BoilingPointSolver] = None) -> 'LiquidMixtureProperties':
        """
        build the mixture from component models

        Args:
            components: component identifiers
            models: component models, parallel to components (the mixture keeps clones)
        """
        self = cls.__new__(cls)
        components, models = list(components), list(models)
        if len(components) != len(models):
            raise ConfigurationError(
                f"{len(components)} component identifiers for {len(models)} component models")
        for name, model in zip(components, models):
            if not isinstance(model, PureComponentModel):
                raise ConfigurationError(f"model must be a PureComponentModel, got {type(model).__name__}",
                                         component=name)
        self._setup(list(components), [model.clone() for model in models], solver)
        return self

    def clone(self) -> 'LiquidMixtureProperties':
        return type(self)(self)

    def __copy__(self):
        return self.clone()

    def __deepcopy__(self, memo):
        return self.clone()

    def __repr__(self):
        return f"{type(self).__name__}({list(self._components)})"

    # 2. component access
    @property
    def components(self) -> tuple:
        """component identifiers, in mixture order"""
        return self._components

    @property
    def properties(self) -> tuple:
        """component models, parallel to components"""
        return self._properties

    @property
    def solver(self) -> BoilingPointSolver:
        """boiling point solver used by boiling_temperature"""
        return self._solver

    def index(self, identifier: str) -> int:
        """return the index of a component, ValueError if it is not in the mixture"""
        try:
            return self._components.index(identifier)
        except ValueError:
            raise ValueError(f"{identifier!r} is not a component of the mixture {list(self._components)}")

    def __getitem__(self, key: Union[int, str]) -> PureComponentModel:
        if isinstance(key, str):
            key = self.index(key)
        return self._properties[key]

    def __contains__(self, identifier) -> bool:
        return identifier in self._components

    # 3. validation and per component evaluation
    def _check_composition(self, x, name: str = 'composition') -> np.ndarray:
        return validate_composition(x, self.size, name)

    def _check_state(self, p, T, x):
        """validate the state of a query and report the supercritical components"""
        p = validate_pressure(p)
        T = validate_temperature(T)
        x = self._check_composition(x)
        find_supercritical_species(x, T, self._Tc, self._components)
        return p, T, x

    def _component_values(self, method: str, p: float, T: float, x: Optional[np.ndarray] = None) -> np.ndarray:
        """evaluate a property of every component at its clamped temperature

        components with x <= SMALL are not evaluated, their value is 0
        """
        temperatures = liquid_para.calculate_clamped_temperatures(T, self._Tc)
        values = np.zeros(self.size)
        for i, model in enumerate(self._properties):
            if x is None or x[i] > SMALL:
                values[i] = getattr(model, method)(p, temperatures[i])
        return values

    def component_values(self, name: str, p: float, T: float, i: Optional[int] = None) -> Union[float, np.ndarray]:
        """
        return a property of the single components at the clamped temperatures

        Args:
            name: property name, a method of PureComponentModel (e.g. 'vapor_pressure') or its short name ('pv')
            p: pressure (Pa)
            T: temperature (K)
            i: index of the component, if None, return the values of all components

        Exception:
            ValueError: when the property name is invalid
        """
        method = COMPONENT_PROPERTIES.get(name, name)
        if method not in COMPONENT_PROPERTIES.values():
            raise ValueError(f"invalid component property name: {name}, valid names: "
                             f"{sorted(COMPONENT_PROPERTIES) + sorted(COMPONENT_PROPERTIES.values())}")
        p = validate_pressure(p)
        T = validate_temperature(T)
        return get_matrix_result(self._component_values(method, p, T), i)

    # 4. composition conversion
    def molecular_weight(self, x) -> float:
        """mean molecular weight (kg/kmol), Σ(xi*Wi)"""
        x = self._check_composition(x)
        return float(liquid_para.calculate_molecular_weight_mean(x, self._W))

    def mass_fraction(self, x) -> np.ndarray:
        """mass fractions from mole fractions"""
        x = self._check_composition(x)
        return liquid_para.calculate_mass_fraction(x, self._W)

    def mole_fraction(self, Y) -> np.ndarray:
        """mole fractions from mass fractions"""
        Y = self._check_composition(Y, 'mass fraction')
        return liquid_para.calculate_mole_fraction(Y, self._W)

    # 5. mixture physical properties
    def _density_mass(self, p, T, x):
        rho = self._component_values('density_mass', p, T, x)
        return float(liquid_para.calculate_density_mass_mean(x, self._W, rho))

    def _vapor_pressure(self, p, T, x):
        pv = self._component_values('vapor_pressure', p, T, x)
        return float(liquid_para.calculate_linear_mean(x, pv))

    def _heat_vaporization_mass(self, p, T, x):
        hl = self._component_values('heat_vaporization_mass', p, T, x)
        return float(liquid_para.calculate_mass_weighted_mean(x, self._W, hl))

    def _cp_mass(self, p, T, x):
        cp = self._component_values('cp_mass', p, T, x)
        return float(liquid_para.calculate_mass_weighted_mean(x, self._W, cp))

    def _surface_tension(self, p, T, x):
        sigma = self._component_values('surface_tension', p, T, x)
        return float(liquid_para.calculate_linear_mean(x, sigma))

    def _viscosity(self, p, T, x):
        mu = self._component_values('viscosity', p, T, x)
        return float(liquid_para.calculate_viscosity_mean(x, mu))

    def _thermal_conductivity(self, p, T, x):
        rho = self._component_values('density_mass', p, T, x)
        k = self._component_values('thermal_conductivity', p, T, x)
        return float(liquid_para.calculate_thermal_conductivity_mean(x, self._W, rho, k))

    def _diffusivity(self, p, T, x):
        D = self._component_values('diffusivity', p, T, x)
        return float(liquid_para.calculate_diffusion_mean(x, D))

    def density_mass(self, p, T, x) -> float:
        """mass density (kg/m³), Σ(xi*Wi) / Σ(xi*Wi/rho_i)"""
        return self._density_mass(*self._check_state(p, T, x))

    def density_mole(self, p, T, x) -> float:
        """molar density (kmol/m³)"""
        p, T, x = self._check_state(p, T, x)
        return self._density_mass(p, T, x) / float(liquid_para.calculate_molecular_weight_mean(x, self._W))

    def vapor_pressure(self, p, T, x) -> float:
        """saturated vapor pressure (Pa), Raoult's law Σ(xi*pv_i)"""
        return self._vapor_pressure(*self._check_state(p, T, x))

    def heat_vaporization_mass(self, p, T, x) -> float:
        """mass heat of vaporization (J/kg), mass fraction weighted mean"""
        return self._heat_vaporization_mass(*self._check_state(p, T, x))

    def heat_vaporization_mole(self, p, T, x) -> float:
        """molar heat of vaporization (J/kmol)"""
        p, T, x = self._check_state(p, T, x)
        return self._heat_vaporization_mass(p, T, x) * float(liquid_para.calculate_molecular_weight_mean(x, self._W))

    def cp_mass(self, p, T, x) -> float:
        """mass heat capacity (J/kg·K), mass fraction weighted mean"""
        return self._cp_mass(*self._check_state(p, T, x))

    def cp_mole(self, p, T, x) -> float:
        """molar heat capacity (J/kmol·K)"""
        p, T, x = self._check_state(p, T, x)
        return self._cp_mass(p, T, x) * float(liquid_para.calculate_molecular_weight_mean(x, self._W))

    def surface_tension(self, p, T, x) -> float:
        """surface tension (N/m), Σ(xi*sigma_i)"""
        return self._surface_tension(*self._check_state(p, T, x))

    def viscosity(self, p, T, x) -> float:
        """viscosity (Pa·s), ln(mu) = Σ(xi*ln(mu_i))"""
        return self._viscosity(*self._check_state(p, T, x))

    def thermal_conductivity(self, p, T, x) -> float:
        """thermal conductivity (W/m·K), method of Li"""
        return self._thermal_conductivity(*self._check_state(p, T, x))

    def diffusivity(self, p, T, x) -> float:
        """vapour diffusivity in air (m²/s), Blanc's law"""
        return self._diffusivity(*self._check_state(p, T, x))

    # 6. critical and reference values
    def critical_temperature(self, x) -> float:
        """critical temperature (K), Σ(xi*Vci*Tci) / Σ(xi*Vci)"""
        x = self._check_composition(x)
        return float(liquid_para.calculate_critical_temperature_mean(x, self._Tc, self._Vc))

    def pseudocritical_temperature(self, x) -> float:
        """pseudo critical temperature (K), Σ(xi*Tci)"""
        x = self._check_composition(x)
        return float(liquid_para.calculate_linear_mean(x, self._Tc))

    def pseudocritical_pressure(self, x) -> float:
        """pseudo critical pressure (Pa), RR*Σ(xi*Zci)*Σ(xi*Tci) / Σ(xi*Vci)"""
        x = self._check_composition(x)
        return float(liquid_para.calculate_pseudocritical_pressure(x, self._Tc, self._Vc, self._Zc))

    def pseudo_triple_temperature(self, x) -> float:
        """pseudo triple point temperature (K), Σ(xi*Tti)"""
        x = self._check_composition(x)
        return float(liquid_para.calculate_linear_mean(x, self._Tt))

    def acentric_factor(self, x) -> float:
        """acentric factor, Σ(xi*omega_i)"""
        x = self._check_composition(x)
        return float(liquid_para.calculate_linear_mean(x, self._omega))

    # 7. phase equilibrium
    def surface_mole_fraction(self, p, Tg, Tl, xg, xl) -> np.ndarray:
        """
        mole fractions of the vapour at the liquid surface, Raoult's law

        xs_i = pv_i(p, min(TR_MAX*Tc_i, Tl)) * xl_i / p, the result is not normalised

        Args:
            p: pressure (Pa)
            Tg: gas temperature (K), not used by the equilibrium
            Tl: liquid temperature (K)
            xg: gas mole fractions of the components, size and sign checked only, may be all zero
            xl: liquid mole fractions
        """
        validate_temperature(Tg)
        validate_composition(xg, self.size, 'gas composition', allow_zero=True)
        p, Tl, xl = self._check_state(p, Tl, xl)
        pv = self._component_values('vapor_pressure', p, Tl, xl)
        return pv * xl / p

    def boiling_temperature(self, p, x) -> float:
        """
        bubble temperature (K): the temperature at which vapor_pressure(p, T, x) equals p

        the root is searched between pseudo_triple_temperature(x) and critical_temperature(x)

        Exception:
            ConvergenceError: when p is outside the vapor pressure range of the bracket or the
                iteration fails
        """
        p = validate_pressure(p)
        x = self._check_composition(x)
        bracket = (float(liquid_para.calculate_linear_mean(x, self._Tt)),
                   float(liquid_para.calculate_critical_temperature_mean(x, self._Tc, self._Vc)))
        return self._solver.solve(lambda T: self._vapor_pressure(p, T, x), p, bracket)

    # 8. collected properties
    def get_all_physical_properties(self, p, T, x) -> Dict[str, float]:
        """get the complete physical properties of the mixture

        Returns:
            Dict[str, float]: dictionary containing the following physical properties:
                - molecular_weight: average molecular weight of the mixture (kg/kmol)
                - density_mole: molar density (kmol/m³)
                - density_mass: mass density (kg/m³)
                - cp_mole: molar heat capacity (J/kmol·K)
                - cp_mass: mass heat capacity (J/kg·K)
                - heat_vaporization_mole: molar heat of vaporization (J/kmol)
                - heat_vaporization_mass: mass heat of vaporization (J/kg)
                - thermal_conductivity: thermal conductivity (W/m·K)
                - vapor_pressure: saturated vapor pressure (Pa)
                - viscosity: viscosity (Pa·s)
                - surface_tension: surface tension (N/m)
                - diffusivity: vapour diffusivity in air (m²/s)
                - critical_temperature, pseudocritical_temperature (K)
                - pseudocritical_pressure (Pa)
                - pseudo_triple_temperature (K)
                - acentric_factor
        """
        p, T, x = self._check_state(p, T, x)
        W = float(liquid_para.calculate_molecular_weight_mean(x, self._W))
        density_mass = self._density_mass(p, T, x)
        cp_mass = self._cp_mass(p, T, x)
        heat_vaporization_mass = self._heat_vaporization_mass(p, T, x)
        return {
            'molecular_weight': W,
            'density_mole': density_mass / W,
            'density_mass': density_mass,
            'cp_mole': cp_mass * W,
            'cp_mass': cp_mass,
            'heat_vaporization_mole': heat_vaporization_mass * W,
            'heat_vaporization_mass': heat_vaporization_mass,
            'thermal_conductivity': self._thermal_conductivity(p, T, x),
            'vapor_pressure': self._vapor_pressure(p, T, x),
            'viscosity': self._viscosity(p, T, x),
            'surface_tension': self._surface_tension(p, T, x),
            'diffusivity': self._diffusivity(p, T, x),
            'critical_temperature': self.critical_temperature(x),
            'pseudocritical_temperature': self.pseudocritical_temperature(x),
            'pseudocritical_pressure': self.pseudocritical_pressure(x),
            'pseudo_triple_temperature': self.pseudo_triple_temperature(x),
            'acentric_factor': self.acentric_factor(x),
        }

    def get_single_property(self, property_name: str, p, T, x) -> float:
        """get a specific physical property of the mixture

        Args:
            property_name: a key of get_all_physical_properties or its short name
                (W, rho, rho_mole, pv, hl, hl_mole, Cp, Cp_mole, sigma, mu, K, D, Tc, Tpc, Ppc, Tpt, omega)

        Exception:
            ValueError: when the physical property name is invalid, raise ValueError
        """
        name = STATE_PROPERTIES.get(property_name) or COMPOSITION_PROPERTIES.get(property_name) or property_name
        if name in STATE_PROPERTIES.values():
            return getattr(self, name)(p, T, x)
        if name in COMPOSITION_PROPERTIES.values():
            return getattr(self, name)(x)
        valid_names = sorted(STATE_PROPERTIES.values()) + sorted(COMPOSITION_PROPERTIES.values())
        raise ValueError(f"invalid physical property name: {property_name}, valid names: {valid_names}")

    # short names of the mixing rules
    W = molecular_weight
    Y = mass_fraction
    X = mole_fraction
    rho = density_mass
    pv = vapor_pressure
    hl = heat_vaporization_mass
    Cp = cp_mass
    sigma = surface_tension
    mu = viscosity
    K = thermal_conductivity
    D = diffusivity
    Tc = critical_temperature
    Tpc = pseudocritical_temperature
    Ppc = pseudocritical_pressure
    Tpt = pseudo_triple_temperature
    omega = acentric_factor
    Xs = surface_mole_fraction
    pv_invert = boiling_temperature
    pvInvert = boiling_temperature
