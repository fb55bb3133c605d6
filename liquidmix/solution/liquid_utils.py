"""
liquid utils module

Copyright (c) 2024 Droplet Combustion Simulation 1D
Licensed under the MIT License - see LICENSE file for details.

This module provides various utility functions for liquid mixture calculations, including:

1. state validation functions:
   - validate_composition: validate the size and the values of a composition vector
   - validate_pressure: validate the validity of pressure
   - validate_temperature: validate the validity of temperature

2. supercritical species checking functions:
   - find_supercritical_species: check and report supercritical species

3. utility functions:
   - get_matrix_result: get the matrix result according to the index
"""

import math
import warnings
import numpy as np
import numba
from typing import Optional, Sequence, Union
from ..core.exceptions import DimensionMismatchError, SupercriticalWarning
from .liquid_para import COM_TOLERANCE_NEGATIVE, SMALL


# constant definition
PRESSURE_MIN = 0.0
TEMPERATURE_MIN = 0.0

# 1. state validation functions:

@numba.njit(cache=True)
def _find_negative_impl(composition: np.ndarray) -> int:
    """return the index of the first invalid value (NaN or below -COM_TOLERANCE_NEGATIVE), -1 if none"""
    for i in range(composition.size):
        if np.isnan(composition[i]) or composition[i] < -COM_TOLERANCE_NEGATIVE:
            return i
    return -1

def validate_composition(composition, size: int, name: str = "composition", allow_zero: bool = False) -> np.ndarray:
    """validate the validity of the composition

    small negative values (round-off of the caller) are clipped to 0, the composition is not
    renormalised.

    Args:
        composition: mole or mass fraction vector
        size: number of components of the mixture
        name: name of the argument used in error messages
        allow_zero: accept a composition whose fractions are all zero

    Returns:
        np.ndarray: the composition as a float array

    Exception:
        DimensionMismatchError: when the composition size is not the number of components
        ValueError: when the composition has negative or NaN values, or is all zero (unless allow_zero)
    """
    composition = np.asarray(composition, dtype=np.float64)
    if composition.ndim != 1 or composition.size != size:
        actual = composition.size if composition.ndim == 1 else composition.shape
        raise DimensionMismatchError(size, actual, name)
    i = _find_negative_impl(composition)
    if i >= 0:
        raise ValueError(f"invalid {name}: index {i}, value {composition[i]}")
    composition = np.maximum(composition, 0.0)
    if not allow_zero and not np.sum(composition) > 0:
        raise ValueError(f"invalid {name}: all fractions are zero")
    return composition

def validate_pressure(pressure: float) -> float:
    """validate the validity of the pressure"""
    pressure = float(pressure)
    if not pressure > PRESSURE_MIN or not math.isfinite(pressure):
        raise ValueError(f"pressure must be greater than {PRESSURE_MIN}Pa, current value: {pressure}Pa")
    return pressure

def validate_temperature(temperature: float) -> float:
    """validate the validity of the temperature"""
    temperature = float(temperature)
    if not temperature > TEMPERATURE_MIN or not math.isfinite(temperature):
        raise ValueError(f"temperature must be greater than {TEMPERATURE_MIN}K, current value: {temperature}K")
    return temperature


# 2. supercritical species checking functions:

def find_supercritical_species(composition: np.ndarray, temperature: float, tc: np.ndarray,
                               species_names: Sequence[str]) -> list:
    """find the supercritical species, if exist, raise a warning

    a supercritical species is present in the composition and has a critical temperature below the
    temperature, its properties are evaluated at TR_MAX*Tc.

    Returns:
        list: names of the supercritical species
    """
    mask = (composition > SMALL) & (temperature > tc)
    supercritical = []
    for i in np.flatnonzero(mask):
        supercritical.append(species_names[i])
        warnings.warn(f"species {species_names[i]} is supercritical (T = {temperature:.2f}K > Tc = {tc[i]:.2f}K)",
                      SupercriticalWarning, stacklevel=4)
    return supercritical


# 3. utility functions:

# utility function-return the corresponding part of the matrix according to the index
def get_matrix_result(matrix: np.ndarray,
                      i: Optional[int] = None) -> Union[float, np.ndarray]:
    """
    return the corresponding part of the matrix according to the index.
    if the index is None, return the whole matrix.

    Args:
        matrix (np.ndarray): per component values, shape (N,)
        i (Optional[int]): index value, if None, return the whole matrix

    Returns:
        Union[float, np.ndarray]:
            - if i is None, return the whole matrix
            - if i is a valid index, return the element at the corresponding position

    Exception:
        IndexError: when the index is out of the matrix range
    """
    if i is None:
        return matrix

    if i < 0 or i >= len(matrix):
        raise IndexError("index %d out of matrix range [0, %d]" % (i, len(matrix)-1))

    return matrix[i]
