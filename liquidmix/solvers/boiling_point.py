"""
boiling point solver module

Copyright (c) 2024 Droplet Combustion Simulation 1D
Licensed under the MIT License - see LICENSE file for details.

This module inverts a vapor pressure function for the temperature at which it equals a pressure,
the bubble temperature of a liquid mixture.
"""

import math
from typing import Callable, Tuple
from scipy.optimize import brentq
from ..core.exceptions import ConvergenceError


class BoilingPointSolver:
    """bracketed root solver of pv(T) - p = 0

    the vapor pressure is monotonically increasing in temperature, the root is searched with the
    Brent method between a lower temperature (pseudo triple point) and an upper temperature
    (critical temperature of the mixture).
    """

    def __init__(self, xtol: float = 1e-8, rtol: float = 1e-10, maxiter: int = 100):
        """
        initialize the solver

        Args:
            xtol: absolute temperature tolerance (K)
            rtol: relative temperature tolerance
            maxiter: maximum number of iterations
        """
        if not xtol > 0 or not rtol > 0 or maxiter < 1:
            raise ValueError(f"invalid solver parameters: xtol={xtol}, rtol={rtol}, maxiter={maxiter}")
        self.xtol = xtol
        self.rtol = rtol
        self.maxiter = maxiter

    def __repr__(self):
        return f"{type(self).__name__}(xtol={self.xtol}, rtol={self.rtol}, maxiter={self.maxiter})"

    def solve(self, vapor_pressure: Callable[[float], float], pressure: float,
              bracket: Tuple[float, float]) -> float:
        """
        find the temperature at which the vapor pressure equals the pressure

        Args:
            vapor_pressure: vapor pressure (Pa) as a function of the temperature (K)
            pressure: pressure (Pa)
            bracket: lower and upper temperature (K)

        Returns:
            float: boiling temperature (K)

        Exception:
            ConvergenceError: when the pressure is outside the bracket or the iteration fails
        """
        if not pressure > 0 or not math.isfinite(pressure):
            raise ConvergenceError(f"invalid pressure {pressure}Pa", pressure=pressure)
        T_low, T_high = bracket
        if not T_low < T_high:
            raise ConvergenceError(f"empty temperature bracket [{T_low}, {T_high}]K", pressure=pressure)

        pv_low = vapor_pressure(T_low)
        pv_high = vapor_pressure(T_high)
        if not (math.isfinite(pv_low) and math.isfinite(pv_high)):
            raise ConvergenceError(
                f"vapor pressure is not finite in the bracket: pv({T_low:.2f}K) = {pv_low}, "
                f"pv({T_high:.2f}K) = {pv_high}", pressure=pressure)
        # pressure below the triple point vapor pressure
        if pv_low > pressure:
            raise ConvergenceError(
                f"pressure {pressure}Pa is below the vapor pressure {pv_low:.6g}Pa at the lower bound {T_low:.2f}K",
                pressure=pressure)
        # pressure above the critical vapor pressure
        if pv_high < pressure:
            raise ConvergenceError(
                f"pressure {pressure}Pa is above the vapor pressure {pv_high:.6g}Pa at the upper bound {T_high:.2f}K",
                pressure=pressure)
        if pv_low == pressure:
            return T_low
        if pv_high == pressure:
            return T_high

        root, result = brentq(lambda T: vapor_pressure(T) - pressure, T_low, T_high,
                              xtol=self.xtol, rtol=self.rtol, maxiter=self.maxiter,
                              full_output=True, disp=False)
        if not result.converged or not math.isfinite(root):
            raise ConvergenceError(
                f"boiling temperature did not converge after {result.iterations} iterations: {result.flag}",
                pressure=pressure)
        return root
