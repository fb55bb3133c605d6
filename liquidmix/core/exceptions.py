"""
exceptions module

Copyright (c) 2024 Droplet Combustion Simulation 1D
Licensed under the MIT License - see LICENSE file for details.

This module provides the error types raised by the liquid mixture property package:
1. ConfigurationError: the mixture description cannot be turned into component models
2. DimensionMismatchError: a composition array does not match the number of components
3. ConvergenceError: the boiling temperature inversion failed
4. SupercriticalWarning: a component is evaluated at its clamped temperature
"""

__all__ = ('LiquidMixtureError',
           'ConfigurationError',
           'DimensionMismatchError',
           'ConvergenceError',
           'SupercriticalWarning')


class LiquidMixtureError(Exception):
    """base class of all liquid mixture errors"""


class ConfigurationError(LiquidMixtureError, ValueError):
    """ValueError regarding an invalid or unresolvable mixture description."""
    def __init__(self, msg, component=None):
        self.component = component
        if component is not None:
            msg = f"component '{component}': {msg}"
        super().__init__(msg)


class DimensionMismatchError(LiquidMixtureError, ValueError):
    """ValueError regarding a composition array of the wrong size."""
    def __init__(self, expected, actual, name='composition'):
        self.expected = expected
        self.actual = actual
        super().__init__(f"{name} size error: expected {expected}, actual {actual}")


class ConvergenceError(LiquidMixtureError, RuntimeError):
    """RuntimeError regarding a failed boiling temperature inversion."""
    def __init__(self, msg, pressure=None):
        self.pressure = pressure
        super().__init__(msg)


class SupercriticalWarning(UserWarning):
    """UserWarning regarding a component above its critical temperature."""
