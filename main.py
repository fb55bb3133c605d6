"""
Main entry point for the liquid mixture property demo

Copyright (c) 2024 Droplet Combustion Simulation 1D
Licensed under the MIT License - see LICENSE file for details.

usage: python main.py [mixture.yaml]
"""

import sys
import time
import numpy as np
from liquidmix import LiquidMixtureProperties, load_mixture_config

#* about the mixture description
# every top level key is a component identifier of the liquid database (H2O, NA7 ... AR16, or an alias
# such as water, nC7H16, toluene), the value selects the default coefficients or user coefficients:
#   H2O:
#     defaultCoeffs: yes
#   NA7:
#     defaultCoeffs: no
#     NA7Coeffs: {W: 100.21, ...}
# without a file argument a water / n-heptane mixture is used.
DEFAULT_DESCRIPTION = {
    'H2O': {'defaultCoeffs': True},
    'nC7H16': None,
}

def main():
    pressure = 101325.0     # pressure, unit[Pa]
    temperature = 300.0     # temperature, unit[K]

    start_time = time.time()
    try:
        if len(sys.argv) > 1:
            description = load_mixture_config(sys.argv[1])
        else:
            description = DEFAULT_DESCRIPTION
        mixture = LiquidMixtureProperties(description)
        composition = np.full(mixture.size, 1.0 / mixture.size)  # equimolar mixture

        print(f"=== Liquid Mixture Properties ===")
        print(f"Components: {', '.join(mixture.components)}")
        print(f"Mole fractions: {composition}")
        print(f"Mass fractions: {mixture.mass_fraction(composition)}")
        print(f"Pressure: {pressure} Pa, Temperature: {temperature} K")
        print("="*50)
        for name, value in mixture.get_all_physical_properties(pressure, temperature, composition).items():
            print(f"    {name:<28s} {value:.6g}")
        print("="*50)
        surface = mixture.surface_mole_fraction(pressure, temperature, temperature, composition, composition)
        print(f"Surface vapour mole fractions: {surface}")
        print(f"Boiling temperature: {mixture.boiling_temperature(pressure, composition):.3f} K")
        print(f"Total Time: {time.time() - start_time:.2f} seconds")
        print("="*50)

    except Exception as e:
        # record the error information
        print(f"ERROR: property evaluation failed with exception: {str(e)}")
        import traceback
        print("Traceback:")
        print(traceback.format_exc())
        raise

if __name__ == "__main__":
    main()
