"""
mapping utils module

Copyright (c) 2024 Droplet Combustion Simulation 1D
Licensed under the MIT License - see LICENSE file for details.


This module provides the naming relationships of the liquid species:
1. database identifiers of the hydrocarbon families
2. aliases (chemical formulas, common names, gas phase mechanism names) resolved to database identifiers
3. mapping between the components of a mixture and the species of a gas phase mechanism, used by
   evaporation models to pass surface mole fractions to the gas phase

"""
import warnings
from typing import Dict, Iterable, List, Optional

# liquid phase species name dictionary
LIQUID_SPECIES_NAMES = {
    # NA hydrocarbon family (0-9)
    0: "NA7", 1: "NA8", 2: "NA9", 3: "NA10", 4: "NA11",
    5: "NA12", 6: "NA13", 7: "NA14", 8: "NA15", 9: "NA16",
    # IA hydrocarbon family (10-19)
    10: "IA7", 11: "IA8", 12: "IA9", 13: "IA10", 14: "IA11",
    15: "IA12", 16: "IA13", 17: "IA14", 18: "IA15", 19: "IA16",
    # CA hydrocarbon family (20-29)
    20: "CA7", 21: "CA8", 22: "CA9", 23: "CA10", 24: "CA11",
    25: "CA12", 26: "CA13", 27: "CA14", 28: "CA15", 29: "CA16",
    # AR hydrocarbon family (30-39)
    30: "AR7", 31: "AR8", 32: "AR9", 33: "AR10", 34: "AR11",
    35: "AR12", 36: "AR13", 37: "AR14", 38: "AR15", 39: "AR16"
}

# gas phase species name dictionary
GAS_LIQUID_DICT = {
    "H2O": "H2O",

    # NA hydrocarbon family corresponding to NC series
    "NA7": "NC7H16", "NA8": "NC8H18", "NA9": "NC9H20", "NA10": "NC10H22", "NA11": "NC11H24",
    "NA12": "NC12H26", "NA13": "NC13H28", "NA14": "NC14H30", "NA15": "NC15H32", "NA16": "NC16H34",

    # IA hydrocarbon family corresponding to C series-2
    "IA7": "C7H16-2", "IA8": "C8H18-2", "IA9": "C9H20-2", "IA10": "C10H22-2", "IA11": "C11H24-2",
    "IA12": "C12H26-2", "IA13": "C13H28-2", "IA14": "C14H30-2", "IA15": "C15H32-2", "IA16": "C16H34-2",

    # CA hydrocarbon family corresponding to CH3cC6H11 series
    "CA7": "CH3cC6H11",  "CA8": "C2H5cC6H11", "CA9": "C3H7cC6H11", "CA10": "C4H9cC6H11", "CA11": "C5H11cC6H11",

    # AR hydrocarbon family corresponding relationship
    "AR7": "C6H5CH3",  "AR8": "A1C2H5", "AR9": "A1C3H7", "AR10": "A1C4H9", "AR11": "A1C5H11", "AR12": "A1C6H13"
}

# formula and common name aliases
LIQUID_ALIASES = {
    "water": "H2O",
    "n-heptane": "NA7", "nHeptane": "NA7",
    "n-decane": "NA10", "n-dodecane": "NA12", "n-hexadecane": "NA16",
    "C7H8": "AR7", "toluene": "AR7",
    "C8H10": "AR8", "ethylbenzene": "AR8",
    "C7H14": "CA7", "methylcyclohexane": "CA7",
}
# n-alkanes by formula, C7H16 ... C16H34, with and without the n prefix
for _n in range(7, 17):
    LIQUID_ALIASES[f"C{_n}H{2 * _n + 2}"] = f"NA{_n}"
    LIQUID_ALIASES[f"nC{_n}H{2 * _n + 2}"] = f"NA{_n}"


def resolve_identifier(name: str, known: Iterable[str]) -> Optional[str]:
    """
    resolve a liquid name to an identifier of the database

    Args:
        name: identifier, alias or gas phase species name
        known: identifiers available in the database

    Returns:
        Optional[str]: the database identifier, None if the name cannot be resolved
    """
    known = set(known)
    if name in known:
        return name
    candidates = [LIQUID_ALIASES.get(name)]
    candidates += [liquid for liquid, gas in GAS_LIQUID_DICT.items() if gas == name]
    for candidate in candidates:
        if candidate in known:
            return candidate
    # case insensitive fallback
    folded = name.casefold()
    for key in known:
        if key.casefold() == folded:
            return key
    for alias, key in LIQUID_ALIASES.items():
        if alias.casefold() == folded and key in known:
            return key
    return None


def gas_species_mapping(components: List[str], gas_species_names: List[str],
                        verbose: bool = False) -> Dict[int, Optional[int]]:
    """
    build the mapping between the components of a liquid mixture and the gas phase species

    Args:
        components: component identifiers of the mixture
        gas_species_names: gas phase species name list
        verbose: print the mapping

    Returns:
        dict: species mapping dictionary, key is the index of the liquid component, value is the index of
            the gas phase species (None when the component has no gas phase counterpart)
    """
    species_mapping = {}
    if verbose:
        print("\n=== the liquid and gas species mapping is as follows: ===")
    for liquid_idx, liquid_name in enumerate(components):
        # the component may be named with an alias of the database identifier
        identifier = resolve_identifier(liquid_name, GAS_LIQUID_DICT) or liquid_name
        gas_name = GAS_LIQUID_DICT.get(identifier)

        if gas_name and gas_name in gas_species_names:
            species_mapping[liquid_idx] = gas_species_names.index(gas_name)
            if verbose:
                print(f"    liquid phase {liquid_name} corresponds to gas phase {gas_name}")
        elif liquid_name in gas_species_names:
            species_mapping[liquid_idx] = gas_species_names.index(liquid_name)
            if verbose:
                print(f"    liquid phase {liquid_name} corresponds to gas phase {liquid_name}")
        else:
            warnings.warn(f"liquid phase {liquid_name} does not find the corresponding gas phase, mapped to None")
            species_mapping[liquid_idx] = None
    if verbose:
        print("="*50+"\n")
    return species_mapping
