"""
config module

Copyright (c) 2024 Droplet Combustion Simulation 1D
Licensed under the MIT License - see LICENSE file for details.

This module turns a mixture description into component models:
1. load_mixture_config: read a description from a JSON or YAML file
2. build_component_models: resolve every entry of a description to a LiquidProperties model

a description maps component identifiers, in mixture order, to one of:
   - None or {}: default coefficients of the liquid database
   - {'defaultCoeffs': true}: default coefficients of the liquid database
   - {'defaultCoeffs': false, '<identifier>Coeffs': {...}}: user coefficients, layered over the
     defaults when the identifier is in the database
   - a PureComponentModel instance
"""

import json
import os
from typing import List, Tuple
import yaml
from .exceptions import ConfigurationError
from ..solution.liquid_database import LIQUID_DATABASE, default_coefficients
from ..solution.liquid_properties import LiquidProperties, PureComponentModel
from ..solution.mapping_utils import resolve_identifier

TRUE_STRINGS = ('true', 'yes', 'on', '1')
FALSE_STRINGS = ('false', 'no', 'off', '0')


def load_mixture_config(path) -> dict:
    """
    read a mixture description from a file

    the file is parsed as JSON when its extension is .json and as YAML otherwise, the
    description may be nested under a top level 'liquids' key.

    Args:
        path: path of the JSON or YAML file

    Returns:
        dict: the mixture description, component order preserved

    Exception:
        ConfigurationError: when the file cannot be parsed or does not hold a mapping
    """
    path = os.fspath(path)
    with open(path, "r", encoding="utf-8") as f:
        try:
            if path.lower().endswith(".json"):
                data = json.load(f)
            else:
                data = yaml.safe_load(f)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(f"cannot parse mixture description '{path}': {e}") from e
    if isinstance(data, dict) and set(data) == {'liquids'}:
        data = data['liquids']
    if not isinstance(data, dict):
        raise ConfigurationError(f"mixture description '{path}' must be a mapping of component identifiers")
    return data


def parse_bool(value, name: str = 'defaultCoeffs', component=None) -> bool:
    """convert a switch of the description (bool or yes/no/on/off/true/false string) to bool"""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        folded = value.strip().lower()
        if folded in TRUE_STRINGS:
            return True
        if folded in FALSE_STRINGS:
            return False
    raise ConfigurationError(f"{name} must be a boolean, got {value!r}", component=component)


def build_component_model(identifier: str, entry) -> PureComponentModel:
    """
    build the model of one component

    Args:
        identifier: component identifier as written in the description
        entry: value of the description for this component

    Returns:
        PureComponentModel: the component model

    Exception:
        ConfigurationError: when the entry is malformed or cannot be resolved
    """
    if isinstance(entry, PureComponentModel):
        return entry.clone()
    if entry is None:
        entry = {}
    if not isinstance(entry, dict):
        raise ConfigurationError(f"entry must be a mapping, got {entry!r}", component=identifier)

    coeffs_key = f"{identifier}Coeffs"
    unknown = sorted(set(entry) - {'defaultCoeffs', coeffs_key})
    if unknown:
        raise ConfigurationError(f"unknown entries {unknown}, expected 'defaultCoeffs' and '{coeffs_key}'",
                                 component=identifier)
    use_defaults = parse_bool(entry['defaultCoeffs'], component=identifier) if 'defaultCoeffs' in entry \
        else coeffs_key not in entry

    if use_defaults:
        return LiquidProperties.from_coefficients(default_coefficients(identifier), identifier)

    if coeffs_key not in entry:
        raise ConfigurationError(f"defaultCoeffs is false but '{coeffs_key}' is missing", component=identifier)
    block = entry[coeffs_key]
    if not isinstance(block, dict):
        raise ConfigurationError(f"'{coeffs_key}' must be a mapping, got {block!r}", component=identifier)
    # user coefficients are layered over the defaults of known liquids
    if resolve_identifier(identifier, LIQUID_DATABASE) is not None:
        coefficients = default_coefficients(identifier)
        coefficients.update(block)
    else:
        coefficients = dict(block)
    return LiquidProperties.from_coefficients(coefficients, identifier)


def build_component_models(description: dict) -> Tuple[List[str], List[PureComponentModel]]:
    """
    build the component models of a mixture description

    Args:
        description: mapping of component identifiers to their entries

    Returns:
        Tuple[List[str], List[PureComponentModel]]: identifiers and models in description order

    Exception:
        ConfigurationError: when the description is empty or an entry is invalid
    """
    if not isinstance(description, dict):
        raise ConfigurationError(f"mixture description must be a mapping, got {type(description).__name__}")
    if not description:
        raise ConfigurationError("mixture description has no components")
    components = []
    models = []
    for identifier, entry in description.items():
        if not isinstance(identifier, str) or not identifier:
            raise ConfigurationError(f"component identifier must be a non-empty string, got {identifier!r}")
        components.append(identifier)
        models.append(build_component_model(identifier, entry))
    return components, models
