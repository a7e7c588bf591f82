"""Massive consumption: an environment's variables as one flat JSON object."""
from typing import Dict, Iterable
from config_service.models import Variable


def flatten_variables(variables: Iterable[Variable]) -> Dict[str, str]:
    """Map each variable name to its value, dropping every other column."""
    return {variable.name: variable.value for variable in variables}
