"""
Scenarios Package
=================

Scenario factory, collection operations and JSON interchange.

License: MIT
"""

from .library import (
    apply_conservatism,
    create_default_scenario,
    delete_scenario,
    duplicate_scenario,
    generate_scenario_id,
    new_scenario,
)
from .serialization import (
    ScenarioFormatError,
    dumps_scenario,
    loads_scenario,
    scenario_from_dict,
    scenario_to_dict,
)

__all__ = [
    "create_default_scenario",
    "new_scenario",
    "duplicate_scenario",
    "delete_scenario",
    "apply_conservatism",
    "generate_scenario_id",
    "ScenarioFormatError",
    "dumps_scenario",
    "loads_scenario",
    "scenario_from_dict",
    "scenario_to_dict",
]
