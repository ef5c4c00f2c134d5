"""
Scenario Library
================

Default scenario factory and the collection operations a design session
performs on scenarios: add, duplicate, delete and apply a conservatism
preset. All operations return new values; inputs are never mutated.

License: MIT
"""

import logging
import secrets
from dataclasses import replace
from typing import List, Sequence

from ..core.models import ConservatismLevel, Scenario

logger = logging.getLogger(__name__)


def generate_scenario_id(prefix: str = "scenario") -> str:
    """Unique scenario identity, e.g. ``scenario-3f9a1c2b``."""
    return f"{prefix}-{secrets.token_hex(4)}"


def create_default_scenario() -> Scenario:
    """
    Baseline design case.

    10 m diameter, 5 m deep tank (350 kL operating + 40 kL reserve), one
    150 mm radial inlet at 0.5 m, outlet at 0.2 m opposite, 20 L/s inflow
    with 100 kL fills, inflow 15-18°C into a 22°C tank.
    """
    return Scenario()


def new_scenario(existing_count: int) -> Scenario:
    """Default scenario with a fresh identity, named after its position."""
    return replace(
        create_default_scenario(),
        id=generate_scenario_id(),
        name=f"New Scenario {existing_count + 1}",
    )


def duplicate_scenario(scenario: Scenario) -> Scenario:
    """Copy of ``scenario`` with a fresh identity and a "(Copy)" name."""
    return replace(scenario, id=generate_scenario_id(), name=f"{scenario.name} (Copy)")


def delete_scenario(scenarios: Sequence[Scenario], scenario_id: str) -> List[Scenario]:
    """
    Remove a scenario from a collection.

    Args:
        scenarios: Current collection
        scenario_id: Identity to remove

    Returns:
        New list without the scenario

    Raises:
        ValueError: If it is the last scenario or the id is unknown
    """
    if len(scenarios) <= 1:
        raise ValueError("Cannot delete the last scenario.")

    remaining = [s for s in scenarios if s.id != scenario_id]
    if len(remaining) == len(scenarios):
        raise ValueError(f"Unknown scenario id: {scenario_id}")

    logger.debug("Deleted scenario %s (%d remain)", scenario_id, len(remaining))
    return remaining


def apply_conservatism(scenario: Scenario, level: ConservatismLevel) -> Scenario:
    """Select a conservatism preset and its default target velocity."""
    return replace(scenario, options=scenario.options.for_conservatism(level))
