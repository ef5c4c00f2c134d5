"""
Scenario Interchange (JSON)
===========================

Converts Scenarios to and from JSON text using the field names of the
record dataclasses (``tank.diameter_m``, ``inlet.nozzle_diameter_mm`` ...)
and the lowercase enum strings (``"radial"``, ``"depth_quarter"`` ...).

Import performs a minimal structural check: the ``tank`` and ``inlet``
sections must be present as objects and numeric fields must hold numbers
(``count`` an integer). Any other missing section or field falls back to
the default scenario. Unknown keys are ignored.

License: MIT
"""

import json
import logging
from dataclasses import asdict, fields, replace
from enum import Enum
from typing import Any, Dict, Mapping, Tuple, Type, TypeVar

from ..core.models import (
    ConservatismLevel,
    LengthScalePolicy,
    Orientation,
    Scenario,
    TankShape,
)
from .library import create_default_scenario, generate_scenario_id

logger = logging.getLogger(__name__)

REQUIRED_SECTIONS = ("tank", "inlet")
SECTIONS = ("tank", "inlet", "outlet", "operation", "water", "options")

# Enum-typed fields per section
_ENUM_FIELDS: Dict[str, Dict[str, Type[Enum]]] = {
    "tank": {"shape": TankShape},
    "inlet": {"orientation": Orientation},
    "outlet": {"orientation": Orientation},
    "options": {
        "conservatism": ConservatismLevel,
        "ri_length_scale": LengthScalePolicy,
    },
}

# Integer-typed fields per section; every other non-enum field is a float
_INT_FIELDS: Dict[str, Tuple[str, ...]] = {"inlet": ("count",)}

R = TypeVar("R")


class ScenarioFormatError(ValueError):
    """Scenario text is not valid JSON, lacks a required section or mistypes a field."""


def _coerce_number(section: str, key: str, value: Any) -> Any:
    """Validate a numeric field; bool, null and strings are rejected."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ScenarioFormatError(
            f"Field {section}.{key} must be a number, got {value!r}"
        )

    if key in _INT_FIELDS.get(section, ()):
        if isinstance(value, float) and not value.is_integer():
            raise ScenarioFormatError(
                f"Field {section}.{key} must be an integer, got {value!r}"
            )
        return int(value)

    try:
        return float(value)
    except OverflowError as e:
        raise ScenarioFormatError(
            f"Field {section}.{key} is out of range: {value!r}"
        ) from e


def scenario_to_dict(scenario: Scenario) -> Dict[str, Any]:
    """Plain dict with enum members replaced by their string values."""
    data = asdict(scenario)
    for section, enum_fields in _ENUM_FIELDS.items():
        for name in enum_fields:
            data[section][name] = data[section][name].value
    return data


def _build_section(base: R, section: str, raw: Mapping[str, Any]) -> R:
    known = {f.name for f in fields(base)}
    enum_fields = _ENUM_FIELDS.get(section, {})
    changes: Dict[str, Any] = {}

    for key, value in raw.items():
        if key not in known:
            logger.debug("Ignoring unknown field %s.%s", section, key)
            continue
        if key in enum_fields:
            try:
                value = enum_fields[key](value)
            except (TypeError, ValueError) as e:
                raise ScenarioFormatError(
                    f"Invalid value for {section}.{key}: {value!r}"
                ) from e
        else:
            value = _coerce_number(section, key, value)
        changes[key] = value

    return replace(base, **changes)


def scenario_from_dict(data: Mapping[str, Any]) -> Scenario:
    """
    Build a Scenario from parsed interchange data.

    Raises:
        ScenarioFormatError: If data or a section is not an object, ``tank``
            or ``inlet`` is missing, an enum value is unknown or a numeric
            field holds a non-number
    """
    if not isinstance(data, Mapping):
        raise ScenarioFormatError("Scenario must be a JSON object")

    missing = [name for name in REQUIRED_SECTIONS if data.get(name) is None]
    if missing:
        raise ScenarioFormatError(f"Invalid schema: missing {', '.join(missing)}")

    default = create_default_scenario()
    sections: Dict[str, Any] = {}
    for name in SECTIONS:
        raw = data.get(name)
        if raw is None:
            raw = {}
        if not isinstance(raw, Mapping):
            raise ScenarioFormatError(f"Section '{name}' must be an object")
        sections[name] = _build_section(getattr(default, name), name, raw)

    scenario_id = data.get("id")
    name = data.get("name")
    return Scenario(
        id=default.id if scenario_id is None else str(scenario_id),
        name=default.name if name is None else str(name),
        **sections,
    )


def dumps_scenario(scenario: Scenario) -> str:
    """Serialize a scenario to indented JSON text."""
    return json.dumps(scenario_to_dict(scenario), indent=2)


def loads_scenario(text: str, *, as_import: bool = False) -> Scenario:
    """
    Parse scenario JSON text.

    Args:
        text: JSON document
        as_import: Assign a fresh ``import-`` identity and prefix the name
            with ``"Imported: "``

    Returns:
        Scenario

    Raises:
        ScenarioFormatError: Invalid JSON or schema
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ScenarioFormatError(f"Invalid JSON: {e.msg}") from e

    scenario = scenario_from_dict(data)

    if as_import:
        scenario = replace(
            scenario,
            id=generate_scenario_id("import"),
            name=f"Imported: {scenario.name}",
        )
        logger.info("Imported scenario %r as %s", scenario.name, scenario.id)

    return scenario
