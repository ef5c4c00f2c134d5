"""
Data Model for Tank Mixing Assessment
=====================================

Immutable input and output records for the mixing heuristic engine.

INPUT RECORDS
=============

A Scenario bundles five physical records plus the analysis Options:

- Tank: cylindrical geometry and storage volumes
- Inlet: nozzle count, size, elevation and orientation
- Outlet: elevation and orientation
- Operation: inflow rate and fill-event volume
- Water: inflow temperature range and initial tank temperature

All records are frozen dataclasses. The engine never mutates a Scenario;
variants are created with ``dataclasses.replace`` (see ``Scenario.with_``).

OUTPUT RECORDS
==============

- Metrics: every number the engine derives, including Richardson debug terms
- Recommendation: one actionable suggestion (id, type, message, priority)
- Result: statuses, dominant risk, metrics, recommendations, validity flags

UNITS
=====

Lengths in meters except nozzle diameter [mm]; volumes in kL (1 kL = 1 m³);
flow in L/s; temperatures in °C; velocities in m/s.

License: MIT
"""

import math
from dataclasses import dataclass, field, replace, asdict
from enum import Enum
from typing import Dict, Tuple, Any


class TankShape(Enum):
    """Tank geometry family."""

    CYLINDRICAL = "cylindrical"
    RECTANGULAR = "rectangular"  # Accepted on import, analysed as cylindrical


class Orientation(Enum):
    """Nozzle discharge orientation."""

    RADIAL = "radial"
    TANGENTIAL = "tangential"
    UPWARD = "upward"
    DOWNWARD = "downward"
    OPPOSITE = "opposite"  # Outlet placed across the tank from the inlet
    UNKNOWN = "unknown"


class ConservatismLevel(Enum):
    """Named preset mapping to a default target inlet velocity."""

    LOW = "low"
    NORMAL = "normal"
    HIGH = "high"


class LengthScalePolicy(Enum):
    """Characteristic length used in the Richardson number."""

    NOZZLE = "nozzle"  # Jet stability
    DEPTH_QUARTER = "depth_quarter"  # Bulk stability
    TANK_HALF = "tank_half"  # Conservative


class Status(Enum):
    """Assessment severity. Ordered PASS < WARN < FAIL."""

    PASS = "PASS"
    WARN = "WARN"
    FAIL = "FAIL"

    @property
    def severity(self) -> int:
        return _SEVERITY_RANK[self]

    def escalate(self, other: "Status") -> "Status":
        """Return the worse of two statuses (never downgrades)."""
        return other if other.severity > self.severity else self


_SEVERITY_RANK = {Status.PASS: 0, Status.WARN: 1, Status.FAIL: 2}


def worst_status(*statuses: Status) -> Status:
    """Worst of any number of statuses; PASS when none are given."""
    worst = Status.PASS
    for status in statuses:
        worst = worst.escalate(status)
    return worst


class DominantRisk(Enum):
    """Single named mechanism driving a non-PASS verdict."""

    BUOYANCY = "buoyancy"
    SHORT_CIRCUIT = "short_circuit"
    INSUFFICIENT_MOMENTUM = "insufficient_momentum"
    NONE = "none"


class JetReach(Enum):
    """How far an inlet jet is expected to penetrate a stratified tank."""

    UPPER_LAYER_ONLY = "upper_layer_only"
    PARTIAL = "partial"
    BOTTOM = "bottom"


class RecommendationType(Enum):
    DESIGN = "design"
    OPERATION = "operation"


class Priority(Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


# Default target inlet velocity per conservatism preset [m/s]
CONSERVATISM_TARGET_VELOCITY: Dict[ConservatismLevel, float] = {
    ConservatismLevel.LOW: 0.6,
    ConservatismLevel.NORMAL: 0.8,
    ConservatismLevel.HIGH: 1.0,
}


@dataclass(frozen=True)
class Tank:
    """
    Tank geometry and storage allocation.

    Attributes:
        shape: Tank shape (only cylindrical is modelled)
        diameter_m: Internal diameter [m]
        water_depth_m: Operating water depth [m]
        operating_storage_kL: Operating storage volume [kL]
        reserve_unusable_kL: Reserve / unusable volume [kL]
    """

    shape: TankShape = TankShape.CYLINDRICAL
    diameter_m: float = 10.0
    water_depth_m: float = 5.0
    operating_storage_kL: float = 350.0
    reserve_unusable_kL: float = 40.0


@dataclass(frozen=True)
class Inlet:
    """
    Inlet nozzle arrangement.

    Flow is assumed to split evenly between ``count`` identical nozzles.
    ``inclination_deg`` is carried for completeness but not used in analysis.
    """

    count: int = 1
    elevation_from_floor_m: float = 0.5
    nozzle_diameter_mm: float = 150.0
    orientation: Orientation = Orientation.RADIAL
    inclination_deg: float = 0.0


@dataclass(frozen=True)
class Outlet:
    elevation_from_floor_m: float = 0.2
    orientation: Orientation = Orientation.OPPOSITE


@dataclass(frozen=True)
class Operation:
    """Fill regime. ``events_per_day`` is informational only."""

    inflow_Lps: float = 20.0
    fill_event_volume_kL: float = 100.0
    events_per_day: float = 1.0


@dataclass(frozen=True)
class Water:
    temperature_inflow_min_C: float = 15.0
    temperature_inflow_max_C: float = 18.0
    temperature_tank_initial_C: float = 22.0


@dataclass(frozen=True)
class Options:
    """
    Analysis thresholds and layout risk weights.

    Every threshold and weight is an independent, typed field so each can be
    overridden and tested on its own. Credits are subtracted from the layout
    score; risks are added.

    Attributes:
        target_mixed_fraction: Desired mixed fraction (not used by the engine)
        conservatism: Preset the target velocity was derived from
        ri_length_scale: Length-scale policy for the Richardson number
        target_velocity_m_s: Minimum inlet velocity for robust mixing [m/s]
        ri_threshold_warn: Ri above which buoyancy is significant
        ri_threshold_fail: Ri above which buoyancy overwhelms mixing
        tor_threshold_warn: Turnover ratio per fill below which to warn
        layout_score_warn: Layout score at or above which to warn
        layout_score_fail: Layout score at or above which to fail
    """

    target_mixed_fraction: float = 0.95
    conservatism: ConservatismLevel = ConservatismLevel.NORMAL
    ri_length_scale: LengthScalePolicy = LengthScalePolicy.DEPTH_QUARTER

    # Risk thresholds
    target_velocity_m_s: float = 0.8
    ri_threshold_warn: float = 1.0
    ri_threshold_fail: float = 5.0
    tor_threshold_warn: float = 0.3
    layout_score_warn: float = 30.0
    layout_score_fail: float = 65.0

    # Layout risk weights (added) and credits (subtracted)
    risk_vertical_proximity: float = 25.0
    risk_high_elevation: float = 35.0
    risk_orient_radial: float = 15.0
    risk_orient_upward: float = 5.0
    credit_orient_tangential: float = 10.0
    credit_orient_downward: float = 5.0
    credit_outlet_opposite: float = 5.0
    credit_multiple_inlets: float = 10.0

    def for_conservatism(self, level: ConservatismLevel) -> "Options":
        """Copy with ``level`` selected and its preset target velocity applied."""
        return replace(
            self,
            conservatism=level,
            target_velocity_m_s=CONSERVATISM_TARGET_VELOCITY[level],
        )


@dataclass(frozen=True)
class Scenario:
    """
    One design case: the sole input unit of the engine.

    Treated as immutable during evaluation.
    """

    id: str = "default-1"
    name: str = "Baseline Scenario"
    tank: Tank = field(default_factory=Tank)
    inlet: Inlet = field(default_factory=Inlet)
    outlet: Outlet = field(default_factory=Outlet)
    operation: Operation = field(default_factory=Operation)
    water: Water = field(default_factory=Water)
    options: Options = field(default_factory=Options)

    def with_(self, **sections: Any) -> "Scenario":
        """
        Copy with whole sections or individual section fields replaced.

        Keyword arguments either name a section (``tank=Tank(...)``) or a
        ``section__field`` pair (``inlet__nozzle_diameter_mm=300``).

        Example:
            >>> wide = Scenario().with_(inlet__nozzle_diameter_mm=300.0)
            >>> wide.inlet.nozzle_diameter_mm
            300.0
        """
        top_level: Dict[str, Any] = {}
        nested: Dict[str, Dict[str, Any]] = {}
        for key, value in sections.items():
            if "__" in key:
                section, attr = key.split("__", 1)
                nested.setdefault(section, {})[attr] = value
            else:
                top_level[key] = value

        for section, changes in nested.items():
            base = top_level.get(section, getattr(self, section))
            top_level[section] = replace(base, **changes)

        return replace(self, **top_level)


@dataclass(frozen=True)
class Metrics:
    """
    Numbers derived during one evaluation.

    ``delta_t`` duplicates ``delta_t_inlet_vs_tank`` for consumers that only
    know the short name. The ``ri_*`` and ``beta_per_C`` fields are the
    Richardson number's intermediate terms, kept for interpretability.
    """

    inlet_velocity_m_s: float
    froude_inlet: float
    richardson_number: float
    turnover_ratio: float
    jet_penetration_reach: JetReach
    horizontal_risk_score: float
    delta_t: float
    tank_volume_geom_m3: float
    tank_volume_total_effective_m3: float
    delta_t_inlet_vs_tank: float
    delta_t_inlet_range: float
    ri_numerator: float
    ri_denominator: float
    ri_length_scale_m: float
    beta_per_C: float


@dataclass(frozen=True)
class Recommendation:
    id: str
    type: RecommendationType
    message: str
    priority: Priority


@dataclass(frozen=True)
class Result:
    """Complete outcome of one scenario evaluation."""

    overall_status: Status
    vertical_status: Status
    horizontal_status: Status
    metrics: Metrics
    recommendations: Tuple[Recommendation, ...]
    validity_flags: Tuple[str, ...]
    dominant_risk: DominantRisk

    def to_dict(self) -> Dict[str, Any]:
        """
        Plain JSON-ready representation.

        Enums become their string values; a non-finite Richardson number is
        written as ``"inf"`` so the output stays strict JSON.
        """
        data = asdict(self)
        return _plain(data)


def _plain(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {key: _plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    if isinstance(value, float) and not math.isfinite(value):
        return "inf" if value > 0 else ("-inf" if value < 0 else "nan")
    return value
