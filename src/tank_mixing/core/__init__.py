"""
Mixing Assessment Core Package
==============================

Closed-form heuristics for inlet/outlet mixing in cylindrical storage tanks.

This package provides:
- Hydraulics: nozzle area, jet velocity, Froude number, turnover ratio
- Richardson: length-scale policy and guarded Richardson number
- Vertical: ordered rule chain for buoyancy vs momentum
- Layout: weighted short-circuit risk score
- Assessment: full pipeline, aggregation and dominant risk

USAGE EXAMPLE
============

```python
from tank_mixing.core import analyze_scenario, Scenario

scenario = Scenario().with_(inlet__nozzle_diameter_mm=300.0)
result = analyze_scenario(scenario)

result.vertical_status        # Status.FAIL
result.dominant_risk          # DominantRisk.INSUFFICIENT_MOMENTUM
result.metrics.inlet_velocity_m_s
```

WHAT THIS PACKAGE DOES NOT DO:
- NO CFD or time-resolved stratification
- NO persistence, scenario management or rendering
- NO non-cylindrical geometry

License: MIT
"""

from .models import (
    CONSERVATISM_TARGET_VELOCITY,
    ConservatismLevel,
    DominantRisk,
    Inlet,
    JetReach,
    LengthScalePolicy,
    Metrics,
    Operation,
    Options,
    Orientation,
    Outlet,
    Priority,
    Recommendation,
    RecommendationType,
    Result,
    Scenario,
    Status,
    Tank,
    TankShape,
    Water,
    worst_status,
)

from .hydraulics import (
    G_GRAVITY,
    buoyancy_coefficient,
    froude_inlet,
    inlet_velocity,
    nozzle_area,
    nozzle_diameter_for_velocity,
    tank_volume_cyl,
    temperature_deltas,
    turnover_ratio,
)

from .richardson import RichardsonTerms, richardson_number, select_length_scale
from .vertical import VerticalAssessment, VerticalInputs, evaluate_vertical
from .layout import LayoutAssessment, score_layout
from .assessment import (
    analyze_scenario,
    analyze_scenarios,
    classify_dominant_risk,
    operating_point,
)

__all__ = [
    # Pipeline
    "analyze_scenario",
    "analyze_scenarios",
    "classify_dominant_risk",
    "operating_point",
    # Records
    "Scenario",
    "Tank",
    "Inlet",
    "Outlet",
    "Operation",
    "Water",
    "Options",
    "Metrics",
    "Recommendation",
    "Result",
    # Enumerations
    "TankShape",
    "Orientation",
    "ConservatismLevel",
    "LengthScalePolicy",
    "Status",
    "DominantRisk",
    "JetReach",
    "RecommendationType",
    "Priority",
    "CONSERVATISM_TARGET_VELOCITY",
    "worst_status",
    # Hydraulics
    "G_GRAVITY",
    "nozzle_area",
    "tank_volume_cyl",
    "inlet_velocity",
    "buoyancy_coefficient",
    "froude_inlet",
    "turnover_ratio",
    "nozzle_diameter_for_velocity",
    "temperature_deltas",
    # Richardson
    "RichardsonTerms",
    "richardson_number",
    "select_length_scale",
    # Vertical / layout
    "VerticalInputs",
    "VerticalAssessment",
    "evaluate_vertical",
    "LayoutAssessment",
    "score_layout",
]
