"""
Scenario Assessment Pipeline
============================

Runs one Scenario through the full heuristic chain:

   Scenario → hydraulics → Richardson → vertical rules → layout score
            → aggregation / dominant risk → Result

AGGREGATION
===========

Overall status is the worse of the vertical and horizontal statuses.

Dominant risk (only when overall is not PASS):
- vertical WARN/FAIL: insufficient_momentum if u < 50% target,
  else buoyancy if Ri > warn threshold, else insufficient_momentum
- vertical PASS (horizontal is not): short_circuit

ERROR POLICY
============

Evaluation never raises for well-typed numeric input. Inconsistent or
degenerate inputs are reported in ``Result.validity_flags`` or as
high-priority recommendations; the caller decides how to present them.

Every call is a pure function of its argument. Scenarios may be evaluated
concurrently without coordination.

License: MIT
"""

import logging
from typing import Iterable, List, Tuple

from .hydraulics import (
    buoyancy_coefficient,
    froude_inlet,
    inlet_velocity,
    nozzle_area,
    tank_volume_cyl,
    temperature_deltas,
    turnover_ratio,
)
from .layout import score_layout
from .models import (
    DominantRisk,
    Metrics,
    Result,
    Scenario,
    Status,
    TankShape,
    Tank,
    worst_status,
)
from .recommendations import (
    design_recommendations,
    geometry_recommendations,
    layout_recommendations,
)
from .richardson import richardson_number, select_length_scale
from .vertical import MOMENTUM_FAIL_FRACTION, VerticalInputs, evaluate_vertical

logger = logging.getLogger(__name__)

BASELINE_FLAGS = (
    "Tier-1 heuristics; not CFD",
    "Cylindrical tank model",
    "Assumes reserve volume participates in mixing",
    "Simplified thermal stratification",
)

# Relative tolerance before specified storage is reported as exceeding geometry
VOLUME_TOLERANCE = 0.01


def classify_dominant_risk(
    overall: Status,
    vertical: Status,
    velocity: float,
    target_velocity: float,
    richardson: float,
    ri_threshold_warn: float,
) -> DominantRisk:
    """Name the single mechanism behind a non-PASS verdict."""
    if overall is Status.PASS:
        return DominantRisk.NONE

    if vertical is not Status.PASS:
        if velocity < MOMENTUM_FAIL_FRACTION * target_velocity:
            return DominantRisk.INSUFFICIENT_MOMENTUM
        if richardson > ri_threshold_warn:
            return DominantRisk.BUOYANCY
        return DominantRisk.INSUFFICIENT_MOMENTUM

    return DominantRisk.SHORT_CIRCUIT


def _storage_volumes(tank: Tank, flags: List[str]) -> Tuple[float, float, float]:
    """
    Geometric, effective and turnover-basis volumes [m³].

    Appends advisory flags for inconsistent storage figures.
    """
    v_geom = tank_volume_cyl(tank.diameter_m, tank.water_depth_m)

    v_oper = max(0.0, tank.operating_storage_kL)
    v_reserve = max(0.0, tank.reserve_unusable_kL)
    v_eff = v_oper + v_reserve

    if v_eff > v_geom * (1.0 + VOLUME_TOLERANCE):
        logger.warning(
            "Specified storage %.0f m³ exceeds geometric capacity %.0f m³",
            v_eff,
            v_geom,
        )
        flags.append(
            f"Warning: Specified volumes ({v_eff:.0f}m³) exceed geometric "
            f"capacity ({v_geom:.0f}m³)."
        )

    if v_eff > 0:
        v_turnover = v_eff
    else:
        v_turnover = v_geom
        flags.append(
            "Warning: No operating/reserve storage defined. Using geometric "
            "volume for turnover metrics."
        )

    return v_geom, v_eff, v_turnover


def analyze_scenario(scenario: Scenario) -> Result:
    """
    Evaluate mixing risk for one scenario.

    Args:
        scenario: Immutable design case

    Returns:
        Result with statuses, dominant risk, metrics, recommendations and
        validity flags

    Example:
        >>> from tank_mixing.scenarios import create_default_scenario
        >>> result = analyze_scenario(create_default_scenario())
        >>> round(result.metrics.inlet_velocity_m_s, 2)
        1.13
    """
    tank, inlet, outlet = scenario.tank, scenario.inlet, scenario.outlet
    operation, water, options = scenario.operation, scenario.water, scenario.options

    flags: List[str] = list(BASELINE_FLAGS)
    if tank.shape is not TankShape.CYLINDRICAL:
        flags.append(
            f"Warning: Tank shape '{tank.shape.value}' is not modelled; "
            "cylindrical geometry was assumed."
        )

    # --- Volumes ---
    v_geom, v_eff, v_turnover = _storage_volumes(tank, flags)

    # --- Hydraulics & thermal ---
    d_nozzle_m = inlet.nozzle_diameter_mm / 1000.0
    area = nozzle_area(inlet.nozzle_diameter_mm)
    velocity = inlet_velocity(operation.inflow_Lps, area, inlet.count)

    tor = turnover_ratio(operation.fill_event_volume_kL, v_turnover)
    froude = froude_inlet(velocity, d_nozzle_m)
    dt_vs_tank, dt_range = temperature_deltas(water)
    beta = buoyancy_coefficient(water.temperature_tank_initial_C)

    # --- Richardson ---
    length_scale = select_length_scale(
        options.ri_length_scale, d_nozzle_m, tank.diameter_m, tank.water_depth_m
    )
    ri = richardson_number(velocity, dt_vs_tank, length_scale, beta)
    flags.extend(ri.flags)

    # --- Vertical ---
    vertical = evaluate_vertical(
        VerticalInputs(
            velocity=velocity,
            richardson=ri.value,
            delta_t=dt_vs_tank,
            turnover=tor,
            inlet_elevation_m=inlet.elevation_from_floor_m,
            water_depth_m=tank.water_depth_m,
            options=options,
        )
    )

    # --- Horizontal ---
    layout = score_layout(inlet, outlet, tank.water_depth_m, options)

    # --- Aggregation ---
    overall = worst_status(vertical.status, layout.status)
    dominant = classify_dominant_risk(
        overall,
        vertical.status,
        velocity,
        options.target_velocity_m_s,
        ri.value,
        options.ri_threshold_warn,
    )

    recommendations = (
        geometry_recommendations(scenario)
        + list(vertical.recommendations)
        + layout_recommendations(layout)
        + design_recommendations(scenario, velocity, vertical.status)
    )

    metrics = Metrics(
        inlet_velocity_m_s=velocity,
        froude_inlet=froude,
        richardson_number=ri.value,
        turnover_ratio=tor,
        jet_penetration_reach=vertical.jet_penetration_reach,
        horizontal_risk_score=layout.score,
        delta_t=dt_vs_tank,
        tank_volume_geom_m3=v_geom,
        tank_volume_total_effective_m3=v_eff,
        delta_t_inlet_vs_tank=dt_vs_tank,
        delta_t_inlet_range=dt_range,
        ri_numerator=ri.numerator,
        ri_denominator=ri.denominator,
        ri_length_scale_m=ri.length_scale_m,
        beta_per_C=ri.beta_per_C,
    )

    logger.debug(
        "Scenario %s: u=%.3f m/s Ri=%.3g TOR=%.2f layout=%.0f → %s (%s)",
        scenario.id,
        velocity,
        ri.value,
        tor,
        layout.score,
        overall.value,
        dominant.value,
    )

    return Result(
        overall_status=overall,
        vertical_status=vertical.status,
        horizontal_status=layout.status,
        metrics=metrics,
        recommendations=tuple(recommendations),
        validity_flags=tuple(flags),
        dominant_risk=dominant,
    )


def analyze_scenarios(scenarios: Iterable[Scenario]) -> List[Result]:
    """Evaluate each scenario independently, preserving order."""
    return [analyze_scenario(scenario) for scenario in scenarios]


def operating_point(result: Result) -> Tuple[float, float, Status]:
    """(Richardson number, inlet velocity, overall status) for charting."""
    return (
        result.metrics.richardson_number,
        result.metrics.inlet_velocity_m_s,
        result.overall_status,
    )
