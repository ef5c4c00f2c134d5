"""
Recommendation Generator
========================

Actionable design suggestions derived from the assessment. These rules are
independent of the status chains: a nozzle-size suggestion fires whenever
the jet is below target, whether or not a status message was emitted.

Emission order of the full recommendation list:

1. Input geometry checks (elevations above the water surface)
2. Vertical evaluator messages
3. Layout messages (when the layout is not PASS)
4. Nozzle resizing (velocity below target)
5. Inlet lowering (inlet above bottom quarter and vertical not PASS)

License: MIT
"""

from typing import List

from .hydraulics import nozzle_diameter_for_velocity
from .layout import LayoutAssessment
from .models import (
    Priority,
    Recommendation,
    RecommendationType,
    Scenario,
    Status,
)

BOTTOM_QUARTER_FRACTION = 0.25


def geometry_recommendations(scenario: Scenario) -> List[Recommendation]:
    """Flag nozzle elevations that sit above the water surface."""
    depth = scenario.tank.water_depth_m
    recs = []

    if scenario.inlet.elevation_from_floor_m > depth:
        recs.append(
            Recommendation(
                id="err-in-elev",
                type=RecommendationType.DESIGN,
                priority=Priority.HIGH,
                message="Inlet elevation is higher than water depth.",
            )
        )
    if scenario.outlet.elevation_from_floor_m > depth:
        recs.append(
            Recommendation(
                id="err-out-elev",
                type=RecommendationType.DESIGN,
                priority=Priority.HIGH,
                message="Outlet elevation is higher than water depth.",
            )
        )
    return recs


def layout_recommendations(layout: LayoutAssessment) -> List[Recommendation]:
    """Mirror the layout scorer's triggers as suggestions."""
    if layout.status is Status.PASS:
        return []

    advice = (
        " Consider baffling or reorienting nozzles."
        if layout.status is Status.FAIL
        else ""
    )
    recs = [
        Recommendation(
            id="horiz-main",
            type=RecommendationType.DESIGN,
            priority=Priority.MEDIUM,
            message=f"Horizontal layout risk score is {layout.score:g}/100.{advice}",
        )
    ]
    if layout.short_circuit_proximity:
        recs.append(
            Recommendation(
                id="horiz-prox",
                type=RecommendationType.DESIGN,
                priority=Priority.HIGH,
                message=(
                    "Inlet and Outlet are vertically close. Risk of "
                    "short-circuiting."
                ),
            )
        )
    return recs


def design_recommendations(
    scenario: Scenario, velocity: float, vertical_status: Status
) -> List[Recommendation]:
    """
    Nozzle-size and inlet-elevation suggestions.

    Args:
        scenario: Scenario under evaluation
        velocity: Computed inlet velocity [m/s]
        vertical_status: Outcome of the vertical evaluator

    Returns:
        Suggestions in emission order
    """
    target = scenario.options.target_velocity_m_s
    depth = scenario.tank.water_depth_m
    recs = []

    if velocity < target:
        d_m = nozzle_diameter_for_velocity(
            scenario.operation.inflow_Lps, scenario.inlet.count, target
        )
        recs.append(
            Recommendation(
                id="rec-nozzle",
                type=RecommendationType.DESIGN,
                priority=Priority.HIGH,
                message=(
                    f"To achieve {target:g} m/s, reduce nozzle diameter to "
                    f"~{d_m * 1000:.0f}mm."
                ),
            )
        )

    bottom_quarter = BOTTOM_QUARTER_FRACTION * depth
    if (
        scenario.inlet.elevation_from_floor_m > bottom_quarter
        and vertical_status is not Status.PASS
    ):
        recs.append(
            Recommendation(
                id="rec-elev",
                type=RecommendationType.DESIGN,
                priority=Priority.HIGH,
                message=f"Lower inlet to bottom quarter (<= {bottom_quarter:.1f}m).",
            )
        )
    return recs
