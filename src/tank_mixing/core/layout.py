"""
Horizontal Layout Risk Scorer
=============================

Additive risk score for short-circuiting and poor horizontal circulation.

   score = Σ risks - Σ credits, clamped to [0, 100]

Risks (added):
- vertical proximity: |z_in - z_out| < 15% of depth (short-circuit path)
- high elevation: inlet and outlet both above 60% of depth
- radial or upward inlet discharge

Credits (subtracted):
- tangential or downward inlet discharge
- outlet opposite the inlet
- two or more inlets

Every weight and threshold comes from Options.

License: MIT
"""

from dataclasses import dataclass

import numpy as np

from .models import Inlet, Options, Orientation, Outlet, Status

PROXIMITY_FRACTION = 0.15
HIGH_ELEVATION_FRACTION = 0.6

SCORE_MIN = 0.0
SCORE_MAX = 100.0


@dataclass(frozen=True)
class LayoutAssessment:
    """
    Attributes:
        score: Clamped layout risk score [0-100]
        status: Severity from the score thresholds
        short_circuit_proximity: Inlet and outlet are vertically close
    """

    score: float
    status: Status
    short_circuit_proximity: bool


def vertically_close(inlet: Inlet, outlet: Outlet, depth_m: float) -> bool:
    separation = abs(inlet.elevation_from_floor_m - outlet.elevation_from_floor_m)
    return separation < PROXIMITY_FRACTION * depth_m


def layout_status(score: float, options: Options) -> Status:
    if score >= options.layout_score_fail:
        return Status.FAIL
    if score >= options.layout_score_warn:
        return Status.WARN
    return Status.PASS


def score_layout(
    inlet: Inlet, outlet: Outlet, depth_m: float, options: Options
) -> LayoutAssessment:
    """
    Score the inlet/outlet layout.

    Args:
        inlet: Inlet arrangement
        outlet: Outlet arrangement
        depth_m: Water depth [m]
        options: Weights, credits and score thresholds

    Returns:
        LayoutAssessment
    """
    score = 0.0
    proximity = vertically_close(inlet, outlet, depth_m)

    if proximity:
        score += options.risk_vertical_proximity

    high_level = HIGH_ELEVATION_FRACTION * depth_m
    if (
        inlet.elevation_from_floor_m > high_level
        and outlet.elevation_from_floor_m > high_level
    ):
        score += options.risk_high_elevation

    if inlet.orientation is Orientation.RADIAL:
        score += options.risk_orient_radial
    elif inlet.orientation is Orientation.TANGENTIAL:
        score -= options.credit_orient_tangential
    elif inlet.orientation is Orientation.UPWARD:
        score += options.risk_orient_upward
    elif inlet.orientation is Orientation.DOWNWARD:
        score -= options.credit_orient_downward

    if outlet.orientation is Orientation.OPPOSITE:
        score -= options.credit_outlet_opposite
    if inlet.count >= 2:
        score -= options.credit_multiple_inlets

    # inf - inf from extreme weights
    if np.isnan(score):
        score = SCORE_MIN
    score = float(np.clip(score, SCORE_MIN, SCORE_MAX))

    return LayoutAssessment(
        score=score,
        status=layout_status(score, options),
        short_circuit_proximity=proximity,
    )
