"""
Vertical Mixing Evaluator
=========================

Decides whether inlet momentum can overcome buoyancy and turn the tank over
vertically.

RULE CHAIN
==========

Rules run in a fixed order and fold into a single severity that can only
rise (PASS < WARN < FAIL):

1. Momentum:    u < 50% target → FAIL;  u < target → WARN
2. Penetration: stable stratification likely (ΔT >= 2°C and Ri > warn) with
                the inlet in the upper half of the water column → FAIL
3. Richardson:  Ri > fail → FAIL;  Ri > warn → WARN   (skipped once FAIL)
4. Turnover:    TOR < warn threshold → at least WARN (skipped once FAIL)

The penetration rule runs before the Richardson rule, so when both hold the
stratification message is emitted first.

Jet penetration reach is reported independently of the status chain:

- upper_layer_only: inlet above 50% of depth in a stratified tank
- partial:          inlet above 25% of depth in a stratified tank
- bottom:           otherwise

License: MIT
"""

from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from .models import (
    JetReach,
    Options,
    Priority,
    Recommendation,
    RecommendationType,
    Status,
)

# Fractions of the target velocity separating FAIL / WARN / PASS
MOMENTUM_FAIL_FRACTION = 0.5

# Minimum temperature difference for stratification to persist [°C]
STRATIFICATION_DELTA_T = 2.0

# Inlet elevation fractions of water depth for jet reach classes
UPPER_LAYER_FRACTION = 0.5
PARTIAL_LAYER_FRACTION = 0.25


@dataclass(frozen=True)
class VerticalInputs:
    """Quantities the vertical rules need, already derived by the pipeline."""

    velocity: float  # [m/s]
    richardson: float
    delta_t: float  # [°C] worst-case inflow vs tank
    turnover: float
    inlet_elevation_m: float
    water_depth_m: float
    options: Options

    @property
    def target_velocity(self) -> float:
        return self.options.target_velocity_m_s


@dataclass(frozen=True)
class RuleOutcome:
    status: Status
    recommendation: Recommendation


@dataclass(frozen=True)
class VerticalAssessment:
    status: Status
    jet_penetration_reach: JetReach
    recommendations: Tuple[Recommendation, ...]


# A rule sees the inputs and the severity reached so far
VerticalRule = Callable[[VerticalInputs, Status], Optional[RuleOutcome]]


def stable_stratification_likely(inputs: VerticalInputs) -> bool:
    return (
        inputs.delta_t >= STRATIFICATION_DELTA_T
        and inputs.richardson > inputs.options.ri_threshold_warn
    )


def jet_penetration_reach(inputs: VerticalInputs) -> JetReach:
    """Classify how deep the inlet jet reaches into a stratified tank."""
    if not stable_stratification_likely(inputs):
        return JetReach.BOTTOM

    depth = inputs.water_depth_m
    if inputs.inlet_elevation_m > UPPER_LAYER_FRACTION * depth:
        return JetReach.UPPER_LAYER_ONLY
    if inputs.inlet_elevation_m > PARTIAL_LAYER_FRACTION * depth:
        return JetReach.PARTIAL
    return JetReach.BOTTOM


def momentum_rule(inputs: VerticalInputs, current: Status) -> Optional[RuleOutcome]:
    velocity = inputs.velocity
    target = inputs.target_velocity

    if velocity < MOMENTUM_FAIL_FRACTION * target:
        return RuleOutcome(
            Status.FAIL,
            Recommendation(
                id="vert-mom-fail",
                type=RecommendationType.DESIGN,
                priority=Priority.HIGH,
                message=(
                    f"Inlet momentum is critically low ({velocity:.2f} m/s). "
                    "Jet likely collapses immediately."
                ),
            ),
        )
    if velocity < target:
        return RuleOutcome(
            Status.WARN,
            Recommendation(
                id="vert-mom-warn",
                type=RecommendationType.DESIGN,
                priority=Priority.MEDIUM,
                message=(
                    f"Inlet velocity ({velocity:.2f} m/s) is below recommended "
                    f"target ({target:g} m/s) for robust mixing."
                ),
            ),
        )
    return None


def penetration_rule(
    inputs: VerticalInputs, current: Status
) -> Optional[RuleOutcome]:
    if current is Status.FAIL:
        return None
    if jet_penetration_reach(inputs) is not JetReach.UPPER_LAYER_ONLY:
        return None

    return RuleOutcome(
        Status.FAIL,
        Recommendation(
            id="vert-strat-fail",
            type=RecommendationType.DESIGN,
            priority=Priority.HIGH,
            message=(
                "High inlet elevation with temperature difference risks "
                "buoyant stratification."
            ),
        ),
    )


def richardson_rule(inputs: VerticalInputs, current: Status) -> Optional[RuleOutcome]:
    if current is Status.FAIL:
        return None

    ri = inputs.richardson
    options = inputs.options

    if ri > options.ri_threshold_fail:
        shown = ">100" if ri > 100 else f"{ri:.1f}"
        return RuleOutcome(
            Status.FAIL,
            Recommendation(
                id="vert-ri-fail",
                type=RecommendationType.OPERATION,
                priority=Priority.HIGH,
                message=(
                    f"Richardson number is very high ({shown} > "
                    f"{options.ri_threshold_fail:g}). Buoyancy forces overwhelm "
                    "mixing."
                ),
            ),
        )
    if ri > options.ri_threshold_warn:
        return RuleOutcome(
            Status.WARN,
            Recommendation(
                id="vert-ri-warn",
                type=RecommendationType.OPERATION,
                priority=Priority.MEDIUM,
                message=(
                    f"Richardson number > {options.ri_threshold_warn:g} "
                    f"({ri:.2f}) indicates buoyancy forces are significant."
                ),
            ),
        )
    return None


def turnover_rule(inputs: VerticalInputs, current: Status) -> Optional[RuleOutcome]:
    threshold = inputs.options.tor_threshold_warn
    if current is Status.FAIL or inputs.turnover >= threshold:
        return None

    return RuleOutcome(
        Status.WARN,
        Recommendation(
            id="vert-tor",
            type=RecommendationType.OPERATION,
            priority=Priority.LOW,
            message=(
                f"Turnover ratio per fill is low ({inputs.turnover * 100:.1f}% < "
                f"{threshold * 100:.0f}%)."
            ),
        ),
    )


VERTICAL_RULES: Tuple[VerticalRule, ...] = (
    momentum_rule,
    penetration_rule,
    richardson_rule,
    turnover_rule,
)


def evaluate_vertical(
    inputs: VerticalInputs, rules: Tuple[VerticalRule, ...] = VERTICAL_RULES
) -> VerticalAssessment:
    """
    Fold the ordered rule chain into a vertical mixing verdict.

    Each rule may contribute a severity and a message; the running severity
    is the maximum seen so far, so no rule can downgrade an earlier one.

    Args:
        inputs: Derived hydraulic and thermal quantities
        rules: Ordered rule sequence

    Returns:
        VerticalAssessment with status, jet reach and emitted messages
    """
    status = Status.PASS
    messages: List[Recommendation] = []

    for rule in rules:
        outcome = rule(inputs, status)
        if outcome is None:
            continue
        status = status.escalate(outcome.status)
        messages.append(outcome.recommendation)

    return VerticalAssessment(
        status=status,
        jet_penetration_reach=jet_penetration_reach(inputs),
        recommendations=tuple(messages),
    )
