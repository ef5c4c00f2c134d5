"""
Richardson Number Calculator
============================

Bulk Richardson number comparing inflow buoyancy with jet momentum:

   Ri = (g·β·ΔT·L) / u²

   Ri > 1: Buoyancy significant, stratification likely to persist
   Ri < 0.1: Jet momentum dominates, tank mixes

The characteristic length L is selected by policy:

- nozzle: nozzle diameter (jet stability)
- depth_quarter: 25% of water depth, clamped to [0.05, 2.0] m (bulk stability)
- tank_half: half of the smaller of diameter and depth (conservative)

L is floored at 0.05 m under every policy to avoid singularities.

EDGE CASES
==========

Evaluated in priority order:

1. u <= 1e-4 m/s: no momentum, Ri = +inf
2. |ΔT| < 0.01°C: isothermal, Ri = 0 (denominator still reported)
3. otherwise the formula above

A non-finite NaN result is reset to 0 and reported as a validity flag rather
than propagated downstream.

References:
- Turner "Buoyancy Effects in Fluids" (1973)
- Rossman & Grayman "Scale-Model Studies of Mixing in Drinking Water
  Storage Tanks" (1999)

License: MIT
"""

import logging
from dataclasses import dataclass
from typing import Tuple

import numpy as np

from .hydraulics import G_GRAVITY
from .models import LengthScalePolicy

logger = logging.getLogger(__name__)

# Length-scale bounds [m]
MIN_LENGTH_SCALE = 0.05
MAX_DEPTH_QUARTER_SCALE = 2.0

# Velocity below which the jet carries no usable momentum [m/s]
MIN_JET_VELOCITY = 1e-4

# Temperature difference below which the inflow is treated as isothermal [°C]
ISOTHERMAL_DELTA_T = 0.01

NAN_FLAG = "Error: Calculated Richardson number is NaN. Check input values."


@dataclass(frozen=True)
class RichardsonTerms:
    """
    Richardson number together with its intermediate terms.

    Attributes:
        value: Richardson number (may be +inf)
        numerator: g·β·ΔT·L [m²/s²]
        denominator: u² [m²/s²]
        length_scale_m: L actually used [m]
        beta_per_C: Expansion coefficient used [1/°C]
        flags: Advisory strings raised during the calculation
    """

    value: float
    numerator: float
    denominator: float
    length_scale_m: float
    beta_per_C: float
    flags: Tuple[str, ...] = ()


def select_length_scale(
    policy: LengthScalePolicy,
    nozzle_diameter_m: float,
    diameter_m: float,
    depth_m: float,
) -> float:
    """
    Characteristic length for the Richardson number [m].

    Example:
        >>> select_length_scale(LengthScalePolicy.DEPTH_QUARTER, 0.15, 10.0, 5.0)
        1.25
        >>> select_length_scale(LengthScalePolicy.NOZZLE, 0.01, 10.0, 5.0)
        0.05
    """
    if policy is LengthScalePolicy.DEPTH_QUARTER:
        length = float(
            np.clip(0.25 * depth_m, MIN_LENGTH_SCALE, MAX_DEPTH_QUARTER_SCALE)
        )
    elif policy is LengthScalePolicy.TANK_HALF:
        length = min(diameter_m, depth_m) / 2.0
    else:
        length = nozzle_diameter_m

    return max(length, MIN_LENGTH_SCALE)


def richardson_number(
    velocity: float, delta_t: float, length_scale: float, beta: float
) -> RichardsonTerms:
    """
    Compute the Richardson number with guarded edge cases.

    Args:
        velocity: Inlet jet velocity [m/s]
        delta_t: Worst-case inflow vs tank temperature difference [°C]
        length_scale: Characteristic length [m]
        beta: Thermal expansion coefficient [1/°C]

    Returns:
        RichardsonTerms with the value and its debug terms

    Example:
        >>> richardson_number(0.0, 5.0, 1.0, 2.1e-4).value
        inf
        >>> richardson_number(1.0, 0.0, 1.0, 2.1e-4).value
        0.0
    """
    flags: Tuple[str, ...] = ()
    numerator = 0.0
    denominator = 0.0

    if velocity <= MIN_JET_VELOCITY:
        value = float("inf")  # No momentum → buoyancy dominates
    elif abs(delta_t) < ISOTHERMAL_DELTA_T:
        with np.errstate(over="ignore"):
            denominator = np.square(np.float64(velocity))
        value = 0.0
    else:
        numerator = G_GRAVITY * beta * abs(delta_t) * length_scale
        # u² overflows to +inf for extreme flows, giving Ri = 0
        with np.errstate(over="ignore", invalid="ignore"):
            denominator = np.square(np.float64(velocity))
            value = numerator / denominator

    if np.isnan(value):
        logger.warning(
            "Richardson number is NaN (u=%r, dT=%r, L=%r); reset to 0",
            velocity,
            delta_t,
            length_scale,
        )
        value = 0.0
        flags = (NAN_FLAG,)

    return RichardsonTerms(
        value=float(value),
        numerator=float(numerator),
        denominator=float(denominator),
        length_scale_m=float(length_scale),
        beta_per_C=float(beta),
        flags=flags,
    )
