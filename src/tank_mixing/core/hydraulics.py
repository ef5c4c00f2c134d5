"""
Hydraulic Helper Formulas
=========================

Closed-form physical relations used by the mixing heuristics.

THEORETICAL FOUNDATION
=====================

1. Nozzle Area:
   A = π·(d/2)²

2. Cylindrical Tank Volume:
   V = (π/4)·D²·H

3. Inlet Jet Velocity (flow split evenly between nozzles):
   u = (Q/n) / A

4. Inlet Froude Number (inertial vs gravitational):
   Fr = u / sqrt(g·d)

5. Turnover Ratio (fraction of tank replaced per fill):
   TOR = V_fill / V_tank

6. Nozzle Diameter for a Target Velocity (orifice-area inverse):
   d = sqrt(4·(Q/n) / (π·u_target))

Every helper guards its divisor and returns 0 instead of raising, so a
degenerate design input still produces an assessment.

References:
- Fischer et al "Mixing in Inland and Coastal Waters" (1979)
- AWWA "Water Storage Tank Mixing" design guidance

License: MIT
"""

from typing import Tuple

import numpy as np

from .models import Water


# Physical constants
G_GRAVITY = 9.81  # [m/s²]

# Thermal expansion coefficient of fresh water near 20°C
THERMAL_EXPANSION_COEFF = 2.1e-4  # [1/°C]


def nozzle_area(diameter_mm: float) -> float:
    """
    Cross-sectional area of a circular nozzle.

    Args:
        diameter_mm: Nozzle diameter [mm]

    Returns:
        Area [m²] (0 for a zero diameter)

    Example:
        >>> round(nozzle_area(150.0), 5)
        0.01767
    """
    d_m = np.float64(diameter_mm) / 1000.0
    with np.errstate(over="ignore"):
        return float(np.pi * np.square(d_m / 2.0))


def tank_volume_cyl(diameter_m: float, depth_m: float) -> float:
    """Geometric volume of a cylindrical tank [m³]; +inf on overflow."""
    with np.errstate(over="ignore", invalid="ignore"):
        return float(np.pi * np.square(np.float64(diameter_m)) / 4.0 * depth_m)


def inlet_velocity(flow_Lps: float, area_m2: float, count: int) -> float:
    """
    Mean jet velocity at each inlet nozzle.

    Args:
        flow_Lps: Total inflow [L/s]
        area_m2: Area of one nozzle [m²]
        count: Number of identical inlets

    Returns:
        Velocity [m/s], or 0 when area or count is non-positive
    """
    if area_m2 <= 0 or count <= 0:
        return 0.0

    flow_m3s = flow_Lps / 1000.0
    flow_per_inlet = flow_m3s / count
    return flow_per_inlet / area_m2


def buoyancy_coefficient(temp_c: float) -> float:
    """
    Volumetric thermal expansion coefficient β [1/°C].

    Returns a constant fresh-water value at ~20°C regardless of ``temp_c``.
    A temperature-dependent model would replace this placeholder.
    """
    return THERMAL_EXPANSION_COEFF


def froude_inlet(velocity: float, nozzle_diameter_m: float) -> float:
    """Inlet Froude number u/sqrt(g·d); 0 if d <= 0."""
    if nozzle_diameter_m <= 0:
        return 0.0
    return float(velocity / np.sqrt(G_GRAVITY * nozzle_diameter_m))


def turnover_ratio(fill_volume: float, tank_volume: float) -> float:
    """Fraction of the tank replaced by one fill event; 0 if tank volume <= 0."""
    if tank_volume <= 0:
        return 0.0
    return fill_volume / tank_volume


def nozzle_diameter_for_velocity(
    flow_Lps: float, count: int, target_velocity: float
) -> float:
    """
    Nozzle diameter that yields exactly ``target_velocity``.

    Inverts the orifice-area relation with the flow split over at least
    one inlet.

    Args:
        flow_Lps: Total inflow [L/s]
        count: Number of inlets (values below 1 are treated as 1)
        target_velocity: Desired jet velocity [m/s]

    Returns:
        Diameter [m], or 0 for a non-positive target

    Example:
        >>> d = nozzle_diameter_for_velocity(20.0, 1, 0.8)
        >>> round(d * 1000)
        178
    """
    if target_velocity <= 0:
        return 0.0

    q_m3s = flow_Lps / 1000.0
    q_per_inlet = q_m3s / max(1, count)
    return float(np.sqrt((4.0 * q_per_inlet) / (np.pi * target_velocity)))


def temperature_deltas(water: Water) -> Tuple[float, float]:
    """
    Temperature differences driving buoyancy.

    Returns:
        (worst-case |T_inflow - T_tank| over the inflow range,
         width of the inflow temperature range) [°C]
    """
    dt_range = abs(water.temperature_inflow_max_C - water.temperature_inflow_min_C)
    dt_max = abs(water.temperature_inflow_max_C - water.temperature_tank_initial_C)
    dt_min = abs(water.temperature_inflow_min_C - water.temperature_tank_initial_C)
    return max(dt_max, dt_min), dt_range
