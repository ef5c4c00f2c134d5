"""
Physical sanity checks run through the full assessment pipeline.

Each check perturbs the baseline scenario, evaluates both variants and
asserts the expected monotonic relationship. The detail string reports the
before/after values when a check fails.
"""

import pytest

from tank_mixing.core import LengthScalePolicy, analyze_scenario


def check_nozzle_diameter_reduces_velocity(base):
    wide = base.with_(inlet__nozzle_diameter_mm=300.0)
    r_base, r_wide = analyze_scenario(base), analyze_scenario(wide)
    v0 = r_base.metrics.inlet_velocity_m_s
    v1 = r_wide.metrics.inlet_velocity_m_s
    detail = (
        f"{base.inlet.nozzle_diameter_mm:g}mm ({v0:.2f} m/s) -> "
        f"{wide.inlet.nozzle_diameter_mm:g}mm ({v1:.2f} m/s)"
    )
    return v1 < v0, detail


def check_delta_t_increases_ri(base):
    colder = base.with_(water__temperature_inflow_min_C=10.0)
    m0 = analyze_scenario(base).metrics
    m1 = analyze_scenario(colder).metrics
    detail = (
        f"dT={m0.delta_t_inlet_vs_tank:.1f} (Ri={m0.richardson_number:.2e}) -> "
        f"dT={m1.delta_t_inlet_vs_tank:.1f} (Ri={m1.richardson_number:.2e})"
    )
    return m1.richardson_number > m0.richardson_number, detail


def check_length_scale_increases_ri(base):
    large = base.with_(tank__diameter_m=20.0, tank__water_depth_m=20.0)
    nozzle = large.with_(options__ri_length_scale=LengthScalePolicy.NOZZLE)
    tank = large.with_(options__ri_length_scale=LengthScalePolicy.TANK_HALF)
    m0 = analyze_scenario(nozzle).metrics
    m1 = analyze_scenario(tank).metrics
    detail = (
        f"L={m0.ri_length_scale_m:.2f}m (Ri={m0.richardson_number:.2e}) -> "
        f"L={m1.ri_length_scale_m:.2f}m (Ri={m1.richardson_number:.2e})"
    )
    return m1.richardson_number > m0.richardson_number, detail


SANITY_CHECKS = [
    ("Increase Nozzle Diam -> Reduce Velocity", check_nozzle_diameter_reduces_velocity),
    ("Increase DeltaT -> Increase Ri", check_delta_t_increases_ri),
    ("Increase Length Scale -> Increase Ri", check_length_scale_increases_ri),
]


@pytest.mark.parametrize(
    "name,check", SANITY_CHECKS, ids=[name for name, _ in SANITY_CHECKS]
)
def test_sanity_check(baseline, name, check):
    passed, detail = check(baseline)
    assert passed, f"{name}: {detail}"


def test_length_scale_check_uses_expected_scales(baseline):
    _, detail = check_length_scale_increases_ri(baseline)
    assert detail.startswith("L=0.15m")
    assert "L=10.00m" in detail


@pytest.mark.parametrize("flow_Lps", [5.0, 20.0, 80.0])
def test_velocity_strictly_decreases_with_nozzle_diameter(baseline, flow_Lps):
    velocities = [
        analyze_scenario(
            baseline.with_(inlet__nozzle_diameter_mm=d, operation__inflow_Lps=flow_Lps)
        ).metrics.inlet_velocity_m_s
        for d in (50.0, 100.0, 150.0, 250.0, 400.0)
    ]
    assert all(a > b for a, b in zip(velocities, velocities[1:]))


def test_ri_strictly_increases_with_delta_t(baseline):
    values = [
        analyze_scenario(
            baseline.with_(
                water__temperature_inflow_min_C=22.0 - dt,
                water__temperature_inflow_max_C=22.0 - dt,
            )
        ).metrics.richardson_number
        for dt in (0.5, 2.0, 5.0, 10.0, 15.0)
    ]
    assert all(a < b for a, b in zip(values, values[1:]))


def test_ri_strictly_increases_with_length_scale(baseline):
    # Same velocity and dT; nozzle (0.15 m) < depth_quarter (1.25 m) < tank_half (2.5 m)
    values = [
        analyze_scenario(
            baseline.with_(options__ri_length_scale=policy)
        ).metrics.richardson_number
        for policy in (
            LengthScalePolicy.NOZZLE,
            LengthScalePolicy.DEPTH_QUARTER,
            LengthScalePolicy.TANK_HALF,
        )
    ]
    assert all(a < b for a, b in zip(values, values[1:]))
