from tank_mixing.core import (
    JetReach,
    Options,
    Priority,
    Recommendation,
    RecommendationType,
    Status,
    evaluate_vertical,
)
from tank_mixing.core.vertical import RuleOutcome, jet_penetration_reach


def ids(assessment):
    return [rec.id for rec in assessment.recommendations]


def test_all_rules_pass(vertical_inputs):
    result = evaluate_vertical(vertical_inputs())
    assert result.status is Status.PASS
    assert result.jet_penetration_reach is JetReach.BOTTOM
    assert result.recommendations == ()


def test_momentum_below_half_target_fails(vertical_inputs):
    result = evaluate_vertical(vertical_inputs(velocity=0.3))
    assert result.status is Status.FAIL
    assert ids(result) == ["vert-mom-fail"]
    assert "0.30 m/s" in result.recommendations[0].message


def test_momentum_below_target_warns(vertical_inputs):
    result = evaluate_vertical(vertical_inputs(velocity=0.6))
    assert result.status is Status.WARN
    assert ids(result) == ["vert-mom-warn"]
    assert "target (0.8 m/s)" in result.recommendations[0].message


def test_penetration_escalates_from_warn_to_fail(vertical_inputs):
    inputs = vertical_inputs(
        velocity=0.6, richardson=2.0, delta_t=5.0, inlet_elevation_m=4.0
    )
    result = evaluate_vertical(inputs)

    assert result.status is Status.FAIL
    assert result.jet_penetration_reach is JetReach.UPPER_LAYER_ONLY
    # Richardson rule is skipped once the stratification rule has failed
    assert ids(result) == ["vert-mom-warn", "vert-strat-fail"]


def test_penetration_message_precedes_richardson(vertical_inputs):
    inputs = vertical_inputs(richardson=10.0, delta_t=5.0, inlet_elevation_m=4.0)
    result = evaluate_vertical(inputs)
    assert result.status is Status.FAIL
    assert ids(result) == ["vert-strat-fail"]


def test_partial_reach_does_not_fail(vertical_inputs):
    inputs = vertical_inputs(richardson=2.0, delta_t=5.0, inlet_elevation_m=2.0)
    result = evaluate_vertical(inputs)
    assert result.jet_penetration_reach is JetReach.PARTIAL
    assert result.status is Status.WARN
    assert ids(result) == ["vert-ri-warn"]


def test_small_delta_t_is_not_stratified(vertical_inputs):
    inputs = vertical_inputs(richardson=2.0, delta_t=1.5, inlet_elevation_m=4.0)
    assert jet_penetration_reach(inputs) is JetReach.BOTTOM
    assert evaluate_vertical(inputs).status is Status.WARN


def test_reach_reported_even_when_momentum_failed(vertical_inputs):
    inputs = vertical_inputs(
        velocity=0.1, richardson=50.0, delta_t=5.0, inlet_elevation_m=4.0
    )
    result = evaluate_vertical(inputs)
    assert result.status is Status.FAIL
    assert result.jet_penetration_reach is JetReach.UPPER_LAYER_ONLY
    assert ids(result) == ["vert-mom-fail"]


def test_richardson_above_fail_threshold(vertical_inputs):
    result = evaluate_vertical(vertical_inputs(richardson=6.0))
    assert result.status is Status.FAIL
    assert ids(result) == ["vert-ri-fail"]
    assert "(6.0 > 5)" in result.recommendations[0].message


def test_infinite_richardson_message(vertical_inputs):
    result = evaluate_vertical(vertical_inputs(richardson=float("inf")))
    assert result.status is Status.FAIL
    assert ">100" in result.recommendations[0].message


def test_richardson_warn_keeps_existing_warn(vertical_inputs):
    result = evaluate_vertical(vertical_inputs(velocity=0.6, richardson=2.0))
    assert result.status is Status.WARN
    assert ids(result) == ["vert-mom-warn", "vert-ri-warn"]


def test_low_turnover_warns_from_pass(vertical_inputs):
    result = evaluate_vertical(vertical_inputs(turnover=0.1))
    assert result.status is Status.WARN
    assert ids(result) == ["vert-tor"]
    assert "10.0% < 30%" in result.recommendations[0].message


def test_low_turnover_never_overrides_fail(vertical_inputs):
    result = evaluate_vertical(vertical_inputs(velocity=0.3, turnover=0.1))
    assert result.status is Status.FAIL
    assert ids(result) == ["vert-mom-fail"]


def test_custom_thresholds(vertical_inputs):
    options = Options(ri_threshold_warn=0.5, ri_threshold_fail=0.8)
    result = evaluate_vertical(vertical_inputs(richardson=0.9, options=options))
    assert result.status is Status.FAIL


def test_fold_never_downgrades(vertical_inputs):
    def rec(rec_id):
        return Recommendation(
            id=rec_id,
            type=RecommendationType.DESIGN,
            message=rec_id,
            priority=Priority.LOW,
        )

    rules = (
        lambda inputs, current: RuleOutcome(Status.FAIL, rec("first")),
        lambda inputs, current: RuleOutcome(Status.PASS, rec("second")),
        lambda inputs, current: RuleOutcome(Status.WARN, rec("third")),
    )
    result = evaluate_vertical(vertical_inputs(), rules=rules)
    assert result.status is Status.FAIL
    assert ids(result) == ["first", "second", "third"]
