import json

from tank_mixing.__main__ import main
from tank_mixing.scenarios import create_default_scenario, dumps_scenario


def test_default_scenario_summary(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Baseline Scenario [default-1]" in out
    assert "Overall: WARN" in out


def test_strict_mode_fails_on_warn():
    assert main(["--strict"]) == 1


def test_json_output_for_files(tmp_path, capsys):
    wide = create_default_scenario().with_(
        id="wide", name="Wide nozzle", inlet__nozzle_diameter_mm=300.0
    )
    path = tmp_path / "wide.json"
    path.write_text(dumps_scenario(wide), encoding="utf-8")

    assert main([str(path), "--json"]) == 0
    payload = json.loads(capsys.readouterr().out)

    assert payload[0]["id"] == "wide"
    assert payload[0]["result"]["overall_status"] == "FAIL"
    assert payload[0]["result"]["dominant_risk"] == "insufficient_momentum"


def test_conservatism_override(tmp_path, capsys):
    # 165 mm gives ~0.94 m/s: clears the low preset but not the high one
    scenario = create_default_scenario().with_(inlet__nozzle_diameter_mm=165.0)
    path = tmp_path / "s.json"
    path.write_text(dumps_scenario(scenario), encoding="utf-8")

    def momentum_ids(level):
        assert main([str(path), "--conservatism", level, "--json"]) == 0
        result = json.loads(capsys.readouterr().out)[0]["result"]
        return [r["id"] for r in result["recommendations"] if r["id"].startswith("vert-mom")]

    assert momentum_ids("low") == []
    assert momentum_ids("high") == ["vert-mom-warn"]


def test_length_scale_override(capsys):
    assert main(["--length-scale", "tank_half", "--json"]) == 0
    result = json.loads(capsys.readouterr().out)[0]["result"]
    assert result["metrics"]["ri_length_scale_m"] == 2.5


def test_unreadable_file(tmp_path):
    assert main([str(tmp_path / "missing.json")]) == 2


def test_rejected_schema(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"inlet": {"count": 1}}), encoding="utf-8")
    assert main([str(path)]) == 2


def test_mistyped_field_exits_cleanly(tmp_path):
    path = tmp_path / "typo.json"
    path.write_text(
        json.dumps({"tank": {}, "inlet": {"nozzle_diameter_mm": "150"}}),
        encoding="utf-8",
    )
    assert main([str(path)]) == 2


def test_null_numeric_field_exits_cleanly(tmp_path):
    path = tmp_path / "null.json"
    path.write_text(
        json.dumps({"tank": {}, "inlet": {}, "operation": {"inflow_Lps": None}}),
        encoding="utf-8",
    )
    assert main([str(path)]) == 2
