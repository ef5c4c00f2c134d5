"""
Command-Line Assessment Runner
==============================

Evaluates one or more scenario JSON files (or the default scenario when no
file is given) and prints a summary table or JSON results.

Exit codes:
    0  all scenarios evaluated (and all PASS when --strict is set)
    1  --strict and at least one scenario is WARN or FAIL
    2  a scenario file could not be read or parsed

License: MIT
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from .core import (
    ConservatismLevel,
    LengthScalePolicy,
    Result,
    Scenario,
    Status,
    analyze_scenario,
)
from .scenarios import (
    ScenarioFormatError,
    apply_conservatism,
    create_default_scenario,
    loads_scenario,
)

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tank-mixing",
        description="Tier-1 mixing assessment for cylindrical storage tanks",
    )
    parser.add_argument(
        "scenarios",
        nargs="*",
        type=Path,
        help="Scenario JSON files (default scenario if omitted)",
    )
    parser.add_argument(
        "--conservatism",
        choices=[level.value for level in ConservatismLevel],
        help="Apply a conservatism preset (sets the target velocity)",
    )
    parser.add_argument(
        "--length-scale",
        choices=[policy.value for policy in LengthScalePolicy],
        help="Override the Richardson length-scale policy",
    )
    parser.add_argument(
        "--json", action="store_true", help="Print full results as JSON"
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 unless every scenario passes",
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging"
    )
    return parser


def load_scenarios(paths: Sequence[Path]) -> List[Scenario]:
    """
    Read scenario files.

    Raises:
        ScenarioFormatError: Invalid JSON or schema
        OSError: File cannot be read
    """
    if not paths:
        return [create_default_scenario()]

    scenarios = []
    for path in paths:
        scenario = loads_scenario(path.read_text(encoding="utf-8"))
        logger.debug("Loaded %s from %s", scenario.id, path)
        scenarios.append(scenario)
    return scenarios


def apply_overrides(scenario: Scenario, args: argparse.Namespace) -> Scenario:
    if args.conservatism:
        scenario = apply_conservatism(scenario, ConservatismLevel(args.conservatism))
    if args.length_scale:
        scenario = scenario.with_(
            options__ri_length_scale=LengthScalePolicy(args.length_scale)
        )
    return scenario


def format_summary(scenario: Scenario, result: Result) -> str:
    m = result.metrics
    lines = [
        f"{scenario.name} [{scenario.id}]",
        f"  Overall: {result.overall_status.value:<5} "
        f"Vertical: {result.vertical_status.value:<5} "
        f"Horizontal: {result.horizontal_status.value:<5} "
        f"Dominant risk: {result.dominant_risk.value}",
        f"  u={m.inlet_velocity_m_s:.2f} m/s  Fr={m.froude_inlet:.2f}  "
        f"Ri={m.richardson_number:.3g}  TOR={m.turnover_ratio * 100:.1f}%  "
        f"layout={m.horizontal_risk_score:g}/100  "
        f"jet={m.jet_penetration_reach.value}",
    ]
    for rec in result.recommendations:
        lines.append(f"  - [{rec.priority.value}] {rec.message}")
    return "\n".join(lines)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        scenarios = load_scenarios(args.scenarios)
    except ScenarioFormatError as e:
        logger.error(f"Scenario rejected: {e}")
        return 2
    except OSError as e:
        logger.error(f"Cannot read scenario file: {e}")
        return 2

    scenarios = [apply_overrides(s, args) for s in scenarios]
    results = [analyze_scenario(s) for s in scenarios]

    if args.json:
        payload = [
            {"id": s.id, "name": s.name, "result": r.to_dict()}
            for s, r in zip(scenarios, results)
        ]
        print(json.dumps(payload, indent=2))
    else:
        print("\n\n".join(format_summary(s, r) for s, r in zip(scenarios, results)))

    failing = [r for r in results if r.overall_status is not Status.PASS]
    logger.info(f"Evaluated {len(results)} scenario(s), {len(failing)} not PASS")

    if args.strict and failing:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
