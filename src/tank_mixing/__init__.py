"""
Tank Mixing Assessment
======================

Tier-1 heuristic assessment of inlet/outlet mixing in cylindrical water
storage tanks.

Packages:
- core: hydraulic helpers, Richardson number, vertical rules, layout score,
  aggregation and recommendations
- scenarios: default scenario, collection operations, JSON interchange

Run ``python -m tank_mixing scenario.json`` to evaluate scenario files.

License: MIT
"""

__version__ = "1.0.0"

from .core import Result, Scenario, Status, analyze_scenario
from .scenarios import create_default_scenario, dumps_scenario, loads_scenario

__all__ = [
    "analyze_scenario",
    "Scenario",
    "Result",
    "Status",
    "create_default_scenario",
    "dumps_scenario",
    "loads_scenario",
]
