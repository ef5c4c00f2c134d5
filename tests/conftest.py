"""Shared fixtures for the mixing assessment tests."""

import pytest

from tank_mixing.core import Options, VerticalInputs
from tank_mixing.scenarios import create_default_scenario


@pytest.fixture
def baseline():
    """10 m x 5 m tank, one 150 mm radial inlet, 20 L/s."""
    return create_default_scenario()


@pytest.fixture
def vertical_inputs():
    """Vertical inputs that pass every rule; tests override single fields."""

    def _make(**overrides):
        values = dict(
            velocity=1.0,
            richardson=0.0,
            delta_t=0.0,
            turnover=1.0,
            inlet_elevation_m=0.5,
            water_depth_m=5.0,
            options=Options(),
        )
        values.update(overrides)
        return VerticalInputs(**values)

    return _make
