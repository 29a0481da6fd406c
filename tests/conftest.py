"""Shared fixtures for the injection hydraulics tests."""

import matplotlib
matplotlib.use("Agg")

import pytest

from injection_hydraulics.geometry import Segment
from injection_hydraulics.hydraulics import CalculationParams


@pytest.fixture
def reference_params():
    """Single 100 mm string, 1000 m deep, water at 1000 m³/day."""
    return CalculationParams(
        segments=[Segment(id=1, diameter=100.0, length=1000.0, roughness=0.05)],
        flow_rate=1000.0,
        injection_pressure=5000.0,
        bottomhole_pressure=15000.0,
        fluid_density=1000.0,
        fluid_viscosity=0.001,
        well_depth=1000.0,
        open_hole_diameter=0.0,
    )


@pytest.fixture
def two_segment_params():
    """4 1/2" over 3 1/2" tubing reaching total depth."""
    return CalculationParams(
        segments=[
            Segment(id=1, diameter=100.5, length=150.0, roughness=0.046),
            Segment(id=2, diameter=76.0, length=250.0, roughness=0.046),
        ],
        flow_rate=100.0,
        injection_pressure=5000.0,
        bottomhole_pressure=15000.0,
        fluid_density=1000.0,
        fluid_viscosity=0.001,
        well_depth=400.0,
        open_hole_diameter=150.0,
    )
