"""
Unit tests for DataFrame export, flow-rate sweeps and plotting.
"""

import numpy as np
import matplotlib.pyplot as plt
import pandas as pd

from injection_hydraulics.analysis import (
    SEGMENT_COLUMNS,
    run_flow_rate_sweep,
    segments_to_dataframe,
)
from injection_hydraulics.hydraulics import calculate_pressure_drop
from injection_hydraulics.plots import plot_pressure_profile, plot_segment_losses


class TestSegmentTable:
    """Per-segment DataFrame."""

    def test_shape(self, two_segment_params):
        results = calculate_pressure_drop(two_segment_params)
        df = segments_to_dataframe(results)

        assert isinstance(df, pd.DataFrame)
        assert list(df.columns) == SEGMENT_COLUMNS
        assert len(df) == 2
        assert list(df["segment_number"]) == [1, 2]

    def test_values_match(self, two_segment_params):
        results = calculate_pressure_drop(two_segment_params)
        df = segments_to_dataframe(results)

        assert np.isclose(df["friction_loss"].sum(), results.total_friction_loss)
        assert np.isclose(df["outlet_pressure"].iloc[-1], results.bottom_pressure)


class TestFlowRateSweep:
    """Independent calculations over a range of rates."""

    def test_sweep(self, two_segment_params):
        rates = np.linspace(100.0, 1000.0, 5)
        df = run_flow_rate_sweep(two_segment_params, rates)

        assert len(df) == 5
        assert np.allclose(df["flow_rate"], rates)
        assert df["total_friction_loss"].is_monotonic_increasing
        assert df["bottom_pressure"].is_monotonic_decreasing
        assert (df["n_warnings"] == 0).all()

    def test_base_params_unchanged(self, two_segment_params):
        run_flow_rate_sweep(two_segment_params, [500.0])
        assert two_segment_params.flow_rate == 100.0


class TestPlots:
    """Smoke tests for the figures."""

    def test_pressure_profile(self, two_segment_params):
        results = calculate_pressure_drop(two_segment_params)
        fig = plot_pressure_profile(results, target_pressure=15000.0)

        assert isinstance(fig, plt.Figure)
        assert fig.axes[0].yaxis_inverted()
        plt.close(fig)

    def test_pressure_profile_on_axes(self, two_segment_params):
        results = calculate_pressure_drop(two_segment_params)
        fig, ax = plt.subplots()

        assert plot_pressure_profile(results, ax=ax) is fig
        plt.close(fig)

    def test_segment_losses(self, two_segment_params):
        results = calculate_pressure_drop(two_segment_params)
        fig = plot_segment_losses(results)

        assert len(fig.axes[0].patches) == 3 * len(results.segments)
        plt.close(fig)
