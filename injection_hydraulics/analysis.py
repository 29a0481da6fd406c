"""
Tabular views of calculation results.

Segment tables and flow-rate sweeps are returned as pandas DataFrames so they
can be filtered, plotted or exported without touching the engine.
"""

from dataclasses import asdict, replace
from typing import Iterable, Optional

import numpy as np
import pandas as pd

from .config import Config, DEFAULT_CONFIG
from .hydraulics import CalculationParams, CalculationResults, calculate_pressure_drop

SEGMENT_COLUMNS = [
    "segment_number", "diameter", "length", "depth_from", "depth_to",
    "velocity", "reynolds_number", "flow_regime", "friction_factor",
    "friction_loss", "hydrostatic_gain", "minor_loss", "net_pressure_change",
    "inlet_pressure", "outlet_pressure",
]


def segments_to_dataframe(results: CalculationResults) -> pd.DataFrame:
    """
    One row per reported segment.

    Returns
    -------
    pd.DataFrame
        Columns as in ``SEGMENT_COLUMNS``; pressures in kPa
    """
    rows = [asdict(seg) for seg in results.segments]
    return pd.DataFrame(rows, columns=SEGMENT_COLUMNS)


def run_flow_rate_sweep(
    params: CalculationParams,
    flow_rates: Iterable[float],
    config: Optional[Config] = None,
) -> pd.DataFrame:
    """
    Evaluate the same well at several injection rates.

    Each rate is an independent calculation with all other inputs unchanged.

    Parameters
    ----------
    params : CalculationParams
        Base request; its flow rate is replaced for each point
    flow_rates : iterable of float
        Injection rates [m³/day]
    config : Config, optional
        Configuration

    Returns
    -------
    pd.DataFrame
        Columns: flow_rate, bottom_pressure, total_friction_loss,
        total_pressure_drop, max_flow_rate, max_segment_velocity, n_warnings
    """
    if config is None:
        config = DEFAULT_CONFIG

    records = []
    for rate in np.asarray(list(flow_rates), dtype=float):
        results = calculate_pressure_drop(replace(params, flow_rate=float(rate)), config)
        records.append({
            "flow_rate": float(rate),
            "bottom_pressure": results.bottom_pressure,
            "total_friction_loss": results.total_friction_loss,
            "total_pressure_drop": results.total_pressure_drop,
            "max_flow_rate": results.max_flow_rate,
            "max_segment_velocity": results.max_segment_velocity,
            "n_warnings": len(results.warnings or ()),
        })

    return pd.DataFrame(records)
