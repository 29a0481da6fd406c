"""
Single-pass hydraulic calculator for vertical disposal-well injection strings.

This package provides modules for:
- config: Centralized configuration with all constants and input limits
- friction: Reynolds number, flow regime, Darcy friction factor
- geometry: Segments, open-hole section, API tubing presets
- hydraulics: Segment-by-segment pressure march and max flow rate
- validation: Input checks against practical bounds
- assessment: Erosion, capacity and bottomhole classification
- analysis: Segment tables and flow-rate sweeps as DataFrames
- plots: Pressure profile and loss breakdown
"""

from .config import Config, DEFAULT_CONFIG
from .friction import (
    reynolds_number,
    classify_regime,
    friction_factor,
    friction_factor_and_regime,
)
from .geometry import (
    ConfigurationError,
    Segment,
    API_TUBING_SIZES,
    build_effective_segments,
    segment_from_preset,
)
from .hydraulics import (
    CalculationParams,
    CalculationResults,
    SegmentResult,
    calculate_pressure_drop,
)
from .validation import check_inputs, validate_inputs
from .assessment import evaluate_results, print_results_summary
from .analysis import segments_to_dataframe, run_flow_rate_sweep
from . import plots

__version__ = "1.0.0"
__all__ = [
    "Config",
    "DEFAULT_CONFIG",
    "reynolds_number",
    "classify_regime",
    "friction_factor",
    "friction_factor_and_regime",
    "ConfigurationError",
    "Segment",
    "API_TUBING_SIZES",
    "build_effective_segments",
    "segment_from_preset",
    "CalculationParams",
    "CalculationResults",
    "SegmentResult",
    "calculate_pressure_drop",
    "check_inputs",
    "validate_inputs",
    "evaluate_results",
    "print_results_summary",
    "segments_to_dataframe",
    "run_flow_rate_sweep",
    "plots",
]
