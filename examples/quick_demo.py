#!/usr/bin/env python
"""
Quick demonstration of the injection hydraulics calculator.

Evaluates a two-segment tubing string with an open-hole section, prints the
summary, sweeps the injection rate and saves the pressure profile plot.

Run from the repository root:
    python examples/quick_demo.py
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import numpy as np

from injection_hydraulics import (
    API_TUBING_SIZES,
    CalculationParams,
    Segment,
    calculate_pressure_drop,
    print_results_summary,
    run_flow_rate_sweep,
    segment_from_preset,
    validate_inputs,
)
from injection_hydraulics.plots import plot_pressure_profile, plot_segment_losses


def main():
    print("=" * 70)
    print("DISPOSAL WELL INJECTION HYDRAULICS - QUICK DEMO")
    print("=" * 70)

    # 1. Define the well
    print("\n1. Setting up the injection string...")
    segments = [
        segment_from_preset(API_TUBING_SIZES[3], segment_id=1, length=150.0),
        Segment(id=2, diameter=76.0, length=250.0, roughness=0.046),
    ]
    params = CalculationParams(
        segments=segments,
        flow_rate=100.0,
        injection_pressure=5000.0,
        bottomhole_pressure=15000.0,
        fluid_density=1000.0,
        fluid_viscosity=0.001,
        well_depth=450.0,
        open_hole_diameter=150.0,
    )
    for seg in segments:
        print(f"   Segment {seg.id}: D={seg.diameter:.1f} mm, L={seg.length:.0f} m, ε={seg.roughness} mm")

    # 2. Validate
    is_valid, msg = validate_inputs(params)
    print(f"\n2. Validation: {msg}")
    if not is_valid:
        return

    # 3. Calculate
    print("\n3. Running pressure march...")
    results = calculate_pressure_drop(params)
    print_results_summary(results, params)

    # 4. Flow-rate sweep
    print("\n4. Sweeping injection rate...")
    sweep = run_flow_rate_sweep(params, np.linspace(50.0, 2000.0, 6))
    print(sweep.to_string(index=False, float_format=lambda v: f"{v:.1f}"))

    # 5. Plots
    print("\n5. Saving plots...")
    fig = plot_pressure_profile(results, target_pressure=params.bottomhole_pressure)
    fig.savefig("pressure_profile.png", dpi=150, bbox_inches="tight")
    fig = plot_segment_losses(results)
    fig.savefig("segment_losses.png", dpi=150, bbox_inches="tight")
    print("   Saved pressure_profile.png and segment_losses.png")

    print("\n" + "=" * 70)
    print("DEMO COMPLETE")
    print("=" * 70)


if __name__ == "__main__":
    main()
