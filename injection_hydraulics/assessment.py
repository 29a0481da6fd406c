"""
Operational assessment of a completed calculation.

Interprets engine output against the classification thresholds in
``Config``: erosion velocity, flow capacity and bottomhole pressure margin.
Nothing here raises for an unfavourable result; statuses are plain strings
("good", "warning", "error").
"""

from typing import Dict, Optional

import numpy as np

from .config import Config, DEFAULT_CONFIG
from .geometry import has_open_hole, open_hole_length, total_tubing_length
from .hydraulics import CalculationParams, CalculationResults


def erosion_status(max_velocity: float, config: Optional[Config] = None) -> str:
    """Erosion classification of the highest segment velocity."""
    if config is None:
        config = DEFAULT_CONFIG

    if max_velocity > config.VELOCITY_ERROR_LIMIT:
        return "error"
    if max_velocity > config.VELOCITY_WARNING_LIMIT:
        return "warning"
    return "good"


def capacity_status(results: CalculationResults) -> str:
    """'good' if the requested rate does not exceed the estimated maximum."""
    return "good" if results.actual_flow_rate <= results.max_flow_rate else "error"


def is_near_capacity(results: CalculationResults, config: Optional[Config] = None) -> bool:
    """True when a finite maximum rate is nearly used up by the requested rate."""
    if config is None:
        config = DEFAULT_CONFIG
    if not np.isfinite(results.max_flow_rate):
        return False
    return results.actual_flow_rate > results.max_flow_rate * config.CAPACITY_WARNING_FRACTION


def bottomhole_status(results: CalculationResults, target_pressure: float) -> str:
    """'good' if the computed bottomhole pressure reaches the target [kPa]."""
    return "good" if results.bottom_pressure >= target_pressure else "warning"


def system_health_score(
    results: CalculationResults,
    target_pressure: float,
    config: Optional[Config] = None,
) -> int:
    """
    Overall 0-100 score of the operating point.

    Deductions: 40 for critical erosion velocity (20 for the warning band),
    20 for a bottomhole pressure below target, 15 for running near capacity.
    """
    if config is None:
        config = DEFAULT_CONFIG

    score = 100
    erosion = erosion_status(results.max_segment_velocity, config)
    if erosion == "error":
        score -= 40
    elif erosion == "warning":
        score -= 20

    if results.bottom_pressure - target_pressure < 0:
        score -= 20

    if is_near_capacity(results, config):
        score -= 15

    return max(0, score)


def erosion_message(results: CalculationResults, config: Optional[Config] = None) -> Optional[str]:
    """Erosion alert text, or None below the warning velocity."""
    status = erosion_status(results.max_segment_velocity, config)
    if status == "good":
        return None

    title = "Erosion Velocity Exceeded" if status == "error" else "Erosion Velocity Warning"
    return (
        f"{title}: maximum velocity of {results.max_segment_velocity:.2f} m/s in "
        f"Segment #{results.max_velocity_segment} is in a high-risk zone."
    )


def open_hole_notice(params: CalculationParams, config: Optional[Config] = None) -> Optional[str]:
    """Description of the open-hole interval, or None when the tubing reaches TD."""
    if not has_open_hole(params.segments, params.well_depth, config):
        return None

    tubing = total_tubing_length(params.segments)
    length = open_hole_length(params.segments, params.well_depth)
    return (
        f"An open hole section of {length:.1f}m is present from the end of the "
        f"tubing ({tubing:.1f}m) to the total well depth ({params.well_depth:g}m)."
    )


def evaluate_results(
    results: CalculationResults,
    params: CalculationParams,
    config: Optional[Config] = None,
) -> Dict[str, object]:
    """
    Collect every classification for one calculation.

    Returns
    -------
    dict
        Keys: erosion_status, capacity_status, near_capacity,
        bottomhole_status, pressure_margin [kPa], health_score,
        erosion_message, open_hole_notice, warnings
    """
    if config is None:
        config = DEFAULT_CONFIG

    target = params.bottomhole_pressure
    return {
        "erosion_status": erosion_status(results.max_segment_velocity, config),
        "capacity_status": capacity_status(results),
        "near_capacity": is_near_capacity(results, config),
        "bottomhole_status": bottomhole_status(results, target),
        "pressure_margin": results.bottom_pressure - target,
        "health_score": system_health_score(results, target, config),
        "erosion_message": erosion_message(results, config),
        "open_hole_notice": open_hole_notice(params, config),
        "warnings": list(results.warnings or ()),
    }


def print_results_summary(
    results: CalculationResults,
    params: CalculationParams,
    config: Optional[Config] = None,
) -> None:
    """Print a formatted summary of a calculation."""
    metrics = evaluate_results(results, params, config)

    print("\n" + "=" * 60)
    print("INJECTION HYDRAULICS SUMMARY")
    print("=" * 60)

    print("\n--- Operating Point ---")
    print(f"  Flow rate        = {results.actual_flow_rate:.1f} m³/day")
    print(f"  Injection press. = {params.injection_pressure:.1f} kPa")
    print(f"  Bottomhole press.= {results.bottom_pressure:.1f} kPa "
          f"(target {params.bottomhole_pressure:.1f} kPa, {metrics['bottomhole_status']})")

    print("\n--- Losses ---")
    print(f"  Friction         = {results.total_friction_loss:.1f} kPa")
    print(f"  Friction + minor = {results.total_pressure_drop:.1f} kPa")

    print("\n--- Capacity ---")
    if np.isfinite(results.max_flow_rate):
        print(f"  Max flow rate    = {results.max_flow_rate:.1f} m³/day ({metrics['capacity_status']})")
    else:
        print("  Max flow rate    = unlimited")
    print(f"  Max velocity     = {results.max_segment_velocity:.2f} m/s "
          f"in segment {results.max_velocity_segment} ({metrics['erosion_status']})")
    print(f"  Health score     = {metrics['health_score']}")

    print("\n--- Segments ---")
    print("   #   D[mm]   L[m]   v[m/s]       Re        Regime   f       dP_net[kPa]")
    for seg in results.segments:
        print(f"  {seg.segment_number:2d} {seg.diameter:7.1f} {seg.length:6.1f} "
              f"{seg.velocity:8.3f} {seg.reynolds_number:10.0f} {seg.flow_regime:>13s} "
              f"{seg.friction_factor:7.4f} {seg.net_pressure_change:10.1f}")

    notes = [metrics["open_hole_notice"], metrics["erosion_message"], *metrics["warnings"]]
    notes = [n for n in notes if n]
    if notes:
        print("\n--- Notes ---")
        for note in notes:
            print(f"  - {note}")

    print("\n" + "=" * 60)
