"""
Input checks run before a calculation.

The engine assumes validated numeric input. These helpers reject values that
are missing, non-finite, physically meaningless or outside the practical
bounds configured in ``Config``, and report them keyed by field so a caller
can show each message next to its input. Raw form text such as ``"100"`` is
accepted wherever it parses as a number.
"""

from typing import Dict, Optional, Tuple

import numpy as np

from .config import Config, DEFAULT_CONFIG
from .hydraulics import CalculationParams


def _to_number(value) -> Optional[float]:
    """Finite float value of ``value``, or None if it does not parse."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if np.isfinite(number) else None


def _range_message(low: float, high: float, unit: str) -> str:
    return f"Must be between {low:g} and {high:g} {unit}"


def check_inputs(
    params: CalculationParams,
    config: Optional[Config] = None,
) -> Dict[str, str]:
    """
    Collect input errors for a calculation request.

    Parameters
    ----------
    params : CalculationParams
        Raw request; numeric fields may be numbers or numeric strings
    config : Config, optional
        Configuration with the input limits

    Returns
    -------
    dict
        Field name -> message. Empty when the request can be evaluated.
        Segment fields are keyed ``segment_<field>_<id>``.
    """
    if config is None:
        config = DEFAULT_CONFIG

    errors: Dict[str, str] = {}

    # Basic sanity first; range checks only for values that pass it
    flow_rate = _to_number(params.flow_rate)
    if flow_rate is None or flow_rate < 0:
        errors["flow_rate"] = "Must be non-negative"
    elif not config.MIN_FLOW_RATE <= flow_rate <= config.MAX_FLOW_RATE:
        errors["flow_rate"] = _range_message(config.MIN_FLOW_RATE, config.MAX_FLOW_RATE, "m³/day")

    well_depth = _to_number(params.well_depth)
    if well_depth is None or well_depth <= 0:
        well_depth = None
        errors["well_depth"] = "Must be positive"
    elif not config.MIN_WELL_DEPTH <= well_depth <= config.MAX_WELL_DEPTH:
        errors["well_depth"] = _range_message(config.MIN_WELL_DEPTH, config.MAX_WELL_DEPTH, "m")

    for name in ("injection_pressure", "bottomhole_pressure"):
        value = _to_number(getattr(params, name))
        if value is None:
            errors[name] = "Must be valid number"
        elif not config.MIN_PRESSURE <= value <= config.MAX_PRESSURE:
            errors[name] = _range_message(config.MIN_PRESSURE, config.MAX_PRESSURE, "kPa")

    density = _to_number(params.fluid_density)
    if density is None or density <= 0:
        errors["fluid_density"] = "Must be positive"
    elif not config.MIN_FLUID_DENSITY <= density <= config.MAX_FLUID_DENSITY:
        errors["fluid_density"] = _range_message(
            config.MIN_FLUID_DENSITY, config.MAX_FLUID_DENSITY, "kg/m³"
        )

    viscosity = _to_number(params.fluid_viscosity)
    if viscosity is None or viscosity <= 0:
        errors["fluid_viscosity"] = "Must be positive"
    elif not config.MIN_FLUID_VISCOSITY <= viscosity <= config.MAX_FLUID_VISCOSITY:
        errors["fluid_viscosity"] = _range_message(
            config.MIN_FLUID_VISCOSITY, config.MAX_FLUID_VISCOSITY, "Pa·s"
        )

    segments = list(params.segments)
    if not segments:
        errors["segments"] = "At least one segment is required"
    elif len(segments) > config.MAX_SEGMENTS:
        errors["segments"] = f"At most {config.MAX_SEGMENTS} segments are allowed"

    ids = [seg.id for seg in segments]
    if len(set(ids)) != len(ids):
        errors["segment_ids"] = "Segment ids must be unique"

    lengths = []
    for seg in segments:
        diameter = _to_number(seg.diameter)
        if diameter is None or diameter <= 0:
            errors[f"segment_diameter_{seg.id}"] = "Required"
        elif not config.MIN_DIAMETER <= diameter <= config.MAX_DIAMETER:
            errors[f"segment_diameter_{seg.id}"] = _range_message(
                config.MIN_DIAMETER, config.MAX_DIAMETER, "mm"
            )

        length = _to_number(seg.length)
        if length is None or length <= 0:
            errors[f"segment_length_{seg.id}"] = "Required"
            length = None
        elif not config.MIN_SEGMENT_LENGTH <= length <= config.MAX_SEGMENT_LENGTH:
            errors[f"segment_length_{seg.id}"] = _range_message(
                config.MIN_SEGMENT_LENGTH, config.MAX_SEGMENT_LENGTH, "m"
            )
        lengths.append(length)

        roughness = _to_number(seg.roughness)
        if roughness is None or roughness < 0:
            errors[f"segment_roughness_{seg.id}"] = "Non-negative"
        elif roughness > config.MAX_ROUGHNESS:
            errors[f"segment_roughness_{seg.id}"] = _range_message(
                config.MIN_ROUGHNESS, config.MAX_ROUGHNESS, "mm"
            )

    if well_depth is not None and None not in lengths:
        tubing = float(sum(lengths))
        if tubing > well_depth:
            errors["depth"] = (
                f"Tubing length ({tubing:.1f}m) cannot exceed well depth "
                f"({well_depth:g}m)"
            )
        elif well_depth - tubing > config.OPEN_HOLE_TOLERANCE:
            diameter = _to_number(params.open_hole_diameter)
            if diameter is None or diameter <= 0:
                errors["open_hole_diameter"] = "Required for open hole section"

    return errors


def validate_inputs(
    params: CalculationParams,
    config: Optional[Config] = None,
) -> Tuple[bool, str]:
    """
    Validate a calculation request.

    Returns
    -------
    tuple
        (is_valid, message) where message lists every problem found
    """
    errors = check_inputs(params, config)
    if not errors:
        return True, "Inputs are valid"

    details = "; ".join(f"{name}: {msg}" for name, msg in errors.items())
    return False, f"{len(errors)} input error(s): {details}"
