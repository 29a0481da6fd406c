"""
Pressure march for vertical disposal-well injection strings.

This module walks the segment chain from surface to total depth and
accounts for:
- Friction losses (Darcy-Weisbach)
- Hydrostatic gain (vertical well, incompressible liquid)
- Minor losses at the tubing entry and at diameter changes
- Maximum sustainable flow rate from a power-law rescaling of the losses

Key equations:
    ΔP_friction = f * (L/D) * ρ*v²/2
    ΔP_hydro    = ρ*g*L
    K_entry     = 0.5
    Cc          = 0.62 + 0.38*(A/A_prev)³,  Kc = (1/Cc - 1)²   [contraction]
    Ke          = (1 - A_prev/A)²                           [expansion, on v_prev]
    Q_max       = Q * (ΔP_available / ΔP_losses)^(1/n),  n = 1 laminar, 2 otherwise

Assumptions: incompressible Newtonian liquid, steady state, fully developed
flow in each segment.

References
----------
Crane Co. (2009): Flow of Fluids Through Valves, Fittings and Pipe, TP-410
API RP 14E: Design and Installation of Offshore Production Platform Piping Systems
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .config import Config, DEFAULT_CONFIG
from .friction import LAMINAR, friction_factor_and_regime, friction_pressure_loss, reynolds_number
from .geometry import ConfigurationError, Segment, build_effective_segments, cross_sectional_area

CAVITATION_PREFIX = "Cavitation risk:"


@dataclass(frozen=True)
class CalculationParams:
    """
    Inputs of a single hydraulic evaluation.

    Attributes
    ----------
    segments : sequence of Segment
        Tubing segments, top to bottom
    flow_rate : float
        Injection rate [m³/day]
    injection_pressure : float
        Surface injection pressure [kPa]
    bottomhole_pressure : float
        Target bottomhole pressure [kPa]
    fluid_density : float
        Density [kg/m³]
    fluid_viscosity : float
        Dynamic viscosity [Pa·s]
    well_depth : float
        Total well depth [m]
    open_hole_diameter : float
        Open-hole diameter [mm], read only when the tubing is shorter than the well
    """
    segments: Sequence[Segment]
    flow_rate: float
    injection_pressure: float
    bottomhole_pressure: float
    fluid_density: float
    fluid_viscosity: float
    well_depth: float
    open_hole_diameter: float = 0.0


@dataclass(frozen=True)
class SegmentResult:
    """Per-segment hydraulics. Pressures in kPa, depths in m, diameter in mm."""
    segment_number: int
    diameter: float
    length: float
    depth_from: float
    depth_to: float
    velocity: float
    reynolds_number: float
    flow_regime: str
    friction_factor: float
    friction_loss: float
    hydrostatic_gain: float
    minor_loss: float
    net_pressure_change: float
    inlet_pressure: float
    outlet_pressure: float


@dataclass(frozen=True)
class CalculationResults:
    """
    Aggregate result of one pressure march.

    ``max_segment_velocity`` and ``max_velocity_segment`` include the open-hole
    stage, which is never listed in ``segments``. ``warnings`` is None when
    nothing was flagged.
    """
    segments: Tuple[SegmentResult, ...]
    total_friction_loss: float
    total_pressure_drop: float
    bottom_pressure: float
    max_flow_rate: float
    actual_flow_rate: float
    max_segment_velocity: float
    max_velocity_segment: int
    warnings: Optional[Tuple[str, ...]] = field(default=None)


def entry_loss(density: float, velocity: float, config: Optional[Config] = None) -> float:
    """Sharp-edged inlet loss K*ρ*v²/2 [Pa]."""
    if config is None:
        config = DEFAULT_CONFIG
    return config.ENTRY_LOSS_COEFFICIENT * density * velocity ** 2 / 2.0


def transition_loss(
    area: float,
    prev_area: float,
    flow_rate: float,
    density: float,
    config: Optional[Config] = None,
) -> float:
    """
    Minor loss at a sudden change of flow area.

    Parameters
    ----------
    area : float
        Flow area of the current segment [m²]
    prev_area : float
        Flow area of the segment above [m²]
    flow_rate : float
        Volumetric flow rate [m³/s]
    density : float
        Fluid density [kg/m³]
    config : Config, optional
        Configuration (contraction coefficients)

    Returns
    -------
    float
        Pressure loss [Pa]; 0 for equal areas or no flow

    Notes
    -----
    A contraction is charged on the downstream velocity through the vena
    contracta coefficient Cc; an expansion (Borda-Carnot) on the upstream
    velocity.
    """
    if config is None:
        config = DEFAULT_CONFIG
    if area <= 0 or prev_area <= 0 or flow_rate <= 0:
        return 0.0

    v = flow_rate / area
    v_prev = flow_rate / prev_area

    if area < prev_area:
        area_ratio = area / prev_area
        Cc = config.CONTRACTION_BASE + config.CONTRACTION_SLOPE * area_ratio ** 3
        Kc = (1.0 / Cc - 1.0) ** 2
        return Kc * density * v ** 2 / 2.0

    if area > prev_area:
        Ke = (1.0 - prev_area / area) ** 2
        return Ke * density * v_prev ** 2 / 2.0

    return 0.0


def flow_exponent(friction_losses: Sequence[Tuple[float, str]]) -> float:
    """
    Exponent n of the ΔP ∝ Q^n relationship used for flow-rate rescaling.

    Taken from the regime of the segment with the largest friction loss
    (first one on ties): 1.0 if laminar, 2.0 otherwise.

    Parameters
    ----------
    friction_losses : sequence of (loss, regime)
        Friction loss [Pa] and regime label per effective segment
    """
    if not friction_losses:
        return 2.0

    dominant_loss, dominant_regime = friction_losses[0]
    for loss, regime in friction_losses[1:]:
        if loss > dominant_loss:
            dominant_loss, dominant_regime = loss, regime

    return 1.0 if dominant_regime == LAMINAR else 2.0


def estimate_max_flow_rate(
    flow_rate: float,
    available_pressure: float,
    total_pressure_drop: float,
    exponent: float,
) -> float:
    """
    Maximum sustainable flow rate [m³/day].

    Parameters
    ----------
    flow_rate : float
        Evaluated flow rate [m³/day]
    available_pressure : float
        Injection + hydrostatic - target bottomhole pressure [Pa]
    total_pressure_drop : float
        Friction plus minor losses at ``flow_rate`` [Pa]
    exponent : float
        Flow exponent n (see ``flow_exponent``)

    Returns
    -------
    float
        0 when no driving pressure is available, ``inf`` when the evaluated
        point shows no resistance to extrapolate from.
    """
    if available_pressure <= 0:
        return 0.0
    if total_pressure_drop <= 0 or flow_rate == 0:
        return np.inf
    return float(flow_rate * (available_pressure / total_pressure_drop) ** (1.0 / exponent))


def _cavitation_message(segment_number: int) -> str:
    return (
        f"{CAVITATION_PREFIX} Negative absolute pressure calculated in segment "
        f"{segment_number}. The results are physically unrealistic. This indicates "
        "the injection pressure is too low for the given flow rate, or the flow "
        "rate is too high."
    )


def calculate_pressure_drop(
    params: CalculationParams,
    config: Optional[Config] = None,
) -> CalculationResults:
    """
    Segment-by-segment pressure march from surface to total depth.

    Parameters
    ----------
    params : CalculationParams
        Geometry, fluid, flow rate and boundary pressures
    config : Config, optional
        Configuration (defaults to DEFAULT_CONFIG)

    Returns
    -------
    CalculationResults
        Per-segment results for the user segments plus aggregate values.

    Raises
    ------
    ConfigurationError
        If an open hole is implied without a positive open-hole diameter, or
        if a segment has a non-positive diameter or flow area.

    Notes
    -----
    A negative running pressure is reported once, as a message in
    ``CalculationResults.warnings``; the march itself continues.
    """
    if config is None:
        config = DEFAULT_CONFIG

    g = config.GRAVITY
    rho = params.fluid_density
    mu = params.fluid_viscosity

    Q = params.flow_rate / config.SECONDS_PER_DAY   # m³/s
    P = params.injection_pressure * 1000.0          # Pa

    effective = build_effective_segments(
        params.segments, params.well_depth, params.open_hole_diameter, config
    )

    total_friction = 0.0
    total_drop = 0.0
    depth = 0.0
    max_velocity = 0.0
    max_velocity_segment = 0
    cavitation_recorded = False
    warning_messages: List[str] = []
    segment_results: List[SegmentResult] = []
    friction_losses: List[Tuple[float, str]] = []
    prev_area = None

    for i, seg in enumerate(effective):
        number = i + 1
        D = seg.diameter / 1000.0
        L = seg.length

        if D <= 0:
            raise ConfigurationError(
                f"Invalid diameter for segment {number}. Diameter must be greater than 0."
            )
        A = cross_sectional_area(D)
        if A <= 0:
            raise ConfigurationError(
                f"Invalid segment diameter for segment {number}; "
                "area cannot be zero or negative."
            )

        v = Q / A
        if v > max_velocity:
            max_velocity = v
            max_velocity_segment = number

        Re = reynolds_number(v, D, rho, mu)
        eps_D = seg.roughness / seg.diameter
        f, regime = friction_factor_and_regime(Re, eps_D, config)

        dp_friction = friction_pressure_loss(f, L, D, rho, v, config)
        dp_hydro = rho * g * L

        dp_minor = 0.0
        if i == 0:
            dp_minor += entry_loss(rho, v, config)
        else:
            dp_minor += transition_loss(A, prev_area, Q, rho, config)

        P_in = P
        dp_net = dp_hydro - dp_friction - dp_minor
        P += dp_net

        if P < 0 and not cavitation_recorded:
            warning_messages.append(_cavitation_message(number))
            cavitation_recorded = True

        depth_from = depth
        depth += L
        friction_losses.append((dp_friction, regime))

        if not seg.open_hole:
            segment_results.append(SegmentResult(
                segment_number=number,
                diameter=seg.diameter,
                length=L,
                depth_from=depth_from,
                depth_to=depth,
                velocity=v,
                reynolds_number=Re,
                flow_regime=regime,
                friction_factor=f,
                friction_loss=dp_friction / 1000.0,
                hydrostatic_gain=dp_hydro / 1000.0,
                minor_loss=dp_minor / 1000.0,
                net_pressure_change=dp_net / 1000.0,
                inlet_pressure=P_in / 1000.0,
                outlet_pressure=P / 1000.0,
            ))

        total_friction += dp_friction
        total_drop += dp_friction + dp_minor
        prev_area = A

    n = flow_exponent(friction_losses)

    # Hydrostatic head over the full well, open hole included
    total_hydrostatic = rho * g * params.well_depth
    available = (
        params.injection_pressure * 1000.0
        + total_hydrostatic
        - params.bottomhole_pressure * 1000.0
    )
    Q_max = estimate_max_flow_rate(params.flow_rate, available, total_drop, n)

    return CalculationResults(
        segments=tuple(segment_results),
        total_friction_loss=total_friction / 1000.0,
        total_pressure_drop=total_drop / 1000.0,
        bottom_pressure=P / 1000.0,
        max_flow_rate=Q_max,
        actual_flow_rate=params.flow_rate,
        max_segment_velocity=max_velocity,
        max_velocity_segment=max_velocity_segment,
        warnings=tuple(warning_messages) if warning_messages else None,
    )
