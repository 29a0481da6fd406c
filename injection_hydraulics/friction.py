"""
Friction factor calculation for tubing and open-hole flow.

This module implements the Darcy friction factor over the three flow
regimes seen in injection strings:

- Laminar (Re < 2300): Hagen-Poiseuille, f = 64/Re
- Transitional (2300 <= Re < 4000): linear interpolation between the laminar
  value at the lower limit and the turbulent value at the upper limit
- Turbulent (Re >= 4000): Swamee-Jain explicit approximation of
  Colebrook-White

References
----------
Swamee, P. K. and Jain, A. K. (1976): Explicit equations for pipe-flow problems
Moody, L. F. (1944): Friction factors for pipe flow
"""

from typing import Optional, Tuple

import numpy as np

from .config import Config, DEFAULT_CONFIG

LAMINAR = "Laminar"
TRANSITIONAL = "Transitional"
TURBULENT = "Turbulent"


def reynolds_number(
    velocity: float,
    diameter: float,
    density: float,
    viscosity: float,
) -> float:
    """
    Calculate Reynolds number.

    Re = ρ*v*D / μ

    Parameters
    ----------
    velocity : float
        Flow velocity [m/s]
    diameter : float
        Pipe inner diameter [m]
    density : float
        Fluid density [kg/m³]
    viscosity : float
        Dynamic viscosity [Pa·s]

    Returns
    -------
    float
        Reynolds number [-]. Zero when viscosity or diameter is zero.
    """
    if viscosity == 0 or diameter == 0:
        return 0.0

    return float((density * velocity * diameter) / viscosity)


def classify_regime(Re: float, config: Optional[Config] = None) -> str:
    """Flow regime label for a Reynolds number."""
    if config is None:
        config = DEFAULT_CONFIG

    if Re < config.LAMINAR_FLOW_LIMIT:
        return LAMINAR
    if Re < config.TURBULENT_FLOW_START:
        return TRANSITIONAL
    return TURBULENT


def friction_factor_laminar(Re: float) -> float:
    """
    Calculate friction factor for laminar flow.

    f = 64 / Re

    Parameters
    ----------
    Re : float
        Reynolds number [-]

    Returns
    -------
    float
        Darcy friction factor [-]
    """
    if Re <= 0:
        raise ValueError("Reynolds number must be positive")

    return 64.0 / Re


def friction_factor_swamee_jain(
    Re: float,
    relative_roughness: float,
    config: Optional[Config] = None,
) -> float:
    """
    Calculate turbulent friction factor with the Swamee-Jain equation.

        f = 0.25 / [log₁₀(ε/(3.7*D) + 5.74/Re^0.9)]²

    Parameters
    ----------
    Re : float
        Reynolds number [-]
    relative_roughness : float
        Relative roughness ε/D [-]
    config : Config, optional
        Configuration (floor for the relative roughness)

    Returns
    -------
    float
        Darcy friction factor [-]

    Notes
    -----
    Valid for 4000 < Re < 1e8 and 1e-6 < ε/D < 1e-2, within about 1% of
    Colebrook-White. The relative roughness is floored so that perfectly
    smooth pipes keep a finite logarithm argument.
    """
    if config is None:
        config = DEFAULT_CONFIG
    if Re <= 0:
        raise ValueError("Reynolds number must be positive")

    eps_D = max(relative_roughness, config.MIN_RELATIVE_ROUGHNESS)
    log_term = np.log10(eps_D / 3.7 + 5.74 / (Re ** 0.9))
    return float(0.25 / (log_term ** 2))


def _friction_for_regime(
    Re: float,
    relative_roughness: float,
    regime: str,
    config: Config,
) -> float:
    if Re <= 0:
        return 0.0

    if regime == LAMINAR:
        return friction_factor_laminar(Re)

    if regime == TRANSITIONAL:
        f_lam = config.LAMINAR_FRICTION_AT_LIMIT
        f_turb = friction_factor_swamee_jain(
            config.TURBULENT_FLOW_START, relative_roughness, config
        )
        alpha = (Re - config.LAMINAR_FLOW_LIMIT) / config.TRANSITION_WIDTH
        return f_lam + alpha * (f_turb - f_lam)

    return friction_factor_swamee_jain(Re, relative_roughness, config)


def friction_factor_and_regime(
    Re: float,
    relative_roughness: float,
    config: Optional[Config] = None,
) -> Tuple[float, str]:
    """
    Darcy friction factor together with the regime it was computed for.

    The regime is classified once and the factor is derived from that
    classification, so the reported label always matches the formula used.

    Returns
    -------
    tuple
        (friction_factor, regime)
    """
    if config is None:
        config = DEFAULT_CONFIG

    regime = classify_regime(Re, config)
    return _friction_for_regime(Re, relative_roughness, regime, config), regime


def friction_factor(
    Re: float,
    relative_roughness: float,
    config: Optional[Config] = None,
) -> float:
    """
    Calculate Darcy friction factor using the appropriate regime.

    Parameters
    ----------
    Re : float
        Reynolds number [-]
    relative_roughness : float
        Relative roughness ε/D [-]
    config : Config, optional
        Configuration (regime thresholds)

    Returns
    -------
    float
        Darcy friction factor [-]; 0 for Re <= 0

    Notes
    -----
    - Re < 2300: Laminar flow (f = 64/Re)
    - 2300 <= Re < 4000: Transition regime (linear interpolation)
    - Re >= 4000: Turbulent flow (Swamee-Jain)
    """
    f, _ = friction_factor_and_regime(Re, relative_roughness, config)
    return f


def friction_pressure_loss(
    f: float,
    length: float,
    diameter: float,
    density: float,
    velocity: float,
    config: Optional[Config] = None,
) -> float:
    """
    Calculate friction pressure loss using the Darcy-Weisbach equation.

    hf = f * (L/D) * v²/(2g),  ΔP = ρ*g*hf

    Parameters
    ----------
    f : float
        Darcy friction factor [-]
    length : float
        Pipe length [m]
    diameter : float
        Pipe diameter [m]
    density : float
        Fluid density [kg/m³]
    velocity : float
        Flow velocity [m/s]

    Returns
    -------
    float
        Pressure loss [Pa]; 0 when the fluid is at rest
    """
    if config is None:
        config = DEFAULT_CONFIG
    if velocity == 0:
        return 0.0

    g = config.GRAVITY
    head_loss = f * (length / diameter) * (velocity ** 2 / (2.0 * g))
    return float(density * g * head_loss)
