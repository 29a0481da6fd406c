"""
Plots of injection-string hydraulics.

1. Pressure profile: inlet/outlet pressure against depth
2. Segment losses: friction and minor losses next to hydrostatic gain
"""

from typing import Optional, Tuple

import numpy as np
import matplotlib.pyplot as plt

from .hydraulics import CalculationResults


def plot_pressure_profile(
    results: CalculationResults,
    target_pressure: Optional[float] = None,
    ax: Optional[plt.Axes] = None,
    figsize: Tuple[float, float] = (6, 8),
) -> plt.Figure:
    """
    Plot pressure against depth through the reported segments.

    Parameters
    ----------
    results : CalculationResults
        Output of ``calculate_pressure_drop``
    target_pressure : float, optional
        Target bottomhole pressure [kPa], drawn as a vertical reference line
    ax : plt.Axes, optional
        Axes to plot on (creates new figure if None)
    figsize : tuple, optional
        Figure size

    Returns
    -------
    plt.Figure
        The figure object
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    depths = []
    pressures = []
    for seg in results.segments:
        depths.extend([seg.depth_from, seg.depth_to])
        pressures.extend([seg.inlet_pressure, seg.outlet_pressure])

    ax.plot(pressures, depths, color='tab:blue', marker='o', markersize=4, label='Tubing')

    # Segment boundaries
    for seg in results.segments:
        ax.axhline(seg.depth_to, color='gray', linestyle=':', linewidth=0.8)

    if target_pressure is not None:
        ax.axvline(target_pressure, color='red', linestyle='--', label=f'Target = {target_pressure:.0f} kPa')

    ax.invert_yaxis()
    ax.set_xlabel('Pressure [kPa]')
    ax.set_ylabel('Depth [m]')
    ax.set_title('Injection String Pressure Profile')
    ax.grid(True, alpha=0.3)
    ax.legend(loc='best')

    return fig


def plot_segment_losses(
    results: CalculationResults,
    ax: Optional[plt.Axes] = None,
    figsize: Tuple[float, float] = (8, 5),
) -> plt.Figure:
    """
    Bar plot of pressure terms per segment.

    Friction and minor losses are stacked; hydrostatic gain is drawn beside
    them for comparison.

    Returns
    -------
    plt.Figure
        The figure object
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    labels = [f'S{seg.segment_number}' for seg in results.segments]
    x = np.arange(len(labels))
    width = 0.38

    friction = np.array([seg.friction_loss for seg in results.segments])
    minor = np.array([seg.minor_loss for seg in results.segments])
    hydro = np.array([seg.hydrostatic_gain for seg in results.segments])

    ax.bar(x - width / 2, friction, width, color='tab:red', label='Friction loss')
    ax.bar(x - width / 2, minor, width, bottom=friction, color='tab:orange', label='Minor loss')
    ax.bar(x + width / 2, hydro, width, color='tab:blue', alpha=0.7, label='Hydrostatic gain')

    ax.set_xticks(x)
    ax.set_xticklabels(labels)
    ax.set_ylabel('Pressure [kPa]')
    ax.set_title('Pressure Terms by Segment')
    ax.grid(True, axis='y', alpha=0.3)
    ax.legend(loc='best')

    return fig
