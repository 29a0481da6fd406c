"""
Wellbore geometry for vertical injection strings.

Segments are ordered top-to-bottom (surface to depth). When the tubing does
not reach total depth, the remaining interval is represented by a synthetic
open-hole segment flagged with ``open_hole=True``.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence

import numpy as np

from .config import Config, DEFAULT_CONFIG


class ConfigurationError(ValueError):
    """Well geometry that cannot be evaluated (bad diameter, missing open hole)."""


@dataclass(frozen=True)
class Segment:
    """
    Tubing section of the injection string.

    Attributes
    ----------
    id : int
        Identifier, unique within a request.
    diameter : float
        Inner diameter [mm].
    length : float
        Section length [m].
    roughness : float
        Absolute wall roughness [mm].
    open_hole : bool
        True only for the synthetic open-hole stage below the tubing.
    """
    id: int
    diameter: float
    length: float
    roughness: float
    open_hole: bool = False


@dataclass(frozen=True)
class TubingPreset:
    """Standard API tubing size with its nominal inner diameter [mm]."""
    name: str
    inner_diameter: float


API_TUBING_SIZES = (
    TubingPreset('2 3/8" (4.7 lb/ft)', 50.4),
    TubingPreset('2 7/8" (6.5 lb/ft)', 62.0),
    TubingPreset('3 1/2" (9.3 lb/ft)', 76.0),
    TubingPreset('4 1/2" (12.75 lb/ft)', 100.5),
)

# Commercial steel tubing [mm]
DEFAULT_TUBING_ROUGHNESS = 0.046


def cross_sectional_area(diameter: float) -> float:
    """
    Flow area of a circular section.

    Parameters
    ----------
    diameter : float
        Inner diameter [m]

    Returns
    -------
    float
        Area [m²]
    """
    return float(np.pi * (diameter / 2.0) ** 2)


def total_tubing_length(segments: Sequence[Segment]) -> float:
    """Sum of segment lengths [m]."""
    return float(sum(seg.length or 0.0 for seg in segments))


def open_hole_length(segments: Sequence[Segment], well_depth: float) -> float:
    """Depth interval below the tubing [m], never negative."""
    return max(0.0, well_depth - total_tubing_length(segments))


def has_open_hole(
    segments: Sequence[Segment],
    well_depth: float,
    config: Optional[Config] = None,
) -> bool:
    """Whether the well depth implies an open-hole section."""
    if config is None:
        config = DEFAULT_CONFIG
    return open_hole_length(segments, well_depth) > config.OPEN_HOLE_TOLERANCE


def build_effective_segments(
    segments: Sequence[Segment],
    well_depth: float,
    open_hole_diameter: float,
    config: Optional[Config] = None,
) -> List[Segment]:
    """
    Segment chain used for the pressure march.

    The user segments in order, followed by an open-hole segment when the
    well is deeper than the tubing by more than ``OPEN_HOLE_TOLERANCE``.

    Parameters
    ----------
    segments : sequence of Segment
        User segments, top to bottom
    well_depth : float
        Total well depth [m]
    open_hole_diameter : float
        Open-hole diameter [mm]; only read when an open hole is implied
    config : Config, optional
        Configuration (tolerance and open-hole roughness)

    Returns
    -------
    list of Segment

    Raises
    ------
    ConfigurationError
        If an open hole is implied and ``open_hole_diameter`` is not positive.
    """
    if config is None:
        config = DEFAULT_CONFIG

    effective = list(segments)
    if has_open_hole(segments, well_depth, config):
        if open_hole_diameter <= 0:
            raise ConfigurationError("Open hole diameter must be a positive value.")
        effective.append(Segment(
            id=next_segment_id(segments),
            diameter=open_hole_diameter,
            length=open_hole_length(segments, well_depth),
            roughness=config.OPEN_HOLE_ROUGHNESS,
            open_hole=True,
        ))
    return effective


def next_segment_id(segments: Sequence[Segment]) -> int:
    """Smallest id above every existing one (1 for an empty string)."""
    if not segments:
        return 1
    return max(seg.id for seg in segments) + 1


def segment_from_preset(
    preset: TubingPreset,
    segment_id: int,
    length: float = 100.0,
    roughness: float = DEFAULT_TUBING_ROUGHNESS,
) -> Segment:
    """Create a tubing segment from an API size."""
    return Segment(
        id=segment_id,
        diameter=preset.inner_diameter,
        length=length,
        roughness=roughness,
    )
