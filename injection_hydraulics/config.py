"""
Centralized configuration for disposal-well injection hydraulics.

All constants in one place. Units are SI (meters, kg, seconds, Pascals)
unless otherwise noted; segment geometry is given in millimeters and
pressures at the public boundary in kPa.

Configuration Groups:
    - Physics: Gravity, time conversion
    - Flow regimes: Reynolds number thresholds
    - Losses: Entry, contraction and open-hole coefficients
    - Classification: Erosion velocity and capacity thresholds
    - Input limits: Practical bounds checked by the validation module
"""

from dataclasses import dataclass


@dataclass
class Config:
    """
    Centralized configuration with all constants for well hydraulics.

    Attributes
    ----------
    Physics:
        GRAVITY : float
            Gravitational acceleration [m/s²] (default: 9.81)
        SECONDS_PER_DAY : float
            Conversion factor m³/day -> m³/s (default: 86400)

    Flow regimes:
        LAMINAR_FLOW_LIMIT : float
            Reynolds number below which flow is laminar (default: 2300)
        TURBULENT_FLOW_START : float
            Reynolds number from which flow is turbulent (default: 4000)
        MIN_RELATIVE_ROUGHNESS : float
            Floor for ε/D inside the Swamee-Jain logarithm (default: 1e-10)

    Losses:
        ENTRY_LOSS_COEFFICIENT : float
            Sharp-edged inlet loss coefficient K [-] (default: 0.5)
        CONTRACTION_BASE : float
            Constant term of the contraction coefficient Cc (default: 0.62)
        CONTRACTION_SLOPE : float
            Area-ratio term of the contraction coefficient Cc (default: 0.38)
        OPEN_HOLE_ROUGHNESS : float
            Absolute roughness assumed for open hole [mm] (default: 0.5)
        OPEN_HOLE_TOLERANCE : float
            Residual depth above which an open hole is implied [m] (default: 0.1)

    Classification (API RP 14E based):
        VELOCITY_WARNING_LIMIT : float
            Elevated erosion risk velocity [m/s] (default: 20)
        VELOCITY_ERROR_LIMIT : float
            Critical erosion velocity [m/s] (default: 25)
        CAPACITY_WARNING_FRACTION : float
            Fraction of max flow rate considered near the limit (default: 0.9)

    Input limits:
        Min/max pairs for flow rate [m³/day], well depth [m], pressure [kPa],
        diameter [mm], segment length [m], roughness [mm], density [kg/m³],
        viscosity [Pa·s] and the maximum number of segments.
    """

    # =========================================================================
    # Physics
    # =========================================================================
    GRAVITY: float = 9.81                   # m/s²
    SECONDS_PER_DAY: float = 86400.0        # s/day

    # =========================================================================
    # Flow regimes
    # =========================================================================
    LAMINAR_FLOW_LIMIT: float = 2300.0      # Re
    TURBULENT_FLOW_START: float = 4000.0    # Re
    MIN_RELATIVE_ROUGHNESS: float = 1e-10   # [-]

    # =========================================================================
    # Losses (Crane TP-410)
    # =========================================================================
    ENTRY_LOSS_COEFFICIENT: float = 0.5     # [-] sharp-edged inlet
    CONTRACTION_BASE: float = 0.62          # [-]
    CONTRACTION_SLOPE: float = 0.38         # [-]
    OPEN_HOLE_ROUGHNESS: float = 0.5        # mm
    OPEN_HOLE_TOLERANCE: float = 0.1        # m

    # =========================================================================
    # Classification
    # =========================================================================
    VELOCITY_WARNING_LIMIT: float = 20.0    # m/s
    VELOCITY_ERROR_LIMIT: float = 25.0      # m/s
    CAPACITY_WARNING_FRACTION: float = 0.9  # [-]

    # =========================================================================
    # Input limits
    # =========================================================================
    MIN_FLOW_RATE: float = 0.0              # m³/day
    MAX_FLOW_RATE: float = 10000.0          # m³/day
    MIN_WELL_DEPTH: float = 1.0             # m
    MAX_WELL_DEPTH: float = 10000.0         # m
    MIN_PRESSURE: float = 0.0               # kPa
    MAX_PRESSURE: float = 100000.0          # kPa (~1000 bar)
    MIN_DIAMETER: float = 10.0              # mm
    MAX_DIAMETER: float = 500.0             # mm
    MIN_SEGMENT_LENGTH: float = 0.1         # m
    MAX_SEGMENT_LENGTH: float = 5000.0      # m
    MIN_ROUGHNESS: float = 0.0              # mm
    MAX_ROUGHNESS: float = 10.0             # mm
    MIN_FLUID_DENSITY: float = 700.0        # kg/m³ (light oils)
    MAX_FLUID_DENSITY: float = 1500.0       # kg/m³ (heavy brines)
    MIN_FLUID_VISCOSITY: float = 0.0001     # Pa·s (water-like)
    MAX_FLUID_VISCOSITY: float = 1.0        # Pa·s (heavy oils)
    MAX_SEGMENTS: int = 20

    # =========================================================================
    # Derived Properties
    # =========================================================================
    @property
    def TRANSITION_WIDTH(self) -> float:
        """Width of the transitional Reynolds band [-]."""
        return self.TURBULENT_FLOW_START - self.LAMINAR_FLOW_LIMIT

    @property
    def LAMINAR_FRICTION_AT_LIMIT(self) -> float:
        """Laminar friction factor at the upper laminar limit [-]."""
        return 64.0 / self.LAMINAR_FLOW_LIMIT

    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.GRAVITY <= 0:
            raise ValueError(f"GRAVITY ({self.GRAVITY}) must be positive.")

        if self.SECONDS_PER_DAY <= 0:
            raise ValueError(f"SECONDS_PER_DAY ({self.SECONDS_PER_DAY}) must be positive.")

        if not 0 < self.LAMINAR_FLOW_LIMIT < self.TURBULENT_FLOW_START:
            raise ValueError(
                f"LAMINAR_FLOW_LIMIT ({self.LAMINAR_FLOW_LIMIT}) must be positive and "
                f"< TURBULENT_FLOW_START ({self.TURBULENT_FLOW_START})."
            )

        if self.VELOCITY_WARNING_LIMIT > self.VELOCITY_ERROR_LIMIT:
            raise ValueError(
                f"VELOCITY_WARNING_LIMIT ({self.VELOCITY_WARNING_LIMIT} m/s) must be <= "
                f"VELOCITY_ERROR_LIMIT ({self.VELOCITY_ERROR_LIMIT} m/s)."
            )

        if not 0 < self.CAPACITY_WARNING_FRACTION <= 1:
            raise ValueError("CAPACITY_WARNING_FRACTION must be in (0, 1].")

        bounds = (
            ("FLOW_RATE", self.MIN_FLOW_RATE, self.MAX_FLOW_RATE),
            ("WELL_DEPTH", self.MIN_WELL_DEPTH, self.MAX_WELL_DEPTH),
            ("PRESSURE", self.MIN_PRESSURE, self.MAX_PRESSURE),
            ("DIAMETER", self.MIN_DIAMETER, self.MAX_DIAMETER),
            ("SEGMENT_LENGTH", self.MIN_SEGMENT_LENGTH, self.MAX_SEGMENT_LENGTH),
            ("ROUGHNESS", self.MIN_ROUGHNESS, self.MAX_ROUGHNESS),
            ("FLUID_DENSITY", self.MIN_FLUID_DENSITY, self.MAX_FLUID_DENSITY),
            ("FLUID_VISCOSITY", self.MIN_FLUID_VISCOSITY, self.MAX_FLUID_VISCOSITY),
        )
        for name, low, high in bounds:
            if low > high:
                raise ValueError(f"MIN_{name} ({low}) must be <= MAX_{name} ({high}).")

        if self.MAX_SEGMENTS < 1:
            raise ValueError("MAX_SEGMENTS must be at least 1.")


# Default configuration instance
DEFAULT_CONFIG = Config()
