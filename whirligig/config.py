# whirligig/config.py
"""
Central constants for the blade designer.

All lengths are inches. The physics thresholds below are calibrated for the
fixed hub geometry and the inch unit system; converting the internal unit
means re-deriving them, not just scaling inputs.
"""
from __future__ import annotations

# ---- units & scales -----------------------------------------------------------
IN_TO_MM: float = 25.4
SCREEN_SCALE: float = 40.0      # on-screen preview, px per inch
EXPORT_DPI: int = 150           # raster template resolution

# ---- hub / physics ------------------------------------------------------------
HUB_DIAMETER: float = 3.5
HUB_RADIUS: float = HUB_DIAMETER / 2
HUB_PITCH_DEG: float = 25.0     # recommended hub angle for printed hubs
N_SLICES: int = 60              # midpoint-rule slices along the exposed blade
EPS: float = 0.001              # floor for divisions by length / area

MIN_PROFILE_LENGTH: float = 0.1  # floor on L inside the width function
MIN_SWELL_SPAN: float = 0.001
MIN_TIP_ARC: float = 0.01

# ---- balance band & ratings ---------------------------------------------------
SWEET_START_FRAC: float = 0.35
SWEET_END_FRAC: float = 0.42
TORQUE_CG_REF: float = 40.0
TORQUE_PITCH_REF: float = 0.42
TORQUE_LOW_ABOVE: float = 1.2
TORQUE_MODERATE_ABOVE: float = 0.9
FLYWHEEL_NORM: float = 100.0
FLYWHEEL_HIGH_ABOVE: float = 14.0
FLYWHEEL_STEADY_ABOVE: float = 8.0

# ---- path synthesis -----------------------------------------------------------
LEAF_ROOT_CTRL: float = 0.5     # C1 first control point, fraction of swell x
LEAF_SWELL_CTRL: float = 0.85   # C1 second control point, fraction of swell x
ROUNDED_CURVATURE_GAIN: float = 2.5   # inches of control offset per unit edge curvature
ROUNDED_ARC_MAX_FRAC: float = 0.3

# ---- export layout ------------------------------------------------------------
SVG_MARGIN: float = 0.5         # per side, inches
SVG_STROKE: float = 0.01
RASTER_MARGIN: float = 1.0      # per side, inches
RASTER_LINE_PX: float = 3.0
JPEG_QUALITY: int = 98
SCALE_BAR_COLOR: str = "#64748b"

# ---- presets (calibrated for the 35-42% balance range) -----------------------
PRESETS = {
    "leaf": {
        "root_width": 1.75,
        "tip_width": 2.5,
        "tip_radius": 0.65,
        "width_position": 0.6,
        "taper_sharpness": 0.4,
        "edge_curvature": 0.5,
    },
    "rounded": {
        "root_width": 2.5,
        "tip_width": 1.25,
        "tip_radius": 0.5,
        "width_position": 0.5,
        "taper_sharpness": 0.5,
        "edge_curvature": 0.38,
    },
}

DEFAULT_SHARED = {
    "exposed_length": 10.5,
    "tab_length": 1.0,
    "tab_width": 2.25,
    "kerf_offset": 0.005,
}

DEFAULT_PIN_HOLE = {
    "present": True,
    "diameter": 0.125,
    "offset_from_hub": 0.5,
}
