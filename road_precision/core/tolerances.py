"""Tolerance constants for geometric calculations.

Centralizes all tolerance values used throughout the codebase for
consistency and easy tuning.
"""

# Minimum planar segment length (world units)
# Segments at or below this length have no usable direction
MIN_SEGMENT_LENGTH: float = 0.01

# Zero vector detection threshold
ZERO_MAGNITUDE: float = 1e-10

# Interior angles outside (MIN, MAX) are near-straight or collapsed
# and are never displayed
MIN_INTERIOR_ANGLE_DEG: float = 0.1
MAX_INTERIOR_ANGLE_DEG: float = 179.9

# Angle + supplement must equal 180 within this tolerance
SUPPLEMENT_TOLERANCE_DEG: float = 1e-4

# Slopes with a smaller magnitude (in percent) are reported as flat
FLAT_SLOPE_PERCENT: float = 0.05

# Paths shorter than this (world units) get no slope or midpoint
MIN_SLOPE_PATH_LENGTH: float = 12.0
