"""
Numerical constants for mug parameter validation.

This module centralizes every bound used by the validation rules and the
literal values of the built-in presets.

MODIFICATION GUIDELINES:
- Always include units in constant names (_MM) or mark ratios (_RATIO)
- Any change must keep all three presets valid (tests enforce this)
- Add new constants here rather than hardcoding in functions

Constants are grouped by category:
- Absolute bounds: standalone sanity range for every dimension
- Body proportions: wall versus body size
- Handle proportions: handle versus body size
- Presets: minimum / average / maximum literal sets
"""

from typing import Dict, Tuple

# =============================================================================
# Absolute bounds
# =============================================================================

# Every dimension must be strictly positive and below this physical bound.
# Values outside are treated as garbage input rather than as a design choice.
MIN_DIMENSION_MM: float = 0.0  # Exclusive
MAX_DIMENSION_MM: float = 1000.0  # Exclusive

# =============================================================================
# Body proportions
# =============================================================================

# Wall thickness must stay below this fraction of the diameter,
# i.e. thickness < radius, otherwise the wall consumes the interior.
THICKNESS_MAX_DIAMETER_RATIO: float = 0.5

# The floor has the same thickness as the wall; it must leave a cavity.
THICKNESS_MAX_HEIGHT_RATIO: float = 1.0

# =============================================================================
# Handle proportions
# =============================================================================
# Presets are built as handle length = 0.35 x height and
# handle diameter = 0.7 x height. The bounds below bracket them with margin.

# Handle length (how far the handle reaches out from the body)
HANDLE_LENGTH_MIN_HEIGHT_RATIO: float = 0.25  # Shorter cannot fit fingers
HANDLE_LENGTH_MAX_HEIGHT_RATIO: float = 1.0

# The handle loop is centred on the outer wall, so its inner half reaches
# radius - handle_length. Keep that at or beyond the axis so the loop
# never comes out through the opposite wall.
HANDLE_LENGTH_MAX_DIAMETER_RATIO: float = 0.5

# Grip tube radius as a fraction of the handle diameter
# (0.3 of the loop radius). The builder may thin it further on tight loops.
GRIP_RADIUS_MAX_HANDLE_RATIO: float = 0.15

# Largest handle diameter / height ratio for which the loop plus its grip
# tube (up to 1.3 x handle diameter tall) stays between floor and rim.
HANDLE_DIAMETER_HEIGHT_RATIO_LIMIT: float = 1.0 / (1.0 + 2.0 * GRIP_RADIUS_MAX_HANDLE_RATIO)

# Handle diameter (vertical span of the handle loop centreline)
HANDLE_DIAMETER_MAX_HEIGHT_RATIO: float = 0.75  # Loop + grip <= 0.975 x height
HANDLE_DIAMETER_MAX_DIAMETER_RATIO: float = 1.0

# =============================================================================
# Presets
# =============================================================================

# (diameter, height, thickness, handle_length, handle_diameter) in mm
PRESET_VALUES_MM: Dict[str, Tuple[float, float, float, float, float]] = {
    "minimum": (70.0, 85.0, 5.0, 29.75, 59.5),
    "average": (87.0, 95.0, 7.0, 33.25, 66.5),
    "maximum": (105.0, 130.0, 10.0, 45.5, 91.0),
}

# Applied when a store is created without an explicit preset
DEFAULT_PRESET_NAME: str = "average"

# =============================================================================
# Messages
# =============================================================================

# Shown when a build is requested while any field is in error
BUILD_REJECTED_MESSAGE: str = "Fill all required parameters correctly"
