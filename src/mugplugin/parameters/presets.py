"""
Named parameter presets.

A preset is a complete, internally consistent set of the five mug
dimensions that can be applied in one batch.
"""

from typing import Dict

from pydantic import BaseModel, ConfigDict, Field

from ..constants import DEFAULT_PRESET_NAME, PRESET_VALUES_MM
from ..enums import ParameterKind


class Preset(BaseModel):
    """A named literal set of mug dimensions (millimetres)."""
    model_config = ConfigDict(frozen=True, extra='ignore')

    name: str = "custom"
    diameter: float = Field(gt=0)
    height: float = Field(gt=0)
    thickness: float = Field(gt=0)
    handle_length: float = Field(gt=0)
    handle_diameter: float = Field(gt=0)

    def values(self) -> Dict[ParameterKind, float]:
        """Return the dimensions keyed by ParameterKind."""
        return {
            ParameterKind.DIAMETER: self.diameter,
            ParameterKind.HEIGHT: self.height,
            ParameterKind.THICKNESS: self.thickness,
            ParameterKind.HANDLE_LENGTH: self.handle_length,
            ParameterKind.HANDLE_DIAMETER: self.handle_diameter,
        }


def _preset(name: str) -> Preset:
    diameter, height, thickness, handle_length, handle_diameter = PRESET_VALUES_MM[name]
    return Preset(
        name=name,
        diameter=diameter,
        height=height,
        thickness=thickness,
        handle_length=handle_length,
        handle_diameter=handle_diameter,
    )


MINIMUM = _preset("minimum")
AVERAGE = _preset("average")
MAXIMUM = _preset("maximum")

PRESETS: Dict[str, Preset] = {
    "minimum": MINIMUM,
    "average": AVERAGE,
    "maximum": MAXIMUM,
}


def get_preset(name: str) -> Preset:
    """
    Look up a built-in preset by name (case-insensitive).

    Raises:
        ValueError: If no preset has that name
    """
    key = name.strip().lower()
    if key not in PRESETS:
        raise ValueError(
            f"Unknown preset {name!r}. Must be one of {', '.join(PRESETS)}"
        )
    return PRESETS[key]


def default_preset() -> Preset:
    return PRESETS[DEFAULT_PRESET_NAME]
