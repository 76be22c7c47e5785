"""
Typed models for mug designs and constraint policies.

MugDesign is the validated snapshot handed to a geometry builder.
ConstraintPolicy carries the configurable validation bounds and can be
loaded from a JSON file.

Uses Pydantic for automatic validation and coercion.
"""

import json
from pathlib import Path
from typing import Dict, Mapping, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..enums import ParameterKind
from .. import constants


class MugDesign(BaseModel):
    """Complete set of mug dimensions in millimetres."""
    model_config = ConfigDict(frozen=True, extra='ignore')

    diameter_mm: float = Field(gt=0)
    height_mm: float = Field(gt=0)
    thickness_mm: float = Field(gt=0)
    handle_length_mm: float = Field(gt=0)
    handle_diameter_mm: float = Field(gt=0)

    @classmethod
    def from_values(cls, values: Mapping[ParameterKind, float]) -> "MugDesign":
        """Build from a ParameterKind -> value mapping."""
        return cls(**{kind.value: value for kind, value in values.items()})

    def values(self) -> Dict[ParameterKind, float]:
        """Return the dimensions keyed by ParameterKind."""
        return {kind: getattr(self, kind.value) for kind in ParameterKind}

    @property
    def radius_mm(self) -> float:
        return self.diameter_mm / 2

    @property
    def inner_diameter_mm(self) -> float:
        return self.diameter_mm - 2 * self.thickness_mm


class ConstraintPolicy(BaseModel):
    """
    Bounds used by the parameter validation rules.

    Defaults come from mugplugin.constants. A policy must accept every
    built-in preset; one that does not is rejected on construction.
    """
    model_config = ConfigDict(frozen=True, extra='ignore')

    min_dimension_mm: float = Field(default=constants.MIN_DIMENSION_MM, ge=0)
    max_dimension_mm: float = Field(default=constants.MAX_DIMENSION_MM, gt=0)
    thickness_max_diameter_ratio: float = Field(
        default=constants.THICKNESS_MAX_DIAMETER_RATIO, gt=0, le=0.5
    )
    thickness_max_height_ratio: float = Field(
        default=constants.THICKNESS_MAX_HEIGHT_RATIO, gt=0, le=1.0
    )
    handle_length_min_height_ratio: float = Field(
        default=constants.HANDLE_LENGTH_MIN_HEIGHT_RATIO, ge=0
    )
    handle_length_max_height_ratio: float = Field(
        default=constants.HANDLE_LENGTH_MAX_HEIGHT_RATIO, gt=0
    )
    handle_length_max_diameter_ratio: float = Field(
        default=constants.HANDLE_LENGTH_MAX_DIAMETER_RATIO, gt=0, le=0.5
    )
    handle_diameter_max_height_ratio: float = Field(
        default=constants.HANDLE_DIAMETER_MAX_HEIGHT_RATIO, gt=0,
        le=constants.HANDLE_DIAMETER_HEIGHT_RATIO_LIMIT
    )
    handle_diameter_max_diameter_ratio: float = Field(
        default=constants.HANDLE_DIAMETER_MAX_DIAMETER_RATIO, gt=0
    )

    @model_validator(mode='after')
    def check_consistent(self):
        if self.min_dimension_mm >= self.max_dimension_mm:
            raise ValueError(
                f"min_dimension_mm ({self.min_dimension_mm}) must be less than "
                f"max_dimension_mm ({self.max_dimension_mm})"
            )
        if self.handle_length_min_height_ratio > self.handle_length_max_height_ratio:
            raise ValueError(
                f"handle_length_min_height_ratio ({self.handle_length_min_height_ratio}) "
                f"exceeds handle_length_max_height_ratio ({self.handle_length_max_height_ratio})"
            )

        # Deferred: the parameters package imports this module
        from ..parameters.validation import validate_parameter_set
        from ..parameters.presets import PRESETS

        for name, preset in PRESETS.items():
            errors = validate_parameter_set(preset.values(), self)
            if errors:
                raise ValueError(
                    f"Policy rejects the '{name}' preset: {errors[0].message}"
                )
        return self


def load_policy_json(filepath: Union[str, Path]) -> ConstraintPolicy:
    """
    Load a constraint policy from a JSON file.

    Missing fields take their defaults, unknown fields are ignored.

    Args:
        filepath: Path to JSON file

    Returns:
        ConstraintPolicy

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If the file is not a JSON object
        pydantic.ValidationError: If a bound is invalid or rejects a preset
    """
    filepath = Path(filepath)

    if not filepath.exists():
        raise FileNotFoundError(f"Policy file not found: {filepath}")

    with open(filepath, 'r') as f:
        data = json.load(f)

    # Accept a 'policy' wrapper
    if isinstance(data, dict) and 'policy' in data:
        data = data['policy']

    if not isinstance(data, dict):
        raise ValueError("Invalid policy JSON - expected an object of bounds")

    return ConstraintPolicy.model_validate(data)
