"""Type-safe enums for mug parameters and validation outcomes."""

from enum import Enum


class ParameterKind(Enum):
    """One of the five mug dimensions (all in millimetres)"""
    DIAMETER = "diameter_mm"
    HEIGHT = "height_mm"
    THICKNESS = "thickness_mm"
    HANDLE_LENGTH = "handle_length_mm"
    HANDLE_DIAMETER = "handle_diameter_mm"

    @property
    def label(self) -> str:
        """Human readable name, e.g. 'handle length'."""
        return self.name.lower().replace("_", " ")


class ErrorKind(Enum):
    """Why a parameter value was rejected"""
    UNPARSABLE = "unparsable"  # Not a finite number
    OUT_OF_RANGE = "out_of_range"  # Fails the standalone bound for its kind
    CONSTRAINT_VIOLATED = "constraint_violated"  # Breaks a cross-parameter rule
