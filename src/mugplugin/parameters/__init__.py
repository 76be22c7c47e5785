"""
Mug parameters - validated storage of the five mug dimensions.

Example:
    >>> from mugplugin.parameters import ParameterStore, get_preset
    >>> from mugplugin.enums import ParameterKind
    >>>
    >>> store = ParameterStore()  # seeded with the average preset
    >>> error = store.set_parameter_value(ParameterKind.THICKNESS, "50")
    >>> error.kind
    <ErrorKind.CONSTRAINT_VIOLATED: 'constraint_violated'>
    >>> store.is_fully_valid()
    False
    >>> store.apply_preset(get_preset("maximum"))
    []
"""

from .validation import (
    ParameterError,
    parse_value,
    check_range,
    check_constraints,
    validate_value,
    validate_parameter_set,
    CONSTRAINT_RULES,
)

from .presets import (
    Preset,
    PRESETS,
    MINIMUM,
    AVERAGE,
    MAXIMUM,
    get_preset,
    default_preset,
)

from .store import ParameterStore

from .output import (
    to_json,
    to_summary,
)

from ..enums import ParameterKind, ErrorKind


__all__ = [
    # Enums
    "ParameterKind",
    "ErrorKind",

    # Store
    "ParameterStore",

    # Validation
    "ParameterError",
    "parse_value",
    "check_range",
    "check_constraints",
    "validate_value",
    "validate_parameter_set",
    "CONSTRAINT_RULES",

    # Presets
    "Preset",
    "PRESETS",
    "MINIMUM",
    "AVERAGE",
    "MAXIMUM",
    "get_preset",
    "default_preset",

    # Output formatters
    "to_json",
    "to_summary",
]
