"""
Parameter store - the authoritative, validated set of mug dimensions.

The store is seeded from a preset, then edited one field at a time.
Rejected writes never touch the stored value; they only annotate the
field with an error message. A build is allowed when no field carries
an error.
"""

import logging
import threading
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional

from ..enums import ParameterKind
from ..io.loaders import ConstraintPolicy, MugDesign
from .presets import Preset, default_preset
from .validation import ParameterError, validate_parameter_set, validate_value

logger = logging.getLogger(__name__)


class ParameterStore:
    """
    Holds the five mug dimensions and their per-field error state.

    Every write runs a standalone range check followed by the
    cross-parameter rules against the other current values. The whole
    read-validate-commit sequence runs under one lock because the rules
    span fields.
    """

    def __init__(self, preset: Optional[Preset] = None,
                 policy: Optional[ConstraintPolicy] = None):
        """
        Initialize the store and apply the seed preset.

        Args:
            preset: Initial values (default: the average preset)
            policy: Validation bounds (default: ConstraintPolicy())

        Raises:
            ValueError: If the seed preset is rejected by the policy
        """
        self.policy = policy if policy is not None else ConstraintPolicy()
        self._lock = threading.Lock()
        self._values: Dict[ParameterKind, float] = {}
        self._errors: Dict[ParameterKind, str] = {kind: "" for kind in ParameterKind}

        seed = preset if preset is not None else default_preset()
        errors = self.apply_preset(seed)
        if errors:
            raise ValueError(
                f"Cannot initialize from preset '{seed.name}': {errors[0].message}"
            )

    @classmethod
    def from_preset(cls, preset: Preset,
                    policy: Optional[ConstraintPolicy] = None) -> "ParameterStore":
        return cls(preset=preset, policy=policy)

    def set_parameter_value(self, kind: ParameterKind, raw_value: Any) -> Optional[ParameterError]:
        """
        Validate and store one dimension.

        Args:
            kind: Dimension to set
            raw_value: Number or numeric text in millimetres

        Returns:
            None if accepted, otherwise the ParameterError. On rejection
            the previous value is kept and the field's error is recorded.
        """
        with self._lock:
            value, error = validate_value(kind, raw_value, self._values, self.policy)
            if error is not None:
                self._errors[kind] = error.message
                logger.info(f"Rejected {kind.label} = {raw_value!r}: {error.message}")
                return error

            self._values[kind] = value
            self._errors[kind] = ""
            logger.debug(f"Accepted {kind.label} = {value:g}mm")
            return None

    def apply_preset(self, preset: Preset) -> List[ParameterError]:
        """
        Apply all five values of a preset as one batch.

        Each value is checked against the rest of the preset rather than
        the current values, so switching between presets never trips a
        rule halfway through. The batch is all-or-nothing: if any value
        fails, no value changes and the failing fields carry errors.

        Returns:
            Empty list on success, otherwise one error per failing field
        """
        with self._lock:
            errors = validate_parameter_set(preset.values(), self.policy)
            if errors:
                for error in errors:
                    self._errors[error.parameter] = error.message
                logger.info(f"Rejected preset '{preset.name}' ({len(errors)} errors)")
                return errors

            self._values.update(preset.values())
            for kind in ParameterKind:
                self._errors[kind] = ""
            logger.debug(f"Applied preset '{preset.name}'")
            return []

    def is_fully_valid(self) -> bool:
        """True if no field carries an error. Does not re-run validation."""
        with self._lock:
            return all(message == "" for message in self._errors.values())

    def current_values(self) -> Mapping[ParameterKind, float]:
        """Read-only snapshot of the last accepted values."""
        with self._lock:
            return MappingProxyType(dict(self._values))

    def errors(self) -> Mapping[ParameterKind, str]:
        """Read-only snapshot of the per-field error messages ("" = no error)."""
        with self._lock:
            return MappingProxyType(dict(self._errors))

    def error_for(self, kind: ParameterKind) -> str:
        with self._lock:
            return self._errors[kind]

    def snapshot(self) -> MugDesign:
        """Current values as a MugDesign, for handing to a builder."""
        return MugDesign.from_values(self.current_values())

    def __repr__(self) -> str:
        values = ", ".join(
            f"{kind.name.lower()}={value:g}" for kind, value in self.current_values().items()
        )
        return f"ParameterStore({values}, valid={self.is_fully_valid()})"
