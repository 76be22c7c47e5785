"""
Unit tests for mug parameter validation internals.

Tests call the validation functions directly with plain dict inputs.
No store, no geometry.
"""

import math
import pytest

from mugplugin.enums import ErrorKind, ParameterKind
from mugplugin.parameters.validation import (
    CONSTRAINT_RULES,
    ParameterError,
    check_constraints,
    check_range,
    parse_value,
    validate_parameter_set,
    validate_value,
)

D = ParameterKind.DIAMETER
H = ParameterKind.HEIGHT
T = ParameterKind.THICKNESS
HL = ParameterKind.HANDLE_LENGTH
HD = ParameterKind.HANDLE_DIAMETER


# ---------------------------------------------------------------------------
# parse_value
# ---------------------------------------------------------------------------

class TestParseValue:
    """Input normalisation."""

    @pytest.mark.parametrize("raw, expected", [
        (87, 87.0),
        (33.25, 33.25),
        ("95", 95.0),
        (" 66.5 ", 66.5),
        ("-5", -5.0),
        ("1e2", 100.0),
    ])
    def test_numbers(self, raw, expected):
        assert parse_value(raw) == expected

    @pytest.mark.parametrize("raw", [
        "", "   ", "abc", "12mm", "1,5", None, True, False,
        "nan", "inf", "-inf", float("nan"), math.inf, [1], {},
    ])
    def test_not_numbers(self, raw):
        """Garbage is never coerced to zero or a previous value."""
        assert parse_value(raw) is None


# ---------------------------------------------------------------------------
# check_range
# ---------------------------------------------------------------------------

class TestCheckRange:
    """Standalone absolute bounds."""

    @pytest.mark.parametrize("kind", list(ParameterKind))
    def test_in_range(self, kind, policy):
        assert check_range(kind, 50.0, policy) is None

    @pytest.mark.parametrize("value", [-5.0, 0.0, 1000.0, 5000.0])
    def test_out_of_range(self, value, policy):
        error = check_range(D, value, policy)
        assert error is not None
        assert error.kind == ErrorKind.OUT_OF_RANGE
        assert error.parameter == D
        assert error.related == (D,)
        assert "Diameter" in error.message

    def test_just_inside_bounds(self, policy):
        assert check_range(H, 0.001, policy) is None
        assert check_range(H, 999.999, policy) is None


# ---------------------------------------------------------------------------
# check_constraints
# ---------------------------------------------------------------------------

class TestThicknessConstraints:
    """Wall thickness against diameter and height."""

    def test_thickness_below_radius(self, average_values, policy):
        assert check_constraints(T, 43.4, average_values, policy) is None

    def test_thickness_equal_to_radius(self, average_values, policy):
        """Diameter 87 -> thickness must be strictly below 43.5."""
        error = check_constraints(T, 43.5, average_values, policy)
        assert error.kind == ErrorKind.CONSTRAINT_VIOLATED
        assert error.parameter == T
        assert set(error.related) == {T, D}

    def test_thickness_above_radius(self, average_values, policy):
        error = check_constraints(T, 50.0, average_values, policy)
        assert error.kind == ErrorKind.CONSTRAINT_VIOLATED
        assert "43.5" in error.message

    def test_diameter_shrunk_below_wall(self, average_values, policy):
        """Shrinking the diameter is checked against the current wall."""
        error = check_constraints(D, 14.0, average_values, policy)
        assert error.parameter == D
        assert set(error.related) == {T, D}

    def test_thickness_fills_height(self, policy):
        values = {D: 500.0, H: 20.0, T: 5.0, HL: 10.0, HD: 20.0}
        error = check_constraints(T, 20.0, values, policy)
        assert error.kind == ErrorKind.CONSTRAINT_VIOLATED
        assert set(error.related) == {T, H}


class TestHandleConstraints:
    """Handle proportions against the body."""

    def test_handle_length_too_short(self, average_values, policy):
        """Height 95 -> handle length at least 23.75."""
        error = check_constraints(HL, 20.0, average_values, policy)
        assert error.kind == ErrorKind.CONSTRAINT_VIOLATED
        assert set(error.related) == {HL, H}

    def test_handle_length_at_minimum(self, average_values, policy):
        assert check_constraints(HL, 23.75, average_values, policy) is None

    def test_handle_length_too_long(self, average_values, policy):
        error = check_constraints(HL, 100.0, average_values, policy)
        assert set(error.related) == {HL, H}

    def test_handle_length_past_axis(self, policy):
        """A loop centred on the wall must not reach beyond the mug axis."""
        values = {D: 40.0, H: 150.0, T: 5.0, HL: 20.0, HD: 40.0}
        error = check_constraints(HL, 100.0, values, policy)
        assert error.kind == ErrorKind.CONSTRAINT_VIOLATED
        assert set(error.related) == {HL, D}
        assert "20mm" in error.message

    def test_handle_length_up_to_radius(self, policy):
        values = {D: 40.0, H: 60.0, T: 5.0, HL: 20.0, HD: 40.0}
        assert check_constraints(HL, 20.0, values, policy) is None
        error = check_constraints(HL, 20.5, values, policy)
        assert set(error.related) == {HL, D}

    def test_diameter_shrunk_below_handle_reach(self, average_values, policy):
        """Handle length 33.25 needs a diameter of at least 66.5."""
        average_values[HD] = 50.0
        error = check_constraints(D, 60.0, average_values, policy)
        assert error.parameter == D
        assert set(error.related) == {HL, D}

    def test_handle_diameter_taller_than_mug(self, policy):
        values = {D: 200.0, H: 60.0, T: 5.0, HL: 20.0, HD: 40.0}
        error = check_constraints(HD, 61.0, values, policy)
        assert set(error.related) == {HD, H}

    def test_handle_diameter_leaves_room_for_grip(self, policy):
        """Height 95 -> handle diameter at most 71.25, not the full height."""
        values = {D: 100.0, H: 95.0, T: 7.0, HL: 33.25, HD: 66.5}
        assert check_constraints(HD, 71.25, values, policy) is None
        error = check_constraints(HD, 95.0, values, policy)
        assert error.kind == ErrorKind.CONSTRAINT_VIOLATED
        assert set(error.related) == {HD, H}

    def test_handle_diameter_wider_than_mug(self, policy):
        """Height 200 allows 150; diameter 87 does not."""
        values = {D: 87.0, H: 200.0, T: 7.0, HL: 60.0, HD: 66.5}
        error = check_constraints(HD, 90.0, values, policy)
        assert set(error.related) == {HD, D}

    def test_height_shrunk_below_handle(self, average_values, policy):
        error = check_constraints(H, 40.0, average_values, policy)
        assert error.parameter == H
        assert set(error.related) == {HD, H}


class TestConstraintRules:
    """Rule table sanity."""

    def test_every_kind_has_a_rule(self):
        covered = {kind for kinds, _ in CONSTRAINT_RULES for kind in kinds}
        assert covered == set(ParameterKind)

    def test_unrelated_rules_skipped(self, policy):
        """A diameter write does not trip a handle length / height rule."""
        values = {D: 87.0, H: 95.0, T: 7.0, HL: 20.0, HD: 66.5}
        assert check_constraints(D, 88.0, values, policy) is None
        assert check_constraints(HL, 20.0, values, policy) is not None


# ---------------------------------------------------------------------------
# validate_value
# ---------------------------------------------------------------------------

class TestValidateValue:
    """Full check sequence for one write."""

    def test_accepts_text(self, average_values, policy):
        value, error = validate_value(T, "8", average_values, policy)
        assert value == 8.0
        assert error is None

    def test_unparsable(self, average_values, policy):
        value, error = validate_value(T, "thick", average_values, policy)
        assert value is None
        assert error.kind == ErrorKind.UNPARSABLE
        assert error.value == "thick"

    def test_range_checked_before_constraints(self, average_values, policy):
        """-5 is out of range, not a constraint violation."""
        _, error = validate_value(T, -5, average_values, policy)
        assert error.kind == ErrorKind.OUT_OF_RANGE

    def test_constraint_violation(self, average_values, policy):
        _, error = validate_value(T, 50, average_values, policy)
        assert error.kind == ErrorKind.CONSTRAINT_VIOLATED

    def test_error_str_is_message(self, average_values, policy):
        _, error = validate_value(T, "x", average_values, policy)
        assert str(error) == error.message
        assert isinstance(error, ParameterError)

    def test_error_is_returned_not_raised(self):
        """Distinct from pydantic.ValidationError, which is an exception."""
        assert not issubclass(ParameterError, Exception)


# ---------------------------------------------------------------------------
# validate_parameter_set
# ---------------------------------------------------------------------------

class TestValidateParameterSet:
    """Batch validation of a complete set."""

    def test_presets_valid(self, any_preset, policy):
        assert validate_parameter_set(any_preset.values(), policy) == []

    def test_one_bad_value(self, average_values, policy):
        average_values[T] = 50.0
        errors = validate_parameter_set(average_values, policy)
        # Thickness breaks the wall rule; the others are judged against it too
        assert [e.parameter for e in errors] == [D, T]
        assert all(e.kind == ErrorKind.CONSTRAINT_VIOLATED for e in errors)

    def test_missing_kinds_unparsable(self, policy):
        errors = validate_parameter_set({D: 87.0}, policy)
        assert len(errors) == 4
        assert D not in [e.parameter for e in errors]
        assert all(e.kind == ErrorKind.UNPARSABLE for e in errors)

    def test_incomplete_set_range_checked(self, policy):
        errors = validate_parameter_set({D: -1.0, H: "x"}, policy)
        by_kind = {e.parameter: e.kind for e in errors}
        assert by_kind[D] == ErrorKind.OUT_OF_RANGE
        assert by_kind[H] == ErrorKind.UNPARSABLE
