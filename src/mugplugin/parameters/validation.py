"""
Mug Parameters - Validation Rules

Every assignment is checked in two stages:
- Standalone range check: the value alone, against absolute bounds
- Cross-parameter check: the value against the current other dimensions

Each cross-parameter rule is a small function that looks at a full
candidate set of values and returns an error message or None. Rules
declare which kinds they involve so that a single-field write only runs
the rules that field takes part in.

Validation never raises. Failures are returned as ParameterError values
attributed to the field being written. ParameterError is a plain value,
not an exception; pydantic.ValidationError is what a bad ConstraintPolicy
or policy file raises.
"""

import math
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, TYPE_CHECKING

from ..enums import ErrorKind, ParameterKind

# Import for type checking only (avoids circular imports at runtime)
if TYPE_CHECKING:
    from ..io.loaders import ConstraintPolicy

D = ParameterKind.DIAMETER
H = ParameterKind.HEIGHT
T = ParameterKind.THICKNESS
HL = ParameterKind.HANDLE_LENGTH
HD = ParameterKind.HANDLE_DIAMETER

Values = Mapping[ParameterKind, float]


@dataclass(frozen=True)
class ParameterError:
    """A rejected parameter value (returned, never raised)"""
    kind: ErrorKind
    parameter: ParameterKind  # Field the failed write targeted
    message: str
    related: Tuple[ParameterKind, ...] = ()  # Every kind named by the failed rule
    value: Any = None  # Raw input as given

    def __str__(self) -> str:
        return self.message


def parse_value(raw: Any) -> Optional[float]:
    """
    Parse user input into a finite float.

    Accepts ints, floats and numeric text (surrounding whitespace allowed).
    Booleans, None, NaN and infinities are not numbers here.

    Returns:
        The parsed value, or None if the input is not a finite number
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, str):
        raw = raw.strip()
        if not raw:
            return None
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(value):
        return None
    return value


def check_range(kind: ParameterKind, value: float,
                policy: "ConstraintPolicy") -> Optional[ParameterError]:
    """Standalone bound for a single dimension."""
    low = policy.min_dimension_mm
    high = policy.max_dimension_mm
    if low < value < high:
        return None
    return ParameterError(
        kind=ErrorKind.OUT_OF_RANGE,
        parameter=kind,
        message=(
            f"{kind.label.capitalize()} must be greater than {low:g}mm "
            f"and less than {high:g}mm (got {value:g}mm)"
        ),
        related=(kind,),
        value=value,
    )


# ---------------------------------------------------------------------------
# Cross-parameter rules
# ---------------------------------------------------------------------------

def _thickness_vs_diameter(v: Values, policy: "ConstraintPolicy") -> Optional[str]:
    limit = v[D] * policy.thickness_max_diameter_ratio
    if v[T] < limit:
        return None
    return (
        f"Wall thickness ({v[T]:g}mm) must be less than {limit:g}mm "
        f"for a {v[D]:g}mm diameter"
    )


def _thickness_vs_height(v: Values, policy: "ConstraintPolicy") -> Optional[str]:
    limit = v[H] * policy.thickness_max_height_ratio
    if v[T] < limit:
        return None
    return (
        f"Wall thickness ({v[T]:g}mm) leaves no cavity in a {v[H]:g}mm "
        f"tall mug (must be less than {limit:g}mm)"
    )


def _handle_length_vs_height(v: Values, policy: "ConstraintPolicy") -> Optional[str]:
    low = v[H] * policy.handle_length_min_height_ratio
    high = v[H] * policy.handle_length_max_height_ratio
    if low <= v[HL] <= high:
        return None
    return (
        f"Handle length ({v[HL]:g}mm) must be between {low:g}mm and "
        f"{high:g}mm for a {v[H]:g}mm tall mug"
    )


def _handle_length_vs_diameter(v: Values, policy: "ConstraintPolicy") -> Optional[str]:
    limit = v[D] * policy.handle_length_max_diameter_ratio
    if v[HL] <= limit:
        return None
    return (
        f"Handle length ({v[HL]:g}mm) must not exceed {limit:g}mm "
        f"for a {v[D]:g}mm diameter"
    )


def _handle_diameter_vs_height(v: Values, policy: "ConstraintPolicy") -> Optional[str]:
    # Leaves room for the grip tube above and below the loop
    limit = v[H] * policy.handle_diameter_max_height_ratio
    if v[HD] <= limit:
        return None
    return (
        f"Handle diameter ({v[HD]:g}mm) must not exceed {limit:g}mm "
        f"for a {v[H]:g}mm tall mug"
    )


def _handle_diameter_vs_diameter(v: Values, policy: "ConstraintPolicy") -> Optional[str]:
    limit = v[D] * policy.handle_diameter_max_diameter_ratio
    if v[HD] <= limit:
        return None
    return (
        f"Handle diameter ({v[HD]:g}mm) must not exceed {limit:g}mm "
        f"for a {v[D]:g}mm diameter"
    )


Rule = Callable[[Values, "ConstraintPolicy"], Optional[str]]

# (kinds involved, rule) in evaluation order
CONSTRAINT_RULES: Tuple[Tuple[Tuple[ParameterKind, ...], Rule], ...] = (
    ((T, D), _thickness_vs_diameter),
    ((T, H), _thickness_vs_height),
    ((HL, H), _handle_length_vs_height),
    ((HL, D), _handle_length_vs_diameter),
    ((HD, H), _handle_diameter_vs_height),
    ((HD, D), _handle_diameter_vs_diameter),
)


def check_constraints(kind: ParameterKind, value: float, values: Values,
                      policy: "ConstraintPolicy") -> Optional[ParameterError]:
    """
    Check one candidate value against the other dimensions.

    Args:
        kind: Dimension being written
        value: Candidate value for kind (already range checked)
        values: Current values of all dimensions
        policy: Bounds to apply

    Returns:
        The first violated rule as a ParameterError, or None
    """
    candidate: Dict[ParameterKind, float] = dict(values)
    candidate[kind] = value

    for kinds, rule in CONSTRAINT_RULES:
        if kind not in kinds:
            continue
        message = rule(candidate, policy)
        if message is not None:
            return ParameterError(
                kind=ErrorKind.CONSTRAINT_VIOLATED,
                parameter=kind,
                message=message,
                related=kinds,
                value=value,
            )
    return None


def validate_value(kind: ParameterKind, raw: Any, values: Values,
                   policy: "ConstraintPolicy") -> Tuple[Optional[float], Optional[ParameterError]]:
    """
    Run the full check sequence for a single write.

    Returns:
        (parsed value, None) on success, (None, error) on failure
    """
    value = parse_value(raw)
    if value is None:
        return None, ParameterError(
            kind=ErrorKind.UNPARSABLE,
            parameter=kind,
            message=f"{kind.label.capitalize()} must be a number (got {raw!r})",
            related=(kind,),
            value=raw,
        )

    error = check_range(kind, value, policy)
    if error is None:
        error = check_constraints(kind, value, values, policy)
    if error is not None:
        return None, error
    return value, None


def validate_parameter_set(values: Mapping[ParameterKind, Any],
                           policy: "ConstraintPolicy") -> List[ParameterError]:
    """
    Validate a complete set, each kind against the others in the same set.

    Used for batch writes (presets) and policy self-checks. A missing kind
    is reported as unparsable.

    Returns:
        One error per failing kind, in ParameterKind order
    """
    parsed: Dict[ParameterKind, Optional[float]] = {
        kind: parse_value(values.get(kind)) for kind in ParameterKind
    }
    # Cross checks need a number for every kind; unparsable entries are
    # reported on their own and excluded from the comparison set
    comparable = {kind: value for kind, value in parsed.items() if value is not None}

    errors: List[ParameterError] = []
    for kind in ParameterKind:
        raw = values.get(kind)
        if parsed[kind] is None:
            _, error = validate_value(kind, raw, comparable, policy)
            errors.append(error)
            continue
        if len(comparable) < len(ParameterKind):
            error = check_range(kind, parsed[kind], policy)
        else:
            _, error = validate_value(kind, raw, comparable, policy)
        if error is not None:
            errors.append(error)
    return errors
