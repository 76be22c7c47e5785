"""Output formatters for the parameter store.

Renders the current values and per-field errors as JSON or as a plain
text table for the command line.
"""

import json

from ..enums import ParameterKind
from .store import ParameterStore


def to_json(store: ParameterStore, indent: int = 2) -> str:
    """Convert the store state to a JSON string.

    Output has the MugDesign fields under 'design', the non-empty error
    messages under 'errors' (keyed by field name) and a 'valid' flag.
    """
    design_dict = store.snapshot().model_dump(mode='json')
    errors = {
        kind.value: message
        for kind, message in store.errors().items()
        if message
    }
    output = {
        'design': design_dict,
        'errors': errors,
        'valid': store.is_fully_valid(),
    }
    return json.dumps(output, indent=indent)


def to_summary(store: ParameterStore) -> str:
    """Plain text table of values with inline errors."""
    values = store.current_values()
    errors = store.errors()
    width = max(len(kind.label) for kind in ParameterKind)

    lines = ["Mug parameters", "=" * 40]
    for kind in ParameterKind:
        line = f"  {kind.label.capitalize():<{width}}  {values[kind]:>8.2f} mm"
        if errors[kind]:
            line += f"  ✗ {errors[kind]}"
        lines.append(line)
    lines.append("")
    lines.append("Status: " + ("✓ valid" if store.is_fully_valid() else "✗ invalid"))
    return "\n".join(lines)
