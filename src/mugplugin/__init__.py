"""
Mugplugin - validated mug parameters and parametric 3D model generation.

Holds the five mug dimensions, enforces their standalone and
cross-parameter constraints, and hands a fully valid set to a geometry
builder.

Example:
    >>> from mugplugin import ParameterStore, ParameterKind, request_build, StepFileBuilder
    >>>
    >>> store = ParameterStore()  # average preset
    >>> store.set_parameter_value(ParameterKind.DIAMETER, "90")
    >>> store.is_fully_valid()
    True
    >>> request_build(store, StepFileBuilder("mug.step"))

Note: All imports are lazy-loaded. The parameter model can be imported
without triggering geometry (build123d) imports.
"""

__version__ = "1.0.0"

# Define which names come from which submodule
# All imports are lazy to minimize startup time

_ENUMS = {"ParameterKind", "ErrorKind"}

_PARAMETERS = {
    "ParameterStore",
    "ParameterError",
    "validate_value",
    "validate_parameter_set",
    "Preset",
    "PRESETS",
    "get_preset",
    "to_json",
    "to_summary",
}

_IO = {
    "MugDesign",
    "ConstraintPolicy",
    "load_policy_json",
}

_CORE = {
    "BuildRejected",
    "MugBuilder",
    "StepFileBuilder",
    "request_build",
    "MugGeometry",
}

# Cache for lazy-loaded modules
_modules = {}


def __getattr__(name):
    """Lazy load submodules when their attributes are accessed."""
    global _modules

    if name in _ENUMS:
        if "enums" not in _modules:
            from . import enums
            _modules["enums"] = enums
        return getattr(_modules["enums"], name)

    if name in _PARAMETERS:
        if "parameters" not in _modules:
            from . import parameters
            _modules["parameters"] = parameters
        return getattr(_modules["parameters"], name)

    if name in _IO:
        if "io" not in _modules:
            from . import io
            _modules["io"] = io
        return getattr(_modules["io"], name)

    if name in _CORE:
        if "core" not in _modules:
            from . import core
            _modules["core"] = core
        return getattr(_modules["core"], name)

    raise AttributeError(f"module 'mugplugin' has no attribute {name!r}")


__all__ = [
    # Version
    "__version__",

    # Enums (lazy loaded from enums)
    "ParameterKind",
    "ErrorKind",

    # Parameters (lazy loaded from parameters)
    "ParameterStore",
    "ParameterError",
    "validate_value",
    "validate_parameter_set",
    "Preset",
    "PRESETS",
    "get_preset",
    "to_json",
    "to_summary",

    # IO (lazy loaded from io)
    "MugDesign",
    "ConstraintPolicy",
    "load_policy_json",

    # Build (lazy loaded from core)
    "BuildRejected",
    "MugBuilder",
    "StepFileBuilder",
    "request_build",
    "MugGeometry",
]
