"""
Mugplugin Core - build collaborator and geometry generation.

Example:
    >>> from mugplugin.core import StepFileBuilder, request_build
    >>> from mugplugin.parameters import ParameterStore
    >>>
    >>> store = ParameterStore()
    >>> part = request_build(store, StepFileBuilder("mug.step"))
"""

# Builder interface is always available (no build123d dependency)
from .builder import BuildRejected, MugBuilder, StepFileBuilder, request_build

# Geometry classes require build123d - make import conditional
try:
    from .mug import MugGeometry
    from .geometry_base import BaseGeometry

    __all__ = [
        "BuildRejected",
        "MugBuilder",
        "StepFileBuilder",
        "request_build",
        "MugGeometry",
        "BaseGeometry",
    ]
except ImportError:
    # build123d not available: only the build hand-off is exposed
    __all__ = [
        "BuildRejected",
        "MugBuilder",
        "StepFileBuilder",
        "request_build",
    ]
