"""
Build collaborator interface.

A builder receives a validated MugDesign and constructs geometry from it.
request_build() is the only gate between the parameter store and a
builder: it refuses to build while any field is in error.
"""

import logging
from pathlib import Path
from typing import Any, Optional, Union

from ..constants import BUILD_REJECTED_MESSAGE
from ..io.loaders import MugDesign

logger = logging.getLogger(__name__)


class BuildRejected(Exception):
    """Build requested while the parameter set is not fully valid"""

    def __init__(self, message: str = BUILD_REJECTED_MESSAGE):
        super().__init__(message)


class MugBuilder:
    """Narrow interface to whatever constructs the 3D model."""

    def build(self, design: MugDesign) -> Any:
        raise NotImplementedError


class StepFileBuilder(MugBuilder):
    """
    Builds the mug with build123d and optionally writes a STEP file.

    build123d is imported on first build so that the parameter model can
    be used without the geometry stack.
    """

    def __init__(self, output_path: Optional[Union[str, Path]] = None):
        self.output_path = Path(output_path) if output_path is not None else None

    def build(self, design: MugDesign):
        from .mug import MugGeometry

        geometry = MugGeometry(design)
        part = geometry.build()
        if self.output_path is not None:
            geometry.export_step(str(self.output_path))
        return part


def request_build(store, builder: MugBuilder) -> Any:
    """
    Hand the current parameter set to a builder if it is fully valid.

    Args:
        store: ParameterStore holding the edited values
        builder: Collaborator that constructs the geometry

    Returns:
        Whatever the builder returns

    Raises:
        BuildRejected: If any field currently carries an error
        Exception: Builder failures propagate unchanged
    """
    if not store.is_fully_valid():
        logger.info("Build rejected: parameter set has errors")
        raise BuildRejected()

    design = store.snapshot()
    logger.info(f"Requesting build from {type(builder).__name__}")
    return builder.build(design)
