"""
Base class for mugplugin geometry classes.

Provides shared export methods; subclasses supply build().
"""

import logging

logger = logging.getLogger(__name__)


class BaseGeometry:
    """Base class providing shared export methods for geometry classes.

    Subclasses must:
    - Set self._part = None in __init__
    - Implement build() -> Part
    - Set _part_name class attribute for log messages
    """

    _part_name: str = "part"

    def build(self):
        raise NotImplementedError

    def export_step(self, filepath: str):
        """Export to STEP file (builds if not already built)."""
        if self._part is None:
            self.build()

        logger.info(f"Exporting {self._part_name}: volume={self._part.volume:.2f} mm³")
        from build123d import export_step
        export_step(self._part, filepath)
        logger.info(f"Exported {self._part_name} to {filepath}")

    def export_stl(self, filepath: str):
        """Export to STL file (builds if not already built)."""
        if self._part is None:
            self.build()

        from build123d import export_stl
        export_stl(self._part, filepath)
        logger.info(f"Exported {self._part_name} to {filepath}")
