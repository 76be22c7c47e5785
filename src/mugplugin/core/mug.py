"""
Mug geometry generation using build123d.

The body is a closed-bottom cylinder whose wall and floor share the wall
thickness. The handle is a round grip swept around an elliptical loop
standing on the side of the body: the loop reaches out by the handle
length and spans the handle diameter vertically. Only the path is
elliptical, so the grip keeps a circular cross-section.
"""

import logging

from build123d import Align, BuildSketch, Circle, Cylinder, Edge, Part, Plane, Pos, sweep

from .. import constants
from ..io.loaders import MugDesign
from .geometry_base import BaseGeometry

logger = logging.getLogger(__name__)

# Grip radius never exceeds this fraction of the tightest loop curvature radius,
# otherwise the swept tube folds into itself
GRIP_RADIUS_MAX_CURVATURE_RATIO = 0.5


class MugGeometry(BaseGeometry):
    """
    Generates 3D geometry for a mug.

    The mug stands on the XY plane with its axis along Z; the handle is on
    the +X side, in the XZ plane.
    """

    _part_name = "mug"

    def __init__(self, design: MugDesign):
        """
        Initialize mug geometry generator.

        Args:
            design: Validated mug dimensions
        """
        self.design = design
        self._part = None

    @property
    def grip_radius(self) -> float:
        """Radius of the handle tube cross-section."""
        d = self.design
        reach = d.handle_length_mm
        half_span = d.handle_diameter_mm / 2
        # Smallest radius of curvature of the ellipse, at the ends of its major axis
        tightest = min(reach, half_span) ** 2 / max(reach, half_span)
        return min(
            d.thickness_mm,
            d.handle_diameter_mm * constants.GRIP_RADIUS_MAX_HANDLE_RATIO,
            tightest * GRIP_RADIUS_MAX_CURVATURE_RATIO,
        )

    def build(self) -> Part:
        """
        Build the complete mug.

        Returns:
            build123d Part object ready for export
        """
        if self._part is not None:
            return self._part

        d = self.design
        bottom = (Align.CENTER, Align.CENTER, Align.MIN)

        outer = Cylinder(radius=d.radius_mm, height=d.height_mm, align=bottom)
        cavity = Pos(0, 0, d.thickness_mm) * Cylinder(
            radius=d.inner_diameter_mm / 2,
            height=d.height_mm - d.thickness_mm,
            align=bottom,
        )

        mug = outer + self._build_handle() - cavity

        self._part = mug
        logger.info(
            f"Built mug: diameter={d.diameter_mm:g}mm height={d.height_mm:g}mm "
            f"volume={mug.volume:.2f} mm³"
        )
        return self._part

    def _build_handle(self) -> Part:
        d = self.design

        # Loop centreline in the XZ plane, centred on the origin
        path = Edge.make_ellipse(d.handle_length_mm, d.handle_diameter_mm / 2, plane=Plane.XZ)

        # Grip profile at the start of the path, perpendicular to its tangent
        start_point = path @ 0
        start_tangent = path % 0
        profile_plane = Plane(origin=start_point, x_dir=start_point.normalized(), z_dir=start_tangent)
        with BuildSketch(profile_plane) as sk:
            Circle(self.grip_radius)

        loop = sweep(sk.sketch.faces()[0], path=path)
        logger.debug(f"Handle loop: reach={d.handle_length_mm:g}mm grip_r={self.grip_radius:.2f}mm")

        # Centre the loop on the outer wall at mid-height
        return Pos(d.radius_mm, 0, d.height_mm / 2) * loop
