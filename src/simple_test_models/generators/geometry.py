"""Wall and window geometry.

The wall is a square in the vertical plane y = 0, centered at the origin,
whose exterior faces South (-Y) before rotation. The window is the wall
outline scaled about its centroid, so it stays centered and keeps the
wall's proportions and plane.
"""

from __future__ import annotations

import logging
import math

from simple_test_models.errors import GeometryError, InvalidConfiguration
from simple_test_models.models.geometry import AREA_TOLERANCE, Loop3D, Point3D, Polygon3D

logger = logging.getLogger(__name__)


def build_wall_polygon(surface_area: float, orientation: float = 0.0) -> Polygon3D:
    """Build a square wall polygon of the given area.

    Args:
        surface_area: Gross wall area in m². Must be positive.
        orientation: Rotation about the vertical axis in degrees,
            counter-clockwise seen from above. 0 faces South.

    Returns:
        Closed polygon with four vertices and no hole.
    """
    if not (surface_area > 0 and math.isfinite(surface_area)):
        raise InvalidConfiguration(
            "surface_area", surface_area, "a positive, finite surface area is required"
        )
    if not math.isfinite(orientation):
        raise InvalidConfiguration("orientation", orientation, "must be a finite angle in degrees")

    half = math.sqrt(surface_area) / 2.0
    # Counter-clockwise seen from -Y, so the normal points South.
    corners = [(-half, -half), (half, -half), (half, half), (-half, half)]

    loop = Loop3D()
    for x, z in corners:
        loop = loop.push(Point3D(x=x, y=0.0, z=z).rotate_z(orientation))
    loop = loop.close()

    logger.debug("Wall polygon: side %.6g m, orientation %.3g deg", 2 * half, orientation)
    return Polygon3D.from_loop(loop)


def cut_window(wall_polygon: Polygon3D, window_area: float) -> tuple[Polygon3D, Polygon3D]:
    """Cut a centered window out of a wall.

    Returns:
        ``(wall_with_hole, window_pane)``. Their areas add up to the area
        of ``wall_polygon``.

    Raises:
        InvalidConfiguration: window_area is not in (0, wall area).
        GeometryError: the wall already has a hole, or the window loop is
            degenerate or touches the wall boundary.
    """
    if wall_polygon.has_hole:
        raise GeometryError("Wall already has a window cut into it", wall_polygon.inner.vertices)

    wall_area = wall_polygon.area
    if not window_area > 0:
        raise InvalidConfiguration("window_area", window_area, "must be positive to cut a window")
    if window_area >= wall_area * (1.0 - AREA_TOLERANCE):
        raise InvalidConfiguration(
            "window_area",
            window_area,
            f"must be smaller than the surface area ({wall_area:g} m²)",
        )

    scale = math.sqrt(window_area / wall_area)
    outer = wall_polygon.outer.vertices
    side = scale * outer[0].distance_to(outer[1])
    if not side > 0.0:
        raise GeometryError(
            f"Window side length is not positive ({side:g} m for {window_area:g} m²)",
            outer,
        )

    centroid = wall_polygon.outer.centroid
    hole = Loop3D()
    for v in outer:
        hole = hole.push(centroid + (v - centroid).scale(scale))
    hole = hole.close()

    wall_with_hole = wall_polygon.cut_hole(hole)
    window_pane = Polygon3D.from_loop(hole.model_copy(deep=True))

    total = wall_with_hole.area + window_pane.area
    if not math.isclose(total, wall_area, rel_tol=AREA_TOLERANCE, abs_tol=AREA_TOLERANCE):
        raise GeometryError(
            f"Wall ({wall_with_hole.area:g} m²) and window ({window_pane.area:g} m²) "
            f"do not add up to the surface area ({wall_area:g} m²)"
        )

    logger.debug(
        "Cut %.6g m² window, %.6g m² of opaque wall remain",
        window_pane.area,
        wall_with_hole.area,
    )
    return wall_with_hole, window_pane
