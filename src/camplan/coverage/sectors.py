"""
Camera Sector Geometry
======================

The field a camera sees is modeled as a circular sector (wedge):

    - apex at the camera position
    - radius = range (meters) * pixels_per_meter
    - half-angle field_of_view / 2 on each side of the rotation heading

This module handles:
    - Point-in-sector tests
    - Sector polygons and exact sector area
    - SVG wedge paths split into colored range bands for rendering

Angles are in canvas space: 0° points along +X and angles grow clockwise
on screen because Y increases downward.
"""

import math
from typing import List, Tuple

from camplan.models.camera import CameraSpec
from camplan.models.coverage import CoverageZone
from camplan.models.geometry import Point, Polygon


# Scale used when the floor plan has not been calibrated (1 m = 10 px)
DEFAULT_PIXELS_PER_METER = 10.0

# Range bands drawn inside each wedge: (start_m, end_m, fill color)
RANGE_BANDS: Tuple[Tuple[float, float, str], ...] = (
    (0.0, 30.0, "rgba(239, 68, 68, 0.2)"),
    (30.0, 60.0, "rgba(59, 130, 246, 0.2)"),
    (60.0, 120.0, "rgba(34, 197, 94, 0.2)"),
)


def angle_difference(angle_deg: float, heading_deg: float) -> float:
    """
    Signed difference between two headings, normalized to [-180, 180).

    Works on scalars and numpy arrays alike.
    """
    return (angle_deg - heading_deg + 180.0) % 360.0 - 180.0


def sector_contains(
    camera: CameraSpec,
    x: float,
    y: float,
    pixels_per_meter: float = DEFAULT_PIXELS_PER_METER,
) -> bool:
    """
    Check if a canvas point lies inside a camera's sector.

    Args:
        camera: Camera to test
        x: Point X (pixels)
        y: Point Y (pixels)
        pixels_per_meter: Canvas scale

    Returns:
        True if the point is within range and inside the field of view
    """
    dx = x - camera.x
    dy = y - camera.y

    if math.hypot(dx, dy) > camera.range * pixels_per_meter:
        return False

    angle = math.degrees(math.atan2(dy, dx))
    return abs(angle_difference(angle, camera.rotation)) <= camera.field_of_view / 2


def coverage_polygon(
    camera: CameraSpec,
    pixels_per_meter: float = DEFAULT_PIXELS_PER_METER,
    arc_step_deg: float = 5.0,
) -> Polygon:
    """
    Approximate a camera's sector as a polygon.

    The polygon starts at the apex and walks the outer arc from the left
    edge of the field of view to the right edge. Full 360° cameras produce
    a circle without the apex vertex.

    Args:
        camera: Camera to trace
        pixels_per_meter: Canvas scale
        arc_step_deg: Angular spacing of arc vertices

    Returns:
        Polygon in canvas pixels
    """
    if arc_step_deg <= 0:
        raise ValueError("arc_step_deg must be positive")

    radius = camera.range * pixels_per_meter
    fov = camera.field_of_view
    start = camera.rotation - fov / 2

    segments = max(int(math.ceil(fov / arc_step_deg)), 3)
    full_circle = fov >= 360.0
    if full_circle:
        # Last vertex would duplicate the first
        angles = [start + fov * i / segments for i in range(segments)]
    else:
        angles = [start + fov * i / segments for i in range(segments + 1)]

    vertices = [] if full_circle else [Point(x=camera.x, y=camera.y)]
    for angle in angles:
        rad = math.radians(angle)
        vertices.append(
            Point(
                x=camera.x + radius * math.cos(rad),
                y=camera.y + radius * math.sin(rad),
            )
        )

    return Polygon(vertices=vertices)


def sector_area_px(
    camera: CameraSpec,
    pixels_per_meter: float = DEFAULT_PIXELS_PER_METER,
) -> float:
    """Exact sector area in square pixels: π r² · fov / 360."""
    radius = camera.range * pixels_per_meter
    return math.pi * radius ** 2 * min(camera.field_of_view, 360.0) / 360.0


def camera_wedge_path(
    camera: CameraSpec,
    range_start: float,
    range_end: float,
    pixels_per_meter: float = DEFAULT_PIXELS_PER_METER,
) -> str:
    """
    Build the SVG path of an annular sector between two ranges.

    The outer radius is capped at the camera's own range.

    Args:
        camera: Camera to draw
        range_start: Inner radius (meters)
        range_end: Outer radius (meters)
        pixels_per_meter: Canvas scale

    Returns:
        SVG path data, or an empty string if the band is empty
    """
    inner_radius = range_start * pixels_per_meter
    outer_radius = min(range_end, camera.range) * pixels_per_meter

    if outer_radius <= inner_radius:
        return ""

    start_angle = math.radians(camera.rotation - camera.field_of_view / 2)
    end_angle = math.radians(camera.rotation + camera.field_of_view / 2)

    def _arc_point(radius: float, angle: float) -> Tuple[float, float]:
        return (
            camera.x + radius * math.cos(angle),
            camera.y + radius * math.sin(angle),
        )

    outer_start = _arc_point(outer_radius, start_angle)
    outer_end = _arc_point(outer_radius, end_angle)
    inner_start = _arc_point(inner_radius, start_angle)
    inner_end = _arc_point(inner_radius, end_angle)

    large_arc = 1 if camera.field_of_view > 180 else 0

    # outer arc -> line -> inner arc (reversed) -> close
    return (
        f"M {outer_start[0]:.2f} {outer_start[1]:.2f} "
        f"A {outer_radius:.2f} {outer_radius:.2f} 0 {large_arc} 1 "
        f"{outer_end[0]:.2f} {outer_end[1]:.2f} "
        f"L {inner_end[0]:.2f} {inner_end[1]:.2f} "
        f"A {inner_radius:.2f} {inner_radius:.2f} 0 {large_arc} 0 "
        f"{inner_start[0]:.2f} {inner_start[1]:.2f} "
        f"Z"
    )


def camera_coverage_zones(
    camera: CameraSpec,
    pixels_per_meter: float = DEFAULT_PIXELS_PER_METER,
) -> List[CoverageZone]:
    """
    Split a camera wedge into its colored range bands.

    A band is emitted only when the camera reaches past its start.
    """
    zones: List[CoverageZone] = []

    for start, end, color in RANGE_BANDS:
        if camera.range <= start:
            continue
        path = camera_wedge_path(camera, start, min(camera.range, end), pixels_per_meter)
        if path:
            zones.append(CoverageZone(color=color, path=path, range=(start, end)))

    return zones
