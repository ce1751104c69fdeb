"""
Wall Occlusion
==============

Line-of-sight helpers for walls and pillars drawn on the floor plan.

This module handles:
    - Segment/segment intersection (parametric form)
    - Pillar containment tests
    - Ray casting to the nearest obstacle
    - Vectorized visibility masks for grid sampling
    - Obstacle lengths in meters (for installation quantities)

Intersection Formula:
    For segments P1→P2 and P3→P4:

        denom = (y4 - y3)(x2 - x1) - (x4 - x3)(y2 - y1)
        ua = ((x4 - x3)(y1 - y3) - (y4 - y3)(x1 - x3)) / denom
        ub = ((x2 - x1)(y1 - y3) - (y2 - y1)(x1 - x3)) / denom

    The segments intersect when both ua and ub lie in [0, 1].
    Parallel segments (denom == 0) never intersect.

Line of Sight:
    Sight lines start at the camera (P1). An obstacle blocks a sight line
    when ua lies in (0, 1] and ub in [0, 1]; a hit at the camera itself
    (ua == 0) is ignored, so a camera mounted on a wall sees past it.
    ``line_blocked``, ``ray_wall_intersection`` and ``visibility_mask``
    share this rule.
"""

import logging
import math
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Tuple

import numpy as np

from camplan.models.geometry import Wall, WallType


logger = logging.getLogger(__name__)

# Hits this close to the camera (in segment parameter units) are ignored so
# that a camera mounted on a wall still sees past it.
_ORIGIN_EPSILON = 1e-9


@dataclass(frozen=True, slots=True)
class WallHit:
    """Nearest obstacle hit along a ray."""

    x: float
    y: float
    distance: float


def _blocks_sight(ua, ub):
    """Whether intersection parameters block a sight line (scalars or arrays)."""
    return (ua > _ORIGIN_EPSILON) & (ua <= 1) & (ub >= 0) & (ub <= 1)


def _intersection_params(
    x1: float, y1: float, x2: float, y2: float,
    x3: float, y3: float, x4: float, y4: float,
) -> Optional[Tuple[float, float]]:
    """Return (ua, ub) for two segments, or None if they are parallel."""
    denom = (y4 - y3) * (x2 - x1) - (x4 - x3) * (y2 - y1)
    if denom == 0:
        return None

    ua = ((x4 - x3) * (y1 - y3) - (y4 - y3) * (x1 - x3)) / denom
    ub = ((x2 - x1) * (y1 - y3) - (y2 - y1) * (x1 - x3)) / denom
    return ua, ub


def segments_intersect(
    x1: float, y1: float, x2: float, y2: float,
    x3: float, y3: float, x4: float, y4: float,
) -> bool:
    """Check if segment P1→P2 crosses segment P3→P4."""
    params = _intersection_params(x1, y1, x2, y2, x3, y3, x4, y4)
    if params is None:
        return False
    ua, ub = params
    return 0 <= ua <= 1 and 0 <= ub <= 1


def line_intersection(
    x1: float, y1: float, x2: float, y2: float,
    x3: float, y3: float, x4: float, y4: float,
) -> Optional[Tuple[float, float]]:
    """Intersection point of two segments, or None."""
    params = _intersection_params(x1, y1, x2, y2, x3, y3, x4, y4)
    if params is None:
        return None
    ua, ub = params
    if 0 <= ua <= 1 and 0 <= ub <= 1:
        return x1 + ua * (x2 - x1), y1 + ua * (y2 - y1)
    return None


def is_point_blocked(x: float, y: float, walls: Iterable[Wall]) -> bool:
    """Check if a point lies inside any pillar."""
    for wall in walls:
        if wall.type == WallType.PILLAR:
            px, py, width, height = wall.points
            if px <= x <= px + width and py <= y <= py + height:
                return True
    return False


def line_blocked(
    x1: float, y1: float, x2: float, y2: float,
    walls: Iterable[Wall],
) -> bool:
    """
    Check if the sight line P1→P2 crosses any wall or pillar edge.

    P1 is the viewer; an obstacle touching P1 does not block.
    """
    for wall in walls:
        for ex1, ey1, ex2, ey2 in wall.edges():
            params = _intersection_params(x1, y1, x2, y2, ex1, ey1, ex2, ey2)
            if params is not None and _blocks_sight(*params):
                return True
    return False


def ray_wall_intersection(
    origin_x: float,
    origin_y: float,
    angle_rad: float,
    max_range: float,
    walls: Iterable[Wall],
) -> Optional[WallHit]:
    """
    Cast a ray and return the nearest obstacle hit within ``max_range``.

    Args:
        origin_x: Ray origin X (pixels)
        origin_y: Ray origin Y (pixels)
        angle_rad: Ray direction (radians, canvas space)
        max_range: Ray length (pixels)
        walls: Obstacles to test

    Returns:
        Closest hit, or None if the ray is unobstructed
    """
    end_x = origin_x + max_range * math.cos(angle_rad)
    end_y = origin_y + max_range * math.sin(angle_rad)

    closest: Optional[WallHit] = None
    min_distance = max_range

    for wall in walls:
        for ex1, ey1, ex2, ey2 in wall.edges():
            params = _intersection_params(
                origin_x, origin_y, end_x, end_y,
                ex1, ey1, ex2, ey2,
            )
            if params is None or not _blocks_sight(*params):
                continue
            ua = params[0]
            hit_x = origin_x + ua * (end_x - origin_x)
            hit_y = origin_y + ua * (end_y - origin_y)
            distance = ua * max_range
            if distance < min_distance:
                min_distance = distance
                closest = WallHit(x=hit_x, y=hit_y, distance=distance)

    return closest


def visibility_mask(
    cam_x: float,
    cam_y: float,
    xs: np.ndarray,
    ys: np.ndarray,
    walls: Sequence[Wall],
) -> np.ndarray:
    """
    Vectorized line-of-sight test from one camera to many points.

    Args:
        cam_x: Camera X (pixels)
        cam_y: Camera Y (pixels)
        xs: Point X coordinates (any shape)
        ys: Point Y coordinates (same shape as xs)
        walls: Obstacles

    Returns:
        Boolean array (shape of xs), True where the view is unobstructed
    """
    visible = np.ones(np.shape(xs), dtype=bool)
    dx = xs - cam_x
    dy = ys - cam_y

    for wall in walls:
        for x3, y3, x4, y4 in wall.edges():
            denom = (y4 - y3) * dx - (x4 - x3) * dy
            ua_num = (x4 - x3) * (cam_y - y3) - (y4 - y3) * (cam_x - x3)
            ub_num = dx * (cam_y - y3) - dy * (cam_x - x3)

            with np.errstate(divide="ignore", invalid="ignore"):
                ua = ua_num / denom
                ub = ub_num / denom

            visible &= ~((denom != 0) & _blocks_sight(ua, ub))

    return visible


def wall_length_m(wall: Wall, pixels_per_meter: float) -> float:
    """
    Physical length of an obstacle.

    Walls measure their segment length; pillars measure their perimeter.
    """
    if wall.type == WallType.WALL:
        x1, y1, x2, y2 = wall.points
        return math.hypot(x2 - x1, y2 - y1) / pixels_per_meter

    _, _, width, height = wall.points
    return 2 * (width + height) / pixels_per_meter
