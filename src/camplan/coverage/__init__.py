"""
Coverage Module
===============

Camera sector geometry and coverage analysis over a floor-plan canvas.

This module provides:
    - sectors: Point-in-sector tests, sector polygons, SVG wedge bands
    - sampling: Grid-sampled coverage statistics and blind spots
    - walls: Line-of-sight tests against walls and pillars

All functions are pure: cameras and walls are never modified.
"""

from camplan.coverage.sectors import (
    DEFAULT_PIXELS_PER_METER,
    RANGE_BANDS,
    angle_difference,
    camera_coverage_zones,
    camera_wedge_path,
    coverage_polygon,
    sector_area_px,
    sector_contains,
)
from camplan.coverage.sampling import (
    DEFAULT_BLIND_SPOT_GRID_PX,
    DEFAULT_SAMPLE_STEP_PX,
    camera_mask,
    compute_coverage_stats,
    count_coverage,
    coverage_grid,
    detect_blind_spots,
    grid_shape,
    sample_points,
)
from camplan.coverage.walls import (
    WallHit,
    is_point_blocked,
    line_blocked,
    line_intersection,
    ray_wall_intersection,
    segments_intersect,
    visibility_mask,
    wall_length_m,
)


__all__ = [
    # Sectors
    "DEFAULT_PIXELS_PER_METER",
    "RANGE_BANDS",
    "angle_difference",
    "camera_coverage_zones",
    "camera_wedge_path",
    "coverage_polygon",
    "sector_area_px",
    "sector_contains",
    # Sampling
    "DEFAULT_BLIND_SPOT_GRID_PX",
    "DEFAULT_SAMPLE_STEP_PX",
    "camera_mask",
    "compute_coverage_stats",
    "count_coverage",
    "coverage_grid",
    "detect_blind_spots",
    "grid_shape",
    "sample_points",
    # Walls
    "WallHit",
    "is_point_blocked",
    "line_blocked",
    "line_intersection",
    "ray_wall_intersection",
    "segments_intersect",
    "visibility_mask",
    "wall_length_m",
]
