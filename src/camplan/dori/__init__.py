"""
DORI Module
===========

Detection / Observation / Recognition / Identification distance bands.

This module provides:
    - calculate_dori_distances: Optics -> distance per DORI level
    - level_at_distance: Distance -> most specific level achieved
    - calculate_ppm: Pixel density on target at a distance
    - get_dori_zones: Ordered zones for visualization
"""

from camplan.dori.engine import (
    DEFAULT_SENSOR_SIZE,
    DORI_STANDARDS,
    SENSOR_DIMENSIONS,
    TARGET_HEIGHT_M,
    calculate_dori_distances,
    calculate_ppm,
    dori_for_camera,
    get_dori_zones,
    get_sensor_dimensions,
    level_at_distance,
)

__all__ = [
    "DEFAULT_SENSOR_SIZE",
    "DORI_STANDARDS",
    "SENSOR_DIMENSIONS",
    "TARGET_HEIGHT_M",
    "calculate_dori_distances",
    "calculate_ppm",
    "dori_for_camera",
    "get_dori_zones",
    "get_sensor_dimensions",
    "level_at_distance",
]
