"""
DORI Distance Engine
====================

Converts camera optics into the maximum distance at which a human target
can be detected, observed, recognized or identified (IEC/EN 62676-4).

This engine:
    - Resolves a sensor designation to its active area (with fallback)
    - Inverts the thin-lens magnification relation per DORI level
    - Looks up the DORI level achieved at a given distance

Formula:
    Pixel density on a target at distance d (meters):

        ppm = (resolution_height * lens_mm) / (sensor_height_mm * d)

    Solving for the distance where a level's requirement is met, with the
    requirement expressed in pixels on a 1.75 m person:

        required_pixels = level_ppm * 1.75
        d = (resolution_height / required_pixels)
            * (lens_mm / sensor_height_mm) * 1.75

    Distances are rounded to one decimal.

Fallback Policy:
    An unknown sensor designation resolves to the 1/3" format instead of
    failing. The fallback happens in ``get_sensor_dimensions`` so that no
    missing dimensions can reach the distance formula.
"""

import logging
from types import MappingProxyType
from typing import List, Mapping, Optional

from camplan.models.camera import CameraSpec
from camplan.models.dori import (
    DORILevel,
    DORIResult,
    DORIStandard,
    DORIZone,
    SensorDimensions,
)
from camplan.numeric import round_half_up, round_int


logger = logging.getLogger(__name__)


# Average person height used as the DORI reference target (meters)
TARGET_HEIGHT_M = 1.75

DEFAULT_SENSOR_SIZE = '1/3"'

DORI_STANDARDS: Mapping[DORILevel, DORIStandard] = MappingProxyType({
    DORILevel.IDENTIFICATION: DORIStandard(ppm=250, label="Identification", color="#EF4444"),
    DORILevel.RECOGNITION: DORIStandard(ppm=125, label="Recognition", color="#F59E0B"),
    DORILevel.OBSERVATION: DORIStandard(ppm=63, label="Observation", color="#3B82F6"),
    DORILevel.DETECTION: DORIStandard(ppm=25, label="Detection", color="#10B981"),
})

SENSOR_DIMENSIONS: Mapping[str, SensorDimensions] = MappingProxyType({
    '1/3"': SensorDimensions(width_mm=4.8, height_mm=3.6),
    '1/2.8"': SensorDimensions(width_mm=5.06, height_mm=3.79),
    '1/2.7"': SensorDimensions(width_mm=5.37, height_mm=4.04),
    '1/2.5"': SensorDimensions(width_mm=5.76, height_mm=4.29),
    '1/2"': SensorDimensions(width_mm=6.4, height_mm=4.8),
    '1/1.8"': SensorDimensions(width_mm=7.18, height_mm=5.32),
    '2/3"': SensorDimensions(width_mm=8.8, height_mm=6.6),
    '1"': SensorDimensions(width_mm=12.8, height_mm=9.6),
})


def get_sensor_dimensions(sensor_size: Optional[str]) -> SensorDimensions:
    """
    Resolve a sensor designation to its active area.

    Unknown or missing designations fall back to the 1/3" format.

    Args:
        sensor_size: Designation such as '1/2.8"'

    Returns:
        Sensor width and height in millimeters
    """
    dimensions = SENSOR_DIMENSIONS.get(sensor_size) if sensor_size else None
    if dimensions is None:
        logger.debug(
            f"Unknown sensor size {sensor_size!r}, using {DEFAULT_SENSOR_SIZE}"
        )
        return SENSOR_DIMENSIONS[DEFAULT_SENSOR_SIZE]
    return dimensions


def calculate_dori_distances(
    resolution_height: float,
    lens_mm: float,
    sensor_size: Optional[str],
) -> DORIResult:
    """
    Calculate the maximum distance of every DORI level for a camera.

    Args:
        resolution_height: Vertical resolution (pixels)
        lens_mm: Focal length (mm)
        sensor_size: Sensor designation (e.g. '1/3"')

    Returns:
        DORIResult with one distance (meters, 1 decimal) per level

    Example:
        >>> calculate_dori_distances(1080, 4.0, '1/3"').identification
        4.8
    """
    sensor = get_sensor_dimensions(sensor_size)

    distances = {}
    for level, standard in DORI_STANDARDS.items():
        required_pixels = standard.ppm * TARGET_HEIGHT_M
        distance_m = (
            (resolution_height / required_pixels)
            * (lens_mm / sensor.height_mm)
            * TARGET_HEIGHT_M
        )
        distances[level.value] = round_half_up(distance_m, 1)

    return DORIResult(**distances)


def level_at_distance(
    distance_m: float,
    dori_distances: DORIResult,
) -> Optional[DORILevel]:
    """
    Determine the most specific DORI level achieved at a distance.

    A distance exactly on a threshold resolves to that (stricter) level.

    Args:
        distance_m: Distance from the camera (meters)
        dori_distances: Thresholds from ``calculate_dori_distances``

    Returns:
        The DORI level, or None beyond the detection distance
    """
    for level in DORILevel:
        if distance_m <= dori_distances.distance_for(level):
            return level
    return None


def calculate_ppm(
    distance_m: float,
    resolution_height: float,
    lens_mm: float,
    sensor_size: Optional[str],
) -> int:
    """
    Calculate pixels per meter on a target at a given distance.

    Args:
        distance_m: Distance to the target (meters, > 0)
        resolution_height: Vertical resolution (pixels)
        lens_mm: Focal length (mm)
        sensor_size: Sensor designation

    Returns:
        Pixel density rounded to an integer
    """
    sensor = get_sensor_dimensions(sensor_size)
    ppm = (resolution_height * lens_mm) / (sensor.height_mm * distance_m)
    return round_int(ppm)


def get_dori_zones(
    resolution_height: float,
    lens_mm: float,
    sensor_size: Optional[str],
) -> List[DORIZone]:
    """Get all DORI zones for visualization, identification first."""
    distances = calculate_dori_distances(resolution_height, lens_mm, sensor_size)

    return [
        DORIZone(
            level=level,
            distance=distances.distance_for(level),
            ppm=standard.ppm,
        )
        for level, standard in DORI_STANDARDS.items()
    ]


def dori_for_camera(camera: CameraSpec) -> Optional[DORIResult]:
    """DORI distances for a placed camera, or None when its optics are unknown."""
    if not camera.has_optics:
        return None
    return calculate_dori_distances(
        camera.resolution_height,
        camera.lens_mm,
        camera.sensor_size,
    )
