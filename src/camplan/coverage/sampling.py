"""
Coverage Sampling
=================

Grid-sampled coverage statistics for a set of cameras over a canvas.

Exact polygon union is unnecessary for planning output, so coverage is
estimated deterministically on a regular grid:

    cols = ceil(canvas_width / step)
    rows = ceil(canvas_height / step)
    sample (row, col) sits at the cell center
        (col * step + step / 2, row * step + step / 2)

Each sample stores how many camera sectors contain it. A sector contains a
point when:

    distance(camera, point) <= range * pixels_per_meter
    |angle_difference(bearing(camera, point), rotation)| <= fov / 2

and, when obstacles are given, the segment camera→point crosses no wall.

Statistics:
    total_coverage_percent     = (count >= 1) / samples * 100
    redundant_coverage_percent = (count >= 2) / samples * 100
    blind_spot_count           = (count == 0)
    average_overlap            = mean(count | count >= 1)

Cost is O(cameras × samples); ``step`` is the performance knob. The count
grid is computed with numpy, one vectorized pass per camera.
"""

import logging
import math
from typing import List, Optional, Sequence, Tuple

import numpy as np

from camplan.coverage.sectors import DEFAULT_PIXELS_PER_METER, angle_difference
from camplan.coverage.walls import visibility_mask
from camplan.models.camera import CameraSpec
from camplan.models.coverage import BlindSpot, CoverageStats
from camplan.models.geometry import Wall
from camplan.numeric import round_half_up


logger = logging.getLogger(__name__)


DEFAULT_SAMPLE_STEP_PX = 10.0
DEFAULT_BLIND_SPOT_GRID_PX = 20.0

# Grids above this size are still computed but logged as slow
LARGE_GRID_WARNING = 500_000


def grid_shape(canvas_width: float, canvas_height: float, step: float) -> Tuple[int, int]:
    """
    Number of (rows, cols) in the sample grid.

    Raises:
        ValueError: If the step or canvas dimensions are not positive
    """
    if step <= 0:
        raise ValueError("sample step must be positive")
    if canvas_width <= 0 or canvas_height <= 0:
        raise ValueError("canvas dimensions must be positive")

    return math.ceil(canvas_height / step), math.ceil(canvas_width / step)


def sample_points(
    canvas_width: float,
    canvas_height: float,
    step: float,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Cell-center coordinates of the sample grid.

    Returns:
        (xs, ys) arrays of shape (rows, cols)
    """
    rows, cols = grid_shape(canvas_width, canvas_height, step)
    col_centers = np.arange(cols, dtype=np.float64) * step + step / 2
    row_centers = np.arange(rows, dtype=np.float64) * step + step / 2
    return np.meshgrid(col_centers, row_centers)


def camera_mask(
    camera: CameraSpec,
    xs: np.ndarray,
    ys: np.ndarray,
    pixels_per_meter: float = DEFAULT_PIXELS_PER_METER,
    walls: Optional[Sequence[Wall]] = None,
) -> np.ndarray:
    """
    Boolean mask of the samples a single camera covers.

    Args:
        camera: Camera to evaluate
        xs: Sample X coordinates
        ys: Sample Y coordinates
        pixels_per_meter: Canvas scale
        walls: Optional obstacles blocking line of sight

    Returns:
        Boolean array (shape of xs)
    """
    dx = xs - camera.x
    dy = ys - camera.y

    in_range = np.hypot(dx, dy) <= camera.range * pixels_per_meter

    bearings = np.degrees(np.arctan2(dy, dx))
    in_fov = np.abs(angle_difference(bearings, camera.rotation)) <= camera.field_of_view / 2

    mask = in_range & in_fov
    if walls and np.any(mask):
        mask &= visibility_mask(camera.x, camera.y, xs, ys, walls)

    return mask


def coverage_grid(
    cameras: Sequence[CameraSpec],
    canvas_width: float,
    canvas_height: float,
    step: float = DEFAULT_SAMPLE_STEP_PX,
    pixels_per_meter: float = DEFAULT_PIXELS_PER_METER,
    walls: Optional[Sequence[Wall]] = None,
) -> np.ndarray:
    """
    Count how many cameras cover each sample point.

    Args:
        cameras: Cameras to evaluate (may be empty)
        canvas_width: Canvas width (pixels)
        canvas_height: Canvas height (pixels)
        step: Grid spacing (pixels)
        pixels_per_meter: Canvas scale
        walls: Optional obstacles blocking line of sight

    Returns:
        Integer array of shape (rows, cols)
    """
    xs, ys = sample_points(canvas_width, canvas_height, step)
    return count_coverage(cameras, xs, ys, pixels_per_meter, walls)


def count_coverage(
    cameras: Sequence[CameraSpec],
    xs: np.ndarray,
    ys: np.ndarray,
    pixels_per_meter: float = DEFAULT_PIXELS_PER_METER,
    walls: Optional[Sequence[Wall]] = None,
) -> np.ndarray:
    """
    Count how many cameras cover each of the given points.

    Returns:
        Integer array (shape of xs)
    """
    if xs.size > LARGE_GRID_WARNING:
        logger.warning(
            f"Large coverage grid: {xs.size} samples x {len(cameras)} cameras; "
            f"consider a coarser step"
        )

    counts = np.zeros(np.shape(xs), dtype=np.int32)
    for camera in cameras:
        counts += camera_mask(camera, xs, ys, pixels_per_meter, walls)

    return counts


def compute_coverage_stats(
    cameras: Sequence[CameraSpec],
    canvas_width: float,
    canvas_height: float,
    sample_step_px: float = DEFAULT_SAMPLE_STEP_PX,
    *,
    pixels_per_meter: float = DEFAULT_PIXELS_PER_METER,
    walls: Optional[Sequence[Wall]] = None,
) -> CoverageStats:
    """
    Estimate coverage statistics by grid sampling.

    Args:
        cameras: Cameras to evaluate (may be empty)
        canvas_width: Canvas width (pixels, > 0)
        canvas_height: Canvas height (pixels, > 0)
        sample_step_px: Grid spacing (pixels, > 0); smaller is more accurate
        pixels_per_meter: Canvas scale used to convert camera range
        walls: Optional obstacles blocking line of sight

    Returns:
        CoverageStats with percentages and overlap rounded to 1 decimal

    Raises:
        ValueError: If the step or canvas dimensions are not positive
    """
    counts = coverage_grid(
        cameras,
        canvas_width,
        canvas_height,
        sample_step_px,
        pixels_per_meter,
        walls,
    )

    total = int(counts.size)
    covered = counts >= 1
    covered_count = int(np.count_nonzero(covered))
    redundant_count = int(np.count_nonzero(counts >= 2))

    if covered_count == 0:
        # Also the zero-camera case: no covered samples to average over
        average_overlap = 0.0
    else:
        average_overlap = float(counts[covered].mean())

    stats = CoverageStats(
        total_coverage_percent=round_half_up(covered_count / total * 100, 1),
        redundant_coverage_percent=round_half_up(redundant_count / total * 100, 1),
        blind_spot_count=total - covered_count,
        average_overlap=round_half_up(average_overlap, 1),
        sample_count=total,
    )

    logger.debug(
        f"Coverage: cameras={len(cameras)}, samples={total}, "
        f"total={stats.total_coverage_percent}%, "
        f"redundant={stats.redundant_coverage_percent}%"
    )

    return stats


def detect_blind_spots(
    cameras: Sequence[CameraSpec],
    canvas_width: float,
    canvas_height: float,
    grid_size: float = DEFAULT_BLIND_SPOT_GRID_PX,
    *,
    pixels_per_meter: float = DEFAULT_PIXELS_PER_METER,
    walls: Optional[Sequence[Wall]] = None,
) -> List[BlindSpot]:
    """
    List every grid cell no camera covers.

    Args:
        cameras: Cameras to evaluate
        canvas_width: Canvas width (pixels)
        canvas_height: Canvas height (pixels)
        grid_size: Cell size (pixels)
        pixels_per_meter: Canvas scale
        walls: Optional obstacles blocking line of sight

    Returns:
        Blind spots in row-major order, each with its cell-center and area
    """
    xs, ys = sample_points(canvas_width, canvas_height, grid_size)
    counts = count_coverage(cameras, xs, ys, pixels_per_meter, walls)

    uncovered = counts == 0
    area = float(grid_size * grid_size)

    return [
        BlindSpot(x=float(x), y=float(y), area=area)
        for x, y in zip(xs[uncovered], ys[uncovered])
    ]
