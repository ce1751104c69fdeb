"""
Layout Management
=================

Utilities for loading and querying saved site layouts.

This module handles:
    - Loading a SiteLayout from a JSON file
    - Polygon area calculations and per-camera footprints (m²)
    - Coverage statistics and blind spots for the loaded layout

Example:
    from camplan.geometry import LayoutManager

    manager = LayoutManager()
    manager.load_from_file("./data/layouts/warehouse.json")

    stats = manager.coverage_stats(step=10)
    camera = manager.get_camera("cam-1")
"""

import json
import logging
from pathlib import Path
from typing import Dict, List, Optional

from camplan.coverage.sampling import compute_coverage_stats, detect_blind_spots
from camplan.coverage.sectors import coverage_polygon
from camplan.coverage.walls import wall_length_m
from camplan.models.camera import CameraSpec
from camplan.models.coverage import BlindSpot, CoverageStats
from camplan.models.geometry import Polygon, WallType
from camplan.models.layout import SiteLayout


logger = logging.getLogger(__name__)


class LayoutManager:
    """
    Manager for a saved site layout.

    Loads the layout from JSON and provides coverage queries, footprint
    helpers and camera lookup.

    Attributes:
        layout: Loaded layout definition
        _is_loaded: Whether a layout has been loaded
    """

    def __init__(self, layout: Optional[SiteLayout] = None) -> None:
        """
        Initialize the manager, optionally with an in-memory layout.

        Args:
            layout: Layout to manage; load one later with ``load_from_file``
        """
        self.layout: Optional[SiteLayout] = layout
        self._is_loaded: bool = layout is not None

    @property
    def is_loaded(self) -> bool:
        """Whether a layout is available."""
        return self._is_loaded

    def load_from_file(self, path: str) -> SiteLayout:
        """
        Load a layout definition from a JSON file.

        Args:
            path: Path to the layout JSON file

        Returns:
            The loaded layout

        Raises:
            FileNotFoundError: If the file does not exist
            pydantic.ValidationError: If the layout content is invalid
        """
        file_path = Path(path)

        if not file_path.exists():
            raise FileNotFoundError(f"Layout file not found: {path}")

        logger.info(f"Loading layout from: {path}")

        with open(file_path, "r") as f:
            data = json.load(f)

        self.layout = SiteLayout.model_validate(data)
        self._is_loaded = True

        logger.info(
            f"Loaded layout: site={self.layout.site_id}, "
            f"cameras={len(self.layout.cameras)}, walls={len(self.layout.walls)}"
        )
        return self.layout

    def _require_layout(self) -> SiteLayout:
        if not self._is_loaded or self.layout is None:
            raise RuntimeError("No layout loaded")
        return self.layout

    def get_camera(self, camera_id: str) -> Optional[CameraSpec]:
        """
        Get a camera by its ID.

        Returns:
            CameraSpec if found, None otherwise
        """
        if not self._is_loaded or self.layout is None:
            return None

        for camera in self.layout.cameras:
            if camera.id == camera_id:
                return camera

        return None

    @staticmethod
    def compute_polygon_area(polygon: Polygon) -> float:
        """
        Compute the area of a polygon in square pixels.

        Uses the shoelace formula:
            area = 0.5 * |sum(x_i * y_{i+1} - x_{i+1} * y_i)|
        """
        vertices = polygon.vertices
        n = len(vertices)
        twice_area = 0.0

        for i in range(n):
            j = (i + 1) % n
            twice_area += vertices[i].x * vertices[j].y - vertices[j].x * vertices[i].y

        return abs(twice_area) / 2.0

    def compute_polygon_area_meters(
        self,
        polygon: Polygon,
        pixels_per_meter: Optional[float] = None,
    ) -> float:
        """
        Compute the area of a polygon in square meters.

        Args:
            polygon: The polygon to measure
            pixels_per_meter: Scale factor; defaults to the layout's calibration

        Returns:
            Area in m²
        """
        if pixels_per_meter is None:
            pixels_per_meter = self._require_layout().pixels_per_meter

        area_pixels = self.compute_polygon_area(polygon)
        return area_pixels / (pixels_per_meter ** 2)

    def coverage_stats(self, step: float = 10.0, use_walls: bool = True) -> CoverageStats:
        """
        Coverage statistics of the loaded layout.

        Args:
            step: Grid spacing (pixels)
            use_walls: Whether walls and pillars block line of sight

        Raises:
            RuntimeError: If no layout is loaded
        """
        layout = self._require_layout()

        return compute_coverage_stats(
            layout.cameras,
            layout.canvas_width,
            layout.canvas_height,
            step,
            pixels_per_meter=layout.pixels_per_meter,
            walls=layout.walls if use_walls else None,
        )

    def blind_spots(self, grid_size: float = 20.0, use_walls: bool = True) -> List[BlindSpot]:
        """Blind spots of the loaded layout."""
        layout = self._require_layout()

        return detect_blind_spots(
            layout.cameras,
            layout.canvas_width,
            layout.canvas_height,
            grid_size,
            pixels_per_meter=layout.pixels_per_meter,
            walls=layout.walls if use_walls else None,
        )

    def camera_footprints_m2(self) -> Dict[str, float]:
        """
        Floor area each camera's sector covers, in m², keyed by camera ID.

        Areas come from the traced sector polygon and ignore walls.
        """
        layout = self._require_layout()

        return {
            camera.id: self.compute_polygon_area_meters(
                coverage_polygon(camera, layout.pixels_per_meter)
            )
            for camera in layout.cameras
        }

    def total_wall_length_m(self) -> float:
        """Total length of straight walls in meters (pillars excluded)."""
        layout = self._require_layout()

        return sum(
            wall_length_m(wall, layout.pixels_per_meter)
            for wall in layout.walls
            if wall.type == WallType.WALL
        )
