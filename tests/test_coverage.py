"""
Coverage Tests
==============

Sector geometry, grid sampling statistics and blind spots.
"""

import math

import numpy as np
import pytest

from camplan.coverage import (
    angle_difference,
    camera_coverage_zones,
    camera_wedge_path,
    compute_coverage_stats,
    count_coverage,
    coverage_grid,
    coverage_polygon,
    detect_blind_spots,
    grid_shape,
    sample_points,
    sector_area_px,
    sector_contains,
)
from camplan.coverage import sampling
from camplan.models import CameraSpec


def _half_plane_camera():
    """Camera at the canvas center looking at the right half."""
    return CameraSpec(id="half", x=50, y=50, rotation=0, field_of_view=180, range=100)


class TestAngles:
    """Tests for angle normalization and sector containment."""

    def test_angle_difference_wraps(self):
        assert angle_difference(350, 10) == -20
        assert angle_difference(10, 350) == 20
        assert angle_difference(180, 0) == -180

    def test_point_in_front(self, front_door_camera):
        assert sector_contains(front_door_camera, 120, 50)

    def test_point_outside_fov(self, front_door_camera):
        """Straight below the camera is 90° off a 90° field of view."""
        assert not sector_contains(front_door_camera, 50, 120)

    def test_point_out_of_range(self, front_door_camera):
        """Range 10 m at 10 px/m reaches 100 px."""
        assert not sector_contains(front_door_camera, 151, 50)

    def test_heading_across_zero(self):
        camera = CameraSpec(x=0, y=0, rotation=350, field_of_view=60, range=20)
        assert sector_contains(camera, 50, 5)
        assert sector_contains(camera, 50, -5)
        assert not sector_contains(camera, 0, 50)


class TestSectorShapes:
    """Tests for sector polygons, areas and SVG bands."""

    def test_polygon_starts_at_apex(self, front_door_camera):
        polygon = coverage_polygon(front_door_camera)

        # 90° / 5° = 18 segments -> 19 arc vertices + apex
        assert len(polygon.vertices) == 20
        assert polygon.vertices[0].x == 50
        assert polygon.vertices[0].y == 50

    def test_full_circle_has_no_apex(self, panoramic_camera):
        polygon = coverage_polygon(panoramic_camera)
        assert len(polygon.vertices) == 72
        assert all(
            math.hypot(v.x - 50, v.y - 50) == pytest.approx(1000)
            for v in polygon.vertices
        )

    def test_narrow_fov_keeps_minimum_segments(self):
        camera = CameraSpec(x=0, y=0, field_of_view=4, range=5)
        assert len(coverage_polygon(camera).vertices) == 5

    def test_invalid_arc_step(self, front_door_camera):
        with pytest.raises(ValueError):
            coverage_polygon(front_door_camera, arc_step_deg=0)

    def test_sector_area(self, front_door_camera):
        assert sector_area_px(front_door_camera) == pytest.approx(math.pi * 100 ** 2 / 4)

    def test_wedge_path(self, front_door_camera):
        path = camera_wedge_path(front_door_camera, 0, 30)
        assert path.startswith("M ")
        assert path.endswith("Z")
        assert " A 100.00 100.00 0 0 1 " in path

    def test_empty_band(self, front_door_camera):
        """A band starting beyond the camera's range has no path."""
        assert camera_wedge_path(front_door_camera, 30, 60) == ""

    @pytest.mark.parametrize("camera_range,expected_bands", [
        (10, 1),
        (30, 1),
        (45, 2),
        (120, 3),
    ])
    def test_range_bands(self, camera_range, expected_bands):
        camera = CameraSpec(x=0, y=0, range=camera_range)
        zones = camera_coverage_zones(camera)

        assert len(zones) == expected_bands
        assert zones[0].range == (0.0, 30.0)


class TestSampleGrid:
    """Tests for the sampling grid."""

    def test_grid_shape_rounds_up(self):
        assert grid_shape(105, 95, 10) == (10, 11)

    def test_cell_centers(self):
        xs, ys = sample_points(40, 20, 20)
        assert xs.tolist() == [[10.0, 30.0]]
        assert ys.tolist() == [[10.0, 10.0]]

    @pytest.mark.parametrize("width,height,step", [
        (100, 100, 0),
        (100, 100, -5),
        (0, 100, 10),
        (100, -1, 10),
    ])
    def test_invalid_parameters(self, width, height, step):
        with pytest.raises(ValueError):
            compute_coverage_stats([], width, height, step)

    def test_counts_per_sample(self, panoramic_camera):
        counts = coverage_grid([panoramic_camera, panoramic_camera], 30, 30, 10)
        assert counts.shape == (3, 3)
        assert (counts == 2).all()


class TestCoverageStats:
    """Tests for compute_coverage_stats."""

    def test_no_cameras(self):
        stats = compute_coverage_stats([], 100, 100, 10)

        assert stats.total_coverage_percent == 0.0
        assert stats.redundant_coverage_percent == 0.0
        assert stats.average_overlap == 0.0
        assert stats.blind_spot_count == 100
        assert stats.sample_count == 100

    def test_full_coverage(self, panoramic_camera):
        stats = compute_coverage_stats([panoramic_camera], 100, 100, 10)

        assert stats.total_coverage_percent == 100.0
        assert stats.redundant_coverage_percent == 0.0
        assert stats.blind_spot_count == 0
        assert stats.average_overlap == 1.0

    def test_double_coverage(self, panoramic_camera):
        stats = compute_coverage_stats([panoramic_camera, panoramic_camera], 100, 100, 10)

        assert stats.redundant_coverage_percent == 100.0
        assert stats.average_overlap == 2.0

    def test_half_plane(self):
        stats = compute_coverage_stats([_half_plane_camera()], 100, 100, 10)

        assert stats.total_coverage_percent == 50.0
        assert stats.blind_spot_count == 50

    def test_partial_overlap(self, panoramic_camera):
        """Half the canvas is seen twice: redundancy counts against all samples."""
        stats = compute_coverage_stats([panoramic_camera, _half_plane_camera()], 100, 100, 10)

        assert stats.total_coverage_percent == 100.0
        assert stats.redundant_coverage_percent == 50.0
        assert stats.average_overlap == 1.5

    def test_idempotent(self, front_door_camera):
        cameras = [front_door_camera]
        assert compute_coverage_stats(cameras, 200, 150, 10) == compute_coverage_stats(cameras, 200, 150, 10)

    def test_inputs_not_mutated(self, front_door_camera):
        before = front_door_camera.model_copy()
        compute_coverage_stats([front_door_camera], 200, 150, 10)
        assert front_door_camera == before

    def test_scale_changes_reach(self):
        """Doubling pixels per meter doubles the camera's pixel radius."""
        camera = CameraSpec(x=0, y=0, rotation=45, field_of_view=90, range=5)

        small = compute_coverage_stats([camera], 100, 100, 10, pixels_per_meter=10)
        large = compute_coverage_stats([camera], 100, 100, 10, pixels_per_meter=20)

        assert large.total_coverage_percent > small.total_coverage_percent


class TestBlindSpots:
    """Tests for detect_blind_spots."""

    def test_all_cells_without_cameras(self):
        spots = detect_blind_spots([], 40, 40, 20)

        assert [(spot.x, spot.y) for spot in spots] == [
            (10.0, 10.0), (30.0, 10.0), (10.0, 30.0), (30.0, 30.0),
        ]
        assert all(spot.area == 400.0 for spot in spots)

    def test_matches_stats(self):
        cameras = [_half_plane_camera()]

        spots = detect_blind_spots(cameras, 100, 100, 20)
        stats = compute_coverage_stats(cameras, 100, 100, 20)

        assert len(spots) == stats.blind_spot_count
        assert all(spot.x < 50 for spot in spots)

    def test_none_when_fully_covered(self, panoramic_camera):
        assert detect_blind_spots([panoramic_camera], 100, 100, 20) == []

    def test_grid_built_once(self, monkeypatch):
        calls = []
        original = sampling.sample_points

        def _counting_sample_points(*args):
            calls.append(args)
            return original(*args)

        monkeypatch.setattr(sampling, "sample_points", _counting_sample_points)

        detect_blind_spots([_half_plane_camera()], 100, 100, 20)
        assert len(calls) == 1


class TestCountCoverage:
    """Tests for count_coverage on arbitrary points."""

    def test_scattered_points(self):
        xs = np.array([90.0, 10.0, 50.0])
        ys = np.array([50.0, 50.0, 10.0])

        counts = count_coverage([_half_plane_camera()], xs, ys)
        assert counts.tolist() == [1, 0, 1]

    def test_matches_grid(self, front_door_camera):
        xs, ys = sample_points(200, 100, 10)

        counts = count_coverage([front_door_camera], xs, ys)
        assert (counts == coverage_grid([front_door_camera], 200, 100, 10)).all()
