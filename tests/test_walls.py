"""
Wall Occlusion Tests
====================

Segment intersection, ray casting and occluded coverage.
"""

import math

import numpy as np
import pytest
from pydantic import ValidationError

from camplan.coverage import (
    compute_coverage_stats,
    is_point_blocked,
    line_blocked,
    line_intersection,
    ray_wall_intersection,
    segments_intersect,
    visibility_mask,
    wall_length_m,
)
from camplan.models import CameraSpec, Wall, WallType


class TestIntersection:
    """Tests for segment intersection helpers."""

    def test_crossing_segments(self):
        assert segments_intersect(0, 0, 10, 10, 0, 10, 10, 0)
        assert line_intersection(0, 0, 10, 10, 0, 10, 10, 0) == pytest.approx((5, 5))

    def test_disjoint_segments(self):
        assert not segments_intersect(0, 0, 1, 1, 5, 0, 5, 10)
        assert line_intersection(0, 0, 1, 1, 5, 0, 5, 10) is None

    def test_parallel_segments(self):
        assert not segments_intersect(0, 0, 10, 0, 0, 5, 10, 5)


class TestObstacles:
    """Tests for walls and pillars."""

    def test_pillar_edges(self):
        pillar = Wall(type=WallType.PILLAR, points=(10, 10, 20, 30))
        edges = pillar.edges()

        assert len(edges) == 4
        assert edges[0] == (10, 10, 30, 10)

    def test_wall_requires_four_numbers(self):
        with pytest.raises(ValidationError):
            Wall(points=(0, 0, 10))

    def test_point_inside_pillar(self):
        walls = [Wall(type=WallType.PILLAR, points=(10, 10, 20, 20))]

        assert is_point_blocked(15, 25, walls)
        assert not is_point_blocked(35, 25, walls)

    def test_plain_wall_blocks_no_points(self, dividing_wall):
        assert not is_point_blocked(50, 50, [dividing_wall])

    def test_line_blocked(self, dividing_wall):
        assert line_blocked(10, 50, 90, 50, [dividing_wall])
        assert not line_blocked(10, 50, 40, 50, [dividing_wall])

    def test_line_through_pillar(self):
        pillar = Wall(type=WallType.PILLAR, points=(40, 40, 20, 20))
        assert line_blocked(0, 50, 100, 50, [pillar])

    def test_lengths(self):
        wall = Wall(points=(0, 0, 30, 40))
        pillar = Wall(type=WallType.PILLAR, points=(0, 0, 10, 20))

        assert wall_length_m(wall, 10) == pytest.approx(5.0)
        assert wall_length_m(pillar, 10) == pytest.approx(6.0)


class TestRayCasting:
    """Tests for ray_wall_intersection."""

    def test_nearest_hit(self):
        walls = [
            Wall(points=(80, -10, 80, 10)),
            Wall(points=(50, -10, 50, 10)),
        ]
        hit = ray_wall_intersection(0, 0, 0.0, 100, walls)

        assert hit is not None
        assert hit.x == pytest.approx(50)
        assert hit.y == pytest.approx(0)
        assert hit.distance == pytest.approx(50)

    def test_out_of_range(self):
        walls = [Wall(points=(150, -10, 150, 10))]
        assert ray_wall_intersection(0, 0, 0.0, 100, walls) is None

    def test_direction(self):
        walls = [Wall(points=(-10, 30, 10, 30))]

        assert ray_wall_intersection(0, 0, math.pi / 2, 100, walls) is not None
        assert ray_wall_intersection(0, 0, -math.pi / 2, 100, walls) is None


class TestOccludedCoverage:
    """Coverage with walls blocking line of sight."""

    def test_visibility_mask(self, dividing_wall):
        xs = np.array([20.0, 80.0])
        ys = np.array([50.0, 50.0])

        mask = visibility_mask(10, 50, xs, ys, [dividing_wall])
        assert mask.tolist() == [True, False]

    def test_wall_halves_coverage(self, dividing_wall):
        camera = CameraSpec(x=5, y=50, field_of_view=360, range=100)

        open_plan = compute_coverage_stats([camera], 100, 100, 10)
        walled = compute_coverage_stats([camera], 100, 100, 10, walls=[dividing_wall])

        assert open_plan.total_coverage_percent == 100.0
        assert walled.total_coverage_percent == 50.0

    @pytest.mark.parametrize("target", [(10, 50), (90, 50), (90, 10), (20, 95)])
    def test_scalar_and_vector_checks_agree_on_wall(self, dividing_wall, target):
        """A camera sitting on a wall is not blocked by that wall in either check."""
        tx, ty = target

        blocked = line_blocked(50, 50, tx, ty, [dividing_wall])
        visible = visibility_mask(50, 50, np.array([tx]), np.array([ty]), [dividing_wall])

        assert not blocked
        assert visible.tolist() == [not blocked]

    @pytest.mark.parametrize("target", [(10, 50), (90, 50), (45, 5), (80, 90)])
    def test_scalar_and_vector_checks_agree_off_wall(self, dividing_wall, target):
        tx, ty = target

        blocked = line_blocked(30, 50, tx, ty, [dividing_wall])
        visible = visibility_mask(30, 50, np.array([tx]), np.array([ty]), [dividing_wall])

        assert visible.tolist() == [not blocked]

    def test_ray_from_wall_mounted_camera(self, dividing_wall):
        """The wall under the camera is not reported as a hit."""
        far_wall = Wall(points=(80, 0, 80, 100))

        hit = ray_wall_intersection(50, 50, 0.0, 100, [dividing_wall, far_wall])

        assert hit is not None
        assert hit.x == pytest.approx(80)
        assert hit.distance == pytest.approx(30)

    def test_camera_mounted_on_wall_sees_both_sides(self, dividing_wall):
        camera = CameraSpec(x=50, y=50, field_of_view=360, range=100)

        stats = compute_coverage_stats([camera], 100, 100, 10, walls=[dividing_wall])
        assert stats.total_coverage_percent == 100.0

    def test_pillar_casts_shadow(self):
        camera = CameraSpec(x=5, y=55, field_of_view=360, range=100)
        pillar = Wall(type=WallType.PILLAR, points=(40, 40, 20, 30))

        stats = compute_coverage_stats([camera], 100, 100, 10, walls=[pillar])
        assert 0.0 < stats.total_coverage_percent < 100.0
