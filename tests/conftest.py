"""
Test Configuration
==================

Pytest fixtures and test configuration for CamPlan.
"""

import pytest

from camplan.models import CameraSpec, SiteLayout, StreamSpec, Wall


@pytest.fixture
def front_door_camera():
    """A 1080p camera with known optics facing +X."""
    return CameraSpec(
        id="front-door",
        x=50,
        y=50,
        rotation=0,
        field_of_view=90,
        range=10,
        resolution_height=1080,
        lens_mm=4.0,
        sensor_size='1/3"',
    )


@pytest.fixture
def panoramic_camera():
    """A 360° camera at the center of a 100x100 canvas reaching every corner."""
    return CameraSpec(id="pano", x=50, y=50, field_of_view=360, range=100)


@pytest.fixture
def sample_stream():
    """A 4 MP stream at 30 fps, medium scene, H.264."""
    return StreamSpec(id="cam-1", resolution_mp=4)


@pytest.fixture
def sample_layout_data():
    """Provide a sample layout definition for testing."""
    return {
        "site_id": "test_site",
        "canvas_width": 100,
        "canvas_height": 100,
        "pixels_per_meter": 10,
        "cameras": [
            {"id": "cam-1", "x": 5, "y": 50, "field_of_view": 360, "range": 100},
        ],
        "walls": [
            {"id": "w1", "type": "wall", "points": [50, 0, 50, 100]},
            {"id": "p1", "type": "pillar", "points": [10, 10, 10, 20]},
        ],
    }


@pytest.fixture
def sample_layout(sample_layout_data):
    """Provide a validated SiteLayout."""
    return SiteLayout.model_validate(sample_layout_data)


@pytest.fixture
def dividing_wall():
    """Vertical wall splitting a 100x100 canvas in half."""
    return Wall(id="w1", points=(50, 0, 50, 100))
