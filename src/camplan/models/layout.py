"""
Site Layout Model
=================

A complete security layout as saved by the layout editor: canvas size,
scale calibration, placed cameras and drawn obstacles.

Example Layout (JSON):
    {
        "site_id": "warehouse_north",
        "canvas_width": 1200,
        "canvas_height": 800,
        "pixels_per_meter": 10,
        "cameras": [
            {"id": "cam-1", "x": 50, "y": 50, "rotation": 45,
             "field_of_view": 90, "range": 40}
        ],
        "walls": [
            {"id": "w1", "type": "wall", "points": [600, 0, 600, 500]}
        ]
    }
"""

from typing import List

from pydantic import BaseModel, Field

from camplan.models.camera import CameraSpec
from camplan.models.geometry import Wall


class SiteLayout(BaseModel):
    """
    Complete layout definition loaded from JSON.

    Attributes:
        site_id: Identifier of the surveyed site
        canvas_width: Width of the floor-plan canvas (pixels)
        canvas_height: Height of the floor-plan canvas (pixels)
        pixels_per_meter: Scale calibration of the floor plan
        cameras: Placed cameras
        walls: Drawn walls and pillars
    """

    site_id: str = Field(
        ...,
        description="Unique identifier for this site",
    )

    canvas_width: int = Field(
        ...,
        gt=0,
        description="Width of the canvas in pixels",
    )

    canvas_height: int = Field(
        ...,
        gt=0,
        description="Height of the canvas in pixels",
    )

    pixels_per_meter: float = Field(
        default=10.0,
        gt=0,
        description="Scale factor: pixels per meter",
    )

    cameras: List[CameraSpec] = Field(
        default_factory=list,
        description="Cameras placed on the layout",
    )

    walls: List[Wall] = Field(
        default_factory=list,
        description="Walls and pillars drawn on the layout",
    )
