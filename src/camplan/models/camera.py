"""
Camera Models
=============

Placement and optics descriptor for a single camera on the floor plan.

A CameraSpec is created and edited by the layout UI. Engines only read it;
every derived value (sector polygon, DORI distances, coverage counts) is
recomputed from it on demand.

Coordinate Conventions:
    - x, y: canvas pixels, origin top-left, Y down
    - rotation: degrees, measured clockwise on screen from the +X axis
    - field_of_view: full opening angle in degrees
    - range: maximum modeled distance in METERS (converted to pixels with
      a pixels-per-meter scale)

Example:
    from camplan.models import CameraSpec

    camera = CameraSpec(
        id="cam-1",
        x=120,
        y=80,
        rotation=90,
        field_of_view=70,
        range=25,
        resolution_height=1080,
        lens_mm=4.0,
        sensor_size='1/3"',
    )
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class CameraType(str, Enum):
    """Physical camera housing."""

    BULLET = "bullet"
    DOME = "dome"
    PTZ = "ptz"


class CameraSpec(BaseModel):
    """
    Optical and placement descriptor for one camera.

    Attributes:
        id: Identifier assigned by the layout editor
        x: Horizontal canvas position (pixels)
        y: Vertical canvas position (pixels)
        rotation: Heading in degrees
        field_of_view: Opening angle in degrees, (0, 360]
        range: Maximum modeled distance in meters (> 0)
        camera_type: Housing type
        resolution_height: Vertical sensor resolution (pixels), optional
        lens_mm: Focal length (mm), optional
        sensor_size: Sensor designation such as '1/2.8"', optional
    """

    id: str = Field(default="", description="Camera identifier")

    x: float = Field(..., description="Horizontal position (pixels from left)")

    y: float = Field(..., description="Vertical position (pixels from top)")

    rotation: float = Field(
        default=0.0,
        ge=0.0,
        le=360.0,
        description="Heading in degrees, clockwise from the +X axis",
    )

    field_of_view: float = Field(
        default=90.0,
        gt=0.0,
        le=360.0,
        description="Full opening angle in degrees",
    )

    range: float = Field(
        default=30.0,
        gt=0.0,
        description="Maximum modeled distance in meters",
    )

    camera_type: CameraType = Field(
        default=CameraType.BULLET,
        description="Housing type: bullet, dome or ptz",
    )

    resolution_height: Optional[int] = Field(
        default=None,
        gt=0,
        description="Vertical resolution in pixels",
    )

    lens_mm: Optional[float] = Field(
        default=None,
        gt=0,
        description="Lens focal length in millimeters",
    )

    sensor_size: Optional[str] = Field(
        default=None,
        description="Sensor designation, e.g. '1/3\"'",
    )

    @property
    def has_optics(self) -> bool:
        """Whether resolution and lens are known, enabling DORI analysis."""
        return self.resolution_height is not None and self.lens_mm is not None
