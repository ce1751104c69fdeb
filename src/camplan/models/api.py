"""
HTTP Request/Response Schemas
=============================

Request bodies accepted by the CamPlan HTTP service. Responses reuse the
engine result models directly, except for DORI which bundles distances and
zones together.

Optional fields left unset fall back to the values in ``camplan.config``.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from camplan.models.camera import CameraSpec
from camplan.models.dori import DORIResult, DORIZone
from camplan.models.geometry import Wall
from camplan.models.sizing import CableRun, PoECamera, StorageSpec, StreamSpec


class DORIRequest(BaseModel):
    """Camera optics to analyze."""

    resolution_height: int = Field(..., gt=0, description="Vertical resolution (px)")
    lens_mm: float = Field(..., gt=0, description="Focal length (mm)")
    sensor_size: str = Field(default='1/3"', description="Sensor designation")


class DORIResponse(BaseModel):
    """DORI distances with the matching visualization zones."""

    distances: DORIResult
    zones: List[DORIZone]


class CoverageRequest(BaseModel):
    """Cameras and canvas for a coverage query."""

    cameras: List[CameraSpec] = Field(default_factory=list)
    canvas_width: float = Field(..., gt=0, description="Canvas width (px)")
    canvas_height: float = Field(..., gt=0, description="Canvas height (px)")
    sample_step_px: Optional[float] = Field(default=None, gt=0, description="Grid spacing (px)")
    pixels_per_meter: Optional[float] = Field(default=None, gt=0, description="Canvas scale")
    walls: List[Wall] = Field(default_factory=list)


class NetworkRequest(BaseModel):
    """Streams to size the network for."""

    cameras: List[StreamSpec] = Field(default_factory=list)


class StorageRequest(BaseModel):
    """Recording streams and retention policy."""

    cameras: List[StorageSpec] = Field(default_factory=list)
    retention_days: Optional[int] = Field(default=None, ge=1, description="Retention (days)")


class PoERequest(BaseModel):
    """Cameras to power."""

    cameras: List[PoECamera] = Field(default_factory=list)


class CablingRequest(BaseModel):
    """Cable runs to the switch."""

    runs: List[CableRun] = Field(default_factory=list)
    max_distance_m: Optional[float] = Field(default=None, ge=0, description="Longest run (m)")


class NVRRequest(BaseModel):
    """Recorder sizing inputs."""

    camera_count: int = Field(..., ge=0)
    total_storage_tb: float = Field(..., ge=0)
