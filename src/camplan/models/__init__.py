"""
Data Models
===========

Pydantic models for CamPlan.

This module re-exports all data models for convenient access.

Models:
    Camera:
        - CameraSpec: Placement and optics of one camera
        - CameraType: bullet, dome or ptz

    Geometry:
        - Point, Polygon: Geometric primitives
        - Wall, WallType: Obstacles blocking line of sight
        - SiteLayout: Complete saved layout

    DORI:
        - DORILevel: identification, recognition, observation, detection
        - DORIResult: Distance per level
        - DORIZone: Visualization band

    Coverage:
        - CoverageStats: Grid-sampled coverage statistics
        - CoverageZone: Range band of a camera wedge
        - BlindSpot: Uncovered grid cell

    Sizing:
        - StreamSpec, NetworkAnalysis: Bandwidth pipeline
        - StorageSpec, SystemStorageAnalysis: Storage pipeline
        - PoECamera, PoEAnalysis: Power pipeline
        - CableRun, CableRequirements: Cabling
        - NVRRecommendation: Recorder hardware
"""

from camplan.models.camera import CameraSpec, CameraType
from camplan.models.geometry import Point, Polygon, Wall, WallType
from camplan.models.layout import SiteLayout
from camplan.models.dori import DORILevel, DORIResult, DORIStandard, DORIZone, SensorDimensions
from camplan.models.coverage import BlindSpot, CoverageStats, CoverageZone
from camplan.models.sizing import (
    BandwidthResult,
    CableRequirements,
    CableRun,
    Codec,
    NetworkAnalysis,
    NVRRecommendation,
    PoEAnalysis,
    PoECamera,
    PoEStandard,
    RaidTier,
    RecordingMode,
    SceneComplexity,
    StorageGrowthProjection,
    StorageResult,
    StorageSpec,
    StreamSpec,
    SystemStorageAnalysis,
)

__all__ = [
    # Camera
    "CameraSpec",
    "CameraType",
    # Geometry
    "Point",
    "Polygon",
    "Wall",
    "WallType",
    "SiteLayout",
    # DORI
    "DORILevel",
    "DORIResult",
    "DORIStandard",
    "DORIZone",
    "SensorDimensions",
    # Coverage
    "BlindSpot",
    "CoverageStats",
    "CoverageZone",
    # Sizing
    "BandwidthResult",
    "CableRequirements",
    "CableRun",
    "Codec",
    "NetworkAnalysis",
    "NVRRecommendation",
    "PoEAnalysis",
    "PoECamera",
    "PoEStandard",
    "RaidTier",
    "RecordingMode",
    "SceneComplexity",
    "StorageGrowthProjection",
    "StorageResult",
    "StorageSpec",
    "StreamSpec",
    "SystemStorageAnalysis",
]
