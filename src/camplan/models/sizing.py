"""
Sizing Models
=============

Input and output models for network, storage, power and NVR sizing.

Inputs:
    - StreamSpec: Per-camera stream parameters (bitrate pipeline)
    - StorageSpec: Per-camera recording parameters (storage pipeline)
    - PoECamera: Per-camera power class and draw (PoE pipeline)
    - CableRun: Per-camera cable distance (cabling)

Outputs:
    - BandwidthResult / NetworkAnalysis
    - StorageResult / SystemStorageAnalysis / StorageGrowthProjection
    - PoEAnalysis
    - CableRequirements
    - NVRRecommendation

Units:
    Bitrates in kbps, bandwidth in Mbps (1 Mbps = 1024 kbps), storage in
    GB / TB (1 TB = 1024 GB), power in Watts, lengths in meters.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


# =============================================================================
# Enumerations
# =============================================================================

class Codec(str, Enum):
    """Video compression codec."""

    H264 = "H.264"
    H265 = "H.265"


class SceneComplexity(str, Enum):
    """
    Amount of motion/detail in the scene.

    Attributes:
        LOW: Static areas (parking lots, hallways)
        MEDIUM: Normal activity (offices, retail)
        HIGH: High traffic (entrances, busy areas)
    """

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class RecordingMode(str, Enum):
    """When the recorder writes footage to disk."""

    CONTINUOUS = "continuous"
    MOTION = "motion"
    SCHEDULED = "scheduled"
    EVENT = "event"


class PoEStandard(str, Enum):
    """Power-over-Ethernet budget class."""

    POE = "PoE"
    POE_PLUS = "PoE+"
    POE_PLUS_PLUS = "PoE++"


# =============================================================================
# Network
# =============================================================================

class StreamSpec(BaseModel):
    """
    Per-camera streaming descriptor.

    When ``bitrate_kbps`` is supplied it is used verbatim and the
    bitrate formula is skipped, so a datasheet value can be pinned.
    """

    id: str = Field(default="", description="Camera identifier")

    resolution_mp: float = Field(..., gt=0, description="Resolution in megapixels")

    resolution_width: Optional[int] = Field(default=None, gt=0, description="Horizontal resolution (px)")

    resolution_height: Optional[int] = Field(default=None, gt=0, description="Vertical resolution (px)")

    fps: float = Field(default=30.0, gt=0, description="Frames per second")

    codec: Codec = Field(default=Codec.H264, description="Compression codec")

    scene_complexity: SceneComplexity = Field(
        default=SceneComplexity.MEDIUM,
        description="Scene complexity: low, medium or high",
    )

    bitrate_kbps: Optional[float] = Field(
        default=None,
        gt=0,
        description="Explicit bitrate override (kbps)",
    )


class BandwidthResult(BaseModel):
    """Bandwidth of a single camera stream."""

    per_camera_mbps: float = Field(..., ge=0, description="Stream bandwidth (Mbps)")
    bitrate_kbps: float = Field(..., ge=0, description="Stream bitrate (kbps)")
    codec: Codec
    fps: float
    scene_complexity: SceneComplexity


class NetworkAnalysis(BaseModel):
    """System-wide network requirements."""

    total_bandwidth_mbps: float = Field(..., ge=0, description="Sum of all streams (Mbps)")
    peak_bandwidth_mbps: float = Field(..., ge=0, description="Total plus protocol overhead (Mbps)")
    average_bandwidth_mbps: float = Field(..., ge=0, description="Expected sustained load (Mbps)")
    camera_count: int = Field(..., ge=0)
    cameras: List[BandwidthResult] = Field(default_factory=list)
    recommended_switch: str
    network_recommendation: str


# =============================================================================
# Storage
# =============================================================================

class StorageSpec(BaseModel):
    """Per-camera recording descriptor."""

    id: str = Field(default="", description="Camera identifier")

    bitrate_kbps: float = Field(..., ge=0, description="Recorded bitrate (kbps)")

    recording_mode: RecordingMode = Field(
        default=RecordingMode.CONTINUOUS,
        description="Recording mode: continuous, motion, scheduled or event",
    )

    retention_days: int = Field(default=30, ge=0, description="Retention period (days)")


class StorageResult(BaseModel):
    """Storage consumed by one camera."""

    daily_storage_gb: float = Field(..., ge=0)
    total_storage_gb: float = Field(..., ge=0)
    recording_mode: RecordingMode
    duty_cycle: float = Field(..., ge=0, le=1, description="Fraction of time recording")


@dataclass(frozen=True, slots=True)
class RaidTier:
    """
    One row of the RAID recommendation table.

    Attributes:
        upper_bound_tb: Exclusive capacity ceiling for this tier (None = unbounded)
        name: RAID level label
        overhead_percent: Capacity lost to redundancy (%)
        drive_configuration: Suggested drive layout
    """

    upper_bound_tb: Optional[float]
    name: str
    overhead_percent: float
    drive_configuration: str


class SystemStorageAnalysis(BaseModel):
    """System-wide storage requirements and RAID recommendation."""

    cameras: List[StorageResult] = Field(default_factory=list)
    total_daily_gb: float = Field(..., ge=0)
    total_storage_gb: float = Field(..., ge=0)
    total_storage_tb: float = Field(..., ge=0)
    retention_days: int = Field(..., ge=0)
    usable_capacity_tb: float = Field(..., ge=0, description="Capacity needed after filesystem overhead")
    recommended_raid: str
    raid_overhead_percent: float = Field(..., ge=0, lt=100)
    raw_capacity_needed_tb: float = Field(..., ge=0, description="Raw disk capacity before RAID")
    drive_configuration: str


class StorageGrowthProjection(BaseModel):
    """Storage accumulated after ``days`` of recording."""

    days: int
    storage_gb: float
    storage_tb: float


# =============================================================================
# Power
# =============================================================================

class PoECamera(BaseModel):
    """Power class and draw of one camera."""

    id: str = Field(default="", description="Camera identifier")
    poe_standard: str = Field(default=PoEStandard.POE.value, description="PoE, PoE+ or PoE++")
    power_watts: float = Field(..., ge=0, description="Maximum draw (W)")


class PoEStandardCounts(BaseModel):
    """Camera count per PoE class."""

    poe: int = 0
    poe_plus: int = 0
    poe_plus_plus: int = 0


class PoEAnalysis(BaseModel):
    """System-wide power budget."""

    total_power_watts: int = Field(..., ge=0)
    power_with_overhead_watts: int = Field(..., ge=0)
    cameras_by_standard: PoEStandardCounts
    recommended_switch: str
    ups_recommendation: str
    ups_capacity_va: int = Field(..., ge=0)


# =============================================================================
# Cabling
# =============================================================================

class CableRun(BaseModel):
    """Cable run from one camera to its switch."""

    id: str = Field(default="", description="Camera identifier")
    distance_to_switch_m: float = Field(..., ge=0, description="Run length (m)")


class CableRequirements(BaseModel):
    """Cable quantities and type recommendation."""

    total_length_m: int = Field(..., ge=0)
    total_length_with_waste_m: int = Field(..., ge=0)
    cable_type_recommendation: str
    connector_count: int = Field(..., ge=0)
    notes: List[str] = Field(default_factory=list)


# =============================================================================
# NVR
# =============================================================================

class NVRRecommendation(BaseModel):
    """Recorder/server hardware and rough budget."""

    cpu_cores: int = Field(..., gt=0)
    ram_gb: int = Field(..., gt=0)
    os_disk_type: str
    os_disk_size_gb: int = Field(..., gt=0)
    storage_drives: str
    raid_controller: str
    estimated_cost_aud: int = Field(..., ge=0)
