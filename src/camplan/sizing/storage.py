"""
Storage Sizing
==============

Converts recorded bitrates and retention policy into disk requirements.

Per-Camera Formula:
    daily_gb = bitrate_kbps * 86400 * duty_cycle / (8 * 1024 * 1024)
    total_gb = daily_gb * retention_days

    duty_cycle by recording mode:
        continuous 1.0, scheduled 0.5 (12 h/day), motion 0.3, event 0.2

System Formula:
    total_tb          = sum(daily_gb) * retention_days / 1024
    with_overhead_tb  = total_tb * 1.15          (filesystem, index, database)
    raw_capacity_tb   = with_overhead_tb / (1 - raid_overhead_percent / 100)

RAID Tiers (by with_overhead_tb, upper bound exclusive):
    < 4 TB   RAID 1   50 % overhead   2x 4TB drives
    < 12 TB  RAID 5   25 % overhead   4x 6TB drives
    < 30 TB  RAID 6   33 % overhead   6x 8TB drives
    else     RAID 60  50 % overhead   8-12x 10TB drives

Per-camera figures are rounded to 2 decimals before they are summed.
"""

import logging
from types import MappingProxyType
from typing import List, Mapping, Sequence, Tuple

from camplan.models.sizing import (
    RaidTier,
    RecordingMode,
    StorageGrowthProjection,
    StorageResult,
    StorageSpec,
    SystemStorageAnalysis,
)
from camplan.numeric import round_half_up


logger = logging.getLogger(__name__)


SECONDS_PER_DAY = 86400
KILOBITS_PER_GB = 8 * 1024 * 1024
GB_PER_TB = 1024
FILESYSTEM_OVERHEAD_FACTOR = 1.15

DUTY_CYCLES: Mapping[RecordingMode, float] = MappingProxyType({
    RecordingMode.CONTINUOUS: 1.0,
    RecordingMode.SCHEDULED: 0.5,
    RecordingMode.MOTION: 0.3,
    RecordingMode.EVENT: 0.2,
})

RAID_TIERS: Tuple[RaidTier, ...] = (
    RaidTier(upper_bound_tb=4.0, name="RAID 1 (Mirroring)", overhead_percent=50,
             drive_configuration="2× 4TB drives"),
    RaidTier(upper_bound_tb=12.0, name="RAID 5", overhead_percent=25,
             drive_configuration="4× 6TB drives"),
    RaidTier(upper_bound_tb=30.0, name="RAID 6", overhead_percent=33,
             drive_configuration="6× 8TB drives"),
    RaidTier(upper_bound_tb=None, name="RAID 60", overhead_percent=50,
             drive_configuration="8-12× 10TB drives"),
)

GROWTH_INTERVALS_DAYS: Tuple[int, ...] = (7, 14, 30, 60, 90, 180, 365)


def calculate_camera_storage(spec: StorageSpec) -> StorageResult:
    """
    Calculate storage consumed by one camera.

    Args:
        spec: Bitrate, recording mode and retention of the camera

    Returns:
        Daily and total storage in GB (2 decimals)
    """
    duty_cycle = DUTY_CYCLES[spec.recording_mode]

    daily_storage_gb = (
        spec.bitrate_kbps * SECONDS_PER_DAY * duty_cycle / KILOBITS_PER_GB
    )
    total_storage_gb = daily_storage_gb * spec.retention_days

    return StorageResult(
        daily_storage_gb=round_half_up(daily_storage_gb, 2),
        total_storage_gb=round_half_up(total_storage_gb, 2),
        recording_mode=spec.recording_mode,
        duty_cycle=duty_cycle,
    )


def select_raid_tier(total_tb: float) -> RaidTier:
    """
    Pick the RAID tier for a capacity requirement.

    Each tier's upper bound is exclusive: exactly 4.0 TB selects RAID 5.
    """
    for tier in RAID_TIERS:
        if tier.upper_bound_tb is None or total_tb < tier.upper_bound_tb:
            return tier
    return RAID_TIERS[-1]


def analyze_storage(
    cameras: Sequence[StorageSpec],
    retention_days: int,
) -> SystemStorageAnalysis:
    """
    Analyze system-wide storage requirements.

    The system retention period overrides each camera's own.

    Args:
        cameras: Recording parameters of every camera
        retention_days: Retention period (days)

    Returns:
        SystemStorageAnalysis with totals and RAID recommendation
    """
    camera_results = [
        calculate_camera_storage(cam.model_copy(update={"retention_days": retention_days}))
        for cam in cameras
    ]

    total_daily_gb = sum(result.daily_storage_gb for result in camera_results)
    total_storage_gb = total_daily_gb * retention_days
    total_storage_tb = total_storage_gb / GB_PER_TB

    total_with_overhead_tb = total_storage_tb * FILESYSTEM_OVERHEAD_FACTOR

    tier = select_raid_tier(total_with_overhead_tb)
    raw_capacity_needed_tb = total_with_overhead_tb / (1 - tier.overhead_percent / 100)

    logger.debug(
        f"Storage: cameras={len(cameras)}, retention={retention_days}d, "
        f"total={total_with_overhead_tb:.2f}TB -> {tier.name}"
    )

    return SystemStorageAnalysis(
        cameras=camera_results,
        total_daily_gb=round_half_up(total_daily_gb, 2),
        total_storage_gb=round_half_up(total_storage_gb, 2),
        total_storage_tb=round_half_up(total_storage_tb, 2),
        retention_days=retention_days,
        usable_capacity_tb=round_half_up(total_with_overhead_tb, 2),
        recommended_raid=tier.name,
        raid_overhead_percent=tier.overhead_percent,
        raw_capacity_needed_tb=round_half_up(raw_capacity_needed_tb, 2),
        drive_configuration=tier.drive_configuration,
    )


def project_storage_growth(
    daily_storage_gb: float,
    max_days: int = 365,
) -> List[StorageGrowthProjection]:
    """Storage accumulated at the standard intervals up to ``max_days``."""
    projections = []

    for days in GROWTH_INTERVALS_DAYS:
        if days > max_days:
            break
        total_gb = daily_storage_gb * days
        projections.append(
            StorageGrowthProjection(
                days=days,
                storage_gb=round_half_up(total_gb, 2),
                storage_tb=round_half_up(total_gb / GB_PER_TB, 2),
            )
        )

    return projections
