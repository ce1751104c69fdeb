"""
Infrastructure Recommendations
==============================

Cabling quantities and NVR (network video recorder) hardware.

Cabling:
    total_with_waste = sum(run lengths) * 1.1
    cable type by the longest run:
        > 100 m  Fiber Optic (beyond the Cat6 channel limit)
        > 55 m   Cat6a (10 Gbps over long runs)
        else     Cat6
    two connectors per run (camera end + switch end)

NVR:
    cpu_cores   4, 6 (> 8 cams), 8 (> 16 cams), 12 (> 32 cams)
    ram_gb      4 + ceil(0.5 * cameras)
    drives      by storage: < 8 TB, < 24 TB, else
    controller  hardware RAID above 16 cameras
    cost (AUD)  1500 + 150/core + 50/GB RAM + 150/TB + 800 for hardware RAID
"""

import logging
import math
from typing import Optional, Sequence

from camplan.models.sizing import CableRequirements, CableRun, NVRRecommendation
from camplan.numeric import round_int


logger = logging.getLogger(__name__)


CABLE_WASTE_FACTOR = 1.1
CAT6A_THRESHOLD_M = 55
FIBER_THRESHOLD_M = 100
CONNECTORS_PER_RUN = 2

HARDWARE_RAID_CAMERA_THRESHOLD = 16

NVR_BASE_COST = 1500
NVR_COST_PER_CORE = 150
NVR_COST_PER_GB_RAM = 50
NVR_COST_PER_TB = 150
NVR_HARDWARE_RAID_COST = 800


def calculate_cable_requirements(
    runs: Sequence[CableRun],
    max_distance_m: Optional[float] = None,
) -> CableRequirements:
    """
    Calculate cable quantities and pick a cable type.

    Args:
        runs: Cable run per camera
        max_distance_m: Longest run; derived from ``runs`` when omitted

    Returns:
        CableRequirements with lengths (meters, rounded) and notes
    """
    if max_distance_m is None:
        max_distance_m = max((run.distance_to_switch_m for run in runs), default=0.0)

    total_length = sum(run.distance_to_switch_m for run in runs)
    total_with_waste = total_length * CABLE_WASTE_FACTOR

    notes = []
    if max_distance_m > FIBER_THRESHOLD_M:
        cable_type = "Fiber Optic"
        notes.append("Distances exceed 100m Cat6 limit, fiber optic recommended")
    elif max_distance_m > CAT6A_THRESHOLD_M:
        cable_type = "Cat6a"
        notes.append("Cat6a recommended for distances over 55m to support 10 Gbps")
    else:
        cable_type = "Cat6"
        notes.append("Cat6 suitable for all camera distances in this deployment")

    notes.append(f"Total cable runs: {len(runs)}")
    notes.append(f"Longest run: {round_int(max_distance_m)}m")

    return CableRequirements(
        total_length_m=round_int(total_length),
        total_length_with_waste_m=round_int(total_with_waste),
        cable_type_recommendation=cable_type,
        connector_count=len(runs) * CONNECTORS_PER_RUN,
        notes=notes,
    )


def recommend_nvr(camera_count: int, total_storage_tb: float) -> NVRRecommendation:
    """
    Recommend NVR/server hardware.

    Args:
        camera_count: Number of cameras recorded
        total_storage_tb: Storage requirement (TB)

    Returns:
        NVRRecommendation with hardware and a rough cost estimate
    """
    if camera_count > 32:
        cpu_cores = 12
    elif camera_count > 16:
        cpu_cores = 8
    elif camera_count > 8:
        cpu_cores = 6
    else:
        cpu_cores = 4

    # 4GB base + 0.5GB per camera
    ram_gb = 4 + math.ceil(camera_count * 0.5)

    if total_storage_tb < 8:
        storage_drives = "2-4× Surveillance HDDs"
    elif total_storage_tb < 24:
        storage_drives = "4-6× Surveillance HDDs"
    else:
        storage_drives = "6-12× Surveillance HDDs"

    hardware_raid = camera_count > HARDWARE_RAID_CAMERA_THRESHOLD
    raid_controller = (
        "Hardware RAID controller with battery backup"
        if hardware_raid
        else "Software RAID (built-in)"
    )

    estimated_cost = (
        NVR_BASE_COST
        + cpu_cores * NVR_COST_PER_CORE
        + ram_gb * NVR_COST_PER_GB_RAM
        + total_storage_tb * NVR_COST_PER_TB
        + (NVR_HARDWARE_RAID_COST if hardware_raid else 0)
    )

    return NVRRecommendation(
        cpu_cores=cpu_cores,
        ram_gb=ram_gb,
        os_disk_type="NVMe SSD",
        os_disk_size_gb=256,
        storage_drives=storage_drives,
        raid_controller=raid_controller,
        estimated_cost_aud=round_int(estimated_cost),
    )
