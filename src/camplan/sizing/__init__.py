"""
Sizing Module
=============

Network, storage, power and recorder sizing from camera configurations.

This module provides:
    - bandwidth: Bitrate per stream and network/switch requirements
    - storage: Per-camera and system storage, RAID tier, growth projection
    - power: PoE budget, switch ports and UPS rating
    - infrastructure: Cabling quantities and NVR hardware

The pipelines are independent; each consumes only its own camera inputs.
"""

from camplan.sizing.bandwidth import (
    CODEC_FACTORS,
    COMPLEXITY_FACTORS,
    analyze_network,
    calculate_bitrate,
    calculate_camera_bandwidth,
    recommend_switch,
)
from camplan.sizing.storage import (
    DUTY_CYCLES,
    RAID_TIERS,
    analyze_storage,
    calculate_camera_storage,
    project_storage_growth,
    select_raid_tier,
)
from camplan.sizing.power import (
    analyze_poe,
    recommend_poe_switch,
    ups_capacity_va,
)
from camplan.sizing.infrastructure import (
    calculate_cable_requirements,
    recommend_nvr,
)


__all__ = [
    # Bandwidth
    "CODEC_FACTORS",
    "COMPLEXITY_FACTORS",
    "analyze_network",
    "calculate_bitrate",
    "calculate_camera_bandwidth",
    "recommend_switch",
    # Storage
    "DUTY_CYCLES",
    "RAID_TIERS",
    "analyze_storage",
    "calculate_camera_storage",
    "project_storage_growth",
    "select_raid_tier",
    # Power
    "analyze_poe",
    "recommend_poe_switch",
    "ups_capacity_va",
    # Infrastructure
    "calculate_cable_requirements",
    "recommend_nvr",
]
