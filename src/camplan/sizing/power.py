"""
PoE Power Sizing
================

Sums camera power draw into a switch budget and UPS recommendation.

    power_with_overhead = total_watts * 1.2          (efficiency losses)
    ups_va              = ceil(power_with_overhead * 1.4 / 500) * 500

The 1.4 factor converts watts to VA for a power factor of about 0.7.

PoE switch by camera count:
    <= 8    8-port PoE+ switch (120W budget)
    <= 16   16-port PoE+ switch (240W budget)
    <= 24   24-port PoE+ switch (370W budget)
    else    ceil(count / 24) x 24-port PoE+ switches
"""

import logging
import math
from typing import Sequence

from camplan.models.sizing import PoEAnalysis, PoECamera, PoEStandard, PoEStandardCounts
from camplan.numeric import round_int


logger = logging.getLogger(__name__)


EFFICIENCY_OVERHEAD_FACTOR = 1.2
VA_PER_WATT = 1.4
UPS_VA_INCREMENT = 500
PORTS_PER_LARGE_SWITCH = 24


def recommend_poe_switch(camera_count: int) -> str:
    """Pick a PoE switch for a number of cameras."""
    if camera_count <= 8:
        return "8-port PoE+ switch (120W budget)"
    if camera_count <= 16:
        return "16-port PoE+ switch (240W budget)"
    if camera_count <= PORTS_PER_LARGE_SWITCH:
        return "24-port PoE+ switch (370W budget)"

    switches = math.ceil(camera_count / PORTS_PER_LARGE_SWITCH)
    return f"Multiple 24-port PoE+ switches ({switches} switches needed)"


def ups_capacity_va(power_watts: float) -> int:
    """UPS rating in VA, rounded up to the next 500 VA step."""
    va = power_watts * VA_PER_WATT
    return int(math.ceil(va / UPS_VA_INCREMENT) * UPS_VA_INCREMENT)


def analyze_poe(cameras: Sequence[PoECamera]) -> PoEAnalysis:
    """
    Calculate PoE power requirements.

    Unrecognized power classes are counted as plain PoE.

    Args:
        cameras: Power class and draw of every camera

    Returns:
        PoEAnalysis with totals, counts per class, switch and UPS
    """
    total_power = 0.0
    by_standard = {"poe": 0, "poe_plus": 0, "poe_plus_plus": 0}

    for cam in cameras:
        total_power += cam.power_watts

        if cam.poe_standard == PoEStandard.POE_PLUS_PLUS.value:
            by_standard["poe_plus_plus"] += 1
        elif cam.poe_standard == PoEStandard.POE_PLUS.value:
            by_standard["poe_plus"] += 1
        else:
            by_standard["poe"] += 1

    power_with_overhead = total_power * EFFICIENCY_OVERHEAD_FACTOR
    ups_va = ups_capacity_va(power_with_overhead)

    logger.debug(
        f"PoE: cameras={len(cameras)}, total={total_power:.1f}W, "
        f"with_overhead={power_with_overhead:.1f}W, ups={ups_va}VA"
    )

    return PoEAnalysis(
        total_power_watts=round_int(total_power),
        power_with_overhead_watts=round_int(power_with_overhead),
        cameras_by_standard=PoEStandardCounts(**by_standard),
        recommended_switch=recommend_poe_switch(len(cameras)),
        ups_recommendation=f"{ups_va}VA UPS for ~30 min runtime at 50% load",
        ups_capacity_va=ups_va,
    )
