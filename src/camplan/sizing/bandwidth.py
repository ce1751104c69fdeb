"""
Bandwidth & Network Sizing
==========================

Converts camera stream parameters into bitrate and network requirements.

Bitrate Formula:
    base      = resolution_mp * 1024            (1024 kbps per megapixel)
    bitrate   = base * codec_factor * (fps / 30) * complexity_factor

    codec_factor:       H.264 = 1.0, H.265 = 0.5 (twice as efficient)
    complexity_factor:  low = 0.7, medium = 1.0, high = 1.3

    An explicit ``bitrate_kbps`` on the stream bypasses the formula.

Network Aggregation:
    total   = sum(per-camera Mbps)
    peak    = total * 1.10   (protocol overhead)
    average = total * 0.80   (not every camera peaks at once)

    The switch class is chosen from the peak figure.
"""

import logging
from types import MappingProxyType
from typing import Mapping, Sequence, Tuple

from camplan.models.sizing import (
    BandwidthResult,
    Codec,
    NetworkAnalysis,
    SceneComplexity,
    StreamSpec,
)
from camplan.numeric import round_half_up, round_int


logger = logging.getLogger(__name__)


KBPS_PER_MEGAPIXEL = 1024
BASELINE_FPS = 30.0
KBPS_PER_MBPS = 1024

PEAK_OVERHEAD_FACTOR = 1.10
AVERAGE_LOAD_FACTOR = 0.80

CODEC_FACTORS: Mapping[Codec, float] = MappingProxyType({
    Codec.H264: 1.0,
    Codec.H265: 0.5,
})

COMPLEXITY_FACTORS: Mapping[SceneComplexity, float] = MappingProxyType({
    SceneComplexity.LOW: 0.7,
    SceneComplexity.MEDIUM: 1.0,
    SceneComplexity.HIGH: 1.3,
})

# (exclusive peak Mbps ceiling, switch, recommendation)
SWITCH_TIERS: Tuple[Tuple[float, str, str], ...] = (
    (
        100.0,
        "Gigabit Switch (1 Gbps)",
        "Standard gigabit switch sufficient for this deployment",
    ),
    (
        500.0,
        "Managed Gigabit Switch with VLANs",
        "Recommend multiple VLANs for camera traffic segmentation",
    ),
    (
        float("inf"),
        "10 Gigabit Backbone Switch",
        "High bandwidth deployment requires 10GbE backbone network",
    ),
)


def calculate_bitrate(spec: StreamSpec) -> float:
    """
    Calculate the bitrate of a camera stream.

    Args:
        spec: Stream parameters

    Returns:
        Bitrate in kbps: the override verbatim when one is set, otherwise
        the formula result rounded to a whole kbps
    """
    if spec.bitrate_kbps is not None:
        return spec.bitrate_kbps

    base_bitrate = spec.resolution_mp * KBPS_PER_MEGAPIXEL
    fps_factor = spec.fps / BASELINE_FPS

    bitrate = (
        base_bitrate
        * CODEC_FACTORS[spec.codec]
        * fps_factor
        * COMPLEXITY_FACTORS[spec.scene_complexity]
    )
    return round_int(bitrate)


def calculate_camera_bandwidth(spec: StreamSpec) -> BandwidthResult:
    """Bandwidth of a single stream, in Mbps rounded to 2 decimals."""
    bitrate_kbps = calculate_bitrate(spec)

    return BandwidthResult(
        per_camera_mbps=round_half_up(bitrate_kbps / KBPS_PER_MBPS, 2),
        bitrate_kbps=bitrate_kbps,
        codec=spec.codec,
        fps=spec.fps,
        scene_complexity=spec.scene_complexity,
    )


def recommend_switch(peak_mbps: float) -> Tuple[str, str]:
    """Pick (switch, recommendation) for a peak bandwidth."""
    for ceiling, switch, recommendation in SWITCH_TIERS:
        if peak_mbps < ceiling:
            return switch, recommendation
    # Only reachable for NaN input
    _, switch, recommendation = SWITCH_TIERS[-1]
    return switch, recommendation


def analyze_network(cameras: Sequence[StreamSpec]) -> NetworkAnalysis:
    """
    Analyze network requirements for all cameras.

    Args:
        cameras: Stream parameters of every camera

    Returns:
        NetworkAnalysis with totals (Mbps, 2 decimals) and switch class
    """
    camera_results = [calculate_camera_bandwidth(cam) for cam in cameras]

    total_mbps = sum(result.per_camera_mbps for result in camera_results)
    peak_mbps = total_mbps * PEAK_OVERHEAD_FACTOR
    average_mbps = total_mbps * AVERAGE_LOAD_FACTOR

    recommended_switch, network_recommendation = recommend_switch(peak_mbps)

    logger.debug(
        f"Network: cameras={len(cameras)}, total={total_mbps:.2f}Mbps, "
        f"peak={peak_mbps:.2f}Mbps -> {recommended_switch}"
    )

    return NetworkAnalysis(
        total_bandwidth_mbps=round_half_up(total_mbps, 2),
        peak_bandwidth_mbps=round_half_up(peak_mbps, 2),
        average_bandwidth_mbps=round_half_up(average_mbps, 2),
        camera_count=len(cameras),
        cameras=camera_results,
        recommended_switch=recommended_switch,
        network_recommendation=network_recommendation,
    )
