"""
Bandwidth Sizing Tests
======================
"""

import pytest
from pydantic import ValidationError

from camplan.models import Codec, SceneComplexity, StreamSpec
from camplan.sizing import (
    analyze_network,
    calculate_bitrate,
    calculate_camera_bandwidth,
    recommend_switch,
)


class TestBitrate:
    """Tests for calculate_bitrate."""

    def test_4mp_h264(self, sample_stream):
        assert calculate_bitrate(sample_stream) == 4096

    @pytest.mark.parametrize("resolution_mp,h264_kbps,h265_kbps", [
        (2, 2048, 1024),
        (4, 4096, 2048),
        (8, 8192, 4096),
        (1.3, 1331, 666),
    ])
    def test_h265_halves_bitrate(self, resolution_mp, h264_kbps, h265_kbps):
        """Halving happens before rounding, so odd H.264 rates differ by 1 kbps."""
        h264 = StreamSpec(resolution_mp=resolution_mp)
        h265 = h264.model_copy(update={"codec": Codec.H265})

        assert calculate_bitrate(h264) == h264_kbps
        assert calculate_bitrate(h265) == h265_kbps
        assert abs(2 * calculate_bitrate(h265) - calculate_bitrate(h264)) <= 1

    def test_fps_and_complexity(self):
        """4096 * (15/30) * 0.7 = 1433.6 kbps."""
        spec = StreamSpec(resolution_mp=4, fps=15, scene_complexity=SceneComplexity.LOW)
        assert calculate_bitrate(spec) == 1434

    def test_high_complexity(self):
        spec = StreamSpec(resolution_mp=2, scene_complexity=SceneComplexity.HIGH)
        assert calculate_bitrate(spec) == 2662

    def test_override_skips_formula(self):
        spec = StreamSpec(resolution_mp=8, codec=Codec.H265, fps=5, bitrate_kbps=3000)
        assert calculate_bitrate(spec) == 3000

    def test_fractional_override_kept(self):
        """Datasheet bitrates are not rounded to whole kbps."""
        spec = StreamSpec(resolution_mp=4, bitrate_kbps=2500.5)

        assert calculate_bitrate(spec) == 2500.5
        assert calculate_camera_bandwidth(spec).bitrate_kbps == 2500.5

    def test_override_must_be_positive(self):
        with pytest.raises(ValidationError):
            StreamSpec(resolution_mp=4, bitrate_kbps=0)

    def test_per_camera_mbps(self, sample_stream):
        result = calculate_camera_bandwidth(sample_stream)

        assert result.per_camera_mbps == 4.0
        assert result.bitrate_kbps == 4096
        assert result.codec == Codec.H264


class TestNetwork:
    """Tests for analyze_network and recommend_switch."""

    def test_ten_cameras(self):
        cameras = [
            StreamSpec(id=f"cam-{i}", resolution_mp=4, bitrate_kbps=8192)
            for i in range(10)
        ]
        analysis = analyze_network(cameras)

        assert analysis.total_bandwidth_mbps == 80.0
        assert analysis.peak_bandwidth_mbps == 88.0
        assert analysis.average_bandwidth_mbps == 64.0
        assert analysis.camera_count == 10
        assert analysis.recommended_switch == "Gigabit Switch (1 Gbps)"

    def test_no_cameras(self):
        analysis = analyze_network([])

        assert analysis.total_bandwidth_mbps == 0.0
        assert analysis.camera_count == 0
        assert analysis.recommended_switch == "Gigabit Switch (1 Gbps)"

    @pytest.mark.parametrize("peak,expected", [
        (99.99, "Gigabit Switch (1 Gbps)"),
        (100.0, "Managed Gigabit Switch with VLANs"),
        (499.99, "Managed Gigabit Switch with VLANs"),
        (500.0, "10 Gigabit Backbone Switch"),
    ])
    def test_switch_tiers(self, peak, expected):
        switch, _ = recommend_switch(peak)
        assert switch == expected
