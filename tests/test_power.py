"""
PoE Sizing Tests
================
"""

import pytest

from camplan.models import PoECamera
from camplan.sizing import analyze_poe, recommend_poe_switch, ups_capacity_va


class TestPoE:
    """Tests for analyze_poe."""

    def test_mixed_standards(self):
        cameras = [
            PoECamera(id="a", poe_standard="PoE", power_watts=10),
            PoECamera(id="b", poe_standard="PoE+", power_watts=20),
            PoECamera(id="c", poe_standard="PoE++", power_watts=30),
            PoECamera(id="d", poe_standard="proprietary", power_watts=5),
        ]
        analysis = analyze_poe(cameras)

        assert analysis.total_power_watts == 65
        assert analysis.power_with_overhead_watts == 78
        assert analysis.cameras_by_standard.poe == 2
        assert analysis.cameras_by_standard.poe_plus == 1
        assert analysis.cameras_by_standard.poe_plus_plus == 1
        assert analysis.recommended_switch == "8-port PoE+ switch (120W budget)"
        assert analysis.ups_capacity_va == 500
        assert analysis.ups_recommendation.startswith("500VA UPS")

    def test_no_cameras(self):
        analysis = analyze_poe([])

        assert analysis.total_power_watts == 0
        assert analysis.ups_capacity_va == 0


class TestPoEHelpers:
    """Tests for switch and UPS selection."""

    @pytest.mark.parametrize("count,expected", [
        (8, "8-port PoE+ switch (120W budget)"),
        (9, "16-port PoE+ switch (240W budget)"),
        (24, "24-port PoE+ switch (370W budget)"),
        (25, "Multiple 24-port PoE+ switches (2 switches needed)"),
        (73, "Multiple 24-port PoE+ switches (4 switches needed)"),
    ])
    def test_switch(self, count, expected):
        assert recommend_poe_switch(count) == expected

    def test_ups_rounds_up_to_500(self):
        """400 W * 1.4 = 560 VA -> 1000 VA."""
        assert ups_capacity_va(400) == 1000
        assert ups_capacity_va(1) == 500
