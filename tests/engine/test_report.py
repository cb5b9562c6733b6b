"""Tests for the plain-text report builders."""

from dataclasses import replace

from src.engine.recharge import estimate_recharge
from src.engine.report import recharge_report, rwh_report
from src.engine.rwh import estimate_rwh


class TestRWHReport:
    def test_sections_and_figures(self, canonical_rwh_input):
        text = rwh_report(canonical_rwh_input, estimate_rwh(canonical_rwh_input))
        assert "Rainwater Harvesting Report" in text
        assert "Economic Analysis" in text
        assert "Bengaluru" in text
        assert "163,200 L/year" in text
        assert "82.8%" in text
        assert "₹145,800" in text
        assert "111.6 years" in text
        assert "Highly Feasible" in text

    def test_missing_details(self, canonical_rwh_input):
        inputs = replace(canonical_rwh_input, location="", budget="")
        text = rwh_report(inputs, estimate_rwh(inputs))
        assert "Not specified" in text


class TestRechargeReport:
    def test_sections_and_figures(self, canonical_ar_input):
        text = recharge_report(canonical_ar_input, estimate_recharge(canonical_ar_input))
        assert "Artificial Recharge Report" in text
        assert "Recharge Pit" in text
        assert "350,000 L/year" in text
        assert "24.0 mm/day" in text
        assert "56.0 kg CO2/year" in text
        assert "Highly Feasible (100/100)" in text
        assert "Existing Borewell:" in text

    def test_borewell_flag(self, clay_ar_input):
        text = recharge_report(clay_ar_input, estimate_recharge(clay_ar_input))
        assert "Borewell Recharge" in text
        assert "Requires Optimization" in text
