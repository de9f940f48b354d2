"""Tests for the CGT summary report."""

from decimal import Decimal

from cgtcalc.engines.calculator import calculate_cgt
from cgtcalc.models.inputs import Asset, CGTInputs
from cgtcalc.reports import CGTSummaryGenerator


class TestCGTSummaryGenerator:
    def test_headline_and_rows(self, scenario_a_inputs):
        text = CGTSummaryGenerator().render(calculate_cgt(scenario_a_inputs))
        assert "CAPITAL GAINS TAX ESTIMATE (2025-2026)" in text
        assert "Tax Payable: $25,092" in text
        assert "Asset 1 Taxable Capital Gain/Loss:" in text
        assert "$75,000.00" in text
        assert "Medicare Levy on Gain:" in text
        assert "$492.00" in text
        assert "Income Tax on Gain:" in text
        assert "$24,600.00" in text
        assert "Tax without capital gain:" in text
        assert "$17,788.00" in text
        assert "$165,000.00" in text

    def test_one_row_per_asset(self, gain_and_loss_assets):
        text = CGTSummaryGenerator().render(calculate_cgt(CGTInputs(assets=gain_and_loss_assets)))
        assert "Asset 1 Taxable Capital Gain/Loss:" in text
        assert "Asset 2 Taxable Capital Gain/Loss:" in text
        assert "(loss)" in text

    def test_carry_forward_only_when_present(self, scenario_a_inputs):
        text = CGTSummaryGenerator().render(calculate_cgt(scenario_a_inputs))
        assert "carried forward" not in text

        losing = CGTInputs(assets=[Asset(id="a", purchase_price=Decimal("9000"), sale_price=Decimal("4000"))])
        text = CGTSummaryGenerator().render(calculate_cgt(losing))
        assert "Capital losses carried forward:" in text
        assert "$5,000.00" in text
