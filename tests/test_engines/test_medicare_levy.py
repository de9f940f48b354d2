"""Tests for the Medicare levy attributable to a capital gain.

Two policies are supported:
  - TAX_DELTA (default): 2% of the income tax on the gain.
  - TAXABLE_INCOME: levy on taxable income with the low-income reduction,
    reported as the increase caused by the gain.
"""

from decimal import Decimal

import pytest

from cgtcalc.engines.calculator import CGTCalculator
from cgtcalc.models.enums import IncomeYear, MedicareLevyPolicy
from cgtcalc.models.inputs import Asset, CGTInputs


@pytest.fixture
def income_policy_engine():
    return CGTCalculator(MedicareLevyPolicy.TAXABLE_INCOME)


class TestTaxDeltaPolicy:
    def test_two_percent_of_tax_on_gain(self, calculator, scenario_a_inputs):
        res = calculator.calculate(scenario_a_inputs)
        assert res.medicare_levy == res.cgt_payable * Decimal("0.02")

    def test_no_gain_no_levy(self, calculator):
        res = calculator.calculate(CGTInputs(annual_taxable_income=Decimal("150000")))
        assert res.medicare_levy == Decimal("0")

    def test_levy_rounded_to_cents(self, calculator):
        # $18,200 + $100.03 short-term gain -> tax on gain $16.00 (16% of 100.03 = 16.0048)
        inputs = CGTInputs(
            annual_taxable_income=Decimal("18200"),
            assets=[
                Asset(
                    id="a",
                    owned_more_than_12_months=False,
                    purchase_price=Decimal("0"),
                    sale_price=Decimal("100.03"),
                )
            ],
        )
        res = calculator.calculate(inputs)
        assert res.cgt_payable == Decimal("16.00")
        assert res.medicare_levy == Decimal("0.32")


class TestTaxableIncomePolicy:
    def test_full_levy_above_shade_in(self, income_policy_engine, scenario_a_inputs):
        res = income_policy_engine.calculate(scenario_a_inputs)
        # 2% x $165K - 2% x $90K
        assert res.medicare_levy == Decimal("1500")
        assert res.total_tax_liability == Decimal("26100")

    def test_shade_in_range(self, income_policy_engine):
        inputs = CGTInputs(
            annual_taxable_income=Decimal("20000"),
            assets=[
                Asset(
                    id="a",
                    owned_more_than_12_months=False,
                    purchase_price=Decimal("0"),
                    sale_price=Decimal("10000"),
                )
            ],
        )
        res = income_policy_engine.calculate(inputs)
        # $30K is inside the shade-in band: 10% x (30,000 - 27,222)
        assert res.medicare_levy == Decimal("277.80")
        assert res.cgt_payable == Decimal("1600")

    def test_below_threshold(self):
        levy = CGTCalculator.compute_levy_on_income(Decimal("27222"), IncomeYear.FY_2025_26)
        assert levy == Decimal("0")

    def test_2023_24_threshold(self):
        levy = CGTCalculator.compute_levy_on_income(Decimal("27000"), IncomeYear.FY_2023_24)
        assert levy == Decimal("100.00")

    def test_shade_in_meets_full_rate(self):
        # 10% x (34,027.50 - 27,222) == 2% x 34,027.50
        levy = CGTCalculator.compute_levy_on_income(Decimal("34027.50"), IncomeYear.FY_2024_25)
        assert levy == Decimal("680.55")

    def test_total_still_sum_of_parts(self, income_policy_engine, scenario_a_inputs):
        res = income_policy_engine.calculate(scenario_a_inputs)
        assert res.total_tax_liability == res.cgt_payable + res.medicare_levy
