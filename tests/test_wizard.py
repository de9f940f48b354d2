"""Tests for the interactive wizard."""

import io
from decimal import Decimal
from unittest.mock import patch

from rich.console import Console

from cgtcalc.formatting import AmountField
from cgtcalc.models.enums import IncomeYear, MedicareLevyPolicy
from cgtcalc.wizard import _phase_assets, _prompt_amount, run_wizard


def _console() -> Console:
    return Console(file=io.StringIO(), width=120)


class TestPromptAmount:
    def test_sanitises_typed_text(self):
        with patch("cgtcalc.wizard.Prompt.ask", return_value="$90,000"):
            assert _prompt_amount("Income", AmountField(), _console()) == Decimal("90000")

    def test_garbage_is_zero(self):
        with patch("cgtcalc.wizard.Prompt.ask", return_value="lots"):
            assert _prompt_amount("Income", AmountField(), _console()) == Decimal("0")

    def test_default_is_current_value(self):
        field = AmountField(Decimal("1500"))
        with patch("cgtcalc.wizard.Prompt.ask", return_value="1500") as mock_ask:
            _prompt_amount("Costs", field, _console())
        assert mock_ask.call_args.kwargs["default"] == "1500"
        assert field.text == "1,500"

    def test_amount_above_limit_reprompts_same_field(self):
        field = AmountField()
        typed = "2" * 30
        with patch("cgtcalc.wizard.Prompt.ask", side_effect=[typed, "500"]) as mock_ask:
            assert _prompt_amount("Sale price", field, _console()) == Decimal("500")
        assert mock_ask.call_count == 2
        assert mock_ask.call_args_list[1].kwargs["default"] == typed
        assert field.value == Decimal("500")


class TestPhaseAssets:
    def test_collects_multiple_assets(self):
        prompts = ["100", "0", "300", "50", "5", "20"]
        # held long, keep, add another, held long, keep, add another
        confirms = [True, True, True, False, True, False]
        with (
            patch("cgtcalc.wizard.Prompt.ask", side_effect=prompts),
            patch("cgtcalc.wizard.Confirm.ask", side_effect=confirms),
        ):
            assets = _phase_assets(_console())
        assert [a.id for a in assets] == ["asset-1", "asset-2"]
        assert assets[0].sale_price == Decimal("300")
        assert assets[1].owned_more_than_12_months is False
        assert assets[1].additional_costs == Decimal("5")

    def test_rejected_asset_is_reentered_from_previous_values(self):
        prompts = ["100,000", "0", "250000", "100000", "500", "250000"]
        # held long, keep? no, held long, keep? yes, add another
        confirms = [True, False, True, True, False]
        with (
            patch("cgtcalc.wizard.Prompt.ask", side_effect=prompts) as mock_ask,
            patch("cgtcalc.wizard.Confirm.ask", side_effect=confirms),
        ):
            assets = _phase_assets(_console())

        assert len(assets) == 1
        assert assets[0].additional_costs == Decimal("500")
        defaults = [c.kwargs["default"] for c in mock_ask.call_args_list]
        assert defaults == ["0", "0", "0", "100000", "0", "250000"]


class TestRunWizard:
    def test_scenario_a(self):
        prompts = ["2025-2026", "90,000", "100,000", "0", "250,000"]
        # prior losses?, pre-1985?, foreign?, held > 12 months?, keep asset?, add another?
        confirms = [False, False, False, True, True, False]
        console = _console()
        with (
            patch("cgtcalc.wizard.Prompt.ask", side_effect=prompts),
            patch("cgtcalc.wizard.Confirm.ask", side_effect=confirms),
        ):
            results = run_wizard(console=console)

        assert results.income_year == IncomeYear.FY_2025_26
        assert results.total_tax_liability == Decimal("25092")
        output = console.file.getvalue()
        assert "Tax Payable" in output
        assert "$25,092" in output

    def test_prior_losses_and_policy(self):
        prompts = ["2024-2025", "90000", "50000", "0", "0", "20000"]
        confirms = [True, False, False, True, True, False]
        with (
            patch("cgtcalc.wizard.Prompt.ask", side_effect=prompts),
            patch("cgtcalc.wizard.Confirm.ask", side_effect=confirms),
        ):
            results = run_wizard(
                console=_console(), medicare_policy=MedicareLevyPolicy.TAXABLE_INCOME
            )

        assert results.prior_unapplied_losses == Decimal("50000")
        assert results.net_capital_gain == Decimal("0")
        assert results.loss_carry_forward == Decimal("40000")
