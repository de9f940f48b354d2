"""Capital gains tax calculation engine.

Turns a CGTInputs request into a CGTResults breakdown. Implements:
  - Per-asset capital gain/loss with the 12-month 50% discount
  - Pre-1985 acquisition exemption (all-or-nothing)
  - Netting of current-year and prior-year capital losses, with carry-forward
  - Marginal tax delta: tax on income with the gain minus tax without it
  - Medicare levy attributable to the gain

Every monetary value is rounded to the cent (half away from zero) before it
is combined with anything else.
"""

import logging
from decimal import ROUND_HALF_UP, Decimal

from cgtcalc.engines.brackets import (
    CENT,
    CGT_DISCOUNT_RATE,
    INCOME_TAX_BRACKETS,
    MEDICARE_LEVY_LOW_INCOME_THRESHOLD,
    MEDICARE_LEVY_RATE,
    MEDICARE_LEVY_SHADE_IN_RATE,
)
from cgtcalc.models.enums import IncomeYear, MedicareLevyPolicy
from cgtcalc.models.inputs import Asset, CGTInputs
from cgtcalc.models.results import AssetBreakdownLine, CGTResults

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


def round_cents(amount: Decimal) -> Decimal:
    """Round to 2 decimal places, ties away from zero."""
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)


class CGTCalculator:
    """Estimates the tax attributable to a year's capital gains.

    Holds configuration only, so one instance can serve any number of
    calculations.
    """

    def __init__(self, medicare_policy: MedicareLevyPolicy = MedicareLevyPolicy.TAX_DELTA) -> None:
        self.medicare_policy = medicare_policy

    def calculate(self, inputs: CGTInputs) -> CGTResults:
        exempt = inputs.assets_purchased_before_1985
        discount_allowed = not inputs.foreign_or_temporary_resident

        breakdown: list[AssetBreakdownLine] = []
        current_year_losses = ZERO
        for asset in inputs.assets:
            if exempt:
                breakdown.append(self._exempt_line(asset))
                continue
            line, raw_gain = self.compute_asset_line(asset, discount_allowed)
            breakdown.append(line)
            if raw_gain < ZERO:
                current_year_losses += -raw_gain

        # Gains and losses
        discounted_gains_total = round_cents(sum((line.discounted_gain for line in breakdown), ZERO))
        current_year_losses = round_cents(current_year_losses)
        prior_losses = ZERO
        if inputs.has_unapplied_losses:
            prior_losses = round_cents(max(inputs.unapplied_losses_amount, ZERO))
        losses_available = round_cents(prior_losses + current_year_losses)

        # Netting
        net_capital_gain = max(round_cents(discounted_gains_total - losses_available), ZERO)
        losses_applied = round_cents(min(discounted_gains_total, losses_available))
        # Gains absorb available losses first; only the excess is carried forward.
        loss_carry_forward = ZERO
        if net_capital_gain == ZERO:
            loss_carry_forward = round_cents(losses_available - discounted_gains_total)

        # Tax delta
        base_income = round_cents(max(inputs.annual_taxable_income, ZERO))
        taxable_income_with_gain = round_cents(base_income + net_capital_gain)
        tax_without_gain = self.compute_income_tax(base_income, inputs.income_year)
        tax_with_gain = self.compute_income_tax(taxable_income_with_gain, inputs.income_year)
        cgt_payable = round_cents(tax_with_gain - tax_without_gain)
        medicare_levy = self.compute_medicare_levy(
            cgt_payable, base_income, taxable_income_with_gain, inputs.income_year
        )
        total = round_cents(cgt_payable + medicare_levy)

        logger.debug(
            "CGT %s: %d asset(s), net gain %s, losses carried %s, tax on gain %s, levy %s",
            inputs.income_year,
            len(breakdown),
            net_capital_gain,
            loss_carry_forward,
            cgt_payable,
            medicare_levy,
        )

        return CGTResults(
            income_year=inputs.income_year,
            asset_breakdown=breakdown,
            discounted_gains_total=discounted_gains_total,
            current_year_losses=current_year_losses,
            prior_unapplied_losses=prior_losses,
            losses_applied_this_year=losses_applied,
            net_capital_gain=net_capital_gain,
            loss_carry_forward=loss_carry_forward,
            taxable_income_with_gain=taxable_income_with_gain,
            tax_without_gain=tax_without_gain,
            tax_with_gain=tax_with_gain,
            cgt_payable=cgt_payable,
            medicare_levy=medicare_levy,
            total_tax_liability=total,
        )

    # ------------------------------------------------------------------
    # Per-asset computation
    # ------------------------------------------------------------------

    def compute_asset_line(
        self, asset: Asset, discount_allowed: bool
    ) -> tuple[AssetBreakdownLine, Decimal]:
        """Compute one asset's breakdown row.

        Returns:
            (line, raw_gain). raw_gain is the unrounded, undiscounted
            proceeds minus cost base; negative for a loss.
        """
        proceeds = max(asset.sale_price, ZERO)
        cost_base = max(asset.purchase_price + asset.additional_costs, ZERO)
        raw_gain = proceeds - cost_base

        if raw_gain <= ZERO:
            discounted_gain = ZERO
        elif asset.owned_more_than_12_months and discount_allowed:
            discounted_gain = raw_gain * (Decimal("1") - CGT_DISCOUNT_RATE)
        else:
            discounted_gain = raw_gain

        line = AssetBreakdownLine(
            asset_id=asset.id,
            proceeds=round_cents(proceeds),
            cost_base=round_cents(cost_base),
            capital_gain=round_cents(max(raw_gain, ZERO)),
            discounted_gain=round_cents(discounted_gain),
            is_loss=raw_gain < ZERO,
        )
        return line, raw_gain

    @staticmethod
    def _exempt_line(asset: Asset) -> AssetBreakdownLine:
        return AssetBreakdownLine(
            asset_id=asset.id,
            proceeds=ZERO,
            cost_base=ZERO,
            capital_gain=ZERO,
            discounted_gain=ZERO,
            is_loss=False,
        )

    # ------------------------------------------------------------------
    # Tax computation methods
    # ------------------------------------------------------------------

    def compute_income_tax(self, taxable_income: Decimal, income_year: IncomeYear) -> Decimal:
        """Compute resident income tax using progressive brackets."""
        brackets = INCOME_TAX_BRACKETS[income_year]
        return round_cents(self._apply_brackets(max(taxable_income, ZERO), brackets))

    def compute_medicare_levy(
        self,
        cgt_payable: Decimal,
        income_without_gain: Decimal,
        income_with_gain: Decimal,
        income_year: IncomeYear,
    ) -> Decimal:
        """Medicare levy attributable to the gain, per the configured policy."""
        if self.medicare_policy == MedicareLevyPolicy.TAX_DELTA:
            return round_cents(cgt_payable * MEDICARE_LEVY_RATE)

        levy_with = self.compute_levy_on_income(income_with_gain, income_year)
        levy_without = self.compute_levy_on_income(income_without_gain, income_year)
        return round_cents(levy_with - levy_without)

    @staticmethod
    def compute_levy_on_income(taxable_income: Decimal, income_year: IncomeYear) -> Decimal:
        """Full-year Medicare levy on taxable income with the low-income reduction."""
        threshold = MEDICARE_LEVY_LOW_INCOME_THRESHOLD[income_year]
        if taxable_income <= threshold:
            return ZERO
        full_levy = taxable_income * MEDICARE_LEVY_RATE
        shaded_levy = (taxable_income - threshold) * MEDICARE_LEVY_SHADE_IN_RATE
        return round_cents(min(full_levy, shaded_levy))

    @staticmethod
    def _apply_brackets(
        income: Decimal, brackets: list[tuple[Decimal | None, Decimal]]
    ) -> Decimal:
        """Apply progressive tax brackets to income."""
        tax = Decimal("0")
        prev_bound = Decimal("0")

        for upper_bound, rate in brackets:
            if upper_bound is None:
                taxable_in_bracket = max(income - prev_bound, Decimal("0"))
            else:
                taxable_in_bracket = max(
                    min(income, upper_bound) - prev_bound, Decimal("0")
                )
            tax += taxable_in_bracket * rate
            prev_bound = upper_bound if upper_bound is not None else income
            if upper_bound is not None and income <= upper_bound:
                break

        return tax


def calculate_cgt(
    inputs: CGTInputs, medicare_policy: MedicareLevyPolicy = MedicareLevyPolicy.TAX_DELTA
) -> CGTResults:
    """Run a single calculation with a throwaway calculator."""
    return CGTCalculator(medicare_policy).calculate(inputs)
