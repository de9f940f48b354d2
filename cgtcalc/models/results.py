"""Calculation result models."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from cgtcalc.models.enums import IncomeYear


class AssetBreakdownLine(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    asset_id: str
    proceeds: Decimal
    cost_base: Decimal
    capital_gain: Decimal  # before discount and losses, floored at 0
    discounted_gain: Decimal  # after discount, before netting with losses
    is_loss: bool


class CGTResults(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    income_year: IncomeYear
    asset_breakdown: list[AssetBreakdownLine]
    # Gains and losses
    discounted_gains_total: Decimal
    current_year_losses: Decimal
    prior_unapplied_losses: Decimal
    losses_applied_this_year: Decimal
    net_capital_gain: Decimal
    loss_carry_forward: Decimal
    # Tax flow
    taxable_income_with_gain: Decimal
    tax_without_gain: Decimal
    tax_with_gain: Decimal
    cgt_payable: Decimal  # income tax on gain (tax delta)
    medicare_levy: Decimal
    total_tax_liability: Decimal
