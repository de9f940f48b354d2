"""Calculation input models.

Field names are snake_case; JSON payloads may use the camelCase aliases
(``annualTaxableIncome``, ``ownedMoreThan12Months``, ...).

Every money field is limited to +/- ``MAX_AMOUNT`` so that sums of gains
and tax stay exact within the default 28-digit decimal context.
"""

from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from cgtcalc.models.enums import IncomeYear

MAX_AMOUNT = Decimal("1000000000000000")  # one quadrillion dollars

Money = Annotated[Decimal, Field(ge=-MAX_AMOUNT, le=MAX_AMOUNT)]


class Asset(BaseModel):
    """A single disposed capital asset."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    id: str
    owned_more_than_12_months: bool = True
    purchase_price: Money = Decimal("0")
    additional_costs: Money = Decimal("0")
    sale_price: Money = Decimal("0")


def _default_assets() -> list[Asset]:
    return [Asset(id="asset-1")]


class CGTInputs(BaseModel):
    """Everything the engine needs for one calculation."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    annual_taxable_income: Money = Decimal("0")
    income_year: IncomeYear = IncomeYear.FY_2025_26
    has_unapplied_losses: bool = False
    unapplied_losses_amount: Money = Decimal("0")
    assets_purchased_before_1985: bool = False
    foreign_or_temporary_resident: bool = False
    assets: list[Asset] = Field(default_factory=_default_assets)
