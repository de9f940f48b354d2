"""Shared test fixtures for the CGT calculator."""

from decimal import Decimal

import pytest

from cgtcalc.engines.calculator import CGTCalculator
from cgtcalc.models.inputs import Asset, CGTInputs


@pytest.fixture
def calculator() -> CGTCalculator:
    return CGTCalculator()


@pytest.fixture
def long_held_asset() -> Asset:
    return Asset(
        id="asset-1",
        owned_more_than_12_months=True,
        purchase_price=Decimal("100000"),
        additional_costs=Decimal("0"),
        sale_price=Decimal("250000"),
    )


@pytest.fixture
def scenario_a_inputs(long_held_asset: Asset) -> CGTInputs:
    """$90K income, one long-held asset bought for $100K and sold for $250K."""
    return CGTInputs(
        annual_taxable_income=Decimal("90000"),
        assets=[long_held_asset],
    )


@pytest.fixture
def gain_and_loss_assets() -> list[Asset]:
    """A $20K long-held gain and a $5K loss."""
    return [
        Asset(
            id="gain",
            owned_more_than_12_months=True,
            purchase_price=Decimal("30000"),
            additional_costs=Decimal("0"),
            sale_price=Decimal("50000"),
        ),
        Asset(
            id="loss",
            owned_more_than_12_months=True,
            purchase_price=Decimal("14000"),
            additional_costs=Decimal("1000"),
            sale_price=Decimal("10000"),
        ),
    ]
