"""Enumerations for the CGT calculator."""

from enum import StrEnum


class IncomeYear(StrEnum):
    FY_2025_26 = "2025-2026"
    FY_2024_25 = "2024-2025"
    FY_2023_24 = "2023-2024"


class MedicareLevyPolicy(StrEnum):
    TAX_DELTA = "TAX_DELTA"  # 2% of the income tax on the gain
    TAXABLE_INCOME = "TAXABLE_INCOME"  # 2% of taxable income, low-income threshold
