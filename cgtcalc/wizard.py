"""Interactive step-by-step wizard for the CGT calculator.

Guides the user through one calculation:
  Phase 0: Setup (income year)
  Phase 1: Income and prior losses
  Phase 2: Residency and acquisition date
  Phase 3: Assets (loop: prices, holding period)
  Phase 4: Results
"""

from __future__ import annotations

from decimal import Decimal

from rich.console import Console
from rich.panel import Panel
from rich.prompt import Confirm, Prompt
from rich.rule import Rule
from rich.table import Table

from cgtcalc.cli import BANNER
from cgtcalc.formatting import AmountField, format_currency
from cgtcalc.models.enums import IncomeYear, MedicareLevyPolicy
from cgtcalc.models.inputs import MAX_AMOUNT, Asset, CGTInputs
from cgtcalc.models.results import CGTResults

_YEAR_CHOICES = [year.value for year in IncomeYear]


# ---------------------------------------------------------------------------
# Amount prompt helper
# ---------------------------------------------------------------------------


def _prompt_amount(
    label: str,
    field: AmountField,
    console: Console,
) -> Decimal:
    """Prompt for a monetary amount through an edit buffer.

    The buffer is focused before prompting and blurred afterwards, so stray
    characters are dropped and unparseable text commits as 0. Amounts above
    MAX_AMOUNT are refused and the same buffer is focused again, offering the
    rejected digits as the default so they can be corrected.
    """
    while True:
        current = field.focus()
        raw = Prompt.ask(label, default=current or "0", console=console)
        field.edit(raw)
        value = field.blur()
        if value <= MAX_AMOUNT:
            break
        console.print(f"[red]  Amounts are limited to {format_currency(MAX_AMOUNT, 0)}. Try again.[/red]")
    console.print(f"[dim]  = {format_currency(value)}[/dim]")
    return value


def _show_phase_header(phase_num: int, title: str, console: Console) -> None:
    console.print()
    console.print(Rule(f"Phase {phase_num}: {title}", style="bold cyan"))
    console.print()


# ---------------------------------------------------------------------------
# Phase 0: Setup
# ---------------------------------------------------------------------------


def _phase_setup(console: Console) -> IncomeYear:
    console.print(
        Panel(
            f"[bold green]{BANNER}[/bold green]\n"
            "[bold]Interactive CGT Wizard[/bold]\n\n"
            "This wizard will ask for:\n"
            "  1. Your taxable income and any unapplied capital losses\n"
            "  2. Residency and acquisition date details\n"
            "  3. Each asset you disposed of",
            title="[bold cyan]CGT Calculator Wizard[/bold cyan]",
            border_style="cyan",
        )
    )
    year = Prompt.ask(
        "Income year",
        choices=_YEAR_CHOICES,
        default=IncomeYear.FY_2025_26.value,
        console=console,
    )
    return IncomeYear(year)


# ---------------------------------------------------------------------------
# Phase 1: Income and losses
# ---------------------------------------------------------------------------


def _phase_income(console: Console) -> tuple[Decimal, bool, Decimal]:
    """Returns (annual_taxable_income, has_unapplied_losses, unapplied_losses_amount)."""
    income = _prompt_amount("Annual taxable income", AmountField(), console)

    has_losses = Confirm.ask(
        "Do you have unapplied net capital losses from earlier years?",
        default=False,
        console=console,
    )
    losses = Decimal("0")
    if has_losses:
        losses = _prompt_amount("  Unapplied losses amount", AmountField(), console)
    return income, has_losses, losses


# ---------------------------------------------------------------------------
# Phase 2: Residency
# ---------------------------------------------------------------------------


def _phase_residency(console: Console) -> tuple[bool, bool]:
    """Returns (assets_purchased_before_1985, foreign_or_temporary_resident)."""
    pre_1985 = Confirm.ask(
        "Were the assets acquired before 20 September 1985?",
        default=False,
        console=console,
    )
    foreign = Confirm.ask(
        "Are you a foreign or temporary resident for tax purposes?",
        default=False,
        console=console,
    )
    return pre_1985, foreign


# ---------------------------------------------------------------------------
# Phase 3: Assets
# ---------------------------------------------------------------------------


def _prompt_asset(position: int, console: Console) -> Asset:
    """Prompt for one asset until the user accepts the entered amounts.

    Each amount keeps its own buffer across re-entry, so a second pass
    starts from the values typed the first time.
    """
    purchase_field, costs_field, sale_field = AmountField(), AmountField(), AmountField()
    held_long = True
    while True:
        console.print(f"[bold]Asset {position}[/bold]")
        held_long = Confirm.ask("  Owned for more than 12 months?", default=held_long, console=console)
        purchase = _prompt_amount("  Purchase price", purchase_field, console)
        costs = _prompt_amount("  Additional costs", costs_field, console)
        sale = _prompt_amount("  Sale price", sale_field, console)
        if Confirm.ask(f"  Keep asset {position} as entered?", default=True, console=console):
            break
    return Asset(
        id=f"asset-{position}",
        owned_more_than_12_months=held_long,
        purchase_price=purchase,
        additional_costs=costs,
        sale_price=sale,
    )


def _phase_assets(console: Console) -> list[Asset]:
    assets = [_prompt_asset(1, console)]
    while Confirm.ask("Add another asset?", default=False, console=console):
        assets.append(_prompt_asset(len(assets) + 1, console))
    return assets


# ---------------------------------------------------------------------------
# Phase 4: Results
# ---------------------------------------------------------------------------


def _display_results(results: CGTResults, console: Console) -> None:
    """Pretty-print CGTResults using Rich."""
    breakdown = Table(title="Assets", show_header=True)
    breakdown.add_column("Asset", style="cyan")
    breakdown.add_column("Proceeds", justify="right")
    breakdown.add_column("Cost Base", justify="right")
    breakdown.add_column("Capital Gain", justify="right")
    breakdown.add_column("Taxable Gain", justify="right", style="green")
    for i, line in enumerate(results.asset_breakdown, start=1):
        label = f"Asset {i}" + (" [red](loss)[/red]" if line.is_loss else "")
        breakdown.add_row(
            label,
            format_currency(line.proceeds),
            format_currency(line.cost_base),
            format_currency(line.capital_gain),
            format_currency(line.discounted_gain),
        )
    console.print(breakdown)

    tax = Table(title="Tax on Gain", show_header=False, padding=(0, 1))
    tax.add_column("", style="cyan", min_width=30)
    tax.add_column("", justify="right", style="green")
    tax.add_row("Unapplied Net Capital Losses", format_currency(results.prior_unapplied_losses))
    tax.add_row("Losses Applied This Year", format_currency(results.losses_applied_this_year))
    tax.add_row("Net Capital Gain", format_currency(results.net_capital_gain))
    if results.loss_carry_forward > 0:
        tax.add_row("Losses Carried Forward", format_currency(results.loss_carry_forward))
    tax.add_row("Income Tax on Gain", format_currency(results.cgt_payable))
    tax.add_row("Medicare Levy on Gain", format_currency(results.medicare_levy))
    tax.add_row("Tax without capital gain", format_currency(results.tax_without_gain))
    tax.add_row("Tax with capital gain", format_currency(results.tax_with_gain))
    tax.add_row("Taxable income with gain", format_currency(results.taxable_income_with_gain))
    console.print(tax)

    console.print(
        Panel(
            f"[bold]Tax Payable:[/bold] {format_currency(results.total_tax_liability, 0)}",
            title=f"[bold]Summary {results.income_year}[/bold]",
            border_style="cyan",
        )
    )


def run_wizard(
    console: Console | None = None,
    medicare_policy: MedicareLevyPolicy = MedicareLevyPolicy.TAX_DELTA,
) -> CGTResults:
    """Main wizard orchestration, called from cli.py."""
    from cgtcalc.engines.calculator import CGTCalculator
    from cgtcalc.ingestion.manual import ManualAdapter

    if console is None:
        console = Console()

    _show_phase_header(0, "Setup", console)
    year = _phase_setup(console)

    _show_phase_header(1, "Income and Losses", console)
    income, has_losses, losses = _phase_income(console)

    _show_phase_header(2, "Residency", console)
    pre_1985, foreign = _phase_residency(console)

    _show_phase_header(3, "Assets", console)
    assets = _phase_assets(console)

    inputs = CGTInputs(
        annual_taxable_income=income,
        income_year=year,
        has_unapplied_losses=has_losses,
        unapplied_losses_amount=losses,
        assets_purchased_before_1985=pre_1985,
        foreign_or_temporary_resident=foreign,
        assets=assets,
    )

    _show_phase_header(4, "Results", console)
    results = CGTCalculator(medicare_policy).calculate(inputs)
    _display_results(results, console)

    for w in ManualAdapter().validate(inputs):
        console.print(f"[yellow]Warning: {w}[/yellow]")

    return results
