"""Typer CLI interface for the CGT calculator."""

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING

import typer

from cgtcalc.models.enums import IncomeYear, MedicareLevyPolicy

if TYPE_CHECKING:
    from cgtcalc.models.results import CGTResults

BANNER = r"""
   ____ ____ _____
  / ___/ ___|_   _|
 | |  | |  _  | |
 | |__| |_| | | |
  \____\____| |_|

  CGT Calculator
  "Half the gain, none of the guesswork."
"""


def show_banner() -> None:
    typer.echo(BANNER)


app = typer.Typer(
    name="cgtcalc",
    help="CGT Calculator: estimate Australian capital gains tax on disposed assets.",
)


def _configure_logging(verbose: bool) -> None:
    from rich.console import Console
    from rich.logging import RichHandler

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """CGT Calculator: estimate Australian capital gains tax on disposed assets."""
    _configure_logging(verbose)
    if ctx.invoked_subcommand is None:
        show_banner()
        raise typer.Exit()


def parse_asset_spec(spec: str, position: int) -> dict:
    """Parse ``PURCHASE:COSTS:SALE[:short|long]`` into an asset dict.

    Amounts are sanitised like typed input ("250,000" -> 250000). The holding
    period defaults to long (owned more than 12 months).
    """
    from cgtcalc.exceptions import DataValidationError
    from cgtcalc.formatting import parse_amount

    parts = [p.strip() for p in spec.split(":")]
    if len(parts) not in (3, 4):
        raise DataValidationError(
            f"asset {position}", f"expected PURCHASE:COSTS:SALE[:short|long], got {spec!r}"
        )
    held = parts[3].lower() if len(parts) == 4 else "long"
    if held not in ("short", "long"):
        raise DataValidationError(f"asset {position}", f"holding period must be 'short' or 'long', got {held!r}")

    return {
        "id": f"asset-{position}",
        "purchase_price": parse_amount(parts[0]),
        "additional_costs": parse_amount(parts[1]),
        "sale_price": parse_amount(parts[2]),
        "owned_more_than_12_months": held == "long",
    }


def _print_results(results: "CGTResults", warnings: list[str]) -> None:
    from cgtcalc.formatting import format_currency

    typer.echo("")
    typer.echo(f"=== Capital Gains Tax Estimate: {results.income_year} ===")
    typer.echo("")
    typer.echo("ASSETS")
    for i, line in enumerate(results.asset_breakdown, start=1):
        marker = "  (loss)" if line.is_loss else ""
        typer.echo(f"  Asset {i} [{line.asset_id}]{marker}")
        typer.echo(f"    Proceeds:            {format_currency(line.proceeds):>16}")
        typer.echo(f"    Cost Base:           {format_currency(line.cost_base):>16}")
        typer.echo(f"    Capital Gain:        {format_currency(line.capital_gain):>16}")
        typer.echo(f"    Taxable Gain:        {format_currency(line.discounted_gain):>16}")
    typer.echo("")
    typer.echo("GAINS AND LOSSES")
    typer.echo(f"  Discounted Gains:      {format_currency(results.discounted_gains_total):>16}")
    typer.echo(f"  Current Year Losses:   {format_currency(results.current_year_losses):>16}")
    typer.echo(f"  Prior Unapplied Losses:{format_currency(results.prior_unapplied_losses):>16}")
    typer.echo(f"  Losses Applied:        {format_currency(results.losses_applied_this_year):>16}")
    typer.echo("  ──────────────────────────────────────")
    typer.echo(f"  Net Capital Gain:      {format_currency(results.net_capital_gain):>16}")
    if results.loss_carry_forward > 0:
        typer.echo(f"  Loss Carry-Forward:    {format_currency(results.loss_carry_forward):>16}")
    typer.echo("")
    typer.echo("TAX")
    typer.echo(f"  Taxable Income w/ Gain:{format_currency(results.taxable_income_with_gain):>16}")
    typer.echo(f"  Tax Without Gain:      {format_currency(results.tax_without_gain):>16}")
    typer.echo(f"  Tax With Gain:         {format_currency(results.tax_with_gain):>16}")
    typer.echo(f"  Income Tax on Gain:    {format_currency(results.cgt_payable):>16}")
    typer.echo(f"  Medicare Levy on Gain: {format_currency(results.medicare_levy):>16}")
    typer.echo("  ══════════════════════════════════════")
    typer.echo(f"  TAX PAYABLE:           {format_currency(results.total_tax_liability, 0):>16}")

    if warnings:
        typer.echo("")
        typer.echo("WARNINGS:")
        for w in warnings:
            typer.echo(f"  - {w}")


@app.command()
def estimate(
    income: str = typer.Option(
        "0",
        "--income",
        "-i",
        help="Annual taxable income before the capital gain (e.g. 90,000)",
    ),
    year: IncomeYear = typer.Option(
        IncomeYear.FY_2025_26,
        "--year",
        "-y",
        envvar="CGTCALC_INCOME_YEAR",
        help="Income year",
    ),
    asset: list[str] | None = typer.Option(
        None,
        "--asset",
        "-a",
        help="Disposed asset as PURCHASE:COSTS:SALE[:short|long]; repeat for more assets",
    ),
    prior_losses: str | None = typer.Option(
        None,
        "--prior-losses",
        help="Unapplied net capital losses from earlier years",
    ),
    pre_1985: bool = typer.Option(
        False,
        "--pre-1985",
        help="Assets were acquired before 20 September 1985 (CGT exempt)",
    ),
    foreign_resident: bool = typer.Option(
        False,
        "--foreign-resident",
        help="Foreign or temporary resident (no CGT discount)",
    ),
    file: Path | None = typer.Option(
        None,
        "--file",
        "-f",
        help="JSON file with the full calculation request",
    ),
    medicare_policy: MedicareLevyPolicy = typer.Option(
        MedicareLevyPolicy.TAX_DELTA,
        "--medicare-policy",
        envvar="CGTCALC_MEDICARE_POLICY",
        help="How the Medicare levy on the gain is computed",
    ),
    json_output: bool = typer.Option(False, "--json", help="Print results as JSON"),
    report: Path | None = typer.Option(
        None,
        "--report",
        help="Write a text summary report to this path",
    ),
) -> None:
    """Estimate the capital gains tax payable for an income year."""
    from cgtcalc.engines.calculator import CGTCalculator
    from cgtcalc.exceptions import CGTCalculatorError
    from cgtcalc.formatting import parse_amount
    from cgtcalc.ingestion.manual import ManualAdapter

    adapter = ManualAdapter()

    try:
        if file is not None:
            if asset:
                typer.echo("Error: --asset cannot be combined with --file.", err=True)
                raise typer.Exit(1)
            inputs = adapter.parse(file)
        else:
            assets = [parse_asset_spec(spec, i) for i, spec in enumerate(asset or [], start=1)]
            data: dict = {
                "annual_taxable_income": parse_amount(income),
                "income_year": year,
                "has_unapplied_losses": prior_losses is not None,
                "unapplied_losses_amount": parse_amount(prior_losses or ""),
                "assets_purchased_before_1985": pre_1985,
                "foreign_or_temporary_resident": foreign_resident,
            }
            if assets:
                data["assets"] = assets
            inputs = adapter.from_dict(data, source="command line")
    except (FileNotFoundError, CGTCalculatorError) as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1)

    warnings = adapter.validate(inputs)
    results = CGTCalculator(medicare_policy).calculate(inputs)

    if json_output:
        typer.echo(json.dumps(results.model_dump(mode="json", by_alias=True), indent=2))
    else:
        _print_results(results, warnings)

    if report is not None:
        from cgtcalc.reports.cgt_summary import CGTSummaryGenerator

        report.parent.mkdir(parents=True, exist_ok=True)
        report.write_text(CGTSummaryGenerator().render(results))
        typer.echo(f"Report written to {report}", err=json_output)


@app.command()
def wizard(
    medicare_policy: MedicareLevyPolicy = typer.Option(
        MedicareLevyPolicy.TAX_DELTA,
        "--medicare-policy",
        envvar="CGTCALC_MEDICARE_POLICY",
        help="How the Medicare levy on the gain is computed",
    ),
) -> None:
    """Interactive step-by-step CGT calculation."""
    from cgtcalc.wizard import run_wizard

    run_wizard(medicare_policy=medicare_policy)

