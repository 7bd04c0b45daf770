"""
Command-Line Interface for FinGrow.

Purpose
-------
Runs projections, solves required rates and compares benchmarks from the
shell. The CLI is a presentation layer only: it passes numbers to the
core and renders what comes back. Validation failures are printed
verbatim.

Commands
--------
- project: Future value, totals and year-by-year table (optionally narrative)
- solve-rate: Annual rate needed to reach a target amount
- benchmarks: Compare a rate with stock, bond, savings and inflation benchmarks
- frequencies: List named compounding/contribution frequencies
- config: Validate or print projection config documents
- info: Show version and dependency information

Example Usage
-------------
    # Monthly compounding with $100 monthly deposits
    $ fingrow project -p 1000 -r 0.05 -t 10 -m monthly -c 100 --insights

    # Run a projection described in a config document
    $ fingrow project --config projection.json --format json

    # Rate needed to turn $1,000 into $1,500 in 5 years
    $ fingrow solve-rate -p 1000 --target 1500 -t 5

    # Show version
    $ fingrow --version
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .constants import COMPOUNDING_FREQUENCIES, CONTRIBUTION_FREQUENCIES
from .exceptions import FinGrowError, InvalidParameter

# Version
__version__ = "0.1.0"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

class FrequencyType(click.ParamType):
    """Click parameter accepting a frequency name or a positive integer."""

    name = "frequency"

    def __init__(self, table):
        self.table = table

    def convert(self, value, param, ctx):
        if isinstance(value, int):
            return value
        from .utils import parse_frequency

        try:
            return parse_frequency(value, table=self.table)
        except InvalidParameter as e:
            self.fail(str(e), param, ctx)


COMPOUNDING = FrequencyType(COMPOUNDING_FREQUENCIES)
CONTRIBUTION = FrequencyType(CONTRIBUTION_FREQUENCIES)


def _configure_logging(level: str) -> None:
    """Route library logs and warnings through Rich on stderr."""
    from rich.logging import RichHandler

    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )
    logging.captureWarnings(True)


def _fail(message: str) -> None:
    click.echo(message, err=True)
    sys.exit(1)


# ---------------------------------------------------------------------------
# Main group
# ---------------------------------------------------------------------------

@click.group()
@click.version_option(version=__version__, prog_name="fingrow")
@click.option("--quiet", "-q", is_flag=True, help="Plain output without tables or colors")
@click.pass_context
def main(ctx: click.Context, quiet: bool) -> None:
    """
    FinGrow - Compound Growth Projector.

    Projects how an investment grows under periodic compounding with
    optional recurring contributions, solves for the rate needed to reach
    a target, and describes the projection in plain language.

    Use 'fingrow COMMAND --help' for command-specific help.
    """
    from .config import AppSettings, format_validation_error
    from pydantic import ValidationError

    try:
        settings = AppSettings()
    except ValidationError as e:
        _fail(f"Invalid environment settings: {format_validation_error(e)}")

    _configure_logging(settings.log_level)

    ctx.ensure_object(dict)
    ctx.obj["quiet"] = quiet
    ctx.obj["console"] = None if quiet else Console()
    ctx.obj["settings"] = settings


# ---------------------------------------------------------------------------
# project
# ---------------------------------------------------------------------------

@main.command()
@click.option("--principal", "-p", type=float, default=None, help="Initial investment")
@click.option("--rate", "-r", type=float, default=None, help="Annual rate as a decimal (0.05 = 5%)")
@click.option("--years", "-t", type=float, default=None, help="Horizon in years")
@click.option(
    "--compounding", "-m",
    type=COMPOUNDING,
    default="annually",
    show_default=True,
    help="Compounding frequency (name or periods per year)"
)
@click.option("--contribution", "-c", type=float, default=0.0, help="Recurring contribution amount")
@click.option(
    "--contribution-frequency",
    type=CONTRIBUTION,
    default=None,
    help="Contribution frequency (default: same as compounding)"
)
@click.option(
    "--config",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Projection config document (JSON); replaces the numeric options"
)
@click.option("--insights/--no-insights", "show_insights", default=False, help="Include narrative output")
@click.option("--age", type=float, default=None, help="Investor age for recommendations")
@click.option("--seed", "-s", type=int, default=None, help="Random seed for the general tip")
@click.option(
    "--format", "-f", "output_format",
    type=click.Choice(["table", "json"]),
    default="table",
    help="Output format (default: table)"
)
@click.pass_context
def project(
    ctx: click.Context,
    principal: Optional[float],
    rate: Optional[float],
    years: Optional[float],
    compounding: int,
    contribution: float,
    contribution_frequency: Optional[int],
    config: Optional[Path],
    show_insights: bool,
    age: Optional[float],
    seed: Optional[int],
    output_format: str,
) -> None:
    """
    Project the growth of an investment.

    Example:
        fingrow project -p 1000 -r 0.05 -t 10 -m monthly -c 100 --insights
    """
    console = ctx.obj.get("console")
    settings = ctx.obj["settings"]

    from .compounding import InvestmentParameters
    from .config import ProjectionConfig
    from .projection import ProjectionEngine
    from .solver import required_rate

    target_amount = None
    if config is not None:
        try:
            projection_config = ProjectionConfig.from_json(config)
        except FinGrowError as e:
            _fail(f"Error loading config: {e}")
        params = projection_config.investment.to_parameters()
        age = age if age is not None else projection_config.age
        seed = seed if seed is not None else projection_config.seed
        target_amount = projection_config.target_amount
    else:
        missing = [
            name for name, value in
            (("--principal", principal), ("--rate", rate), ("--years", years))
            if value is None
        ]
        if missing:
            raise click.UsageError(
                f"Missing option(s) {', '.join(missing)} (or pass --config)."
            )
        params = InvestmentParameters(
            principal=principal,
            annual_rate=rate,
            years=years,
            compounding_frequency=compounding,
            contribution_amount=contribution,
            contribution_frequency=contribution_frequency,
        )

    seed = seed if seed is not None else settings.seed

    try:
        result = ProjectionEngine(params, age=age, seed=seed).run()
        needed_rate = (
            required_rate(params.principal, target_amount, params.years, params.compounding_frequency)
            if target_amount is not None else None
        )
    except FinGrowError as e:
        _fail(str(e))

    if output_format == "json":
        data = result.to_dict()
        if not show_insights:
            for key in ("insights", "recommendations"):
                data[key] = []
            data["benchmarks"] = None
        if needed_rate is not None:
            data["required_rate"] = needed_rate
        click.echo(json.dumps(data, indent=2))
        return

    from .utils import format_currency, format_percent

    symbol = settings.currency_symbol

    def money(value: float) -> str:
        return format_currency(value, symbol=symbol)

    if console:
        summary = Table(title="Projection Results", show_header=True)
        summary.add_column("Metric", style="cyan")
        summary.add_column("Value", style="green", justify="right")
        summary.add_row("Future Value", money(result.future_value))
        summary.add_row("Total Contributions", money(result.total_contributions))
        summary.add_row("Total Interest Earned", money(result.total_interest))
        if needed_rate is not None:
            summary.add_row(f"Rate to reach {money(target_amount)}", format_percent(needed_rate))
        console.print(summary)

        if result.timeline:
            growth = Table(title="Year-by-Year Growth", show_header=True)
            growth.add_column("Year", justify="right")
            growth.add_column("Balance", justify="right")
            growth.add_column("Interest Earned", justify="right")
            growth.add_column("Total Contributions", justify="right")
            for entry in result.timeline:
                growth.add_row(
                    str(entry.year),
                    money(entry.balance),
                    money(entry.interest_earned),
                    money(entry.cumulative_contributions),
                )
            console.print(growth)
    else:
        click.echo(f"Future Value: {money(result.future_value)}")
        click.echo(f"Total Contributions: {money(result.total_contributions)}")
        click.echo(f"Total Interest Earned: {money(result.total_interest)}")
        if needed_rate is not None:
            click.echo(f"Required Rate: {format_percent(needed_rate)}")
        for entry in result.timeline:
            click.echo(
                f"Year {entry.year}: balance {money(entry.balance)}, "
                f"interest {money(entry.interest_earned)}, "
                f"contributions {money(entry.cumulative_contributions)}"
            )

    if not show_insights:
        return

    if not result.has_narrative:
        click.echo("No insights: the projection has no positive principal to describe.")
        return

    _print_narrative(console, result.insights, result.recommendations, result.benchmarks)


def _print_narrative(console, insights, recommendations, benchmarks) -> None:
    labels = [
        ("Stock Market", benchmarks.stock_market),
        ("Bonds", benchmarks.bonds),
        ("Savings Accounts", benchmarks.savings_accounts),
        ("Inflation", benchmarks.inflation),
    ]
    if console:
        console.print(Panel("\n".join(f"- {line}" for line in insights), title="Investment Insights"))
        console.print(Panel("\n".join(f"- {line}" for line in recommendations), title="Recommendations"))
        table = Table(title="Performance Benchmarks", show_header=True)
        table.add_column("Benchmark", style="cyan")
        table.add_column("Comparison")
        for label, text in labels:
            table.add_row(label, text)
        console.print(table)
    else:
        click.echo("Insights:")
        for line in insights:
            click.echo(f"  - {line}")
        click.echo("Recommendations:")
        for line in recommendations:
            click.echo(f"  - {line}")
        click.echo("Benchmarks:")
        for label, text in labels:
            click.echo(f"  {label}: {text}")


# ---------------------------------------------------------------------------
# solve-rate
# ---------------------------------------------------------------------------

@main.command("solve-rate")
@click.option("--principal", "-p", type=float, required=True, help="Initial investment")
@click.option("--target", type=float, required=True, help="Target future value")
@click.option("--years", "-t", type=float, required=True, help="Horizon in years")
@click.option(
    "--compounding", "-m",
    type=COMPOUNDING,
    default="annually",
    show_default=True,
    help="Compounding frequency (name or periods per year)"
)
@click.pass_context
def solve_rate(
    ctx: click.Context,
    principal: float,
    target: float,
    years: float,
    compounding: int,
) -> None:
    """
    Annual rate needed to grow PRINCIPAL into TARGET.

    Contributions are not modelled.

    Example:
        fingrow solve-rate -p 1000 --target 1500 -t 5 -m monthly
    """
    from .solver import required_rate
    from .utils import format_percent

    try:
        rate = required_rate(principal, target, years, compounding)
    except FinGrowError as e:
        _fail(str(e))

    click.echo(f"Required annual rate: {format_percent(rate)} ({rate})")


# ---------------------------------------------------------------------------
# benchmarks
# ---------------------------------------------------------------------------

@main.command("benchmarks")
@click.option("--rate", "-r", type=float, required=True, help="Annual rate as a decimal")
@click.option("--years", "-t", type=float, required=True, help="Horizon in years")
@click.pass_context
def benchmarks_command(ctx: click.Context, rate: float, years: float) -> None:
    """
    Compare a rate with historical benchmarks.

    Example:
        fingrow benchmarks -r 0.05 -t 10
    """
    console = ctx.obj.get("console")

    from .benchmarks import benchmarks
    from .utils import check_non_negative

    # benchmarks() trusts its inputs
    try:
        check_non_negative("annual_rate", rate)
        check_non_negative("years", years)
    except FinGrowError as e:
        _fail(str(e))

    result = benchmarks(rate, years)
    if console:
        table = Table(title="Performance Benchmarks", show_header=True)
        table.add_column("Benchmark", style="cyan")
        table.add_column("Comparison")
        for key, text in result.to_dict().items():
            table.add_row(key.replace("_", " ").title(), text)
        console.print(table)
    else:
        for key, text in result.to_dict().items():
            click.echo(f"{key}: {text}")


# ---------------------------------------------------------------------------
# frequencies
# ---------------------------------------------------------------------------

@main.command()
@click.pass_context
def frequencies(ctx: click.Context) -> None:
    """List named frequencies and their periods per year."""
    console = ctx.obj.get("console")

    if console:
        table = Table(title="Frequencies", show_header=True)
        table.add_column("Name", style="cyan")
        table.add_column("Periods / Year", justify="right")
        table.add_column("Contributions", justify="center")
        for name, value in COMPOUNDING_FREQUENCIES.items():
            table.add_row(name, str(value), "Yes" if name in CONTRIBUTION_FREQUENCIES else "No")
        console.print(table)
    else:
        for name, value in COMPOUNDING_FREQUENCIES.items():
            click.echo(f"{name}: {value}")


# ---------------------------------------------------------------------------
# config
# ---------------------------------------------------------------------------

@main.group()
def config() -> None:
    """
    Configuration management commands.

    Validate and print projection config documents.
    """
    pass


@config.command("validate")
@click.argument("config_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.pass_context
def config_validate(ctx: click.Context, config_file: Path) -> None:
    """
    Validate a projection config document.

    Example:
        fingrow config validate projection.json
    """
    console = ctx.obj.get("console")

    from .config import ProjectionConfig
    from .utils import format_percent

    try:
        loaded = ProjectionConfig.from_json(config_file)
    except FinGrowError as e:
        _fail(f"Configuration validation failed: {e}")

    inv = loaded.investment
    lines = [
        f"Principal: {inv.principal:,.2f}",
        f"Annual rate: {format_percent(inv.annual_rate)}",
        f"Years: {inv.years:g}",
        f"Compounding: {inv.compounding_frequency}/year",
        f"Contribution: {inv.contribution_amount:,.2f} "
        f"x {inv.contribution_frequency or inv.compounding_frequency}/year",
    ]
    if console:
        console.print(Panel("\n".join(lines), title="Configuration Valid", border_style="green"))
    else:
        click.echo("Configuration is valid")
        for line in lines:
            click.echo(line)


@config.command("example")
@click.option("--template", "-t", type=click.Choice(["basic", "contributions"]), default="basic")
def config_example(template: str) -> None:
    """
    Print a starter config document to stdout.

    Example:
        fingrow config example --template contributions > projection.json
    """
    if template == "basic":
        data = {
            "investment": {
                "principal": 1000,
                "annual_rate": 0.05,
                "years": 10,
            }
        }
    else:
        data = {
            "investment": {
                "principal": 5000,
                "annual_rate": 0.07,
                "years": 20,
                "compounding_frequency": 12,
                "contribution_amount": 200,
                "contribution_frequency": 12,
            },
            "age": 32,
            "seed": 42,
            "target_amount": 150000,
        }
    click.echo(json.dumps(data, indent=2))


# ---------------------------------------------------------------------------
# info
# ---------------------------------------------------------------------------

@main.command()
@click.pass_context
def info(ctx: click.Context) -> None:
    """
    Display system and package information.

    Shows version numbers of FinGrow and its dependencies.
    """
    console = ctx.obj.get("console")

    info_lines = [
        f"FinGrow Version: {__version__}",
        f"Python: {sys.version.split()[0]}",
    ]

    dependencies = ["numpy", "pandas", "pydantic", "pydantic_settings", "matplotlib", "click", "rich"]

    from importlib import metadata

    for name in dependencies:
        try:
            version = metadata.version(name.replace("_", "-"))
        except metadata.PackageNotFoundError:
            version = "not installed"
        info_lines.append(f"{name}: {version}")

    if console:
        console.print(Panel("\n".join(info_lines), title="System Information"))
    else:
        for line in info_lines:
            click.echo(line)


if __name__ == "__main__":
    main()
