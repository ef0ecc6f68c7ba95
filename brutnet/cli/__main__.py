"""BrutNet CLI - Command-line interface for salary and income tax estimates."""

import json
import logging
import os

import click
from rich.console import Console

from brutnet import __version__
from brutnet.sdk import (
    DEFAULT_RAISES,
    InvalidArgumentError,
    compute_annual_tax,
    compute_employer_cost,
    convert_salary,
    marginal_rate,
    pay_breakdown,
    simulate_raises,
)

from .options import (
    format_option,
    get_rates,
    household_options,
    resolve_format,
    resolve_parts,
    resolve_status,
)
from .rates_commands import rates as rates_group
from .settings_commands import settings as settings_group
from .renderers.result_renderer import (
    format_eur,
    format_pct,
    render_conversion,
    render_employer_cost,
    render_raises,
)

# Configure logging based on LOG_LEVEL environment variable
_log_level = os.environ.get("LOG_LEVEL", "WARNING").upper()
logging.basicConfig(
    level=getattr(logging, _log_level, logging.WARNING),
    format="%(asctime)s.%(msecs)03d %(levelname)s: %(message)s",
    datefmt="%H:%M:%S"
)
logger = logging.getLogger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="brutnet")
@click.option("--rates", "rates_path", type=click.Path(dir_okay=False),
              help="Custom rate table YAML (overrides --year and settings)")
@click.option("--year", help="Packaged rate table year (e.g. 2025)")
@click.pass_context
def cli(ctx, rates_path, year):
    """BrutNet - French gross/net salary and income tax estimates.

    Figures are estimates based on average contribution rates and the
    progressive income tax schedule. They are not payroll advice.

    Rate tables are selected from (in order):

    \b
    1. --rates PATH
    2. --year YEAR
    3. settings.json 'rate_table' or 'year' (see 'brutnet settings show')
    4. Packaged table for the latest supported year
    """
    ctx.ensure_object(dict)
    ctx.obj["rates_path"] = rates_path
    ctx.obj["year"] = year


cli.add_command(rates_group)
cli.add_command(settings_group)


@cli.command("convert")
@click.argument("amount", type=float)
@click.option("--net", "to_gross", is_flag=True, help="AMOUNT is net pay; compute the gross needed")
@click.option("--cadre", is_flag=True, help="Executive (cadre) status")
@click.option("--annual", is_flag=True, help="AMOUNT is annual rather than monthly")
@household_options
@format_option
@click.pass_context
def convert_cmd(ctx, amount, to_gross, cadre, annual, couple, children, output_format):
    """Convert a monthly salary between gross (brut) and net.

    \b
    Examples:
        brutnet convert 3000
        brutnet convert 2500 --net --cadre
        brutnet convert 45000 --annual --couple --children 2
    """
    rates = get_rates(ctx)
    parts = resolve_parts(couple, children)
    try:
        result = convert_salary(
            amount,
            direction="net_to_gross" if to_gross else "gross_to_net",
            status=resolve_status(cadre),
            parts=parts,
            rates=rates,
            period="annual" if annual else "monthly",
        )
    except InvalidArgumentError as e:
        raise click.ClickException(str(e))

    breakdown = pay_breakdown(result)
    marginal = marginal_rate(result.net_before_tax_annual, parts, rates)

    if resolve_format(output_format) == "json":
        output = result.model_dump()
        output["marginal_rate"] = marginal
        output["breakdown"] = [item.model_dump() for item in breakdown]
        click.echo(json.dumps(output, indent=2))
        return

    render_conversion(Console(), result, breakdown, marginal)


@cli.command("tax")
@click.argument("income", type=float)
@click.option("--parts", "-p", type=float, help="Fiscal parts (overrides --couple/--children)")
@household_options
@format_option
@click.pass_context
def tax_cmd(ctx, income, parts, couple, children, output_format):
    """Compute annual income tax on a household's taxable INCOME."""
    rates = get_rates(ctx)
    if parts is None:
        parts = resolve_parts(couple, children)

    try:
        tax = compute_annual_tax(income, parts, rates)
        marginal = marginal_rate(income, parts, rates)
    except InvalidArgumentError as e:
        raise click.ClickException(str(e))

    output = {
        "taxable_income": income,
        "parts": parts,
        "quotient": income / parts,
        "tax_annual": tax,
        "tax_monthly": tax / 12,
        "effective_rate": tax / income if income > 0 else 0.0,
        "marginal_rate": marginal,
    }

    if resolve_format(output_format) == "json":
        click.echo(json.dumps(output, indent=2))
        return

    click.echo(f"Taxable income:  {format_eur(income)}")
    click.echo(f"Fiscal parts:    {parts:g}")
    click.echo(f"Quotient:        {format_eur(output['quotient'])}")
    click.echo(f"Annual tax:      {format_eur(tax)}")
    click.echo(f"Monthly tax:     {format_eur(output['tax_monthly'])}")
    click.echo(f"Effective rate:  {format_pct(output['effective_rate'], 1)}")
    click.echo(f"Marginal rate:   {format_pct(marginal)}")


@cli.command("parts")
@household_options
def parts_cmd(couple, children):
    """Show the fiscal parts (quotient familial) of a household."""
    click.echo(f"{resolve_parts(couple, children):g}")


@cli.command("employer-cost")
@click.argument("gross", type=float)
@click.option("--cadre", is_flag=True, help="Executive (cadre) status")
@format_option
@click.pass_context
def employer_cost_cmd(ctx, gross, cadre, output_format):
    """Show what a GROSS monthly salary costs the employer."""
    result = compute_employer_cost(gross, resolve_status(cadre), get_rates(ctx))

    if resolve_format(output_format) == "json":
        click.echo(json.dumps(result.model_dump(), indent=2))
        return

    render_employer_cost(Console(), result)


@cli.command("compare")
@click.argument("gross", type=float)
@click.option("--pct", "percentages", type=float, multiple=True,
              help="Raise to simulate in percent (repeatable, default 5 10 15 20)")
@click.option("--cadre", is_flag=True, help="Executive (cadre) status")
@household_options
@format_option
@click.pass_context
def compare_cmd(ctx, gross, percentages, cadre, couple, children, output_format):
    """Simulate raises on a GROSS monthly salary and show the net gain."""
    simulations = simulate_raises(
        gross,
        status=resolve_status(cadre),
        parts=resolve_parts(couple, children),
        percentages=percentages or DEFAULT_RAISES,
        rates=get_rates(ctx),
    )

    if resolve_format(output_format) == "json":
        click.echo(json.dumps([sim.model_dump() for sim in simulations], indent=2))
        return

    render_raises(Console(), simulations)


def main():
    """Entry point for the CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
