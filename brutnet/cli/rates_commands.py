"""Rate table CLI commands."""

import json

import click
from rich.console import Console

from brutnet.sdk.taxes import get_available_years, get_rate_tables_dir

from .options import format_option, get_rates, resolve_format
from .renderers.result_renderer import render_rate_table


@click.group()
def rates():
    """Inspect contribution rates and income tax brackets."""
    pass


@rates.command("show")
@format_option
@click.pass_context
def rates_show(ctx, output_format):
    """Show the rate table in effect (see 'brutnet --help' for selection)."""
    table = get_rates(ctx)

    if resolve_format(output_format) == "json":
        click.echo(json.dumps(table.model_dump(by_alias=True), indent=2))
        return

    render_rate_table(Console(), table)


@rates.command("years")
def rates_years():
    """List the years with a packaged rate table."""
    years = get_available_years()
    if not years:
        click.echo(f"No rate tables found in {get_rate_tables_dir()}")
        return
    for year in years:
        click.echo(year)
