"""Settings CLI commands for BrutNet.

Manages settings.json - rate table selection and output preferences.
"""

import click
from pathlib import Path

from brutnet.sdk import (
    DEFAULT_YEAR,
    STATUSES,
    RateTableError,
    RateTableNotFoundError,
    clear_setting,
    get_setting,
    get_settings_path,
    load_rate_table,
    load_rate_table_file,
    load_settings,
    set_setting,
)


@click.group()
def settings():
    """Manage settings (settings.json).

    Available settings:
    - rate_table: custom rate table YAML path
    - year: packaged rate table year
    - default_status: non-cadre or cadre
    - default_output_format: text or json
    """
    pass


@settings.command("show")
def settings_show():
    """Show current settings and their values."""
    settings_path = get_settings_path()
    current = load_settings()

    click.echo(f"Settings file: {settings_path}")
    click.echo(f"File exists: {settings_path.exists()}")
    click.echo()

    if not current:
        click.echo("No settings configured (using defaults).")
        click.echo()
        click.echo("Effective rate table:")
        click.echo(f"  year: {DEFAULT_YEAR} (default)")
        return

    click.echo("Current settings:")
    for key, value in current.items():
        click.echo(f"  {key}: {value}")

    click.echo()
    click.echo("Effective rate table:")
    if current.get("rate_table"):
        click.echo(f"  file: {current['rate_table']}")
    else:
        click.echo(f"  year: {current.get('year', DEFAULT_YEAR)}")


@settings.command("rate-table")
@click.argument("path", required=False, type=click.Path(dir_okay=False))
@click.option("--clear", is_flag=True, help="Clear custom rate table, revert to packaged tables")
def settings_rate_table(path, clear):
    """Set or clear a custom rate table file.

    PATH is a YAML file with the same layout as the packaged tables
    (see 'brutnet rates show --format json').

    Examples:
        brutnet settings rate-table ~/brutnet/rates-2026.yaml
        brutnet settings rate-table --clear
    """
    if clear:
        if clear_setting("rate_table"):
            click.echo("Cleared rate_table setting.")
        else:
            click.echo("rate_table was not set.")
        return

    if not path:
        current = get_setting("rate_table")
        if current:
            click.echo(f"Current rate_table: {current}")
        else:
            click.echo("No custom rate_table set. Using packaged tables.")
        return

    table_path = Path(path).expanduser().resolve()

    # Must load cleanly before it is saved
    try:
        load_rate_table_file(table_path)
    except (RateTableNotFoundError, RateTableError) as e:
        raise click.ClickException(str(e))

    set_setting("rate_table", str(table_path))
    click.echo(f"Set rate_table: {table_path}")
    click.echo(f"Saved to: {get_settings_path()}")


@settings.command("year")
@click.argument("year")
def settings_year(year):
    """Set the packaged rate table YEAR used by default."""
    try:
        load_rate_table(year)
    except RateTableNotFoundError as e:
        raise click.ClickException(str(e))

    set_setting("year", year)
    click.echo(f"Set year: {year}")


@settings.command("status")
@click.argument("status", type=click.Choice(STATUSES))
def settings_status(status):
    """Set the default employment STATUS (non-cadre or cadre)."""
    set_setting("default_status", status)
    click.echo(f"Set default_status: {status}")


@settings.command("format")
@click.argument("output_format", type=click.Choice(["text", "json"]))
def settings_format(output_format):
    """Set the default output format."""
    set_setting("default_output_format", output_format)
    click.echo(f"Set default_output_format: {output_format}")
