"""Shared CLI helpers: rate table selection, status, household and format options."""

import click

from brutnet.sdk import (
    InvalidArgumentError,
    RateTableError,
    RateTableNotFoundError,
    STATUSES,
    compute_fiscal_parts,
    get_configured_rate_table,
    get_setting,
)

OUTPUT_FORMATS = ["text", "json"]


def get_rates(ctx: click.Context):
    """Resolve the rate table once per invocation from --rates/--year/settings."""
    obj = ctx.ensure_object(dict)
    if "rates" not in obj:
        try:
            obj["rates"] = get_configured_rate_table(obj.get("rates_path"), obj.get("year"))
        except (RateTableNotFoundError, RateTableError) as e:
            raise click.ClickException(str(e))
    return obj["rates"]


def resolve_status(cadre: bool) -> str:
    """--cadre wins; otherwise fall back to the default_status setting."""
    if cadre:
        return "cadre"
    status = get_setting("default_status", "non-cadre")
    if status not in STATUSES:
        raise click.ClickException(
            f"Invalid default_status setting '{status}'. Expected one of: {', '.join(STATUSES)}"
        )
    return status


def resolve_format(output_format: str) -> str:
    return output_format or get_setting("default_output_format", "text")


def resolve_parts(couple: bool, children: int) -> float:
    try:
        return compute_fiscal_parts(couple, children)
    except InvalidArgumentError as e:
        raise click.BadParameter(str(e), param_hint="--children")


def household_options(f):
    """Add --couple and --children options."""
    f = click.option("--children", "-k", type=int, default=0, show_default=True,
                     help="Number of dependent children")(f)
    f = click.option("--couple", is_flag=True, help="Married or PACS household (2 base parts)")(f)
    return f


def format_option(f):
    return click.option("--format", "output_format", type=click.Choice(OUTPUT_FORMATS),
                        default=None, help="Output format (default: text, or default_output_format setting)")(f)


