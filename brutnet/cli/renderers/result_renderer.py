"""Rich renderers for conversion, employer cost and raise results.

Transforms SDK result models into formatted Rich tables. Amounts are shown
the fr-FR way: narrow no-break space as thousands separator, no decimals.
"""

from typing import List

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from brutnet.sdk.schemas import (
    MONTHS_PER_YEAR,
    BreakdownItem,
    ConversionResult,
    EmployerCostResult,
    RaiseSimulation,
)
from brutnet.sdk.taxes import RateTable

THOUSANDS_SEP = "\u202f"


def format_eur(amount: float, sign: str = "") -> str:
    """Format an amount as whole euros, e.g. 2340.4 -> "2 340 €".

    With sign ('+' or '-') the absolute value is shown after the sign.
    """
    value = abs(amount) if sign else amount
    return f"{sign}{value:,.0f}".replace(",", THOUSANDS_SEP) + " €"


def format_pct(rate: float, decimals: int = 0) -> str:
    """Format a ratio as a percentage, e.g. 0.22 -> '22 %'."""
    return f"{rate * 100:.{decimals}f} %"


def render_conversion(console: Console, result: ConversionResult,
                      breakdown: List[BreakdownItem], marginal: float) -> None:
    """Render a gross/net conversion as a Rich table."""
    if not result.computed:
        console.print(Panel(
            "[yellow]Enter a positive amount to compute a salary.[/yellow]",
            title="Nothing to compute",
            border_style="yellow",
        ))
        return

    headline = "Salaire net" if result.direction == "gross_to_net" else "Salaire brut nécessaire"
    headline_value = result.net_after_tax if result.direction == "gross_to_net" else result.gross

    table = Table(box=box.SIMPLE, show_header=True)
    table.add_column("", style="dim")
    table.add_column("Mensuel", justify="right")
    table.add_column("Annuel", justify="right")

    table.add_row("Salaire brut", format_eur(result.gross), format_eur(result.gross_annual))
    table.add_row(
        f"Cotisations (~{format_pct(result.effective_contribution_rate)})",
        format_eur(result.contributions, sign="-"),
        format_eur(result.contributions * MONTHS_PER_YEAR, sign="-"),
    )
    table.add_row("Net avant impôt", format_eur(result.net_before_tax),
                  format_eur(result.net_before_tax_annual))
    table.add_row(
        f"Impôt sur le revenu ({format_pct(result.effective_tax_rate, 1)})",
        format_eur(result.tax_monthly, sign="-"),
        format_eur(result.tax_annual, sign="-"),
    )
    table.add_row("[bold]Net après impôt[/bold]", f"[bold]{format_eur(result.net_after_tax)}[/bold]",
                  f"[bold]{format_eur(result.net_after_tax_annual)}[/bold]")

    status = "Cadre" if result.status == "cadre" else "Non-cadre"
    console.print(Panel(
        f"[bold green]{format_eur(headline_value)}[/bold green]",
        title=f"{headline} - {status}, {result.parts:g} part(s)",
        border_style="green",
    ))
    console.print(table)

    if breakdown:
        shares = "  ".join(f"{item.label} {format_pct(item.share)}" for item in breakdown)
        console.print(f"[dim]Répartition du brut: {shares}[/dim]")
    console.print(f"[dim]Taux marginal d'imposition: {format_pct(marginal)}[/dim]")


def render_employer_cost(console: Console, result: EmployerCostResult) -> None:
    """Render employer cost as a Rich table."""
    table = Table(show_header=False, box=box.SIMPLE)
    table.add_column("label", style="dim")
    table.add_column("value", justify="right")

    table.add_row("Salaire brut", format_eur(result.gross))
    table.add_row(f"Charges patronales (~{format_pct(result.employer_rate)})",
                  format_eur(result.employer_contributions, sign="+"))
    table.add_row("[bold]Coût total employeur[/bold]", f"[bold]{format_eur(result.total_cost)}[/bold]")

    console.print(Panel(table, title="Coût employeur", border_style="blue"))
    if result.cost_per_net_euro:
        console.print(
            f"[dim]Pour chaque 1 € net reçu, l'employeur dépense environ "
            f"{result.cost_per_net_euro:.2f} €[/dim]"
        )


def render_raises(console: Console, simulations: List[RaiseSimulation]) -> None:
    """Render raise simulations as a Rich table."""
    table = Table(title="Simuler une augmentation", box=box.SIMPLE)
    table.add_column("Hausse", justify="right")
    table.add_column("Brut", justify="right")
    table.add_column("Net après impôt", justify="right")
    table.add_column("Gain mensuel", justify="right", style="green")
    table.add_column("Gain %", justify="right")

    for sim in simulations:
        table.add_row(
            f"{sim.pct:+g} %",
            format_eur(sim.new_gross),
            format_eur(sim.new_net),
            format_eur(sim.delta, sign="+" if sim.delta >= 0 else "-"),
            f"{sim.delta_pct:+.1f} %",
        )
    console.print(table)


def render_rate_table(console: Console, rates: RateTable) -> None:
    """Render contribution rates and tax brackets."""
    contrib = Table(title=f"Cotisations {rates.year or ''}".strip(), box=box.SIMPLE)
    contrib.add_column("Statut")
    contrib.add_column("Salarié", justify="right")
    contrib.add_column("Employeur", justify="right")
    for label, key in (("Non-cadre", "non-cadre"), ("Cadre", "cadre")):
        contrib.add_row(
            label,
            format_pct(rates.employee_contribution_rates.for_status(key)),
            format_pct(rates.employer_contribution_rates.for_status(key)),
        )
    console.print(contrib)

    brackets = Table(title="Barème de l'impôt (par part)", box=box.SIMPLE)
    brackets.add_column("De", justify="right")
    brackets.add_column("À", justify="right")
    brackets.add_column("Taux", justify="right")
    for bracket in rates.tax_brackets:
        upper = format_eur(bracket.up_to) if bracket.up_to is not None else "-"
        brackets.add_row(format_eur(bracket.over), upper, format_pct(bracket.rate))
    console.print(brackets)
