"""Raise simulation: what a gross raise leaves after contributions and tax."""

from typing import Iterable, List, Optional

from .salary import convert_salary
from .schemas import RaiseSimulation, Status
from .taxes import RateTable, resolve_rate_table

DEFAULT_RAISES = (5, 10, 15, 20)


def simulate_raises(
    gross_monthly: float,
    status: Status = "non-cadre",
    parts: float = 1.0,
    percentages: Iterable[float] = DEFAULT_RAISES,
    rates: Optional[RateTable] = None,
) -> List[RaiseSimulation]:
    """Simulate percentage raises on a gross monthly salary.

    Each raise is converted independently; because income tax is
    progressive, the net gain grows less than proportionally once the raise
    crosses into a higher bracket.

    Args:
        gross_monthly: Current gross monthly pay
        status: 'non-cadre' or 'cadre'
        parts: Household fiscal parts
        percentages: Raises to simulate, in percent (default 5, 10, 15, 20)
        rates: Rate table (default: packaged table for the default year)

    Returns:
        One RaiseSimulation per percentage, in input order. delta_pct is 0
        when the current net is 0.
    """
    table = resolve_rate_table(rates)
    current = convert_salary(gross_monthly, "gross_to_net", status, parts, table)
    current_net = current.net_after_tax

    simulations = []
    for pct in percentages:
        new_gross = current.gross * (1 + pct / 100)
        result = convert_salary(new_gross, "gross_to_net", status, parts, table)
        delta = result.net_after_tax - current_net
        simulations.append(RaiseSimulation(
            pct=pct,
            new_gross=result.gross,
            new_net=result.net_after_tax,
            delta=delta,
            delta_pct=(delta / current_net * 100) if current_net else 0.0,
        ))
    return simulations
