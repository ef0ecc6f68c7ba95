"""Employer cost of a salary (salaire brut + charges patronales)."""

import logging
from typing import Optional

from .salary import is_convertible_amount
from .schemas import EmployerCostResult, Status, STATUSES, check_choice
from .taxes import RateTable, resolve_rate_table

logger = logging.getLogger(__name__)


def compute_employer_cost(
    gross_monthly: float,
    status: Status = "non-cadre",
    rates: Optional[RateTable] = None,
) -> EmployerCostResult:
    """Calculate what a gross monthly salary costs the employer.

    Uses the employer contribution rates, which are a separate table from
    the employee rates used for gross/net conversion. The employee rate only
    appears in cost_per_net_euro.

    Non-convertible gross amounts (zero, negative, not finite) return a
    zero record, as convert_salary() does.

    Example:
        result = compute_employer_cost(3000, "cadre")
        result.employer_contributions  # -> 1350.0
        result.total_cost              # -> 4350.0
    """
    check_choice("status", status, STATUSES)

    table = resolve_rate_table(rates)
    employer_rate = table.employer_contribution_rates.for_status(status)

    if not is_convertible_amount(gross_monthly):
        logger.debug(f"compute_employer_cost: non-convertible gross {gross_monthly!r}")
        return EmployerCostResult(status=status, employer_rate=employer_rate)

    gross = float(gross_monthly)
    employer_contributions = gross * employer_rate
    total_cost = gross + employer_contributions

    net_before_tax = gross * (1 - table.employee_contribution_rates.for_status(status))
    cost_per_net_euro = total_cost / net_before_tax if net_before_tax else 0.0

    return EmployerCostResult(
        status=status,
        gross=gross,
        employer_rate=employer_rate,
        employer_contributions=employer_contributions,
        total_cost=total_cost,
        cost_per_net_euro=cost_per_net_euro,
    )
