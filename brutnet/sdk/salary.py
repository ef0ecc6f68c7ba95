"""Gross to net (and net to gross) salary conversion.

SDK layer - pure logic, returns a ConversionResult. No CLI or presentation.

Pipeline:
    1. Employee contributions separate gross from net before tax
    2. Net before tax is annualized and taxed with the household's parts
    3. Monthly tax is withheld from net before tax (prelevement a la source)

Degenerate inputs:
    An amount that is zero, negative, NaN or infinite, or so large that its
    annual figures overflow, does not raise; it
    returns ConversionResult.empty() with every figure at zero and
    computed=False. Interactive callers rely on this while the user is still
    typing. It is a questionable policy (zero is also a valid computed value),
    which is why the `computed` flag exists. Invalid status, direction,
    period or parts still raise InvalidArgumentError.
"""

import logging
import math
from typing import Optional

from .schemas import (
    ConversionRequest,
    ConversionResult,
    Direction,
    Period,
    Status,
    DIRECTIONS,
    PERIODS,
    STATUSES,
    MONTHS_PER_YEAR,
    check_choice,
)
from .taxes import RateTable, check_parts, compute_annual_tax, resolve_rate_table

logger = logging.getLogger(__name__)


def is_convertible_amount(amount) -> bool:
    """True if amount is a finite number greater than zero."""
    if isinstance(amount, bool):
        return False
    try:
        value = float(amount)
    except (TypeError, ValueError):
        return False
    return math.isfinite(value) and value > 0


def convert_salary(
    amount: float,
    direction: Direction = "gross_to_net",
    status: Status = "non-cadre",
    parts: float = 1.0,
    rates: Optional[RateTable] = None,
    period: Period = "monthly",
) -> ConversionResult:
    """Convert a salary between gross and net and compute income tax.

    Args:
        amount: Gross pay for gross_to_net, net pay before tax for net_to_gross
        direction: 'gross_to_net' or 'net_to_gross'
        status: 'non-cadre' or 'cadre'
        parts: Household fiscal parts
        rates: Rate table (default: packaged table for the default year)
        period: 'monthly' (default) or 'annual'; annual amounts are spread
                over 12 months

    Returns:
        ConversionResult with monthly and annual figures

    Raises:
        InvalidArgumentError: For an unknown direction, status or period,
                              or non-positive parts

    Example:
        result = convert_salary(3000, "gross_to_net", "non-cadre", 1)
        result.net_before_tax  # -> 2340.0
        result.tax_monthly     # -> 152.01 (1824.13 / 12)
        result.net_after_tax   # -> 2187.99
    """
    check_choice("direction", direction, DIRECTIONS)
    check_choice("status", status, STATUSES)
    check_choice("period", period, PERIODS)
    check_parts(parts)

    if not is_convertible_amount(amount):
        logger.debug(f"convert_salary: non-convertible amount {amount!r}, returning empty result")
        return ConversionResult.empty(direction, status, parts)

    table = resolve_rate_table(rates)
    rate = table.employee_contribution_rates.for_status(status)

    monthly_amount = float(amount)
    if period == "annual":
        monthly_amount /= MONTHS_PER_YEAR

    if direction == "gross_to_net":
        gross = monthly_amount
        net_before_tax = gross * (1 - rate)
    else:
        net_before_tax = monthly_amount
        gross = net_before_tax / (1 - rate)
    contributions = gross - net_before_tax

    net_before_tax_annual = net_before_tax * MONTHS_PER_YEAR
    if not (math.isfinite(gross * MONTHS_PER_YEAR) and math.isfinite(net_before_tax_annual)):
        logger.debug(f"convert_salary: amount {amount!r} overflows annual figures, returning empty result")
        return ConversionResult.empty(direction, status, parts)

    tax_annual = compute_annual_tax(net_before_tax_annual, parts, table)
    tax_monthly = tax_annual / MONTHS_PER_YEAR
    net_after_tax = net_before_tax - tax_monthly

    effective_tax_rate = tax_annual / net_before_tax_annual if net_before_tax_annual else 0.0
    effective_contribution_rate = contributions / gross if gross else 0.0

    logger.debug(
        f"convert_salary: {direction} {status} parts={parts} gross={gross:.2f} "
        f"net_before_tax={net_before_tax:.2f} tax_annual={tax_annual:.2f}"
    )

    return ConversionResult(
        direction=direction,
        status=status,
        parts=parts,
        gross=gross,
        contributions=contributions,
        net_before_tax=net_before_tax,
        tax_annual=tax_annual,
        tax_monthly=tax_monthly,
        net_after_tax=net_after_tax,
        effective_contribution_rate=effective_contribution_rate,
        effective_tax_rate=effective_tax_rate,
        gross_annual=gross * MONTHS_PER_YEAR,
        net_before_tax_annual=net_before_tax_annual,
        net_after_tax_annual=net_after_tax * MONTHS_PER_YEAR,
    )


def convert(request: ConversionRequest, rates: Optional[RateTable] = None) -> ConversionResult:
    """Run convert_salary() from a ConversionRequest."""
    return convert_salary(
        request.amount,
        direction=request.direction,
        status=request.status,
        parts=request.parts,
        rates=rates,
        period=request.period,
    )
