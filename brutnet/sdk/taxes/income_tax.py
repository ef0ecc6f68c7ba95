"""Progressive income tax with household splitting (quotient familial).

Taxable income is divided by the household's fiscal parts, the bracket
schedule is applied to that quotient, and the tax per part is multiplied
back by the number of parts.
"""

import math
from typing import Optional, Sequence

from ..schemas import InvalidArgumentError
from .rules import resolve_rate_table
from .schemas import RateTable, TaxBracket


def check_parts(parts: float) -> None:
    """Raise InvalidArgumentError unless parts is a positive finite number."""
    if isinstance(parts, bool) or not isinstance(parts, (int, float)):
        raise InvalidArgumentError(f"Fiscal parts must be a number, got {parts!r}")
    if not math.isfinite(parts) or parts <= 0:
        raise InvalidArgumentError(f"Fiscal parts must be positive, got {parts}")


def compute_tax_per_part(quotient: float, brackets: Sequence[TaxBracket]) -> float:
    """Apply progressive brackets to the income of a single part.

    A quotient sitting exactly on a bracket's lower bound pays nothing in
    that bracket.

    Example:
        # 2025 table: 28080 is in the 11% bracket starting at 11497
        compute_tax_per_part(28080, brackets)  # -> (28080 - 11497) * 0.11 = 1824.13
    """
    tax = 0.0
    for bracket in brackets:
        if quotient <= bracket.over:
            break
        upper = quotient if bracket.up_to is None else min(quotient, bracket.up_to)
        tax += (upper - bracket.over) * bracket.rate
    return tax


def compute_annual_tax(
    annual_taxable_income: float,
    parts: float,
    rates: Optional[RateTable] = None,
) -> float:
    """Calculate annual income tax for a household.

    Args:
        annual_taxable_income: Household taxable income for the year
        parts: Fiscal parts (see household.compute_fiscal_parts)
        rates: Rate table (default: packaged table for the default year)

    Returns:
        Annual tax, 0 when income is zero or negative

    Raises:
        InvalidArgumentError: If parts is not positive or income is not a finite number
    """
    check_parts(parts)
    if isinstance(annual_taxable_income, bool) or not isinstance(annual_taxable_income, (int, float)):
        raise InvalidArgumentError(f"Taxable income must be a number, got {annual_taxable_income!r}")
    if not math.isfinite(annual_taxable_income):
        raise InvalidArgumentError(f"Taxable income must be finite, got {annual_taxable_income}")
    if annual_taxable_income <= 0:
        return 0.0

    table = resolve_rate_table(rates)
    quotient = annual_taxable_income / parts
    return compute_tax_per_part(quotient, table.tax_brackets) * parts


def marginal_rate(
    annual_taxable_income: float,
    parts: float,
    rates: Optional[RateTable] = None,
) -> float:
    """Return the rate of the bracket the per-part quotient falls in."""
    check_parts(parts)
    table = resolve_rate_table(rates)
    quotient = max(annual_taxable_income, 0) / parts

    for bracket in table.tax_brackets:
        if bracket.up_to is None or quotient <= bracket.up_to:
            return bracket.rate
    return table.tax_brackets[-1].rate
