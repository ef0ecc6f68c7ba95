"""taxes - Rate tables and income tax calculation.

Scope:
- Contribution rates (employee and employer side, by status)
- Progressive income tax brackets and the quotient familial
- Year-specific tables loaded from rate-tables/{year}.yaml

Constraints:
- Pure calculation - no settings or CLI access
- Tables are immutable once loaded and passed in explicitly; None means
  the packaged table for DEFAULT_YEAR

Usage:
    from brutnet.sdk.taxes import compute_annual_tax, load_rate_table

    rates = load_rate_table("2025")
    tax = compute_annual_tax(28080, parts=1, rates=rates)
"""

# Rate table schemas
from .schemas import TaxBracket, StatusRates, RateTable

# Rate table loading
from .rules import (
    DEFAULT_YEAR,
    RateTableNotFoundError,
    RateTableError,
    get_rate_tables_dir,
    get_available_years,
    load_rate_table,
    load_rate_table_file,
    resolve_rate_table,
)

# Income tax
from .income_tax import (
    compute_annual_tax,
    compute_tax_per_part,
    marginal_rate,
    check_parts,
)

__all__ = [
    # Schemas
    "TaxBracket",
    "StatusRates",
    "RateTable",
    # Rules
    "DEFAULT_YEAR",
    "RateTableNotFoundError",
    "RateTableError",
    "get_rate_tables_dir",
    "get_available_years",
    "load_rate_table",
    "load_rate_table_file",
    "resolve_rate_table",
    # Income tax
    "compute_annual_tax",
    "compute_tax_per_part",
    "marginal_rate",
    "check_parts",
]
