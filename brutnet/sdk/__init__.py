"""BrutNet SDK - Core functionality for salary and income tax estimates."""

from .schemas import (
    Status,
    Direction,
    Period,
    STATUSES,
    DIRECTIONS,
    PERIODS,
    MONTHS_PER_YEAR,
    InvalidArgumentError,
    ConversionRequest,
    ConversionResult,
    EmployerCostResult,
    RaiseSimulation,
    BreakdownItem,
)

from .taxes import (
    TaxBracket,
    StatusRates,
    RateTable,
    DEFAULT_YEAR,
    RateTableNotFoundError,
    RateTableError,
    get_available_years,
    load_rate_table,
    load_rate_table_file,
    compute_annual_tax,
    marginal_rate,
)

from .config import (
    get_config_dir,
    get_settings_path,
    load_settings,
    save_settings,
    get_setting,
    set_setting,
    clear_setting,
    get_configured_rate_table,
)

from .household import compute_fiscal_parts
from .salary import convert_salary, convert
from .employer import compute_employer_cost
from .comparison import simulate_raises, DEFAULT_RAISES
from .breakdown import pay_breakdown

__all__ = [
    # Schemas
    "Status",
    "Direction",
    "Period",
    "STATUSES",
    "DIRECTIONS",
    "PERIODS",
    "MONTHS_PER_YEAR",
    "InvalidArgumentError",
    "ConversionRequest",
    "ConversionResult",
    "EmployerCostResult",
    "RaiseSimulation",
    "BreakdownItem",
    # Rate tables
    "TaxBracket",
    "StatusRates",
    "RateTable",
    "DEFAULT_YEAR",
    "RateTableNotFoundError",
    "RateTableError",
    "get_available_years",
    "load_rate_table",
    "load_rate_table_file",
    # Config
    "get_config_dir",
    "get_settings_path",
    "load_settings",
    "save_settings",
    "get_setting",
    "set_setting",
    "clear_setting",
    "get_configured_rate_table",
    # Calculations
    "compute_fiscal_parts",
    "compute_annual_tax",
    "marginal_rate",
    "convert_salary",
    "convert",
    "compute_employer_cost",
    "simulate_raises",
    "DEFAULT_RAISES",
    "pay_breakdown",
]
