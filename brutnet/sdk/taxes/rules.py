"""Rate table loading.

Tables are YAML files named rate-tables/YYYY.yaml inside the brutnet package.
A custom table can be loaded from any path with load_rate_table_file().
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import ValidationError

from .schemas import RateTable

logger = logging.getLogger(__name__)

DEFAULT_YEAR = "2025"


class RateTableNotFoundError(FileNotFoundError):
    """Raised when no rate table exists for a year or path."""
    pass


class RateTableError(ValueError):
    """Raised when a rate table file is malformed."""
    pass


def get_rate_tables_dir() -> Path:
    """Get the packaged rate-tables directory path."""
    package_root = Path(__file__).parent.parent.parent  # taxes -> sdk -> brutnet
    return package_root / "rate-tables"


def get_available_years() -> list[str]:
    """Get sorted list of packaged rate table years (descending)."""
    years = [p.stem for p in get_rate_tables_dir().glob("*.yaml") if p.stem.isdigit()]
    return sorted(years, reverse=True)


def load_rate_table_file(path: Union[str, Path]) -> RateTable:
    """Load and validate a rate table from a YAML file.

    Raises:
        RateTableNotFoundError: If the file does not exist
        RateTableError: If the YAML is unreadable or fails validation
    """
    path = Path(path).expanduser()
    if not path.exists():
        raise RateTableNotFoundError(f"Rate table not found: {path}")

    logger.debug(f"Loading rate table from {path}")
    with open(path, "r") as f:
        try:
            raw = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise RateTableError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(raw, dict):
        raise RateTableError(f"Rate table {path} must be a mapping, got {type(raw).__name__}")

    if "year" not in raw and path.stem.isdigit():
        raw["year"] = path.stem

    try:
        return RateTable.model_validate(raw)
    except ValidationError as e:
        raise RateTableError(f"Invalid rate table {path}:\n{e}") from e


@lru_cache(maxsize=None)
def load_rate_table(year: str = DEFAULT_YEAR) -> RateTable:
    """Load the packaged rate table for a year (cached).

    Raises:
        RateTableNotFoundError: If no table is packaged for that year
    """
    year = str(year)
    path = get_rate_tables_dir() / f"{year}.yaml"
    if not path.exists():
        available = ", ".join(get_available_years()) or "none"
        raise RateTableNotFoundError(
            f"No rate table for year {year}. Available years: {available}"
        )
    return load_rate_table_file(path)


def resolve_rate_table(rates: Optional[RateTable] = None) -> RateTable:
    """Return the given table, or the packaged table for DEFAULT_YEAR."""
    if rates is not None:
        return rates
    return load_rate_table(DEFAULT_YEAR)
