"""Household composition to fiscal parts (parts fiscales)."""

from .schemas import InvalidArgumentError


def compute_fiscal_parts(is_coupled: bool, children: int = 0) -> float:
    """Compute the household's fiscal parts.

    A single adult counts for 1 part and a couple for 2. The first two
    children add half a part each, every further child adds a full part.

    Args:
        is_coupled: Married or PACS household
        children: Number of dependent children

    Returns:
        Fiscal parts, in steps of 0.5

    Raises:
        InvalidArgumentError: If children is negative or not an integer

    Example:
        compute_fiscal_parts(False, 1)  # -> 1.5
        compute_fiscal_parts(True, 3)   # -> 4.0
    """
    if isinstance(children, bool) or not isinstance(children, int):
        raise InvalidArgumentError(f"Number of children must be an integer, got {children!r}")
    if children < 0:
        raise InvalidArgumentError(f"Number of children cannot be negative, got {children}")

    parts = 2.0 if is_coupled else 1.0
    if children >= 1:
        parts += 0.5
    if children >= 2:
        parts += 0.5
    if children >= 3:
        parts += (children - 2) * 1.0
    return parts
