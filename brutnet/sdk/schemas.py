"""Pydantic schemas for brutnet calculation inputs and results.

All schemas use extra='forbid' to reject unknown fields. Results are frozen
value objects: every calculation returns a fresh record and nothing is
shared between calls.

Monetary fields are monthly unless suffixed with _annual. Nothing is rounded
here; rounding is left to whatever displays the figures.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


Status = Literal["non-cadre", "cadre"]
Direction = Literal["gross_to_net", "net_to_gross"]
Period = Literal["monthly", "annual"]

STATUSES = ("non-cadre", "cadre")
DIRECTIONS = ("gross_to_net", "net_to_gross")
PERIODS = ("monthly", "annual")

MONTHS_PER_YEAR = 12


class InvalidArgumentError(ValueError):
    """Raised when an input is outside its domain (negative children, unknown status...)."""
    pass


def check_choice(name: str, value: str, choices: tuple) -> None:
    """Raise InvalidArgumentError unless value is one of choices."""
    if value not in choices:
        raise InvalidArgumentError(
            f"Unknown {name} '{value}'. Expected one of: {', '.join(choices)}"
        )


# =============================================================================
# Salary conversion
# =============================================================================


class ConversionRequest(BaseModel):
    """Inputs of a single gross/net conversion."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    amount: float = Field(..., description="Monetary amount (gross or net depending on direction)")
    direction: Direction = Field(default="gross_to_net")
    status: Status = Field(default="non-cadre")
    parts: float = Field(default=1.0, gt=0, description="Fiscal parts of the household")
    period: Period = Field(default="monthly", description="Whether amount is monthly or annual")


class ConversionResult(BaseModel):
    """Itemized result of a gross/net conversion.

    `computed` is False for the all-zero record returned when the amount is
    missing, non-positive or not finite. A computed result can legitimately
    contain zeros (tax in the first bracket), so check `computed` rather than
    testing amounts against zero.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    direction: Direction
    status: Status
    parts: float
    computed: bool = Field(default=True, description="False for the degenerate no-input record")

    gross: float = Field(default=0, description="Gross monthly pay (brut)")
    contributions: float = Field(default=0, description="Employee contributions (cotisations)")
    net_before_tax: float = Field(default=0, description="Net monthly pay before income tax")
    tax_annual: float = Field(default=0, description="Annual income tax")
    tax_monthly: float = Field(default=0, description="Income tax withheld per month")
    net_after_tax: float = Field(default=0, description="Take-home pay after income tax")
    effective_contribution_rate: float = Field(default=0, description="contributions / gross")
    effective_tax_rate: float = Field(default=0, description="tax_annual / net_before_tax_annual")

    gross_annual: float = Field(default=0)
    net_before_tax_annual: float = Field(default=0)
    net_after_tax_annual: float = Field(default=0)

    @classmethod
    def empty(cls, direction: Direction, status: Status, parts: float) -> "ConversionResult":
        """All-zero record for inputs that cannot be converted."""
        return cls(direction=direction, status=status, parts=parts, computed=False)


# =============================================================================
# Employer side
# =============================================================================


class EmployerCostResult(BaseModel):
    """Total employer spend for a gross monthly salary."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    status: Status
    gross: float = Field(default=0, description="Gross monthly pay")
    employer_rate: float = Field(default=0, description="Employer contribution rate applied")
    employer_contributions: float = Field(default=0, description="Charges patronales")
    total_cost: float = Field(default=0, description="gross + employer contributions")
    cost_per_net_euro: float = Field(
        default=0,
        description="Employer spend for each euro of net pay before income tax",
    )


# =============================================================================
# Simulations
# =============================================================================


class RaiseSimulation(BaseModel):
    """Effect of a percentage raise on take-home pay."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    pct: float = Field(..., description="Raise in percent of current gross")
    new_gross: float
    new_net: float = Field(..., description="Net after tax with the raise")
    delta: float = Field(..., description="Monthly net gain over current pay")
    delta_pct: float = Field(..., description="Net gain in percent of current net")


class BreakdownItem(BaseModel):
    """One slice of gross pay: net, contributions or tax."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    label: str
    value: float = Field(..., gt=0)
    share: float = Field(..., gt=0, le=1, description="value / gross")
