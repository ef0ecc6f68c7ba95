"""Pydantic schemas for rate table validation.

These schemas validate the rate-tables/*.yaml files and provide typed access
to contribution rates and income tax brackets. Models are frozen: a loaded
table is shared read-only by every calculation.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..schemas import InvalidArgumentError, Status, STATUSES


class TaxBracket(BaseModel):
    """Single tax bracket entry, applied to income per fiscal part."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    over: float = Field(..., ge=0, description="Lower bound (exclusive)")
    up_to: Optional[float] = Field(default=None, description="Upper bound (None if top bracket)")
    rate: float = Field(..., ge=0, le=1, description="Marginal rate as decimal")

    @model_validator(mode="after")
    def check_bounds(self) -> "TaxBracket":
        if self.up_to is not None and self.up_to <= self.over:
            raise ValueError(f"up_to ({self.up_to}) must be greater than over ({self.over})")
        return self


class StatusRates(BaseModel):
    """Contribution rate per employment status, as a share of gross pay."""
    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    non_cadre: float = Field(..., ge=0, lt=1, alias="non-cadre")
    cadre: float = Field(..., ge=0, lt=1)

    def for_status(self, status: Status) -> float:
        """Return the rate for a status ('non-cadre' or 'cadre')."""
        if status == "cadre":
            return self.cadre
        if status == "non-cadre":
            return self.non_cadre
        raise InvalidArgumentError(
            f"Unknown status '{status}'. Expected one of: {', '.join(STATUSES)}"
        )


class RateTable(BaseModel):
    """Complete rate table for a year."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    year: Optional[str] = None
    employee_contribution_rates: StatusRates
    employer_contribution_rates: StatusRates
    tax_brackets: tuple[TaxBracket, ...]

    @field_validator("year", mode="before")
    @classmethod
    def coerce_year(cls, value):
        return str(value) if value is not None else None

    @field_validator("tax_brackets")
    @classmethod
    def check_brackets(cls, brackets: tuple[TaxBracket, ...]) -> tuple[TaxBracket, ...]:
        """Brackets must cover [0, inf) in order with no gaps or overlaps."""
        if not brackets:
            raise ValueError("at least one tax bracket is required")
        if brackets[0].over != 0:
            raise ValueError(f"first bracket must start at 0, got {brackets[0].over}")

        for i, (current, following) in enumerate(zip(brackets, brackets[1:])):
            if current.up_to is None:
                raise ValueError(f"bracket {i} is unbounded but is not the last bracket")
            if following.over != current.up_to:
                raise ValueError(
                    f"bracket {i + 1} starts at {following.over}, "
                    f"expected {current.up_to} (end of bracket {i})"
                )
            if following.rate < current.rate:
                raise ValueError(
                    f"bracket {i + 1} rate {following.rate} is lower than "
                    f"bracket {i} rate {current.rate}"
                )

        if brackets[-1].up_to is not None:
            raise ValueError("last bracket must be unbounded (no up_to)")
        return brackets
