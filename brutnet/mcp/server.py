"""BrutNet MCP Server - FastMCP implementation for salary and tax tools."""

import json
import logging
from typing import Any

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from brutnet.sdk import (
    DEFAULT_RAISES,
    InvalidArgumentError,
    RateTableError,
    RateTableNotFoundError,
    compute_annual_tax as sdk_compute_annual_tax,
    compute_employer_cost as sdk_compute_employer_cost,
    compute_fiscal_parts as sdk_compute_fiscal_parts,
    convert_salary as sdk_convert_salary,
    get_configured_rate_table,
    marginal_rate,
    pay_breakdown,
    simulate_raises as sdk_simulate_raises,
)

logger = logging.getLogger(__name__)

# Initialize FastMCP server
mcp = FastMCP("brutnet")

# Expected failures reported back to the client instead of raised
TOOL_ERRORS = (InvalidArgumentError, RateTableNotFoundError, RateTableError)


# --- Tools ---

@mcp.tool()
async def compute_fiscal_parts(
    is_coupled: bool = Field(default=False, description="Married or PACS household"),
    children: int = Field(default=0, description="Number of dependent children"),
) -> dict[str, Any]:
    """Compute a household's fiscal parts (quotient familial) from its composition."""
    try:
        parts = sdk_compute_fiscal_parts(is_coupled, children)
        return {"is_coupled": is_coupled, "children": children, "parts": parts}
    except TOOL_ERRORS as e:
        logger.error(f"Error computing fiscal parts: {e}")
        return {"error": str(e), "parts": None}


@mcp.tool()
async def compute_annual_tax(
    taxable_income: float = Field(description="Household annual taxable income in euros"),
    parts: float = Field(default=1.0, description="Fiscal parts (see compute_fiscal_parts)"),
) -> dict[str, Any]:
    """Compute French annual income tax with the quotient familial. Returns tax and marginal rate."""
    try:
        rates = get_configured_rate_table()
        tax = sdk_compute_annual_tax(taxable_income, parts, rates)
        return {
            "taxable_income": taxable_income,
            "parts": parts,
            "tax_annual": tax,
            "tax_monthly": tax / 12,
            "marginal_rate": marginal_rate(taxable_income, parts, rates),
            "year": rates.year,
        }
    except TOOL_ERRORS as e:
        logger.error(f"Error computing annual tax: {e}")
        return {"error": str(e), "tax_annual": None}


@mcp.tool()
async def convert_salary(
    amount: float = Field(description="Monthly amount in euros (gross, or net for net_to_gross)"),
    direction: str = Field(default="gross_to_net", description="'gross_to_net' or 'net_to_gross'"),
    status: str = Field(default="non-cadre", description="'non-cadre' or 'cadre'"),
    parts: float = Field(default=1.0, description="Fiscal parts of the household"),
    period: str = Field(default="monthly", description="'monthly' or 'annual' amount"),
) -> dict[str, Any]:
    """Convert a salary between gross (brut) and net, with income tax. Returns the full breakdown."""
    try:
        rates = get_configured_rate_table()
        result = sdk_convert_salary(amount, direction, status, parts, rates, period)
        output = result.model_dump()
        output["breakdown"] = [item.model_dump() for item in pay_breakdown(result)]
        return output
    except TOOL_ERRORS as e:
        logger.error(f"Error converting salary: {e}")
        return {"error": str(e), "result": None}


@mcp.tool()
async def compute_employer_cost(
    gross_monthly: float = Field(description="Gross monthly salary in euros"),
    status: str = Field(default="non-cadre", description="'non-cadre' or 'cadre'"),
) -> dict[str, Any]:
    """Compute employer contributions and total employer cost for a gross salary."""
    try:
        result = sdk_compute_employer_cost(gross_monthly, status, get_configured_rate_table())
        return result.model_dump()
    except TOOL_ERRORS as e:
        logger.error(f"Error computing employer cost: {e}")
        return {"error": str(e), "result": None}


@mcp.tool()
async def simulate_raises(
    gross_monthly: float = Field(description="Current gross monthly salary in euros"),
    status: str = Field(default="non-cadre", description="'non-cadre' or 'cadre'"),
    parts: float = Field(default=1.0, description="Fiscal parts of the household"),
    percentages: list[float] | None = Field(default=None, description="Raises in percent (default 5, 10, 15, 20)"),
) -> dict[str, Any]:
    """Simulate percentage raises and report the monthly net gain after tax."""
    try:
        simulations = sdk_simulate_raises(
            gross_monthly,
            status=status,
            parts=parts,
            percentages=percentages or DEFAULT_RAISES,
            rates=get_configured_rate_table(),
        )
        return {"simulations": [sim.model_dump() for sim in simulations]}
    except TOOL_ERRORS as e:
        logger.error(f"Error simulating raises: {e}")
        return {"error": str(e), "simulations": []}


# --- Resources ---

@mcp.resource("brutnet://rates/current")
async def current_rates_resource() -> str:
    """Rate table in effect (contribution rates and tax brackets)."""
    try:
        return json.dumps(get_configured_rate_table().model_dump(by_alias=True), indent=2)
    except TOOL_ERRORS as e:
        return json.dumps({"error": str(e)})


# --- Server Entry Point ---

def run_server():
    """Run the MCP server in stdio mode."""
    mcp.run(transport="stdio")


if __name__ == "__main__":
    run_server()
