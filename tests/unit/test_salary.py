"""Tests for gross/net salary conversion.

Reference scenario: 3000 gross monthly, non-cadre (22%), single, no children.
    net before tax = 2340, contributions = 660
    annual net = 28080 -> tax (28080 - 11497) * 11% = 1824.13
    monthly tax = 152.01, net after tax = 2187.99
"""

import math

import pytest
from pydantic import ValidationError

from brutnet.sdk import (
    ConversionRequest,
    ConversionResult,
    InvalidArgumentError,
    compute_annual_tax,
    compute_fiscal_parts,
    convert,
    convert_salary,
    load_rate_table,
)


@pytest.fixture
def rates():
    return load_rate_table("2025")


class TestGrossToNet:
    """Reference scenario and status variants."""

    def test_reference_scenario(self, rates):
        result = convert_salary(3000, "gross_to_net", "non-cadre", 1, rates)

        assert result.computed is True
        assert result.gross == pytest.approx(3000)
        assert result.net_before_tax == pytest.approx(2340)
        assert result.contributions == pytest.approx(660)
        assert result.net_before_tax_annual == pytest.approx(28080)
        assert result.tax_annual == pytest.approx(1824.13)
        assert result.tax_monthly == pytest.approx(152.01, abs=0.01)
        assert result.net_after_tax == pytest.approx(2187.99, abs=0.01)

    def test_effective_rates(self, rates):
        result = convert_salary(3000, "gross_to_net", "non-cadre", 1, rates)

        assert result.effective_contribution_rate == pytest.approx(0.22)
        assert result.effective_tax_rate == pytest.approx(1824.13 / 28080)

    def test_annual_figures(self, rates):
        result = convert_salary(3000, "gross_to_net", "non-cadre", 1, rates)

        assert result.gross_annual == pytest.approx(36000)
        assert result.net_after_tax_annual == pytest.approx(result.net_after_tax * 12)
        assert result.net_after_tax_annual == pytest.approx(28080 - 1824.13)

    def test_cadre_rate(self, rates):
        result = convert_salary(3000, "gross_to_net", "cadre", 1, rates)

        assert result.net_before_tax == pytest.approx(2250)
        assert result.contributions == pytest.approx(750)
        assert result.tax_annual == pytest.approx((27000 - 11497) * 0.11)

    def test_defaults(self):
        """Defaults are gross_to_net, non-cadre, 1 part, packaged table."""
        result = convert_salary(3000)
        assert result.direction == "gross_to_net"
        assert result.status == "non-cadre"
        assert result.parts == 1
        assert result.net_before_tax == pytest.approx(2340)

    def test_parts_lower_the_tax(self, rates):
        single = convert_salary(5000, "gross_to_net", "non-cadre", 1, rates)
        family = convert_salary(5000, "gross_to_net", "non-cadre",
                                compute_fiscal_parts(True, 2), rates)

        assert family.net_before_tax == single.net_before_tax
        assert family.tax_annual < single.tax_annual
        assert family.net_after_tax > single.net_after_tax

    def test_low_salary_pays_no_tax(self, rates):
        """780 net x 12 = 9360 stays in the 0% bracket."""
        result = convert_salary(1000, "gross_to_net", "non-cadre", 1, rates)

        assert result.computed is True
        assert result.tax_annual == 0
        assert result.effective_tax_rate == 0
        assert result.net_after_tax == pytest.approx(780)


class TestNetToGross:
    """Reverse conversion through the contribution layer."""

    def test_gross_needed_for_net(self, rates):
        result = convert_salary(2340, "net_to_gross", "non-cadre", 1, rates)

        assert result.gross == pytest.approx(3000)
        assert result.net_before_tax == pytest.approx(2340)
        assert result.contributions == pytest.approx(660)

    def test_tax_applies_to_given_net(self, rates):
        result = convert_salary(2340, "net_to_gross", "non-cadre", 1, rates)
        assert result.tax_annual == pytest.approx(1824.13)

    @pytest.mark.parametrize("status", ["non-cadre", "cadre"])
    @pytest.mark.parametrize("gross", [1200, 3000, 7654.32, 25000])
    @pytest.mark.parametrize("parts", [1, 2.5])
    def test_contribution_round_trip(self, rates, status, gross, parts):
        """gross -> net before tax -> gross gives back the original gross."""
        forward = convert_salary(gross, "gross_to_net", status, parts, rates)
        back = convert_salary(forward.net_before_tax, "net_to_gross", status, parts, rates)

        assert back.gross == pytest.approx(gross)
        assert back.contributions == pytest.approx(forward.contributions)


class TestAnnualPeriod:
    """Annual amounts are spread over 12 months."""

    def test_annual_gross_matches_monthly(self, rates):
        annual = convert_salary(36000, "gross_to_net", "non-cadre", 1, rates, period="annual")
        monthly = convert_salary(3000, "gross_to_net", "non-cadre", 1, rates)

        assert annual.gross == pytest.approx(monthly.gross)
        assert annual.net_after_tax == pytest.approx(monthly.net_after_tax)
        assert annual.gross_annual == pytest.approx(36000)


class TestDegenerateInput:
    """Non-convertible amounts give the all-zero record, never an exception."""

    @pytest.mark.parametrize("amount", [0, -100, math.nan, math.inf, -math.inf, None, "abc"])
    def test_all_zero_record(self, rates, amount):
        result = convert_salary(amount, "gross_to_net", "non-cadre", 1, rates)

        assert result.computed is False
        for field in (
            "gross", "contributions", "net_before_tax", "tax_annual", "tax_monthly",
            "net_after_tax", "effective_contribution_rate", "effective_tax_rate",
            "gross_annual", "net_before_tax_annual", "net_after_tax_annual",
        ):
            assert getattr(result, field) == 0, field

    @pytest.mark.parametrize("direction", ["gross_to_net", "net_to_gross"])
    def test_overflowing_amount(self, rates, direction):
        result = convert_salary(1e308, direction, "non-cadre", 1, rates)
        assert result == ConversionResult.empty(direction, "non-cadre", 1)

    def test_net_to_gross_zero(self, rates):
        result = convert_salary(0, "net_to_gross", "cadre", 2, rates)
        assert result == ConversionResult.empty("net_to_gross", "cadre", 2)

    def test_numeric_string_is_converted(self, rates):
        result = convert_salary("3000", "gross_to_net", "non-cadre", 1, rates)
        assert result.computed is True
        assert result.net_before_tax == pytest.approx(2340)


class TestInvalidArguments:
    """Invalid choices raise even when the amount is degenerate."""

    def test_unknown_status(self, rates):
        with pytest.raises(InvalidArgumentError, match="status"):
            convert_salary(3000, "gross_to_net", "intern", 1, rates)

    def test_unknown_direction(self, rates):
        with pytest.raises(InvalidArgumentError, match="direction"):
            convert_salary(0, "sideways", "non-cadre", 1, rates)

    def test_unknown_period(self, rates):
        with pytest.raises(InvalidArgumentError, match="period"):
            convert_salary(3000, "gross_to_net", "non-cadre", 1, rates, period="weekly")

    @pytest.mark.parametrize("parts", [0, -2])
    def test_non_positive_parts(self, rates, parts):
        with pytest.raises(InvalidArgumentError):
            convert_salary(3000, "gross_to_net", "non-cadre", parts, rates)


class TestConversionRequest:
    """convert() accepts a request record."""

    def test_convert_request(self, rates):
        request = ConversionRequest(amount=3000, status="cadre", parts=1.5)
        result = convert(request, rates)

        assert result.status == "cadre"
        assert result.parts == 1.5
        assert result.net_before_tax == pytest.approx(2250)
        assert result.tax_annual == pytest.approx(compute_annual_tax(27000, 1.5, rates))

    def test_request_rejects_unknown_status(self):
        with pytest.raises(ValidationError):
            ConversionRequest(amount=3000, status="intern")

    def test_request_rejects_zero_parts(self):
        with pytest.raises(ValidationError):
            ConversionRequest(amount=3000, parts=0)

    def test_result_is_frozen(self, rates):
        result = convert_salary(3000, rates=rates)
        with pytest.raises(ValidationError):
            result.gross = 1
