"""Split of gross pay into take-home pay, contributions and income tax."""

from typing import List

from .schemas import BreakdownItem, ConversionResult

NET_LABEL = "Net à payer"
CONTRIBUTIONS_LABEL = "Cotisations"
TAX_LABEL = "Impôts"


def pay_breakdown(result: ConversionResult) -> List[BreakdownItem]:
    """Break a conversion result into slices that add up to gross pay.

    Slices with no value (e.g. tax in the first bracket) are left out, so
    an empty result gives an empty list.
    """
    slices = [
        (NET_LABEL, result.net_after_tax),
        (CONTRIBUTIONS_LABEL, result.contributions),
        (TAX_LABEL, result.tax_monthly),
    ]
    slices = [(label, value) for label, value in slices if value > 0]
    total = sum(value for _, value in slices)

    return [
        BreakdownItem(label=label, value=value, share=value / total)
        for label, value in slices
    ]
