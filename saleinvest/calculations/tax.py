"""
Progressive Tax Calculations

Bracket-based marginal tax, used for the income tax on a capital gain
but applicable to any progressive levy.
"""

import math
from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True)
class TaxBracket:
    """A single slice of a progressive tax table."""

    limit: float  # Width of the slice, not an absolute ceiling
    rate: float  # Marginal rate as decimal (e.g., 0.19 for 19%)


# Capital gains brackets: first 6,000 at 19%, next 44,000 at 21%, rest at 23%
DEFAULT_BRACKETS = (
    TaxBracket(limit=6000, rate=0.19),
    TaxBracket(limit=44000, rate=0.21),
    TaxBracket(limit=math.inf, rate=0.23),
)


def calculate_tax(
    taxable_amount: float, brackets: Sequence[TaxBracket] = DEFAULT_BRACKETS
) -> float:
    """
    Calculate progressive tax on an amount.

    Brackets are consumed in order. Each one taxes at most `limit` of
    whatever is still untaxed, so the second default bracket covers the
    slice from 6,000 to 50,000.

    Args:
        taxable_amount: Amount subject to tax
        brackets: Ordered brackets, the last one normally unbounded

    Returns:
        Total tax (0 for non-positive amounts)
    """
    if taxable_amount <= 0:
        return 0.0

    remaining = taxable_amount
    tax = 0.0

    for bracket in brackets:
        taxed = min(remaining, bracket.limit)
        tax += taxed * bracket.rate
        remaining -= taxed
        if remaining <= 0:
            break

    return tax


def calculate_effective_rate(
    taxable_amount: float, brackets: Sequence[TaxBracket] = DEFAULT_BRACKETS
) -> float:
    """Calculate average tax rate paid on the whole amount."""
    if taxable_amount <= 0:
        return 0.0
    return calculate_tax(taxable_amount, brackets) / taxable_amount
