"""
Property Sale Calculations

Computes the cash left over after selling a home: capital gain, municipal
gain tax, income tax on the gain, transaction fees and mortgage payoff.
"""

from dataclasses import dataclass, field

from saleinvest.calculations.tax import DEFAULT_BRACKETS, calculate_tax


@dataclass
class FeeRates:
    """Sale fee and tax rates, as whole-number percentages (7 = 7%)."""

    municipal_gain_tax_pct: float = 0.0
    # Display value only; income tax always comes from the bracket table
    income_tax_pct: float = 0.0
    agency_fee_pct: float = 0.0
    notary_pct: float = 0.0
    registry_pct: float = 0.0
    agency_management_pct: float = 0.0
    other_pct: float = 0.0


@dataclass
class SaleInput:
    """A single sale scenario."""

    sale_price: float = 0.0
    purchase_price: float = 0.0
    years_held: float = 0.0  # Informational
    outstanding_mortgage: float = 0.0
    fee_rates: FeeRates = field(default_factory=FeeRates)


@dataclass
class SaleResult:
    """Breakdown of a sale, all amounts in currency units."""

    gross_gain: float
    municipal_tax: float
    income_tax: float
    agency_fee: float
    notary_fee: float
    registry_fee: float
    management_fee: float
    other_fee: float
    total_costs: float
    net_proceeds: float


def calculate_gross_gain(sale_price: float, purchase_price: float) -> float:
    """Calculate capital gain, floored at zero."""
    return max(sale_price - purchase_price, 0.0)


def calculate_sale(sale: SaleInput) -> SaleResult:
    """
    Calculate net proceeds of a sale.

    Percentage fees apply to the sale price, except the municipal tax which
    applies to the gross gain. The outstanding mortgage is paid off from the
    proceeds.

    Args:
        sale: Sale scenario

    Returns:
        SaleResult with every cost line and the final net proceeds
    """
    rates = sale.fee_rates

    gross_gain = calculate_gross_gain(sale.sale_price, sale.purchase_price)
    municipal_tax = gross_gain * (rates.municipal_gain_tax_pct / 100)
    income_tax = calculate_tax(gross_gain, DEFAULT_BRACKETS)

    agency_fee = sale.sale_price * (rates.agency_fee_pct / 100)
    notary_fee = sale.sale_price * (rates.notary_pct / 100)
    registry_fee = sale.sale_price * (rates.registry_pct / 100)
    management_fee = sale.sale_price * (rates.agency_management_pct / 100)
    other_fee = sale.sale_price * (rates.other_pct / 100)

    total_costs = (
        municipal_tax
        + income_tax
        + agency_fee
        + notary_fee
        + registry_fee
        + management_fee
        + other_fee
        + sale.outstanding_mortgage
    )

    return SaleResult(
        gross_gain=gross_gain,
        municipal_tax=municipal_tax,
        income_tax=income_tax,
        agency_fee=agency_fee,
        notary_fee=notary_fee,
        registry_fee=registry_fee,
        management_fee=management_fee,
        other_fee=other_fee,
        total_costs=total_costs,
        net_proceeds=sale.sale_price - total_costs,
    )
