"""
Rental Investment Calculations

Per-property cash flow, ROI and net yield for rent-by-the-room properties,
and the portfolio roll-up across a list of them.
"""

from typing import List
from dataclasses import dataclass

from saleinvest.calculations.amortization import calculate_payment


@dataclass
class PropertyInput:
    """A rental property under consideration. Percentages are whole numbers."""

    id: int = 0
    purchase_price: float = 0.0
    down_payment_pct: float = 0.0
    mortgage_term_years: float = 0.0
    annual_interest_rate_pct: float = 0.0
    purchase_fees_pct: float = 0.0  # Taxes and closing costs on purchase
    renovation_cost: float = 0.0
    num_rooms: float = 0.0
    rent_per_room: float = 0.0  # Monthly
    monthly_expenses: float = 0.0
    vacancy_pct: float = 0.0


@dataclass
class PropertyMetrics:
    """Derived metrics for one property. Monthly unless stated otherwise."""

    down_payment: float
    loan_amount: float
    monthly_payment: float
    gross_monthly_income: float
    net_monthly_income: float
    monthly_cash_flow: float
    initial_investment: float
    annual_roi: float  # Decimal
    annual_net_yield: float  # Decimal


@dataclass
class PortfolioSummary:
    """Portfolio roll-up."""

    capital_used: float = 0.0
    total_monthly_cash_flow: float = 0.0
    average_roi: float = 0.0
    average_net_yield: float = 0.0
    property_count: int = 0
    available_capital: float = 0.0
    remaining_capital: float = 0.0


def calculate_initial_investment(prop: PropertyInput) -> float:
    """Cash put in at purchase: down payment, purchase fees and renovation."""
    down_payment = prop.purchase_price * (prop.down_payment_pct / 100)
    purchase_fees = prop.purchase_price * (prop.purchase_fees_pct / 100)
    return down_payment + purchase_fees + prop.renovation_cost


def calculate_metrics(prop: PropertyInput) -> PropertyMetrics:
    """
    Calculate investment metrics for a single property.

    ROI is annual cash flow over the cash invested; net yield is annual net
    income over the purchase price and ignores financing. ROI falls back to
    0 when the cash invested is not positive, net yield when the purchase
    price is zero; a negative price still produces a (negative) yield.

    Args:
        prop: Property inputs

    Returns:
        PropertyMetrics
    """
    down_payment = prop.purchase_price * (prop.down_payment_pct / 100)
    loan_amount = prop.purchase_price - down_payment
    monthly_payment = calculate_payment(
        loan_amount, prop.annual_interest_rate_pct, prop.mortgage_term_years
    )

    gross_monthly_income = prop.num_rooms * prop.rent_per_room
    net_monthly_income = (
        gross_monthly_income * (1 - prop.vacancy_pct / 100) - prop.monthly_expenses
    )
    monthly_cash_flow = net_monthly_income - monthly_payment

    initial_investment = calculate_initial_investment(prop)
    annual_roi = (
        (monthly_cash_flow * 12) / initial_investment if initial_investment > 0 else 0.0
    )
    annual_net_yield = (
        (net_monthly_income * 12) / prop.purchase_price
        if prop.purchase_price != 0
        else 0.0
    )

    return PropertyMetrics(
        down_payment=down_payment,
        loan_amount=loan_amount,
        monthly_payment=monthly_payment,
        gross_monthly_income=gross_monthly_income,
        net_monthly_income=net_monthly_income,
        monthly_cash_flow=monthly_cash_flow,
        initial_investment=initial_investment,
        annual_roi=annual_roi,
        annual_net_yield=annual_net_yield,
    )


def calculate_summary(
    properties: List[PropertyInput], available_capital: float = 0.0
) -> PortfolioSummary:
    """
    Roll up metrics across a portfolio.

    Args:
        properties: Property inputs, in any order
        available_capital: Cash on hand to invest (e.g., proceeds of a sale)

    Returns:
        PortfolioSummary; all zeros apart from capital for an empty list
    """
    capital_used = 0.0
    total_cash_flow = 0.0
    total_roi = 0.0
    total_net_yield = 0.0

    for prop in properties:
        metrics = calculate_metrics(prop)
        capital_used += metrics.initial_investment
        total_cash_flow += metrics.monthly_cash_flow
        total_roi += metrics.annual_roi
        total_net_yield += metrics.annual_net_yield

    count = len(properties)

    return PortfolioSummary(
        capital_used=capital_used,
        total_monthly_cash_flow=total_cash_flow,
        average_roi=total_roi / count if count > 0 else 0.0,
        average_net_yield=total_net_yield / count if count > 0 else 0.0,
        property_count=count,
        available_capital=available_capital,
        remaining_capital=available_capital - capital_used,
    )
