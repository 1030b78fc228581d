"""
Mortgage Amortization Calculations

Implements the fixed monthly payment of an amortizing mortgage and the
month-by-month schedule behind it. Rates are whole-number percentages
(3.5 = 3.5% per year) and terms are in years.
"""

from typing import List, Dict, Optional
from datetime import date
from dateutil.relativedelta import relativedelta


def calculate_payment(
    principal: float, annual_rate_pct: float, term_years: float
) -> float:
    """
    Calculate monthly mortgage payment.

    Args:
        principal: Loan amount
        annual_rate_pct: Annual interest rate in percent (e.g., 3.5)
        term_years: Mortgage term in years

    Returns:
        Monthly payment (0 when the term has no months or the rate
        wipes out the balance, i.e. 1 + monthly rate <= 0)
    """
    monthly_rate = (annual_rate_pct / 100) / 12
    n_months = term_years * 12

    if n_months <= 0:
        return 0.0

    if monthly_rate == 0:
        return principal / n_months

    if 1 + monthly_rate <= 0:
        return 0.0

    try:
        denominator = 1 - (1 + monthly_rate) ** (-n_months)
    except OverflowError:
        # Discount factor is unbounded, so the payment tends to zero
        return 0.0

    if denominator == 0:
        # Rate too small to register against 1.0
        return principal / n_months

    return principal * monthly_rate / denominator


def generate_amortization_schedule(
    principal: float,
    annual_rate_pct: float,
    term_years: float,
    start_date: Optional[date] = None,
) -> List[Dict]:
    """
    Generate a full amortization schedule.

    Args:
        principal: Loan amount
        annual_rate_pct: Annual interest rate in percent
        term_years: Mortgage term in years
        start_date: Date of first payment (defaults to today)

    Returns:
        List of monthly rows, stopping once the balance reaches zero
    """
    schedule = []
    balance = principal
    monthly_rate = (annual_rate_pct / 100) / 12
    n_months = int(round(term_years * 12))
    payment = calculate_payment(principal, annual_rate_pct, term_years)

    if start_date is None:
        start_date = date.today()

    for period in range(1, n_months + 1):
        period_date = start_date + relativedelta(months=period - 1)

        interest = balance * monthly_rate

        if period == n_months:
            # Final payment clears any rounding residue
            principal_pmt = balance
        else:
            principal_pmt = min(payment - interest, balance)

        ending_balance = balance - principal_pmt

        schedule.append(
            {
                "period": period,
                "date": period_date.isoformat(),
                "beginning_balance": round(balance, 2),
                "payment": round(principal_pmt + interest, 2),
                "interest": round(interest, 2),
                "principal": round(principal_pmt, 2),
                "ending_balance": round(max(0, ending_balance), 2),
            }
        )

        balance = max(0.0, ending_balance)

        if balance == 0:
            break

    return schedule


def calculate_total_interest(schedule: List[Dict]) -> float:
    """Calculate total interest paid over loan term."""
    return sum(row["interest"] for row in schedule)
