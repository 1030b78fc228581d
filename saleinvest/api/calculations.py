"""
Financial calculation API endpoints.

These endpoints accept inputs and return calculated results. They hold no
state; every call recomputes from the request body.
"""

import math
from dataclasses import asdict
from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from saleinvest.api.schemas import (
    NumericInput,
    PropertyRequest,
    SaleRequest,
    SummaryRequest,
)
from saleinvest.calculations import amortization, investment, sale, tax
from saleinvest.config import Settings, get_settings

router = APIRouter()


@router.get("/sale/defaults")
async def sale_defaults(settings: Settings = Depends(get_settings)):
    """Default sale scenario used to prefill the sale form."""
    return {
        "sale_price": settings.default_sale_price,
        "purchase_price": settings.default_purchase_price,
        "years_held": settings.default_years_held,
        "outstanding_mortgage": settings.default_outstanding_mortgage,
        "fee_rates": {
            "municipal_gain_tax_pct": settings.default_municipal_gain_tax_pct,
            "income_tax_pct": settings.default_income_tax_pct,
            "agency_fee_pct": settings.default_agency_fee_pct,
            "notary_pct": settings.default_notary_pct,
            "registry_pct": settings.default_registry_pct,
            "agency_management_pct": settings.default_agency_management_pct,
            "other_pct": settings.default_other_pct,
        },
    }


@router.post("/sale")
async def calculate_sale(inputs: SaleRequest):
    """Calculate taxes, fees and net proceeds of a sale."""
    result = sale.calculate_sale(inputs.to_sale_input())
    return asdict(result)


class BracketInput(BaseModel):
    """A tax bracket; omit `limit` for an unbounded top bracket."""

    limit: Optional[float] = None
    rate: float


class TaxInput(NumericInput):
    """Input for progressive tax calculation."""

    amount: float = 0.0
    brackets: Optional[List[BracketInput]] = None


class TaxResponse(BaseModel):
    """Response with tax calculation."""

    amount: float
    tax: float
    effective_rate: float


@router.post("/tax", response_model=TaxResponse)
async def calculate_tax(inputs: TaxInput):
    """Calculate progressive tax, using the capital gains table by default."""
    if inputs.brackets is None:
        brackets = tax.DEFAULT_BRACKETS
    else:
        if not inputs.brackets:
            raise HTTPException(status_code=400, detail="At least one bracket required")
        if any(b.limit is not None and b.limit < 0 for b in inputs.brackets):
            raise HTTPException(status_code=400, detail="Bracket limits must be non-negative")
        brackets = [
            tax.TaxBracket(
                limit=math.inf if b.limit is None else b.limit,
                rate=b.rate,
            )
            for b in inputs.brackets
        ]

    return TaxResponse(
        amount=inputs.amount,
        tax=tax.calculate_tax(inputs.amount, brackets),
        effective_rate=tax.calculate_effective_rate(inputs.amount, brackets),
    )


class MortgageInput(NumericInput):
    """Input for mortgage calculation."""

    principal: float = 0.0
    annual_rate_pct: float = 0.0
    term_years: float = 0.0
    include_schedule: bool = False
    start_date: Optional[date] = None


@router.post("/mortgage")
async def calculate_mortgage(inputs: MortgageInput):
    """Calculate the monthly payment, optionally with the full schedule."""
    payment = amortization.calculate_payment(
        inputs.principal, inputs.annual_rate_pct, inputs.term_years
    )
    response = {
        "monthly_payment": payment,
        "total_paid": payment * inputs.term_years * 12,
    }

    if inputs.include_schedule:
        schedule = amortization.generate_amortization_schedule(
            principal=inputs.principal,
            annual_rate_pct=inputs.annual_rate_pct,
            term_years=inputs.term_years,
            start_date=inputs.start_date,
        )
        response["schedule"] = schedule
        response["total_interest"] = amortization.calculate_total_interest(schedule)

    return response


@router.post("/metrics")
async def calculate_metrics(inputs: PropertyRequest):
    """Calculate investment metrics for one property."""
    return asdict(investment.calculate_metrics(inputs.to_property_input()))


@router.post("/summary")
async def calculate_summary(inputs: SummaryRequest):
    """Calculate portfolio roll-up and per-property metrics."""
    properties = [p.to_property_input() for p in inputs.properties]
    summary = investment.calculate_summary(properties, inputs.available_capital)

    return {
        "summary": asdict(summary),
        "properties": [
            {"id": p.id, "metrics": asdict(investment.calculate_metrics(p))}
            for p in properties
        ],
    }
