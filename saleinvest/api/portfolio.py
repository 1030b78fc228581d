"""
Portfolio API endpoints.

Manage the in-memory property list and the capital available to invest.
"""

from dataclasses import asdict
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from saleinvest.api.schemas import CapitalUpdate, PropertyUpdate, SaleRequest
from saleinvest.calculations.investment import PropertyInput
from saleinvest.calculations.sale import calculate_sale
from saleinvest.services.portfolio import (
    Portfolio,
    PropertyNotFoundError,
    get_portfolio,
)

router = APIRouter()


def property_to_response(prop: PropertyInput, portfolio: Portfolio) -> dict:
    """Property inputs with freshly computed metrics."""
    return {**asdict(prop), "metrics": asdict(portfolio.metrics(prop.id))}


def _get_or_404(portfolio: Portfolio, property_id: int) -> PropertyInput:
    try:
        return portfolio.get_property(property_id)
    except PropertyNotFoundError:
        raise HTTPException(status_code=404, detail="Property not found")


@router.get("/")
async def get_portfolio_state(portfolio: Portfolio = Depends(get_portfolio)):
    """Full portfolio: capital, properties with metrics and the summary."""
    return {
        "sale_proceeds": portfolio.sale_proceeds,
        "available_capital": portfolio.available_capital,
        "properties": [property_to_response(p, portfolio) for p in portfolio.properties],
        "summary": asdict(portfolio.summary()),
    }


@router.post("/sale")
async def apply_sale(
    inputs: SaleRequest,
    portfolio: Portfolio = Depends(get_portfolio),
):
    """Calculate a sale and make its net proceeds the available capital."""
    result = calculate_sale(inputs.to_sale_input())
    portfolio.apply_sale(result)

    return {
        "sale": asdict(result),
        "available_capital": portfolio.available_capital,
    }


@router.put("/capital")
async def set_capital(
    inputs: CapitalUpdate,
    portfolio: Portfolio = Depends(get_portfolio),
):
    """Override the capital available to invest."""
    portfolio.set_available_capital(inputs.available_capital)
    return {
        "available_capital": portfolio.available_capital,
        "summary": asdict(portfolio.summary()),
    }


@router.post("/properties", status_code=201)
async def add_property(
    property_data: Optional[PropertyUpdate] = None,
    portfolio: Portfolio = Depends(get_portfolio),
):
    """Add a property built from the defaults, with optional overrides."""
    overrides = property_data.changes() if property_data else {}

    try:
        prop = portfolio.add_property(**overrides)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return property_to_response(prop, portfolio)


@router.get("/properties/{property_id}")
async def get_property(
    property_id: int,
    portfolio: Portfolio = Depends(get_portfolio),
):
    """Get a property and its metrics."""
    prop = _get_or_404(portfolio, property_id)
    return property_to_response(prop, portfolio)


@router.patch("/properties/{property_id}")
async def update_property(
    property_id: int,
    property_data: PropertyUpdate,
    portfolio: Portfolio = Depends(get_portfolio),
):
    """Update the fields sent; everything else is left as it was."""
    _get_or_404(portfolio, property_id)

    try:
        prop = portfolio.update_property(
            property_id, **property_data.changes()
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return property_to_response(prop, portfolio)


@router.delete("/properties/{property_id}")
async def delete_property(
    property_id: int,
    portfolio: Portfolio = Depends(get_portfolio),
):
    """Remove a property from the portfolio."""
    _get_or_404(portfolio, property_id)
    portfolio.remove_property(property_id)

    return {
        "deleted": True,
        "id": property_id,
        "summary": asdict(portfolio.summary()),
    }


@router.get("/summary")
async def get_summary(portfolio: Portfolio = Depends(get_portfolio)):
    """Portfolio roll-up."""
    return asdict(portfolio.summary())
