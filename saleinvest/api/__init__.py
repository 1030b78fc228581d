"""
API routes for the sale and investment calculator.
"""

from fastapi import APIRouter

from saleinvest.api import calculations, portfolio

router = APIRouter()

# Include sub-routers
router.include_router(calculations.router, prefix="/calculate", tags=["calculations"])
router.include_router(portfolio.router, prefix="/portfolio", tags=["portfolio"])
