"""
Application services module.
"""

from saleinvest.services.portfolio import Portfolio, PropertyNotFoundError, get_portfolio

__all__ = ["Portfolio", "PropertyNotFoundError", "get_portfolio"]
