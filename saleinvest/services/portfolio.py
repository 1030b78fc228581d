"""
Portfolio service.

Holds the working set of rental properties and the capital available to
buy them. Metrics are never stored here; they are recomputed from the
current inputs on every call.
"""

import itertools
import logging
from dataclasses import fields
from typing import List, Optional

from saleinvest.calculations.investment import (
    PortfolioSummary,
    PropertyInput,
    PropertyMetrics,
    calculate_metrics,
    calculate_summary,
)
from saleinvest.calculations.sale import SaleResult
from saleinvest.config import Settings, get_settings

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = frozenset(f.name for f in fields(PropertyInput)) - {"id"}


class PropertyNotFoundError(KeyError):
    """Raised when no property in the portfolio has the requested id."""

    def __init__(self, property_id: int):
        super().__init__(property_id)
        self.property_id = property_id

    def __str__(self) -> str:
        return f"Property {self.property_id} not found"


class Portfolio:
    """In-memory property collection plus the capital figure fed by a sale."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self.properties: List[PropertyInput] = []
        self.available_capital = 0.0
        self.sale_proceeds = 0.0
        self._ids = itertools.count(1)

    def _default_property(self, property_id: int) -> PropertyInput:
        s = self.settings
        return PropertyInput(
            id=property_id,
            purchase_price=s.default_property_purchase_price,
            down_payment_pct=s.default_property_down_payment_pct,
            mortgage_term_years=s.default_property_mortgage_term_years,
            annual_interest_rate_pct=s.default_property_annual_interest_rate_pct,
            purchase_fees_pct=s.default_property_purchase_fees_pct,
            renovation_cost=s.default_property_renovation_cost,
            num_rooms=s.default_property_num_rooms,
            rent_per_room=s.default_property_rent_per_room,
            monthly_expenses=s.default_property_monthly_expenses,
            vacancy_pct=s.default_property_vacancy_pct,
        )

    def _check_fields(self, names) -> None:
        unknown = sorted(set(names) - EDITABLE_FIELDS)
        if unknown:
            logger.warning(f"Rejected edit of unknown fields: {unknown}")
            raise ValueError(f"Unknown or read-only property fields: {', '.join(unknown)}")

    def add_property(self, /, **overrides) -> PropertyInput:
        """
        Append a new property built from the configured defaults.

        Args:
            **overrides: Field values to use instead of the defaults

        Returns:
            The stored property, with its newly assigned id
        """
        self._check_fields(overrides)
        prop = self._default_property(next(self._ids))
        for name, value in overrides.items():
            setattr(prop, name, value)

        self.properties.append(prop)
        logger.info(f"Added property {prop.id} ({len(self.properties)} in portfolio)")
        return prop

    def get_property(self, property_id: int) -> PropertyInput:
        for prop in self.properties:
            if prop.id == property_id:
                return prop
        raise PropertyNotFoundError(property_id)

    def update_property(self, property_id: int, /, **changes) -> PropertyInput:
        """Edit fields of a stored property in place."""
        prop = self.get_property(property_id)
        self._check_fields(changes)
        for name, value in changes.items():
            setattr(prop, name, value)

        logger.info(f"Updated property {property_id}: {sorted(changes)}")
        return prop

    def remove_property(self, property_id: int) -> PropertyInput:
        prop = self.get_property(property_id)
        self.properties = [p for p in self.properties if p.id != property_id]
        logger.info(f"Removed property {property_id} ({len(self.properties)} left)")
        return prop

    def apply_sale(self, result: SaleResult) -> None:
        """Record a sale's net proceeds as the capital available to invest."""
        self.sale_proceeds = result.net_proceeds
        self.available_capital = result.net_proceeds
        logger.info(f"Sale proceeds recorded: {result.net_proceeds:.2f}")

    def set_available_capital(self, amount: float) -> None:
        self.available_capital = amount
        logger.info(f"Available capital set to {amount:.2f}")

    def metrics(self, property_id: int) -> PropertyMetrics:
        return calculate_metrics(self.get_property(property_id))

    def summary(self) -> PortfolioSummary:
        return calculate_summary(self.properties, self.available_capital)


# Singleton instance
_portfolio: Optional[Portfolio] = None


def get_portfolio() -> Portfolio:
    """Get the portfolio singleton (FastAPI dependency)."""
    global _portfolio
    if _portfolio is None:
        _portfolio = Portfolio()
    return _portfolio
