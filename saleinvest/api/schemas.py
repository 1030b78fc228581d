"""
Request and response schemas shared by the API routers.

Form fields arrive as whatever the client typed. Every numeric field is
coerced before validation: numeric strings are parsed (a trailing "%" is
dropped) and anything missing, blank, non-numeric or non-finite becomes 0.
"""

import math
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from saleinvest.calculations.investment import PropertyInput
from saleinvest.calculations.sale import FeeRates, SaleInput


def coerce_number(value: Any) -> Any:
    """Coerce a raw form value to a finite number, defaulting to 0."""
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, str):
        text = value.strip().replace("%", "")
        try:
            value = float(text)
        except ValueError:
            return 0.0
    if isinstance(value, (int, float)):
        try:
            finite = math.isfinite(float(value))
        except (OverflowError, ValueError):
            return 0.0
        return value if finite else 0.0
    return 0.0


NUMERIC_TYPES = (float, int, Optional[float])


class NumericInput(BaseModel):
    """Base model whose number-typed fields are coerced."""

    @field_validator("*", mode="before")
    @classmethod
    def _coerce(cls, v: Any, info: ValidationInfo) -> Any:
        if cls.model_fields[info.field_name].annotation in NUMERIC_TYPES:
            return coerce_number(v)
        return v


class FeeRatesInput(NumericInput):
    """Sale fee rates as whole-number percentages."""

    municipal_gain_tax_pct: float = 0.0
    income_tax_pct: float = 0.0
    agency_fee_pct: float = 0.0
    notary_pct: float = 0.0
    registry_pct: float = 0.0
    agency_management_pct: float = 0.0
    other_pct: float = 0.0


class SaleRequest(NumericInput):
    """Input for the sale calculation."""

    sale_price: float = 0.0
    purchase_price: float = 0.0
    years_held: float = 0.0
    outstanding_mortgage: float = 0.0
    fee_rates: FeeRatesInput = Field(default_factory=FeeRatesInput)

    def to_sale_input(self) -> SaleInput:
        return SaleInput(
            sale_price=self.sale_price,
            purchase_price=self.purchase_price,
            years_held=self.years_held,
            outstanding_mortgage=self.outstanding_mortgage,
            fee_rates=FeeRates(**self.fee_rates.model_dump()),
        )


class PropertyRequest(NumericInput):
    """Full set of property inputs."""

    id: int = 0
    purchase_price: float = 0.0
    down_payment_pct: float = 0.0
    mortgage_term_years: float = 0.0
    annual_interest_rate_pct: float = 0.0
    purchase_fees_pct: float = 0.0
    renovation_cost: float = 0.0
    num_rooms: float = 0.0
    rent_per_room: float = 0.0
    monthly_expenses: float = 0.0
    vacancy_pct: float = 0.0

    def to_property_input(self) -> PropertyInput:
        return PropertyInput(**self.model_dump())


class PropertyUpdate(NumericInput):
    """Partial property edit; only the fields sent are applied."""

    # Unknown keys are passed through so the portfolio can reject them
    model_config = ConfigDict(extra="allow")

    purchase_price: Optional[float] = None
    down_payment_pct: Optional[float] = None
    mortgage_term_years: Optional[float] = None
    annual_interest_rate_pct: Optional[float] = None
    purchase_fees_pct: Optional[float] = None
    renovation_cost: Optional[float] = None
    num_rooms: Optional[float] = None
    rent_per_room: Optional[float] = None
    monthly_expenses: Optional[float] = None
    vacancy_pct: Optional[float] = None

    def changes(self) -> dict:
        """Fields sent by the client, declared or not."""
        return {**self.model_dump(exclude_unset=True), **(self.model_extra or {})}


class SummaryRequest(NumericInput):
    """Input for a stateless portfolio summary."""

    properties: List[PropertyRequest] = []
    available_capital: float = 0.0


class CapitalUpdate(NumericInput):
    """Manual override of the capital available to invest."""

    available_capital: float = 0.0
