"""
Pytest configuration and shared fixtures.
"""

import pytest
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from fastapi.testclient import TestClient

from saleinvest.config import Settings
from saleinvest.main import app
from saleinvest.calculations.sale import FeeRates, SaleInput
from saleinvest.services.portfolio import Portfolio, get_portfolio


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "integration: marks integration tests")


@pytest.fixture
def settings():
    """Settings with the built-in defaults, ignoring any env file."""
    return Settings(_env_file=None)


@pytest.fixture
def portfolio(settings):
    """Fresh, empty portfolio."""
    return Portfolio(settings)


@pytest.fixture
def client(portfolio):
    """Test client bound to the per-test portfolio."""
    app.dependency_overrides[get_portfolio] = lambda: portfolio
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def default_fee_rates():
    """Fee rates used by the sale form out of the box."""
    return FeeRates(
        municipal_gain_tax_pct=7,
        income_tax_pct=19,
        agency_fee_pct=4,
        notary_pct=0.3,
        registry_pct=0.15,
        agency_management_pct=0.5,
        other_pct=1.2,
    )


@pytest.fixture
def default_sale(default_fee_rates):
    """300k sale of a home bought for 200k with 60k still owed."""
    return SaleInput(
        sale_price=300000,
        purchase_price=200000,
        years_held=5,
        outstanding_mortgage=60000,
        fee_rates=default_fee_rates,
    )
