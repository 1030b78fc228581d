"""
Tests for the in-memory portfolio service.
"""

import pytest

from saleinvest.calculations.investment import calculate_metrics, calculate_summary
from saleinvest.calculations.sale import calculate_sale
from saleinvest.services.portfolio import Portfolio, PropertyNotFoundError


class TestPropertyCollection:
    """Insert, edit and remove properties."""

    def test_new_portfolio_is_empty(self, portfolio):
        assert portfolio.properties == []
        assert portfolio.available_capital == 0
        assert portfolio.sale_proceeds == 0

    def test_add_uses_configured_defaults(self, portfolio):
        prop = portfolio.add_property()

        assert prop.id == 1
        assert prop.purchase_price == 150000
        assert prop.down_payment_pct == 20
        assert prop.mortgage_term_years == 25
        assert prop.annual_interest_rate_pct == 3.5
        assert prop.purchase_fees_pct == 12
        assert prop.renovation_cost == 0
        assert prop.num_rooms == 3
        assert prop.rent_per_room == 400
        assert prop.monthly_expenses == 150
        assert prop.vacancy_pct == 8

    def test_add_with_overrides(self, portfolio):
        prop = portfolio.add_property(purchase_price=99000, num_rooms=5)
        assert prop.purchase_price == 99000
        assert prop.num_rooms == 5
        assert prop.vacancy_pct == 8

    def test_ids_are_unique_and_increasing(self, portfolio):
        ids = [portfolio.add_property().id for _ in range(4)]
        assert ids == [1, 2, 3, 4]

    def test_ids_not_reused_after_removal(self, portfolio):
        portfolio.add_property()
        second = portfolio.add_property()
        portfolio.remove_property(second.id)
        assert portfolio.add_property().id == 3

    def test_insert_at_end(self, portfolio):
        first = portfolio.add_property()
        second = portfolio.add_property()
        assert [p.id for p in portfolio.properties] == [first.id, second.id]

    def test_update_in_place(self, portfolio):
        prop = portfolio.add_property()
        updated = portfolio.update_property(prop.id, rent_per_room=450, vacancy_pct=5)

        assert updated is prop
        assert portfolio.get_property(prop.id).rent_per_room == 450
        assert portfolio.get_property(prop.id).vacancy_pct == 5

    def test_update_changes_metrics(self, portfolio):
        prop = portfolio.add_property()
        before = portfolio.metrics(prop.id).monthly_cash_flow
        portfolio.update_property(prop.id, rent_per_room=500)
        after = portfolio.metrics(prop.id).monthly_cash_flow
        assert after == pytest.approx(before + 3 * 100 * 0.92)

    def test_update_unknown_field(self, portfolio):
        prop = portfolio.add_property()
        with pytest.raises(ValueError):
            portfolio.update_property(prop.id, bedrooms=2)

    def test_update_id_rejected(self, portfolio):
        prop = portfolio.add_property()
        with pytest.raises(ValueError):
            portfolio.update_property(prop.id, id=42)
        assert prop.id == 1

    def test_rejected_update_leaves_property_untouched(self, portfolio):
        prop = portfolio.add_property()
        with pytest.raises(ValueError):
            portfolio.update_property(prop.id, rent_per_room=999, colour="blue")
        assert prop.rent_per_room == 400

    def test_add_unknown_field(self, portfolio):
        with pytest.raises(ValueError):
            portfolio.add_property(garage=True)
        assert portfolio.properties == []

    def test_remove(self, portfolio):
        a = portfolio.add_property()
        b = portfolio.add_property()
        c = portfolio.add_property()

        removed = portfolio.remove_property(b.id)

        assert removed is b
        assert [p.id for p in portfolio.properties] == [a.id, c.id]

    def test_missing_id(self, portfolio):
        with pytest.raises(PropertyNotFoundError):
            portfolio.get_property(7)
        with pytest.raises(PropertyNotFoundError):
            portfolio.update_property(7, num_rooms=1)
        with pytest.raises(PropertyNotFoundError):
            portfolio.remove_property(7)

    def test_not_found_is_a_key_error(self, portfolio):
        with pytest.raises(KeyError):
            portfolio.get_property(7)
        assert str(PropertyNotFoundError(7)) == "Property 7 not found"


class TestCapital:
    """Sale proceeds feeding the portfolio."""

    def test_apply_sale(self, portfolio, default_sale):
        result = calculate_sale(default_sale)
        portfolio.apply_sale(result)

        assert portfolio.sale_proceeds == pytest.approx(192670)
        assert portfolio.available_capital == pytest.approx(192670)

    def test_resale_replaces_capital(self, portfolio, default_sale):
        portfolio.apply_sale(calculate_sale(default_sale))
        portfolio.set_available_capital(10)

        default_sale.sale_price = 310000
        portfolio.apply_sale(calculate_sale(default_sale))

        assert portfolio.available_capital == portfolio.sale_proceeds
        assert portfolio.available_capital > 192670

    def test_manual_capital_keeps_recorded_proceeds(self, portfolio, default_sale):
        portfolio.apply_sale(calculate_sale(default_sale))
        portfolio.set_available_capital(250000)

        assert portfolio.available_capital == 250000
        assert portfolio.sale_proceeds == pytest.approx(192670)


class TestSummary:
    """Portfolio summary recomputed from current inputs."""

    def test_empty(self, portfolio):
        summary = portfolio.summary()
        assert summary.capital_used == 0
        assert summary.total_monthly_cash_flow == 0
        assert summary.average_roi == 0
        assert summary.average_net_yield == 0

    def test_matches_engine(self, portfolio):
        portfolio.add_property()
        portfolio.add_property(purchase_price=120000)
        portfolio.set_available_capital(100000)

        assert portfolio.summary() == calculate_summary(portfolio.properties, 100000)

    def test_remaining_capital(self, portfolio):
        portfolio.set_available_capital(100000)
        portfolio.add_property()
        assert portfolio.summary().remaining_capital == pytest.approx(52000)

    def test_removal_matches_exclusion(self, portfolio):
        portfolio.add_property()
        doomed = portfolio.add_property(purchase_price=220000, num_rooms=5)
        portfolio.add_property(vacancy_pct=15)

        full = portfolio.summary()
        doomed_metrics = calculate_metrics(doomed)
        portfolio.remove_property(doomed.id)
        after = portfolio.summary()

        assert after.property_count == 2
        assert after.capital_used == pytest.approx(
            full.capital_used - doomed_metrics.initial_investment
        )
        assert after.total_monthly_cash_flow == pytest.approx(
            full.total_monthly_cash_flow - doomed_metrics.monthly_cash_flow
        )

    def test_summary_is_not_cached(self, portfolio):
        prop = portfolio.add_property()
        first = portfolio.summary()
        portfolio.update_property(prop.id, renovation_cost=20000)
        assert portfolio.summary().capital_used == pytest.approx(first.capital_used + 20000)

    def test_separate_portfolios_do_not_share_state(self, settings):
        one = Portfolio(settings)
        two = Portfolio(settings)
        one.add_property()
        assert two.properties == []
        assert two.add_property().id == 1
