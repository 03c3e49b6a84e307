"""
Unit tests for ShareService.

Tests cover:
- Validation of lot input
- Current price overwrite across lots of one ticker
- Price lookup for form prefill
- Derived views, grouping and summary
"""

import pytest

from divcalc.core.exceptions import NotFoundError, ValidationError
from divcalc.domain.models import StateKey
from divcalc.services import ShareService


def _add_aapl(service: ShareService, current_price=175, purchase_date="2024-01-02", **overrides):
    data = dict(
        ticker="aapl",
        shares_held=10,
        purchase_price=150,
        current_price=current_price,
        purchase_date=purchase_date,
    )
    data.update(overrides)
    return service.add_share(**data)


class TestAddShare:
    """Tests for ShareService.add_share."""

    def test_add_persists_lot_and_price(self, share_service: ShareService, state_repo):
        """
        GIVEN no holdings
        WHEN I add a lot of 'aapl'
        THEN the lot is stored upper-cased and its current price recorded
        """
        entry = _add_aapl(share_service)

        assert entry.ticker == "AAPL"
        assert state_repo.load(StateKey.SHARES.value, []) == [entry.to_dict()]
        assert state_repo.load(StateKey.TICKER_PRICES.value, {}) == {"AAPL": 175}

    def test_second_lot_overwrites_price_for_both(self, share_service: ShareService):
        _add_aapl(share_service, current_price=175)
        _add_aapl(share_service, current_price=180, purchase_date="2024-01-03")

        views = share_service.holding_views()

        assert share_service.get_ticker_prices() == {"AAPL": 180}
        assert [v.current_price for v in views] == [180, 180]

    @pytest.mark.parametrize(
        "overrides",
        [
            {"ticker": ""},
            {"ticker": "   "},
            {"shares_held": "ten"},
            {"purchase_price": ""},
            {"purchase_price": 0},
            {"purchase_price": -5},
            {"current_price": None},
            {"purchase_date": ""},
        ],
    )
    def test_invalid_input_is_rejected(self, share_service: ShareService, overrides):
        with pytest.raises(ValidationError):
            _add_aapl(share_service, **overrides)

        assert share_service.list_shares() == ()
        assert share_service.get_ticker_prices() == {}

    def test_fractional_shares(self, share_service: ShareService):
        entry = _add_aapl(share_service, shares_held="0.25")

        assert entry.shares_held == 0.25


class TestPrices:
    """Tests for price updates and lookups."""

    def test_update_current_price_revalues_lots(self, share_service: ShareService):
        _add_aapl(share_service, current_price=175)

        share_service.update_current_price("aapl", 200)

        assert share_service.holding_views()[0].total_profit == 500

    def test_update_rejects_non_numeric(self, share_service: ShareService):
        with pytest.raises(ValidationError):
            share_service.update_current_price("AAPL", "abc")

    def test_lookup_for_prefill(self, share_service: ShareService):
        _add_aapl(share_service, current_price=175)

        assert share_service.lookup_current_price("aapl") == 175
        assert share_service.lookup_current_price("MSFT") is None

    def test_get_current_price_unknown_ticker(self, share_service: ShareService):
        with pytest.raises(NotFoundError):
            share_service.get_current_price("MSFT")

    def test_price_survives_lot_deletion(self, share_service: ShareService):
        entry = _add_aapl(share_service)

        share_service.delete_share(entry.id)

        assert share_service.list_shares() == ()
        assert share_service.get_ticker_prices() == {"AAPL": 175}


class TestReporting:
    """Tests for summary and grouping."""

    def test_summary_and_groups(self, share_service: ShareService):
        _add_aapl(share_service, purchase_date="2024-01-02")
        _add_aapl(share_service, purchase_date="2023-03-15")

        summary = share_service.portfolio_summary()
        groups = share_service.grouped_by_year()

        assert summary.total_investment == 3000
        assert summary.current_value == 3500
        assert summary.total_profit == 500
        assert [g.year for g in groups] == [2023, 2024]

    def test_eur_purchase_price_uses_purchase_date(self, share_service: ShareService):
        _add_aapl(share_service, purchase_price=110, purchase_date="2024-01-02")
        _add_aapl(share_service, purchase_date="2024-01-05")

        views = share_service.holding_views()

        assert views[0].purchase_price_eur == pytest.approx(100)
        assert views[1].purchase_price_eur is None
