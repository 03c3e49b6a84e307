"""Share service: purchase lots, current prices and portfolio reporting."""

import logging
import threading
from typing import Optional, Union

from divcalc.core.dates import parse_iso_date
from divcalc.core.exceptions import NotFoundError, ValidationError
from divcalc.core.numbers import parse_number
from divcalc.domain.models import ShareEntry, ShareLedger, StateKey
from divcalc.domain.views import HoldingView, PortfolioSummary, YearGroup
from divcalc.repositories.protocols import StateRepository
from divcalc.services import portfolio_engine, share_ledger
from divcalc.services.exchange_rates import ExchangeRateService

logger = logging.getLogger(__name__)

# Serializes load -> modify -> save of lots and prices across request threads
_ledger_lock = threading.Lock()

Numeric = Union[float, str]


class ShareService:
    """
    Service for share lots and the shared ticker price map.

    Lots and prices are persisted under separate keys; every derived number
    is recomputed from the full ledger on read.
    """

    def __init__(
        self,
        state_repo: StateRepository,
        rate_service: ExchangeRateService,
    ):
        self._state_repo = state_repo
        self._rates = rate_service

    def list_shares(self) -> ShareLedger:
        """Return all lots in insertion order."""
        raw = self._state_repo.load(StateKey.SHARES.value, [])
        return tuple(ShareEntry.from_dict(s) for s in raw)

    def get_ticker_prices(self) -> dict[str, float]:
        raw = self._state_repo.load(StateKey.TICKER_PRICES.value, {})
        return {str(k).upper(): float(v) for k, v in raw.items()}

    def add_share(
        self,
        ticker: str,
        shares_held: Numeric,
        purchase_price: Numeric,
        current_price: Numeric,
        purchase_date: str,
    ) -> ShareEntry:
        """
        Record a purchase lot.

        Also overwrites the current price of the ticker for all of its lots.
        """
        symbol = share_ledger.normalize_ticker(ticker or "")
        if not symbol:
            raise ValidationError("Ticker is required")
        held = parse_number(shares_held, "Shares held")
        price = parse_number(purchase_price, "Purchase price")
        if price <= 0:
            raise ValidationError("Purchase price must be greater than 0")
        current = parse_number(current_price, "Current price")
        date = parse_iso_date(purchase_date).isoformat()

        with _ledger_lock:
            ledger, prices, entry = share_ledger.add_share(
                self.list_shares(),
                self.get_ticker_prices(),
                symbol,
                held,
                price,
                current,
                date,
            )
            # Lot and price overwrite land in one commit
            self._state_repo.save_many({
                StateKey.SHARES.value: [s.to_dict() for s in ledger],
                StateKey.TICKER_PRICES.value: prices,
            })
        logger.info(
            "Added %s lot %s: %s shares at %.2f on %s (current %.2f)",
            entry.ticker, entry.id, entry.shares_held, entry.purchase_price,
            entry.purchase_date, current,
        )
        return entry

    def delete_share(self, entry_id: str) -> None:
        """Delete a lot; unknown ids are ignored. The ticker price is kept."""
        with _ledger_lock:
            ledger = self.list_shares()
            updated = share_ledger.remove_share(ledger, entry_id)
            if len(updated) == len(ledger):
                return
            self._save_shares(updated)
        logger.info("Deleted share lot %s", entry_id)

    def update_current_price(self, ticker: str, new_price: Numeric) -> dict[str, float]:
        """Set the current price of ticker; every lot of that ticker is revalued."""
        symbol = share_ledger.normalize_ticker(ticker or "")
        if not symbol:
            raise ValidationError("Ticker is required")
        price = parse_number(new_price, "Current price")
        with _ledger_lock:
            prices = share_ledger.update_current_price(self.get_ticker_prices(), symbol, price)
            self._save_prices(prices)
        logger.info("Updated current price of %s to %.2f", symbol, price)
        return prices

    def lookup_current_price(self, ticker: str) -> Optional[float]:
        """Known current price of ticker (used to prefill the entry form), else None."""
        return self.get_ticker_prices().get(share_ledger.normalize_ticker(ticker or ""))

    def get_current_price(self, ticker: str) -> float:
        """Known current price of ticker; raises NotFoundError when never quoted."""
        price = self.lookup_current_price(ticker)
        if price is None:
            raise NotFoundError("Ticker price", share_ledger.normalize_ticker(ticker or ""))
        return price

    def holding_views(self) -> list[HoldingView]:
        return portfolio_engine.holding_views(
            self.list_shares(), self.get_ticker_prices(), self._rates.table
        )

    def portfolio_summary(self) -> PortfolioSummary:
        return portfolio_engine.portfolio_summary(self.list_shares(), self.get_ticker_prices())

    def grouped_by_year(self) -> list[YearGroup]:
        return portfolio_engine.group_by_year(self.list_shares())

    def _save_shares(self, ledger: ShareLedger) -> None:
        self._state_repo.save(StateKey.SHARES.value, [s.to_dict() for s in ledger])

    def _save_prices(self, prices: dict[str, float]) -> None:
        self._state_repo.save(StateKey.TICKER_PRICES.value, prices)
