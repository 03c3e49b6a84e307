"""Pure operations over share lots and the ticker price map."""

from typing import Iterable, Optional

from divcalc.core.dates import new_entry_id
from divcalc.domain.models import (
    ExchangeRateTable,
    ShareEntry,
    ShareLedger,
    TickerPriceMap,
)
from divcalc.services.exchange_rates import rate_at


def normalize_ticker(ticker: str) -> str:
    return ticker.strip().upper()


def add_share(
    ledger: Iterable[ShareEntry],
    price_map: TickerPriceMap,
    ticker: str,
    shares_held: float,
    purchase_price: float,
    current_price: float,
    purchase_date: str,
    entry_id: Optional[str] = None,
) -> tuple[ShareLedger, dict[str, float], ShareEntry]:
    """
    Append a purchase lot and set the ticker's current price.

    The current price is a single market fact per ticker, so adding a lot
    overwrites the price used by every existing lot of the same ticker.
    """
    symbol = normalize_ticker(ticker)
    entry = ShareEntry(
        id=entry_id or new_entry_id(),
        ticker=symbol,
        shares_held=shares_held,
        purchase_price=purchase_price,
        purchase_date=purchase_date,
    )
    updated_prices = update_current_price(price_map, symbol, current_price)
    return tuple(ledger) + (entry,), updated_prices, entry


def remove_share(ledger: Iterable[ShareEntry], entry_id: str) -> ShareLedger:
    """Drop the lot with entry_id; an unknown id leaves the ledger as is."""
    return tuple(s for s in ledger if s.id != entry_id)


def update_current_price(
    price_map: TickerPriceMap,
    ticker: str,
    new_price: float,
) -> dict[str, float]:
    """Return a copy of price_map with ticker set to new_price."""
    return {**price_map, normalize_ticker(ticker): new_price}


def current_price_of(price_map: TickerPriceMap, ticker: str) -> float:
    """Current price for ticker; an unknown ticker is valued at 0."""
    return price_map.get(normalize_ticker(ticker)) or 0.0


def profit_per_share(entry: ShareEntry, current_price: float) -> float:
    return current_price - entry.purchase_price


def total_profit(entry: ShareEntry, current_price: float) -> float:
    return profit_per_share(entry, current_price) * entry.shares_held


def percentage_gain(entry: ShareEntry, current_price: float) -> float:
    """
    Gain relative to the purchase price, in percent.

    No zero guard: a purchase price of 0 raises ZeroDivisionError, callers
    that display the value must check first.
    """
    return profit_per_share(entry, current_price) / entry.purchase_price * 100


def purchase_price_eur(entry: ShareEntry, table: ExchangeRateTable) -> Optional[float]:
    """Purchase price converted at the purchase-date rate, None when no rate exists."""
    rate = rate_at(table, entry.purchase_date)
    if not rate:
        return None
    return entry.purchase_price / rate
