"""Pure operations over the dividend ledger."""

from typing import Iterable, Optional

from divcalc.core.dates import new_entry_id
from divcalc.core.exceptions import RateUnavailableError
from divcalc.domain.models import DividendEntry, DividendLedger, ExchangeRateTable
from divcalc.services.exchange_rates import rate_at


def add_dividend(
    ledger: Iterable[DividendEntry],
    dollar_amount: float,
    payment_date: str,
    table: ExchangeRateTable,
    entry_id: Optional[str] = None,
) -> tuple[DividendLedger, DividendEntry]:
    """
    Append a dividend resolved to EUR at the payment-date rate.

    Returns the new ledger snapshot and the created entry. Raises
    RateUnavailableError when the table has no rate for payment_date; the
    input ledger is never modified.
    """
    rate = rate_at(table, payment_date)
    if rate is None:
        raise RateUnavailableError(payment_date)

    entry = DividendEntry(
        id=entry_id or new_entry_id(),
        dollar_amount=dollar_amount,
        payment_date=payment_date,
        exchange_rate=rate,
        euro_amount=dollar_amount / rate,
    )
    return tuple(ledger) + (entry,), entry


def remove_dividend(ledger: Iterable[DividendEntry], entry_id: str) -> DividendLedger:
    """Drop the entry with entry_id; an unknown id leaves the ledger as is."""
    return tuple(d for d in ledger if d.id != entry_id)


def total_usd(ledger: Iterable[DividendEntry]) -> float:
    return sum((d.dollar_amount for d in ledger), 0.0)


def total_eur(ledger: Iterable[DividendEntry]) -> float:
    return sum((d.euro_amount for d in ledger), 0.0)
