"""Dividend service: validated entry, persistence and totals."""

import logging
import threading
from typing import Union

from divcalc.core.dates import parse_iso_date
from divcalc.core.numbers import parse_number
from divcalc.domain.models import DividendEntry, DividendLedger, StateKey
from divcalc.domain.views import DividendLedgerView, DividendTotals
from divcalc.repositories.protocols import StateRepository
from divcalc.services import dividend_ledger
from divcalc.services.exchange_rates import ExchangeRateService

logger = logging.getLogger(__name__)

# Serializes load -> modify -> save of the ledger across request threads
_ledger_lock = threading.Lock()


class DividendService:
    """
    Service for the dividend ledger.

    Loads the ledger snapshot from the state repository, applies the pure
    ledger operations and saves the resulting snapshot.
    """

    def __init__(
        self,
        state_repo: StateRepository,
        rate_service: ExchangeRateService,
    ):
        self._state_repo = state_repo
        self._rates = rate_service

    def list_dividends(self) -> DividendLedger:
        """Return all dividends in insertion order."""
        raw = self._state_repo.load(StateKey.DIVIDENDS.value, [])
        return tuple(DividendEntry.from_dict(d) for d in raw)

    def add_dividend(
        self,
        dollar_amount: Union[float, str],
        payment_date: str,
    ) -> DividendEntry:
        """
        Record a dividend paid in USD on payment_date.

        Raises ValidationError for a missing or non-numeric amount or date and
        RateUnavailableError when no rate exists for the date. Nothing is
        saved in either case.
        """
        amount = parse_number(dollar_amount, "Amount (USD)")
        date = parse_iso_date(payment_date).isoformat()

        with _ledger_lock:
            updated, entry = dividend_ledger.add_dividend(
                self.list_dividends(), amount, date, self._rates.table
            )
            self._save(updated)
        logger.info(
            "Added dividend %s: %.2f USD on %s at %.4f = %.2f EUR",
            entry.id, entry.dollar_amount, entry.payment_date,
            entry.exchange_rate, entry.euro_amount,
        )
        return entry

    def delete_dividend(self, entry_id: str) -> None:
        """Delete a dividend; unknown ids are ignored."""
        with _ledger_lock:
            ledger = self.list_dividends()
            updated = dividend_ledger.remove_dividend(ledger, entry_id)
            if len(updated) == len(ledger):
                return
            self._save(updated)
        logger.info("Deleted dividend %s", entry_id)

    def get_totals(self) -> DividendTotals:
        ledger = self.list_dividends()
        return DividendTotals(
            total_usd=dividend_ledger.total_usd(ledger),
            total_eur=dividend_ledger.total_eur(ledger),
        )

    def get_ledger_view(self) -> DividendLedgerView:
        ledger = self.list_dividends()
        return DividendLedgerView(
            entries=list(ledger),
            totals=DividendTotals(
                total_usd=dividend_ledger.total_usd(ledger),
                total_eur=dividend_ledger.total_eur(ledger),
            ),
        )

    def _save(self, ledger: DividendLedger) -> None:
        self._state_repo.save(StateKey.DIVIDENDS.value, [d.to_dict() for d in ledger])
