"""
Unit tests for the pure dividend ledger operations.

Tests cover:
- EUR resolution at the payment-date rate
- Atomic failure when no rate exists
- Idempotent removal
- USD / EUR totals
- Persistence round-trip of entries
"""

import json

import pytest

from divcalc.core.exceptions import RateUnavailableError
from divcalc.domain.models import DividendEntry
from divcalc.services.dividend_ledger import (
    add_dividend,
    remove_dividend,
    total_eur,
    total_usd,
)


# =============================================================================
# ADD TESTS
# =============================================================================


class TestAddDividend:
    """Tests for add_dividend."""

    def test_converts_at_payment_date_rate(self):
        """
        GIVEN table {"2024-01-02": 1.10}
        WHEN I add 100 USD paid on 2024-01-02
        THEN euro_amount is 100 / 1.10 and the rate snapshot is 1.10
        """
        table = {"2024-01-02": 1.10}

        ledger, entry = add_dividend((), 100, "2024-01-02", table)

        assert entry.euro_amount == pytest.approx(90.9090909090909)
        assert entry.euro_amount == 100 / 1.10
        assert entry.exchange_rate == 1.10
        assert entry.dollar_amount == 100
        assert entry.payment_date == "2024-01-02"
        assert ledger == (entry,)

    def test_no_rounding_at_storage(self):
        ledger, entry = add_dividend((), 33.33, "2024-01-03", {"2024-01-03": 1.0919})

        assert entry.euro_amount == 33.33 / 1.0919

    def test_missing_rate_fails_and_leaves_ledger_unchanged(self):
        """
        GIVEN an empty table
        WHEN I add a dividend
        THEN RateUnavailableError is raised and no entry exists
        """
        existing = (DividendEntry("1", 10.0, "2023-01-02", 1.06, 10.0 / 1.06),)

        with pytest.raises(RateUnavailableError) as exc_info:
            add_dividend(existing, 100, "2024-01-02", {})

        assert exc_info.value.code == "RATE_UNAVAILABLE"
        assert exc_info.value.date == "2024-01-02"
        assert existing == (DividendEntry("1", 10.0, "2023-01-02", 1.06, 10.0 / 1.06),)

    def test_appends_in_insertion_order(self, rate_table):
        ledger, first = add_dividend((), 10, "2024-06-14", rate_table)
        ledger, second = add_dividend(ledger, 20, "2023-03-15", rate_table)

        assert [d.id for d in ledger] == [first.id, second.id]

    def test_input_snapshot_is_not_mutated(self, rate_table):
        original, _ = add_dividend((), 10, "2024-01-02", rate_table)

        updated, _ = add_dividend(original, 20, "2024-01-03", rate_table)

        assert len(original) == 1
        assert len(updated) == 2

    def test_generated_ids_are_unique(self, rate_table):
        ledger = ()
        for _ in range(50):
            ledger, _ = add_dividend(ledger, 1, "2024-01-02", rate_table)

        assert len({d.id for d in ledger}) == 50

    def test_explicit_id_is_used(self, rate_table):
        _, entry = add_dividend((), 1, "2024-01-02", rate_table, entry_id="abc")

        assert entry.id == "abc"


# =============================================================================
# REMOVE TESTS
# =============================================================================


class TestRemoveDividend:
    """Tests for remove_dividend."""

    def test_removes_matching_entry(self, rate_table):
        ledger, a = add_dividend((), 10, "2024-01-02", rate_table)
        ledger, b = add_dividend(ledger, 20, "2024-01-03", rate_table)

        assert remove_dividend(ledger, a.id) == (b,)

    def test_unknown_id_is_a_no_op(self, rate_table):
        """
        GIVEN a ledger with two entries
        WHEN I remove an id that does not exist
        THEN the same entries remain in the same order
        """
        ledger, _ = add_dividend((), 10, "2024-01-02", rate_table)
        ledger, _ = add_dividend(ledger, 20, "2024-01-03", rate_table)

        assert remove_dividend(ledger, "does-not-exist") == ledger


# =============================================================================
# TOTALS TESTS
# =============================================================================


class TestTotals:
    """Tests for total_usd and total_eur."""

    def test_empty_ledger_totals_are_zero(self):
        assert total_usd(()) == 0
        assert total_eur(()) == 0

    def test_totals_sum_all_entries(self, rate_table):
        ledger, a = add_dividend((), 10.5, "2024-01-02", rate_table)
        ledger, b = add_dividend(ledger, 20.25, "2024-06-14", rate_table)

        assert total_usd(ledger) == pytest.approx(30.75)
        assert total_eur(ledger) == pytest.approx(a.euro_amount + b.euro_amount)

    def test_totals_are_order_independent(self, rate_table):
        ledger, _ = add_dividend((), 1.1, "2024-01-02", rate_table)
        ledger, _ = add_dividend(ledger, 2.2, "2024-01-03", rate_table)
        ledger, _ = add_dividend(ledger, 3.3, "2024-06-14", rate_table)

        reversed_ledger = tuple(reversed(ledger))

        assert total_usd(reversed_ledger) == pytest.approx(total_usd(ledger))
        assert total_eur(reversed_ledger) == pytest.approx(total_eur(ledger))


# =============================================================================
# SERIALIZATION TESTS
# =============================================================================


class TestDividendSerialization:
    """Tests for the persisted shape of dividend entries."""

    def test_json_round_trip_preserves_entries(self, rate_table):
        """
        GIVEN a ledger snapshot
        WHEN I serialize it to JSON and back
        THEN the same entries (ids and fields) come back
        """
        ledger, _ = add_dividend((), 12.34, "2024-01-02", rate_table)
        ledger, _ = add_dividend(ledger, 0.07, "2023-11-20", rate_table)

        payload = json.dumps([d.to_dict() for d in ledger])
        restored = tuple(DividendEntry.from_dict(d) for d in json.loads(payload))

        assert restored == ledger

    def test_persisted_field_names(self):
        entry = DividendEntry("1", 100.0, "2024-01-02", 1.1, 100.0 / 1.1)

        assert set(entry.to_dict()) == {
            "id", "dollarAmount", "euroAmount", "paymentDate", "exchangeRate",
        }
