"""Dividend entry domain model."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class DividendEntry:
    """
    One USD dividend payment, resolved to EUR when it was recorded.

    exchange_rate is the snapshot of the rate in effect on payment_date and
    euro_amount = dollar_amount / exchange_rate, computed once at creation.
    Entries are never edited; they are only removed from the ledger.
    """

    id: str
    dollar_amount: float
    payment_date: str
    exchange_rate: float
    euro_amount: float

    def to_dict(self) -> dict[str, Any]:
        """Serialize with the persisted (camelCase) field names."""
        return {
            "id": self.id,
            "dollarAmount": self.dollar_amount,
            "euroAmount": self.euro_amount,
            "paymentDate": self.payment_date,
            "exchangeRate": self.exchange_rate,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "DividendEntry":
        return cls(
            id=str(data["id"]),
            dollar_amount=float(data["dollarAmount"]),
            payment_date=data["paymentDate"],
            exchange_rate=float(data["exchangeRate"]),
            euro_amount=float(data["euroAmount"]),
        )


# Ordered, immutable snapshot of dividend entries (insertion order).
DividendLedger = tuple[DividendEntry, ...]
