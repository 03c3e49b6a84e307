"""Share purchase lot domain model."""

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class ShareEntry:
    """
    One share purchase lot.

    - ticker is stored upper-cased; several lots may share a ticker
    - shares_held may be fractional
    - purchase_price is USD per share at purchase
    - the current market price is NOT stored here; see TickerPriceMap
    """

    id: str
    ticker: str
    shares_held: float
    purchase_price: float
    purchase_date: str

    def to_dict(self) -> dict[str, Any]:
        """Serialize with the persisted (camelCase) field names."""
        return {
            "id": self.id,
            "ticker": self.ticker,
            "sharesHeld": self.shares_held,
            "purchasePrice": self.purchase_price,
            "purchaseDate": self.purchase_date,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ShareEntry":
        return cls(
            id=str(data["id"]),
            ticker=str(data["ticker"]).upper(),
            shares_held=float(data["sharesHeld"]),
            purchase_price=float(data["purchasePrice"]),
            purchase_date=data["purchaseDate"],
        )


# Ordered, immutable snapshot of share lots (insertion order).
ShareLedger = tuple[ShareEntry, ...]

# Ticker -> current USD price, shared by every lot of that ticker.
TickerPriceMap = Mapping[str, float]
