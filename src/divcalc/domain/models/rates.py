"""Exchange-rate table types."""

from dataclasses import dataclass
from typing import Mapping

# ISO date (YYYY-MM-DD) -> USD value of 1 EUR. Trading days only.
ExchangeRateTable = Mapping[str, float]


@dataclass(frozen=True)
class DateRange:
    """First and last date covered by a rate table."""

    min: str
    max: str
