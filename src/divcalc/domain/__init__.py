"""Domain layer - pure business models with no external dependencies."""

from divcalc.domain.models import (
    DividendEntry,
    DividendLedger,
    ShareEntry,
    ShareLedger,
    TickerPriceMap,
    ExchangeRateTable,
    DateRange,
    StateKey,
    UiFlag,
)

__all__ = [
    "DividendEntry",
    "DividendLedger",
    "ShareEntry",
    "ShareLedger",
    "TickerPriceMap",
    "ExchangeRateTable",
    "DateRange",
    "StateKey",
    "UiFlag",
]
