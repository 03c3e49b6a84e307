"""Domain models package."""

from divcalc.domain.models.enums import StateKey, UiFlag
from divcalc.domain.models.dividend import DividendEntry, DividendLedger
from divcalc.domain.models.share import ShareEntry, ShareLedger, TickerPriceMap
from divcalc.domain.models.rates import ExchangeRateTable, DateRange

__all__ = [
    "StateKey",
    "UiFlag",
    "DividendEntry",
    "DividendLedger",
    "ShareEntry",
    "ShareLedger",
    "TickerPriceMap",
    "ExchangeRateTable",
    "DateRange",
]
