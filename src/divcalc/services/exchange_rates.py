"""Exchange-rate resolver and the one-shot loader for the rate resource."""

import json
import logging
import math
from pathlib import Path
from types import MappingProxyType
from typing import Optional

from divcalc.core.exceptions import ResourceLoadError
from divcalc.domain.models import DateRange, ExchangeRateTable

logger = logging.getLogger(__name__)

EMPTY_TABLE: ExchangeRateTable = MappingProxyType({})


def rate_at(table: ExchangeRateTable, date: str) -> Optional[float]:
    """Exact-key lookup. Weekends, holidays and dates outside the table give None."""
    return table.get(date)


def date_range(table: ExchangeRateTable) -> Optional[DateRange]:
    """Return the first and last date of the table, or None when it is empty."""
    if not table:
        return None
    dates = sorted(table)
    return DateRange(min=dates[0], max=dates[-1])


def read_rates_file(path: Path) -> ExchangeRateTable:
    """
    Read the date -> rate JSON resource.

    Non-numeric, non-finite and non-positive values are dropped. Raises ResourceLoadError
    when the file is missing or is not a JSON object.
    """
    try:
        with open(path, encoding="utf-8") as f:
            raw = json.load(f)
    except FileNotFoundError:
        raise ResourceLoadError(f"Exchange rate file not found: {path}")
    except (OSError, json.JSONDecodeError) as e:
        raise ResourceLoadError(f"Error reading exchange rates from {path}: {e}")

    if not isinstance(raw, dict):
        raise ResourceLoadError(f"Exchange rate file {path} must contain a JSON object")

    rates: dict[str, float] = {}
    for date, value in raw.items():
        if (
            isinstance(value, bool)
            or not isinstance(value, (int, float))
            or not math.isfinite(value)
            or value <= 0
        ):
            logger.warning("Skipping invalid exchange rate for %s: %r", date, value)
            continue
        rates[str(date)] = float(value)
    return MappingProxyType(rates)


def load_exchange_rates(path: Path) -> ExchangeRateTable:
    """
    Load the rate table, degrading to an empty table on failure.

    With an empty table every lookup reports the rate as unavailable.
    """
    try:
        table = read_rates_file(path)
    except ResourceLoadError as e:
        logger.error("Failed to load exchange rates: %s", e.message)
        logger.warning("Continuing with an empty exchange rate table")
        return EMPTY_TABLE
    logger.info("Loaded %d exchange rates from %s", len(table), path)
    return table


class ExchangeRateService:
    """
    Holds the exchange-rate table for the lifetime of the process.

    load() is the single initialization step; the table never changes after it.
    """

    def __init__(
        self,
        rates_path: Optional[Path] = None,
        table: Optional[ExchangeRateTable] = None,
    ):
        self._rates_path = rates_path
        self._table: ExchangeRateTable = (
            MappingProxyType(dict(table)) if table is not None else EMPTY_TABLE
        )
        self._loaded = table is not None

    def load(self) -> ExchangeRateTable:
        """Load the table from disk once; later calls return the loaded table."""
        if not self._loaded:
            if self._rates_path is not None:
                self._table = load_exchange_rates(self._rates_path)
            self._loaded = True
        return self._table

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    @property
    def table(self) -> ExchangeRateTable:
        return self._table

    def rate_at(self, date: str) -> Optional[float]:
        return rate_at(self._table, date)

    def date_range(self) -> Optional[DateRange]:
        return date_range(self._table)
