"""ECB reference-rate provider for the static exchange-rate resource."""

import csv
import io
import json
import logging
import math
from pathlib import Path
from typing import Mapping, Optional

import requests

from divcalc.config.settings import ECB_USD_EUR_URL
from divcalc.core.exceptions import ResourceLoadError

logger = logging.getLogger(__name__)

DATE_COLUMN = "TIME_PERIOD"
VALUE_COLUMN = "OBS_VALUE"


class EcbRateProvider:
    """
    Fetches the daily USD/EUR reference rates published by the ECB.

    Rates are USD per 1 EUR keyed by YYYY-MM-DD. Days without an
    observation (weekends, TARGET holidays) are absent.
    """

    def __init__(
        self,
        url: str = ECB_USD_EUR_URL,
        timeout_seconds: float = 30.0,
        session: Optional[requests.Session] = None,
    ):
        self._url = url
        self._timeout = timeout_seconds
        self._session = session or requests.Session()

    def fetch_rates(self) -> dict[str, float]:
        """Download the full series; raises ResourceLoadError on HTTP or parse failure."""
        logger.info("Fetching exchange rates from %s", self._url)
        try:
            response = self._session.get(
                self._url,
                params={"format": "csvdata"},
                timeout=self._timeout,
            )
            response.raise_for_status()
        except requests.RequestException as e:
            raise ResourceLoadError(f"Error fetching exchange rates: {e}")

        rates = parse_csv_rates(response.text)
        logger.info("Fetched %d exchange rates", len(rates))
        return rates


def parse_csv_rates(text: str) -> dict[str, float]:
    """
    Flatten an ECB SDMX-CSV payload into date -> rate.

    Observations with an empty, non-finite or non-positive value are skipped.
    """
    reader = csv.DictReader(io.StringIO(text))
    fieldnames = reader.fieldnames or []
    if DATE_COLUMN not in fieldnames or VALUE_COLUMN not in fieldnames:
        raise ResourceLoadError(
            f"Unexpected ECB response: missing {DATE_COLUMN}/{VALUE_COLUMN} columns"
        )

    rates: dict[str, float] = {}
    for row in reader:
        date = (row.get(DATE_COLUMN) or "").strip()
        value = (row.get(VALUE_COLUMN) or "").strip()
        if not date or not value:
            continue
        try:
            rate = float(value)
        except ValueError:
            logger.warning("Skipping unparseable rate for %s: %r", date, value)
            continue
        if not math.isfinite(rate) or rate <= 0:
            logger.warning("Skipping invalid rate for %s: %r", date, value)
            continue
        rates[date] = rate

    if not rates:
        raise ResourceLoadError("ECB response contained no observations")
    return rates


def write_rates_file(rates: Mapping[str, float], path: Path) -> Path:
    """Write rates as a JSON object sorted by date."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(dict(sorted(rates.items())), f, indent=2)
    logger.info("Exchange rates saved to %s", path)
    return path
