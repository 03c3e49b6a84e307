#!/usr/bin/env python3
"""
Fetch daily USD/EUR reference rates from the ECB and write the static rate file.
Usage: from project root:
  python scripts/fetch_exchange_rates.py
  python scripts/fetch_exchange_rates.py --output public/exchange-rates.json
"""
import argparse
import logging
import sys
from pathlib import Path

from divcalc.config.logging_config import setup_logging
from divcalc.config.settings import get_settings
from divcalc.core.exceptions import ResourceLoadError
from divcalc.providers import EcbRateProvider, write_rates_file

logger = logging.getLogger("fetch_exchange_rates")


def main(argv=None) -> int:
    settings = get_settings()
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Output JSON path (default: exchange rate path from settings)",
    )
    parser.add_argument("--url", default=settings.ecb_rates_url, help="ECB data API series URL")
    args = parser.parse_args(argv)

    setup_logging()
    output = args.output or settings.get_exchange_rates_path()
    provider = EcbRateProvider(url=args.url, timeout_seconds=settings.http_timeout_seconds)
    try:
        rates = provider.fetch_rates()
    except ResourceLoadError as e:
        logger.error("Error fetching exchange rates: %s", e.message)
        return 1

    write_rates_file(rates, output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
