"""Exchange-rate providers module."""

from divcalc.providers.ecb_provider import EcbRateProvider, parse_csv_rates, write_rates_file

__all__ = [
    "EcbRateProvider",
    "parse_csv_rates",
    "write_rates_file",
]
