"""CSV export utilities."""

from divcalc.csv.exporter import (
    CsvExporter,
    dividends_to_csv,
    shares_to_csv,
    export_filename,
)

__all__ = [
    "CsvExporter",
    "dividends_to_csv",
    "shares_to_csv",
    "export_filename",
]
