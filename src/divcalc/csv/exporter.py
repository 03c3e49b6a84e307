"""CSV export functionality."""

import csv
import io
from decimal import Decimal, ROUND_HALF_UP
from pathlib import Path
from typing import Iterable, Optional

from divcalc.config.settings import get_settings
from divcalc.core.dates import today_iso
from divcalc.core.numbers import format_plain
from divcalc.domain.models import (
    DividendEntry,
    ExchangeRateTable,
    ShareEntry,
    TickerPriceMap,
)
from divcalc.services.dividend_ledger import total_eur, total_usd
from divcalc.services.dividend_service import DividendService
from divcalc.services.exchange_rates import ExchangeRateService
from divcalc.services.portfolio_engine import holding_views, portfolio_summary
from divcalc.services.share_service import ShareService


DIVIDEND_COLUMNS = ["Payment Date", "USD Amount", "Exchange Rate", "EUR Amount"]

SHARE_COLUMNS = [
    "Ticker",
    "Shares Held",
    "Purchase Price (USD)",
    "Purchase Price (EUR)",
    "Current Price",
    "Purchase Date",
    "Profit per Share",
    "Total Profit",
    "Gain %",
]

NOT_AVAILABLE = "N/A"


def _fixed(value: float, places: int) -> str:
    """Fixed-point text with exact ties rounded away from zero (10.125 -> "10.13")."""
    quantum = Decimal(1).scaleb(-places)
    return str(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def _money(value: float) -> str:
    return _fixed(value, 2)


def _rate(value: float) -> str:
    return _fixed(value, 4)


def _render(rows: list[list[str]]) -> str:
    """Join rows with newlines; the last line has no terminator."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerows(rows)
    return buffer.getvalue().removesuffix("\n")


def dividends_to_csv(dividends: Iterable[DividendEntry]) -> str:
    """
    Render the dividend ledger as CSV.

    One row per entry (currency to 2 decimals, rate to 4), a blank line, then
    a Total row with the USD and EUR sums.
    """
    dividends = list(dividends)
    rows = [DIVIDEND_COLUMNS]
    for d in dividends:
        rows.append([
            d.payment_date,
            _money(d.dollar_amount),
            _rate(d.exchange_rate),
            _money(d.euro_amount),
        ])
    rows.append([])
    rows.append(["Total", _money(total_usd(dividends)), "", _money(total_eur(dividends))])
    return _render(rows)


def shares_to_csv(
    shares: Iterable[ShareEntry],
    price_map: TickerPriceMap,
    table: ExchangeRateTable,
) -> str:
    """
    Render share lots as CSV.

    The EUR purchase price is N/A when no rate exists for the purchase date.
    After a blank line come total investment, current value and total profit.
    """
    shares = list(shares)
    rows = [SHARE_COLUMNS]
    for view in holding_views(shares, price_map, table):
        entry = view.entry
        rows.append([
            entry.ticker,
            format_plain(entry.shares_held),
            _money(entry.purchase_price),
            _money(view.purchase_price_eur) if view.purchase_price_eur is not None else NOT_AVAILABLE,
            _money(view.current_price),
            entry.purchase_date,
            _money(view.profit_per_share),
            _money(view.total_profit),
            _money(view.percentage_gain) if view.percentage_gain is not None else NOT_AVAILABLE,
        ])

    summary = portfolio_summary(shares, price_map)
    rows.append([])
    rows.append(["Total Investment", f"${_money(summary.total_investment)}"])
    rows.append(["Current Value", f"${_money(summary.current_value)}"])
    rows.append([
        "Total Profit",
        f"${_money(summary.total_profit)}",
        f"{_money(summary.total_profit_percentage)}%",
    ])
    return _render(rows)


def export_filename(prefix: str) -> str:
    """Return e.g. dividends-2024-06-15.csv for today's UTC date."""
    return f"{prefix}-{today_iso()}.csv"


class CsvExporter:
    """
    CSV exporter for the dividend and share ledgers.

    Renders the current ledger snapshots; files land in export_dir with a
    dated filename unless an explicit path is given.
    """

    def __init__(
        self,
        dividend_service: DividendService,
        share_service: ShareService,
        rate_service: ExchangeRateService,
        export_dir: Optional[Path] = None,
    ):
        self._dividends = dividend_service
        self._shares = share_service
        self._rates = rate_service
        self._export_dir = export_dir

    def dividends_csv(self) -> str:
        return dividends_to_csv(self._dividends.list_dividends())

    def shares_csv(self) -> str:
        return shares_to_csv(
            self._shares.list_shares(),
            self._shares.get_ticker_prices(),
            self._rates.table,
        )

    def export_dividends(self, path: Optional[str] = None) -> Path:
        """Write the dividend export and return its path."""
        return self._write(self.dividends_csv(), path, "dividends")

    def export_shares(self, path: Optional[str] = None) -> Path:
        """Write the share export and return its path."""
        return self._write(self.shares_csv(), path, "shares")

    def _write(self, content: str, path: Optional[str], prefix: str) -> Path:
        if path:
            file_path = Path(path)
        else:
            export_dir = self._export_dir or get_settings().get_export_dir()
            file_path = export_dir / export_filename(prefix)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        with open(file_path, "w", newline="", encoding="utf-8") as csvfile:
            csvfile.write(content)
        return file_path
