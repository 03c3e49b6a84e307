"""View models for ledger and portfolio outputs."""

from dataclasses import dataclass, field
from typing import Optional

from divcalc.domain.models import DividendEntry, ShareEntry


@dataclass
class DividendTotals:
    """Sums over the whole dividend ledger."""

    total_usd: float = 0.0
    total_eur: float = 0.0


@dataclass
class PortfolioProfit:
    """Portfolio-level profit; percentage is 0 when nothing was invested."""

    total_profit: float
    total_profit_percentage: float


@dataclass
class HoldingView:
    """A share lot with its derived metrics at the current ticker price."""

    entry: ShareEntry
    current_price: float
    purchase_price_eur: Optional[float]
    profit_per_share: float
    total_profit: float
    percentage_gain: Optional[float]


@dataclass
class YearGroup:
    """Share lots bought in one calendar year, oldest first."""

    year: int
    entries: list[ShareEntry] = field(default_factory=list)


@dataclass
class PortfolioSummary:
    """Totals shown under the holdings table."""

    total_investment: float
    current_value: float
    total_profit: float
    total_profit_percentage: float


@dataclass
class DividendLedgerView:
    """Dividend entries in insertion order plus their totals."""

    entries: list[DividendEntry]
    totals: DividendTotals
