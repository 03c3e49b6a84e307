"""View models for service outputs."""

from divcalc.domain.views.portfolio import (
    DividendTotals,
    DividendLedgerView,
    PortfolioProfit,
    PortfolioSummary,
    HoldingView,
    YearGroup,
)

__all__ = [
    "DividendTotals",
    "DividendLedgerView",
    "PortfolioProfit",
    "PortfolioSummary",
    "HoldingView",
    "YearGroup",
]
