"""Portfolio aggregation over share lots.

Totals are always recomputed from the full ledger; nothing is cached.
"""

from collections import defaultdict
from typing import Iterable

from divcalc.core.dates import year_of
from divcalc.domain.models import ExchangeRateTable, ShareEntry, TickerPriceMap
from divcalc.domain.views import HoldingView, PortfolioProfit, PortfolioSummary, YearGroup
from divcalc.services.share_ledger import (
    current_price_of,
    percentage_gain,
    profit_per_share,
    purchase_price_eur,
    total_profit,
)


def total_investment(shares: Iterable[ShareEntry]) -> float:
    return sum((s.purchase_price * s.shares_held for s in shares), 0.0)


def current_value(shares: Iterable[ShareEntry], price_map: TickerPriceMap) -> float:
    return sum(
        (current_price_of(price_map, s.ticker) * s.shares_held for s in shares),
        0.0,
    )


def portfolio_profit(
    shares: Iterable[ShareEntry],
    price_map: TickerPriceMap,
) -> PortfolioProfit:
    """
    Profit of the whole portfolio at current prices.

    Unlike percentage_gain for a single lot, the percentage here is guarded:
    it is 0 when the total investment is not positive.
    """
    shares = list(shares)
    invested = total_investment(shares)
    profit = current_value(shares, price_map) - invested
    percentage = (profit / invested) * 100 if invested > 0 else 0.0
    return PortfolioProfit(total_profit=profit, total_profit_percentage=percentage)


def portfolio_summary(
    shares: Iterable[ShareEntry],
    price_map: TickerPriceMap,
) -> PortfolioSummary:
    shares = list(shares)
    profit = portfolio_profit(shares, price_map)
    return PortfolioSummary(
        total_investment=total_investment(shares),
        current_value=current_value(shares, price_map),
        total_profit=profit.total_profit,
        total_profit_percentage=profit.total_profit_percentage,
    )


def group_by_year(shares: Iterable[ShareEntry]) -> list[YearGroup]:
    """
    Partition lots by purchase year.

    Groups are ordered by year ascending; lots inside a group by purchase date
    ascending, keeping insertion order for lots bought on the same day.
    """
    by_year: dict[int, list[ShareEntry]] = defaultdict(list)
    for share in shares:
        by_year[year_of(share.purchase_date)].append(share)

    return [
        YearGroup(
            year=year,
            entries=sorted(by_year[year], key=lambda s: s.purchase_date),
        )
        for year in sorted(by_year)
    ]


def holding_view(
    entry: ShareEntry,
    price_map: TickerPriceMap,
    table: ExchangeRateTable,
) -> HoldingView:
    """Derive the per-lot metrics shown in the holdings table."""
    price = current_price_of(price_map, entry.ticker)
    gain = percentage_gain(entry, price) if entry.purchase_price else None
    return HoldingView(
        entry=entry,
        current_price=price,
        purchase_price_eur=purchase_price_eur(entry, table),
        profit_per_share=profit_per_share(entry, price),
        total_profit=total_profit(entry, price),
        percentage_gain=gain,
    )


def holding_views(
    shares: Iterable[ShareEntry],
    price_map: TickerPriceMap,
    table: ExchangeRateTable,
) -> list[HoldingView]:
    return [holding_view(s, price_map, table) for s in shares]
