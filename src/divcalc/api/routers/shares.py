"""Share holding endpoints."""

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from divcalc.api.deps import get_csv_exporter, get_share_service
from divcalc.api.schemas import (
    HoldingResponse,
    PortfolioSummaryResponse,
    PriceUpdateRequest,
    ShareCreateRequest,
    ShareListResponse,
    TickerPriceResponse,
    YearGroupResponse,
)
from divcalc.csv import CsvExporter, export_filename
from divcalc.domain.views import HoldingView
from divcalc.services import ShareService

router = APIRouter(prefix="/shares", tags=["shares"])


def _holding_to_response(view: HoldingView) -> HoldingResponse:
    entry = view.entry
    return HoldingResponse(
        id=entry.id,
        ticker=entry.ticker,
        shares_held=entry.shares_held,
        purchase_price=entry.purchase_price,
        purchase_date=entry.purchase_date,
        current_price=view.current_price,
        purchase_price_eur=view.purchase_price_eur,
        profit_per_share=view.profit_per_share,
        total_profit=view.total_profit,
        percentage_gain=view.percentage_gain,
    )


@router.get("", response_model=ShareListResponse)
def list_shares(
    service: ShareService = Depends(get_share_service),
) -> ShareListResponse:
    """List lots with derived metrics, grouped by purchase year, plus portfolio totals."""
    holdings = {v.entry.id: _holding_to_response(v) for v in service.holding_views()}
    summary = service.portfolio_summary()
    return ShareListResponse(
        holdings=list(holdings.values()),
        by_year=[
            YearGroupResponse(
                year=group.year,
                holdings=[holdings[entry.id] for entry in group.entries],
            )
            for group in service.grouped_by_year()
        ],
        summary=PortfolioSummaryResponse(
            total_investment=summary.total_investment,
            current_value=summary.current_value,
            total_profit=summary.total_profit,
            total_profit_percentage=summary.total_profit_percentage,
        ),
        ticker_prices=service.get_ticker_prices(),
        count=len(holdings),
    )


@router.post("", response_model=HoldingResponse, status_code=201)
def add_share(
    data: ShareCreateRequest,
    service: ShareService = Depends(get_share_service),
) -> HoldingResponse:
    """Record a purchase lot; the ticker's current price is overwritten for all lots."""
    entry = service.add_share(
        ticker=data.ticker,
        shares_held=data.shares_held,
        purchase_price=data.purchase_price,
        current_price=data.current_price,
        purchase_date=data.purchase_date,
    )
    view = next(v for v in service.holding_views() if v.entry.id == entry.id)
    return _holding_to_response(view)


@router.get("/export")
def export_shares(
    exporter: CsvExporter = Depends(get_csv_exporter),
) -> Response:
    """Download the holdings as CSV."""
    return Response(
        content=exporter.shares_csv(),
        media_type="text/csv",
        headers={
            "Content-Disposition": f'attachment; filename="{export_filename("shares")}"',
        },
    )


@router.get("/prices/{ticker}", response_model=TickerPriceResponse)
def get_current_price(
    ticker: str,
    service: ShareService = Depends(get_share_service),
) -> TickerPriceResponse:
    """Known current price of a ticker (prefills the entry form); 404 if never quoted."""
    price = service.get_current_price(ticker)
    return TickerPriceResponse(ticker=ticker.strip().upper(), current_price=price)


@router.put("/prices/{ticker}", response_model=TickerPriceResponse)
def update_current_price(
    ticker: str,
    data: PriceUpdateRequest,
    service: ShareService = Depends(get_share_service),
) -> TickerPriceResponse:
    """Set the current price of a ticker; every lot of it is revalued."""
    prices = service.update_current_price(ticker, data.current_price)
    symbol = ticker.strip().upper()
    return TickerPriceResponse(ticker=symbol, current_price=prices[symbol])


@router.delete("/{share_id}", status_code=204)
def delete_share(
    share_id: str,
    service: ShareService = Depends(get_share_service),
) -> Response:
    """Delete a lot; deleting an unknown id is not an error."""
    service.delete_share(share_id)
    return Response(status_code=204)
