"""Dividend ledger endpoints."""

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from divcalc.api.deps import get_csv_exporter, get_dividend_service
from divcalc.api.schemas import (
    DividendCreateRequest,
    DividendListResponse,
    DividendResponse,
)
from divcalc.csv import CsvExporter, export_filename
from divcalc.services import DividendService

router = APIRouter(prefix="/dividends", tags=["dividends"])


@router.get("", response_model=DividendListResponse)
def list_dividends(
    service: DividendService = Depends(get_dividend_service),
) -> DividendListResponse:
    """List dividends in insertion order with USD and EUR totals."""
    view = service.get_ledger_view()
    return DividendListResponse(
        dividends=[DividendResponse.model_validate(d) for d in view.entries],
        count=len(view.entries),
        total_usd=view.totals.total_usd,
        total_eur=view.totals.total_eur,
    )


@router.post("", response_model=DividendResponse, status_code=201)
def add_dividend(
    data: DividendCreateRequest,
    service: DividendService = Depends(get_dividend_service),
) -> DividendResponse:
    """Record a dividend; 400 RATE_UNAVAILABLE when the date has no ECB rate."""
    entry = service.add_dividend(data.dollar_amount, data.payment_date)
    return DividendResponse.model_validate(entry)


@router.get("/export")
def export_dividends(
    exporter: CsvExporter = Depends(get_csv_exporter),
) -> Response:
    """Download the dividend ledger as CSV."""
    return Response(
        content=exporter.dividends_csv(),
        media_type="text/csv",
        headers={
            "Content-Disposition": f'attachment; filename="{export_filename("dividends")}"',
        },
    )


@router.delete("/{dividend_id}", status_code=204)
def delete_dividend(
    dividend_id: str,
    service: DividendService = Depends(get_dividend_service),
) -> Response:
    """Delete a dividend; deleting an unknown id is not an error."""
    service.delete_dividend(dividend_id)
    return Response(status_code=204)
