"""Exchange-rate lookup endpoints."""

from fastapi import APIRouter, Depends

from divcalc.api.deps import get_rate_service
from divcalc.api.schemas import DateRangeResponse, ExchangeRateResponse
from divcalc.core.exceptions import NotFoundError
from divcalc.services import ExchangeRateService

router = APIRouter(prefix="/exchange-rates", tags=["exchange-rates"])


@router.get("/range", response_model=DateRangeResponse)
def get_date_range(
    rates: ExchangeRateService = Depends(get_rate_service),
) -> DateRangeResponse:
    """Dates covered by the rate table, used to constrain date pickers."""
    date_range = rates.date_range()
    if date_range is None:
        return DateRangeResponse()
    return DateRangeResponse(min=date_range.min, max=date_range.max, count=len(rates.table))


@router.get("/{date}", response_model=ExchangeRateResponse)
def get_rate(
    date: str,
    rates: ExchangeRateService = Depends(get_rate_service),
) -> ExchangeRateResponse:
    """Rate on an exact date; 404 for weekends, holidays and dates outside the table."""
    rate = rates.rate_at(date)
    if rate is None:
        raise NotFoundError("Exchange rate", date)
    return ExchangeRateResponse(date=date, rate=rate)
