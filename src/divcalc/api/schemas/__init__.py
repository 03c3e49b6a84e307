"""Pydantic schemas for API request/response."""

from divcalc.api.schemas.dividend import (
    DividendCreateRequest,
    DividendResponse,
    DividendListResponse,
)
from divcalc.api.schemas.share import (
    ShareCreateRequest,
    PriceUpdateRequest,
    TickerPriceResponse,
    HoldingResponse,
    YearGroupResponse,
    PortfolioSummaryResponse,
    ShareListResponse,
)
from divcalc.api.schemas.exchange_rate import ExchangeRateResponse, DateRangeResponse
from divcalc.api.schemas.ui_state import UiStateResponse

__all__ = [
    "DividendCreateRequest",
    "DividendResponse",
    "DividendListResponse",
    "ShareCreateRequest",
    "PriceUpdateRequest",
    "TickerPriceResponse",
    "HoldingResponse",
    "YearGroupResponse",
    "PortfolioSummaryResponse",
    "ShareListResponse",
    "ExchangeRateResponse",
    "DateRangeResponse",
    "UiStateResponse",
]
