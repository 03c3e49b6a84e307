"""Pydantic schemas for share holding endpoints."""

from typing import Optional

from pydantic import BaseModel, Field, field_validator


class ShareCreateRequest(BaseModel):
    """Request schema for recording a purchase lot."""

    ticker: str = Field(..., min_length=1, max_length=20, description="Ticker symbol")
    shares_held: float = Field(..., description="Number of shares (fractional allowed)")
    purchase_price: float = Field(..., gt=0, description="Purchase price per share (USD)")
    current_price: float = Field(..., description="Current price per share (USD)")
    purchase_date: str = Field(..., min_length=1, description="Purchase date (YYYY-MM-DD)")

    @field_validator("ticker")
    @classmethod
    def uppercase_ticker(cls, v: str) -> str:
        return v.strip().upper()


class PriceUpdateRequest(BaseModel):
    """Request schema for changing a ticker's current price."""

    current_price: float = Field(..., description="Current price per share (USD)")


class TickerPriceResponse(BaseModel):
    """Current price known for a ticker."""

    ticker: str
    current_price: float


class HoldingResponse(BaseModel):
    """A purchase lot with metrics at the current ticker price."""

    id: str
    ticker: str
    shares_held: float
    purchase_price: float
    purchase_date: str
    current_price: float
    purchase_price_eur: Optional[float] = None  # null when no rate for purchase_date
    profit_per_share: float
    total_profit: float
    percentage_gain: Optional[float] = None


class YearGroupResponse(BaseModel):
    """Lots bought in one calendar year, oldest first."""

    year: int
    holdings: list[HoldingResponse]


class PortfolioSummaryResponse(BaseModel):
    """Portfolio totals."""

    total_investment: float
    current_value: float
    total_profit: float
    total_profit_percentage: float


class ShareListResponse(BaseModel):
    """Response schema for all holdings."""

    holdings: list[HoldingResponse]
    by_year: list[YearGroupResponse]
    summary: PortfolioSummaryResponse
    ticker_prices: dict[str, float]
    count: int
