"""Pydantic schemas for dividend endpoints."""

from pydantic import BaseModel, Field


class DividendCreateRequest(BaseModel):
    """Request schema for recording a dividend payment."""

    dollar_amount: float = Field(..., description="Gross dividend in USD")
    payment_date: str = Field(..., min_length=1, description="Payment date (YYYY-MM-DD)")


class DividendResponse(BaseModel):
    """Response schema for a single dividend entry."""

    model_config = {"from_attributes": True}

    id: str
    dollar_amount: float
    payment_date: str
    exchange_rate: float
    euro_amount: float


class DividendListResponse(BaseModel):
    """Response schema for the dividend ledger with totals."""

    dividends: list[DividendResponse]
    count: int
    total_usd: float
    total_eur: float
