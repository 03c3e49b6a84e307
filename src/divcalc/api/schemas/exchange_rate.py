"""Pydantic schemas for exchange-rate endpoints."""

from typing import Optional

from pydantic import BaseModel


class ExchangeRateResponse(BaseModel):
    """USD value of 1 EUR on a date."""

    date: str
    rate: float


class DateRangeResponse(BaseModel):
    """Dates covered by the loaded rate table (nulls when it is empty)."""

    min: Optional[str] = None
    max: Optional[str] = None
    count: int = 0
