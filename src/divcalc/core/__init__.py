"""Core utilities and shared functionality."""

from divcalc.core.dates import (
    now_utc,
    today_iso,
    parse_iso_date,
    year_of,
    new_entry_id,
    UTC,
)
from divcalc.core.exceptions import (
    AppError,
    ValidationError,
    NotFoundError,
    RateUnavailableError,
    ResourceLoadError,
)

__all__ = [
    "now_utc",
    "today_iso",
    "parse_iso_date",
    "year_of",
    "new_entry_id",
    "UTC",
    "AppError",
    "ValidationError",
    "NotFoundError",
    "RateUnavailableError",
    "ResourceLoadError",
]
