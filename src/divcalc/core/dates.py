"""Date helpers for ISO calendar dates and creation-time ids."""

import threading
import time
from datetime import date, datetime

import pytz
from dateutil import parser as date_parser

from divcalc.core.exceptions import ValidationError

UTC = pytz.utc

_id_lock = threading.Lock()
_last_id = 0


def now_utc() -> datetime:
    """Return the current time in UTC."""
    return datetime.now(UTC)


def today_iso() -> str:
    """Return today's UTC date as YYYY-MM-DD (used in export filenames)."""
    return now_utc().date().isoformat()


def parse_iso_date(value: str) -> date:
    """
    Parse a YYYY-MM-DD string into a date.

    Raises ValidationError for empty or malformed input.
    """
    value = (value or "").strip()
    if not value:
        raise ValidationError("Date is required")
    try:
        return date_parser.isoparse(value).date()
    except (ValueError, OverflowError):
        raise ValidationError(f"Invalid date: {value}")


def year_of(value: str) -> int:
    """Return the calendar year of an ISO date string."""
    return parse_iso_date(value).year


def new_entry_id() -> str:
    """
    Return a creation-time token (epoch milliseconds as a string).

    Strictly increasing within the process so two entries created in the
    same millisecond still get distinct ids.
    """
    global _last_id
    with _id_lock:
        candidate = int(time.time() * 1000)
        if candidate <= _last_id:
            candidate = _last_id + 1
        _last_id = candidate
        return str(candidate)
