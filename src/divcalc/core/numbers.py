"""Parsing of user-entered numeric fields."""

import math
from typing import Union

from divcalc.core.exceptions import ValidationError

Number = Union[int, float, str]


def parse_number(value: Number, field_name: str) -> float:
    """
    Parse a required numeric field into a finite float.

    Accepts ints, floats and numeric strings. Empty, non-numeric, NaN and
    infinite values raise ValidationError so no entry reaches a ledger.
    """
    if value is None or isinstance(value, bool):
        raise ValidationError(f"{field_name} is required")
    if isinstance(value, str):
        value = value.strip()
        if not value:
            raise ValidationError(f"{field_name} is required")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number: {value!r}")
    if not math.isfinite(number):
        raise ValidationError(f"{field_name} must be a finite number")
    return number


def format_plain(value: float) -> str:
    """Format a number without trailing zeros (10.0 -> "10", 2.5 -> "2.5")."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))
