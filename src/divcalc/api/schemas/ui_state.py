"""Pydantic schemas for remembered UI state."""

from pydantic import BaseModel


class UiStateResponse(BaseModel):
    """Open/closed state of each entry form."""

    forms: dict[str, bool]
