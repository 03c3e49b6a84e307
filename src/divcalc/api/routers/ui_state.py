"""Remembered UI state endpoints."""

from fastapi import APIRouter, Depends

from divcalc.api.deps import get_ui_state_service
from divcalc.api.schemas import UiStateResponse
from divcalc.domain.models import UiFlag
from divcalc.services import UiStateService

router = APIRouter(prefix="/ui-state", tags=["ui-state"])


@router.get("", response_model=UiStateResponse)
def get_ui_state(
    service: UiStateService = Depends(get_ui_state_service),
) -> UiStateResponse:
    return UiStateResponse(forms=service.get_all())


@router.post("/{flag}/toggle", response_model=UiStateResponse)
def toggle_form(
    flag: UiFlag,
    service: UiStateService = Depends(get_ui_state_service),
) -> UiStateResponse:
    """Open or collapse an entry form and remember the choice."""
    service.toggle(flag)
    return UiStateResponse(forms=service.get_all())
