"""API routers package."""

from divcalc.api.routers.dividends import router as dividends_router
from divcalc.api.routers.shares import router as shares_router
from divcalc.api.routers.exchange_rates import router as exchange_rates_router
from divcalc.api.routers.ui_state import router as ui_state_router

__all__ = [
    "dividends_router",
    "shares_router",
    "exchange_rates_router",
    "ui_state_router",
]
