"""Service layer - ledger engines and business logic orchestration."""

from divcalc.services.exchange_rates import ExchangeRateService
from divcalc.services.dividend_service import DividendService
from divcalc.services.share_service import ShareService
from divcalc.services.ui_state_service import UiStateService

__all__ = [
    "ExchangeRateService",
    "DividendService",
    "ShareService",
    "UiStateService",
]
