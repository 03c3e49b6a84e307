"""Enumerations for domain models."""

from enum import Enum


class StateKey(str, Enum):
    """Keys under which application state is persisted."""

    DIVIDENDS = "dividends"
    SHARES = "shares"
    TICKER_PRICES = "tickerPrices"
    IS_FORM_OPEN = "isFormOpen"
    IS_SHARES_FORM_OPEN = "isSharesFormOpen"


class UiFlag(str, Enum):
    """Collapsible entry forms whose open/closed state is remembered."""

    DIVIDEND_FORM = "dividend-form"
    SHARES_FORM = "shares-form"

    @property
    def state_key(self) -> StateKey:
        if self is UiFlag.DIVIDEND_FORM:
            return StateKey.IS_FORM_OPEN
        return StateKey.IS_SHARES_FORM_OPEN
