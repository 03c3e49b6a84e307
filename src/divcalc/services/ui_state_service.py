"""Remembered open/closed state of the entry forms."""

import threading

from divcalc.domain.models import UiFlag
from divcalc.repositories.protocols import StateRepository

_toggle_lock = threading.Lock()


class UiStateService:
    """Forms start open; toggling persists the new state."""

    def __init__(self, state_repo: StateRepository):
        self._state_repo = state_repo

    def is_open(self, flag: UiFlag) -> bool:
        return bool(self._state_repo.load(flag.state_key.value, True))

    def toggle(self, flag: UiFlag) -> bool:
        with _toggle_lock:
            new_state = not self.is_open(flag)
            self._state_repo.save(flag.state_key.value, new_state)
        return new_state

    def get_all(self) -> dict[str, bool]:
        return {flag.value: self.is_open(flag) for flag in UiFlag}
