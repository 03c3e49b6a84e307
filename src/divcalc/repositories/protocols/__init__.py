"""Repository protocol definitions (interfaces)."""

from divcalc.repositories.protocols.state_repo import StateRepository

__all__ = [
    "StateRepository",
]
