"""Repository layer - data access abstractions and implementations."""

from divcalc.repositories.protocols import StateRepository

__all__ = [
    "StateRepository",
]
