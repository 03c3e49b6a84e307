"""State repository protocol."""

from typing import Any, Mapping, Protocol


class StateRepository(Protocol):
    """
    Interface for key -> JSON value persistence.

    Values are JSON-serializable (lists, dicts, numbers, strings, booleans).
    """

    def load(self, key: str, default: Any) -> Any:
        """Return the stored value for key, or default when absent or unreadable."""
        ...

    def save(self, key: str, value: Any) -> None:
        """Store value under key, replacing any previous value."""
        ...

    def save_many(self, values: Mapping[str, Any]) -> None:
        """Store several keys at once; either all of them are written or none."""
        ...

    def delete(self, key: str) -> None:
        """Remove key (no-op when absent)."""
        ...
