"""Abstract key-value store interface."""

from abc import ABC, abstractmethod
from typing import Optional


class KeyValueStore(ABC):
    """Abstract string key-value store backing the ledger.

    Values are opaque strings; the ledger stores JSON documents under a small
    set of fixed keys and always overwrites the whole value.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the underlying storage."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the underlying storage."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize storage schema (create tables)."""
        pass

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the value stored under key, or None if absent."""
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""
        pass

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove key. Removing an absent key is a no-op."""
        pass

    @abstractmethod
    def keys(self) -> list[str]:
        """List all stored keys."""
        pass
