"""Storage layer for finledger."""

from finledger.database.base import KeyValueStore
from finledger.database.factories import create_sqlite_store

__all__ = ["KeyValueStore", "create_sqlite_store"]
