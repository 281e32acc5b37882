"""Database layer for erpledger."""

from erpledger.database.base import Database
from erpledger.database.factories import create_sqlite_database

__all__ = ["Database", "create_sqlite_database"]
