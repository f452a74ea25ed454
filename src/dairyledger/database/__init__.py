"""Database layer for dairyledger application."""

from dairyledger.database.base import Database
from dairyledger.database.factories import create_sqlite_database

__all__ = ["Database", "create_sqlite_database"]
