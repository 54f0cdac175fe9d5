"""Database engine and session management."""

from .config import Database, create_engine, create_session_factory, enable_sqlite_savepoints

__all__ = ["Database", "create_engine", "create_session_factory", "enable_sqlite_savepoints"]
