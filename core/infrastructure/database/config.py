"""
Database configuration.

Manages engine creation and the session factory.
"""
from typing import Optional
import logging

from sqlalchemy import event
from sqlalchemy.engine import URL, make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from core.settings.sections import DatabaseSettings


logger = logging.getLogger(__name__)


# =============================================================================
# ENGINE CREATION
# =============================================================================

def enable_sqlite_savepoints(engine: AsyncEngine, begin: str = "BEGIN") -> None:
    """
    Let SQLAlchemy own BEGIN on SQLite connections.

    The sqlite3 driver defers BEGIN on its own, which breaks SAVEPOINT
    semantics; notification writes rely on savepoints.
    """

    @event.listens_for(engine.sync_engine, "connect")
    def _do_connect(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine.sync_engine, "begin")
    def _do_begin(conn):
        conn.exec_driver_sql(begin)


def is_memory_database(url: URL) -> bool:
    """True for `:memory:` SQLite URLs (plain or shared-cache URI form)."""
    database = url.database or ""
    return database in ("", ":memory:") or url.query.get("mode") == "memory"


def create_engine(settings: DatabaseSettings) -> AsyncEngine:
    """
    Create async SQLAlchemy engine.

    In-memory SQLite lives on a single shared connection. File-backed
    SQLite gets a pool of connections, one per session, and takes the
    write lock at BEGIN so concurrent Units of Work queue on the busy
    timeout instead of failing on lock upgrade.

    Args:
        settings: Database settings

    Returns:
        Configured async engine
    """
    url = make_url(settings.database_url)
    logger.info(f"Creating database engine: {url.render_as_string(hide_password=True)}")

    if url.get_backend_name() == "sqlite":
        if is_memory_database(url):
            engine = create_async_engine(
                settings.database_url,
                echo=settings.echo_sql,
                connect_args={"check_same_thread": False},  # Required for SQLite
                poolclass=StaticPool,
            )
            enable_sqlite_savepoints(engine)
            return engine

        engine = create_async_engine(
            settings.database_url,
            echo=settings.echo_sql,
            connect_args={"check_same_thread": False, "timeout": settings.pool_timeout},
            pool_size=settings.pool_size,
            max_overflow=settings.max_overflow,
            pool_timeout=settings.pool_timeout,
        )
        enable_sqlite_savepoints(engine, begin="BEGIN IMMEDIATE")
        return engine

    return create_async_engine(
        settings.database_url,
        echo=settings.echo_sql,
        pool_size=settings.pool_size,
        max_overflow=settings.max_overflow,
        pool_timeout=settings.pool_timeout,
        pool_recycle=settings.pool_recycle,
        pool_pre_ping=True,  # Test connections before using
    )


# =============================================================================
# SESSION FACTORY
# =============================================================================

def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """
    Build the session factory used by every Unit of Work.

    Args:
        engine: Async engine

    Returns:
        async_sessionmaker instance
    """
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


class Database:
    """
    Engine + session factory pair with an explicit lifetime.

    Constructed once per process by the API layer and disposed on shutdown.
    """

    def __init__(self, settings: DatabaseSettings):
        self.settings = settings
        self._engine: Optional[AsyncEngine] = None
        self._session_factory: Optional[async_sessionmaker[AsyncSession]] = None

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            self._engine = create_engine(self.settings)
        return self._engine

    @property
    def session_factory(self) -> async_sessionmaker[AsyncSession]:
        if self._session_factory is None:
            self._session_factory = create_session_factory(self.engine)
        return self._session_factory

    async def create_tables(self) -> None:
        """Create all tables if they don't exist."""
        from core.data.models import Base

        logger.info("Initializing database...")

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

        logger.info("✅ Database initialized successfully")

    async def dispose(self) -> None:
        """Close database connections."""
        if self._engine is not None:
            logger.info("Closing database connections...")
            await self._engine.dispose()
            self._engine = None
            self._session_factory = None
            logger.info("✅ Database connections closed")
