"""
Local database connection management.

Provides the async SQLite engine and session factory backing the local
store.

Dependencies: sqlalchemy, aiosqlite, studyeasier.configs
System role: Local database connection lifecycle management
"""

from pathlib import Path

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from studyeasier.configs.local_store import LocalStoreSettings


def get_async_engine(settings: LocalStoreSettings) -> AsyncEngine:
    """
    Create async SQLite engine for the local store.

    In-memory stores use a StaticPool so every session sees the same
    database. File stores get their parent directory created on demand.

    Args:
        settings: Local store configuration

    Returns:
        AsyncEngine: Configured async SQLAlchemy engine

    Usage:
        engine = get_async_engine(get_settings().local_store)
        async with engine.connect() as conn:
            result = await conn.execute(text("SELECT 1"))
    """
    if settings.in_memory:
        engine = create_async_engine(
            settings.database_url,
            echo=settings.echo_sql or settings.debug,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        Path(settings.path).expanduser().parent.mkdir(parents=True, exist_ok=True)
        engine = create_async_engine(settings.database_url, echo=settings.echo_sql or settings.debug)

    @event.listens_for(engine.sync_engine, "connect")
    def _set_sqlite_pragmas(dbapi_connection, connection_record) -> None:
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.close()

    return engine


def get_async_session_factory(engine: AsyncEngine) -> async_sessionmaker:
    """
    Create async session factory bound to the local engine.

    Args:
        engine: Engine returned by get_async_engine

    Returns:
        async_sessionmaker: Async session factory configured for manual transaction control

    Usage:
        SessionFactory = get_async_session_factory(engine)
        async with SessionFactory() as session:
            session.add(obj)
            await session.commit()
    """
    return async_sessionmaker(
        bind=engine,
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
    )
