"""Infrastructure resources: the database connection pool.

This module is part of the infra layer and must not import from application features.
"""
from typing import Optional

import structlog
from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

logger = structlog.get_logger("maternal.infra")


def _enable_sqlite_foreign_keys(dbapi_connection, _connection_record) -> None:
    # SQLite ignores ON DELETE CASCADE unless foreign keys are switched on per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class DatabaseResource:
    """Database resource for dependency injection.

    Owns the async engine (and therefore the connection pool) shared by all
    requests. Sessions are handed out per request via ``get_session``.
    """

    def __init__(self, database_url: str):
        self.database_url = database_url
        self.engine: Optional[AsyncEngine] = None
        self.session_factory: Optional[async_sessionmaker[AsyncSession]] = None

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

    async def init(self):
        """Initialize database connection."""
        if self.engine is not None:
            return self
        engine_options = {"echo": False, "pool_pre_ping": True}
        if not self.is_sqlite:
            engine_options["pool_recycle"] = 3600
        self.engine = create_async_engine(self.database_url, **engine_options)
        if self.is_sqlite:
            event.listen(self.engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
        self.session_factory = async_sessionmaker(
            bind=self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )
        logger.info("Database engine created", dialect=self.engine.dialect.name)
        return self

    def get_session(self) -> AsyncSession:
        """Get database session (synchronous accessor)."""
        if self.session_factory is None:
            raise RuntimeError("Database not initialized. Call init() first.")
        return self.session_factory()

    async def shutdown(self):
        """Shutdown database connection."""
        if self.engine:
            await self.engine.dispose()
            self.engine = None
            self.session_factory = None
