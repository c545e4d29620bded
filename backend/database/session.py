# backend/database/session.py
import logging
from typing import Optional

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base

from config.settings import settings

logger = logging.getLogger(__name__)

Base = declarative_base()

_engine: Optional[Engine] = None


def enable_sqlite_foreign_keys(engine: Engine) -> Engine:
    """SQLite ignores FOREIGN KEY clauses (and ON DELETE CASCADE) unless asked per connection."""
    @event.listens_for(engine, "connect")
    def _set_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    return engine


def _build_engine(url: str) -> Engine:
    if url.startswith("sqlite"):
        return enable_sqlite_foreign_keys(create_engine(
            url,
            connect_args={"check_same_thread": False},
            future=True,
        ))
    return create_engine(
        url,
        pool_size=settings.DB_POOL_SIZE,
        pool_recycle=settings.DB_POOL_RECYCLE,
        pool_pre_ping=True,
        future=True,
    )


def get_engine() -> Engine:
    """Process-wide engine, created on first use."""
    global _engine
    if _engine is None:
        _engine = _build_engine(settings.database_url())
        logger.info("Database engine created (%s)", _engine.dialect.name)
    return _engine


def dispose_engine() -> None:
    global _engine
    if _engine is not None:
        _engine.dispose()
        logger.info("Database pool closed")
    _engine = None
