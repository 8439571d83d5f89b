"""
Database engine management for SlabLedger.
SQLite backs the key-value storage slots; file databases run in WAL mode
so a slot overwrite never blocks a reader.
"""

from sqlmodel import SQLModel, create_engine
from typing import Optional
import logging

from config import Settings, get_settings

logger = logging.getLogger(__name__)

# Engine for the global settings, built on first use
_engine: Optional[object] = None


def build_engine(settings: Settings):
    """Create an engine for the database named in the given settings."""
    connect_args = {}
    if settings.is_sqlite:
        connect_args["check_same_thread"] = False
    engine = create_engine(
        settings.database_url,
        echo=settings.db_echo,
        connect_args=connect_args
    )
    if settings.is_sqlite:
        _enable_wal_mode(engine)
    return engine


def get_engine():
    """Get or create the engine for the global settings."""
    global _engine
    if _engine is None:
        _engine = build_engine(get_settings())
    return _engine


def _enable_wal_mode(engine):
    try:
        with engine.connect() as conn:
            conn.exec_driver_sql("PRAGMA journal_mode=WAL")
            conn.exec_driver_sql("PRAGMA busy_timeout=5000")
            logger.info(f"SQLite WAL mode enabled for {engine.url}")
    except Exception as e:
        logger.warning(f"Could not enable WAL mode: {e}")


def reset_engine():
    """Dispose of the global engine so the next call rebuilds it from settings."""
    global _engine
    if _engine is not None:
        _engine.dispose()
    _engine = None


def init_db(engine=None):
    """Create the storage tables if they do not exist yet."""
    from models import StorageSlot

    engine = engine if engine is not None else get_engine()
    SQLModel.metadata.create_all(engine, tables=[StorageSlot.__table__])
    logger.info(f"Database initialized at {engine.url}")
