"""Engine and session helpers.

SQLite URLs get two tweaks: in-memory databases share a single connection
(StaticPool) and pysqlite's own transaction handling is switched off so that
SAVEPOINTs behave, which the seed runner relies on for per-document
rollback.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from functools import lru_cache

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from drug_info.config import get_settings
from drug_info.db.base import Base

logger = logging.getLogger(__name__)


def _configure_sqlite(engine: Engine) -> None:
    @event.listens_for(engine, "connect")
    def _on_connect(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    @event.listens_for(engine, "begin")
    def _on_begin(conn):
        conn.exec_driver_sql("BEGIN")


def make_engine(database_url: str) -> Engine:
    """Create an engine for *database_url*."""
    url = make_url(database_url)
    if url.get_backend_name() != "sqlite":
        return create_engine(url)

    kwargs: dict = {"connect_args": {"check_same_thread": False}}
    if url.database in (None, "", ":memory:"):
        kwargs["poolclass"] = StaticPool
    engine = create_engine(url, **kwargs)
    _configure_sqlite(engine)
    logger.debug("Configured SQLite engine for %s", url.database or ":memory:")
    return engine


@lru_cache
def get_engine(database_url: str | None = None) -> Engine:
    """Engine for *database_url*, defaulting to the configured database."""
    return make_engine(database_url or get_settings().database_url)


def _make_session_factory(database_url: str | None = None) -> sessionmaker[Session]:
    return sessionmaker(bind=get_engine(database_url))


def get_db() -> Iterator[Session]:
    """Yield a session and close it afterwards (FastAPI dependency)."""
    db = _make_session_factory()()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def session_scope(database_url: str | None = None) -> Iterator[Session]:
    """Open a session for a script run; the caller decides when to commit."""
    db = _make_session_factory(database_url)()
    try:
        yield db
    finally:
        db.close()


def init_db(database_url: str | None = None) -> None:
    """Create any missing tables."""
    import drug_info.sqlalchemy.drugs  # noqa: F401  registers the tables

    Base.metadata.create_all(get_engine(database_url))
    logger.info("Tables ready: %s", ", ".join(sorted(Base.metadata.tables)))
