from __future__ import annotations

from collections.abc import Generator
from contextlib import contextmanager

from loguru import logger
from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from pacer.db.models import Base

# Lazy initialization, one engine and session factory per database URL
_engines: dict[str, Engine] = {}
_session_factories: dict[str, sessionmaker[Session]] = {}


def get_engine(database_url: str) -> Engine:
    """Get or create the engine for a database URL.

    The schema is created the first time an engine is built.
    """
    engine = _engines.get(database_url)
    if engine is None:
        logger.debug(f"Initializing database engine: {database_url}")
        connect_args = {}
        if "sqlite" in database_url.lower():
            connect_args = {"check_same_thread": False}

        engine = create_engine(
            database_url,
            connect_args=connect_args,
            echo=False,
            pool_pre_ping=True,
        )
        Base.metadata.create_all(engine)
        _engines[database_url] = engine
        logger.debug("Database engine initialized")
    return engine


def _get_session_local(database_url: str) -> sessionmaker[Session]:
    factory = _session_factories.get(database_url)
    if factory is None:
        factory = sessionmaker(autocommit=False, autoflush=False, bind=get_engine(database_url))
        _session_factories[database_url] = factory
    return factory


def dispose_engines() -> None:
    """Dispose every cached engine (used by tests and at CLI exit)."""
    for engine in _engines.values():
        engine.dispose()
    _engines.clear()
    _session_factories.clear()


@contextmanager
def get_session(database_url: str) -> Generator[Session, None, None]:
    """Get database session context manager.

    Commits on success, rolls back and re-raises on any error.
    """
    session = _get_session_local(database_url)()
    try:
        yield session
        if session.dirty or session.new or session.deleted:
            session.commit()
    except Exception:
        logger.debug("Error in database session, rolling back")
        session.rollback()
        raise
    finally:
        session.close()
