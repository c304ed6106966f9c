"""
Database configuration and session management.
Uses SQLAlchemy 2.0 patterns with a synchronous session per request.
"""

from collections.abc import Generator
from contextlib import contextmanager
from typing import Any

from sqlalchemy import create_engine, text
from sqlalchemy.exc import InterfaceError, OperationalError, TimeoutError as PoolTimeoutError
from sqlalchemy.orm import sessionmaker, Session

from shared.config.logging import get_logger
from shared.config.settings import DATABASE_URL, settings
from shared.utils.exceptions import UnavailableError

logger = get_logger(__name__)

# Connectivity failures that callers may retry
UNAVAILABLE_ERRORS = (OperationalError, InterfaceError, PoolTimeoutError)


def _engine_options(url: str) -> dict[str, Any]:
    """Pool and timeout options for the configured backend."""
    if url.startswith("sqlite"):
        return {"connect_args": {"check_same_thread": False}}
    return {
        "pool_pre_ping": True,  # Verify connections before using
        "pool_size": settings.db_pool_size,
        "max_overflow": settings.db_max_overflow,
        "pool_timeout": settings.db_pool_timeout,
        "pool_recycle": settings.db_pool_recycle,
        "connect_args": {"connect_timeout": settings.db_connect_timeout},
    }


engine = create_engine(DATABASE_URL, echo=False, **_engine_options(DATABASE_URL))

# Session factory
SessionLocal = sessionmaker(
    bind=engine,
    autoflush=False,
    autocommit=False,
    expire_on_commit=False,
)


def get_db() -> Generator[Session, None, None]:
    """
    FastAPI dependency for database sessions.

    Usage:
        @router.get("/projects")
        def list_projects(db: Session = Depends(get_db)):
            ...

    The session is automatically closed after the request completes.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def get_db_context() -> Generator[Session, None, None]:
    """
    Context manager for database sessions outside of FastAPI.

    Usage:
        with get_db_context() as db:
            AccountDataService(db).delete_all(owner_id)
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def translate_db_errors(db: Session) -> Generator[None, None, None]:
    """
    Roll back and re-raise connectivity failures as UnavailableError.

    Usage:
        with translate_db_errors(db):
            db.execute(stmt)
    """
    try:
        yield
    except UNAVAILABLE_ERRORS as e:
        db.rollback()
        raise UnavailableError(error=type(e).__name__) from e


def safe_commit(db: Session) -> None:
    """
    Commit with automatic rollback on failure.

    Connectivity failures surface as UnavailableError; anything else is
    re-raised unchanged after rolling back.
    """
    try:
        db.commit()
    except UNAVAILABLE_ERRORS as e:
        db.rollback()
        raise UnavailableError(error=type(e).__name__) from e
    except Exception:
        db.rollback()
        raise


def ping(db: Session) -> bool:
    """Return True when the database answers a trivial query."""
    try:
        db.execute(text("SELECT 1"))
        return True
    except UNAVAILABLE_ERRORS as e:
        logger.error("Database ping failed", error=str(e))
        return False
