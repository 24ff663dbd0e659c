"""PostgreSQL connection pool and session management."""

import logging
from collections.abc import Generator

from fastapi import Request
from sqlalchemy import Engine, create_engine, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from app.core.config import Settings

logger = logging.getLogger(__name__)

# Bound parameters carry password hashes; keep them out of error text and echo logs.
ENGINE_OPTIONS = {"pool_pre_ping": True, "hide_parameters": True}


def create_db_engine(settings: Settings) -> Engine:
    """Build the engine with a bounded connection pool sized from settings."""
    return create_engine(
        settings.DATABASE_URL,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        pool_timeout=settings.DB_POOL_TIMEOUT_SEC,
        echo=settings.DEBUG,
        **ENGINE_OPTIONS,
    )


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db(request: Request) -> Generator[Session, None, None]:
    """Dependency that yields a DB session and closes it when done, even on error."""
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def check_db_connected(db: Session) -> bool:
    """Run a trivial query to verify the database is reachable."""
    try:
        db.execute(text("SELECT 1"))
        return True
    except SQLAlchemyError:
        logger.warning("Database connectivity check failed", exc_info=True)
        return False
