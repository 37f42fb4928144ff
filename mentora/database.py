# mentora/database.py - Database Configuration
import logging

from sqlalchemy import create_engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import declarative_base, sessionmaker

from mentora.config import settings
from mentora.exceptions import PersistenceError

logger = logging.getLogger(__name__)

# Database URL loaded from .env via mentora/config.py
DATABASE_URL = settings.DATABASE_URL


def _create_engine(url: str):
    if str(url).startswith("sqlite"):
        return create_engine(url, connect_args={"check_same_thread": False})
    return create_engine(url, pool_pre_ping=True)


engine = _create_engine(DATABASE_URL)

# Session maker
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base class for models
Base = declarative_base()


# Dependency to get database session
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def create_db_and_tables():
    """Creates all defined database tables."""
    from mentora import models  # noqa: F401 - register every table on Base.metadata

    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created or already exist.")


def commit(db, *, action: str) -> None:
    """
    Commit the unit of work, rolling back on failure.

    IntegrityError propagates unchanged so callers can map uniqueness
    violations to a domain conflict; any other database failure becomes an
    opaque PersistenceError.
    """
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Database commit failed while %s", action)
        raise PersistenceError() from exc
