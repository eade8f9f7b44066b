"""Database initialization - runs on backend startup."""
import logging

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from travel_records.infrastructure.persistence import models  # noqa: F401 - registers tables
from travel_records.infrastructure.persistence.db import Base, SessionLocal, engine

logger = logging.getLogger(__name__)


def check_database_connection() -> bool:
    """Check that the database accepts connections."""
    session = SessionLocal()
    try:
        session.execute(text("SELECT 1"))
        logger.info("Database connection successful.")
        return True
    except SQLAlchemyError as e:
        logger.error(f"Database connection error: {e}")
        return False
    finally:
        session.close()


def initialize_database() -> bool:
    """Create missing tables.

    Existing tables are left untouched.
    """
    if not check_database_connection():
        return False
    try:
        Base.metadata.create_all(bind=engine)
        logger.info("✅ Database schema initialized successfully")
        return True
    except SQLAlchemyError as e:
        logger.error(f"Error initializing database: {e}")
        return False
