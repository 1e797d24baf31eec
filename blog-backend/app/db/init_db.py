"""
Database initialization helpers.

Models are imported here so their tables get registered on Base.metadata.
"""

import logging

from app.db.session import engine
from app.models.base import Base
from app.models import post, user  # noqa: F401

logger = logging.getLogger(__name__)


def init_db() -> None:
    """
    Create all tables based on SQLAlchemy models.
    """
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables ready: %s", ", ".join(sorted(Base.metadata.tables)))


def drop_db() -> None:
    """Drop all tables. Used by the test suite."""
    Base.metadata.drop_all(bind=engine)
