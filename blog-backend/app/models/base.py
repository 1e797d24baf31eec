# File: app/models/base.py

import uuid

from sqlalchemy.orm import DeclarativeBase


def new_id() -> str:
    """Primary key generator shared by all models."""
    return str(uuid.uuid4())


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    Models inherit from this so their tables register on Base.metadata.
    """
    pass
