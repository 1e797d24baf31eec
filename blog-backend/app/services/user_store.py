# File: app/services/user_store.py

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import PersistenceError
from app.models.base import new_id
from app.models.user import User

logger = logging.getLogger(__name__)


class UserStore:
    """Repository for users. Email uniqueness is enforced by the database."""

    def __init__(self, db: Session):
        self.db = db

    def create(self, *, email: str, password_hash: str, name: str) -> str:
        user_id = new_id()
        user = User(id=user_id, email=email, password_hash=password_hash, name=name)
        try:
            self.db.add(user)
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            logger.info("User insert rejected by a unique constraint")
            raise PersistenceError("User could not be created", details={"constraint": True}) from exc
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("User insert failed")
            raise PersistenceError("User could not be created") from exc
        return user_id

    def find_by_email(self, email: str) -> Optional[User]:
        try:
            return self.db.scalars(select(User).where(User.email == email)).first()
        except SQLAlchemyError as exc:
            logger.exception("User lookup by email failed")
            raise PersistenceError("User lookup failed") from exc
