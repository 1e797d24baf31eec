# File: app/services/post_store.py

"""
Post repository.

Writes are scoped to the author: update touches a row only when both the
post id and the author id match, in one UPDATE statement. A miss is reported
as NotFoundOrForbiddenError without saying which of the two it was.
"""

import logging
from typing import Optional

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundOrForbiddenError, PersistenceError
from app.models.base import new_id
from app.models.post import Post

logger = logging.getLogger(__name__)


class PostStore:
    def __init__(self, db: Session):
        self.db = db

    def create(self, *, author_id: str, title: str, content: str) -> str:
        post_id = new_id()
        post = Post(id=post_id, title=title, content=content, author_id=author_id)
        try:
            self.db.add(post)
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("Post insert failed for author %s", author_id)
            raise PersistenceError("Post could not be created") from exc
        return post_id

    def update(
        self,
        *,
        author_id: str,
        post_id: str,
        title: Optional[str] = None,
        content: Optional[str] = None,
    ) -> None:
        values = {}
        if title is not None:
            values["title"] = title
        if content is not None:
            values["content"] = content

        owned = (Post.id == post_id, Post.author_id == author_id)
        try:
            if values:
                result = self.db.execute(update(Post).where(*owned).values(**values))
                matched = result.rowcount
                self.db.commit()
            else:
                matched = self.db.scalar(select(Post.id).where(*owned)) is not None
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("Post update failed for post %s", post_id)
            raise PersistenceError("Post could not be updated") from exc

        if not matched:
            logger.info("Post %s not updated: no row owned by %s", post_id, author_id)
            raise NotFoundOrForbiddenError("Post not found", details={"post_id": post_id})

    def find_by_id(self, post_id: str) -> Optional[Post]:
        try:
            return self.db.get(Post, post_id)
        except SQLAlchemyError as exc:
            logger.exception("Post lookup failed for %s", post_id)
            raise PersistenceError("Post lookup failed") from exc

    def find_all(self) -> list[Post]:
        # Unpaginated: returns every post
        try:
            return list(self.db.scalars(select(Post)).all())
        except SQLAlchemyError as exc:
            logger.exception("Post listing failed")
            raise PersistenceError("Post listing failed") from exc
