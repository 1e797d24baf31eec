# File: app/api/v1/routes_blog.py

"""
Blog post routes.

Create and update need a bearer token and only ever act on the caller's own
posts. Reads are public. Store failures on create, update and get are
returned as 411 {"message": "Invalid"}; a failed listing returns 200 with the
same body, which existing clients rely on.
"""

from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from app.api.deps import AuthContext, get_auth_context, get_db
from app.api.validation import validate_create_post, validate_update_post
from app.core.exceptions import NotFoundOrForbiddenError, PersistenceError, RequestFailedError
from app.schemas.post import CreatePostInput, Message, PostCreated, PostRead, UpdatePostInput
from app.services.post_store import PostStore

router = APIRouter()

GENERIC_FAILURE = "Invalid"
STORE_FAILURE_STATUS = 411


def _store_failure() -> RequestFailedError:
    return RequestFailedError(GENERIC_FAILURE, status_code=STORE_FAILURE_STATUS, key="message")


@router.post("", response_model=PostCreated, summary="Create a post")
@router.post("/", response_model=PostCreated, include_in_schema=False)
def create_post(
    payload: CreatePostInput = Depends(validate_create_post),
    ctx: AuthContext = Depends(get_auth_context),
    db: Session = Depends(get_db),
):
    try:
        post_id = PostStore(db).create(
            author_id=ctx.user_id,
            title=payload.title,
            content=payload.content,
        )
    except PersistenceError as exc:
        raise _store_failure() from exc
    return PostCreated(id=post_id)


@router.put("", response_model=Message, summary="Update one of your posts")
@router.put("/", response_model=Message, include_in_schema=False)
def update_post(
    payload: UpdatePostInput = Depends(validate_update_post),
    ctx: AuthContext = Depends(get_auth_context),
    db: Session = Depends(get_db),
):
    """
    Update title and/or content of a post owned by the caller.

    A post that does not exist and a post owned by someone else fail the
    same way.
    """
    try:
        PostStore(db).update(
            author_id=ctx.user_id,
            post_id=payload.id,
            title=payload.title,
            content=payload.content,
        )
    except (NotFoundOrForbiddenError, PersistenceError) as exc:
        raise _store_failure() from exc
    return Message(message="updated blog")


# Must be registered before /{post_id}
@router.get("/bulk", response_model=list[PostRead], summary="List all posts")
def list_posts(db: Session = Depends(get_db)):
    try:
        posts = PostStore(db).find_all()
    except PersistenceError:
        return JSONResponse(status_code=200, content={"message": GENERIC_FAILURE})
    return [PostRead.from_model(post) for post in posts]


@router.get("/{post_id}", response_model=Optional[PostRead], summary="Get a post")
def get_post(post_id: str, db: Session = Depends(get_db)):
    """Return the post, or null when no post has this id."""
    try:
        post = PostStore(db).find_by_id(post_id)
    except PersistenceError as exc:
        raise _store_failure() from exc
    if post is None:
        return None
    return PostRead.from_model(post)
