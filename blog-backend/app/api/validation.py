# File: app/api/validation.py

"""
Request body validation for the write operations.

Each dependency reads the JSON body and checks it against the operation's
schema before the route runs. A mismatch raises InputValidationError, which
is rendered as 400 "Invalid Inputs", so no handler logic or database call
happens for a bad body.
"""

import json
import logging
from typing import Any, TypeVar

from fastapi import Request
from pydantic import BaseModel, ValidationError

from app.core.exceptions import InputValidationError
from app.schemas.post import CreatePostInput, UpdatePostInput
from app.schemas.user import SigninInput, SignupInput

logger = logging.getLogger(__name__)

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def validate_input(body: Any, schema: type[SchemaT]) -> SchemaT:
    """Validate a parsed JSON body against `schema` and return the typed model."""
    try:
        return schema.model_validate(body)
    except ValidationError as exc:
        logger.info("%s rejected: %d validation error(s)", schema.__name__, exc.error_count())
        raise InputValidationError() from exc


def _body_validator(schema: type[SchemaT]):
    async def dependency(request: Request) -> SchemaT:
        try:
            body = await request.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            logger.info("%s rejected: body is not JSON", schema.__name__)
            raise InputValidationError() from exc
        return validate_input(body, schema)

    dependency.__name__ = f"validate_{schema.__name__}"
    return dependency


validate_signup = _body_validator(SignupInput)
validate_signin = _body_validator(SigninInput)
validate_create_post = _body_validator(CreatePostInput)
validate_update_post = _body_validator(UpdatePostInput)
