# File: app/schemas/post.py

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class CreatePostInput(BaseModel):
    title: str = Field(min_length=1)
    content: str


class UpdatePostInput(BaseModel):
    id: str = Field(min_length=1)
    title: Optional[str] = Field(default=None, min_length=1)
    content: Optional[str] = None

    @model_validator(mode="after")
    def require_a_change(self):
        if self.title is None and self.content is None:
            raise ValueError("title or content is required")
        return self


class PostRead(BaseModel):
    id: str
    title: str
    content: str
    author_id: str = Field(alias="authorId")

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    @classmethod
    def from_model(cls, post) -> "PostRead":
        return cls(id=post.id, title=post.title, content=post.content, author_id=post.author_id)


class PostCreated(BaseModel):
    id: str


class Message(BaseModel):
    message: str
