# app/comment/schemas.py
from datetime import datetime

from pydantic import Field, field_validator

from app.comment.models import AUTHOR_NAME_MAX, MESSAGE_MAX
from app.core.schemas import CamelModel


class CommentCreate(CamelModel):
    author_name: str | None = Field(default=None, max_length=AUTHOR_NAME_MAX)
    message: str = Field(..., min_length=1, max_length=MESSAGE_MAX)

    @field_validator("message")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("message cannot be blank")
        return value


class CommentOut(CamelModel):
    id: str
    ticket_id: str
    author_name: str | None = None
    message: str
    created_at: datetime
