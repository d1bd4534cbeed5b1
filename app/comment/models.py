# app/comment/models.py
from sqlalchemy import Column, DateTime, Index, String
from sqlalchemy.orm import validates

from app.core.database import Base
from app.core.errors import ValidationError
from app.ticket.models import new_id, utcnow

MESSAGE_MAX = 500
AUTHOR_NAME_MAX = 120


class Comment(Base):
    __tablename__ = "comments"
    __table_args__ = (Index("ix_comments_ticket_created", "ticket_id", "created_at"),)

    id = Column(String(36), primary_key=True, default=new_id)
    # plain reference, not a foreign key: comments outlive their ticket
    ticket_id = Column(String(36), nullable=False)
    author_name = Column(String(AUTHOR_NAME_MAX), nullable=True)
    message = Column(String(MESSAGE_MAX), nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    @validates("message")
    def _validate_message(self, key, value):
        if not isinstance(value, str) or not value.strip():
            raise ValidationError("message is required")
        if len(value) > MESSAGE_MAX:
            raise ValidationError(f"message must be at most {MESSAGE_MAX} characters")
        return value
