# app/ticket/models.py
import enum
import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Enum, String, Text
from sqlalchemy.orm import validates

from app.core.database import Base
from app.core.errors import ValidationError

TITLE_MIN, TITLE_MAX = 5, 80
DESCRIPTION_MIN, DESCRIPTION_MAX = 20, 2000


class TicketStatus(str, enum.Enum):
    OPEN = "OPEN"
    IN_PROGRESS = "IN_PROGRESS"
    RESOLVED = "RESOLVED"


class TicketPriority(str, enum.Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def new_id() -> str:
    return str(uuid.uuid4())


def coerce_enum(value, enum_cls: type[enum.Enum], field: str):
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise ValidationError(f"Invalid {field}: {value}", error=f"Allowed values: {allowed}") from None


def check_length(value, field: str, min_len: int, max_len: int) -> str:
    if not isinstance(value, str):
        raise ValidationError(f"{field} is required")
    if not min_len <= len(value) <= max_len:
        raise ValidationError(f"{field} must be between {min_len} and {max_len} characters")
    return value


class Ticket(Base):
    __tablename__ = "tickets"

    id = Column(String(36), primary_key=True, default=new_id)
    title = Column(String(TITLE_MAX), index=True, nullable=False)
    description = Column(Text, nullable=False)
    status = Column(
        Enum(TicketStatus, native_enum=False, length=20, validate_strings=True),
        default=TicketStatus.OPEN,
        nullable=False,
        index=True,
    )
    priority = Column(
        Enum(TicketPriority, native_enum=False, length=20, validate_strings=True),
        default=TicketPriority.LOW,
        nullable=False,
        index=True,
    )
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False, index=True)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    @validates("title")
    def _validate_title(self, key, value):
        return check_length(value, "title", TITLE_MIN, TITLE_MAX)

    @validates("description")
    def _validate_description(self, key, value):
        return check_length(value, "description", DESCRIPTION_MIN, DESCRIPTION_MAX)

    @validates("status")
    def _validate_status(self, key, value):
        return coerce_enum(value, TicketStatus, "status")

    @validates("priority")
    def _validate_priority(self, key, value):
        return coerce_enum(value, TicketPriority, "priority")
