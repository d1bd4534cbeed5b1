# app/ticket/schemas.py
from datetime import datetime

from pydantic import Field, field_validator

from app.core.schemas import CamelModel
from app.ticket.models import (
    DESCRIPTION_MAX,
    DESCRIPTION_MIN,
    TITLE_MAX,
    TITLE_MIN,
    TicketPriority,
    TicketStatus,
)


class TicketBase(CamelModel):
    title: str = Field(..., min_length=TITLE_MIN, max_length=TITLE_MAX)
    description: str = Field(..., min_length=DESCRIPTION_MIN, max_length=DESCRIPTION_MAX)


class TicketCreate(TicketBase):
    priority: TicketPriority = TicketPriority.LOW
    status: TicketStatus = TicketStatus.OPEN

    @field_validator("priority", "status", mode="before")
    @classmethod
    def _blank_means_default(cls, value, info):
        # an explicit null or "" falls back to the field default
        if value is None or value == "":
            return cls.model_fields[info.field_name].default
        return value


class TicketUpdate(CamelModel):
    title: str | None = Field(default=None, min_length=TITLE_MIN, max_length=TITLE_MAX)
    description: str | None = Field(default=None, min_length=DESCRIPTION_MIN, max_length=DESCRIPTION_MAX)
    status: TicketStatus | None = None
    priority: TicketPriority | None = None

    @field_validator("title", "description", "status", "priority")
    @classmethod
    def _not_null(cls, value, info):
        if value is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return value


class TicketOut(TicketBase):
    id: str
    status: TicketStatus
    priority: TicketPriority
    created_at: datetime
    updated_at: datetime

