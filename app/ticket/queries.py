# app/ticket/queries.py
from typing import Any, ClassVar

from sqlalchemy import case, or_

from app.core.query import BaseQuery
from app.ticket.models import Ticket, TicketPriority, TicketStatus, coerce_enum

DEFAULT_SORT = "-createdAt"

# accepted spelling -> canonical field
SORTABLE_FIELDS = {
    "createdAt": "created_at",
    "created_at": "created_at",
    "updatedAt": "updated_at",
    "updated_at": "updated_at",
    "title": "title",
    "status": "status",
    "priority": "priority",
}


def escape_like(value: str, escape: str = "\\") -> str:
    return (
        value.replace(escape, escape * 2)
        .replace("%", f"{escape}%")
        .replace("_", f"{escape}_")
    )


class TicketQuery(BaseQuery[Ticket]):
    """Query builder for tickets.

    Usage:
        tickets = (
            TicketQuery(db)
            .search("printer")
            .by_status("OPEN")
            .sort(parse_sort("-priority,createdAt", SORTABLE_FIELDS, DEFAULT_SORT))
            .paginate(10, 0)
            .all()
        )
    """

    model_class = Ticket
    ordering_fields: ClassVar[dict[str, Any]] = {
        "created_at": Ticket.created_at,
        "updated_at": Ticket.updated_at,
        "title": Ticket.title,
        # enums sort in lifecycle order, not alphabetically
        "status": case({s: i for i, s in enumerate(TicketStatus)}, value=Ticket.status),
        "priority": case({p: i for i, p in enumerate(TicketPriority)}, value=Ticket.priority),
    }

    def search(self, term: str | None) -> "TicketQuery":
        """Case-insensitive substring match on title or description."""
        if not term:
            return self
        pattern = f"%{escape_like(term)}%"
        return self.where(
            or_(
                Ticket.title.ilike(pattern, escape="\\"),
                Ticket.description.ilike(pattern, escape="\\"),
            )
        )

    def by_status(self, status: TicketStatus | str | None) -> "TicketQuery":
        if not status:
            return self
        return self.where(Ticket.status == coerce_enum(status, TicketStatus, "status"))

    def by_priority(self, priority: TicketPriority | str | None) -> "TicketQuery":
        if not priority:
            return self
        return self.where(Ticket.priority == coerce_enum(priority, TicketPriority, "priority"))
