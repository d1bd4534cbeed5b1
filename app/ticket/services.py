# app/ticket/services.py
import logging

from sqlalchemy.orm import Session

from app.core.database import store_errors
from app.core.errors import NotFoundError, ValidationError
from app.core.pagination import PageParams, paginate
from app.core.query import parse_sort
from app.core.schemas import Pagination
from app.ticket.models import Ticket, utcnow
from app.ticket.queries import DEFAULT_SORT, SORTABLE_FIELDS, TicketQuery
from app.ticket.schemas import TicketCreate, TicketUpdate

logger = logging.getLogger(__name__)


def list_tickets(
    db: Session,
    params: PageParams,
    q: str | None = None,
    status: str | None = None,
    priority: str | None = None,
    sort: str | None = None,
) -> tuple[list[Ticket], Pagination]:
    # parameters are checked before touching the store
    query = (
        TicketQuery(db)
        .search(q)
        .by_status(status)
        .by_priority(priority)
        .sort(parse_sort(sort, SORTABLE_FIELDS, DEFAULT_SORT))
    )
    with store_errors(db, "fetching tickets"):
        return paginate(query, params)


def get_ticket(db: Session, ticket_id: str) -> Ticket:
    with store_errors(db, "fetching ticket"):
        ticket = TicketQuery(db).by_id(ticket_id).first()
    if ticket is None:
        raise NotFoundError("Ticket not found")
    return ticket


def ticket_exists(db: Session, ticket_id: str) -> bool:
    with store_errors(db, "fetching ticket"):
        return TicketQuery(db).by_id(ticket_id).exists()


def create_ticket(db: Session, payload: TicketCreate) -> Ticket:
    db_ticket = Ticket(**payload.model_dump())
    with store_errors(db, "creating ticket"):
        db.add(db_ticket)
        db.commit()
        db.refresh(db_ticket)
    logger.info("Created ticket %s", db_ticket.id)
    return db_ticket


def update_ticket(db: Session, ticket_id: str, payload: TicketUpdate) -> Ticket:
    db_ticket = get_ticket(db, ticket_id)
    changes = payload.model_dump(exclude_unset=True)
    if not changes:
        return db_ticket
    try:
        for field, value in changes.items():
            setattr(db_ticket, field, value)
    except ValidationError:
        db.rollback()
        raise
    db_ticket.updated_at = utcnow()
    with store_errors(db, "updating ticket"):
        db.commit()
        db.refresh(db_ticket)
    logger.info("Updated ticket %s (%s)", db_ticket.id, ", ".join(sorted(changes)))
    return db_ticket


def delete_ticket(db: Session, ticket_id: str) -> None:
    # comments are left in place; they stay unreachable once the ticket is gone
    db_ticket = get_ticket(db, ticket_id)
    with store_errors(db, "deleting ticket"):
        db.delete(db_ticket)
        db.commit()
    logger.info("Deleted ticket %s", ticket_id)
