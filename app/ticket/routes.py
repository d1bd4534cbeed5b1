# app/ticket/routes.py
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from app.core.database import get_db
from app.core.pagination import PageParams, list_params
from app.core.schemas import Envelope, ListEnvelope, MessageEnvelope
from app.ticket.schemas import TicketCreate, TicketOut, TicketUpdate
from app.ticket import services as ticket_service
router = APIRouter(prefix="/tickets", tags=["Tickets"])


@router.post("", response_model=Envelope[TicketOut], status_code=201)
def create(ticket: TicketCreate, db: Session = Depends(get_db)):
    return {"data": ticket_service.create_ticket(db, ticket)}


@router.get("", response_model=ListEnvelope[TicketOut])
def list_all(
    q: str | None = Query(default=None, description="Substring to match in title or description"),
    status: str | None = Query(default=None, description="OPEN, IN_PROGRESS or RESOLVED"),
    priority: str | None = Query(default=None, description="LOW, MEDIUM or HIGH"),
    sort: str | None = Query(default=None, description="Comma separated fields, '-' prefix for descending"),
    params: PageParams = Depends(list_params),
    db: Session = Depends(get_db),
):
    items, pagination = ticket_service.list_tickets(
        db, params, q=q, status=status, priority=priority, sort=sort
    )
    return {"data": items, "pagination": pagination}


@router.get("/{ticket_id}", response_model=Envelope[TicketOut])
def get(ticket_id: str, db: Session = Depends(get_db)):
    return {"data": ticket_service.get_ticket(db, ticket_id)}


@router.patch("/{ticket_id}", response_model=Envelope[TicketOut])
def update(ticket_id: str, ticket: TicketUpdate, db: Session = Depends(get_db)):
    return {"data": ticket_service.update_ticket(db, ticket_id, ticket)}


@router.delete("/{ticket_id}", response_model=MessageEnvelope)
def delete(ticket_id: str, db: Session = Depends(get_db)):
    ticket_service.delete_ticket(db, ticket_id)
    return {"message": "Ticket deleted successfully"}
