# app/comment/services.py
import logging

from sqlalchemy.orm import Session

from app.comment.models import Comment
from app.comment.queries import CommentQuery
from app.comment.schemas import CommentCreate
from app.core.database import store_errors
from app.core.errors import NotFoundError
from app.core.pagination import PageParams, paginate
from app.core.schemas import Pagination
from app.ticket.services import ticket_exists

logger = logging.getLogger(__name__)


def _require_ticket(db: Session, ticket_id: str) -> None:
    # advisory: a concurrent delete can still slip in before the write
    if not ticket_exists(db, ticket_id):
        raise NotFoundError("Ticket not found")


def list_comments(db: Session, ticket_id: str, params: PageParams) -> tuple[list[Comment], Pagination]:
    _require_ticket(db, ticket_id)
    query = CommentQuery(db).for_ticket(ticket_id).newest_first()
    with store_errors(db, "fetching comments"):
        return paginate(query, params)


def create_comment(db: Session, ticket_id: str, payload: CommentCreate) -> Comment:
    _require_ticket(db, ticket_id)
    db_comment = Comment(ticket_id=ticket_id, **payload.model_dump())
    with store_errors(db, "creating comment"):
        db.add(db_comment)
        db.commit()
        db.refresh(db_comment)
    logger.info("Added comment %s to ticket %s", db_comment.id, ticket_id)
    return db_comment
