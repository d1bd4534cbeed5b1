# app/comment/routes.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.comment.schemas import CommentCreate, CommentOut
from app.comment import services as comment_service
from app.core.database import get_db
from app.core.pagination import PageParams, list_params
from app.core.schemas import Envelope, ListEnvelope
router = APIRouter(prefix="/tickets/{ticket_id}/comments", tags=["Comments"])


@router.get("", response_model=ListEnvelope[CommentOut])
def list_for_ticket(
    ticket_id: str,
    params: PageParams = Depends(list_params),
    db: Session = Depends(get_db),
):
    items, pagination = comment_service.list_comments(db, ticket_id, params)
    return {"data": items, "pagination": pagination}


@router.post("", response_model=Envelope[CommentOut], status_code=201)
def create(ticket_id: str, comment: CommentCreate, db: Session = Depends(get_db)):
    return {"data": comment_service.create_comment(db, ticket_id, comment)}
