# app/comment/queries.py
from typing import Any, ClassVar

from app.comment.models import Comment
from app.core.query import BaseQuery, SortKey

NEWEST_FIRST = [SortKey("created_at", descending=True)]


class CommentQuery(BaseQuery[Comment]):
    model_class = Comment
    ordering_fields: ClassVar[dict[str, Any]] = {
        "created_at": Comment.created_at,
    }

    def for_ticket(self, ticket_id: str) -> "CommentQuery":
        return self.where(Comment.ticket_id == ticket_id)

    def newest_first(self) -> "CommentQuery":
        return self.sort(NEWEST_FIRST)
