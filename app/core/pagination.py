# app/core/pagination.py
import math
from typing import NamedTuple, TypeVar

from fastapi import Query

from app.core.config import get_settings
from app.core.query import BaseQuery
from app.core.schemas import Pagination

T = TypeVar("T")


class PageParams(NamedTuple):
    page: int
    limit: int

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


def coerce_positive_int(raw: str | int | None, default: int) -> int:
    """Best-effort conversion of a query value to a positive int.

    Missing, non-integer, zero and negative values all yield ``default``.
    """
    if raw is None or isinstance(raw, bool):
        return default
    if isinstance(raw, int):
        value = raw
    else:
        try:
            value = int(str(raw).strip())
        except ValueError:
            return default
    return value if value >= 1 else default


def page_params(page: str | int | None = None, limit: str | int | None = None) -> PageParams:
    settings = get_settings()
    size = coerce_positive_int(limit, settings.DEFAULT_PAGE_LIMIT)
    return PageParams(
        page=coerce_positive_int(page, 1),
        limit=min(size, settings.MAX_PAGE_LIMIT),
    )


def list_params(
    page: str | None = Query(default=None, description="1-indexed page number"),
    limit: str | None = Query(default=None, description="Page size"),
) -> PageParams:
    """Query-string dependency; malformed values fall back to the defaults."""
    return page_params(page, limit)


def build_pagination(params: PageParams, total: int) -> Pagination:
    total_pages = math.ceil(total / params.limit) if total else 0
    return Pagination(page=params.page, limit=params.limit, total=total, total_pages=total_pages)


def paginate(query: BaseQuery[T], params: PageParams) -> tuple[list[T], Pagination]:
    """Fetch one page of ``query`` along with metadata for the full match set."""
    total = query.count()
    # past the last row; also keeps huge offsets away from the database
    if params.offset >= total:
        return [], build_pagination(params, total)
    items = query.paginate(params.limit, params.offset).all()
    return items, build_pagination(params, total)
