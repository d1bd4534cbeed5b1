# app/core/query.py
"""Composable query builders shared by the ticket and comment modules.

A builder wraps a SQLAlchemy ``Query`` and exposes chainable filter, sort and
paging methods. Each method returns a copy, so a partially built query can be
reused (e.g. to count the full match set and to fetch one page of it).
"""

from typing import Any, ClassVar, Generic, NamedTuple, Self, TypeVar

from sqlalchemy import asc, desc
from sqlalchemy.orm import Query, Session

from app.core.errors import ValidationError

T = TypeVar("T")


class SortKey(NamedTuple):
    field: str
    descending: bool = False


def parse_sort(raw: str | None, allowed: dict[str, str], default: str) -> list[SortKey]:
    """Parse a comma separated sort spec such as ``-priority,createdAt``.

    ``allowed`` maps every accepted spelling to its canonical field name.
    Fields outside ``allowed`` raise ValidationError. Blank segments are
    skipped; a spec with no fields at all falls back to ``default``.
    """
    keys: list[SortKey] = []
    for segment in (raw or "").split(","):
        segment = segment.strip()
        descending = segment.startswith("-")
        name = segment[1:].strip() if descending else segment
        if not name:
            continue
        field = allowed.get(name)
        if field is None:
            raise ValidationError(
                f"Invalid sort field: {name}",
                error=f"Allowed fields: {', '.join(sorted(set(allowed.values())))}",
            )
        keys.append(SortKey(field, descending))
    if not keys and default:
        return parse_sort(default, allowed, "")
    return keys


class BaseQuery(Generic[T]):
    """Base class for composable query builders.

    Subclasses set ``model_class`` and ``ordering_fields`` (canonical field
    name -> column) and add their own filter methods.
    """

    model_class: type[T]
    ordering_fields: ClassVar[dict[str, Any]] = {}

    def __init__(self, db: Session):
        self.db = db
        self._query: Query = db.query(self.model_class)
        self._ordering: list = []
        self._limit: int | None = None
        self._offset: int = 0

    def _clone(self) -> Self:
        new = self.__class__.__new__(self.__class__)
        new.db = self.db
        new._query = self._query
        new._ordering = list(self._ordering)
        new._limit = self._limit
        new._offset = self._offset
        return new

    # Filters

    def by_id(self, id: str) -> Self:
        clone = self._clone()
        clone._query = clone._query.filter(self.model_class.id == id)
        return clone

    def where(self, *criteria) -> Self:
        clone = self._clone()
        clone._query = clone._query.filter(*criteria)
        return clone

    # Ordering

    def order_by(self, field: str, direction: str = "asc") -> Self:
        column = self.ordering_fields.get(field)
        if column is None:
            raise ValidationError(f"Invalid sort field: {field}")
        clone = self._clone()
        clone._ordering.append(desc(column) if direction.lower() == "desc" else asc(column))
        return clone

    def sort(self, keys: list[SortKey]) -> Self:
        clone = self
        for key in keys:
            clone = clone.order_by(key.field, "desc" if key.descending else "asc")
        return clone

    # Pagination

    def paginate(self, limit: int, offset: int = 0) -> Self:
        clone = self._clone()
        clone._limit = limit
        clone._offset = max(offset, 0)
        return clone

    # Execution

    def all(self) -> list[T]:
        query = self._query.order_by(*self._ordering, asc(self.model_class.id))
        if self._offset:
            query = query.offset(self._offset)
        if self._limit is not None:
            query = query.limit(self._limit)
        return query.all()

    def first(self) -> T | None:
        rows = self.paginate(1, self._offset).all()
        return rows[0] if rows else None

    def count(self) -> int:
        """Count every matching row, ignoring ordering and the page window."""
        return self._query.order_by(None).count()

    def exists(self) -> bool:
        return self.db.query(self._query.exists()).scalar()
