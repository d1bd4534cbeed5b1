# tests/test_query.py
import pytest

from app.core.errors import ValidationError
from app.core.pagination import PageParams, build_pagination, coerce_positive_int, page_params
from app.core.query import SortKey, parse_sort
from app.ticket.queries import DEFAULT_SORT, SORTABLE_FIELDS, escape_like


def test_parse_sort_default_is_newest_first():
    assert parse_sort(None, SORTABLE_FIELDS, DEFAULT_SORT) == [SortKey("created_at", True)]
    assert parse_sort("", SORTABLE_FIELDS, DEFAULT_SORT) == [SortKey("created_at", True)]
    assert parse_sort(" , ,", SORTABLE_FIELDS, DEFAULT_SORT) == [SortKey("created_at", True)]


def test_parse_sort_keeps_order_and_direction():
    keys = parse_sort("-priority, title,updatedAt", SORTABLE_FIELDS, DEFAULT_SORT)
    assert keys == [
        SortKey("priority", True),
        SortKey("title", False),
        SortKey("updated_at", False),
    ]


def test_parse_sort_accepts_snake_case():
    assert parse_sort("-created_at", SORTABLE_FIELDS, DEFAULT_SORT) == [SortKey("created_at", True)]


@pytest.mark.parametrize("raw", ["password", "-id", "title,-$where", "priority,createdat"])
def test_parse_sort_rejects_unknown_fields(raw):
    with pytest.raises(ValidationError):
        parse_sort(raw, SORTABLE_FIELDS, DEFAULT_SORT)


@pytest.mark.parametrize(
    "raw,expected",
    [
        (None, 10),
        ("", 10),
        ("abc", 10),
        ("2.5", 10),
        ("0", 10),
        ("-3", 10),
        (-3, 10),
        (" 7 ", 7),
        ("25", 25),
        (4, 4),
    ],
)
def test_coerce_positive_int(raw, expected):
    assert coerce_positive_int(raw, 10) == expected


def test_page_params_defaults_and_cap():
    assert page_params() == PageParams(page=1, limit=10)
    assert page_params("3", "5") == PageParams(page=3, limit=5)
    assert page_params("x", "100000").limit == 100
    assert PageParams(page=3, limit=5).offset == 10


@pytest.mark.parametrize(
    "total,limit,pages",
    [(0, 10, 0), (1, 10, 1), (10, 10, 1), (11, 10, 2), (7, 3, 3)],
)
def test_build_pagination_total_pages(total, limit, pages):
    meta = build_pagination(PageParams(page=1, limit=limit), total)
    assert meta.total == total
    assert meta.total_pages == pages


def test_escape_like():
    assert escape_like("50%_off\\") == "50\\%\\_off\\\\"
