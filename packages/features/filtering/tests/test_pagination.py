"""Tests for PaginationParser."""

from __future__ import annotations

import pytest

from querykit_core.paging import PageRequest
from querykit_filtering import FieldNotAllowedError, FieldWhitelist, PaginationParser


@pytest.fixture
def parser() -> PaginationParser:
    return PaginationParser()


def test_parse_offset_limit(parser) -> None:
    r = parser.parse({"offset": "20", "limit": "10"})
    assert r == PageRequest(20, 10)


def test_defaults(parser) -> None:
    assert parser.parse({}) == PageRequest(0, 20)
    assert parser.parse({}, default_limit=5).limit == 5


@pytest.mark.parametrize(
    ("params", "expected"),
    [
        ({"offset": "-5"}, PageRequest(0, 20)),
        ({"offset": "abc"}, PageRequest(0, 20)),
        ({"limit": "0"}, PageRequest(0, 1)),
        ({"limit": "-3"}, PageRequest(0, 1)),
        ({"limit": "500"}, PageRequest(0, 100)),
        ({"limit": "many"}, PageRequest(0, 20)),
    ],
)
def test_values_are_clamped_or_defaulted(parser, params, expected) -> None:
    assert parser.parse(params) == expected


def test_max_limit_is_configurable(parser) -> None:
    assert parser.parse({"limit": "80"}, max_limit=50).limit == 50


def test_page_and_size(parser) -> None:
    r = parser.parse({"page": "2", "size": "15"})
    assert (r.offset, r.limit) == (30, 15)
    assert r.page_number == 2


def test_offset_wins_over_page(parser) -> None:
    assert parser.parse({"offset": "7", "page": "3", "limit": "5"}).offset == 7


def test_sort(parser) -> None:
    r = parser.parse({"sort": "-age, username,,-"})
    assert r.order_by == ("-age", "username")


def test_sort_list_value(parser) -> None:
    assert PaginationParser.parse_sort(["age", " -id "]) == ("age", "-id")


def test_sort_whitelist(parser) -> None:
    whitelist = FieldWhitelist(sortable_fields={"age", "username"})

    assert parser.parse({"sort": "-age"}, whitelist=whitelist).order_by == ("-age",)
    with pytest.raises(FieldNotAllowedError):
        parser.parse({"sort": "password"}, whitelist=whitelist)


def test_rejected_sort_field_is_reported_under_the_sort_param(parser) -> None:
    whitelist = FieldWhitelist(sortable_fields=["age"])

    with pytest.raises(FieldNotAllowedError) as exc_info:
        parser.parse({"sort": "age,-secret"}, whitelist=whitelist)

    assert exc_info.value.field == "secret"
    assert exc_info.value.messages_for("sort") == ["Field 'secret' is not sortable"]


def test_empty_whitelist_rejects_everything() -> None:
    assert not FieldWhitelist().is_sortable("age")
