"""Unit tests for operand helpers."""

from __future__ import annotations

import pytest

from memdb.domain.value_objects import WhereClause, split_list


@pytest.mark.unit
class TestSplitList:
    """Tests for split_list."""

    def test_splits_on_comma_space(self) -> None:
        assert split_list("id, name, age") == ["id", "name", "age"]

    def test_bare_comma_is_not_a_separator(self) -> None:
        """Only the literal ', ' separates items."""
        assert split_list("a,b, c") == ["a,b", "c"]

    def test_single_item(self) -> None:
        assert split_list("name") == ["name"]


@pytest.mark.unit
class TestWhereClause:
    """Tests for WhereClause."""

    def test_parse(self) -> None:
        clause = WhereClause.parse("id = 1")

        assert clause == WhereClause(column="id", value="1")

    def test_parse_keeps_second_part_only(self) -> None:
        """Extra separators after the value are ignored."""
        clause = WhereClause.parse("a = b = c")

        assert clause.column == "a"
        assert clause.value == "b"

    def test_parse_without_separator(self) -> None:
        """A clause with no ' = ' filters on a missing value."""
        clause = WhereClause.parse("id")

        assert clause.value is None
        assert clause.matches({"name": "Ann"})
        assert not clause.matches({"id": "1"})

    def test_matches_uses_string_equality(self) -> None:
        clause = WhereClause.parse("id = 1")

        assert clause.matches({"id": "1"})
        assert not clause.matches({"id": "01"})
        assert not clause.matches({"name": "1"})
