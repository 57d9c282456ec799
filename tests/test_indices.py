"""Tests for integer parsing and the index-selection mini-language."""

from __future__ import annotations

import pytest

from powerstrings.transforms.indices import (
    KeepAll,
    KeepRange,
    RemoveIndexes,
    normalize_index_spec,
    parse_index_spec,
    parse_int,
)

ABCD = ["a", "b", "c", "d"]


class TestParseInt:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("12", 12),
            ("12abc", 12),
            ("  -3", -3),
            ("+4", 4),
            ("007", 7),
            ("0x10", 0),
            ("abc", None),
            ("", None),
            ("-", None),
            ("1.9", 1),
        ],
    )
    def test_prefix_parsing(self, text: str, expected: int | None) -> None:
        assert parse_int(text) == expected


class TestParseIndexSpec:
    @pytest.mark.parametrize("raw", ["", "abc", "1-2-3", "   "])
    def test_malformed_is_noop(self, raw: str) -> None:
        assert parse_index_spec(raw).apply(ABCD) == ABCD

    def test_range_keeps_half_open_interval(self) -> None:
        assert parse_index_spec("0-2").apply(ABCD) == ["a", "b"]

    def test_list_removes_listed_indexes(self) -> None:
        assert parse_index_spec("1,3").apply(ABCD) == ["a", "c"]

    def test_single_index_removes_one(self) -> None:
        assert parse_index_spec("2").apply(ABCD) == ["a", "b", "d"]

    def test_spaces_and_line_breaks_ignored(self) -> None:
        assert parse_index_spec(" 1 ,\r\n 3\n").apply(ABCD) == ["a", "c"]
        assert normalize_index_spec(" 0 -\n2 ") == "0-2"

    def test_range_end_clamps_to_length(self) -> None:
        assert parse_index_spec("1-10").apply(ABCD) == ["b", "c", "d"]

    def test_range_with_missing_bound_uses_zero(self) -> None:
        assert parse_index_spec("1-").apply(ABCD) == []
        assert parse_index_spec("-2").apply(ABCD) == ["a", "b"]

    def test_out_of_range_index_is_noop(self) -> None:
        assert parse_index_spec("9").apply(ABCD) == ABCD

    def test_bad_list_entries_are_skipped(self) -> None:
        assert parse_index_spec("1,x,3").apply(ABCD) == ["a", "c"]
        assert parse_index_spec("1,,").apply(ABCD) == ["a", "c", "d"]

    def test_duplicate_indexes_remove_once(self) -> None:
        assert parse_index_spec("1,1").apply(ABCD) == ["a", "c", "d"]

    def test_selection_types(self) -> None:
        assert isinstance(parse_index_spec("x"), KeepAll)
        assert parse_index_spec("1-3") == KeepRange(start=1, end=3)
        assert parse_index_spec("0,2") == RemoveIndexes(indexes=(0, 2))

    def test_input_not_mutated(self) -> None:
        original = list(ABCD)
        result = parse_index_spec("0").apply(original)
        assert original == ABCD
        assert result is not original
