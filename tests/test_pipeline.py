"""Tests for TransformerInvocation and the Pipeline container."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from powerstrings.core.ir import TransformerInvocation
from powerstrings.core.pipeline import Pipeline
from powerstrings.transforms.catalog import CATALOG

inv = CATALOG.invoke


class TestInvocation:
    def test_argument_count_enforced(self) -> None:
        with pytest.raises(ValidationError, match="expects 1 argument"):
            TransformerInvocation(definition=CATALOG.lookup("split"), arguments=())

    def test_arguments_stored_as_tuple(self) -> None:
        invocation = TransformerInvocation(definition=CATALOG.lookup("join"), arguments=["-"])
        assert invocation.arguments == ("-",)

    def test_definition_is_shared_not_copied(self) -> None:
        assert inv("trim").definition is CATALOG.lookup("trim")

    def test_with_arguments_builds_new_invocation(self) -> None:
        original = inv("split", ",")
        edited = original.with_arguments([";"])
        assert edited.arguments == (";",)
        assert original.arguments == (",",)
        assert edited.definition is original.definition

    def test_with_arguments_still_checks_count(self) -> None:
        with pytest.raises(ValidationError):
            inv("split", ",").with_arguments([])

    def test_describe(self) -> None:
        assert inv("split", ",").describe() == "split(',')"
        assert inv("trim").describe() == "trim()"


class TestPipelineBasics:
    def test_empty(self, empty_pipeline: Pipeline) -> None:
        assert len(empty_pipeline) == 0
        assert empty_pipeline.ids() == []

    def test_append_keeps_order(self, empty_pipeline: Pipeline) -> None:
        empty_pipeline.append(inv("trim"))
        empty_pipeline.append(inv("split", ","))
        assert empty_pipeline.ids() == ["trim", "split"]
        assert empty_pipeline[1].arguments == (",",)

    def test_update_arguments(self, split_sort_join: Pipeline) -> None:
        updated = split_sort_join.update_arguments(4, ["+"])
        assert split_sort_join[4] is updated
        assert split_sort_join[4].arguments == ("+",)
        assert split_sort_join.ids()[4] == "join"

    def test_remove(self, split_sort_join: Pipeline) -> None:
        removed = split_sort_join.remove(2)
        assert removed.transformer_id == "trim"
        assert split_sort_join.ids() == ["split", "split", "sort", "join"]

    def test_remove_out_of_range(self, empty_pipeline: Pipeline) -> None:
        with pytest.raises(IndexError):
            empty_pipeline.remove(0)

    def test_clear_and_replace(self, split_sort_join: Pipeline) -> None:
        split_sort_join.clear()
        assert len(split_sort_join) == 0
        split_sort_join.replace([inv("reverse")])
        assert split_sort_join.ids() == ["reverse"]


class TestPipelineEquality:
    def test_equal_when_same_steps(self) -> None:
        a = Pipeline([inv("split", ","), inv("sort")])
        b = Pipeline([inv("split", ","), inv("sort")])
        assert a == b

    def test_order_matters(self) -> None:
        a = Pipeline([inv("sort"), inv("reverse")])
        b = Pipeline([inv("reverse"), inv("sort")])
        assert a != b

    def test_arguments_matter(self) -> None:
        assert Pipeline([inv("join", "-")]) != Pipeline([inv("join", "+")])

    def test_clone_is_independent(self, split_sort_join: Pipeline) -> None:
        copy = split_sort_join.clone()
        copy.remove(0)
        assert len(split_sort_join) == 5
        assert len(copy) == 4

    def test_iteration_is_a_snapshot(self, split_sort_join: Pipeline) -> None:
        seen = []
        for invocation in split_sort_join:
            seen.append(invocation.transformer_id)
            split_sort_join.clear()
        assert seen == ["split", "split", "trim", "sort", "join"]
