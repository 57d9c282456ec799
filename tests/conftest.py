"""Shared fixtures for powerstrings tests."""

from __future__ import annotations

import pytest

from powerstrings.core.pipeline import Pipeline
from powerstrings.transforms.catalog import CATALOG

inv = CATALOG.invoke


@pytest.fixture
def csv_rows() -> str:
    """Three comma-separated rows, one per line."""
    return "b,a,c\n10,2,1\n z , y , x "


@pytest.fixture
def nested_rows() -> list[list[str]]:
    return [["b", "a", "c"], ["10", "2", "1"]]


@pytest.fixture
def split_sort_join() -> Pipeline:
    """Split lines, split cells, sort each row, join rows back with '|'."""
    return Pipeline([
        inv("split", "\n"),
        inv("split", ","),
        inv("trim"),
        inv("sort"),
        inv("join", "|"),
    ])


@pytest.fixture
def empty_pipeline() -> Pipeline:
    return Pipeline()
