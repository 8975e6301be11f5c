"""Pytest configuration and shared snapshots."""

from collections.abc import Callable, Iterable, Mapping
from typing import Any

import pytest

from normstore.core import State

SAMPLE_RECORDS = (
    {"id": 0, "data": "cooldata"},
    {"id": 1, "data": "verycooldata!"},
    {"id": 2, "data": "awesomedata"},
)


@pytest.fixture
def make_state() -> Callable[..., State]:
    """Factory for snapshots built straight from records, bypassing insert()."""

    def _make(records: Iterable[Mapping[str, Any]] = SAMPLE_RECORDS) -> State:
        return State.from_records(records)

    return _make


@pytest.fixture
def state(make_state) -> State:
    """Three-record snapshot with ids 0, 1, 2."""
    return make_state()
