"""Tests for the todo-list reducer example."""

from __future__ import annotations

import pytest

from normstore.examples.todo_list import TodoAction, reduce_todos, replay


def _add(id_: int, title: str, priority: int = 0) -> TodoAction:
    return TodoAction("add", {"id": id_, "title": title, "priority": priority})


def test_replay_builds_expected_state():
    state = replay(
        [
            _add(1, "write docs", priority=1),
            _add(2, "ship it", priority=3),
            _add(3, "celebrate", priority=2),
            TodoAction("toggle", {"ids": [2]}),
            TodoAction("rename", {"id": 1, "title": "write better docs"}),
        ]
    )

    assert list(state.items) == [1, 2, 3]
    assert state.items_by_id[2]["done"] is True
    assert state.items_by_id[1]["title"] == "write better docs"


def test_clear_done_removes_completed():
    state = replay([_add(1, "a"), _add(2, "b"), TodoAction("toggle", {"ids": [1]})])

    cleared = reduce_todos(state, TodoAction("clear_done"))

    assert list(cleared.items) == [2]
    assert list(state.items) == [1, 2]


def test_sort_by_priority_then_title():
    state = replay([_add(1, "b", 1), _add(2, "a", 1), _add(3, "c", 5)])

    sorted_state = reduce_todos(
        state, TodoAction("sort", {"keys": ["priority", "title"], "directions": ["desc", "asc"]})
    )

    assert list(sorted_state.items) == [3, 2, 1]
    assert sorted_state.items_by_id is state.items_by_id


def test_toggle_keeps_items_reference():
    state = replay([_add(1, "a")])

    toggled = reduce_todos(state, TodoAction("toggle", {"ids": [1]}))

    assert toggled.items is state.items
    assert toggled.items_by_id is not state.items_by_id


def test_none_state_starts_empty():
    state = reduce_todos(None, _add(1, "first"))

    assert list(state.items) == [1]


def test_empty_replay_returns_default_state():
    assert list(replay([]).items) == []


def test_unknown_action_raises():
    with pytest.raises(ValueError, match="Unknown todo action"):
        reduce_todos(None, TodoAction("archive"))  # type: ignore[arg-type]
