"""Todo-list reducer built on a named normalized collection."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any, Literal

from normstore.collection import NormalizedCollection
from normstore.core.state import State

TODOS = NormalizedCollection("todos")

ActionKind = Literal["add", "toggle", "rename", "clear_done", "sort"]


@dataclass(frozen=True)
class TodoAction:
    """One dispatched action. ``payload`` depends on ``kind``."""

    kind: ActionKind
    payload: dict[str, Any] = field(default_factory=dict)


def _toggle(todo: Any) -> Any:
    return todo.set("done", not todo.get("done", False))


def reduce_todos(state: State | None, action: TodoAction) -> State:
    """Apply one action to the todo collection and return the next state."""
    if state is None:
        state = TODOS.get_default_state()

    payload = action.payload
    match action.kind:
        case "add":
            return TODOS.insert(
                state,
                {
                    "id": payload["id"],
                    "title": payload["title"],
                    "priority": payload.get("priority", 0),
                    "done": False,
                },
            )
        case "toggle":
            return TODOS.update(state, payload["ids"], _toggle)
        case "rename":
            return TODOS.update(state, [payload["id"]], {"title": payload["title"]})
        case "clear_done":
            done = [todo["id"] for todo in TODOS.iterator(state) if todo["done"]]
            return TODOS.delete(state, done)
        case "sort":
            return TODOS.order(state, payload["keys"], payload["directions"])
    raise ValueError(f"Unknown todo action {action.kind!r}")


def replay(actions: Iterable[TodoAction], state: State | None = None) -> State:
    """Fold ``actions`` over ``state`` and return the final snapshot."""
    for action in actions:
        state = reduce_todos(state, action)
    return state if state is not None else TODOS.get_default_state()
