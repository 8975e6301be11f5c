"""Example reducers built on NormalizedCollection."""

from normstore.examples.todo_list import TODOS, TodoAction, reduce_todos, replay

__all__ = ["TODOS", "TodoAction", "reduce_todos", "replay"]
