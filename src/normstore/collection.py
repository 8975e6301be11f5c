"""Named wrapper that binds a collection name to the store operations.

The wrapper owns no state. It carries the name a larger state container
files the collection under, and forwards every data operation to
``normstore.core.store`` unchanged.

Usage:
    todos = NormalizedCollection("todos")
    state = todos.get_default_state()
    state = todos.insert(state, {"id": 1, "title": "write docs"})
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import Any

from pyrsistent import PVector

from normstore.core import store
from normstore.core.errors import ConfigurationError
from normstore.core.list_iterator import ListIterator
from normstore.core.ordering import SortDirection
from normstore.core.policy import DuplicatePolicy
from normstore.core.state import Record, State
from normstore.core.updater import Updater, as_updater

_LOGGER = logging.getLogger(__name__)


class NormalizedCollection:
    """A named normalized collection.

    Args:
        name: Identifying name of the collection. Required and non-empty.
        on_duplicate: How ``insert`` treats an id that is already stored.

    Raises:
        ConfigurationError: If ``name`` is missing or empty.
    """

    __slots__ = ("_name", "_on_duplicate")

    def __init__(
        self,
        name: str | None = None,
        *,
        on_duplicate: DuplicatePolicy | str = DuplicatePolicy.UPSERT,
    ) -> None:
        if not isinstance(name, str) or not name:
            raise ConfigurationError("NormalizedCollection requires a non-empty name")
        try:
            policy = DuplicatePolicy(on_duplicate)
        except ValueError as exc:
            raise ConfigurationError(
                f"Unknown duplicate policy {on_duplicate!r} for collection {name!r}"
            ) from exc

        self._name = name
        self._on_duplicate = policy

    @property
    def name(self) -> str:
        return self._name

    @property
    def on_duplicate(self) -> DuplicatePolicy:
        return self._on_duplicate

    def __repr__(self) -> str:
        return (
            f"NormalizedCollection(name={self._name!r}, "
            f"on_duplicate={self._on_duplicate.value!r})"
        )

    def get_default_state(self) -> State:
        return store.get_default_state()

    def access_id(self, state: State, id_: Any) -> Record | None:
        return store.access_id(state, id_)

    def access_id_list(self, state: State) -> PVector:
        return store.access_id_list(state)

    def iterator(self, state: State) -> ListIterator[Any]:
        return store.iterator(state)

    def insert(self, state: State, entry: Mapping[str, Any]) -> State:
        id_ = entry.get("id") if isinstance(entry, Mapping) else None
        if id_ is not None and id_ in state.items_by_id:
            if self._on_duplicate is DuplicatePolicy.APPEND:
                _LOGGER.warning("%s: appending duplicate id %r to items", self._name, id_)
            else:
                _LOGGER.debug(
                    "%s: id %r already stored (policy %s)",
                    self._name,
                    id_,
                    self._on_duplicate.value,
                )
        _LOGGER.debug("%s: insert id %r", self._name, id_)
        return store.insert(state, entry, on_duplicate=self._on_duplicate)

    def update(
        self,
        state: State,
        ids: Iterable[Any],
        updater: Updater | Mapping[str, Any] | Callable[[Record], Any],
    ) -> State:
        ids = list(ids)
        _LOGGER.debug("%s: update %d id(s)", self._name, len(ids))
        return store.update(state, ids, as_updater(updater))

    def delete(self, state: State, ids: Iterable[Any]) -> State:
        ids = list(ids)
        _LOGGER.debug("%s: delete %d id(s)", self._name, len(ids))
        return store.delete(state, ids)

    def order(
        self,
        state: State,
        keys: Sequence[str],
        directions: Sequence[SortDirection | str],
    ) -> State:
        _LOGGER.debug("%s: order by %s %s", self._name, list(keys), list(directions))
        return store.order(state, keys, directions)
