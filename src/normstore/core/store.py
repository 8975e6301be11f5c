"""Pure operations over normalized collection snapshots.

Every function takes a State and returns a new State; the input is never
modified. Containers an operation leaves alone are passed through by
reference, so callers can detect change with ``is``:

    update  -> same ``items``; ``items_by_id`` reused unless some record compares unequal
    order   -> same ``items_by_id``
    insert  -> new ``items`` and ``items_by_id`` (upsert keeps ``items``)
    delete  -> new ``items`` and ``items_by_id``, even when nothing matched
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from pyrsistent import PVector, pmap, pvector

from normstore.core.errors import DuplicateIdError
from normstore.core.list_iterator import ListIterator
from normstore.core.ordering import SortDirection, sort_ids, sort_plan
from normstore.core.policy import DuplicatePolicy
from normstore.core.state import Record, State, freeze_record
from normstore.core.updater import Updater, apply_updater


def get_default_state() -> State:
    """Return a new, empty State."""
    return State()


def access_id(state: State, id_: Any) -> Record | None:
    """Return the record stored under ``id_``, or None if there is none."""
    return state.items_by_id.get(id_)


def access_id_list(state: State) -> PVector:
    """Return the ordered ids of ``state`` (the stored vector, not a copy)."""
    return state.items


def iterator(state: State) -> ListIterator[Any]:
    """Return an iterator over the records of ``state`` in ``items`` order."""
    return ListIterator(state.items, state.items_by_id.get)


def insert(
    state: State,
    entry: Mapping[str, Any],
    *,
    on_duplicate: DuplicatePolicy = DuplicatePolicy.UPSERT,
) -> State:
    """Return a new state with ``entry`` stored under its id.

    A new id is appended to the end of ``items``. An id that is already
    stored is handled according to ``on_duplicate``.

    Raises:
        MissingIdError: If ``entry`` has no ``id``.
        DuplicateIdError: If the id exists and the policy is REJECT.
    """
    record = freeze_record(entry)
    id_ = record["id"]
    exists = id_ in state.items_by_id
    if exists and on_duplicate is DuplicatePolicy.REJECT:
        raise DuplicateIdError(id_)

    items_by_id = state.items_by_id.set(id_, record)
    if exists and on_duplicate is DuplicatePolicy.UPSERT:
        return state.set(items_by_id=items_by_id)
    return state.set(items=state.items.append(id_), items_by_id=items_by_id)


def update(state: State, ids: Iterable[Any], updater: Updater) -> State:
    """Return a new state with ``updater`` applied to each record in ``ids``.

    ``items`` is always reused. Unknown ids are skipped, and an id listed
    more than once is updated once. A result equal to the stored record is
    not written, so when every result compares equal to its record (or no
    id matched) the new state reuses ``items_by_id`` as well.

    Raises:
        IdentityChangedError: If an updated record would change its id.
    """
    records = state.items_by_id
    evolver = records.evolver()
    for id_ in dict.fromkeys(ids):
        record = records.get(id_)
        if record is None:
            continue
        updated = apply_updater(updater, record)
        if updated != record:
            evolver[id_] = updated

    if not evolver.is_dirty():
        return state.set(items_by_id=records)
    return state.set(items_by_id=evolver.persistent())


def delete(state: State, ids: Iterable[Any]) -> State:
    """Return a new state without the records in ``ids``.

    Remaining ids keep their relative order and unknown ids are ignored.
    Both containers are rebuilt even if nothing was removed, so compare
    contents rather than identity to detect a no-op delete.
    """
    doomed = set(ids)
    items = pvector(id_ for id_ in state.items if id_ not in doomed)
    items_by_id = pmap(
        {id_: record for id_, record in state.items_by_id.items() if id_ not in doomed}
    )
    return state.set(items=items, items_by_id=items_by_id)


def order(
    state: State,
    keys: Sequence[str],
    directions: Sequence[SortDirection | str],
) -> State:
    """Return a new state whose ids are sorted by record fields.

    Args:
        state: The snapshot to reorder.
        keys: Record field names, most significant first.
        directions: One ``"asc"``/``"desc"`` token (or SortDirection) per key.

    The sort is stable, so records tied on every key keep their current
    relative order and repeating the same ``order`` call changes nothing.
    Records missing a key, or holding None for it, sort after those that
    have a value.

    Raises:
        ValueError: On mismatched ``keys``/``directions`` or an unknown token.
    """
    plan = sort_plan(keys, directions)
    ordered = sort_ids(state.items, state.items_by_id.get, plan)
    return state.set(items=pvector(ordered))


__all__ = [
    "access_id",
    "access_id_list",
    "delete",
    "get_default_state",
    "insert",
    "iterator",
    "order",
    "update",
]
