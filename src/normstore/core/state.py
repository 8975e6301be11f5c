"""Immutable snapshot of a normalized collection.

The core data structure for the Redux-style store.
All store operations produce new State instances.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from pyrsistent import PClass, PMap, PVector, field, freeze, pmap, pvector

from normstore.core.errors import MissingIdError

Record = PMap
"""A stored record: a frozen mapping carrying at least an ``id`` key."""


def freeze_record(entry: Mapping[str, Any]) -> Record:
    """Deep-freeze ``entry`` into a stored record.

    Raises:
        TypeError: If ``entry`` is not a mapping.
        MissingIdError: If ``entry`` has no ``id`` key.
    """
    if not isinstance(entry, Mapping):
        raise TypeError(f"record must be a mapping, got {type(entry).__name__}")
    if "id" not in entry:
        raise MissingIdError("record has no 'id' field")
    return freeze(dict(entry))


class State(PClass):
    """Immutable snapshot of a normalized collection at a point in time.

    A PClass rather than a PRecord: a PRecord is a Mapping, and its
    ``items()`` method would shadow the ``items`` field.

    Attributes:
        items: Ordered identifiers. Order is significant.
        items_by_id: Immutable mapping of identifier to record.
    """

    items = field(type=PVector, initial=pvector())
    items_by_id = field(type=PMap, initial=pmap())

    @classmethod
    def from_records(cls, records: Iterable[Mapping[str, Any]]) -> State:
        """Build a state holding ``records`` in iteration order.

        A later record with an id already seen replaces the earlier one and
        keeps the first position of that id.
        """
        ids: list[Any] = []
        by_id: dict[Any, Record] = {}
        for entry in records:
            record = freeze_record(entry)
            id_ = record["id"]
            if id_ not in by_id:
                ids.append(id_)
            by_id[id_] = record
        return cls(items=pvector(ids), items_by_id=pmap(by_id))
