"""Immutable normalized collection store.

Redux-style architecture where every operation is a pure function:
    Operation(Current_State, ...) -> Next_State

A State separates the ordered ids from the id -> record lookup, and each
operation passes untouched containers through by reference so callers can
use identity as a cheap change check.
"""

from normstore.core.errors import (
    ConfigurationError,
    DuplicateIdError,
    IdentityChangedError,
    MissingIdError,
    NormStoreError,
)
from normstore.core.list_iterator import IteratorResult, ListIterator
from normstore.core.ordering import SortDirection
from normstore.core.policy import DuplicatePolicy
from normstore.core.state import Record, State
from normstore.core.store import (
    access_id,
    access_id_list,
    delete,
    get_default_state,
    insert,
    iterator,
    order,
    update,
)
from normstore.core.updater import (
    MergePatch,
    Transform,
    Updater,
    as_updater,
    merge,
    transform,
)

__all__ = [
    "State",
    "Record",
    # Operations
    "get_default_state",
    "access_id",
    "access_id_list",
    "iterator",
    "insert",
    "update",
    "delete",
    "order",
    # Iteration
    "ListIterator",
    "IteratorResult",
    # Updaters
    "MergePatch",
    "Transform",
    "Updater",
    "merge",
    "transform",
    "as_updater",
    # Modes
    "DuplicatePolicy",
    "SortDirection",
    # Errors
    "NormStoreError",
    "ConfigurationError",
    "MissingIdError",
    "DuplicateIdError",
    "IdentityChangedError",
]
