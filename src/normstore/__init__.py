"""normstore: immutable normalized collections with structural sharing."""

from normstore.collection import NormalizedCollection
from normstore.core import (
    ConfigurationError,
    DuplicateIdError,
    DuplicatePolicy,
    IdentityChangedError,
    IteratorResult,
    ListIterator,
    MergePatch,
    MissingIdError,
    NormStoreError,
    Record,
    SortDirection,
    State,
    Transform,
    Updater,
    access_id,
    access_id_list,
    as_updater,
    delete,
    get_default_state,
    insert,
    iterator,
    merge,
    order,
    transform,
    update,
)

__all__ = [
    "NormalizedCollection",
    "State",
    "Record",
    "get_default_state",
    "access_id",
    "access_id_list",
    "iterator",
    "insert",
    "update",
    "delete",
    "order",
    "ListIterator",
    "IteratorResult",
    "MergePatch",
    "Transform",
    "Updater",
    "merge",
    "transform",
    "as_updater",
    "DuplicatePolicy",
    "SortDirection",
    "NormStoreError",
    "ConfigurationError",
    "MissingIdError",
    "DuplicateIdError",
    "IdentityChangedError",
]
