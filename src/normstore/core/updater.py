"""Updaters for ``update``: a shallow merge patch or a record transform."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from pyrsistent import freeze

from normstore.core.errors import IdentityChangedError
from normstore.core.state import Record, freeze_record


@dataclass(frozen=True)
class MergePatch:
    """Shallow-merge ``patch`` over each matching record."""

    patch: Mapping[str, Any]


@dataclass(frozen=True)
class Transform:
    """Replace each matching record with ``fn(record)``."""

    fn: Callable[[Record], Mapping[str, Any]]


Updater = MergePatch | Transform


def merge(patch: Mapping[str, Any]) -> MergePatch:
    """Build an updater that shallow-merges ``patch`` over each record."""
    if not isinstance(patch, Mapping):
        raise TypeError("merge patch must be a mapping")
    return MergePatch(patch=patch)


def transform(fn: Callable[[Record], Mapping[str, Any]]) -> Transform:
    """Build an updater that replaces each record with ``fn(record)``."""
    if not callable(fn):
        raise TypeError("transform must be callable")
    return Transform(fn=fn)


def as_updater(value: Updater | Mapping[str, Any] | Callable[[Record], Any]) -> Updater:
    """Coerce a raw mapping or callable into an Updater.

    Meant for call sites that accept loosely-typed input; the store itself
    only takes ``MergePatch`` or ``Transform``.
    """
    if isinstance(value, MergePatch | Transform):
        return value
    if isinstance(value, Mapping):
        return merge(value)
    if callable(value):
        return transform(value)
    raise TypeError(
        f"updater must be a mapping, a callable, MergePatch or Transform; "
        f"got {type(value).__name__}"
    )


def apply_updater(updater: Updater, record: Record) -> Record:
    """Return the record that ``updater`` makes of ``record``.

    Raises:
        IdentityChangedError: If the result carries a different ``id``.
        TypeError: If ``updater`` is neither variant.
    """
    match updater:
        case MergePatch(patch=patch):
            updated = record.update(freeze(dict(patch)))
        case Transform(fn=fn):
            updated = freeze_record(fn(record))
        case _:
            raise TypeError(f"expected MergePatch or Transform, got {type(updater).__name__}")

    if updated["id"] != record["id"]:
        raise IdentityChangedError(record["id"], updated["id"])
    return updated


__all__ = [
    "MergePatch",
    "Transform",
    "Updater",
    "apply_updater",
    "as_updater",
    "merge",
    "transform",
]
