"""Multi-key stable ordering of ids by record fields."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from enum import Enum
from typing import Any

_MISSING = object()


class SortDirection(Enum):
    """Per-key sort direction. Accepts the plain tokens ``"asc"``/``"desc"``."""

    ASC = "asc"
    DESC = "desc"

    @property
    def reverse(self) -> bool:
        return self is SortDirection.DESC


SortPlan = list[tuple[str, SortDirection]]


def sort_plan(keys: Sequence[str], directions: Sequence[SortDirection | str]) -> SortPlan:
    """Pair each key with its direction, most significant first.

    Raises:
        ValueError: On mismatched lengths or an unknown direction token.
    """
    keys = list(keys)
    directions = list(directions)
    if len(keys) != len(directions):
        raise ValueError(
            f"order() needs one direction per key; got {len(keys)} keys "
            f"and {len(directions)} directions"
        )

    plan: SortPlan = []
    for key, direction in zip(keys, directions, strict=True):
        try:
            plan.append((key, SortDirection(direction)))
        except ValueError as exc:
            raise ValueError(
                f"Unknown sort direction {direction!r} for key {key!r}; use 'asc' or 'desc'"
            ) from exc
    return plan


def _field_key(
    resolve: Callable[[Any], Any], key: str, direction: SortDirection
) -> Callable[[Any], tuple[bool, Any]]:
    # Missing fields and None values sort last in both directions.
    def sort_key(id_: Any) -> tuple[bool, Any]:
        record = resolve(id_)
        value = _MISSING if record is None else record.get(key, _MISSING)
        if value is _MISSING or value is None:
            return (not direction.reverse, None)
        return (direction.reverse, value)

    return sort_key


def sort_ids(ids: Iterable[Any], resolve: Callable[[Any], Any], plan: SortPlan) -> list[Any]:
    """Return ``ids`` sorted by the resolved records' fields.

    One stable pass per key, least significant first, so ties on a key keep
    the order established by the keys after it and full ties keep their
    input order.
    """
    ordered = list(ids)
    for key, direction in reversed(plan):
        ordered.sort(key=_field_key(resolve, key, direction), reverse=direction.reverse)
    return ordered
