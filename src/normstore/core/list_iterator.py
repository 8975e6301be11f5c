"""Forward-only iterator over a snapshot's ids."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, Generic, NamedTuple, TypeVar

T = TypeVar("T")


class IteratorResult(NamedTuple):
    """One advance of a ListIterator."""

    value: Any
    done: bool


class ListIterator(Generic[T]):
    """Walks a sequence once, optionally resolving each element on advance.

    ``next()`` marks the advance that yields the last element as done, and
    every advance after that yields ``IteratorResult(None, True)``. The
    Python iterator protocol shares the same position, so mixing the two
    styles consumes the same elements.

    Not safe to advance from several threads without external locking.
    """

    __slots__ = ("_sequence", "_resolve", "_index")

    def __init__(
        self,
        sequence: Sequence[T],
        resolve: Callable[[T], Any] | None = None,
    ) -> None:
        self._sequence = sequence
        self._resolve = resolve
        self._index = 0

    @property
    def exhausted(self) -> bool:
        """True once every element has been yielded."""
        return self._index >= len(self._sequence)

    def next(self) -> IteratorResult:
        """Advance one element and report whether it was the last one."""
        length = len(self._sequence)
        if self._index >= length:
            return IteratorResult(None, True)

        element = self._sequence[self._index]
        self._index += 1
        value = self._resolve(element) if self._resolve is not None else element
        return IteratorResult(value, self._index >= length)

    def __iter__(self) -> ListIterator[T]:
        return self

    def __next__(self) -> Any:
        if self.exhausted:
            raise StopIteration
        return self.next().value

    def __repr__(self) -> str:
        return f"ListIterator(position={self._index}, length={len(self._sequence)})"
