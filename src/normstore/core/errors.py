"""Exceptions raised by the normalized store and its named wrapper."""

from __future__ import annotations

from typing import Any


class NormStoreError(Exception):
    """Base class for every normstore failure."""


class ConfigurationError(NormStoreError, ValueError):
    """Raised when a collection is constructed without an identifying name."""


class MissingIdError(NormStoreError, KeyError):
    """Raised when an entry entering the store has no ``id`` field."""


class DuplicateIdError(NormStoreError, KeyError):
    """Raised by ``insert`` under ``DuplicatePolicy.REJECT`` for a known id."""

    def __init__(self, id_: Any) -> None:
        super().__init__(id_)
        self.id = id_

    def __str__(self) -> str:
        return f"id {self.id!r} is already present in the collection"


class IdentityChangedError(NormStoreError, ValueError):
    """Raised when an update would store a record under a different ``id``."""

    def __init__(self, expected: Any, actual: Any) -> None:
        super().__init__(f"updater changed record id from {expected!r} to {actual!r}")
        self.expected = expected
        self.actual = actual


__all__ = [
    "ConfigurationError",
    "DuplicateIdError",
    "IdentityChangedError",
    "MissingIdError",
    "NormStoreError",
]
