"""Insert policies for ids that are already present."""

from enum import Enum


class DuplicatePolicy(Enum):
    """What ``insert`` does when the entry's id is already stored.

    UPSERT: Replace the stored record in place. The id keeps its position
            and ``items`` is reused.

    APPEND: Overwrite the stored record and append the id again, leaving a
            duplicate in ``items``. Kept for callers that relied on it.

    REJECT: Raise ``DuplicateIdError`` and leave the state untouched.
    """

    UPSERT = "upsert"
    APPEND = "append"
    REJECT = "reject"
