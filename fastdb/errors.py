"""Exception hierarchy for FastDB.

Every failure that should reach the user is a :class:`FastDBError`; the
dispatcher prints its message and exits non-zero.
"""

from __future__ import annotations


class FastDBError(Exception):
    """Base class for all user-facing FastDB errors."""


class UsageError(FastDBError):
    """Missing ``--db``, unknown verb, or an argument skeleton mismatch."""


class TranslationError(FastDBError):
    """The schema token stream could not be turned into SQL."""

    def __init__(self, kind: str, detail: str = "") -> None:
        self.kind = kind
        super().__init__(f"{kind}: {detail}" if detail else kind)


class ExecutionError(FastDBError):
    """The database could not be opened or rejected a statement."""
