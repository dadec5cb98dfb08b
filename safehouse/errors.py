"""
Repository error taxonomy.

Every failure the repository surfaces to callers derives from
``RepositoryError`` so application code can catch the family at once.
"""
from __future__ import annotations


class RepositoryError(Exception):
    """Base repository error."""


class InvalidArgument(RepositoryError, ValueError):
    """Raised when a required dependency or input is missing or degenerate."""


class UnsupportedRecordKind(InvalidArgument):
    """Raised when a record type or stored discriminator is not a registered kind."""

    def __init__(self, kind):
        self.kind = kind
        name = kind.__name__ if isinstance(kind, type) else repr(kind)
        super().__init__(f"Unsupported record kind: {name}")


class NotFound(RepositoryError, LookupError):
    """Raised when an id does not resolve to a live entity."""


class ConstraintViolation(RepositoryError):
    """Raised when an insert breaks a uniqueness or foreign-key constraint."""


class OperationCancelled(RepositoryError):
    """Raised when a cancellation signal is observed."""
