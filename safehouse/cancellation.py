"""Cooperative cancellation signal shared between a caller and repository operations."""
from __future__ import annotations

import threading
from typing import Optional

from safehouse.errors import OperationCancelled


class CancellationToken:
    """A one-way flag; once cancelled it stays cancelled.

    Backed by ``threading.Event`` so a token may be signalled from another
    thread while an operation runs on the event loop.
    """

    def __init__(self, cancelled: bool = False):
        self._event = threading.Event()
        if cancelled:
            self._event.set()

    @classmethod
    def none(cls) -> "CancellationToken":
        """Return a token that is never cancelled."""
        return cls()

    def cancel(self) -> None:
        self._event.set()

    @property
    def is_cancelled(self) -> bool:
        return self._event.is_set()

    def raise_if_cancelled(self) -> None:
        if self._event.is_set():
            raise OperationCancelled("Operation was cancelled")


def ensure_token(token: Optional[CancellationToken]) -> CancellationToken:
    """Normalize an optional token argument."""
    return token if token is not None else CancellationToken.none()
