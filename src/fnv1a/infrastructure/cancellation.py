from __future__ import annotations

import threading

from fnv1a.core.errors import HarnessCancelled


class CancellationToken:
    """Cooperative cancel flag, safe to set from another thread."""

    def __init__(self) -> None:
        self._event = threading.Event()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def cancel(self) -> None:
        self._event.set()

    def raise_if_cancelled(self) -> None:
        if self._event.is_set():
            raise HarnessCancelled("Operation was cancelled.")
