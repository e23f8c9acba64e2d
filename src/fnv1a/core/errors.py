from __future__ import annotations


class InvalidConfiguration(ValueError):
    """Raised when hash parameters or config values cannot be used."""


class InsufficientCapacity(ValueError):
    """Raised when a finalize target buffer is too small for the digest."""

    def __init__(self, required: int, available: int) -> None:
        super().__init__(
            f"Destination buffer holds {available} bytes, digest needs {required}."
        )
        self.required = required
        self.available = available


class HarnessCancelled(Exception):
    """Raised by the vector harness when its cancellation token is set."""
