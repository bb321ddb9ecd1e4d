"""Domain exceptions."""

from __future__ import annotations


class SessionTooShortError(ValueError):
    """Raised when a study timer is stopped before the minimum session length."""

    def __init__(self, elapsed_seconds: int, minimum_seconds: int) -> None:
        super().__init__(f"Session too short: {elapsed_seconds}s recorded, study for at least {minimum_seconds}s to save")
        self.elapsed_seconds = elapsed_seconds
        self.minimum_seconds = minimum_seconds


class BackendError(RuntimeError):
    """Raised when the hosted backend rejects or fails a query."""
