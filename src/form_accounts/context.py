"""
Per-call execution context.

A RequestContext carries an optional deadline and a cancellation flag for a
single client call. The transport checks it before sending and derives the
socket timeout from it; a request already on the wire cannot be interrupted
with requests, so the deadline bounds its timeout instead.
"""

import threading
import time


class ContextError(Exception):
    """Base class for context termination reasons."""

    pass


class Cancelled(ContextError):
    """Context was cancelled by the caller."""

    def __init__(self) -> None:
        super().__init__("context canceled")


class DeadlineExceeded(ContextError):
    """Context deadline passed."""

    def __init__(self) -> None:
        super().__init__("context deadline exceeded")


class RequestContext:
    """
    Cancellation and deadline holder for one call.

    Safe to share between threads: cancel() may be called from any thread
    while another one is issuing a request with the same context.
    """

    def __init__(self, timeout: float | None = None):
        """
        Args:
            timeout: Seconds from now until the deadline, or None for no deadline
        """
        self._deadline: float | None = None
        if timeout is not None:
            self._deadline = time.monotonic() + timeout
        self._cancelled = threading.Event()

    @classmethod
    def background(cls) -> "RequestContext":
        """Context with no deadline that is never cancelled by itself."""
        return cls()

    @property
    def deadline(self) -> float | None:
        """Deadline on the time.monotonic() clock."""
        return self._deadline

    def cancel(self) -> None:
        """
        Mark the context cancelled.

        Requests not yet sent are refused. A request already in flight is not
        interrupted: it runs until the socket timeout, which applies per read
        rather than to the whole call, so a slowly trickling response can
        outlive the deadline.
        """
        self._cancelled.set()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def remaining(self) -> float | None:
        """Seconds until the deadline (may be negative), None without a deadline."""
        if self._deadline is None:
            return None
        return self._deadline - time.monotonic()

    def err(self) -> ContextError | None:
        """Return why the context is done, or None while it is still live."""
        if self._cancelled.is_set():
            return Cancelled()
        remaining = self.remaining()
        if remaining is not None and remaining <= 0:
            return DeadlineExceeded()
        return None

    def request_timeout(self, default: float | None) -> float | None:
        """Socket timeout for the next request: the tighter of default and the deadline."""
        remaining = self.remaining()
        if remaining is None:
            return default
        remaining = max(remaining, 0.0)
        if default is None:
            return remaining
        return min(default, remaining)
