"""
Call context carrying cancellation and an optional deadline.

A ``CallContext`` is passed as the first argument of every dispatcher and
endpoint call. It can be shared between threads: one thread may call
``cancel()`` while another is waiting on a request, and the waiting call
returns at once.
"""

from __future__ import annotations

import threading
import time
from typing import Callable, List, Optional

from ..core.errors import Cancelled, DeadlineExceeded


class CallContext:
    """
    Cancellation flag plus optional absolute deadline (``time.monotonic`` based).
    """

    def __init__(self, deadline: Optional[float] = None) -> None:
        self._deadline = deadline
        self._cancelled = threading.Event()
        self._callbacks: List[Callable[[], None]] = []
        self._lock = threading.Lock()

    @classmethod
    def background(cls) -> "CallContext":
        """A context that is never cancelled and has no deadline."""
        return cls()

    @classmethod
    def with_timeout(cls, seconds: float) -> "CallContext":
        """A context whose deadline elapses ``seconds`` from now."""
        return cls(deadline=time.monotonic() + seconds)

    @property
    def deadline(self) -> Optional[float]:
        return self._deadline

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    @property
    def expired(self) -> bool:
        return self._deadline is not None and time.monotonic() >= self._deadline

    def cancel(self) -> None:
        with self._lock:
            self._cancelled.set()
            callbacks, self._callbacks = self._callbacks, []
        for callback in callbacks:
            callback()

    def add_callback(self, callback: Callable[[], None]) -> None:
        """
        Call ``callback`` (no arguments) when the context is cancelled.

        Runs immediately, in the calling thread, if it already is. Deadlines
        do not trigger callbacks; waiters bound their wait with ``remaining()``.
        """
        with self._lock:
            if not self._cancelled.is_set():
                self._callbacks.append(callback)
                return
        callback()

    def remove_callback(self, callback: Callable[[], None]) -> None:
        with self._lock:
            if callback in self._callbacks:
                self._callbacks.remove(callback)

    def remaining(self) -> Optional[float]:
        """
        Seconds left before the deadline, or None when there is no deadline.
        Never negative.
        """
        if self._deadline is None:
            return None
        return max(self._deadline - time.monotonic(), 0.0)

    def check(self) -> None:
        """
        Raise ``Cancelled`` or ``DeadlineExceeded`` if the context is done.
        Cancellation wins when both apply.
        """
        if self.cancelled:
            raise Cancelled("call context was cancelled")
        if self.expired:
            raise DeadlineExceeded("call context deadline exceeded")
