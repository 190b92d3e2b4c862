"""Cancellation and deadline propagation.

Every subprocess and network call takes an OperationContext. A context
can be canceled explicitly, can carry a deadline, and derives children
that inherit both: canceling a parent cancels its children, and a child's
deadline is never later than its parent's. Parents hold children weakly,
so finished children are released.
"""

from __future__ import annotations

import threading
import time
import weakref

from wsctl.core.errors import ContextCanceledError, DeadlineExceededError, OperationAbortedError


class OperationContext:
    """Cancellation token with an optional monotonic deadline.

    Example:
        >>> ctx = OperationContext.background().with_timeout(900)
        >>> ctx.raise_if_done()
    """

    def __init__(
        self,
        deadline: float | None = None,
        parent: OperationContext | None = None,
    ) -> None:
        self._canceled = threading.Event()
        self._parent = parent
        self._children: weakref.WeakSet[OperationContext] = weakref.WeakSet()
        self._lock = threading.Lock()

        if parent is not None and parent.deadline is not None:
            deadline = parent.deadline if deadline is None else min(deadline, parent.deadline)
        self._deadline = deadline

    @classmethod
    def background(cls) -> OperationContext:
        """Return a fresh context with no deadline."""
        return cls()

    @property
    def deadline(self) -> float | None:
        """Monotonic deadline, or None."""
        return self._deadline

    def with_timeout(self, seconds: float) -> OperationContext:
        """Derive a child context that expires after ``seconds``."""
        child = OperationContext(deadline=time.monotonic() + seconds, parent=self)
        self._attach(child)
        return child

    def _attach(self, child: OperationContext) -> None:
        with self._lock:
            self._children.add(child)
        if self.is_canceled:
            child.cancel()

    def cancel(self) -> None:
        """Cancel this context and all contexts derived from it."""
        self._canceled.set()
        with self._lock:
            children = list(self._children)
        for child in children:
            child.cancel()

    @property
    def is_canceled(self) -> bool:
        """Check if cancel() was called on this context or a parent."""
        if self._canceled.is_set():
            return True
        return self._parent is not None and self._parent.is_canceled

    @property
    def is_expired(self) -> bool:
        """Check if the deadline has passed."""
        return self._deadline is not None and time.monotonic() >= self._deadline

    def remaining(self) -> float | None:
        """Seconds until the deadline (never negative), or None."""
        if self._deadline is None:
            return None
        return max(0.0, self._deadline - time.monotonic())

    def err(self) -> OperationAbortedError | None:
        """Return the reason the context ended, or None while it is live."""
        if self.is_canceled:
            return ContextCanceledError()
        if self.is_expired:
            return DeadlineExceededError()
        return None

    def raise_if_done(self) -> None:
        """Raise ContextCanceledError or DeadlineExceededError if ended."""
        error = self.err()
        if error is not None:
            raise error
