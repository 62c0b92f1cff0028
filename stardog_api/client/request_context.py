"""
Stardog Client Request Context

Cancellation and deadline carrier passed to every dispatched request.
"""

import asyncio
import time
from typing import Awaitable, Optional, TypeVar

from .utils.client_utils import StardogClientError, RequestCancelledError, DeadlineExceededError

T = TypeVar('T')


class RequestContext:
    """
    Per-call cancellation and deadline.

    A context may be shared by several calls; cancelling it aborts every call
    still waiting on the server. Derived contexts (``with_timeout``) are
    cancelled together with their parent.
    """

    def __init__(self, timeout: Optional[float] = None, *, _parent: Optional["RequestContext"] = None):
        self._parent = _parent
        self._cancelled = asyncio.Event() if _parent is None else _parent._cancelled
        deadline = time.monotonic() + timeout if timeout is not None else None
        if _parent is not None and _parent.deadline is not None:
            deadline = _parent.deadline if deadline is None else min(deadline, _parent.deadline)
        self._deadline = deadline

    @classmethod
    def background(cls) -> "RequestContext":
        """A context that is never cancelled and has no deadline."""
        return cls()

    def with_timeout(self, timeout: float) -> "RequestContext":
        """Derive a context that also expires after ``timeout`` seconds."""
        return RequestContext(timeout, _parent=self)

    @property
    def deadline(self) -> Optional[float]:
        """Deadline on the ``time.monotonic()`` clock, or None."""
        return self._deadline

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def cancel(self) -> None:
        self._cancelled.set()

    def remaining(self) -> Optional[float]:
        """Seconds left before the deadline (never negative), or None."""
        if self._deadline is None:
            return None
        return max(0.0, self._deadline - time.monotonic())

    def err(self) -> Optional[StardogClientError]:
        """The error describing why this context is done, or None if it is not."""
        if self.cancelled:
            return RequestCancelledError()
        if self._deadline is not None and time.monotonic() >= self._deadline:
            return DeadlineExceededError()
        return None

    async def run(self, awaitable: Awaitable[T]) -> T:
        """
        Await ``awaitable`` until it completes, the context is cancelled or the
        deadline passes.

        When the context finishes first the awaitable is cancelled and the
        context error is raised. When the awaitable fails while the context is
        already done, the context error is raised instead, chained from the
        original exception.
        """
        task = asyncio.ensure_future(awaitable)
        waiter = asyncio.ensure_future(self._cancelled.wait())
        try:
            done, _ = await asyncio.wait({task, waiter}, timeout=self.remaining(),
                                         return_when=asyncio.FIRST_COMPLETED)
        except asyncio.CancelledError:
            task.cancel()
            raise
        finally:
            waiter.cancel()

        if task not in done:
            task.cancel()
            try:
                await task
            except (asyncio.CancelledError, Exception):
                pass
            raise self.err() or DeadlineExceededError()

        exc = task.exception()
        if exc is not None:
            ctx_err = self.err()
            if ctx_err is not None:
                raise ctx_err from exc
            raise exc
        return task.result()

    def __repr__(self) -> str:
        return f"RequestContext(cancelled={self.cancelled}, remaining={self.remaining()})"
