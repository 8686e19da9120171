"""Cancellable per-request call context handed to the resolvers."""
from __future__ import annotations

import threading
import time
from dataclasses import dataclass, field
from typing import Callable, Optional

from .errors import RequestCancelled


@dataclass(frozen=True)
class CallContext:
    """Deadline plus cancel flag shared by every step of one resolution.

    ``deadline`` is expressed on ``clock`` (monotonic seconds); ``None`` means
    unbounded.
    """

    deadline: Optional[float] = None
    clock: Callable[[], float] = time.monotonic
    _cancelled: threading.Event = field(default_factory=threading.Event, init=False, repr=False, compare=False)

    @classmethod
    def with_timeout(cls, seconds: float, clock: Callable[[], float] = time.monotonic) -> "CallContext":
        return cls(deadline=clock() + seconds, clock=clock)

    @classmethod
    def background(cls) -> "CallContext":
        return cls()

    def cancel(self) -> None:
        self._cancelled.set()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def remaining(self) -> Optional[float]:
        if self.deadline is None:
            return None
        return max(self.deadline - self.clock(), 0.0)

    def expired(self) -> bool:
        remaining = self.remaining()
        return remaining is not None and remaining <= 0

    def done(self) -> bool:
        return self.cancelled or self.expired()

    def raise_if_done(self) -> None:
        if self.cancelled:
            raise RequestCancelled("request cancelled")
        if self.expired():
            raise RequestCancelled("deadline exceeded")

    def timeout_for(self, default: float) -> float:
        """Clamp an HTTP timeout so it never outlives the deadline.

        requests applies the timeout per socket operation (connect, each read),
        not to the whole call: an upstream trickling bytes can still overrun
        the deadline. Resolvers re-check the context once the call returns.
        """
        remaining = self.remaining()
        if remaining is None:
            return default
        return min(default, remaining)


__all__ = ["CallContext"]
