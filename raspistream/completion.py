"""Completed capture requests and the thread-safe queue that hands them out."""

from __future__ import annotations

import threading
from collections import deque
from dataclasses import dataclass, field
from typing import Any


@dataclass
class CompletedRequest:
    """A finished capture: frame buffers keyed by stream, plus metadata."""

    buffers: dict[Any, Any] = field(default_factory=dict)
    metadata: dict[str, Any] = field(default_factory=dict)


class RequestQueue:
    """FIFO of completed requests; consumers block until one arrives."""

    def __init__(self) -> None:
        self._items: deque[CompletedRequest] = deque()
        self._cond = threading.Condition()

    def push(self, request: CompletedRequest) -> None:
        """Queue a completed request and wake one waiting consumer."""
        with self._cond:
            self._items.append(request)
            self._cond.notify()

    def wait(self, timeout: float | None = None) -> CompletedRequest:
        """Remove and return the oldest request, blocking until one is queued.

        Raises TimeoutError if a timeout is given and expires first.
        """
        with self._cond:
            if not self._cond.wait_for(lambda: bool(self._items), timeout):
                raise TimeoutError("no completed request within timeout")
            return self._items.popleft()

    def __len__(self) -> int:
        with self._cond:
            return len(self._items)