# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Main-thread executor.

Transports finish work on background threads but callbacks must run on the
UI thread. MainThreadExecutor is a thread-safe queue of callables that the
UI thread drains; ``post`` has the same shape as
``asyncio.AbstractEventLoop.call_soon_threadsafe``, so either can be passed
wherever a dispatcher is expected.
"""

from __future__ import annotations

import logging
import queue
import threading
import time
from collections.abc import Callable
from typing import Any

from ..confinement import ThreadConfinement, get_default_confinement

logger = logging.getLogger(__name__)

# Signature of a dispatcher: (fn, *args) -> Any
Dispatcher = Callable[..., Any]


class MainThreadExecutor:
    """
    Queue of callables run on the confined thread.

    Example:
        >>> executor = MainThreadExecutor()
        >>> executor.post(print, "hello")   # from any thread
        >>> executor.run_pending()          # on the main thread
        hello
        1
    """

    def __init__(self, confinement: ThreadConfinement | None = None) -> None:
        self._queue: queue.SimpleQueue[tuple[Callable[..., Any], tuple[Any, ...]]] = (
            queue.SimpleQueue()
        )
        self._confinement = confinement or get_default_confinement()
        self._closed = threading.Event()

    def post(self, fn: Callable[..., Any], *args: Any) -> None:
        """Schedule ``fn(*args)`` on the confined thread. Safe from any thread."""
        if self._closed.is_set():
            logger.debug(f"Executor closed, dropping {fn!r}")
            return
        self._queue.put((fn, args))

    def run_pending(self) -> int:
        """
        Run every callable queued so far, in order.

        Callables posted while draining are run too. Exceptions propagate to
        the caller and leave the rest of the queue in place.

        Returns:
            Number of callables run.
        """
        self._confinement.assert_confined("run_pending")
        count = 0
        while True:
            try:
                fn, args = self._queue.get_nowait()
            except queue.Empty:
                return count
            fn(*args)
            count += 1

    def run_until(
        self,
        predicate: Callable[[], bool],
        timeout: float = 10.0,
        poll_interval: float = 0.01,
    ) -> bool:
        """
        Run queued callables until ``predicate()`` is true or ``timeout`` elapses.

        Returns:
            True if the predicate became true, False on timeout.
        """
        self._confinement.assert_confined("run_until")
        deadline = time.monotonic() + timeout
        while not predicate():
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                return False
            try:
                fn, args = self._queue.get(timeout=min(poll_interval, remaining))
            except queue.Empty:
                continue
            fn(*args)
        return True

    def close(self) -> None:
        """Stop accepting callables. Already queued ones can still be drained."""
        self._closed.set()

    @property
    def pending(self) -> int:
        return self._queue.qsize()


__all__ = ["Dispatcher", "MainThreadExecutor"]
