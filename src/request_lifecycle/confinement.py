# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Thread confinement for UI-bound components.

Guards and lifecycle registries are not synchronized for concurrent use;
instead every operation must run on one designated thread (the UI thread,
by default the interpreter's main thread). ThreadConfinement checks that
precondition and fails fast with ThreadConfinementError.
"""

from __future__ import annotations

import threading

from .config import get_config
from .exceptions import ThreadConfinementError


class ThreadConfinement:
    """
    Asserts that operations run on a single designated thread.

    Args:
        thread: The confined thread. Defaults to ``threading.main_thread()``.
        enabled: When None, follows ``enforce_thread_confinement`` from the
            process-wide config at check time.

    Example:
        >>> confinement = ThreadConfinement()
        >>> confinement.assert_confined("on_start")  # on the main thread: ok
    """

    __slots__ = ("_enabled", "_thread")

    def __init__(
        self,
        thread: threading.Thread | None = None,
        *,
        enabled: bool | None = None,
    ) -> None:
        self._thread = thread if thread is not None else threading.main_thread()
        self._enabled = enabled

    @property
    def thread(self) -> threading.Thread:
        return self._thread

    @property
    def enabled(self) -> bool:
        if self._enabled is None:
            return get_config().enforce_thread_confinement
        return self._enabled

    def is_confined(self) -> bool:
        """True if the calling thread is the confined thread."""
        return threading.current_thread() is self._thread

    def assert_confined(self, operation: str) -> None:
        """
        Raise ThreadConfinementError unless called on the confined thread.

        Args:
            operation: Name of the operation, used in the error message.
        """
        if self.enabled and not self.is_confined():
            raise ThreadConfinementError(operation, threading.current_thread().name)

    def __repr__(self) -> str:
        return f"ThreadConfinement(thread={self._thread.name!r})"


_default_confinement: ThreadConfinement | None = None
_default_lock = threading.Lock()


def get_default_confinement() -> ThreadConfinement:
    """Return the process-wide confinement, bound to the main thread unless replaced."""
    global _default_confinement
    if _default_confinement is None:
        with _default_lock:
            if _default_confinement is None:
                _default_confinement = ThreadConfinement()
    return _default_confinement


def set_default_confinement(
    confinement: ThreadConfinement | None,
) -> ThreadConfinement | None:
    """
    Replace the process-wide confinement.

    Pass None to go back to the main-thread default on next use.

    Returns:
        The previous confinement.
    """
    global _default_confinement
    with _default_lock:
        previous = _default_confinement
        _default_confinement = confinement
    return previous


def bind_current_thread() -> ThreadConfinement:
    """Create a confinement bound to the calling thread (e.g. an event loop thread)."""
    return ThreadConfinement(threading.current_thread())


__all__ = [
    "ThreadConfinement",
    "bind_current_thread",
    "get_default_confinement",
    "set_default_confinement",
]
