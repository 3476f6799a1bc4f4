# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Single-fire flag and guard states."""

from __future__ import annotations

import threading
from enum import Enum


class GuardState(Enum):
    """
    States of a LifecycleGuard.

    - ACTIVE: events are forwarded to the delegate callback.
    - FIRED: the owner was destroyed (or already destroyed at bind time);
      the call has been cancelled and events are dropped. Terminal.
    """

    ACTIVE = "active"
    FIRED = "fired"


class AtomicFlag:
    """
    Boolean with an atomic compare-and-set.

    Guards are confined to one thread today, where a plain bool would do;
    the lock keeps exactly-once semantics intact if callbacks are ever
    dispatched from several threads.

    Example:
        >>> flag = AtomicFlag()
        >>> flag.compare_and_set(False, True)
        True
        >>> flag.compare_and_set(False, True)
        False
    """

    __slots__ = ("_lock", "_value")

    def __init__(self, initial: bool = False) -> None:
        self._value = initial
        self._lock = threading.Lock()

    def get(self) -> bool:
        return self._value

    def set(self, value: bool) -> None:
        with self._lock:
            self._value = value

    def compare_and_set(self, expected: bool, new: bool) -> bool:
        """
        Set to ``new`` if the current value is ``expected``.

        Returns:
            True if the value was updated, False if another caller won.
        """
        with self._lock:
            if self._value is not expected:
                return False
            self._value = new
            return True

    def __bool__(self) -> bool:
        return self._value

    def __repr__(self) -> str:
        return f"AtomicFlag({self._value})"


__all__ = ["AtomicFlag", "GuardState"]
