# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Lifecycle-bound cancellation.

Classes:
    LifecycleGuard: Callback wrapper that cancels its call when the owner's
        lifecycle is destroyed and drops events from then on.
    GuardState: ACTIVE / FIRED.
    AtomicFlag: Boolean with compare-and-set used for single-fire semantics.

Functions:
    bind_to_lifecycle: Convenience constructor for LifecycleGuard.
"""

from .lifecycle_guard import LifecycleGuard, bind_to_lifecycle
from .once import AtomicFlag, GuardState

__all__ = [
    "AtomicFlag",
    "GuardState",
    "LifecycleGuard",
    "bind_to_lifecycle",
]
