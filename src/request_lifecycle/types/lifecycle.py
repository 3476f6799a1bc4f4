# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Lifecycle states and events.

States are ordered: a lifecycle moves up from INITIALIZED to RESUMED and back
down to DESTROYED. Events are the edges between adjacent states.
"""

from enum import Enum


class LifecycleState(Enum):
    """Lifecycle states, in ascending order."""

    DESTROYED = 0
    INITIALIZED = 1
    CREATED = 2
    STARTED = 3
    RESUMED = 4

    def is_at_least(self, other: "LifecycleState") -> bool:
        return self.value >= other.value


class LifecycleEvent(Enum):
    """Lifecycle transitions delivered to observers."""

    ON_CREATE = "on_create"
    ON_START = "on_start"
    ON_RESUME = "on_resume"
    ON_PAUSE = "on_pause"
    ON_STOP = "on_stop"
    ON_DESTROY = "on_destroy"

    @property
    def target_state(self) -> LifecycleState:
        """State the lifecycle is in after this event has been dispatched."""
        return _TARGET_STATES[self]

    @property
    def is_terminal(self) -> bool:
        return self is LifecycleEvent.ON_DESTROY

    @classmethod
    def up_from(cls, state: LifecycleState) -> "LifecycleEvent | None":
        """Event that moves one step up from ``state``, or None at the top."""
        return _UP_FROM.get(state)

    @classmethod
    def down_from(cls, state: LifecycleState) -> "LifecycleEvent | None":
        """Event that moves one step down from ``state``, or None at the bottom."""
        return _DOWN_FROM.get(state)


_TARGET_STATES: dict[LifecycleEvent, LifecycleState] = {
    LifecycleEvent.ON_CREATE: LifecycleState.CREATED,
    LifecycleEvent.ON_START: LifecycleState.STARTED,
    LifecycleEvent.ON_RESUME: LifecycleState.RESUMED,
    LifecycleEvent.ON_PAUSE: LifecycleState.STARTED,
    LifecycleEvent.ON_STOP: LifecycleState.CREATED,
    LifecycleEvent.ON_DESTROY: LifecycleState.DESTROYED,
}

_UP_FROM: dict[LifecycleState, LifecycleEvent] = {
    LifecycleState.INITIALIZED: LifecycleEvent.ON_CREATE,
    LifecycleState.CREATED: LifecycleEvent.ON_START,
    LifecycleState.STARTED: LifecycleEvent.ON_RESUME,
}

# INITIALIZED has no down event: a lifecycle that was never created is
# destroyed directly.
_DOWN_FROM: dict[LifecycleState, LifecycleEvent] = {
    LifecycleState.RESUMED: LifecycleEvent.ON_PAUSE,
    LifecycleState.STARTED: LifecycleEvent.ON_STOP,
    LifecycleState.CREATED: LifecycleEvent.ON_DESTROY,
    LifecycleState.INITIALIZED: LifecycleEvent.ON_DESTROY,
}


__all__ = ["LifecycleEvent", "LifecycleState"]
