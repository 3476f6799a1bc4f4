# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Lifecycle registry: a concrete, observable lifecycle.

UI frameworks in Python have no shared notion of a component lifecycle, so
this module supplies one. A LifecycleRegistry holds the current state of an
owner and notifies observers of each transition, in order, on the UI thread.
"""

from __future__ import annotations

import contextlib
import logging
from typing import TYPE_CHECKING

from ..confinement import ThreadConfinement, get_default_confinement
from ..exceptions import LifecycleStateError
from ..types.lifecycle import LifecycleEvent, LifecycleState

if TYPE_CHECKING:
    from ..protocols.lifecycle import LifecycleObserver, LifecycleOwner

logger = logging.getLogger(__name__)


class LifecycleRegistry:
    """
    Observable lifecycle of one owner.

    Observers are notified in registration order. Dispatch iterates over a
    snapshot, so an observer may remove itself (or others) while being
    notified; removed observers that have not yet been notified are skipped.

    After ON_DESTROY has been dispatched the registry drops every observer,
    and further events raise LifecycleStateError. Observers added to a
    destroyed registry are ignored: they would never be notified.

    Example:
        >>> owner = SimpleLifecycleOwner()
        >>> owner.lifecycle.mark_state(LifecycleState.RESUMED)
        >>> owner.lifecycle.current_state
        <LifecycleState.RESUMED: 4>
    """

    def __init__(
        self,
        owner: LifecycleOwner,
        *,
        initial_state: LifecycleState = LifecycleState.INITIALIZED,
        confinement: ThreadConfinement | None = None,
    ) -> None:
        self._owner = owner
        self._state = initial_state
        self._observers: list[LifecycleObserver] = []
        self._confinement = confinement or get_default_confinement()

    @property
    def current_state(self) -> LifecycleState:
        return self._state

    @property
    def observer_count(self) -> int:
        return len(self._observers)

    def add_observer(self, observer: LifecycleObserver) -> None:
        self._confinement.assert_confined("add_observer")
        if self._state is LifecycleState.DESTROYED:
            logger.debug(f"Ignoring observer {observer!r}: lifecycle already destroyed")
            return
        if observer not in self._observers:
            self._observers.append(observer)

    def remove_observer(self, observer: LifecycleObserver) -> None:
        self._confinement.assert_confined("remove_observer")
        with contextlib.suppress(ValueError):
            self._observers.remove(observer)

    def handle_event(self, event: LifecycleEvent) -> None:
        """
        Apply ``event`` and notify observers.

        Raises:
            LifecycleStateError: If the lifecycle is already destroyed.
        """
        self._confinement.assert_confined("handle_event")
        if self._state is LifecycleState.DESTROYED:
            raise LifecycleStateError(
                f"Cannot handle {event.name}: lifecycle already destroyed",
                state=self._state,
            )

        self._state = event.target_state
        logger.debug(f"{self._owner!r} -> {self._state.name} ({event.name})")

        for observer in list(self._observers):
            if observer in self._observers:
                observer.on_transition(self._owner, event)

        if event.is_terminal:
            self._observers.clear()

    def mark_state(self, state: LifecycleState) -> None:
        """
        Move to ``state``, emitting every intermediate event in order.

        Moving down to DESTROYED from RESUMED emits ON_PAUSE, ON_STOP and
        ON_DESTROY. INITIALIZED cannot be reached again once left.
        """
        self._confinement.assert_confined("mark_state")
        if state is self._state:
            return
        if state is LifecycleState.INITIALIZED:
            raise LifecycleStateError(
                "Cannot move back to INITIALIZED", state=self._state
            )
        while self._state is not state:
            if state is LifecycleState.DESTROYED or not state.is_at_least(self._state):
                event = LifecycleEvent.down_from(self._state)
            else:
                event = LifecycleEvent.up_from(self._state)
            if event is None:
                raise LifecycleStateError(
                    f"No transition from {self._state.name} to {state.name}",
                    state=self._state,
                )
            self.handle_event(event)


class SimpleLifecycleOwner:
    """
    Minimal LifecycleOwner backed by a LifecycleRegistry.

    Useful for components that have no framework lifecycle of their own,
    such as a window, a session, or a test fixture.
    """

    def __init__(
        self,
        name: str | None = None,
        *,
        confinement: ThreadConfinement | None = None,
    ) -> None:
        self.name = name or f"owner-{id(self):x}"
        self._lifecycle = LifecycleRegistry(self, confinement=confinement)

    @property
    def lifecycle(self) -> LifecycleRegistry:
        return self._lifecycle

    def destroy(self) -> None:
        """Run the lifecycle down to DESTROYED."""
        self._lifecycle.mark_state(LifecycleState.DESTROYED)

    def __repr__(self) -> str:
        return f"SimpleLifecycleOwner({self.name!r})"


__all__ = ["LifecycleRegistry", "SimpleLifecycleOwner"]
