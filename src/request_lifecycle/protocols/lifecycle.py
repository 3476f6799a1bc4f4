# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Protocols for lifecycle sources and their observers."""

from typing import Protocol, runtime_checkable

from ..types.lifecycle import LifecycleEvent, LifecycleState


@runtime_checkable
class LifecycleObserver(Protocol):
    """Notified of every lifecycle transition of the sources it observes."""

    def on_transition(self, owner: "LifecycleOwner", event: LifecycleEvent) -> None:
        ...


@runtime_checkable
class LifecycleSource(Protocol):
    """
    Observable lifecycle of a UI component.

    ``current_state`` must be synchronously queryable, so a caller can tell
    that the source is already destroyed before registering: a destroyed
    source never delivers ON_DESTROY to late observers.
    """

    @property
    def current_state(self) -> LifecycleState: ...

    def add_observer(self, observer: LifecycleObserver) -> None: ...

    def remove_observer(self, observer: LifecycleObserver) -> None: ...


@runtime_checkable
class LifecycleOwner(Protocol):
    """A component that has a lifecycle."""

    @property
    def lifecycle(self) -> LifecycleSource: ...
