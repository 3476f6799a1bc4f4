# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Lifecycle-bound callback guard.

This module provides the LifecycleGuard class, which ties an in-flight call
to the lifecycle of the UI component that issued it. The guard sits between
the transport and the application callback:

1. While the owner is alive, callback events are forwarded unchanged
2. When the owner is destroyed, the call is cancelled and the guard detaches
3. After that, any event the transport still delivers is dropped

Key Design Decisions:
- Already-destroyed owner: a destroyed lifecycle never delivers ON_DESTROY to
  late observers, so binding against one cancels immediately instead of
  registering
- Exactly-once exit: ON_DESTROY wins through compare-and-set on a single
  flag, so the call is cancelled at most once over the guard's lifetime
- Normal completion forwards on_completed and unregisters, but leaves the
  flag clear; nothing can arrive after both have happened
- Thread confinement: every entry point asserts it runs on the UI thread
  before touching any state
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from ..confinement import ThreadConfinement, get_default_confinement
from ..observability.metrics import LifecycleMetrics, resolve_metrics
from ..types.lifecycle import LifecycleEvent, LifecycleState
from .once import AtomicFlag, GuardState

if TYPE_CHECKING:
    from ..protocols.call import CancellableCall
    from ..protocols.callback import Callback
    from ..protocols.lifecycle import LifecycleOwner

logger = logging.getLogger(__name__)


class LifecycleGuard:
    """
    Callback wrapper that cancels its call when the owning lifecycle ends.

    The guard is itself a Callback (hand it to the transport in place of the
    application callback) and a LifecycleObserver (it registers with the
    owner's lifecycle). All methods must run on the UI thread.

    Usage:
        guard = LifecycleGuard(call, my_callback, activity)
        call.enqueue(guard)

        # Later, activity.lifecycle reaches DESTROYED:
        #   -> call.cancel() once, guard unregisters itself
        #   -> my_callback receives nothing further
    """

    __slots__ = (
        "__weakref__",
        "_call",
        "_confinement",
        "_delegate",
        "_metrics",
        "_once",
        "_owner",
    )

    def __init__(
        self,
        call: CancellableCall,
        delegate: Callback,
        owner: LifecycleOwner,
        *,
        confinement: ThreadConfinement | None = None,
        metrics: LifecycleMetrics | None = None,
    ) -> None:
        """
        Bind ``call`` and ``delegate`` to ``owner``'s lifecycle.

        Args:
            call: The in-flight call; cancelled when the owner is destroyed
            delegate: Application callback that receives forwarded events
            owner: Component whose lifecycle bounds the call
            confinement: Thread check to apply; defaults to the process-wide one
            metrics: Counters to update; defaults to the process-wide instance

        Raises:
            ThreadConfinementError: If not called on the confined thread.
        """
        self._confinement = confinement or get_default_confinement()
        self._confinement.assert_confined("LifecycleGuard constructor")

        self._call = call
        self._delegate = delegate
        self._owner = owner
        self._metrics = resolve_metrics(metrics)
        self._once = AtomicFlag()

        if self._metrics:
            self._metrics.record_bound()

        lifecycle = owner.lifecycle
        if lifecycle.current_state is LifecycleState.DESTROYED:
            # Observers added now would never see ON_DESTROY
            self._once.set(True)
            call.cancel()
            logger.debug(f"Owner {owner!r} already destroyed, cancelled {call!r}")
            if self._metrics:
                self._metrics.record_immediate_cancel()
        else:
            lifecycle.add_observer(self)
            logger.debug(f"Bound {call!r} to lifecycle of {owner!r}")

    # -- Callback --------------------------------------------------------

    def on_start(self, call: CancellableCall) -> None:
        self._confinement.assert_confined("on_start")
        if self._once.get():
            self._suppressed("on_start")
            return
        self._delegate.on_start(call)

    def on_response(self, call: CancellableCall, response: Any) -> None:
        self._confinement.assert_confined("on_response")
        if self._once.get():
            self._suppressed("on_response")
            return
        self._delegate.on_response(call, response)

    def on_failure(self, call: CancellableCall, error: BaseException) -> None:
        self._confinement.assert_confined("on_failure")
        if self._once.get():
            self._suppressed("on_failure")
            return
        self._delegate.on_failure(call, error)

    def on_completed(self, call: CancellableCall) -> None:
        """Forward completion, then stop observing the owner."""
        self._confinement.assert_confined("on_completed")
        if self._once.get():
            self._suppressed("on_completed")
            return
        self._delegate.on_completed(call)
        self._owner.lifecycle.remove_observer(self)
        if self._metrics:
            self._metrics.record_completion()

    # -- LifecycleObserver -----------------------------------------------

    def on_transition(self, owner: LifecycleOwner, event: LifecycleEvent) -> None:
        """
        Handle a lifecycle transition of the owner.

        Only ON_DESTROY matters. The first ON_DESTROY to flip the flag
        cancels the call and unregisters; anything after that is a no-op.
        """
        self._confinement.assert_confined("on_transition")
        if event is not LifecycleEvent.ON_DESTROY:
            return
        if not self._once.compare_and_set(False, True):
            return

        self._call.cancel()
        owner.lifecycle.remove_observer(self)
        logger.debug(f"Owner {owner!r} destroyed, cancelled {self._call!r}")
        if self._metrics:
            self._metrics.record_lifecycle_cancel()

    # -- Introspection ---------------------------------------------------

    @property
    def state(self) -> GuardState:
        return GuardState.FIRED if self._once.get() else GuardState.ACTIVE

    @property
    def is_fired(self) -> bool:
        return self._once.get()

    @property
    def call(self) -> CancellableCall:
        return self._call

    @property
    def delegate(self) -> Callback:
        return self._delegate

    def _suppressed(self, event_name: str) -> None:
        logger.debug(f"Dropped {event_name} for {self._call!r}: guard already fired")
        if self._metrics:
            self._metrics.record_suppressed()

    def __repr__(self) -> str:
        return f"LifecycleGuard(call={self._call!r}, state={self.state.value})"


def bind_to_lifecycle(
    call: CancellableCall,
    delegate: Callback,
    owner: LifecycleOwner,
    **kwargs: Any,
) -> LifecycleGuard:
    """
    Wrap ``delegate`` so that ``call`` is cancelled when ``owner`` is destroyed.

    Returns:
        The guard, to be passed to the transport as the call's callback.
    """
    return LifecycleGuard(call, delegate, owner, **kwargs)


__all__ = ["LifecycleGuard", "bind_to_lifecycle"]
