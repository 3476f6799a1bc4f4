"""Unit tests for lifecycle states and events."""

import pytest

from request_lifecycle.types import LifecycleEvent, LifecycleState


class TestLifecycleState:
    def test_ordering(self):
        assert LifecycleState.RESUMED.is_at_least(LifecycleState.STARTED)
        assert LifecycleState.CREATED.is_at_least(LifecycleState.CREATED)
        assert not LifecycleState.DESTROYED.is_at_least(LifecycleState.INITIALIZED)


class TestLifecycleEvent:
    @pytest.mark.parametrize(
        "event, state",
        [
            (LifecycleEvent.ON_CREATE, LifecycleState.CREATED),
            (LifecycleEvent.ON_START, LifecycleState.STARTED),
            (LifecycleEvent.ON_RESUME, LifecycleState.RESUMED),
            (LifecycleEvent.ON_PAUSE, LifecycleState.STARTED),
            (LifecycleEvent.ON_STOP, LifecycleState.CREATED),
            (LifecycleEvent.ON_DESTROY, LifecycleState.DESTROYED),
        ],
    )
    def test_target_state(self, event, state):
        assert event.target_state is state

    def test_only_destroy_is_terminal(self):
        assert [e for e in LifecycleEvent if e.is_terminal] == [LifecycleEvent.ON_DESTROY]

    def test_up_from(self):
        assert LifecycleEvent.up_from(LifecycleState.INITIALIZED) is LifecycleEvent.ON_CREATE
        assert LifecycleEvent.up_from(LifecycleState.RESUMED) is None
        assert LifecycleEvent.up_from(LifecycleState.DESTROYED) is None

    def test_down_from(self):
        assert LifecycleEvent.down_from(LifecycleState.RESUMED) is LifecycleEvent.ON_PAUSE
        assert LifecycleEvent.down_from(LifecycleState.INITIALIZED) is LifecycleEvent.ON_DESTROY
        assert LifecycleEvent.down_from(LifecycleState.DESTROYED) is None
