"""Unit tests for protocol conformance of bundled and user-defined types."""

from typing import Any

from request_lifecycle.guard import LifecycleGuard
from request_lifecycle.lifecycle import SimpleLifecycleOwner
from request_lifecycle.progress import BufferSink, BytesRequestBody
from request_lifecycle.protocols import (
    Callback,
    CancellableCall,
    LifecycleObserver,
    RequestBody,
    Sink,
)


class TestProtocols:
    def test_guard_is_callback_and_observer(self, recording_call, recording_callback):
        guard = LifecycleGuard(recording_call, recording_callback, SimpleLifecycleOwner())

        assert isinstance(guard, Callback)
        assert isinstance(guard, LifecycleObserver)

    def test_recording_call_is_cancellable(self, recording_call):
        assert isinstance(recording_call, CancellableCall)

    def test_object_without_cancel_is_not_cancellable(self):
        class NotACall:
            @property
            def is_cancelled(self) -> bool:
                return False

        assert not isinstance(NotACall(), CancellableCall)

    def test_partial_callback_rejected(self):
        class OnlyResponse:
            def on_response(self, call: Any, response: Any) -> None:
                pass

        assert not isinstance(OnlyResponse(), Callback)

    def test_bundled_body_and_sink(self):
        assert isinstance(BytesRequestBody(b""), RequestBody)
        assert isinstance(BufferSink(), Sink)
