"""
Shared fixtures for the request lifecycle test suite.

Every test starts from the default config, the main-thread confinement and
zeroed process-wide metrics.
"""

from __future__ import annotations

from typing import Any

import pytest

from request_lifecycle.config import RequestLifecycleConfig, set_config
from request_lifecycle.confinement import set_default_confinement
from request_lifecycle.observability import get_default_metrics


@pytest.fixture(autouse=True)
def _isolate_globals():
    """Reset process-wide config, confinement and metrics around each test."""
    previous_config = set_config(RequestLifecycleConfig())
    previous_confinement = set_default_confinement(None)
    get_default_metrics().reset()
    yield
    set_config(previous_config)
    set_default_confinement(previous_confinement)
    get_default_metrics().reset()


class RecordingCall:
    """CancellableCall that records cancel() invocations."""

    def __init__(self, name: str = "call") -> None:
        self.name = name
        self.cancel_count = 0

    def cancel(self) -> None:
        self.cancel_count += 1

    @property
    def is_cancelled(self) -> bool:
        return self.cancel_count > 0

    def __repr__(self) -> str:
        return f"RecordingCall({self.name!r})"


class RecordingCallback:
    """Callback that records every event it receives, in order."""

    def __init__(self) -> None:
        self.events: list[tuple[str, Any]] = []

    def on_start(self, call: Any) -> None:
        self.events.append(("start", call))

    def on_response(self, call: Any, response: Any) -> None:
        self.events.append(("response", response))

    def on_failure(self, call: Any, error: BaseException) -> None:
        self.events.append(("failure", error))

    def on_completed(self, call: Any) -> None:
        self.events.append(("completed", call))

    @property
    def names(self) -> list[str]:
        return [name for name, _ in self.events]


@pytest.fixture
def recording_call() -> RecordingCall:
    return RecordingCall()


@pytest.fixture
def recording_callback() -> RecordingCallback:
    return RecordingCallback()


@pytest.fixture
def make_call():
    """Factory for additional RecordingCall instances."""
    return RecordingCall
