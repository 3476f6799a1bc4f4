# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Protocol for request result delivery."""

from typing import Any, Protocol, runtime_checkable

from .call import CancellableCall


@runtime_checkable
class Callback(Protocol):
    """
    Receives the events of one call, always on the UI thread.

    Order for a single call is ``on_start``, then exactly one of
    ``on_response`` / ``on_failure``, then ``on_completed``.
    """

    def on_start(self, call: CancellableCall) -> None: ...

    def on_response(self, call: CancellableCall, response: Any) -> None: ...

    def on_failure(self, call: CancellableCall, error: BaseException) -> None: ...

    def on_completed(self, call: CancellableCall) -> None: ...
