# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Protocol for cancellable in-flight calls."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class CancellableCall(Protocol):
    """
    Handle to an in-flight asynchronous request.

    The transport owns the connection; the library only ever cancels it.
    ``cancel()`` must be idempotent, must not raise when the call has
    already completed, and must be safe to invoke from any thread.
    """

    def cancel(self) -> None:
        """Cancel the call. Repeated calls are no-ops."""
        ...

    @property
    def is_cancelled(self) -> bool:
        """Whether cancel() has been called."""
        ...
