# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Transport adapters.

Available components:
- MainThreadExecutor: Queue of callables drained on the UI thread
- body_content: Streams a push-style RequestBody as an iterator of bytes
- HttpxCall: Cancellable httpx exchange (requires the httpx extra)

Note: HttpxCall is lazily imported to avoid requiring httpx when only the
guard and progress components are used.
"""

from typing import TYPE_CHECKING, cast

from .dispatch import Dispatcher, MainThreadExecutor
from .pump import body_content

if TYPE_CHECKING:
    from .httpx_call import HttpxCall

__all__ = [
    "Dispatcher",
    "HttpxCall",  # Lazy loaded - requires httpx extra
    "MainThreadExecutor",
    "body_content",
]


def __getattr__(name: str) -> type:
    """Lazy import for the optional httpx transport."""
    if name == "HttpxCall":
        try:
            from . import httpx_call

            return cast(type, httpx_call.HttpxCall)
        except ImportError as e:  # pragma: no cover
            raise ImportError(  # pragma: no cover
                f"'{name}' requires the 'httpx' extra. "
                "Install with: pip install request-lifecycle[httpx]"
            ) from e
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
