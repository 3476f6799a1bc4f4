# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Request Lifecycle - lifecycle-bound cancellation and upload progress for HTTP calls.

This library attaches observable external lifecycles to in-flight network
operations, so that cleanup and progress notification happen exactly once,
at the right moment.

Key Features:
    - LifecycleGuard: cancels a call when the UI component that issued it is
      destroyed, and drops any result that arrives afterwards
    - ProgressRequestBody: reports upload progress for any request body,
      with a single terminal done notification
    - Thread confinement checks for UI-thread-only components
    - Optional httpx transport and Prometheus metrics

Quick Start:
    >>> from request_lifecycle import (
    ...     LifecycleGuard, ProgressRequestBody, FileRequestBody, SimpleLifecycleOwner,
    ... )
    >>> from request_lifecycle.transport import HttpxCall, MainThreadExecutor
    >>>
    >>> window = SimpleLifecycleOwner("upload-window")
    >>> executor = MainThreadExecutor()
    >>> body = ProgressRequestBody(FileRequestBody("video.mp4"), show_progress)
    >>> call = HttpxCall(client, "POST", "/upload", executor.post, body=body)
    >>> call.enqueue(LifecycleGuard(call, my_callback, window))
    >>> # window.destroy() cancels the upload; my_callback hears nothing more

Main Exports:
    - LifecycleGuard, bind_to_lifecycle: Lifecycle-bound callbacks
    - ProgressRequestBody, BytesRequestBody, FileRequestBody: Request bodies
    - LifecycleRegistry, SimpleLifecycleOwner: Concrete lifecycles
    - ThreadConfinement: UI thread checks
    - RequestLifecycleConfig: Configuration options

Note: HttpxCall requires the 'httpx' extra. Install with:
    pip install request-lifecycle[httpx]

Version: 0.1.0
"""

__version__ = "0.1.0"

from typing import TYPE_CHECKING

from .config import RequestLifecycleConfig, get_config, set_config
from .confinement import (
    ThreadConfinement,
    bind_current_thread,
    get_default_confinement,
    set_default_confinement,
)
from .exceptions import (
    CallCancelledError,
    ConfigurationError,
    LifecycleStateError,
    RequestLifecycleError,
    ThreadConfinementError,
)
from .guard import AtomicFlag, GuardState, LifecycleGuard, bind_to_lifecycle
from .lifecycle import LifecycleRegistry, SimpleLifecycleOwner
from .observability import LifecycleMetrics, get_default_metrics
from .progress import (
    BufferSink,
    BytesRequestBody,
    FileObjectSink,
    FileRequestBody,
    ProgressRequestBody,
)
from .protocols import (
    Callback,
    CancellableCall,
    LifecycleObserver,
    LifecycleOwner,
    LifecycleSource,
    RequestBody,
    Sink,
)
from .types import (
    UNKNOWN_LENGTH,
    LifecycleEvent,
    LifecycleState,
    UploadCallback,
    UploadProgress,
)

# Lazy import for optional httpx transport
if TYPE_CHECKING:
    from .transport import HttpxCall

__all__ = [
    "UNKNOWN_LENGTH",
    "AtomicFlag",
    "BufferSink",
    "BytesRequestBody",
    "CallCancelledError",
    # Protocols
    "Callback",
    "CancellableCall",
    "ConfigurationError",
    "FileObjectSink",
    "FileRequestBody",
    "GuardState",
    "HttpxCall",  # Lazy loaded - requires httpx extra
    "LifecycleEvent",
    # Guard
    "LifecycleGuard",
    "LifecycleMetrics",
    "LifecycleObserver",
    "LifecycleOwner",
    # Lifecycle
    "LifecycleRegistry",
    "LifecycleSource",
    "LifecycleState",
    "LifecycleStateError",
    # Progress
    "ProgressRequestBody",
    "RequestBody",
    # Exceptions
    "RequestLifecycleError",
    # Config
    "RequestLifecycleConfig",
    "SimpleLifecycleOwner",
    "Sink",
    # Confinement
    "ThreadConfinement",
    "ThreadConfinementError",
    "UploadCallback",
    "UploadProgress",
    "bind_current_thread",
    "bind_to_lifecycle",
    "get_config",
    "get_default_confinement",
    "get_default_metrics",
    "set_config",
    "set_default_confinement",
]


def __getattr__(name: str) -> type:
    """Lazy import for the optional httpx transport."""
    if name == "HttpxCall":
        from .transport import HttpxCall

        return HttpxCall
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
