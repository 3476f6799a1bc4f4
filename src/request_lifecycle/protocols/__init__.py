# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Protocol definitions for the collaborators this library binds together.

Available protocols:
- CancellableCall: Handle to an in-flight request that can be cancelled
- Callback: Receives start/response/failure/completed events of a call
- LifecycleObserver: Notified of lifecycle transitions
- LifecycleSource: Observable lifecycle with a queryable current state
- LifecycleOwner: Component exposing a LifecycleSource
- RequestBody: Outbound body that writes itself through a Sink
- Sink: Chunked byte destination
"""

from .body import RequestBody, Sink
from .call import CancellableCall
from .callback import Callback
from .lifecycle import LifecycleObserver, LifecycleOwner, LifecycleSource

__all__ = [
    "Callback",
    "CancellableCall",
    "LifecycleObserver",
    "LifecycleOwner",
    "LifecycleSource",
    "RequestBody",
    "Sink",
]
