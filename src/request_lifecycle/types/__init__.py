# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Core types for the request lifecycle library.

This package contains fundamental type definitions:
- Lifecycle states and events (lifecycle.py)
- Upload progress snapshot and the unknown-length sentinel (progress.py)
"""

from .lifecycle import LifecycleEvent, LifecycleState
from .progress import UNKNOWN_LENGTH, UploadCallback, UploadProgress

__all__ = [
    "UNKNOWN_LENGTH",
    "LifecycleEvent",
    "LifecycleState",
    "UploadCallback",
    "UploadProgress",
]
