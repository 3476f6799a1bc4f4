# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Upload progress reporting.

This module provides a request body decorator that counts bytes as the
transport writes them and reports progress, including a single terminal
done notification, without altering the bytes sent.

Classes:
    ProgressRequestBody: Body decorator that reports upload progress.
    BytesRequestBody: In-memory body written in chunks.
    FileRequestBody: Body streamed from a file.
    UploadProgressState: Running totals for one write.
    ForwardingSink / ProgressSink: Sink decorators.
    FileObjectSink / BufferSink: Concrete sinks.
"""

from .body import BytesRequestBody, FileRequestBody, ProgressRequestBody
from .sink import BufferSink, FileObjectSink, ForwardingSink, ProgressSink
from .state import UploadProgressState

__all__ = [
    "BufferSink",
    "BytesRequestBody",
    "FileObjectSink",
    "FileRequestBody",
    "ForwardingSink",
    "ProgressRequestBody",
    "ProgressSink",
    "UploadProgressState",
]
