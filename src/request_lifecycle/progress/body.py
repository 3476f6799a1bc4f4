# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Progress-reporting request body.

This module provides the ProgressRequestBody class, which decorates any
RequestBody to count the bytes written while the transport sends it. It is
most useful for tracking the upload of large multipart or file bodies.

The wrapper intercepts every chunk written to the transport's sink to:
1. Forward the chunk unchanged
2. Add its size to the running total
3. Resolve the body's total length once, on the first chunk
4. Report (bytes_written, total_length, done) to the upload callback

Key Design Decisions:
- Single length query: ``content_length()`` may be expensive (multipart
  bodies compute it) and could change between calls, so it is read once per
  write and cached
- Unknown length: equality against UNKNOWN_LENGTH can never signal done, so
  a final done notification is emitted when the body finishes writing
  (configurable via ``report_done_on_unknown_length``)
- Errors from the delegate or the downstream sink propagate unchanged;
  progress already reported stands
- Upload callbacks run inline on the writing thread and should not block
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from ..config import get_config
from ..observability.metrics import LifecycleMetrics, resolve_metrics
from ..protocols.body import RequestBody, Sink
from ..types.progress import UNKNOWN_LENGTH, UploadCallback, UploadProgress
from .sink import ProgressSink
from .state import UploadProgressState

logger = logging.getLogger(__name__)


class ProgressRequestBody:
    """
    RequestBody decorator that reports upload progress.

    Pass ``on_upload`` or subclass and override :meth:`on_upload`.

    Usage:
        def show(bytes_written: int, total: int, done: bool) -> None:
            print(f"{bytes_written}/{total}{' done' if done else ''}")

        body = ProgressRequestBody(FileRequestBody("video.mp4"), show)
        transport.send(url, body)

    Note:
        ``on_upload`` is called on whichever thread writes the body, usually
        a background I/O thread, never necessarily the UI thread.
    """

    def __init__(
        self,
        delegate: RequestBody,
        on_upload: UploadCallback | None = None,
        *,
        report_done_on_unknown_length: bool | None = None,
        metrics: LifecycleMetrics | None = None,
    ) -> None:
        """
        Initialize the progress-reporting wrapper.

        Args:
            delegate: The body whose bytes are counted
            on_upload: Callback ``(bytes_written, total_length, done)``
            report_done_on_unknown_length: Override the config default
            metrics: Counters to update; defaults to the process-wide instance
        """
        if delegate is None:
            raise TypeError("delegate must not be None")
        self._delegate = delegate
        self._on_upload = on_upload
        self._report_done_on_unknown = report_done_on_unknown_length
        self._metrics = resolve_metrics(metrics)
        self._last_progress: UploadProgress | None = None

    @property
    def delegate(self) -> RequestBody:
        return self._delegate

    @property
    def last_progress(self) -> UploadProgress | None:
        """Snapshot of the most recent notification, or None before any write."""
        return self._last_progress

    def content_type(self) -> str | None:
        return self._delegate.content_type()

    def content_length(self) -> int:
        return self._delegate.content_length()

    def write_to(self, sink: Sink) -> None:
        """
        Write the delegate body through a counting sink, then flush.

        Raises:
            Any exception raised by the delegate or by ``sink``, unchanged.
        """
        state = UploadProgressState(resolve_length=self._delegate.content_length)
        progress_sink = ProgressSink(sink, state, self._notify)
        if self._metrics:
            self._metrics.record_upload_started()

        try:
            self._delegate.write_to(progress_sink)
            progress_sink.flush()
        except Exception:
            logger.debug(
                f"Upload failed after {state.bytes_written} bytes "
                f"in {state.chunk_count} chunks"
            )
            if self._metrics:
                self._metrics.record_upload_failure()
            raise
        finally:
            if self._metrics:
                self._metrics.record_upload_progress(state.bytes_written)

        final = state.record_end_of_stream()
        if final is not None and (
            final.is_length_known or self._report_done_on_unknown_length()
        ):
            self._notify(final)

    def on_upload(self, bytes_written: int, total_length: int, done: bool) -> None:
        """
        Progress hook. Calls the ``on_upload`` callback given at construction.

        Subclasses may override this instead of passing a callback.
        """
        if self._on_upload is not None:
            self._on_upload(bytes_written, total_length, done)

    def _notify(self, progress: UploadProgress) -> None:
        self._last_progress = progress
        if self._metrics and progress.done:
            self._metrics.record_upload_done()
        self.on_upload(progress.bytes_written, progress.total_length, progress.done)

    def _report_done_on_unknown_length(self) -> bool:
        if self._report_done_on_unknown is not None:
            return self._report_done_on_unknown
        return get_config().report_done_on_unknown_length

    def __repr__(self) -> str:
        return f"ProgressRequestBody({self._delegate!r})"


class BytesRequestBody:
    """
    In-memory request body written in fixed-size chunks.

    Args:
        data: Body bytes
        content_type: Media type, or None
        chunk_size: Slice size; defaults to the config's default_chunk_size
    """

    def __init__(
        self,
        data: bytes,
        content_type: str | None = "application/octet-stream",
        chunk_size: int | None = None,
    ) -> None:
        self._data = bytes(data)
        self._content_type = content_type
        self._chunk_size = chunk_size or get_config().default_chunk_size

    def content_type(self) -> str | None:
        return self._content_type

    def content_length(self) -> int:
        return len(self._data)

    def write_to(self, sink: Sink) -> None:
        for offset in range(0, len(self._data), self._chunk_size):
            chunk = self._data[offset : offset + self._chunk_size]
            sink.write(chunk, len(chunk))

    def __repr__(self) -> str:
        return f"BytesRequestBody({len(self._data)} bytes)"


class FileRequestBody:
    """
    Request body streamed from a file on disk.

    The length is taken from the file size at the time it is asked for; the
    file is opened anew for each write.
    """

    def __init__(
        self,
        path: str | os.PathLike[str],
        content_type: str | None = "application/octet-stream",
        chunk_size: int | None = None,
    ) -> None:
        self._path = Path(path)
        self._content_type = content_type
        self._chunk_size = chunk_size or get_config().default_chunk_size

    @property
    def path(self) -> Path:
        return self._path

    def content_type(self) -> str | None:
        return self._content_type

    def content_length(self) -> int:
        try:
            return self._path.stat().st_size
        except OSError:
            return UNKNOWN_LENGTH

    def write_to(self, sink: Sink) -> None:
        with self._path.open("rb") as f:
            while chunk := f.read(self._chunk_size):
                sink.write(chunk, len(chunk))

    def __repr__(self) -> str:
        return f"FileRequestBody({str(self._path)!r})"


__all__ = ["BytesRequestBody", "FileRequestBody", "ProgressRequestBody"]
