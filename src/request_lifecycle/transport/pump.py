# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Push-to-pull adapter for request bodies.

A RequestBody pushes its bytes into a Sink, while HTTP clients such as httpx
pull request content from an iterator. body_content() bridges the two with a
writer thread and a bounded queue: the writer runs ``body.write_to`` and
blocks when the consumer falls behind, so progress reported by the body
stays within a few chunks of what the client has actually taken.
"""

from __future__ import annotations

import logging
import queue
import threading
from collections.abc import Iterator
from typing import cast

from ..config import get_config
from ..protocols.body import RequestBody

logger = logging.getLogger(__name__)

_END = object()


class _Abandoned(Exception):
    """Raised inside the writer thread when the consumer went away."""


class _QueueSink:
    """Sink that hands chunks to the consuming thread."""

    def __init__(self, chunks: queue.Queue[object], abandoned: threading.Event) -> None:
        self._chunks = chunks
        self._abandoned = abandoned

    def write(self, buffer: bytes, byte_count: int) -> None:
        if byte_count < 0 or byte_count > len(buffer):
            raise ValueError(
                f"byte_count {byte_count} out of range for buffer of {len(buffer)} bytes"
            )
        self.put_item(bytes(buffer[:byte_count]))

    def flush(self) -> None:
        pass

    def close(self) -> None:
        pass

    def put_item(self, item: object) -> None:
        while True:
            if self._abandoned.is_set():
                raise _Abandoned()
            try:
                self._chunks.put(item, timeout=0.05)
                return
            except queue.Full:
                continue


class _Failure:
    __slots__ = ("error",)

    def __init__(self, error: BaseException) -> None:
        self.error = error


def body_content(
    body: RequestBody,
    queue_size: int | None = None,
    *,
    thread_name: str = "request-body-writer",
) -> Iterator[bytes]:
    """
    Iterate over the bytes of ``body`` as it writes them.

    Each call starts a fresh write when iteration begins, so a retry simply
    calls body_content() again. Exceptions raised by the body are re-raised in
    the consuming thread. Closing the generator early stops the writer at
    its next chunk.

    Args:
        body: Body to stream
        queue_size: Chunks buffered ahead of the consumer; defaults to the
            config's pump_queue_size
        thread_name: Name of the writer thread
    """
    chunks: queue.Queue[object] = queue.Queue(
        maxsize=queue_size or get_config().pump_queue_size
    )
    abandoned = threading.Event()
    sink = _QueueSink(chunks, abandoned)

    def write() -> None:
        try:
            body.write_to(sink)
        except _Abandoned:
            logger.debug(f"Consumer abandoned {body!r}")
            return
        except BaseException as e:
            try:
                sink.put_item(_Failure(e))
            except _Abandoned:
                pass
            return
        try:
            sink.put_item(_END)
        except _Abandoned:
            pass

    writer = threading.Thread(target=write, name=thread_name, daemon=True)
    writer.start()
    try:
        while True:
            item = chunks.get()
            if item is _END:
                return
            if isinstance(item, _Failure):
                raise item.error
            yield cast(bytes, item)
    finally:
        abandoned.set()


__all__ = ["body_content"]
