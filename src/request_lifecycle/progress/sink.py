# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Byte sinks for outbound request bodies.

Classes:
    ForwardingSink: Base decorator that delegates every call to another sink.
    ProgressSink: ForwardingSink that reports each forwarded chunk.
    FileObjectSink: Sink writing to a binary file-like object.
    BufferSink: Sink collecting bytes in memory.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import IO, TYPE_CHECKING

from typing_extensions import Self

if TYPE_CHECKING:
    from ..protocols.body import Sink
    from ..types.progress import UploadProgress
    from .state import UploadProgressState

logger = logging.getLogger(__name__)


def _check_byte_count(buffer: bytes, byte_count: int) -> None:
    if byte_count < 0 or byte_count > len(buffer):
        raise ValueError(
            f"byte_count {byte_count} out of range for buffer of {len(buffer)} bytes"
        )


class ForwardingSink:
    """Sink that delegates to another sink. Subclasses override what they intercept."""

    def __init__(self, delegate: Sink) -> None:
        self._delegate = delegate

    @property
    def delegate(self) -> Sink:
        return self._delegate

    def write(self, buffer: bytes, byte_count: int) -> None:
        self._delegate.write(buffer, byte_count)

    def flush(self) -> None:
        self._delegate.flush()

    def close(self) -> None:
        self._delegate.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._delegate!r})"


class ProgressSink(ForwardingSink):
    """
    Forwarding sink that counts bytes and reports progress after each chunk.

    The chunk is forwarded first; if the downstream write raises, nothing is
    counted and the error propagates unchanged.

    Args:
        delegate: Downstream sink
        state: Running totals for this write
        listener: Called with the snapshot of every forwarded chunk
    """

    def __init__(
        self,
        delegate: Sink,
        state: UploadProgressState,
        listener: Callable[[UploadProgress], None],
    ) -> None:
        super().__init__(delegate)
        self._state = state
        self._listener = listener

    @property
    def state(self) -> UploadProgressState:
        return self._state

    def write(self, buffer: bytes, byte_count: int) -> None:
        _check_byte_count(buffer, byte_count)
        super().write(buffer, byte_count)
        self._listener(self._state.record_chunk(byte_count))


class FileObjectSink:
    """
    Sink writing to a binary file-like object (socket file, BytesIO, file).

    ``close()`` closes the underlying object only when ``close_file`` is set.
    """

    def __init__(self, fileobj: IO[bytes], *, close_file: bool = False) -> None:
        self._fileobj = fileobj
        self._close_file = close_file

    def write(self, buffer: bytes, byte_count: int) -> None:
        _check_byte_count(buffer, byte_count)
        view = memoryview(buffer)[:byte_count]
        self._fileobj.write(view)

    def flush(self) -> None:
        self._fileobj.flush()

    def close(self) -> None:
        if self._close_file:
            self._fileobj.close()


class BufferSink:
    """Sink that accumulates everything written to it."""

    def __init__(self) -> None:
        self._buffer = bytearray()
        self.flush_count = 0
        self.closed = False

    def write(self, buffer: bytes, byte_count: int) -> None:
        _check_byte_count(buffer, byte_count)
        self._buffer += buffer[:byte_count]

    def flush(self) -> None:
        self.flush_count += 1

    def close(self) -> None:
        self.closed = True

    def getvalue(self) -> bytes:
        return bytes(self._buffer)

    def __len__(self) -> int:
        return len(self._buffer)


__all__ = ["BufferSink", "FileObjectSink", "ForwardingSink", "ProgressSink"]
