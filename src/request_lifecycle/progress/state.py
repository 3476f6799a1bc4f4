# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Per-write upload progress state.

This module provides the UploadProgressState dataclass that carries the
running byte count and the cached total length of one write of a body.
A fresh state is created for every ``write_to`` call.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from ..types.progress import UNKNOWN_LENGTH, UploadProgress


@dataclass
class UploadProgressState:
    """
    Running totals for one write of a progress-reporting body.

    Attributes:
        resolve_length: Returns the body's total length; called at most once
        bytes_written: Bytes forwarded downstream so far
        total_length: Cached total length, UNKNOWN_LENGTH until resolved
        chunk_count: Number of chunks forwarded
        done_reported: Whether a done notification has been emitted
    """

    resolve_length: Callable[[], int] = field(repr=False)
    bytes_written: int = 0
    total_length: int = UNKNOWN_LENGTH
    chunk_count: int = 0
    done_reported: bool = False
    _length_resolved: bool = field(default=False, repr=False)

    def record_chunk(self, byte_count: int) -> UploadProgress:
        """
        Account for a chunk that has been forwarded downstream.

        The total length is resolved on the first chunk only and cached, so
        the body is asked once per write even if it reports an unknown
        length.

        Args:
            byte_count: Size of the chunk just written.

        Returns:
            Snapshot to report for this chunk.
        """
        self.bytes_written += byte_count
        self.chunk_count += 1
        if not self._length_resolved:
            self.total_length = self.resolve_length()
            self._length_resolved = True

        done = self.bytes_written == self.total_length and not self.done_reported
        if done:
            self.done_reported = True
        return UploadProgress(
            bytes_written=self.bytes_written,
            total_length=self.total_length,
            done=done,
        )

    def record_end_of_stream(self) -> UploadProgress | None:
        """
        Account for the body having finished writing.

        An empty body never wrote a chunk, so its length is resolved here.

        Returns:
            A final done snapshot when no done was reported yet and either
            the length is unknown or an empty body matched its length,
            otherwise None.
        """
        if not self._length_resolved:
            self.total_length = self.resolve_length()
            self._length_resolved = True
        if self.done_reported:
            return None
        if (
            self.total_length != UNKNOWN_LENGTH
            and self.bytes_written != self.total_length
        ):
            return None
        self.done_reported = True
        return UploadProgress(
            bytes_written=self.bytes_written,
            total_length=self.total_length,
            done=True,
        )


__all__ = ["UploadProgressState"]
