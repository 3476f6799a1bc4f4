# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Upload progress types.

UploadProgress is an immutable snapshot of one progress notification. It is
validated with Pydantic so that malformed values from custom bodies (negative
counts, lengths below the unknown sentinel) are rejected at the boundary.
"""

from collections.abc import Callable

from pydantic import BaseModel, ConfigDict, Field

UNKNOWN_LENGTH = -1
"""Sentinel returned by ``content_length()`` when the body size is not known."""

# Signature: (bytes_written: int, total_length: int, done: bool) -> None
UploadCallback = Callable[[int, int, bool], None]


class UploadProgress(BaseModel):
    """
    Snapshot of an upload at the moment a chunk was written.

    Attributes:
        bytes_written: Running total of bytes forwarded downstream
        total_length: Resolved body length, or UNKNOWN_LENGTH
        done: True on the single notification that ends the upload
    """

    model_config = ConfigDict(frozen=True)

    bytes_written: int = Field(ge=0)
    total_length: int = Field(default=UNKNOWN_LENGTH, ge=UNKNOWN_LENGTH)
    done: bool = False

    @property
    def is_length_known(self) -> bool:
        return self.total_length != UNKNOWN_LENGTH

    @property
    def fraction(self) -> float | None:
        """
        Completed fraction in [0.0, 1.0], or None if it cannot be computed.

        None is returned when the total is unknown or zero.
        """
        if not self.is_length_known or self.total_length == 0:
            return None
        return min(self.bytes_written / self.total_length, 1.0)


__all__ = ["UNKNOWN_LENGTH", "UploadCallback", "UploadProgress"]
