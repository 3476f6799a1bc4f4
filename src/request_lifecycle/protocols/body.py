# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Protocols for outbound request bodies and the sinks they write to."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Sink(Protocol):
    """
    Destination for body bytes.

    ``write`` consumes the first ``byte_count`` bytes of ``buffer``.
    """

    def write(self, buffer: bytes, byte_count: int) -> None: ...

    def flush(self) -> None: ...

    def close(self) -> None: ...


@runtime_checkable
class RequestBody(Protocol):
    """
    Outbound request body.

    ``content_length()`` returns UNKNOWN_LENGTH (-1) when the size is not
    known in advance. ``write_to`` writes the whole body through ``sink``,
    in as many chunks as the body likes, and may be called more than once
    (for example when the transport retries).
    """

    def content_type(self) -> str | None: ...

    def content_length(self) -> int: ...

    def write_to(self, sink: Sink) -> None: ...
