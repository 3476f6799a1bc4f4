# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
httpx-backed cancellable call.

HttpxCall is the transport side of a LifecycleGuard: it runs one HTTP
exchange on a worker thread with an ``httpx.Client`` and delivers
on_start / on_response / on_failure / on_completed through a dispatcher
that runs them on the UI thread.

Request bodies are streamed through body_content(), so a
ProgressRequestBody reports progress as httpx consumes the bytes.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator, Mapping
from typing import TYPE_CHECKING

import httpx

from ..config import get_config
from ..exceptions import CallCancelledError
from .pump import body_content

if TYPE_CHECKING:
    from ..protocols.body import RequestBody
    from ..protocols.callback import Callback
    from .dispatch import Dispatcher

logger = logging.getLogger(__name__)


class HttpxCall:
    """
    One HTTP exchange that can be run once, synchronously or in the background.

    ``cancel()`` may be called from any thread, any number of times, before,
    during or after the exchange. A cancelled exchange closes its response
    and fails with CallCancelledError.

    Usage:
        executor = MainThreadExecutor()
        call = HttpxCall(client, "POST", "/upload", executor.post,
                         body=ProgressRequestBody(FileRequestBody(path), show))
        call.enqueue(LifecycleGuard(call, my_callback, window))
        executor.run_until(lambda: done)
    """

    def __init__(
        self,
        client: httpx.Client,
        method: str,
        url: str | httpx.URL,
        dispatcher: Dispatcher,
        *,
        body: RequestBody | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        self._client = client
        self._method = method
        self._url = url
        self._dispatcher = dispatcher
        self._body = body
        self._headers = dict(headers or {})

        self._lock = threading.Lock()
        self._cancelled = False
        self._executed = False
        self._response: httpx.Response | None = None

    @property
    def is_cancelled(self) -> bool:
        return self._cancelled

    @property
    def is_executed(self) -> bool:
        return self._executed

    def cancel(self) -> None:
        """Cancel the exchange. Idempotent and safe from any thread."""
        with self._lock:
            if self._cancelled:
                return
            self._cancelled = True
            response = self._response
        logger.debug(f"Cancelling {self!r}")
        if response is not None:
            response.close()

    def execute(self) -> httpx.Response:
        """
        Run the exchange on the calling thread and return the read response.

        Raises:
            CallCancelledError: If the call was cancelled before or during the exchange.
            RuntimeError: If the call was already executed.
            httpx.HTTPError: On transport failure.
        """
        with self._lock:
            if self._executed:
                raise RuntimeError(f"{self!r} already executed")
            self._executed = True
            if self._cancelled:
                raise CallCancelledError()

        try:
            response = self._client.send(self._build_request(), stream=True)
        except httpx.HTTPError:
            if self._cancelled:
                raise CallCancelledError() from None
            raise

        with self._lock:
            self._response = response
            cancelled = self._cancelled
        try:
            if cancelled:
                raise CallCancelledError()
            response.read()
        except (httpx.HTTPError, httpx.StreamError) as e:
            if self._cancelled:
                raise CallCancelledError() from e
            raise
        finally:
            response.close()

        if self._cancelled:
            raise CallCancelledError()
        return response

    def enqueue(self, callback: Callback) -> None:
        """
        Run the exchange on a worker thread, reporting through ``callback``.

        Every callback method is invoked via the dispatcher. on_start is
        posted before the worker starts.
        """
        with self._lock:
            if self._executed:
                raise RuntimeError(f"{self!r} already executed")
        self._dispatcher(callback.on_start, self)
        worker = threading.Thread(
            target=self._run,
            args=(callback,),
            name=f"httpx-call-{self._method}",
            daemon=True,
        )
        worker.start()

    def _run(self, callback: Callback) -> None:
        try:
            response = self.execute()
        except Exception as e:
            logger.debug(f"{self!r} failed: {type(e).__name__}: {e}")
            self._dispatcher(callback.on_failure, self, e)
        else:
            self._dispatcher(callback.on_response, self, response)
        self._dispatcher(callback.on_completed, self)

    def _build_request(self) -> httpx.Request:
        if self._body is None:
            return self._client.build_request(
                self._method, self._url, headers=self._headers
            )

        headers = dict(self._headers)
        content_type = self._body.content_type()
        if content_type and "content-type" not in {k.lower() for k in headers}:
            headers["Content-Type"] = content_type
        length = self._body.content_length()
        if length >= 0:
            headers["Content-Length"] = str(length)
        return self._client.build_request(
            self._method,
            self._url,
            headers=headers,
            content=self._content(self._body),
        )

    def _content(self, body: RequestBody) -> Iterator[bytes]:
        for chunk in body_content(body, get_config().pump_queue_size):
            if self._cancelled:
                raise CallCancelledError()
            yield chunk

    def __repr__(self) -> str:
        return f"HttpxCall({self._method} {self._url})"


__all__ = ["HttpxCall"]
