"""Unit tests for body_content()."""

import threading

import pytest

from request_lifecycle.progress import BytesRequestBody, ProgressRequestBody
from request_lifecycle.protocols import Sink
from request_lifecycle.transport import body_content


class TestBodyContent:
    def test_yields_all_bytes(self):
        data = b"0123456789" * 100

        chunks = list(body_content(BytesRequestBody(data, chunk_size=64)))

        assert b"".join(chunks) == data
        assert len(chunks[0]) == 64

    def test_empty_body(self):
        assert list(body_content(BytesRequestBody(b""))) == []

    def test_write_runs_on_background_thread(self):
        threads: list[threading.Thread] = []
        body = ProgressRequestBody(
            BytesRequestBody(b"abc"),
            lambda *a: threads.append(threading.current_thread()),
        )

        list(body_content(body))

        assert threads
        assert all(t is not threading.main_thread() for t in threads)
        assert threads[0].name == "request-body-writer"

    def test_body_error_reraised_in_consumer(self):
        class Broken:
            def content_type(self):
                return None

            def content_length(self):
                return -1

            def write_to(self, sink: Sink) -> None:
                sink.write(b"ok", 2)
                raise OSError("disk gone")

        iterator = body_content(Broken())

        assert next(iterator) == b"ok"
        with pytest.raises(OSError, match="disk gone"):
            next(iterator)

    def test_closing_early_stops_writer(self):
        written: list[int] = []
        stopped = threading.Event()

        class Endless:
            def content_type(self):
                return None

            def content_length(self):
                return -1

            def write_to(self, sink: Sink) -> None:
                try:
                    while True:
                        sink.write(b"x", 1)
                        written.append(1)
                finally:
                    stopped.set()

        iterator = body_content(Endless(), queue_size=1)
        next(iterator)
        iterator.close()

        assert stopped.wait(timeout=5.0)

    def test_rejects_bad_byte_count(self):
        class Bad:
            def content_type(self):
                return None

            def content_length(self):
                return 1

            def write_to(self, sink: Sink) -> None:
                sink.write(b"a", 5)

        with pytest.raises(ValueError):
            list(body_content(Bad()))
