"""Unit tests for the sink implementations."""

import io
from unittest.mock import Mock

import pytest

from request_lifecycle.progress import (
    BufferSink,
    FileObjectSink,
    ForwardingSink,
    ProgressSink,
    UploadProgressState,
)
from request_lifecycle.protocols import Sink


class TestForwardingSink:
    def test_delegates_all_calls(self):
        delegate = Mock()
        sink = ForwardingSink(delegate)

        sink.write(b"abc", 2)
        sink.flush()
        sink.close()

        delegate.write.assert_called_once_with(b"abc", 2)
        delegate.flush.assert_called_once_with()
        delegate.close.assert_called_once_with()

    def test_context_manager_closes(self):
        delegate = Mock()
        with ForwardingSink(delegate) as sink:
            assert sink.delegate is delegate
        delegate.close.assert_called_once_with()


class TestProgressSink:
    def test_forwards_before_reporting(self):
        order: list[str] = []
        delegate = Mock()
        delegate.write.side_effect = lambda *a: order.append("write")
        state = UploadProgressState(resolve_length=lambda: 3)
        sink = ProgressSink(delegate, state, lambda p: order.append(f"report:{p.bytes_written}"))

        sink.write(b"abc", 3)

        assert order == ["write", "report:3"]
        assert sink.state is state

    def test_partial_buffer(self):
        buffer = BufferSink()
        reports = []
        sink = ProgressSink(buffer, UploadProgressState(resolve_length=lambda: 2), reports.append)

        sink.write(b"abcdef", 2)

        assert buffer.getvalue() == b"ab"
        assert reports[0].bytes_written == 2

    @pytest.mark.parametrize("byte_count", [-1, 4])
    def test_rejects_out_of_range_byte_count(self, byte_count):
        delegate = Mock()
        sink = ProgressSink(delegate, UploadProgressState(resolve_length=lambda: 3), Mock())

        with pytest.raises(ValueError):
            sink.write(b"abc", byte_count)
        delegate.write.assert_not_called()


class TestFileObjectSink:
    def test_writes_to_file_object(self):
        fileobj = io.BytesIO()
        sink = FileObjectSink(fileobj)

        sink.write(b"hello world", 5)
        sink.flush()

        assert fileobj.getvalue() == b"hello"

    def test_close_leaves_file_open_by_default(self):
        fileobj = io.BytesIO()
        FileObjectSink(fileobj).close()
        assert not fileobj.closed

    def test_close_file_when_owned(self):
        fileobj = io.BytesIO()
        FileObjectSink(fileobj, close_file=True).close()
        assert fileobj.closed

    def test_satisfies_sink_protocol(self):
        assert isinstance(FileObjectSink(io.BytesIO()), Sink)


class TestBufferSink:
    def test_accumulates(self):
        sink = BufferSink()
        sink.write(b"ab", 2)
        sink.write(b"cd", 1)
        sink.close()

        assert sink.getvalue() == b"abc"
        assert len(sink) == 3
        assert sink.closed is True
