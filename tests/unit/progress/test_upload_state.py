"""Unit tests for UploadProgressState."""

from unittest.mock import Mock

from request_lifecycle.progress import UploadProgressState
from request_lifecycle.types.progress import UNKNOWN_LENGTH


class TestUploadProgressState:
    def test_initial_values(self):
        state = UploadProgressState(resolve_length=Mock(return_value=10))

        assert state.bytes_written == 0
        assert state.total_length == UNKNOWN_LENGTH
        assert state.chunk_count == 0
        assert state.done_reported is False

    def test_length_resolved_lazily_once(self):
        resolve = Mock(return_value=10)
        state = UploadProgressState(resolve_length=resolve)
        resolve.assert_not_called()

        state.record_chunk(3)
        state.record_chunk(3)

        resolve.assert_called_once_with()
        assert state.total_length == 10

    def test_unknown_length_resolved_once(self):
        resolve = Mock(return_value=UNKNOWN_LENGTH)
        state = UploadProgressState(resolve_length=resolve)

        for _ in range(5):
            state.record_chunk(1)

        assert resolve.call_count == 1

    def test_done_only_on_reaching_total(self):
        state = UploadProgressState(resolve_length=lambda: 6)

        first = state.record_chunk(3)
        second = state.record_chunk(3)
        third = state.record_chunk(0)

        assert (first.done, second.done, third.done) == (False, True, False)
        assert state.done_reported is True

    def test_end_of_stream_unknown_length(self):
        state = UploadProgressState(resolve_length=lambda: UNKNOWN_LENGTH)
        state.record_chunk(4)

        final = state.record_end_of_stream()

        assert final is not None
        assert (final.bytes_written, final.total_length, final.done) == (4, -1, True)
        assert state.record_end_of_stream() is None

    def test_end_of_stream_known_length_after_done(self):
        state = UploadProgressState(resolve_length=lambda: 4)
        state.record_chunk(4)

        assert state.record_end_of_stream() is None

    def test_end_of_stream_short_known_length(self):
        state = UploadProgressState(resolve_length=lambda: 40)
        state.record_chunk(4)

        assert state.record_end_of_stream() is None

    def test_end_of_stream_resolves_length_for_empty_body(self):
        resolve = Mock(return_value=0)
        state = UploadProgressState(resolve_length=resolve)

        final = state.record_end_of_stream()

        assert final is not None
        assert final.done is True
        assert final.total_length == 0
        resolve.assert_called_once_with()
