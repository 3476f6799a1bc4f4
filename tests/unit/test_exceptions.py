"""Unit tests for the exceptions module.

Tests all exception classes defined in request_lifecycle.exceptions.
"""

import pytest

from request_lifecycle.exceptions import (
    CallCancelledError,
    ConfigurationError,
    LifecycleStateError,
    RequestLifecycleError,
    ThreadConfinementError,
)


class TestRequestLifecycleError:
    def test_can_be_caught_as_exception(self):
        with pytest.raises(Exception):  # noqa: B017
            raise RequestLifecycleError("test error")

    def test_message_preserved(self):
        assert str(RequestLifecycleError("test message")) == "test message"


class TestThreadConfinementError:
    def test_names_operation(self):
        error = ThreadConfinementError("on_response", "pool-2")

        assert error.operation == "on_response"
        assert error.thread_name == "pool-2"
        assert "on_response" in str(error)

    def test_catchable_as_base_and_runtime_error(self):
        with pytest.raises(RequestLifecycleError):
            raise ThreadConfinementError("x")
        with pytest.raises(RuntimeError):
            raise ThreadConfinementError("x")


class TestLifecycleStateError:
    def test_stores_state(self):
        error = LifecycleStateError("bad", state="DESTROYED")
        assert error.state == "DESTROYED"
        assert isinstance(error, RequestLifecycleError)


class TestCallCancelledError:
    def test_default_message(self):
        assert str(CallCancelledError()) == "Canceled"

    def test_is_os_error(self):
        with pytest.raises(OSError):
            raise CallCancelledError()


class TestConfigurationError:
    def test_is_base_error(self):
        assert issubclass(ConfigurationError, RequestLifecycleError)
