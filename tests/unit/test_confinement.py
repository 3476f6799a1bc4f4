"""Unit tests for ThreadConfinement."""

import threading

import pytest

from request_lifecycle.config import RequestLifecycleConfig, set_config
from request_lifecycle.confinement import (
    ThreadConfinement,
    bind_current_thread,
    get_default_confinement,
    set_default_confinement,
)
from request_lifecycle.exceptions import ThreadConfinementError


def _call_on_worker(fn):
    errors: list[BaseException] = []

    def target():
        try:
            fn()
        except ThreadConfinementError as e:
            errors.append(e)

    t = threading.Thread(target=target, name="worker-1")
    t.start()
    t.join()
    return errors


class TestThreadConfinement:
    def test_defaults_to_main_thread(self):
        assert ThreadConfinement().thread is threading.main_thread()

    def test_passes_on_confined_thread(self):
        ThreadConfinement().assert_confined("anything")

    def test_fails_on_other_thread(self):
        errors = _call_on_worker(lambda: ThreadConfinement().assert_confined("on_start"))

        assert len(errors) == 1
        assert str(errors[0]) == "Cannot invoke on_start on a background thread"
        assert errors[0].operation == "on_start"
        assert errors[0].thread_name == "worker-1"

    def test_error_is_runtime_error(self):
        assert issubclass(ThreadConfinementError, RuntimeError)

    def test_explicitly_disabled(self):
        confinement = ThreadConfinement(enabled=False)
        assert _call_on_worker(lambda: confinement.assert_confined("x")) == []

    def test_follows_config_when_unset(self):
        confinement = ThreadConfinement()
        set_config(RequestLifecycleConfig(enforce_thread_confinement=False))

        assert confinement.enabled is False
        assert _call_on_worker(lambda: confinement.assert_confined("x")) == []

    def test_is_confined(self):
        confinement = ThreadConfinement()
        results: list[bool] = []
        t = threading.Thread(target=lambda: results.append(confinement.is_confined()))
        t.start()
        t.join()

        assert confinement.is_confined() is True
        assert results == [False]

    def test_repr(self):
        assert "MainThread" in repr(ThreadConfinement())


class TestDefaultConfinement:
    def test_default_is_shared(self):
        assert get_default_confinement() is get_default_confinement()

    def test_set_default_returns_previous(self):
        current = get_default_confinement()
        replacement = ThreadConfinement(enabled=False)

        assert set_default_confinement(replacement) is current
        assert get_default_confinement() is replacement

    def test_bind_current_thread(self):
        bound: list[ThreadConfinement] = []
        t = threading.Thread(target=lambda: bound.append(bind_current_thread()))
        t.start()
        t.join()

        assert bound[0].thread is t
        with pytest.raises(ThreadConfinementError):
            bound[0].assert_confined("x")
