"""Tests for lazy import patterns in __init__.py modules.

These tests cover the __getattr__ lazy import mechanisms used for the
optional httpx transport.
"""

import pytest


class TestTopLevelLazyImports:
    def test_lazy_httpx_call_import(self):
        from request_lifecycle import HttpxCall

        assert HttpxCall is not None
        assert hasattr(HttpxCall, "enqueue")

    def test_unknown_attribute_raises_attribute_error(self):
        import request_lifecycle

        with pytest.raises(
            AttributeError,
            match=r"module 'request_lifecycle' has no attribute 'FakeClass'",
        ):
            _ = request_lifecycle.FakeClass

    def test_version(self):
        import request_lifecycle

        assert request_lifecycle.__version__ == "0.1.0"


class TestTransportLazyImports:
    def test_lazy_httpx_call_import(self):
        from request_lifecycle.transport import HttpxCall
        from request_lifecycle.transport.httpx_call import HttpxCall as direct

        assert HttpxCall is direct

    def test_unknown_attribute_raises_attribute_error(self):
        import request_lifecycle.transport

        with pytest.raises(AttributeError, match=r"has no attribute"):
            _ = request_lifecycle.transport.Nope
