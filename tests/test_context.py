"""Tests for crumb.context — request-scoped collaborators."""

import pytest

from crumb.context import (
    bind,
    current_request,
    current_response_headers,
    request_var,
    response_headers_var,
)
from crumb.http.headers import MutableHeaders
from crumb.testing import make_request


class TestAccessors:
    def test_unbound_request_is_none(self) -> None:
        """Outside a request, absence is not an error."""
        assert current_request() is None

    def test_unbound_response_headers_is_none(self) -> None:
        assert current_response_headers() is None

    def test_set_and_get_request(self) -> None:
        request = make_request("a=1")
        token = request_var.set(request)
        try:
            assert current_request() is request
        finally:
            request_var.reset(token)
        assert current_request() is None


class TestBind:
    def test_binds_both(self) -> None:
        request = make_request("a=1")
        headers = MutableHeaders()
        with bind(request, headers):
            assert current_request() is request
            assert current_response_headers() is headers
        assert current_request() is None
        assert current_response_headers() is None

    def test_reset_after_error(self) -> None:
        headers = MutableHeaders()
        with pytest.raises(RuntimeError), bind(make_request(), headers):
            msg = "boom"
            raise RuntimeError(msg)
        assert current_response_headers() is None

    def test_nested_restores_outer(self) -> None:
        outer = make_request("outer=1")
        inner = make_request("inner=1")
        with bind(outer, None):
            with bind(inner, None):
                assert current_request() is inner
            assert current_request() is outer

    def test_vars_have_none_default(self) -> None:
        assert request_var.get() is None
        assert response_headers_var.get() is None
