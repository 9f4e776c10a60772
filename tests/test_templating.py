"""Tests for crumb.templating — cookie globals for kida templates."""

import pytest

from crumb.http.headers import MutableHeaders
from crumb.platform import ExecutionContext
from crumb.service import CookieService
from crumb.templating import cookie_globals, register_cookie_globals
from crumb.testing import MemoryDocument, make_request

kida = pytest.importorskip("kida")


def _server(cookie: str) -> CookieService:
    return CookieService(
        ExecutionContext.SERVER,
        request=make_request(cookie),
        response_headers=MutableHeaders(),
    )


class TestCookieGlobals:
    def test_names(self) -> None:
        helpers = cookie_globals(_server("a=1"))
        assert set(helpers) == {"cookie", "has_cookie", "cookies"}

    def test_helpers_delegate(self) -> None:
        helpers = cookie_globals(_server("a=1"))
        assert helpers["cookie"]("a") == "1"
        assert helpers["has_cookie"]("a") is True
        assert helpers["cookies"]() == {"a": "1"}


class TestKidaRendering:
    def test_cookie_value_rendered(self) -> None:
        env = register_cookie_globals(kida.Environment(), _server("theme=dark"))
        tpl = env.from_string('<body class="{{ cookie("theme") }}"></body>')
        assert tpl.render().strip() == '<body class="dark"></body>'

    def test_missing_cookie_renders_empty(self) -> None:
        env = register_cookie_globals(kida.Environment(), _server("theme=dark"))
        tpl = env.from_string("[{{ cookie('missing') }}]")
        assert tpl.render().strip() == "[]"

    def test_has_cookie_condition(self) -> None:
        env = register_cookie_globals(kida.Environment(), _server("consent=yes"))
        tpl = env.from_string("{% if has_cookie('consent') %}thanks{% endif %}")
        assert tpl.render().strip() == "thanks"

    def test_browser_document_reflects_writes(self) -> None:
        doc = MemoryDocument()
        service = CookieService(ExecutionContext.BROWSER, document=doc)
        env = register_cookie_globals(kida.Environment(), service)
        tpl = env.from_string("{{ cookie('lang') }}")
        service.set("lang", "fr")
        assert tpl.render().strip() == "fr"
