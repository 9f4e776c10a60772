"""Test utilities for code that reads and writes cookies.

- ``MemoryDocument``: an in-memory ``document`` for browser-context services.
- ``make_request``: an incoming request snapshot for server-context services.
- ``call_asgi``: drive an ASGI app (e.g. one wrapped in ``CookieMiddleware``)
  without a server and capture what it sent.

Usage::

    from crumb import CookieService, ExecutionContext
    from crumb.testing import MemoryDocument

    doc = MemoryDocument()
    cookies = CookieService(ExecutionContext.BROWSER, document=doc)
    cookies.set("a", "1")
    assert doc.cookie == "a=1"
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from email.utils import parsedate_to_datetime
from typing import Any

from crumb._internal.asgi import ASGIApp
from crumb.http.request import Request


class MemoryDocument:
    """Mimics ``document.cookie`` for a single origin and path.

    Reading returns ``"; "``-joined ``name=value`` pairs in insertion
    order. Assigning stores one cookie (replacing any cookie of the same
    name) or removes it when its ``expires`` lies in the past. Path and
    domain scoping are not modelled. Every assigned string is kept in
    ``assignments``.
    """

    def __init__(self, initial: str = "") -> None:
        self._jar: dict[str, str] = {}
        self.assignments: list[str] = []
        for pair in initial.split(";"):
            name, sep, value = pair.strip().partition("=")
            if sep:
                self._jar[name] = value

    @property
    def cookie(self) -> str:
        return "; ".join(f"{name}={value}" for name, value in self._jar.items())

    @cookie.setter
    def cookie(self, cookie_string: str) -> None:
        self.assignments.append(cookie_string)
        pair, *attributes = cookie_string.split(";")
        name, _, value = pair.strip().partition("=")
        if _is_expired(attributes):
            self._jar.pop(name, None)
        else:
            self._jar[name] = value

    def __repr__(self) -> str:
        return f"MemoryDocument({self.cookie!r})"


def _is_expired(attributes: list[str]) -> bool:
    for attribute in attributes:
        key, _, value = attribute.strip().partition("=")
        if key.lower() != "expires":
            continue
        try:
            expires = parsedate_to_datetime(value)
        except (TypeError, ValueError):
            return False
        if expires.tzinfo is None:
            expires = expires.replace(tzinfo=UTC)
        return expires <= datetime.now(UTC)
    return False


def make_request(cookie: str | None = None, *, path: str = "/", **headers: str) -> Request:
    """Build a ``Request`` carrying *cookie* as its ``Cookie`` header.

    Extra keyword headers use underscores for dashes (``user_agent=...``).
    """
    pairs = {name.replace("_", "-"): value for name, value in headers.items()}
    if cookie is not None:
        pairs["cookie"] = cookie
    return Request.from_headers(pairs, path=path)


@dataclass(slots=True)
class ASGIResult:
    """What an ASGI app sent back for one request."""

    status: int = 0
    headers: list[tuple[str, str]] = field(default_factory=list)
    body: bytes = b""

    def header_list(self, name: str) -> list[str]:
        """All values of *name* (e.g. every ``set-cookie``)."""
        lower = name.lower()
        return [v for k, v in self.headers if k == lower]


async def call_asgi(
    app: ASGIApp,
    path: str = "/",
    *,
    method: str = "GET",
    headers: dict[str, str] | None = None,
) -> ASGIResult:
    """Send one HTTP request through *app* and capture the response."""
    raw_headers = [
        (name.lower().encode("latin-1"), value.encode("latin-1"))
        for name, value in (headers or {}).items()
    ]
    scope: dict[str, Any] = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": method.upper(),
        "path": path,
        "raw_path": path.encode("latin-1"),
        "query_string": b"",
        "root_path": "",
        "headers": raw_headers,
        "server": ("testserver", 80),
        "client": ("127.0.0.1", 0),
    }
    body_sent = False

    async def receive() -> dict[str, Any]:
        nonlocal body_sent
        if not body_sent:
            body_sent = True
            return {"type": "http.request", "body": b"", "more_body": False}
        return {"type": "http.disconnect"}

    result = ASGIResult()
    body_parts: list[bytes] = []

    async def send(message: Any) -> None:
        if message["type"] == "http.response.start":
            result.status = message["status"]
            result.headers = [
                (k.decode("latin-1").lower(), v.decode("latin-1"))
                for k, v in message.get("headers", [])
            ]
        elif message["type"] == "http.response.body":
            body_parts.append(message.get("body", b""))

    await app(scope, receive, send)
    result.body = b"".join(body_parts)
    return result
