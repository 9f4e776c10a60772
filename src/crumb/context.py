"""Request-scoped cookie collaborators via ContextVar.

Provides:
- ``request_var``: the incoming request for this task/thread.
- ``response_headers_var``: the outgoing headers ``Set-Cookie`` goes to.

Both are set by ``CookieMiddleware`` (or ``bind``) and reset afterwards.
Unlike a missing request in a web framework, a missing collaborator is
not an error here: the accessors return ``None`` and server-context
stores treat that as "no cookies" / "drop the write".

Thread safety:
    ``ContextVar`` is task-local under asyncio and thread-local
    otherwise. No locks needed.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Protocol, TypeAlias

from crumb.http.request import IncomingRequest


class AppendableHeaders(Protocol):
    """Outgoing headers that keep repeated entries (``append``)."""

    def append(self, name: str, value: str) -> None: ...


class SettableHeaders(Protocol):
    """Outgoing headers with a Fetch-style ``set(name, value)``."""

    def set(self, name: str, value: str) -> None: ...


SetCookieSink: TypeAlias = AppendableHeaders | SettableHeaders


request_var: ContextVar[IncomingRequest | None] = ContextVar("crumb_request", default=None)
"""The current incoming request. Set by the ASGI middleware."""

response_headers_var: ContextVar[SetCookieSink | None] = ContextVar(
    "crumb_response_headers", default=None
)
"""The current outgoing headers. Set by the ASGI middleware."""


def current_request() -> IncomingRequest | None:
    """Return the bound request, or ``None`` outside a request."""
    return request_var.get()


def current_response_headers() -> SetCookieSink | None:
    """Return the bound response headers, or ``None`` outside a request."""
    return response_headers_var.get()


@contextmanager
def bind(
    request: IncomingRequest | None,
    response_headers: SetCookieSink | None,
) -> Iterator[None]:
    """Bind *request* and *response_headers* for the duration of the block.

    Usage::

        with bind(request, headers):
            cookies.set("theme", "dark")   # lands in headers
    """
    request_token = request_var.set(request)
    headers_token = response_headers_var.set(response_headers)
    try:
        yield
    finally:
        response_headers_var.reset(headers_token)
        request_var.reset(request_token)
