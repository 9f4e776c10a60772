"""Backing stores: where raw cookie strings are read from and written to.

Exactly one store is selected when a ``CookieService`` is built and it
never changes afterwards:

- ``BrowserStore`` wraps a live document. Reads reflect earlier writes
  immediately; each write is the platform's single-cookie set.
- ``ServerStore`` reads the incoming request's ``Cookie`` header and
  adds ``Set-Cookie`` entries to the outgoing headers (``append`` when
  the collection has it, ``set`` otherwise). The response
  side is write-only: a write never shows up in a later read.
"""

import logging
from typing import Any, Protocol

from crumb.context import SetCookieSink, current_request, current_response_headers
from crumb.errors import ConfigurationError
from crumb.http.request import IncomingRequest
from crumb.platform import ExecutionContext

logger = logging.getLogger("crumb.stores")


class DocumentCookies(Protocol):
    """A ``document``-like object with a read/write ``cookie`` string."""

    cookie: str


class CookieStore(Protocol):
    """Read/write access to one backing store."""

    @property
    def context(self) -> ExecutionContext: ...

    def read(self) -> str: ...

    def write(self, cookie_string: str) -> None: ...


class BrowserStore:
    """Live document cookie store."""

    __slots__ = ("_document",)

    def __init__(self, document: DocumentCookies) -> None:
        self._document = document

    @property
    def context(self) -> ExecutionContext:
        return ExecutionContext.BROWSER

    def read(self) -> str:
        return self._document.cookie or ""

    def write(self, cookie_string: str) -> None:
        self._document.cookie = cookie_string


class ServerStore:
    """Request header snapshot in, response ``Set-Cookie`` headers out.

    Explicitly bound collaborators win; otherwise the ones bound to the
    current context by ``CookieMiddleware`` are used, resolved per call
    so a single service can serve many requests.
    """

    __slots__ = ("_request", "_response_headers")

    def __init__(
        self,
        request: IncomingRequest | None = None,
        response_headers: SetCookieSink | None = None,
    ) -> None:
        self._request = request
        self._response_headers = response_headers

    @property
    def context(self) -> ExecutionContext:
        return ExecutionContext.SERVER

    def read(self) -> str:
        request = self._request if self._request is not None else current_request()
        if request is None:
            return ""
        return request.headers.get("cookie") or ""

    def write(self, cookie_string: str) -> None:
        headers = self._response_headers
        if headers is None:
            headers = current_response_headers()
        if headers is None:
            logger.debug("No response headers bound; dropping Set-Cookie %r", cookie_string)
            return
        append = getattr(headers, "append", None)
        if append is not None:
            append("Set-Cookie", cookie_string)
        else:
            headers.set("Set-Cookie", cookie_string)  # type: ignore[union-attr]


def select_store(
    context: ExecutionContext,
    *,
    document: Any | None = None,
    request: IncomingRequest | None = None,
    response_headers: SetCookieSink | None = None,
) -> CookieStore:
    """Build the store for *context*. Browser stores require a *document*."""
    if context is ExecutionContext.BROWSER:
        if document is None:
            msg = "A browser store needs a document cookie accessor."
            raise ConfigurationError(msg)
        return BrowserStore(document)
    return ServerStore(request, response_headers)
