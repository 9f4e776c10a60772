"""Immutable incoming request snapshot.

Server-context stores only ever look at the ``Cookie`` header, so any
object with ``headers.get(name)`` satisfies ``IncomingRequest``.
``Request`` is the concrete snapshot the ASGI middleware binds.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Protocol

from crumb.http.headers import Headers


class HeaderLookup(Protocol):
    def get(self, key: str, default: str | None = None, /) -> str | None: ...


class IncomingRequest(Protocol):
    """Anything exposing request headers by name."""

    @property
    def headers(self) -> HeaderLookup: ...


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request snapshot.

    The raw ``Cookie`` header is kept as received and re-parsed on every
    read; nothing is cached.
    """

    method: str
    path: str
    headers: Headers

    @property
    def cookie_header(self) -> str:
        """The raw ``Cookie`` header, or ``""``."""
        return self.headers.get("cookie") or ""

    @classmethod
    def from_asgi(cls, scope: Mapping[str, Any]) -> "Request":
        """Create a Request from an ASGI HTTP scope."""
        return cls(
            method=scope.get("method", "GET"),
            path=scope.get("path", "/"),
            headers=Headers(tuple(tuple(pair) for pair in scope.get("headers", ()))),
        )

    @classmethod
    def from_headers(
        cls,
        headers: Mapping[str, str],
        *,
        method: str = "GET",
        path: str = "/",
    ) -> "Request":
        """Create a Request from plain string headers."""
        return cls(method=method, path=path, headers=Headers.from_pairs(headers))
