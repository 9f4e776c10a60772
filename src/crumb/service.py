"""CookieService: one cookie API for browser and server contexts.

The execution context is decided once, at construction, and selects a
single backing store. Every public operation goes through that store's
``read()`` or ``write()``, then hands the raw string to the parser or
the Set-Cookie builder. Nothing is cached between calls.

Usage::

    from crumb import CookieService

    cookies = CookieService()              # context detected from the platform
    cookies.set("theme", "dark", 30)        # 30 days, positional form
    cookies.set("sid", token, {"secure": True, "same_site": "Strict"})
    cookies.get("theme")                    # "dark" (browser) / request value (server)
"""

import logging
from collections.abc import Mapping
from typing import Any

from crumb.config import CookieConfig
from crumb.context import SetCookieSink
from crumb.errors import ConfigurationError
from crumb.http.cookies import get_cookie, has_cookie, parse_cookies
from crumb.http.request import IncomingRequest
from crumb.http.set_cookie import (
    EPOCH_START,
    CookieAttributes,
    Expires,
    SameSite,
    WarningSink,
    build_set_cookie,
)
from crumb.platform import ExecutionContext, browser_document, detect_context
from crumb.stores import CookieStore, select_store


class CookieService:
    """Read and write cookies in whichever context this process runs in.

    Args:
        context: Force ``BROWSER`` or ``SERVER``. Detected when omitted.
        document: Object with a ``cookie`` attribute (browser context).
            Defaults to the page's ``js.document`` under Pyodide.
        request: Incoming request snapshot (server context). Defaults to
            the request bound by ``CookieMiddleware`` at call time.
        response_headers: Outgoing headers (server context). Defaults to
            the headers bound by ``CookieMiddleware`` at call time.
        config: Service configuration.
        warn: Diagnostics sink for the secure-flag coercion warning.
            Defaults to the ``config.logger_name`` logger.
    """

    __slots__ = ("_config", "_store", "_warn")

    def __init__(
        self,
        context: ExecutionContext | None = None,
        *,
        document: Any | None = None,
        request: IncomingRequest | None = None,
        response_headers: SetCookieSink | None = None,
        config: CookieConfig | None = None,
        warn: WarningSink | None = None,
    ) -> None:
        if context is None:
            context = ExecutionContext.BROWSER if document is not None else detect_context()
        if context is ExecutionContext.BROWSER and document is None:
            document = browser_document()
            if document is None:
                msg = (
                    "Browser context requested but no document is accessible. "
                    "Pass document= explicitly or use ExecutionContext.SERVER."
                )
                raise ConfigurationError(msg)

        self._config = config or CookieConfig()
        self._warn = warn or logging.getLogger(self._config.logger_name).warning
        self._store: CookieStore = select_store(
            context,
            document=document,
            request=request,
            response_headers=response_headers,
        )

    @property
    def context(self) -> ExecutionContext:
        """The execution context fixed at construction."""
        return self._store.context

    @property
    def config(self) -> CookieConfig:
        return self._config

    def __repr__(self) -> str:
        return f"CookieService(context={self.context.value!r})"

    # -- Reads --

    def check(self, name: str) -> bool:
        """Whether a cookie called *name* exists."""
        return has_cookie(name, self._store.read(), ignore_case=self._config.ignore_case)

    def get(self, name: str) -> str:
        """The decoded value of *name*, or ``""`` if it is absent."""
        return get_cookie(name, self._store.read(), ignore_case=self._config.ignore_case)

    def get_all(self) -> dict[str, str]:
        """Every cookie as a ``{name: value}`` dict."""
        return parse_cookies(self._store.read())

    # -- Writes --

    def set(
        self,
        name: str,
        value: str,
        expires_or_attributes: Expires | CookieAttributes | Mapping[str, Any] | None = None,
        path: str | None = None,
        domain: str | None = None,
        secure: bool | None = None,
        same_site: SameSite | str | None = None,
        partitioned: bool | None = None,
    ) -> None:
        """Set a cookie.

        Two call shapes::

            cookies.set("a", "1", 7, "/", "example.com", True, "Strict")
            cookies.set("a", "1", CookieAttributes(expires=7, path="/"))

        ``expires`` is a number of days from now or a ``datetime``.
        An unset ``same_site`` falls back to ``config.default_same_site``.
        ``secure=False`` with ``same_site="None"`` is forced to secure,
        with a warning.
        """
        positional = (path, domain, secure, same_site, partitioned)
        if isinstance(expires_or_attributes, CookieAttributes | Mapping):
            if any(arg is not None for arg in positional):
                msg = "Pass cookie attributes either as one object or positionally, not both."
                raise ConfigurationError(msg)
            if isinstance(expires_or_attributes, CookieAttributes):
                attributes = expires_or_attributes
            else:
                attributes = CookieAttributes.from_mapping(expires_or_attributes)
        elif expires_or_attributes is not None or any(arg is not None for arg in positional):
            attributes = CookieAttributes.from_args(
                expires_or_attributes, path, domain, secure, same_site, partitioned
            )
        else:
            attributes = CookieAttributes()

        cookie_string = build_set_cookie(
            name,
            value,
            attributes,
            default_same_site=self._config.default_same_site,
            warn=self._warn,
        )
        self._store.write(cookie_string)

    def delete(
        self,
        name: str,
        path: str | None = None,
        domain: str | None = None,
        secure: bool | None = None,
        same_site: SameSite | str | None = None,
    ) -> None:
        """Expire *name* by rewriting it empty with an epoch expiry.

        An unset *same_site* falls back to ``config.default_same_site``.
        """
        self.set(
            name,
            "",
            CookieAttributes(
                expires=EPOCH_START,
                path=path,
                domain=domain,
                secure=secure,
                same_site=SameSite.coerce(same_site) if same_site else None,
            ),
        )

    def delete_all(
        self,
        path: str | None = None,
        domain: str | None = None,
        secure: bool | None = None,
        same_site: SameSite | str | None = None,
    ) -> None:
        """Expire every cookie currently readable."""
        for name in self.get_all():
            self.delete(name, path, domain, secure, same_site)
