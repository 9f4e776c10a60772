"""ASGI middleware binding request/response cookie collaborators.

Wrap any ASGI app so server-context ``CookieService`` instances find the
current request and response headers without being rebuilt per request::

    from crumb import CookieMiddleware, CookieService, ExecutionContext

    cookies = CookieService(ExecutionContext.SERVER)

    async def app(scope, receive, send):
        theme = cookies.get("theme")
        cookies.set("seen", "1", 365)
        ...

    app = CookieMiddleware(app)

The middleware never builds responses. It only adds the collected
``Set-Cookie`` headers to the wrapped app's ``http.response.start``.
"""

import logging

from crumb._internal.asgi import ASGIApp, Message, Receive, Scope, Send
from crumb.context import bind
from crumb.http.headers import MutableHeaders
from crumb.http.request import Request

logger = logging.getLogger("crumb.middleware")


class CookieMiddleware:
    """Binds a ``Request`` and fresh ``MutableHeaders`` per HTTP request."""

    __slots__ = ("app",)

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        request = Request.from_asgi(scope)
        outgoing = MutableHeaders()

        async def send_with_cookies(message: Message) -> None:
            if message["type"] == "http.response.start":
                cookies = outgoing.get_list("set-cookie")
                if cookies:
                    headers = list(message.get("headers", ()))
                    headers.extend((b"set-cookie", c.encode("latin-1")) for c in cookies)
                    message["headers"] = headers
                    logger.debug("Attached %d Set-Cookie header(s) to %s", len(cookies), request.path)
            await send(message)

        with bind(request, outgoing):
            await self.app(scope, receive, send_with_cookies)
