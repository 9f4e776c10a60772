"""Crumb — one cookie API for browser documents and server-side rendering.

The same ``check``/``get``/``get_all``/``set``/``delete``/``delete_all``
calls work whether Python runs next to a live ``document.cookie``
(Pyodide / PyScript) or renders a page for an HTTP request, where reads
come from the ``Cookie`` header and writes become ``Set-Cookie`` headers.

Basic usage::

    from crumb import CookieService

    cookies = CookieService()
    if not cookies.check("consent"):
        cookies.set("consent", "pending", 30, "/")

Server rendering (ASGI)::

    from crumb import CookieMiddleware, CookieService, ExecutionContext

    cookies = CookieService(ExecutionContext.SERVER)
    app = CookieMiddleware(app)
"""

__version__ = "0.1.0-dev"
__all__ = [
    "ConfigurationError",
    "CookieAttributes",
    "CookieConfig",
    "CookieMiddleware",
    "CookieService",
    "CrumbError",
    "ExecutionContext",
    "InvalidCookieAttribute",
    "SameSite",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import crumb`` fast while providing a clean top-level API.
    """
    if name == "CookieService":
        from crumb.service import CookieService

        return CookieService

    if name == "CookieConfig":
        from crumb.config import CookieConfig

        return CookieConfig

    if name == "CookieMiddleware":
        from crumb.middleware import CookieMiddleware

        return CookieMiddleware

    if name == "ExecutionContext":
        from crumb.platform import ExecutionContext

        return ExecutionContext

    if name in ("CookieAttributes", "SameSite"):
        from crumb.http import set_cookie as _set_cookie

        return getattr(_set_cookie, name)

    if name in ("ConfigurationError", "CrumbError", "InvalidCookieAttribute"):
        from crumb import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
