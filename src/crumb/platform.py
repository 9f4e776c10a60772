"""Execution-context detection.

A live document only exists when Python runs inside a browser
(Pyodide / PyScript, where ``sys.platform == "emscripten"`` and the
``js`` module proxies the page's globals). Everywhere else cookies come
from request/response headers.
"""

import sys
from enum import StrEnum
from typing import Any


class ExecutionContext(StrEnum):
    """Where cookies live for the lifetime of a service."""

    BROWSER = "browser"
    SERVER = "server"


def browser_document() -> Any | None:
    """Return the page's ``document`` proxy, or ``None`` outside a browser."""
    if sys.platform != "emscripten":
        return None
    try:
        import js  # type: ignore[import-not-found]
    except ImportError:
        return None
    return getattr(js, "document", None)


def detect_context() -> ExecutionContext:
    """BROWSER when a live document is reachable, otherwise SERVER."""
    if browser_document() is not None:
        return ExecutionContext.BROWSER
    return ExecutionContext.SERVER
