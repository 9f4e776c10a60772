"""Kida template globals for reading cookies while rendering.

Registers read-only helpers on a kida ``Environment`` so a page rendered
on the server (or in the browser) sees the same cookies as handler code::

    from kida import Environment
    from crumb.templating import register_cookie_globals

    env = Environment()
    register_cookie_globals(env, cookies)

    {% if has_cookie("consent") %}...{% endif %}
    <body class="{{ cookie('theme') }}">

Writes stay out of templates.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from kida import Environment

    from crumb.service import CookieService


def cookie_globals(service: CookieService) -> dict[str, Callable[..., Any]]:
    """The template-facing read helpers bound to *service*."""
    return {
        "cookie": service.get,
        "has_cookie": service.check,
        "cookies": service.get_all,
    }


def register_cookie_globals(env: Environment, service: CookieService) -> Environment:
    """Add ``cookie``, ``has_cookie`` and ``cookies`` globals to *env*."""
    for name, value in cookie_globals(service).items():
        env.add_global(name, value)
    return env
