"""Crumb exception hierarchy.

Ordinary cookie reads and writes never raise: malformed values, missing
request/response collaborators and invalid ``secure``/``SameSite``
combinations all degrade to safe defaults. These types cover misuse at
construction or call sites.
"""


class CrumbError(Exception):
    """Base for all crumb-specific errors."""


class ConfigurationError(CrumbError):
    """Raised when a service or call is wired up inconsistently.

    Typically raised by ``CookieService.__init__`` when a browser context
    is requested but no document cookie accessor is available.
    """


class InvalidCookieAttribute(CrumbError, ValueError):
    """An attribute value that cannot be serialized (e.g. unknown SameSite)."""
