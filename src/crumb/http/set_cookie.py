"""Set-Cookie string serialization.

The write side of crumb. ``CookieAttributes`` is the single structured
form of write-time policy; positional call shapes are normalized into
it by ``CookieAttributes.from_args`` before anything is serialized.

``build_set_cookie`` emits attributes in a fixed order, each terminated
by ``;``::

    name=value;expires=...;path=...;domain=...;secure;sameSite=...;Partitioned;
"""

import logging
import math
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from email.utils import format_datetime
from enum import StrEnum
from typing import Any, TypeAlias

from crumb.errors import InvalidCookieAttribute
from crumb.http.cookies import encode_component

logger = logging.getLogger("crumb.cookies")

Expires: TypeAlias = int | float | datetime
WarningSink: TypeAlias = Callable[[str], None]

EPOCH_START = datetime(1970, 1, 1, 0, 0, 1, tzinfo=UTC)
"""Expiry used to delete a cookie."""


class SameSite(StrEnum):
    """OWASP same-site token."""

    LAX = "Lax"
    NONE = "None"
    STRICT = "Strict"

    @classmethod
    def coerce(cls, value: "SameSite | str") -> "SameSite":
        """Accept a member or a case-insensitive token (``"lax"``, ``"None"``)."""
        if isinstance(value, cls):
            return value
        for member in cls:
            if member.value.lower() == str(value).lower():
                return member
        msg = f"Invalid SameSite value {value!r}; expected one of Lax, None, Strict"
        raise InvalidCookieAttribute(msg)


# camelCase spellings accepted by ``CookieAttributes.from_mapping``
_MAPPING_ALIASES = {"sameSite": "same_site"}
_FIELDS = ("expires", "path", "domain", "secure", "same_site", "partitioned")


@dataclass(frozen=True, slots=True)
class CookieAttributes:
    """Write-time cookie policy. Every field is optional.

    ``expires`` is either a number of days from now or an absolute
    ``datetime`` (naive datetimes are taken as UTC).
    """

    expires: Expires | None = None
    path: str | None = None
    domain: str | None = None
    secure: bool | None = None
    same_site: SameSite | None = None
    partitioned: bool | None = None

    def __post_init__(self) -> None:
        if self.expires is not None and (
            isinstance(self.expires, bool) or not isinstance(self.expires, int | float | datetime)
        ):
            msg = f"expires must be a number of days or a datetime, got {self.expires!r}"
            raise InvalidCookieAttribute(msg)
        if isinstance(self.expires, float) and not math.isfinite(self.expires):
            msg = f"expires must be a finite number of days, got {self.expires!r}"
            raise InvalidCookieAttribute(msg)
        if self.same_site is not None and not isinstance(self.same_site, SameSite):
            object.__setattr__(self, "same_site", SameSite.coerce(self.same_site))

    @classmethod
    def from_args(
        cls,
        expires: Expires | None = None,
        path: str | None = None,
        domain: str | None = None,
        secure: bool | None = None,
        same_site: SameSite | str | None = None,
        partitioned: bool | None = None,
    ) -> "CookieAttributes":
        """Normalize the positional call shape.

        An unset ``same_site`` stays unset so the serializer applies the
        configured default.
        """
        return cls(
            expires=expires,
            path=path,
            domain=domain,
            secure=secure,
            same_site=SameSite.coerce(same_site) if same_site else None,
            partitioned=partitioned,
        )

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> "CookieAttributes":
        """Build from a dict of options (snake_case or ``sameSite``)."""
        kwargs: dict[str, Any] = {}
        for key, value in options.items():
            field_name = _MAPPING_ALIASES.get(key, key)
            if field_name not in _FIELDS:
                msg = f"Unknown cookie attribute {key!r}"
                raise InvalidCookieAttribute(msg)
            kwargs[field_name] = value
        return cls(**kwargs)


def format_http_date(moment: datetime) -> str:
    """Format *moment* as an IMF-fixdate (``Thu, 01 Jan 1970 00:00:01 GMT``)."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    return format_datetime(moment.astimezone(UTC), usegmt=True)


def resolve_expires(expires: Expires, now: datetime | None = None) -> datetime:
    """Turn a day count into an absolute instant; datetimes pass through.

    Day counts past the representable range clamp to ``datetime.max``
    (or ``datetime.min`` for negative counts).
    """
    if isinstance(expires, datetime):
        return expires
    base = now if now is not None else datetime.now(UTC)
    try:
        return base + timedelta(days=expires)
    except OverflowError:
        limit = datetime.max if expires > 0 else datetime.min
        return limit.replace(tzinfo=UTC)


def build_set_cookie(
    name: str,
    value: str,
    attributes: CookieAttributes | None = None,
    *,
    now: datetime | None = None,
    default_same_site: SameSite = SameSite.LAX,
    warn: WarningSink | None = None,
) -> str:
    """Serialize a cookie and its attributes into a Set-Cookie string.

    ``secure=False`` combined with ``SameSite=None`` is coerced to a
    secure cookie (browsers drop insecure ``SameSite=None`` cookies) and
    reported through *warn*, or the ``crumb.cookies`` logger.
    """
    attrs = attributes if attributes is not None else CookieAttributes()
    parts = [f"{encode_component(name)}={encode_component(value)};"]

    if attrs.expires is not None:
        parts.append(f"expires={format_http_date(resolve_expires(attrs.expires, now))};")

    if attrs.path:
        parts.append(f"path={attrs.path};")

    if attrs.domain:
        parts.append(f"domain={attrs.domain};")

    same_site = attrs.same_site or default_same_site
    secure = attrs.secure
    if secure is False and same_site is SameSite.NONE:
        secure = True
        msg = f"Cookie {name} was forced with secure flag because sameSite=None."
        (warn or logger.warning)(msg)

    if secure:
        parts.append("secure;")

    parts.append(f"sameSite={same_site.value};")

    if attrs.partitioned:
        parts.append("Partitioned;")

    return "".join(parts)
