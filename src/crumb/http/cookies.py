"""Cookie string parsing.

The read side of crumb: locating a named cookie inside a raw cookie
string (``document.cookie`` or a ``Cookie`` request header), decoding
percent-encoded components, and splitting a raw string into a dict.

Names and values are written percent-encoded (see ``encode_component``),
so names are encoded before matching.
"""

import re
from urllib.parse import quote, unquote_to_bytes

# Characters escaped in a cookie name before it is embedded in a pattern.
_NAME_SPECIALS = re.compile(r"([\[\]{}()|=;+?,.*^$])")

# Every "%" must introduce exactly two hex digits.
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")

# Left unescaped by encodeURIComponent in addition to ASCII alphanumerics.
_COMPONENT_SAFE = "-_.!~*'()"


def encode_component(value: str) -> str:
    """Percent-encode a cookie name or value component."""
    return quote(value, safe=_COMPONENT_SAFE)


def safe_decode(value: str) -> str:
    """Reverse percent-encoding, returning *value* unchanged if malformed.

    Cookie values are not always valid percent-encoding (a bare ``%``,
    a truncated escape, bytes that are not UTF-8, a lone surrogate).
    None of those may crash a reader. ``+`` is left as-is.
    """
    if _BAD_ESCAPE.search(value):
        return value
    try:
        return unquote_to_bytes(value).decode("utf-8")
    except UnicodeError:
        return value


def cookie_pattern(name: str, *, ignore_case: bool = True) -> re.Pattern[str]:
    """Build a pattern locating ``name=value`` inside a raw cookie string.

    The name must sit at the start of the string or after a ``;``
    separator and be followed directly by ``=``, so ``foo`` never
    matches ``foobar=1``. Group 1 captures the value up to the next
    ``;`` or the end of the string.

    Name matching is case-insensitive unless *ignore_case* is False.
    """
    escaped = _NAME_SPECIALS.sub(r"\\\1", name)
    flags = re.IGNORECASE if ignore_case else 0
    return re.compile(f"(?:^{escaped}|;\\s*{escaped})=(.*?)(?:;|$)", flags)


def has_cookie(name: str, raw: str, *, ignore_case: bool = True) -> bool:
    """True if a cookie called *name* is present in *raw*."""
    pattern = cookie_pattern(encode_component(name), ignore_case=ignore_case)
    return pattern.search(raw) is not None


def get_cookie(name: str, raw: str, *, ignore_case: bool = True) -> str:
    """Return the decoded value of *name* in *raw*, or ``""`` if absent."""
    if not has_cookie(name, raw, ignore_case=ignore_case):
        return ""
    pattern = cookie_pattern(encode_component(name), ignore_case=ignore_case)
    match = pattern.search(raw)
    if match is None or not match.group(1):
        return ""
    return safe_decode(match.group(1))


def parse_cookies(raw: str) -> dict[str, str]:
    """Parse a raw cookie string into a name-value dict.

    Returns an empty dict for empty input. Each ``;``-separated fragment
    is split on its first ``=``; one leading space is stripped from the
    name (``"; "``-joined cookies). Later duplicates win.
    """
    if not raw:
        return {}
    cookies: dict[str, str] = {}
    for fragment in raw.split(";"):
        if not fragment.strip():
            continue
        name, _, value = fragment.partition("=")
        if name.startswith(" "):
            name = name[1:]
        cookies[safe_decode(name)] = safe_decode(value)
    return cookies
