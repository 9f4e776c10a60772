"""Cookie service configuration.

CookieConfig is a frozen dataclass — immutable after creation,
IDE-autocompletable, no string-key dict lookups.
"""

from dataclasses import dataclass

from crumb.http.set_cookie import SameSite


@dataclass(frozen=True, slots=True)
class CookieConfig:
    """Service configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = CookieConfig(default_same_site=SameSite.STRICT, ignore_case=False)
    """

    # SameSite emitted when a write leaves it unset
    default_same_site: SameSite = SameSite.LAX

    # Case-insensitive name lookup for check()/get(). RFC 6265 names are
    # case-sensitive; set False for strict matching.
    ignore_case: bool = True

    # Logger receiving the secure-flag coercion warning when no sink is injected
    logger_name: str = "crumb.cookies"

    def __post_init__(self) -> None:
        if not isinstance(self.default_same_site, SameSite):
            object.__setattr__(self, "default_same_site", SameSite.coerce(self.default_same_site))
