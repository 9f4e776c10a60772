"""Tests for crumb.__init__ — lazy import registry covers all public names."""

import pytest

import crumb


@pytest.mark.parametrize("name", crumb.__all__)
def test_all_names_resolve(name: str) -> None:
    """Every name in __all__ must resolve via __getattr__ without error."""
    obj = getattr(crumb, name)
    assert obj is not None, f"crumb.{name} resolved to None"


def test_resolved_names_match_modules() -> None:
    from crumb.service import CookieService

    assert crumb.CookieService is CookieService


def test_unknown_name_raises_attribute_error() -> None:
    """Accessing an unregistered name raises AttributeError."""
    with pytest.raises(AttributeError, match="no attribute"):
        crumb.__getattr__("ThisDoesNotExist")
