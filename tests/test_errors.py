"""Tests for crumb.errors — exception hierarchy."""

from crumb.errors import ConfigurationError, CrumbError, InvalidCookieAttribute


class TestHierarchy:
    def test_configuration_error_is_crumb_error(self) -> None:
        assert issubclass(ConfigurationError, CrumbError)

    def test_invalid_attribute_is_crumb_error(self) -> None:
        assert issubclass(InvalidCookieAttribute, CrumbError)

    def test_invalid_attribute_is_value_error(self) -> None:
        """Callers validating input can catch plain ValueError."""
        assert issubclass(InvalidCookieAttribute, ValueError)

    def test_crumb_error_is_exception(self) -> None:
        assert issubclass(CrumbError, Exception)
