"""Tests for assetly.errors: exception hierarchy."""

from assetly.errors import AssetlyError, ConfigurationError


class TestHierarchy:
    def test_configuration_error_is_assetly_error(self) -> None:
        assert issubclass(ConfigurationError, AssetlyError)

    def test_assetly_error_is_exception(self) -> None:
        assert issubclass(AssetlyError, Exception)

    def test_message(self) -> None:
        assert str(ConfigurationError("no template context")) == "no template context"
