"""Assetly exception hierarchy.

Building URIs never raises on absent or empty input; these types cover
the setup-time mistakes that cannot be degraded gracefully.
"""


class AssetlyError(Exception):
    """Base for all assetly-specific errors."""


class ConfigurationError(AssetlyError):
    """Raised when a builder cannot be published to an application.

    Typically raised by ``expose()`` at startup, when the target app has
    no template context to install the builder into.
    """
