"""Asset configuration.

AssetsConfig is a frozen dataclass: the one place an application states
where its assets live, switched per environment without touching call
sites::

    if settings.production:
        config = AssetsConfig(base="//cdn.example.com", version=42)
    else:
        config = AssetsConfig(base="/static")

    assets = config.build()
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from assetly._internal.types import QueryData
from assetly.errors import ConfigurationError

if TYPE_CHECKING:
    from assetly.builder import RootBuilder


@dataclass(frozen=True, slots=True)
class AssetsConfig:
    """Root builder configuration. Immutable after creation.

    ``version`` is appended to ``base`` as an extra path segment
    (``"/static"`` + ``3`` -> ``"/static/3"``). ``provides`` maps
    sub-builder names to a builder or a builder spec.
    """

    base: str | None = None
    query: QueryData | None = None
    version: int | None = None
    provides: Mapping[str, Any] = field(default_factory=dict)

    def build(self) -> RootBuilder:
        """Create the root builder described by this config."""
        from assetly.builder import assetly

        base = self.base
        if self.version is not None:
            base = f"{base or ''}/{self.version}"
        return assetly(base, self.query, provides=self.provides or None)


@dataclass(frozen=True, slots=True)
class ExposeOptions:
    """Options for publishing a builder to a web application."""

    # Attribute name on the app and key in its template context
    property_name: str = "assets"

    def __post_init__(self) -> None:
        if not self.property_name:
            msg = "ExposeOptions.property_name must be a non-empty string."
            raise ConfigurationError(msg)
