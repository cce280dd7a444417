"""URI builders for static assets.

A builder is a callable that turns a filename (and optional query data)
into an asset URI. Builders nest: each sub-builder extends its parent's
path and query, so one root holds the environment-specific base URL and
every call site derives from it::

    from assetly import assetly

    assets = assetly("//cdn.example.com", {"v": 42})
    assets.provides("css").provides("js", "scripts")

    assets("favicon.ico")       # "//cdn.example.com/favicon.ico?v=42"
    assets.css("main.css")      # "//cdn.example.com/css/main.css?v=42"
    assets.js("app.js", "v=43") # "//cdn.example.com/scripts/app.js?v=43"

Inherited path and query are computed once, when a builder is created
or attached. Changing a parent afterwards does not reach builders that
were already attached to it.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Self

from assetly._internal.types import UNSET, QueryData, QueryValue
from assetly.paths import append_filename, compose_path, normalize_base
from assetly.query import merge_query, parse_query, serialize_query
from assetly.spec import RootSpec, looks_like_query, parse_root_spec, spec_parts

if TYPE_CHECKING:
    from assetly.config import ExposeOptions

logger = logging.getLogger("assetly")


class Builder:
    """A callable asset URI builder.

    Attributes:
        name: Name under which this builder was attached to its parent.
            ``None`` for root builders.
        base: Path segment this builder adds to its parent's path.
        query: Query data declared on this builder itself.
        path: Full path, inherited from every ancestor.
        full_query: Query data merged down from every ancestor.

    Sub-builders are reachable as attributes (``assets.css``), by item
    lookup (``assets["css"]``), or through ``extensions``.
    """

    __slots__ = ("_base", "_extensions", "_full_query", "_name", "_path", "_query")

    def __init__(
        self,
        base: str | None = None,
        query: QueryData | None = None,
        *,
        name: str | None = None,
        parent: Builder | None = None,
    ) -> None:
        self._name = name
        self._base = normalize_base(base)
        self._query = parse_query(query)
        self._extensions: dict[str, Builder] = {}
        self._path: str | None = None
        self._full_query: dict[str, QueryValue] | None = None
        self._inherit(parent)

    @classmethod
    def from_spec(cls, spec: RootSpec) -> Self:
        """Create an unattached builder from a parsed root spec."""
        base, query = spec_parts(spec)
        return cls(base, query)

    # -- Read-only state --

    @property
    def name(self) -> str | None:
        return self._name

    @property
    def base(self) -> str | None:
        return self._base

    @property
    def query(self) -> Mapping[str, QueryValue] | None:
        return None if self._query is None else MappingProxyType(self._query)

    @property
    def path(self) -> str | None:
        return self._path

    @property
    def full_query(self) -> Mapping[str, QueryValue] | None:
        return None if self._full_query is None else MappingProxyType(self._full_query)

    @property
    def extensions(self) -> Mapping[str, Builder]:
        """Attached sub-builders by name (read-only view)."""
        return MappingProxyType(self._extensions)

    # -- URI building --

    def __call__(self, filename: str | None = None, query: QueryData | None = None) -> str:
        """Build the URI for *filename* with *query* merged over the base query.

        Keys set to ``None`` in *query* are kept with an empty value;
        keys set to ``UNSET`` are left out of this URI.
        """
        uri = append_filename(self._path, filename)
        qs = serialize_query(merge_query(self._full_query, parse_query(query)))
        if qs:
            return f"{uri}?{qs}"
        return uri

    # -- Extensions --

    def provides(self, name: str, base: Any = UNSET, query: QueryData | None = None) -> Builder:
        """Attach a sub-builder under *name* and return ``self`` for chaining.

        Call shapes::

            assets.provides("css")                 # base defaults to "css"
            assets.provides("js", "scripts")       # explicit base
            assets.provides("img", None)           # no base: parent's path
            assets.provides("fonts", {"v": 2})     # query, base "fonts"
            assets.provides("vendor", "lib", "v=3")
            assets.provides("shared", other)       # mount an existing builder

        Mounting an existing builder recomputes its path and query against
        this builder. Mounting it again elsewhere recomputes them again; the
        last mount wins. A name already in use is silently replaced.
        """
        if looks_like_query(base):
            query, base = base, UNSET

        if isinstance(base, Builder):
            return self._mount(name, base)

        child = Builder(name if base is UNSET else base, query, name=name, parent=self)
        logger.debug("Attached builder %r (path=%r)", name, child._path)
        self._extensions[name] = child
        return self

    def _mount(self, name: str, child: Builder, *, relative: bool = False) -> Builder:
        child._name = name
        child._inherit(self, relative=relative)
        logger.debug("Mounted builder %r at %r (path=%r)", name, self._path, child._path)
        self._extensions[name] = child
        return self

    def _inherit(self, parent: Builder | None, *, relative: bool = False) -> None:
        """Recompute path and query from a snapshot of *parent*'s values."""
        parent_path = parent._path if parent is not None else None
        parent_query = parent._full_query if parent is not None else None
        self._path = compose_path(parent_path, self._base, relative=relative)
        self._full_query = merge_query(parent_query, self._query)

    def __getattr__(self, name: str) -> Builder:
        # Only reached when normal lookup fails, so methods and properties
        # always win over extensions with the same name.
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._extensions[name]
        except KeyError:
            msg = f"{type(self).__name__} has no sub-builder {name!r}"
            raise AttributeError(msg) from None

    def __getitem__(self, name: str) -> Builder:
        return self._extensions[name]

    def __contains__(self, name: object) -> bool:
        return name in self._extensions

    def __iter__(self) -> Iterator[str]:
        return iter(self._extensions)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r}, path={self._path!r})"


class RootBuilder(Builder):
    """A builder created by ``assetly()``. Can publish itself to an app."""

    __slots__ = ()

    def express(
        self,
        app: Any,
        options: ExposeOptions | None = None,
        *,
        property_name: str | None = None,
    ) -> None:
        """Install this builder on *app* and in its template context.

        See ``assetly.integration.expose``.
        """
        from assetly.integration import expose

        expose(app, self, options, property_name=property_name)


def _is_builder_mapping(value: Any) -> bool:
    return (
        isinstance(value, Mapping)
        and bool(value)
        and all(isinstance(sub, Builder) for sub in value.values())
    )


def _attach_spec(root: RootBuilder, name: str, sub: Any) -> None:
    # Builders declared at construction time sit under the root even when
    # their own base starts with "/"
    if isinstance(sub, Builder):
        root._mount(name, sub, relative=True)
    elif isinstance(sub, (list, tuple)):
        root.provides(name, *sub[:2])
    else:
        root.provides(name, sub)


def assetly(
    base: Any = None,
    query: Any = None,
    *,
    provides: Mapping[str, Any] | None = None,
) -> RootBuilder:
    """Create a root builder.

    Args:
        base: Base path or URL for every asset, e.g. ``"//cdn.example.com"``
            or ``"/static"``. May also be a ``(base, query)`` pair, or query
            data on its own (a mapping, or a string containing ``=``).
        query: Query data applied to every URI (mapping or querystring),
            or an ``int`` version appended to the base as a path segment.
            A mapping of names to builders is taken as ``provides``.
        provides: Sub-builders to attach at construction, as a mapping of
            name to a builder or to ``provides()`` arguments: a base string,
            query data, a ``(base, query)`` pair or ``None`` (no base).

    Returns:
        A ``RootBuilder``.
    """
    if provides is None and _is_builder_mapping(query):
        provides, query = query, None

    spec = parse_root_spec(base, query)
    root = RootBuilder.from_spec(spec)
    logger.debug("Created root builder %r from %r", root.path, spec)

    if provides:
        for name, sub in provides.items():
            _attach_spec(root, name, sub)
    return root
